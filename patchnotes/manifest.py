"""
Version manifest fetching, memoized on the request context.
"""
import logging

from patchnotes.context import FeedContext
from patchnotes.models import VersionManifest

logger = logging.getLogger(__name__)

MANIFEST_PATH = '/mc/game/version_manifest_v2.json'


def manifest_url(context: FeedContext) -> str:
    return context.settings.meta_base_url + MANIFEST_PATH


def ensure_manifest(context: FeedContext) -> VersionManifest:
    """
    Return the version manifest for this request, fetching it on first use.

    Args:
        context: Request context holding the session and the memoized manifest

    Returns:
        The parsed VersionManifest
    """
    if context.manifest is None:
        data = context.get_json(manifest_url(context))
        context.manifest = VersionManifest.from_dict(data)
        logger.info(
            f"Loaded version manifest with {len(context.manifest.versions)} versions "
            f"(latest release {context.manifest.latest_release}, "
            f"latest snapshot {context.manifest.latest_snapshot})"
        )
    return context.manifest
