"""
Turns patch notes index entries into normalized, feed-ready entries.
"""
import logging
from typing import Any, Dict, List

from patchnotes.config import MAX_ENTRIES
from patchnotes.context import FeedContext
from patchnotes.manifest import ensure_manifest
from patchnotes.models import ArticleContent, Image, NormalizedEntry, RawPatchNote, VersionRecord

logger = logging.getLogger(__name__)

INDEX_PATH = '/v2/javaPatchNotes.json'


def join_url(base: str, path: str) -> str:
    """Join base and path with exactly one slash between them."""
    return base.rstrip('/') + '/' + path.lstrip('/')


def fetch_index(context: FeedContext, limit: int = MAX_ENTRIES) -> List[RawPatchNote]:
    """Fetch javaPatchNotes.json and return its first `limit` entries in order."""
    data: Dict[str, Any] = context.get_json(context.settings.launcher_base_url + INDEX_PATH)
    entries = data['entries']
    logger.info(f"Patch notes index lists {len(entries)} entries, keeping {min(limit, len(entries))}")
    return [RawPatchNote.from_dict(entry) for entry in entries[:limit]]


def fetch_article(context: FeedContext, raw: RawPatchNote) -> ArticleContent:
    url = join_url(context.settings.launcher_base_url + '/v2', raw.content_path)
    return ArticleContent.from_dict(context.get_json(url))


def resolve(raw: RawPatchNote, context: FeedContext) -> NormalizedEntry:
    """
    Join a raw patch note with the version manifest and its article.

    A version missing from the manifest yields empty version and time
    rather than an error; a failed article fetch propagates.

    Args:
        raw: Entry from the patch notes index
        context: Request context (the manifest is fetched at most once per context)

    Returns:
        The normalized entry
    """
    manifest = ensure_manifest(context)
    record = manifest.find(raw.version)
    if record is None:
        logger.warning(f"Version {raw.version!r} of patch note {raw.id} not found in manifest")
        record = VersionRecord.missing()

    article = fetch_article(context, raw)

    return NormalizedEntry(
        title=article.title,
        time=record.time,
        version=record.id,
        type=raw.type,
        image=Image(
            title=article.image.title,
            url=join_url(context.settings.launcher_base_url, article.image.url),
        ),
        body=article.body,
        id=raw.id,
    )


def resolve_all(context: FeedContext, limit: int = MAX_ENTRIES) -> List[NormalizedEntry]:
    """Resolve the newest index entries one after another, preserving order."""
    return [resolve(raw, context) for raw in fetch_index(context, limit)]
