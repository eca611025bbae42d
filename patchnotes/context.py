"""
Request-scoped state shared by the fetch, resolve and render steps.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import requests

from patchnotes import __version__
from patchnotes.config import Settings, load_settings
from patchnotes.models import VersionManifest

logger = logging.getLogger(__name__)

USER_AGENT = f'MinecraftPatchNotesFeed/{__version__} (+https://quiltmc.org/en/mc-patchnotes/)'


def create_session() -> requests.Session:
    """Create an HTTP session identifying the feed to upstream hosts."""
    session = requests.Session()
    session.headers.update({
        'User-Agent': USER_AGENT,
        'Accept': 'application/json',
    })
    return session


@dataclass
class FeedContext:
    """
    State for a single feed request.

    The manifest starts out empty and is filled in by ensure_manifest() the
    first time an entry is resolved; it is never shared between requests.
    """
    settings: Settings = field(default_factory=load_settings)
    session: requests.Session = field(default_factory=create_session)
    manifest: Optional[VersionManifest] = None

    def get_json(self, url: str) -> Any:
        """GET url and decode the JSON body. HTTP and decode errors propagate."""
        logger.debug(f"Fetching {url}")
        response = self.session.get(url, timeout=self.settings.http_timeout)
        response.raise_for_status()
        return response.json()

    def close(self):
        self.session.close()
