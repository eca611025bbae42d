"""
Request dispatch: fetch, resolve and render one feed per incoming request.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from patchnotes.config import MAX_ENTRIES
from patchnotes.context import FeedContext
from patchnotes.feed import JsonFeed, RssFeed, build_feed, render
from patchnotes.resolver import resolve_all

logger = logging.getLogger(__name__)

JSON_PATH = '/json'


@dataclass(frozen=True)
class FeedRequest:
    """The parts of an inbound HTTP request the feed depends on."""
    path: str
    host: str

    @property
    def feed_id(self) -> str:
        return f"https://{self.host}/"

    @property
    def url(self) -> str:
        return f"https://{self.host}{self.path}"

    @property
    def wants_json(self) -> bool:
        return self.path == JSON_PATH

    @classmethod
    def from_event(cls, event: Dict[str, Any], fallback_host: str) -> 'FeedRequest':
        """
        Read path and host from a Lambda proxy event (payload format 1.0 or 2.0).

        Args:
            event: Function URL or API Gateway proxy event
            fallback_host: Host used when the event names none

        Returns:
            FeedRequest for the event
        """
        path = event.get('rawPath') or event.get('path') or '/'
        request_context = event.get('requestContext') or {}
        headers = {key.lower(): value for key, value in (event.get('headers') or {}).items()}
        host = request_context.get('domainName') or headers.get('host') or fallback_host
        return cls(path=path, host=host)


@dataclass(frozen=True)
class FeedResponse:
    status_code: int
    content_type: str
    body: str

    def to_lambda(self) -> Dict[str, Any]:
        return {
            'statusCode': self.status_code,
            'headers': {'content-type': self.content_type},
            'body': self.body,
        }


def handle(request: FeedRequest, context: Optional[FeedContext] = None) -> FeedResponse:
    """
    Build the patch notes feed for one request.

    The index, the manifest and up to five articles are fetched one after
    another; any upstream failure propagates to the caller.
    """
    context = context or FeedContext()
    feed_class = JsonFeed if request.wants_json else RssFeed
    logger.info(f"Building {feed_class.__name__} for {request.url}")

    entries = resolve_all(context, MAX_ENTRIES)
    feed = build_feed(feed_class, request.feed_id, request.url, entries)

    logger.info(f"Rendered {feed.num_items()} patch notes for {request.url}")
    return FeedResponse(status_code=200, content_type=feed_class.content_type, body=render(feed))
