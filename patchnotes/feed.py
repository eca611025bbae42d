"""
Feed document construction and rendering (RSS 2.0 and JSON Feed 1).
"""
import html
import json
import logging
from datetime import date
from typing import Any, Dict, Iterable, Type

from django.utils.feedgenerator import Rss201rev2Feed, SyndicationFeed

from patchnotes.models import NormalizedEntry

logger = logging.getLogger(__name__)

FEED_TITLE = 'Minecraft Patch Notes'
FEED_DESCRIPTION = 'Patch notes for Minecraft: Java Edition'
FEED_LINK = 'https://www.minecraft.net/en-us/articles'
FEED_LANGUAGE = 'en'
FEED_FAVICON = 'https://www.minecraft.net/etc.clientlibs/minecraft/clientlibs/main/resources/favicon.ico'
ENTRY_LINK_TEMPLATE = 'https://quiltmc.org/en/mc-patchnotes/#{version}'


class RssFeed(Rss201rev2Feed):
    content_type = 'application/rss+xml'


class JsonFeed(SyndicationFeed):
    """JSON Feed version 1 (https://jsonfeed.org/version/1)."""
    content_type = 'application/json'
    version = 'https://jsonfeed.org/version/1'

    def as_dict(self) -> Dict[str, Any]:
        document = {
            'version': self.version,
            'title': self.feed['title'],
            'home_page_url': self.feed['link'],
            'feed_url': self.feed['feed_url'],
            'description': self.feed['description'],
            'favicon': self.feed.get('favicon'),
            'items': [self.item_as_dict(item) for item in self.items],
        }
        return {key: value for key, value in document.items() if value is not None}

    def item_as_dict(self, item: Dict[str, Any]) -> Dict[str, Any]:
        entry = {
            'id': item['unique_id'],
            'url': item['link'],
            'title': item['title'],
            'content_html': item['description'],
            'image': item.get('image'),
        }
        if item['pubdate'] is not None:
            entry['date_published'] = item['pubdate'].isoformat()
        if item['categories']:
            entry['tags'] = list(item['categories'])
        return {key: value for key, value in entry.items() if value is not None}

    def write(self, outfile, encoding):
        json.dump(self.as_dict(), outfile, ensure_ascii=False)


def copyright_notice() -> str:
    return f"All rights reserved 2009-{date.today().year}, Mojang"


def create_feed(feed_class: Type[SyndicationFeed], feed_id: str, feed_url: str) -> SyndicationFeed:
    """
    Create an empty feed document carrying the fixed channel metadata.

    Args:
        feed_class: RssFeed or JsonFeed
        feed_id: Identifier of this feed, derived from the request host
        feed_url: URL the feed was requested from
    """
    return feed_class(
        title=FEED_TITLE,
        link=FEED_LINK,
        description=FEED_DESCRIPTION,
        language=FEED_LANGUAGE,
        feed_url=feed_url,
        feed_guid=feed_id,
        feed_copyright=copyright_notice(),
        favicon=FEED_FAVICON,
    )


def entry_content(entry: NormalizedEntry) -> str:
    """Article image followed by the untouched article body."""
    image = f'<img src="{html.escape(entry.image.url)}" alt="{html.escape(entry.title)}">'
    return image + entry.body


def add_entry(feed: SyndicationFeed, entry: NormalizedEntry):
    feed.add_item(
        title=entry.title,
        link=ENTRY_LINK_TEMPLATE.format(version=entry.version),
        description=entry_content(entry),
        pubdate=entry.published,
        unique_id=entry.id,
        unique_id_is_permalink=False,
        categories=[entry.type] if entry.type else (),
        image=entry.image.url,
    )


def build_feed(
    feed_class: Type[SyndicationFeed],
    feed_id: str,
    feed_url: str,
    entries: Iterable[NormalizedEntry],
) -> SyndicationFeed:
    feed = create_feed(feed_class, feed_id, feed_url)
    for entry in entries:
        add_entry(feed, entry)
    logger.debug(f"Built {feed_class.__name__} with {feed.num_items()} items")
    return feed


def render(feed: SyndicationFeed) -> str:
    return feed.writeString('utf-8')
