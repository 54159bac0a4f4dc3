# -*- coding: utf-8 -*-

"""feed_export.py:
Builds the JSON Feed document of the blog and writes it to a single file.
The feed always holds every post, newest first.
"""

# std libs
import logging
# this package
from blog_config import BlogConfiguration
from blog_errors import InvalidURLError
from data_model import JsonFeed
from post_query import PostQuery
from storage import file_url

lg = logging.getLogger(__name__)


class FeedExporter:
    def __init__(self, config: BlogConfiguration, query: PostQuery) -> None:
        self.config = config
        self.query = query

    def build_feed(self) -> JsonFeed:
        cfg = self.config
        author = cfg.author if cfg.author is not None and not cfg.author.is_empty() else None
        formatter = self.query.store.formatter
        return JsonFeed(
            title=cfg.title,
            author=author,
            home_page_url=cfg.home_url,
            feed_url=cfg.feed_url,
            description=cfg.description,
            icon=cfg.icon_url,
            favicon=cfg.favicon_url,
            items=[post.to_record(formatter) for post in self.query.sorted_posts()],
        )

    def export(self, path: str) -> None:
        if file_url(path) is None:
            raise InvalidURLError(f"Cannot build a file URL for {path}")
        feed = self.build_feed()
        lg.info(f"Writing JSON Feed with {len(feed.items)} items to {path}")
        self.query.store.storage.write_bytes(path, feed.dump())
