# -*- coding: utf-8 -*-

"""blog_builder.py:
Rebuilds the published blog: every post page, then the JSON Feed.
Run as a script (or the blog-rebuild command) with a JSON config file.
"""

__author__ = "Zhi Zi"
__email__ = "x@zzi.io"
__version__ = "20240612"

# std libs
import sys
import logging
import argparse
from typing import Optional
# this package
from blog_config import BlogConfiguration, load_config_from_file
from data_model import Post
from date_formats import DateFormatService
from feed_export import FeedExporter
from logging_formatter import configure_logging
from post_query import PostQuery
from post_store import PostStore
import templating
from templating import MarkdownConverter, markdown_to_html

lg = logging.getLogger(__name__)


class BlogBuilder:
    def __init__(self,
                 config: BlogConfiguration,
                 storage=None,
                 converter: MarkdownConverter = markdown_to_html) -> None:
        self.config = config
        self.date_formats = DateFormatService(config.time_zone)
        self.store = PostStore(config, storage=storage, date_formats=self.date_formats, converter=converter)
        self.query = PostQuery(self.store)
        self.exporter = FeedExporter(config, self.query)

    def publish(self, post: Post) -> None:
        """Stores a post and writes its page."""
        self.store.write_json(post)
        self.store.write_html(post)

    def rebuild_all(self) -> None:
        """
        Rewrites the page of every post, newest first, then the JSON Feed if a feed path is configured.
        The first failure stops the rebuild; pages already written stay on disk and the feed is not written.
        """
        lg.warning("Start to build all posts...")
        posts = self.query.sorted_posts()
        for post in posts:
            lg.info(f"Building page for post {post.id}")
            self.store.write_html(post)
        lg.warning(f"All {len(posts)} posts built.")

        if self.config.json_feed_file_path is not None:
            self.exporter.export(self.config.json_feed_file_path)
        else:
            lg.info("No JSON Feed path configured, skipping feed")

    def recent_posts_html(self, limit: Optional[int] = None) -> str:
        posts = self.query.filtered_posts(limit=limit)
        return templating.container_html(posts, self.store.published_url, self.store.formatter, self.store.converter)

    def archive_html(self) -> str:
        return templating.archive_html(self.query.sorted_posts(), self.store.published_url, self.store.formatter)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Rebuild blog post pages and the JSON Feed.")
    parser.add_argument("--config", default="config.json", help="Path to config file.")
    parser.add_argument("--verbose", action="store_true", help="Log debug messages.")
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    lg.info(f"Loading blog config from {args.config}")
    config = load_config_from_file(args.config)
    lg.info("Config loaded.")

    BlogBuilder(config).rebuild_all()
    return 0


if __name__ == "__main__":
    sys.exit(main())
