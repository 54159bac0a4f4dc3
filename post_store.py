# -*- coding: utf-8 -*-

"""post_store.py:
Reading and writing posts on disk.
Each post is one JSON record file in the serialized post directory,
and is published as one HTML page under <published dir>/<year>/<month>/<day>/.
"""

__author__ = "Zhi Zi"
__email__ = "x@zzi.io"
__version__ = "20240612"

# std libs
import logging
from typing import Optional
from urllib.parse import quote
# third party libs
from pydantic import ValidationError
# this package
from blog_config import BlogConfiguration
from blog_errors import FileReadError, MissingDirectoryError, URLGenerationError
from data_model import RECORD_SUFFIX, Post, PostRecord
from date_formats import DateFormatService, ZoneFormatter
from storage import LocalStorage, file_url
from templating import MarkdownConverter, markdown_to_html, render_post_page

lg = logging.getLogger(__name__)


class PostStore:
    def __init__(self,
                 config: BlogConfiguration,
                 storage=None,
                 date_formats: Optional[DateFormatService] = None,
                 converter: MarkdownConverter = markdown_to_html) -> None:
        self.config = config
        self.storage = storage if storage is not None else LocalStorage()
        self.date_formats = date_formats or DateFormatService()
        self.converter = converter

    @property
    def formatter(self) -> ZoneFormatter:
        return self.date_formats.formatter(self.config.time_zone)

    def date_components(self, post: Post) -> list[str]:
        """Year, month and day of the publish date, as they appear in the file name timestamp."""
        return self.formatter.filename(post.published).split("-")[:3]

    def _page_path(self, directory: str, post: Post) -> str:
        title = quote(post.display_title(self.formatter), safe="")
        return directory + "/".join(self.date_components(post)) + "/" + title + ".html"

    def published_link(self, post: Post) -> Optional[str]:
        """Path of the published HTML page of the post, None if no webroot is configured."""
        directory = self.config.published_post_storage_directory()
        if directory is None:
            lg.info("No published post directory configured")
            return None
        return self._page_path(directory, post)

    def published_url(self, post: Post) -> Optional[str]:
        """Public URL of the published HTML page of the post, None if no URL directory is configured."""
        directory = self.config.published_post_url_directory
        if directory is None:
            lg.info("No published post URL directory configured")
            return None
        return self._page_path(directory, post)

    def write_json(self, post: Post) -> None:
        """
        Serializes the post into <serialized post directory><post filename>.
        Sets post.url to the published page path first if it is not set yet.
        """
        post_directory = self.config.serialized_post_storage_directory()
        if post_directory is None:
            raise MissingDirectoryError("Neither post_directory nor webroot_directory is configured")

        file_name = post_directory + post.filename(self.formatter)

        if post.url is None:
            post.url = self.published_link(post)

        if file_url(file_name) is None:
            raise URLGenerationError(f"Cannot build a file URL for {file_name}")

        if not self.storage.exists(post_directory):
            lg.info(f"Creating post directory {post_directory}")
            self.storage.make_dirs(post_directory)

        lg.info(f"Writing post record to {file_name}")
        self.storage.write_bytes(file_name, post.to_record(self.formatter).dump())

    def write_html(self, post: Post) -> None:
        """Renders the post with the configured page template and writes its published page."""
        published_directory = self.config.published_post_storage_directory()
        if self.config.serialized_post_storage_directory() is None or published_directory is None:
            raise MissingDirectoryError("A webroot_directory is needed to publish posts")

        page_directory = published_directory
        for component in self.date_components(post):
            page_directory += component + "/"

        if not self.storage.exists(page_directory):
            lg.info(f"Creating page directory {page_directory}")
            self.storage.make_dirs(page_directory)

        file_path = page_directory + quote(post.display_title(self.formatter), safe="") + ".html"
        html = render_post_page(post, self.config.post_template(), self.formatter, self.converter)
        lg.info(f"Writing templated HTML source to {file_path}")
        self.storage.write_bytes(file_path, html.encode('utf-8'))

    def read_post(self, path: str) -> Optional[Post]:
        """Loads one record file, None if it is not a valid post record."""
        try:
            record = PostRecord.model_validate_json(self.storage.read_bytes(path))
        except ValidationError as e:
            lg.warning(f"Skipping {path}, not a post record: {e.error_count()} error(s)")
            return None
        return Post.from_record(record, self.formatter)

    def list_posts(self) -> list[Post]:
        """Every post found in the serialized post directory, in directory listing order."""
        post_directory = self.config.serialized_post_storage_directory()
        if post_directory is None:
            raise MissingDirectoryError("Neither post_directory nor webroot_directory is configured")

        try:
            names = self.storage.list_files(post_directory)
        except OSError as e:
            raise FileReadError(f"Cannot enumerate {post_directory}: {e}") from e

        posts = []
        for name in names:
            if not name.endswith(RECORD_SUFFIX):
                continue
            post = self.read_post(post_directory + name)
            if post is not None:
                posts.append(post)
        lg.debug(f"Loaded {len(posts)} posts from {post_directory}")
        return posts
