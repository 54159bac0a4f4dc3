# -*- coding: utf-8 -*-

"""blog_config.py:
This module defines the data model of the blog configuration.
It also provides methods to load config from config file, or dump config to a file.
"""

__author__ = "Zhi Zi"
__email__ = "x@zzi.io"
__version__ = "20240612"

# std libs
import os
import json
import logging
from typing import Optional
# third party libs
from pydantic import BaseModel
# this package
from data_model import Author
from date_formats import DEFAULT_TIME_ZONE

lg = logging.getLogger(__name__)

# meta params and defaults
CONFIG_PATH = os.path.join(os.path.dirname(__file__), './config.json')
# serialized posts live in this directory under the webroot unless post_directory is given
PUBLIC_POSTS_DIRECTORY = "posts/"


class BlogConfiguration(BaseModel):
    title: str
    # primary author of the blog, a post may name its own
    author: Optional[Author] = None
    description: Optional[str] = None
    # image for the feed shown in a timeline
    icon_url: Optional[str] = None
    # image for the feed shown in a feed list
    favicon_url: Optional[str] = None
    home_url: Optional[str] = None
    feed_url: Optional[str] = None
    # where the serialized post JSON files are stored (w/ trailing slash)
    post_directory: Optional[str] = None
    # webroot where published post pages are stored (w/ trailing slash)
    webroot_directory: Optional[str] = None
    # public location of published pages, used for links in generated HTML
    published_post_url_directory: Optional[str] = None
    # where the JSON Feed file is written, no feed is built if unset
    json_feed_file_path: Optional[str] = None
    # HTML template of an individual post page
    blog_post_template: Optional[str] = None
    # file to read the post template from when blog_post_template is unset
    blog_post_template_file: Optional[str] = None
    time_zone: str = DEFAULT_TIME_ZONE

    def serialized_post_storage_directory(self) -> Optional[str]:
        if self.post_directory is not None:
            return self.post_directory
        if self.webroot_directory is not None:
            return self.webroot_directory + PUBLIC_POSTS_DIRECTORY
        return None

    def published_post_storage_directory(self) -> Optional[str]:
        if self.webroot_directory is not None:
            return self.webroot_directory + "/" + PUBLIC_POSTS_DIRECTORY
        return None

    def post_template(self) -> str:
        """The page template, read from blog_post_template_file if no inline template is set."""
        if self.blog_post_template is not None:
            return self.blog_post_template
        if self.blog_post_template_file is not None:
            lg.info(f"Loading template file from {self.blog_post_template_file}")
            with open(self.blog_post_template_file, 'rb') as f:
                return f.read().decode('utf-8')
        return ""


def load_config_from_file(config_path: str = CONFIG_PATH) -> BlogConfiguration:
    with open(config_path, 'r') as f:
        r = json.load(f)
    return BlogConfiguration(**r)


def dump_config_to_file(config: BlogConfiguration, config_path: str = CONFIG_PATH):
    with open(config_path, 'w+') as f:
        f.write(config.model_dump_json(indent=2, by_alias=True, exclude_none=True))
