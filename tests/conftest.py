from datetime import datetime, timedelta, timezone

import pytest

from blog_config import BlogConfiguration
from blog_builder import BlogBuilder
from data_model import Post

# 2017-06-04 15:05:09 in New York
PUBLISHED = datetime(2017, 6, 4, 19, 5, 9, tzinfo=timezone.utc)


def make_post(title="Hello", hours_ago=0, **kwargs):
    return Post(title=title, published=PUBLISHED - timedelta(hours=hours_ago), **kwargs)


@pytest.fixture
def webroot(tmp_path):
    return str(tmp_path) + "/"


@pytest.fixture
def config(webroot):
    return BlogConfiguration(
        title="T",
        webroot_directory=webroot,
        published_post_url_directory="https://example.com/posts/",
        blog_post_template="<h1>{POST_TITLE}</h1>{POST_CONTENT}",
    )


@pytest.fixture
def builder(config):
    return BlogBuilder(config)


@pytest.fixture
def store(builder):
    return builder.store
