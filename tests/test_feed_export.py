import json

import pytest

from blog_builder import BlogBuilder
from blog_config import BlogConfiguration
from blog_errors import InvalidURLError, MissingDirectoryError
from data_model import Author
from conftest import make_post


def test_export_three_posts(builder, tmp_path):
    for i in range(3):
        builder.store.write_json(make_post(f"p{i}", hours_ago=i))

    path = str(tmp_path / "feed.json")
    builder.exporter.export(path)

    with open(path) as f:
        feed = json.load(f)
    assert feed["version"] == "https://jsonfeed.org/version/1"
    assert feed["title"] == "T"
    assert len(feed["items"]) == 3
    assert [item["title"] for item in feed["items"]] == ["p0", "p1", "p2"]
    assert feed["items"][0]["date_published"] == "2017-06-04T15:05:09-04:00"


def test_export_blog_metadata(tmp_path, webroot):
    config = BlogConfiguration(
        title="My Blog",
        author=Author(name="Ann"),
        description="Notes",
        icon_url="https://example.com/icon.png",
        favicon_url="https://example.com/favicon.png",
        home_url="https://example.com/",
        feed_url="https://example.com/feed.json",
        webroot_directory=webroot,
    )
    builder = BlogBuilder(config)
    builder.store.write_json(make_post())
    path = str(tmp_path / "feed.json")
    builder.exporter.export(path)

    with open(path) as f:
        feed = json.load(f)
    assert feed["author"] == {"name": "Ann"}
    assert feed["home_page_url"] == "https://example.com/"
    assert feed["feed_url"] == "https://example.com/feed.json"
    assert feed["description"] == "Notes"
    assert feed["icon"] == "https://example.com/icon.png"
    assert feed["favicon"] == "https://example.com/favicon.png"


def test_export_omits_unset_metadata(tmp_path, webroot):
    builder = BlogBuilder(BlogConfiguration(title="T", author=Author(), webroot_directory=webroot))
    (tmp_path / "posts").mkdir()
    path = str(tmp_path / "feed.json")
    builder.exporter.export(path)

    with open(path) as f:
        feed = json.load(f)
    assert feed == {"version": "https://jsonfeed.org/version/1", "title": "T", "items": []}


def test_export_invalid_path(builder, tmp_path):
    with pytest.raises(InvalidURLError):
        builder.exporter.export(str(tmp_path / "feed<1>.json"))


def test_export_propagates_store_errors(tmp_path):
    builder = BlogBuilder(BlogConfiguration(title="T"))
    with pytest.raises(MissingDirectoryError):
        builder.exporter.export(str(tmp_path / "feed.json"))
