import json
import os

import pytest

from blog_config import BlogConfiguration
from blog_errors import FileReadError, MissingDirectoryError, URLGenerationError
from post_store import PostStore
from conftest import make_post


def test_write_json(store, webroot):
    post = make_post("Hello")
    store.write_json(post)

    path = webroot + "posts/Hello-2017-6-4-15-05-09.json"
    assert os.path.exists(path)
    with open(path) as f:
        data = json.load(f)
    assert data["title"] == "Hello"
    assert data["id"] == post.id
    assert data["date_published"] == "2017-06-04T15:05:09-04:00"
    assert data["url"] == webroot + "/posts/2017/6/4/Hello.html"
    assert post.url == data["url"]


def test_write_json_keeps_existing_url(store, webroot):
    post = make_post("Hello", url="https://example.com/hello")
    store.write_json(post)
    assert post.url == "https://example.com/hello"


def test_write_json_without_directory():
    store = PostStore(BlogConfiguration(title="T"))
    with pytest.raises(MissingDirectoryError):
        store.write_json(make_post())


def test_write_json_rejects_invalid_path(store):
    with pytest.raises(URLGenerationError):
        store.write_json(make_post("Bad <title>"))


def test_published_link_and_url(store, webroot):
    post = make_post("Hello World")
    assert store.published_link(post) == webroot + "/posts/2017/6/4/Hello%20World.html"
    assert store.published_url(post) == "https://example.com/posts/2017/6/4/Hello%20World.html"


def test_published_link_without_webroot():
    store = PostStore(BlogConfiguration(title="T", post_directory="/data/"))
    post = make_post()
    assert store.published_link(post) is None
    assert store.published_url(post) is None


def test_write_html(store, webroot):
    post = make_post("Hello World", body="*hi*")
    store.write_html(post)

    path = webroot + "posts/2017/6/4/Hello%20World.html"
    with open(path) as f:
        assert f.read() == "<h1>Hello World</h1><p><em>hi</em></p>"


def test_write_html_untitled_post(store, webroot):
    store.write_html(make_post(None))
    assert os.listdir(webroot + "posts/2017/6/4/") == ["6%2F4%2F17%2C%203%3A05%20PM.html"]


def test_write_html_needs_webroot(tmp_path):
    store = PostStore(BlogConfiguration(title="T", post_directory=str(tmp_path) + "/"))
    with pytest.raises(MissingDirectoryError):
        store.write_html(make_post())


def test_list_posts_round_trip(store):
    first = make_post("First", body="one")
    second = make_post("Second", hours_ago=1, body="<p>two</p>", is_html=True, tags=["x"])
    store.write_json(first)
    store.write_json(second)

    posts = store.list_posts()
    assert [p.title for p in posts] == ["First", "Second"]
    assert posts[0] == first
    assert posts[1] == second


def test_list_posts_skips_unparsable_files(store, webroot):
    store.write_json(make_post("Good"))
    posts_dir = webroot + "posts/"
    with open(posts_dir + "broken.json", "w") as f:
        f.write("{not json")
    with open(posts_dir + "array.json", "w") as f:
        f.write("[1, 2]")
    with open(posts_dir + "typed.json", "w") as f:
        f.write('{"title": 5}')
    with open(posts_dir + "notes.txt", "w") as f:
        f.write('{"title": "not a record"}')

    assert [p.title for p in store.list_posts()] == ["Good"]


def test_list_posts_without_directory():
    with pytest.raises(MissingDirectoryError):
        PostStore(BlogConfiguration(title="T")).list_posts()


def test_list_posts_missing_directory(tmp_path):
    store = PostStore(BlogConfiguration(title="T", post_directory=str(tmp_path / "nope") + "/"))
    with pytest.raises(FileReadError):
        store.list_posts()
