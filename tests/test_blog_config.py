import json

from blog_config import BlogConfiguration, dump_config_to_file, load_config_from_file
from data_model import Author


def test_directories_from_webroot_only():
    config = BlogConfiguration(title="T", webroot_directory="/srv/www/")
    assert config.serialized_post_storage_directory() == "/srv/www/posts/"
    assert config.published_post_storage_directory() == "/srv/www//posts/"


def test_post_directory_takes_precedence():
    config = BlogConfiguration(title="T", webroot_directory="/srv/www/", post_directory="/data/posts/")
    assert config.serialized_post_storage_directory() == "/data/posts/"
    assert config.published_post_storage_directory() == "/srv/www//posts/"


def test_post_directory_without_webroot():
    config = BlogConfiguration(title="T", post_directory="/data/posts/")
    assert config.serialized_post_storage_directory() == "/data/posts/"
    assert config.published_post_storage_directory() is None


def test_no_directories():
    config = BlogConfiguration(title="T")
    assert config.serialized_post_storage_directory() is None
    assert config.published_post_storage_directory() is None
    assert config.time_zone == "America/New_York"


def test_load_and_dump(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "title": "My Blog",
        "author": {"name": "Ann", "url": "https://ann.example"},
        "webroot_directory": "/srv/www/",
        "time_zone": "UTC",
    }))
    config = load_config_from_file(str(path))
    assert config.author == Author(name="Ann", contact_url="https://ann.example")
    assert config.time_zone == "UTC"

    out = tmp_path / "out.json"
    dump_config_to_file(config, str(out))
    dumped = json.loads(out.read_text())
    assert dumped["author"] == {"name": "Ann", "url": "https://ann.example"}
    assert "description" not in dumped
    assert load_config_from_file(str(out)) == config


def test_post_template_sources(tmp_path):
    template_file = tmp_path / "post.html"
    template_file.write_text("<h1>{POST_TITLE}</h1>")

    assert BlogConfiguration(title="T").post_template() == ""
    from_file = BlogConfiguration(title="T", blog_post_template_file=str(template_file))
    assert from_file.post_template() == "<h1>{POST_TITLE}</h1>"
    inline = BlogConfiguration(title="T", blog_post_template="x", blog_post_template_file=str(template_file))
    assert inline.post_template() == "x"
