# -*- coding: utf-8 -*-

"""data_model.py:
Posts, authors, and the JSON Feed shaped documents they are stored as.
Post and Author are the in-memory records; PostRecord and JsonFeed are the on-disk schemas.
Absent optional values are left out of the written JSON, never written as null.
"""

# std libs
import uuid
from datetime import datetime, timezone
from typing import Any, Optional
# third party libs
from pydantic import BaseModel, ConfigDict, Field
# this package
from date_formats import ZoneFormatter

JSON_FEED_VERSION = "https://jsonfeed.org/version/1"
RECORD_SUFFIX = ".json"


def _new_post_id() -> str:
    return str(uuid.uuid4()).upper()


def _now() -> datetime:
    return datetime.now(tz=timezone.utc).replace(microsecond=0)


class Author(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    # site owned by the author, a micro blog account, or a mailto link
    contact_url: Optional[str] = Field(default=None, alias="url")
    avatar_url: Optional[str] = Field(default=None, alias="avatar")

    def is_empty(self) -> bool:
        return self.name is None and self.contact_url is None and self.avatar_url is None

    def to_json(self) -> Optional[dict[str, str]]:
        """
        JSON Feed only accepts an author with at least one property,
        so an author with nothing set serializes to None.
        """
        if self.is_empty():
            return None
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, data: Optional[dict[str, Any]]) -> Optional["Author"]:
        if data is None:
            return None
        return cls.model_validate(data)


class PostRecord(BaseModel):
    """A post exactly as it is written to a record file or a feed item."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    url: Optional[str] = None
    title: Optional[str] = None
    author: Optional[Author] = None
    date_published: Optional[str] = None
    date_modified: Optional[str] = None
    content_html: Optional[str] = None
    content_text: Optional[str] = None
    external_url: Optional[str] = None
    external_url_text: Optional[str] = Field(default=None, alias="_external_url_text")
    summary: Optional[str] = None
    tags: Optional[list[str]] = None
    image: Optional[str] = None
    banner_image: Optional[str] = None

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    def dump(self) -> bytes:
        return self.model_dump_json(indent=2, by_alias=True, exclude_none=True).encode('utf-8')


class JsonFeed(BaseModel):
    version: str = JSON_FEED_VERSION
    title: str
    author: Optional[Author] = None
    home_page_url: Optional[str] = None
    feed_url: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    favicon: Optional[str] = None
    items: list[PostRecord] = []

    def dump(self) -> bytes:
        return self.model_dump_json(indent=2, by_alias=True, exclude_none=True).encode('utf-8')


class Post(BaseModel):
    """A single blog post. The body is Markdown unless is_html is set."""

    id: str = Field(default_factory=_new_post_id, min_length=1)
    # filled in by the store when the post is written, if not given
    url: Optional[str] = None
    title: Optional[str] = None
    # may differ from the blog author
    author: Optional[Author] = None
    published: datetime = Field(default_factory=_now)
    modified: Optional[datetime] = None
    body: Optional[str] = None
    is_html: bool = False
    external_url: Optional[str] = None
    external_url_text: Optional[str] = None
    summary: Optional[str] = None
    tags: Optional[list[str]] = None
    image: Optional[str] = None
    banner_image: Optional[str] = None

    def filename(self, formatter: Optional[ZoneFormatter] = None) -> str:
        """<title>-<timestamp>.json, or <timestamp>.json for untitled posts"""
        formatter = formatter or ZoneFormatter()
        name = formatter.filename(self.published) + RECORD_SUFFIX
        if self.title is not None:
            name = self.title + "-" + name
        return name

    def display_title(self, formatter: Optional[ZoneFormatter] = None) -> str:
        if self.title is not None:
            return self.title
        formatter = formatter or ZoneFormatter()
        return formatter.display(self.published)

    def to_record(self, formatter: Optional[ZoneFormatter] = None) -> PostRecord:
        formatter = formatter or ZoneFormatter()
        data: dict[str, Any] = {
            "id": self.id,
            "url": self.url,
            "title": self.title,
            "author": self.author.to_json() if self.author is not None else None,
            "date_published": formatter.feed(self.published),
            "date_modified": formatter.feed(self.modified) if self.modified is not None else None,
            "external_url": self.external_url,
            "_external_url_text": self.external_url_text,
            "summary": self.summary,
            "tags": self.tags,
            "image": self.image,
            "banner_image": self.banner_image,
        }
        if self.body is not None:
            data["content_html" if self.is_html else "content_text"] = self.body
        return PostRecord.model_validate(data)

    def to_json(self, formatter: Optional[ZoneFormatter] = None) -> dict[str, Any]:
        return self.to_record(formatter).to_json()

    @classmethod
    def from_record(cls, record: PostRecord, formatter: Optional[ZoneFormatter] = None) -> "Post":
        formatter = formatter or ZoneFormatter()
        published = None
        if record.date_published is not None:
            published = formatter.parse_feed(record.date_published)
        modified = None
        if record.date_modified is not None:
            modified = formatter.parse_feed(record.date_modified)

        if record.content_html is not None:
            body, is_html = record.content_html, True
        else:
            body, is_html = record.content_text, False

        author = record.author
        if author is not None and author.is_empty():
            author = None

        fields: dict[str, Any] = dict(
            url=record.url,
            title=record.title,
            author=author,
            modified=modified,
            body=body,
            is_html=is_html,
            external_url=record.external_url,
            external_url_text=record.external_url_text,
            summary=record.summary,
            tags=record.tags,
            image=record.image,
            banner_image=record.banner_image,
        )
        # missing id or publish date fall back to a fresh id and the current time
        if record.id:
            fields["id"] = record.id
        if published is not None:
            fields["published"] = published
        return cls(**fields)

    @classmethod
    def from_json(cls, data: dict[str, Any], formatter: Optional[ZoneFormatter] = None) -> "Post":
        return cls.from_record(PostRecord.model_validate(data), formatter)
