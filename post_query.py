# -*- coding: utf-8 -*-

"""post_query.py:
Chronological ordering and filtering of the stored posts.
Every query scans the record directory again, nothing is cached.
"""

# std libs
import logging
from typing import Optional
# this package
from data_model import Post
from post_store import PostStore

lg = logging.getLogger(__name__)


def sort_posts(posts: list[Post]) -> list[Post]:
    """Most recent first. Posts published at the same moment keep their input order."""
    return sorted(posts, key=lambda post: post.published, reverse=True)


def post_allowed(post: Post,
                 max_body_length: Optional[int] = None,
                 title_only: bool = False,
                 body_only: bool = False) -> bool:
    if title_only and post.title is None:
        return False
    if body_only and post.body is None:
        return False
    if max_body_length is not None:
        # a post without a body never satisfies a length cap
        if post.body is None or len(post.body) > max_body_length:
            return False
    return True


def filter_posts(posts: list[Post],
                 skip: Optional[int] = None,
                 limit: Optional[int] = None,
                 max_body_length: Optional[int] = None,
                 title_only: bool = False,
                 body_only: bool = False) -> list[Post]:
    """
    Keeps the posts passing every requested rule, then paginates.
    skip drops that many of the oldest remaining posts, i.e. it trims the end of the
    newest-first list, and only when fewer than all posts would be dropped.
    limit then keeps at most that many posts from the front.
    """
    filtered = [post for post in posts
                if post_allowed(post, max_body_length, title_only, body_only)]
    if skip is not None and 0 < skip < len(filtered):
        filtered = filtered[:len(filtered) - skip]
    if limit is not None:
        filtered = filtered[:max(limit, 0)]
    return filtered


class PostQuery:
    def __init__(self, store: PostStore) -> None:
        self.store = store

    def sorted_posts(self) -> list[Post]:
        return sort_posts(self.store.list_posts())

    def filtered_posts(self,
                       skip: Optional[int] = None,
                       limit: Optional[int] = None,
                       max_body_length: Optional[int] = None,
                       title_only: bool = False,
                       body_only: bool = False) -> list[Post]:
        posts = filter_posts(self.sorted_posts(), skip, limit, max_body_length, title_only, body_only)
        lg.debug(f"Filter returned {len(posts)} posts")
        return posts
