# -*- coding: utf-8 -*-

"""storage.py:
Thin file system layer used by the post store and the feed exporter.
Anything exposing the same methods as LocalStorage can be used instead, e.g. an in-memory fake in tests.
"""

# std libs
import os
import re
import logging
from typing import Optional

lg = logging.getLogger(__name__)

FILE_URL_SCHEME = "file://"

# characters a URL may carry unescaped, plus '%' which must start a valid escape
_URL_CHARS = re.compile(r"^[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*$")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def file_url(path: str) -> Optional[str]:
    """
    Builds a file:// URL for the given path with spaces escaped.
    Returns None when the result would not be a valid URL.
    """
    url = FILE_URL_SCHEME + path.replace(" ", "%20")
    if not _URL_CHARS.match(url) or _BAD_ESCAPE.search(url):
        lg.debug(f"Path {path!r} is not a valid file reference")
        return None
    return url


class LocalStorage:
    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def make_dirs(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)

    def read_bytes(self, path: str) -> bytes:
        with open(path, 'rb') as f:
            return f.read()

    def write_bytes(self, path: str, data: bytes) -> None:
        with open(path, 'wb') as f:
            f.write(data)

    def list_files(self, path: str) -> list[str]:
        """Names of the plain files directly inside path, sorted. Raises OSError if path cannot be listed."""
        if not os.path.isdir(path):
            raise NotADirectoryError(path)
        return sorted(name for name in os.listdir(path)
                      if os.path.isfile(os.path.join(path, name)))
