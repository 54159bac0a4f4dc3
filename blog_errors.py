# -*- coding: utf-8 -*-

"""blog_errors.py:
Exceptions raised by the content pipeline.
"""


class BlogError(Exception):
    """Base class for every failure raised by the pipeline."""


class MissingDirectoryError(BlogError):
    """No source or destination directory is configured."""


class URLGenerationError(BlogError):
    """A record path cannot be turned into a file reference."""


class InvalidURLError(BlogError):
    """A feed path cannot be turned into a file reference."""


class FileReadError(BlogError):
    """The record directory cannot be enumerated."""
