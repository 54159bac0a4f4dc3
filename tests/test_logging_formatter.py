import logging

from logging_formatter import BlogLogFormatter


def make_record(msg, args=None):
    return logging.LogRecord("blog", logging.INFO, __file__, 1, msg, args, None)


def test_single_line():
    formatter = BlogLogFormatter(fmt="%(levelname)s %(name)s: %(message)s")
    assert formatter.format(make_record("built %d posts", (3,))) == "INFO blog: built 3 posts"


def test_multi_line_message_repeats_header():
    formatter = BlogLogFormatter(fmt="%(levelname)s %(message)s")
    assert formatter.format(make_record("first\nsecond")) == "INFO first\nINFO second"
