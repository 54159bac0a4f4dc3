# -*- coding: utf-8 -*-

"""logging_formatter.py:
Log formatting for the blog tools.
"""

# std libs
import sys
import logging

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"


class BlogLogFormatter(logging.Formatter):
    """
    Repeats the record header on every line of a multi-line message,
    so long outputs stay readable when mixed with other log lines.
    """

    def __init__(self, fmt: str = LOG_FORMAT, datefmt: str = "%Y-%m-%d %H:%M:%S") -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if "\n" not in message:
            return super().format(record)
        lines = []
        for line in message.splitlines():
            line_record = logging.makeLogRecord(record.__dict__)
            line_record.msg = line
            line_record.args = None
            # traceback only once, after the last line
            line_record.exc_info = None
            line_record.exc_text = None
            lines.append(super().format(line_record))
        if record.exc_info:
            lines.append(self.formatException(record.exc_info))
        return "\n".join(lines)


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Sends all logs to stdout through BlogLogFormatter."""
    lg = logging.getLogger()
    lg.setLevel(level)
    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(level)
    ch.setFormatter(BlogLogFormatter())
    lg.addHandler(ch)
    return lg
