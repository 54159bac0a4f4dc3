# -*- coding: utf-8 -*-

"""date_formats.py:
Date formatting used for record file names, displayed dates and feed timestamps.
Formatters are immutable once built and are memoized per time zone by DateFormatService.
"""

# std libs
import logging
from datetime import datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

lg = logging.getLogger(__name__)

DEFAULT_TIME_ZONE = "America/New_York"


class ZoneFormatter:
    """The three date formats of the blog, bound to one time zone."""

    def __init__(self, time_zone: str = DEFAULT_TIME_ZONE) -> None:
        self.time_zone = time_zone
        self.zone = ZoneInfo(time_zone)

    def localize(self, value: datetime) -> datetime:
        # naive datetimes are taken as wall time in this zone
        if value.tzinfo is None:
            return value.replace(tzinfo=self.zone)
        return value.astimezone(self.zone)

    def filename(self, value: datetime) -> str:
        """
        File name safe timestamp, yyyy-M-d-k-mm-ss.
        The hour runs 1-24, so midnight is written as 24.
        """
        d = self.localize(value)
        hour = d.hour or 24
        return f"{d.year}-{d.month}-{d.day}-{hour}-{d.minute:02d}-{d.second:02d}"

    def display(self, value: datetime) -> str:
        """Short date and time for humans, e.g. 6/4/17, 3:05 PM"""
        d = self.localize(value)
        hour = d.hour % 12 or 12
        meridiem = "AM" if d.hour < 12 else "PM"
        return f"{d.month}/{d.day}/{d.year % 100:02d}, {hour}:{d.minute:02d} {meridiem}"

    def feed(self, value: datetime) -> str:
        """RFC 3339 timestamp as used by JSON Feed, yyyy-MM-dd'T'HH:mm:ssZZZZZ"""
        d = self.localize(value)
        offset = d.utcoffset() or timedelta(0)
        if offset == timedelta(0):
            suffix = "Z"
        else:
            sign = "+" if offset > timedelta(0) else "-"
            minutes = abs(int(offset.total_seconds())) // 60
            suffix = f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"
        return d.strftime("%Y-%m-%dT%H:%M:%S") + suffix

    def parse_feed(self, value: str) -> Optional[datetime]:
        """Parse a feed timestamp, returns None if the string is not one."""
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            lg.debug(f"Cannot parse feed timestamp {value!r}")
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=self.zone)
        return parsed


class DateFormatService:
    """Hands out one ZoneFormatter per time zone, building each on first use."""

    def __init__(self, default_time_zone: str = DEFAULT_TIME_ZONE) -> None:
        self.default_time_zone = default_time_zone
        self._formatters: dict[str, ZoneFormatter] = {}

    def formatter(self, time_zone: Optional[str] = None) -> ZoneFormatter:
        name = time_zone or self.default_time_zone
        formatter = self._formatters.get(name)
        if formatter is None:
            lg.debug(f"Building date formatters for time zone {name}")
            formatter = ZoneFormatter(name)
            self._formatters[name] = formatter
        return formatter
