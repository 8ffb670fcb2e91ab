"""Date helpers for the BSI request parameters.

The API takes plain calendar dates (``YYYY-MM-DD``) in the bank's local
time. Offsets on incoming datetimes are kept as given, never shifted to UTC,
so a date does not roll over to the previous or next day.
"""
from __future__ import annotations

import datetime as _dt
from typing import Union

from dateutil.parser import isoparse as _isoparse

__all__ = ["to_date", "format_ymd"]

DateLike = Union[str, _dt.date, _dt.datetime]


def to_date(value: DateLike) -> _dt.date:
    """Return the calendar date of *value* (ISO-8601 string, date or datetime)."""
    if isinstance(value, _dt.datetime):
        return value.date()
    if isinstance(value, _dt.date):
        return value
    if isinstance(value, str):
        return _isoparse(value.strip()).date()
    raise TypeError(f"Unsupported date value: {value!r}")


def format_ymd(value: DateLike) -> str:
    return to_date(value).strftime("%Y-%m-%d")
