"""Strict parsers for the string fields of a receipt."""

import math
import re
from datetime import date, datetime, time

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

_DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_TIME_RE = re.compile(r"\d{2}:\d{2}", re.ASCII)


def parse_decimal(text: str) -> float:
    """
    Parse a plain decimal string ("35.35", "-1", "1e2") to a finite float.
    Surrounding whitespace, digit separators, inf and nan are rejected.
    Raises ValueError if invalid.
    """
    if not _DECIMAL_RE.fullmatch(text):
        raise ValueError(f"not a decimal number: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"decimal out of range: {text!r}")
    return value


def parse_date(text: str) -> date:
    """Parse an exact YYYY-MM-DD calendar date. Raises ValueError if invalid."""
    if not _DATE_RE.fullmatch(text):
        raise ValueError(f"date does not match YYYY-MM-DD: {text!r}")
    return datetime.strptime(text, DATE_FORMAT).date()


def parse_time(text: str) -> time:
    """Parse an exact 24-hour HH:MM wall-clock time. Raises ValueError if invalid."""
    if not _TIME_RE.fullmatch(text):
        raise ValueError(f"time does not match HH:MM: {text!r}")
    return datetime.strptime(text, TIME_FORMAT).time()
