# receipt_processor/validation/formats.py
"""
Field-level format checks for receipt values.

Every predicate takes a single value and answers True/False; malformed input
(including None and non-strings) is simply False, never an exception.
Character classes are ASCII-only, "whitespace" is tab, newline, form feed,
carriage return and space (no vertical tab), and matching is always against
the whole string.
"""
import re
from datetime import datetime

DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_RE = re.compile(r"[0-9]{2}:[0-9]{2}")
PRICE_RE = re.compile(r"\d+\.\d{2}", re.ASCII)
RETAILER_RE = re.compile(r"[\w\t\n\f\r \-&]+", re.ASCII)
DESCRIPTION_RE = re.compile(r"[\w\t\n\f\r \-]+", re.ASCII)

DATE_LAYOUT = "%Y-%m-%d"
TIME_LAYOUT = "%H:%M"

def _fullmatch(pattern: re.Pattern, value) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None

def _parses(value: str, layout: str) -> bool:
    try:
        datetime.strptime(value, layout)
    except ValueError:
        return False
    return True

def is_date_format(value) -> bool:
    # strptime alone accepts "2022-1-1", so the widths are pinned first
    return _fullmatch(DATE_RE, value) and _parses(value, DATE_LAYOUT)

def is_time_format(value) -> bool:
    return _fullmatch(TIME_RE, value) and _parses(value, TIME_LAYOUT)

def is_price_format(value) -> bool:
    return _fullmatch(PRICE_RE, value)

def is_retailer_format(value) -> bool:
    return _fullmatch(RETAILER_RE, value)

def is_description_format(value) -> bool:
    return _fullmatch(DESCRIPTION_RE, value)
