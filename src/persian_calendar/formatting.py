"""
Token-substitution formatting for Persian moments.

    yyyy, yyy, y  year (e.g. 1394)          HH, H    hour [00-23]
    yy            2-digit year (e.g. 94)     kk, k    hour [01-24]
    MMM           Persian month name         hh, h    hour [01-12]
    MMI           Dari month name            KK, K    12-hour clock hour
    MM, M         month                      mm, m    minute
    rw, w         remaining / week of year   ss, s    second
    RW, W         remaining / week of month  ns       nanoseconds
    RD, D         remaining / day of year    S        milliseconds (3 digits)
    rd            remaining days of month    z        zone name
    dd, d         day of month               Z        zone offset (e.g. +03:30)
    E, e          weekday name / short name
    A, a          AM/PM name / short name

Tokens are matched longest first, so ``yyyy`` is never split into four
``y`` and literal text between tokens passes through untouched.
"""

import re
from typing import Callable, Dict

ISO_PATTERN = "yyyy-MM-ddTHH:mm:ss.nsZ"

_TO_PERSIAN_DIGITS = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")


def modify_hour(value: int, maximum: int) -> int:
    """Report hour 0 as `maximum` (12 or 24); only used when rendering."""
    return maximum if value == 0 else value


def format_zone_offset(offset_seconds: int) -> str:
    """Render a signed offset in seconds east of UTC as ``±HH:MM``."""
    sign = "-" if offset_seconds < 0 else "+"
    hours, rest = divmod(abs(offset_seconds), 3600)
    return f"{sign}{hours:02d}:{rest // 60:02d}"


def to_persian_digits(text: str) -> str:
    return str(text).translate(_TO_PERSIAN_DIGITS)


_FORMATTERS: Dict[str, Callable] = {
    "yyyy": lambda t: str(t.year),
    "yyy": lambda t: str(t.year),
    "yy": lambda t: f"{t.year % 100:02d}",
    "y": lambda t: str(t.year),
    "MMM": lambda t: str(t.month),
    "MMI": lambda t: t.month.dari,
    "MM": lambda t: f"{int(t.month):02d}",
    "M": lambda t: str(int(t.month)),
    "rw": lambda t: str(t.remaining_year_weeks),
    "w": lambda t: str(t.year_week),
    "RW": lambda t: str(t.remaining_month_weeks),
    "W": lambda t: str(t.month_week),
    "RD": lambda t: str(t.remaining_year_days),
    "D": lambda t: str(t.year_day),
    "rd": lambda t: str(t.remaining_month_days),
    "dd": lambda t: f"{t.day:02d}",
    "d": lambda t: str(t.day),
    "E": lambda t: str(t.weekday),
    "e": lambda t: t.weekday.short,
    "A": lambda t: str(t.am_pm),
    "a": lambda t: t.am_pm.short,
    "HH": lambda t: f"{t.hour:02d}",
    "H": lambda t: str(t.hour),
    "KK": lambda t: f"{t.hour12:02d}",
    "K": lambda t: str(t.hour12),
    "kk": lambda t: f"{modify_hour(t.hour, 24):02d}",
    "k": lambda t: str(modify_hour(t.hour, 24)),
    "hh": lambda t: f"{modify_hour(t.hour12, 12):02d}",
    "h": lambda t: str(modify_hour(t.hour12, 12)),
    "mm": lambda t: f"{t.minute:02d}",
    "m": lambda t: str(t.minute),
    "ns": lambda t: str(t.nanosecond),
    "ss": lambda t: f"{t.second:02d}",
    "s": lambda t: str(t.second),
    "S": lambda t: f"{t.nanosecond // 1_000_000:03d}",
    "z": lambda t: t.zone_name,
    "Z": lambda t: t.zone_offset(),
}

_TOKEN_RE = re.compile(
    "|".join(re.escape(token) for token in sorted(_FORMATTERS, key=len, reverse=True))
)


def format_moment(moment, pattern: str) -> str:
    """Replace every token of `pattern` with the matching field of `moment`."""
    return _TOKEN_RE.sub(lambda match: _FORMATTERS[match.group(0)](moment), pattern)
