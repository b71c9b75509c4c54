import logging
from typing import Tuple

from persian_calendar.jdn import is_leap

logger = logging.getLogger(__name__)

# (days, days in a leap year, days before the 1st of the month)
MONTH_TABLE: Tuple[Tuple[int, int, int], ...] = (
    (31, 31, 0),    # Farvardin
    (31, 31, 31),   # Ordibehesht
    (31, 31, 62),   # Khordad
    (31, 31, 93),   # Tir
    (31, 31, 124),  # Mordad
    (31, 31, 155),  # Shahrivar
    (30, 30, 186),  # Mehr
    (30, 30, 216),  # Aban
    (30, 30, 246),  # Azar
    (30, 30, 276),  # Dey
    (30, 30, 306),  # Bahman
    (29, 30, 336),  # Esfand
)

MAX_NANOSECOND = 999_999_999


def clamp(value: int, low: int, high: int) -> int:
    """Saturate `value` into ``[low, high]``; out-of-range values never roll over."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def _clamp_field(name: str, value: int, low: int, high: int) -> int:
    clamped = clamp(value, low, high)
    if clamped != value:
        logger.debug("✂️ clamp %s: %s → %s (range %s..%s)", name, value, clamped, low, high)
    return clamped


def days_in_month(year: int, month: int) -> int:
    return MONTH_TABLE[month - 1][1 if is_leap(year) else 0]


def days_in_year(year: int) -> int:
    return 366 if is_leap(year) else 365


def days_before_month(month: int) -> int:
    return MONTH_TABLE[month - 1][2]


def normalize_year(year: int) -> int:
    """There is no year zero; it is read as year 1."""
    if year == 0:
        logger.debug("✂️ clamp year: 0 → 1 (no year zero)")
        return 1
    return year


def normalize_month(month: int) -> int:
    return _clamp_field("month", month, 1, 12)


def normalize_day(year: int, month: int, day: int) -> int:
    """Clamp `day` to the length of an already-normalized month."""
    return _clamp_field("day", day, 1, days_in_month(year, month))


def normalize_date(year: int, month: int, day: int) -> Tuple[int, int, int]:
    year = normalize_year(year)
    month = normalize_month(month)
    return year, month, normalize_day(year, month, day)


def normalize_clock(
    hour: int, minute: int, second: int, nanosecond: int
) -> Tuple[int, int, int, int]:
    return (
        normalize_hour(hour),
        normalize_minute(minute),
        normalize_second(second),
        normalize_nanosecond(nanosecond),
    )


def normalize_hour(hour: int) -> int:
    return _clamp_field("hour", hour, 0, 23)


def normalize_minute(minute: int) -> int:
    return _clamp_field("minute", minute, 0, 59)


def normalize_second(second: int) -> int:
    return _clamp_field("second", second, 0, 59)


def normalize_nanosecond(nanosecond: int) -> int:
    return _clamp_field("nanosecond", nanosecond, 0, MAX_NANOSECOND)
