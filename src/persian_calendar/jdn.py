"""
Julian Day Number engine.

Every conversion between the Gregorian and the Persian (Solar Hijri)
calendar goes through an integer Julian Day Number (JDN), so the two
irregular calendars are never manipulated against each other directly.

    gregorian_to_jdn(y, m, d)  ->  jdn  ->  jdn_to_persian(jdn)
    persian_to_jdn(y, m, d)    ->  jdn  ->  jdn_to_gregorian(jdn)

The functions here are pure integer arithmetic and never validate their
input: a malformed triple (e.g. day 32) yields an extrapolated JDN.
Range checks belong to ``persian_calendar.fields``.
"""

from typing import Tuple

# Last JDN handled by the Julian branch (1582-10-04 Julian);
# 1582-10-15 Gregorian is the next day.
GREGORIAN_CUTOVER_JDN = 2299160

# JDN of 1 Farvardin 1.
PERSIAN_EPOCH = 1948320

# Days in a 33-year Persian cycle: 33 * 365 + 8 leap days.
CYCLE_33_DAYS = 12053

Date = Tuple[int, int, int]


def _quot(num: int, den: int) -> int:
    """Integer division truncating toward zero (the formulas below expect it)."""
    q = abs(num) // abs(den)
    return q if (num >= 0) == (den > 0) else -q


def divider(num: int, den: int) -> int:
    """
    Floor-style remainder of ``num / den``.

    A truncating remainder gives wrong leap results for negative years, so
    non-positive numerators are folded back into ``[0, den]`` explicitly.
    """
    if num > 0:
        return num % den
    return num - ((_quot(num + 1, den) - 1) * den)


def is_leap(year: int) -> bool:
    """Persian leap-year rule: ``(25 * year + 11) mod 33 < 8``."""
    return divider(25 * year + 11, 33) < 8


# ── Gregorian ↔ JDN ──────────────────────────────────────────────────────

def _after_cutover(year: int, month: int, day: int) -> bool:
    return (year, month, day) > (1582, 10, 14)


def proleptic_gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """JDN of a date in the proleptic Gregorian calendar (the one `datetime` uses)."""
    a = _quot(month - 14, 12)
    return (
        _quot(1461 * (year + 4800 + a), 4)
        + _quot(367 * (month - 2 - 12 * a), 12)
        - _quot(3 * _quot(year + 4900 + a, 100), 4)
        + day
        - 32075
    )


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """
    JDN of a Gregorian calendar date.

    Dates after 1582-10-14 use the proleptic Gregorian formula, earlier ones
    are read as Julian calendar dates, reproducing the 1582 reform.
    """
    if _after_cutover(year, month, day):
        return proleptic_gregorian_to_jdn(year, month, day)
    return (
        367 * year
        - _quot(7 * (year + 5001 + _quot(month - 9, 7)), 4)
        + _quot(275 * month, 9)
        + day
        + 1729777
    )


def jdn_to_proleptic_gregorian(jdn: int) -> Date:
    """Inverse of :func:`proleptic_gregorian_to_jdn`, for any ``jdn >= 0``."""
    l = jdn + 68569
    n = _quot(4 * l, 146097)
    l -= _quot(146097 * n + 3, 4)
    i = _quot(4000 * (l + 1), 1461001)
    l = l - _quot(1461 * i, 4) + 31
    j = _quot(80 * l, 2447)
    day = l - _quot(2447 * j, 80)
    l = _quot(j, 11)
    month = j + 2 - 12 * l
    year = 100 * (n - 49) + i + l
    return year, month, day


def jdn_to_gregorian(jdn: int) -> Date:
    """Inverse of :func:`gregorian_to_jdn`."""
    if jdn > GREGORIAN_CUTOVER_JDN:
        year, month, day = jdn_to_proleptic_gregorian(jdn)
    else:
        j = jdn + 1402
        k = _quot(j - 1, 1461)
        l = j - 1461 * k
        n = _quot(l - 1, 365) - _quot(l, 1461)
        i = l - 365 * n + 30
        j = _quot(80 * i, 2447)
        day = i - _quot(2447 * j, 80)
        i = _quot(j, 11)
        month = j + 2 - 12 * i
        year = 4 * k + n + i - 4716
    return year, month, day


def jdn_weekday(jdn: int) -> int:
    """Day of week of a JDN, Monday = 0 (as ``datetime.weekday``)."""
    return jdn % 7


def gregorian_weekday(year: int, month: int, day: int) -> int:
    """Day of week of a proleptic Gregorian date, Monday = 0."""
    return jdn_weekday(proleptic_gregorian_to_jdn(year, month, day))


# ── Persian ↔ JDN ────────────────────────────────────────────────────────

def _month_offset(month: int) -> int:
    # days before the 1st of `month`: six 31-day months, then 30-day months
    if month <= 7:
        return (month - 1) * 31
    return (month - 1) * 30 + 6


def _next_year(year: int) -> int:
    return 1 if year == -1 else year + 1


def _previous_year(year: int) -> int:
    return -1 if year == 1 else year - 1


def persian_to_jdn(year: int, month: int, day: int) -> int:
    """
    JDN of a Persian calendar date.

    The base day of ``year`` is the epoch plus 365 days per elapsed year plus
    one day for every leap year before it, counted with the same 33-year rule
    as :func:`is_leap`. There is no year zero: year -1 is followed by year 1.
    """
    elapsed = year - 1 if year > 0 else year
    # leap years strictly before `year`; floor division on purpose
    leaps = (8 * (year - 1) + 29) // 33
    return PERSIAN_EPOCH - 1 + 365 * elapsed + leaps + _month_offset(month) + day


def jdn_to_persian(jdn: int) -> Date:
    """Inverse of :func:`persian_to_jdn`."""
    dep = jdn - PERSIAN_EPOCH
    year = (33 * dep) // CYCLE_33_DAYS + 1
    if year <= 0:
        year -= 1

    # the mean-cycle estimate is off by at most one year
    while jdn < persian_to_jdn(year, 1, 1):
        year = _previous_year(year)
    while jdn >= persian_to_jdn(_next_year(year), 1, 1):
        year = _next_year(year)

    dy = jdn - persian_to_jdn(year, 1, 1) + 1
    if dy <= 186:
        month = -(-dy // 31)
    else:
        month = -(-(dy - 6) // 30)

    day = jdn - persian_to_jdn(year, month, 1) + 1
    return year, month, day
