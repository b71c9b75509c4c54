from __future__ import annotations

import copy
import logging
import time
from datetime import date, datetime, time as clock_time, timedelta, timezone, tzinfo
from typing import Optional, Tuple

import jdatetime

from persian_calendar.exceptions import InvalidZone
from persian_calendar.fields import (
    clamp,
    days_before_month,
    days_in_month,
    days_in_year,
    normalize_clock,
    normalize_date,
    normalize_day,
    normalize_hour,
    normalize_minute,
    normalize_month,
    normalize_nanosecond,
    normalize_second,
    normalize_year,
)
from persian_calendar.formatting import ISO_PATTERN, format_moment, format_zone_offset
from persian_calendar.jdn import (
    is_leap,
    jdn_to_gregorian,
    jdn_to_persian,
    jdn_to_proleptic_gregorian,
    jdn_weekday,
    persian_to_jdn,
    proleptic_gregorian_to_jdn,
)
from persian_calendar.names import AmPm, Month, Weekday
from persian_calendar.zones import zone_name

logger = logging.getLogger(__name__)

NANOS_PER_SECOND = 1_000_000_000
SECONDS_PER_DAY = 86400

# JDN of 1970-01-01, and JDN minus ``date.toordinal()`` (0001-01-01 is JDN 1721426)
UNIX_EPOCH_JDN = 2440588
ORDINAL_TO_JDN = 1721425

# zone rules are only looked up on days ``datetime`` can hold, with a day to spare
_FIRST_LOOKUP_ORDINAL = 2
_LAST_LOOKUP_ORDINAL = date.max.toordinal() - 1


def _require_zone(zone: Optional[tzinfo], caller: str) -> tzinfo:
    if zone is None:
        logger.debug("🚫 %s: called without a zone", caller)
        raise InvalidZone(caller)
    return zone


def _lookup_date(jdn: int) -> date:
    """The day whose zone rules apply to `jdn`; days outside ``datetime`` use the nearest one."""
    ordinal = jdn - ORDINAL_TO_JDN
    return date.fromordinal(clamp(ordinal, _FIRST_LOOKUP_ORDINAL, _LAST_LOOKUP_ORDINAL))


def _offset_seconds(dt: datetime) -> int:
    return int(dt.utcoffset().total_seconds())


def _utc_offset_at(seconds: int, zone: tzinfo) -> int:
    """Offset of `zone` east of UTC at Unix time `seconds`."""
    days, rest = divmod(seconds, SECONDS_PER_DAY)
    utc = datetime.combine(_lookup_date(UNIX_EPOCH_JDN + days), clock_time(), tzinfo=timezone.utc)
    return _offset_seconds((utc + timedelta(seconds=rest)).astimezone(zone))


class PersianMoment:
    """
    A moment in time in the Persian (Solar Hijri) calendar.

    Fields are always kept in range: anything assigned out of range is
    clamped (minute 75 becomes 59, it does not carry into the hour) and the
    cached weekday is re-derived whenever a date field or the zone changes.

    Reads and calendar arithmetic (``add``, ``add_date``, ``tomorrow``, ...)
    never mutate; they return new instances. The property setters and the
    ``set*``/``at`` methods update the instance in place.
    """

    __hash__ = None  # mutable value type

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        *,
        tzinfo: Optional[tzinfo] = None,
    ):
        self.set(year, month, day, hour, minute, second, nanosecond, tzinfo)

    # ── construction ──────────────────────────────────────────────────

    @classmethod
    def from_datetime(cls, dt: datetime) -> "PersianMoment":
        """Convert an aware Gregorian ``datetime`` (its wall-clock fields are kept)."""
        moment = cls.__new__(cls)
        moment.set_datetime(dt)
        return moment

    @classmethod
    def from_unix(
        cls, seconds: int, nanoseconds: int, tzinfo: Optional[tzinfo]
    ) -> "PersianMoment":
        """Moment `seconds` + `nanoseconds` after 1970-01-01 UTC, seen in `tzinfo`."""
        moment = cls.__new__(cls)
        moment.set_unix(seconds, nanoseconds, tzinfo)
        return moment

    @classmethod
    def now(cls, tzinfo: Optional[tzinfo]) -> "PersianMoment":
        _require_zone(tzinfo, "now")
        seconds, nanoseconds = divmod(time.time_ns(), NANOS_PER_SECOND)
        return cls.from_unix(seconds, nanoseconds, tzinfo)

    @classmethod
    def from_jdatetime(cls, value: jdatetime.datetime) -> "PersianMoment":
        return cls(
            value.year, value.month, value.day,
            value.hour, value.minute, value.second, value.microsecond * 1000,
            tzinfo=value.tzinfo,
        )

    # ── in-place setters ──────────────────────────────────────────────

    def set(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        nanosecond: int,
        tzinfo: Optional[tzinfo],
    ) -> None:
        """Replace every field at once, then normalize."""
        self._tzinfo = _require_zone(tzinfo, "set")
        self._hour, self._minute, self._second, self._nanosecond = normalize_clock(
            hour, minute, second, nanosecond
        )
        self._year, month, self._day = normalize_date(year, month, day)
        self._month = Month(month)
        self._reset_weekday()

    def set_datetime(self, dt: datetime) -> None:
        """Take the wall clock of `dt`; its date is proleptic Gregorian, as ``datetime`` counts."""
        self._tzinfo = _require_zone(dt.tzinfo, "set_datetime")
        self._set_jdn(dt.toordinal() + ORDINAL_TO_JDN)
        logger.debug("🔁 %s → %s-%02d-%02d", dt.date().isoformat(), self._year, self._month, self._day)
        self._hour, self._minute, self._second = dt.hour, dt.minute, dt.second
        self._nanosecond = dt.microsecond * 1000

    def set_unix(self, seconds: int, nanoseconds: int, tzinfo: Optional[tzinfo]) -> None:
        self._tzinfo = _require_zone(tzinfo, "set_unix")
        extra, nanoseconds = divmod(nanoseconds, NANOS_PER_SECOND)
        seconds += extra
        local = seconds + _utc_offset_at(seconds, tzinfo)
        days, rest = divmod(local, SECONDS_PER_DAY)
        self._set_jdn(UNIX_EPOCH_JDN + days)
        self._hour, rest = divmod(rest, 3600)
        self._minute, self._second = divmod(rest, 60)
        self._nanosecond = nanoseconds

    def at(self, hour: int, minute: int, second: int, nanosecond: int) -> None:
        """Move to another clock time on the same day."""
        self._hour, self._minute, self._second, self._nanosecond = normalize_clock(
            hour, minute, second, nanosecond
        )

    def _set_jdn(self, jdn: int) -> None:
        year, month, day = jdn_to_persian(jdn)
        self._year, self._month, self._day = year, Month(month), day
        self._weekday = Weekday.from_python(jdn_weekday(jdn))

    def _jdn(self) -> int:
        return persian_to_jdn(self._year, self._month, self._day)

    def _reset_weekday(self) -> None:
        self._weekday = Weekday.from_python(jdn_weekday(self._jdn()))

    # ── fields ────────────────────────────────────────────────────────

    @property
    def year(self) -> int:
        return self._year

    @year.setter
    def year(self, value: int) -> None:
        self._year = normalize_year(value)
        self._day = normalize_day(self._year, self._month, self._day)
        self._reset_weekday()

    @property
    def month(self) -> Month:
        return self._month

    @month.setter
    def month(self, value: int) -> None:
        self._month = Month(normalize_month(value))
        self._day = normalize_day(self._year, self._month, self._day)
        self._reset_weekday()

    @property
    def day(self) -> int:
        return self._day

    @day.setter
    def day(self, value: int) -> None:
        self._day = normalize_day(self._year, self._month, value)
        self._reset_weekday()

    @property
    def hour(self) -> int:
        return self._hour

    @hour.setter
    def hour(self, value: int) -> None:
        self._hour = normalize_hour(value)

    @property
    def minute(self) -> int:
        return self._minute

    @minute.setter
    def minute(self, value: int) -> None:
        self._minute = normalize_minute(value)

    @property
    def second(self) -> int:
        return self._second

    @second.setter
    def second(self, value: int) -> None:
        self._second = normalize_second(value)

    @property
    def nanosecond(self) -> int:
        return self._nanosecond

    @nanosecond.setter
    def nanosecond(self, value: int) -> None:
        self._nanosecond = normalize_nanosecond(value)

    @property
    def tzinfo(self) -> tzinfo:
        return self._tzinfo

    @tzinfo.setter
    def tzinfo(self, value: Optional[tzinfo]) -> None:
        self._tzinfo = _require_zone(value, "tzinfo")
        self._reset_weekday()

    @property
    def weekday(self) -> Weekday:
        return self._weekday

    def date(self) -> Tuple[int, Month, int]:
        return self._year, self._month, self._day

    def clock(self) -> Tuple[int, int, int]:
        return self._hour, self._minute, self._second

    # ── derived fields ────────────────────────────────────────────────

    def is_leap(self) -> bool:
        return is_leap(self._year)

    @property
    def year_day(self) -> int:
        return days_before_month(self._month) + self._day

    @property
    def remaining_year_days(self) -> int:
        return days_in_year(self._year) - self.year_day

    @property
    def year_week(self) -> int:
        return self.year_day // 7

    @property
    def remaining_year_weeks(self) -> int:
        return self.remaining_year_days // 7

    @property
    def month_week(self) -> int:
        return self._day // 7

    @property
    def remaining_month_days(self) -> int:
        return days_in_month(self._year, self._month) - self._day

    @property
    def remaining_month_weeks(self) -> int:
        return self.remaining_month_days // 7

    @property
    def am_pm(self) -> AmPm:
        # 12:00:00 sharp still counts as AM
        if self._hour > 12 or (self._hour == 12 and (self._minute > 0 or self._second > 0)):
            return AmPm.PM
        return AmPm.AM

    @property
    def hour12(self) -> int:
        return self._hour - 12 if self._hour > 12 else self._hour

    @property
    def zone_name(self) -> str:
        return zone_name(self._tzinfo)

    def zone(self) -> Tuple[str, int]:
        """Zone abbreviation and offset in seconds east of UTC at this moment."""
        wall = datetime.combine(
            _lookup_date(self._jdn()),
            clock_time(self._hour, self._minute, self._second),
            tzinfo=self._tzinfo,
        )
        return wall.tzname(), _offset_seconds(wall)

    def zone_offset(self) -> str:
        return format_zone_offset(self.zone()[1])

    # ── export ────────────────────────────────────────────────────────

    def gregorian_date(self) -> Tuple[int, int, int]:
        """Historical Gregorian date: Julian calendar up to 1582-10-04, Gregorian after."""
        return jdn_to_gregorian(self._jdn())

    def to_datetime(self) -> datetime:
        """
        The same wall-clock moment as an aware ``datetime``.

        ``datetime`` is proleptic Gregorian, so before 1582 this differs from
        :meth:`gregorian_date`; days outside years 1..9999 raise ``ValueError``.
        """
        return datetime.combine(
            date.fromordinal(self._jdn() - ORDINAL_TO_JDN),
            clock_time(self._hour, self._minute, self._second, self._nanosecond // 1000),
            tzinfo=self._tzinfo,
        )

    def to_jdatetime(self) -> jdatetime.datetime:
        return jdatetime.datetime(
            self._year, int(self._month), self._day,
            self._hour, self._minute, self._second, self._nanosecond // 1000,
            tzinfo=self._tzinfo,
        )

    def unix(self) -> int:
        """Whole seconds since 1970-01-01 UTC."""
        local = (
            (self._jdn() - UNIX_EPOCH_JDN) * SECONDS_PER_DAY
            + self._hour * 3600 + self._minute * 60 + self._second
        )
        return local - self.zone()[1]

    def unix_nano(self) -> int:
        return self.unix() * NANOS_PER_SECOND + self._nanosecond

    # ── calendar arithmetic ───────────────────────────────────────────

    def copy(self) -> "PersianMoment":
        return copy.copy(self)

    def _with_date(self, year: int, month: int, day: int) -> "PersianMoment":
        return PersianMoment(
            year, month, day,
            self._hour, self._minute, self._second, self._nanosecond,
            tzinfo=self._tzinfo,
        )

    def add(self, delta: timedelta) -> "PersianMoment":
        """Moment `delta` later in absolute time, seen in the same zone."""
        delta_nanos = (
            (delta.days * SECONDS_PER_DAY + delta.seconds) * NANOS_PER_SECOND
            + delta.microseconds * 1000
        )
        seconds, nanoseconds = divmod(self.unix_nano() + delta_nanos, NANOS_PER_SECOND)
        return PersianMoment.from_unix(seconds, nanoseconds, self._tzinfo)

    def add_date(self, years: int, months: int, days: int) -> "PersianMoment":
        """
        Shift the Gregorian date by years, months and days, keeping the clock.

        Overflowing fields normalize forward as ``datetime`` arithmetic does:
        January 31 plus one month is March 2 or 3. Days are counted on the
        JDN, so ``add_date(0, 0, 1)`` is always exactly the next day.
        """
        year, month, day = jdn_to_proleptic_gregorian(self._jdn())
        year, month0 = divmod(year * 12 + month - 1 + years * 12 + months, 12)
        jdn = proleptic_gregorian_to_jdn(year, month0 + 1, 1) + day - 1 + days
        return self._with_date(*jdn_to_persian(jdn))

    def yesterday(self) -> "PersianMoment":
        return self.add_date(0, 0, -1)

    def tomorrow(self) -> "PersianMoment":
        return self.add_date(0, 0, 1)

    def since(self, other: "PersianMoment") -> int:
        """Whole seconds between the two moments, whichever comes first."""
        return abs(other.unix() - self.unix())

    def first_week_day(self) -> "PersianMoment":
        if self._weekday == Weekday.SHANBE:
            return self.copy()
        return self.add_date(0, 0, Weekday.SHANBE - self._weekday)

    def last_week_day(self) -> "PersianMoment":
        if self._weekday == Weekday.JOMEH:
            return self.copy()
        return self.add_date(0, 0, Weekday.JOMEH - self._weekday)

    def first_month_day(self) -> "PersianMoment":
        return self._with_date(self._year, self._month, 1)

    def last_month_day(self) -> "PersianMoment":
        return self._with_date(self._year, self._month, days_in_month(self._year, self._month))

    def first_year_day(self) -> "PersianMoment":
        return self._with_date(self._year, Month.FARVARDIN, 1)

    def last_year_day(self) -> "PersianMoment":
        return self._with_date(
            self._year, Month.ESFAND, days_in_month(self._year, Month.ESFAND)
        )

    # ── presentation ──────────────────────────────────────────────────

    def format(self, pattern: str) -> str:
        return format_moment(self, pattern)

    def __str__(self) -> str:
        return self.format(ISO_PATTERN)

    def __repr__(self) -> str:
        return (
            f"PersianMoment({self._year}, {int(self._month)}, {self._day}, "
            f"{self._hour}, {self._minute}, {self._second}, {self._nanosecond}, "
            f"tzinfo={self._tzinfo!r})"
        )

    def _key(self):
        return (
            self._year, self._month, self._day,
            self._hour, self._minute, self._second, self._nanosecond,
            self._tzinfo,
        )

    def __eq__(self, other):
        if not isinstance(other, PersianMoment):
            return NotImplemented
        return self._key() == other._key()
