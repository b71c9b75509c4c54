import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from persian_calendar.fields import days_in_month
from persian_calendar.jdn import (
    gregorian_to_jdn,
    jdn_to_gregorian,
    jdn_to_persian,
    persian_to_jdn,
)
from persian_calendar.names import Month

logger = logging.getLogger(__name__)

'''
Function: convert_date(source_calendar, target_calendar, day, month, year)

Input format:

 All args are strings (or ints). Use `""` / None for missing parts.
 source_calendar / target_calendar: "solar" or "gregorian", in English or
 Persian spelling ("jalali", "shamsi", "شمسی", "میلادی", ...).
 day, month, year: ASCII, Persian or Arabic-Indic digits; month may also be
 a month name of either calendar.
 Supported templates:

  1. DD-MM-YYYY  -> exact
  2. MM-YYYY     -> range over the month
  3. YYYY        -> range over the year

Output format:

JSON dict with:

  kind: "exact", "range" or "invalid".
  source_calendar, target_calendar: normalized names.
  parsed: "dd-mm-yyyy" with blanks for missing parts.
  date:

    * "exact": string "dd-mm-yyyy".
    * "range": {"from": "...", "to": "..."}.
    * "invalid": {"reason": "..."}.
  standard_format: always "dd-mm-yyyy".
'''

STANDARD_FORMAT = "dd-mm-yyyy"

# Language & digit normalization

_TO_ASCII_DIGITS = str.maketrans("۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩", "01234567890123456789")

EN_GREG_MONTHS = {
    "january": 1, "jan": 1, "february": 2, "feb": 2, "march": 3, "mar": 3,
    "april": 4, "apr": 4, "may": 5, "june": 6, "jun": 6, "july": 7, "jul": 7,
    "august": 8, "aug": 8, "september": 9, "sep": 9, "sept": 9,
    "october": 10, "oct": 10, "november": 11, "nov": 11, "december": 12, "dec": 12,
}
FA_GREG_MONTHS = {
    "ژانویه": 1, "فوریه": 2, "مارس": 3, "آوریل": 4, "مه": 5, "می": 5,
    "ژوئن": 6, "ژوئیه": 7, "جولای": 7, "اوت": 8, "آگوست": 8,
    "سپتامبر": 9, "اکتبر": 10, "نوامبر": 11, "دسامبر": 12,
}
EN_SOLAR_MONTHS = {
    **{m.name.lower(): int(m) for m in Month.__members__.values()},
    "ordibehest": 2, "day": 10,
}
FA_SOLAR_MONTHS = {
    **{str(m): int(m) for m in Month},
    **{m.dari: int(m) for m in Month},
}

_FA_SOLAR = {"شمسی", "خورشیدی", "جلالی", "هجری شمسی"}
_FA_GREG = {"میلادی", "گریگوری", "گرگوری", "گرگوریان"}


def normalize_digits(s: str) -> str:
    """Swap Persian and Arabic-Indic digits for ASCII ones."""
    return s.translate(_TO_ASCII_DIGITS) if s else s


def _ascii_lower_if_latin(s: str) -> str:
    return s.lower() if any("a" <= c.lower() <= "z" for c in s) else s


def normalize_calendar_name(s: Optional[str]) -> Optional[str]:
    if not s:
        return None
    k = _ascii_lower_if_latin(normalize_digits(s.strip()))
    if k in {"solar", "jalali", "shamsi", "persian"} or k in _FA_SOLAR:
        return "solar"
    if k in {"gregorian", "greg", "miladi"} or k in _FA_GREG:
        return "gregorian"
    return None


def _parse_int(token: Any) -> Optional[int]:
    if token is None:
        return None
    t = normalize_digits(str(token)).strip()
    if not t.isdigit():
        return None
    v = int(t)
    return v if v > 0 else None


def _parse_month_token(token: Any, calendar_kind: Optional[str]) -> Optional[int]:
    if token is None:
        return None
    t = normalize_digits(str(token).strip())
    if not t:
        return None
    if t.isdigit():
        v = int(t)
        return v if 1 <= v <= 12 else None
    t_ascii = _ascii_lower_if_latin(t)
    tables: List[Dict[str, int]]
    if calendar_kind == "gregorian":
        tables = [EN_GREG_MONTHS, FA_GREG_MONTHS]
    else:
        tables = [EN_SOLAR_MONTHS, FA_SOLAR_MONTHS]
    for table in tables:
        if t_ascii in table:
            return table[t_ascii]
        if t in table:
            return table[t]
    return None


def _fmt(d: int, m: int, y: int) -> str:
    return f"{d:02d}-{m:02d}-{y:04d}"


def _parsed_as_str(d: Optional[int], m: Optional[int], y: Optional[int]) -> str:
    dd = f"{d:02d}" if d is not None else ""
    mm = f"{m:02d}" if m is not None else ""
    yy = f"{y:04d}" if y is not None else ""
    return "-".join([dd, mm, yy])


# Calendar primitives

def _to_jdn(calendar: str, y: int, m: int, d: int) -> int:
    return persian_to_jdn(y, m, d) if calendar == "solar" else gregorian_to_jdn(y, m, d)


def _from_jdn(calendar: str, jdn: int) -> Tuple[int, int, int]:
    return jdn_to_persian(jdn) if calendar == "solar" else jdn_to_gregorian(jdn)


def _is_valid(calendar: str, y: int, m: int, d: int) -> bool:
    if not 1 <= m <= 12 or d < 1:
        return False
    if calendar == "solar":
        return d <= days_in_month(y, m)
    # a Gregorian triple is real iff it survives the JDN round trip
    return jdn_to_gregorian(gregorian_to_jdn(y, m, d)) == (y, m, d)


def _month_span(calendar: str, y: int, m: int) -> Tuple[int, int]:
    start = _to_jdn(calendar, y, m, 1)
    next_y, next_m = (y + 1, 1) if m == 12 else (y, m + 1)
    return start, _to_jdn(calendar, next_y, next_m, 1) - 1


def _year_span(calendar: str, y: int) -> Tuple[int, int]:
    return _to_jdn(calendar, y, 1, 1), _to_jdn(calendar, y + 1, 1, 1) - 1


def _render(calendar: str, jdn: int) -> str:
    y, m, d = _from_jdn(calendar, jdn)
    return _fmt(d, m, y)


# Parse bundle

@dataclass
class ParsedInput:
    day: Optional[int]
    month: Optional[int]
    year: Optional[int]
    parsed: str  # dd-mm-yyyy


def _parse_components(source_calendar: Optional[str], day: Any, month: Any, year: Any) -> ParsedInput:
    d = _parse_int(day)
    m = _parse_month_token(month, source_calendar)
    y = _parse_int(year)
    return ParsedInput(day=d, month=m, year=y, parsed=_parsed_as_str(d, m, y))


# Public API

def convert_date(
    source_calendar: str,
    target_calendar: str,
    day: Any,
    month: Any,
    year: Any,
) -> Dict[str, Any]:
    """
    Convert (day, month, year) from source to target calendar.

    Never raises on bad input; problems come back as ``kind == "invalid"``.
    """
    src = normalize_calendar_name(source_calendar)
    tgt = normalize_calendar_name(target_calendar)

    def result(kind: str, parsed: str, date: Any) -> Dict[str, Any]:
        return {
            "kind": kind,
            "source_calendar": src or source_calendar,
            "target_calendar": tgt or target_calendar,
            "parsed": parsed,
            "date": date,
            "standard_format": STANDARD_FORMAT,
        }

    if src is None or tgt is None:
        return result("invalid", "--", {"reason": "source/target must be Solar or Gregorian"})

    parsed = _parse_components(src, day, month, year)
    d, m, y = parsed.day, parsed.month, parsed.year
    logger.debug("📅 convert_date: %s → %s parsed=%s", src, tgt, parsed.parsed)

    if d is None and m is None and y is None:
        return result("invalid", parsed.parsed, {"reason": "Provide at least one of day, month, or year."})

    # FULL DATE → exact
    if d is not None and m is not None and y is not None:
        if not _is_valid(src, y, m, d):
            return result("invalid", parsed.parsed, {"reason": f"Invalid {src} date: {parsed.parsed}"})
        return result("exact", parsed.parsed, _render(tgt, _to_jdn(src, y, m, d)))

    # YEAR + MONTH → range
    if d is None and m is not None and y is not None:
        start, end = _month_span(src, y, m)
        return result("range", parsed.parsed, {"from": _render(tgt, start), "to": _render(tgt, end)})

    # YEAR ONLY → range
    if d is None and m is None and y is not None:
        start, end = _year_span(src, y)
        return result("range", parsed.parsed, {"from": _render(tgt, start), "to": _render(tgt, end)})

    return result("invalid", parsed.parsed, {"reason": "Unsupported or ambiguous combination."})
