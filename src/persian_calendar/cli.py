#!/usr/bin/env python3
"""Command-line front end: today's Persian date and one-off conversions.

Examples::

    persian-calendar now --format "E d MMM yyyy" --persian-digits
    persian-calendar to-persian 2016-03-20
    persian-calendar to-gregorian 1395-01-01
    persian-calendar convert solar gregorian --month آبان --year 1401

"""
from __future__ import annotations

import argparse
import json
import logging
import re
from typing import List, Optional, Tuple
from zoneinfo import ZoneInfoNotFoundError

from persian_calendar.formatting import to_persian_digits
from persian_calendar.jdn import gregorian_to_jdn, jdn_to_gregorian, jdn_to_persian
from persian_calendar.logging_setup import setup_logging
from persian_calendar.moment import PersianMoment
from persian_calendar.settings import load_settings
from persian_calendar.utils.convert import convert_date, normalize_digits
from persian_calendar.zones import get_zone

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\s*(-?\d{1,4})[-/](\d{1,2})[-/](\d{1,2})\s*$")


def _parse_ymd(value: str) -> Tuple[int, int, int]:
    match = _DATE_RE.match(normalize_digits(value))
    if not match:
        raise ValueError(f"expected YYYY-MM-DD, got {value!r}")
    year, month, day = (int(part) for part in match.groups())
    return year, month, day


def _build_parser(settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="persian-calendar",
        description="Convert between the Gregorian and Persian (Solar Hijri) calendars.",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    parser.add_argument("--log-file", default=None, help="Also write logs to this rotating file")

    sub = parser.add_subparsers(dest="command", required=True)

    def add_render_options(p: argparse.ArgumentParser) -> None:
        p.add_argument("--zone", default=settings.zone, help="Time zone name (default: %(default)s)")
        p.add_argument("--format", dest="pattern", default=settings.pattern, help="Output pattern (default: %(default)s)")
        p.add_argument("--persian-digits", action="store_true", help="Print Persian digits")

    now = sub.add_parser("now", help="Current Persian date and time")
    add_render_options(now)

    to_persian = sub.add_parser("to-persian", help="Gregorian YYYY-MM-DD → Persian")
    to_persian.add_argument("date")
    add_render_options(to_persian)

    to_gregorian = sub.add_parser("to-gregorian", help="Persian YYYY-MM-DD → Gregorian")
    to_gregorian.add_argument("date")
    to_gregorian.add_argument("--zone", default=settings.zone, help="Time zone name (default: %(default)s)")

    convert = sub.add_parser("convert", help="Convert day/month/year text between calendars (JSON)")
    convert.add_argument("source_calendar")
    convert.add_argument("target_calendar")
    convert.add_argument("--day", default="")
    convert.add_argument("--month", default="")
    convert.add_argument("--year", default="")

    return parser


def _render(text: str, persian_digits: bool) -> str:
    return to_persian_digits(text) if persian_digits else text


def run(args: argparse.Namespace) -> str:
    if args.command == "now":
        moment = PersianMoment.now(get_zone(args.zone))
        return _render(moment.format(args.pattern), args.persian_digits)

    if args.command == "to-persian":
        year, month, day = _parse_ymd(args.date)
        jdn = gregorian_to_jdn(year, month, day)
        if jdn_to_gregorian(jdn) != (year, month, day):
            raise ValueError(f"not a Gregorian calendar date: {args.date!r}")
        moment = PersianMoment(*jdn_to_persian(jdn), tzinfo=get_zone(args.zone))
        return _render(moment.format(args.pattern), args.persian_digits)

    if args.command == "to-gregorian":
        year, month, day = _parse_ymd(args.date)
        moment = PersianMoment(year, month, day, tzinfo=get_zone(args.zone))
        year, month, day = moment.gregorian_date()
        return f"{year:04d}-{month:02d}-{day:02d}"

    result = convert_date(args.source_calendar, args.target_calendar, args.day, args.month, args.year)
    return json.dumps(result, ensure_ascii=False, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    parser = _build_parser(settings)
    args = parser.parse_args(argv)

    try:
        setup_logging(level=args.log_level, log_file=args.log_file)
    except ValueError as exc:
        parser.error(str(exc))

    logger.debug("🧭 command=%s", args.command)
    try:
        output = run(args)
    except (ValueError, ZoneInfoNotFoundError) as exc:
        logger.debug("💥 %s failed: %s", args.command, exc)
        parser.exit(2, f"persian-calendar: error: {exc}\n")

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
