# test_convert_calendar_date.py
# pytest-style tests + a human-readable log runner.
# pip install -e ".[test]"

import re
from pprint import pformat

from persian_calendar.utils.convert import (
    STANDARD_FORMAT,
    convert_date,
    normalize_calendar_name,
    normalize_digits,
)


STANDARD_DATE_RE = re.compile(r"^\d{2}-\d{2}-\d{4}$")


def _is_standard_date(s: str) -> bool:
    return bool(STANDARD_DATE_RE.match(s or ""))


def _log(title: str, src: str, tgt: str, parts, result):
    print("=" * 72)
    print(title)
    print(f"Source: {src}  ->  Target: {tgt}")
    print(f"Input : {pformat(parts)}")
    print("Output:", pformat(result, width=88))


# --------------------------- EXACT ---------------------------

def test_exact_solar_to_greg_full_date():
    res = convert_date("solar", "gregorian", "۱۵", "اردیبهشت", "۱۳۹۲")
    _log("EXACT SH→G (full date)", "solar", "gregorian", ("۱۵", "اردیبهشت", "۱۳۹۲"), res)
    assert res["kind"] == "exact"
    assert res["target_calendar"] == "gregorian"
    assert res["parsed"] == "15-02-1392"
    assert res["date"] == "05-05-2013"  # 1392/02/15 -> 2013-05-05


def test_exact_greg_to_solar_full_date():
    res = convert_date("gregorian", "solar", 21, "Mar", 2013)
    _log("EXACT G→SH (full date)", "gregorian", "solar", (21, "Mar", 2013), res)
    assert res["kind"] == "exact"
    assert res["target_calendar"] == "solar"
    assert res["date"] == "01-01-1392"  # Nowruz 2013


def test_exact_same_calendar_greg():
    res = convert_date("gregorian", "gregorian", 12, "آوریل", 2012)
    _log("EXACT G→G (FA month name)", "gregorian", "gregorian", (12, "آوریل", 2012), res)
    assert res["kind"] == "exact"
    assert res["date"] == "12-04-2012"


def test_exact_same_calendar_solar():
    res = convert_date("solar", "solar", 1, 2, 1402)
    _log("EXACT SH→SH", "solar", "solar", (1, 2, 1402), res)
    assert res["kind"] == "exact"
    assert res["date"] == "01-02-1402"


def test_exact_dari_month_name():
    res = convert_date("شمسی", "میلادی", 13, "اسد", 1392)
    _log("EXACT SH→G (Dari month)", "شمسی", "میلادی", (13, "اسد", 1392), res)
    assert res["kind"] == "exact"
    assert res["source_calendar"] == "solar"
    assert res["target_calendar"] == "gregorian"
    assert res["date"] == "04-08-2013"  # Mordad 13 1392


def test_exact_last_day_of_leap_year():
    res = convert_date("solar", "gregorian", 30, "esfand", 1403)
    _log("EXACT SH→G (30 Esfand, leap)", "solar", "gregorian", (30, "esfand", 1403), res)
    assert res["kind"] == "exact"
    assert res["date"] == "20-03-2025"


# --------------------------- RANGE ---------------------------

def test_range_greg_to_solar_year_month():
    res = convert_date("gregorian", "solar", None, 3, 2013)
    _log("RANGE G→SH (Y/M)", "gregorian", "solar", (None, 3, 2013), res)
    assert res["kind"] == "range"
    # March 2013 spans SH 1391-12-11 .. 1392-01-11
    assert res["date"] == {"from": "11-12-1391", "to": "11-01-1392"}


def test_range_solar_to_greg_year_month():
    res = convert_date("solar", "gregorian", "", "آبان", 1401)
    _log("RANGE SH→G (Y/M)", "solar", "gregorian", ("", "آبان", 1401), res)
    assert res["kind"] == "range"
    assert res["parsed"] == "-08-1401"
    assert res["date"] == {"from": "23-10-2022", "to": "21-11-2022"}


def test_range_solar_to_greg_year_only():
    res = convert_date("solar", "gregorian", "", "", 1392)
    _log("RANGE SH→G (Y only)", "solar", "gregorian", ("", "", 1392), res)
    assert res["kind"] == "range"
    assert res["date"] == {"from": "21-03-2013", "to": "20-03-2014"}


def test_range_same_calendar_greg_y_m():
    res = convert_date("gregorian", "gregorian", None, 7, 2013)
    _log("RANGE G→G (Y/M)", "gregorian", "gregorian", (None, 7, 2013), res)
    assert res["kind"] == "range"
    assert res["date"] == {"from": "01-07-2013", "to": "31-07-2013"}


def test_range_same_calendar_solar_y_m():
    res = convert_date("solar", "solar", None, 2, 1402)
    _log("RANGE SH→SH (Y/M)", "solar", "solar", (None, 2, 1402), res)
    assert res["kind"] == "range"
    # Ordibehesht has 31 days
    assert res["date"] == {"from": "01-02-1402", "to": "31-02-1402"}


def test_range_same_calendar_solar_y_only():
    leap = convert_date("solar", "solar", None, None, 1403)
    common = convert_date("solar", "solar", None, None, 1404)
    _log("RANGE SH→SH (Y only)", "solar", "solar", (None, None, "1403/1404"), [leap, common])
    assert leap["date"] == {"from": "01-01-1403", "to": "30-12-1403"}
    assert common["date"] == {"from": "01-01-1404", "to": "29-12-1404"}


# --------------------------- NORMALIZATION ---------------------------

def test_persian_digits_parsing_full_solar():
    res = convert_date("solar", "gregorian", "۱۵", "۰۲", "۱۳۹۲")
    _log("NORMALIZE Persian digits SH→G", "solar", "gregorian", ("۱۵", "۰۲", "۱۳۹۲"), res)
    assert res["kind"] == "exact"
    assert res["date"] == "05-05-2013"


def test_arabic_indic_digits():
    assert normalize_digits("٢٠١٣") == "2013"
    assert normalize_digits("۱۴۰۴-۰۱-۰۱") == "1404-01-01"


def test_calendar_name_spellings():
    assert normalize_calendar_name("Jalali") == "solar"
    assert normalize_calendar_name(" هجری شمسی ") == "solar"
    assert normalize_calendar_name("GREGORIAN") == "gregorian"
    assert normalize_calendar_name("میلادی") == "gregorian"
    assert normalize_calendar_name("lunar") is None
    assert normalize_calendar_name("") is None


# --------------------------- INVALID ---------------------------

def test_invalid_greg_feb_29_non_leap():
    res = convert_date("gregorian", "solar", 29, 2, 2019)
    _log("INVALID G (Feb 29, 2019)", "gregorian", "solar", (29, 2, 2019), res)
    assert res["kind"] == "invalid"
    assert res["parsed"] == "29-02-2019"
    assert "gregorian" in res["date"]["reason"]


def test_invalid_solar_esfand_30_non_leap():
    res = convert_date("solar", "gregorian", 30, 12, 1404)
    _log("INVALID SH (30 Esfand 1404)", "solar", "gregorian", (30, 12, 1404), res)
    assert res["kind"] == "invalid"


def test_invalid_unknown_calendar():
    res = convert_date("hijri-qamari", "solar", 1, 1, 1445)
    _log("INVALID calendar", "hijri-qamari", "solar", (1, 1, 1445), res)
    assert res["kind"] == "invalid"
    assert res["source_calendar"] == "hijri-qamari"


def test_invalid_nothing_given():
    res = convert_date("solar", "gregorian", "", None, "")
    assert res["kind"] == "invalid"
    assert res["parsed"] == "--"


def test_invalid_day_without_year():
    res = convert_date("gregorian", "solar", 15, "Aug", None)
    _log("INVALID G→SH (M/D w/o year)", "gregorian", "solar", (15, "Aug", None), res)
    assert res["kind"] == "invalid"


def test_invalid_month_token():
    res = convert_date("solar", "gregorian", 1, "Smarch", 1400)
    assert res["kind"] == "invalid"
    assert res["parsed"] == "01--1400"


def test_standard_format_always_reported():
    for res in (
        convert_date("solar", "gregorian", 1, 1, 1395),
        convert_date("solar", "gregorian", None, None, 1395),
        convert_date("nope", "gregorian", 1, 1, 1395),
    ):
        assert res["standard_format"] == STANDARD_FORMAT


# --------------------------- Human-readable log runner ---------------------------

def run_demo_logs():
    cases = [
        ("EXACT SH→G",  ("solar", "gregorian", "۱۵", "اردیبهشت", "۱۳۹۲")),
        ("EXACT G→SH",  ("gregorian", "solar", 21, "Mar", 2013)),
        ("RANGE G→SH",  ("gregorian", "solar", None, 3, 2013)),
        ("RANGE SH→G",  ("solar", "gregorian", None, "آبان", 1401)),
        ("RANGE SH Y",  ("solar", "gregorian", None, None, 1392)),
        ("RANGE G Y",   ("gregorian", "gregorian", None, None, 2013)),
        ("INVALID",     ("gregorian", "solar", 29, 2, 2019)),
        ("FA digits",   ("solar", "gregorian", "۱۵", "۰۲", "۱۳۹۲")),
    ]
    for title, (src, tgt, d, m, y) in cases:
        _log(f"[LOG] {title}", src, tgt, (d, m, y), convert_date(src, tgt, d, m, y))


if __name__ == "__main__":
    # Running this file directly prints readable logs for all major cases.
    run_demo_logs()
