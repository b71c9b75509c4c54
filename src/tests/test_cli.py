import json

import pytest

from persian_calendar import cli
from persian_calendar.settings import DEFAULT_PATTERN, DEFAULT_ZONE, load_settings

ENV_VARS = ("PERSIAN_CALENDAR_ZONE", "PERSIAN_CALENDAR_FORMAT", "PERSIAN_CALENDAR_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep the root logger (and caplog) untouched
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)


def _run(capsys, *argv):
    assert cli.main(list(argv)) == 0
    return capsys.readouterr().out.strip()


def test_to_persian(capsys):
    assert _run(capsys, "to-persian", "2016-03-20", "--format", "yyyy/MM/dd E") == "1395/01/01 یک‌شنبه"


def test_to_persian_with_persian_digits(capsys):
    out = _run(capsys, "to-persian", "2016-03-20", "--format", "yyyy/MM/dd", "--persian-digits")
    assert out == "۱۳۹۵/۰۱/۰۱"


def test_to_gregorian_accepts_persian_digits(capsys):
    assert _run(capsys, "to-gregorian", "۱۳۹۵/۰۱/۰۱") == "2016-03-20"
    assert _run(capsys, "to-gregorian", "1403-12-30") == "2025-03-20"


def test_now_uses_pattern(capsys):
    out = _run(capsys, "now", "--format", "yyyy", "--zone", "Asia/Kabul")
    assert out.isdigit() and int(out) >= 1403


def test_convert_prints_json(capsys):
    out = _run(capsys, "convert", "solar", "gregorian", "--day", "15", "--month", "اردیبهشت", "--year", "1392")
    result = json.loads(out)
    assert result["kind"] == "exact"
    assert result["date"] == "05-05-2013"
    assert "اردیبهشت" not in out  # parsed month is numeric


def test_bad_date_exits_with_usage_error(capsys):
    with pytest.raises(SystemExit) as err:
        cli.main(["to-persian", "20-3-2016x"])
    assert err.value.code == 2
    assert "expected YYYY-MM-DD" in capsys.readouterr().err


def test_unknown_zone_exits(capsys):
    with pytest.raises(SystemExit) as err:
        cli.main(["to-persian", "2016-03-20", "--zone", "Mars/Olympus_Mons"])
    assert err.value.code == 2


def test_empty_zone_exits(capsys):
    with pytest.raises(SystemExit) as err:
        cli.main(["to-gregorian", "1395-01-01", "--zone", ""])
    assert err.value.code == 2
    assert "must not be None" in capsys.readouterr().err


def test_env_settings_feed_defaults(monkeypatch, capsys):
    monkeypatch.setenv("PERSIAN_CALENDAR_FORMAT", "yyyy z")
    monkeypatch.setenv("PERSIAN_CALENDAR_ZONE", "Asia/Kabul")
    assert _run(capsys, "to-persian", "2016-03-20") == "1395 Asia/Kabul"


def test_load_settings_defaults_and_overrides(monkeypatch):
    s = load_settings()
    assert (s.zone, s.pattern, s.log_level) == (DEFAULT_ZONE, DEFAULT_PATTERN, "WARNING")

    monkeypatch.setenv("PERSIAN_CALENDAR_LOG_LEVEL", "debug")
    monkeypatch.setenv("PERSIAN_CALENDAR_ZONE", "")
    s = load_settings()
    assert s.log_level == "DEBUG"
    assert s.zone == DEFAULT_ZONE


def test_dates_before_the_reform_use_the_julian_calendar(capsys):
    assert _run(capsys, "to-persian", "1500-02-29", "--format", "yyyy-MM-dd", "--zone", "UTC") == "878-12-19"
    assert _run(capsys, "to-gregorian", "878-12-19") == "1500-02-29"


def test_nonexistent_gregorian_date_exits(capsys):
    with pytest.raises(SystemExit) as err:
        cli.main(["to-persian", "2019-02-29"])
    assert err.value.code == 2
    assert "not a Gregorian calendar date" in capsys.readouterr().err
