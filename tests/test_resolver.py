from datetime import date, datetime, timedelta

import pytest

from file_age_check.core.exceptions import DirectoryNotFoundError
from file_age_check.core.models import Granularity
from file_age_check.core.resolver import (
    DirectoryResolver,
    candidate_date,
    detect_granularity,
    to_date_format,
)


@pytest.mark.parametrize(
    "template, expected",
    [
        ("/data/#YEAR#/#MONTH#/#DAY#", Granularity.DAY),
        ("/data/#YEAR#-#MONTH#-#MDAY#", Granularity.DAY),
        ("/data/#YEAR#/#MONTH#", Granularity.MONTH),
        ("/data/#MONTH#", Granularity.MONTH),
        ("/data/#YEAR#", Granularity.YEAR),
        ("/data/latest", Granularity.NONE),
    ],
)
def test_detect_granularity_prefers_finest_placeholder(template, expected):
    assert detect_granularity(template) is expected


def test_to_date_format_translates_all_placeholders():
    assert to_date_format("/d/#YEAR#/#MONTH#/#DAY#/#MDAY#") == "/d/%Y/%m/%j/%d"


def test_to_date_format_escapes_literal_percent():
    fmt = to_date_format("/d/100%/#YEAR#")
    assert date(2024, 1, 1).strftime(fmt) == "/d/100%/2024"


def test_candidate_date_steps_back_days_across_year():
    assert candidate_date(date(2024, 1, 2), Granularity.DAY, 3) == date(2023, 12, 30)


def test_candidate_date_month_uses_first_of_month_and_borrows_years():
    assert candidate_date(date(2024, 3, 15), Granularity.MONTH, 0) == date(2024, 3, 1)
    assert candidate_date(date(2024, 3, 15), Granularity.MONTH, 3) == date(2023, 12, 1)
    assert candidate_date(date(2024, 3, 15), Granularity.MONTH, 12) == date(2023, 3, 1)


def test_candidate_date_year_keeps_day_of_year():
    assert candidate_date(date(2024, 3, 15), Granularity.YEAR, 1) == date(2023, 3, 16)
    assert candidate_date(date(2024, 12, 31), Granularity.YEAR, 1) == date(2024, 1, 1)


def test_no_placeholder_checks_exactly_one_path(monkeypatch, now):
    resolver = DirectoryResolver()
    calls = []
    monkeypatch.setattr(resolver, "find_latest_directory", lambda path: calls.append(path))

    with pytest.raises(DirectoryNotFoundError) as excinfo:
        resolver.resolve("/nonexistent/plain", now)

    assert calls == ["/nonexistent/plain"]
    assert excinfo.value.granularity is Granularity.NONE
    assert str(excinfo.value) == "Cannot find directory /nonexistent/plain"


def test_day_template_stops_after_367_attempts(monkeypatch, now):
    resolver = DirectoryResolver()
    calls = []
    monkeypatch.setattr(resolver, "find_latest_directory", lambda path: calls.append(path))

    with pytest.raises(DirectoryNotFoundError) as excinfo:
        resolver.resolve("/nonexistent/#DAY#", now)

    assert len(calls) == 367
    assert calls[0] == "/nonexistent/075"
    assert excinfo.value.granularity is Granularity.DAY
    assert excinfo.value.bound == 366
    assert str(excinfo.value).endswith("the latest file is over 366 days old")


@pytest.mark.parametrize(
    "template, attempts, suffix",
    [("/nonexistent/#YEAR#/#MONTH#", 13, "12 months old"), ("/nonexistent/#YEAR#", 11, "10 years old")],
)
def test_month_and_year_bounds(monkeypatch, now, template, attempts, suffix):
    resolver = DirectoryResolver()
    calls = []
    monkeypatch.setattr(resolver, "find_latest_directory", lambda path: calls.append(path))

    with pytest.raises(DirectoryNotFoundError) as excinfo:
        resolver.resolve(template, now)

    assert len(calls) == attempts
    assert str(excinfo.value).endswith(suffix)


def test_custom_bounds_are_honoured(monkeypatch, now):
    resolver = DirectoryResolver(max_days_back=5)
    calls = []
    monkeypatch.setattr(resolver, "find_latest_directory", lambda path: calls.append(path))

    with pytest.raises(DirectoryNotFoundError):
        resolver.resolve("/nonexistent/#MDAY#", now)

    assert calls == ["/nonexistent/%02d" % d for d in range(15, 9, -1)]


def test_resolve_skips_empty_current_month(tmp_path, make_file, now):
    (tmp_path / "2024" / "03").mkdir(parents=True)
    make_file(tmp_path / "2024" / "02" / "report.txt", size=10)

    resolved = DirectoryResolver().resolve(str(tmp_path) + "/#YEAR#/#MONTH#", now)

    assert resolved == str(tmp_path / "2024" / "02")


def test_resolve_returns_first_step_with_a_directory(tmp_path, make_file, now):
    make_file(tmp_path / "2024-03-14" / "a.log")
    make_file(tmp_path / "2024-03-10" / "b.log")

    resolved = DirectoryResolver().resolve(str(tmp_path) + "/#YEAR#-#MONTH#-#MDAY#", now)

    assert resolved == str(tmp_path / "2024-03-14")


def test_resolve_picks_newest_of_several_glob_matches(tmp_path, make_file, set_mtime, now):
    for name, offset in [("host-a", 30), ("host-b", 10), ("host-c", 20)]:
        make_file(tmp_path / name / "2024" / "data.csv")
        set_mtime(tmp_path / name / "2024", now - timedelta(minutes=offset))
    (tmp_path / "host-d" / "2024").mkdir(parents=True)
    set_mtime(tmp_path / "host-d" / "2024", now)

    resolved = DirectoryResolver().resolve(str(tmp_path) + "/host-*/#YEAR#", now)

    assert resolved == str(tmp_path / "host-b" / "2024")


def test_find_latest_directory_ignores_files(tmp_path, make_file):
    make_file(tmp_path / "notadir", size=5)

    assert DirectoryResolver().find_latest_directory(str(tmp_path / "notadir")) is None


def test_symlinked_directories_are_not_candidates(tmp_path, make_file, set_mtime, now):
    make_file(tmp_path / "store" / "2024" / "data.csv")
    set_mtime(tmp_path / "store" / "2024", now - timedelta(hours=1))
    (tmp_path / "2024").symlink_to(tmp_path / "store" / "2024", target_is_directory=True)

    resolver = DirectoryResolver()

    with pytest.raises(DirectoryNotFoundError):
        resolver.resolve(str(tmp_path) + "/#YEAR#", now)
    assert resolver.find_latest_directory(str(tmp_path / "store" / "*")) == str(tmp_path / "store" / "2024")
