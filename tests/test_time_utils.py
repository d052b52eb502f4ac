from flex_worktime.time_utils import (
    format_clock_time,
    format_duration_minutes,
    format_hours_minutes,
    lenient_int,
    parse_clock_time,
    parse_duration_text,
    span_seconds,
)


def test_parse_clock_time_full():
    assert parse_clock_time("07:22:23") == 7 * 3600 + 22 * 60 + 23


def test_parse_clock_time_missing_segments_count_as_zero():
    assert parse_clock_time("07:30") == 7 * 3600 + 30 * 60
    assert parse_clock_time("7") == 7 * 3600


def test_parse_clock_time_lenient():
    assert parse_clock_time("ab:10:xx") == 600
    assert parse_clock_time("") == 0
    assert parse_clock_time(None) == 0


def test_lenient_int():
    assert lenient_int("30") == 30
    assert lenient_int(" 7") == 7
    assert lenient_int("30분") == 30
    assert lenient_int("abc") == 0
    assert lenient_int("") == 0
    assert lenient_int(None) == 0


def test_span_wraps_past_midnight():
    assert span_seconds(parse_clock_time("22:00:00"), parse_clock_time("06:00:00")) == 8 * 3600
    assert span_seconds(100, 100) == 0


def test_parse_duration_text():
    assert parse_duration_text("8:30") == 510
    assert parse_duration_text("0:30") == 30
    assert parse_duration_text("45") == 45
    assert parse_duration_text("abc") == 0
    assert parse_duration_text("") == 0
    assert parse_duration_text(None) == 0
    assert parse_duration_text(90) == 90


def test_format_duration_minutes():
    assert format_duration_minutes(0) == ""
    assert format_duration_minutes(510) == "8:30"
    assert format_duration_minutes(480) == "8:00"
    assert format_duration_minutes(5) == "0:05"


def test_format_hours_minutes():
    assert format_hours_minutes(510) == "8시간 30분"
    assert format_hours_minutes(0) == "0시간 0분"


def test_format_clock_time():
    assert format_clock_time(7 * 3600 + 5) == "07:00:05"
    assert format_clock_time(24 * 3600 + 60) == "00:01:00"
