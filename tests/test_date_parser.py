"""Tests for date parser with relative dates."""

import pytest
from datetime import date, datetime, timedelta, timezone, UTC
from fundtrack.utils.date_parser import parse_date, parse_datetime


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    result = parse_date("2024-01-15")
    assert result == date(2024, 1, 15)


def test_parse_today():
    """Test parsing 'today'."""
    result = parse_date("today")
    assert result == date.today()


def test_parse_yesterday():
    """Test parsing 'yesterday'."""
    result = parse_date("yesterday")
    assert result == date.today() - timedelta(days=1)


def test_parse_tomorrow():
    """Test parsing 'tomorrow'."""
    result = parse_date("Tomorrow")
    assert result == date.today() + timedelta(days=1)


def test_parse_long_form_date():
    """Test parsing a written-out date."""
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_invalid_date():
    """Test that invalid dates raise ValueError."""
    with pytest.raises(ValueError):
        parse_date("not a date")

    with pytest.raises(ValueError):
        parse_date(20240115)


def test_parse_datetime_keeps_time_of_day():
    """ISO timestamps keep their time and end up in UTC."""
    result = parse_datetime("2024-01-15T10:30:00Z")
    assert result == datetime(2024, 1, 15, 10, 30, tzinfo=UTC)


def test_parse_datetime_converts_offsets_to_utc():
    result = parse_datetime("2024-01-15T12:00:00+02:00")
    assert result == datetime(2024, 1, 15, 10, 0, tzinfo=UTC)
    assert result.utcoffset() == timezone.utc.utcoffset(None)


def test_parse_datetime_naive_is_utc():
    result = parse_datetime("2024-01-15T08:00:00")
    assert result.tzinfo is not None
    assert result == datetime(2024, 1, 15, 8, 0, tzinfo=UTC)


def test_parse_datetime_plain_date_is_midnight():
    result = parse_datetime("2024-01-15")
    assert result == datetime(2024, 1, 15, tzinfo=UTC)


def test_parse_datetime_relative_word():
    result = parse_datetime("yesterday")
    assert result.date() == date.today() - timedelta(days=1)
    assert (result.hour, result.minute) == (0, 0)


def test_parse_datetime_invalid():
    with pytest.raises(ValueError):
        parse_datetime("whenever")

    with pytest.raises(ValueError):
        parse_datetime(None)
