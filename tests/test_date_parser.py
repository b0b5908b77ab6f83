"""Tests for date parser with relative dates."""

import pytest
from datetime import date, timedelta
from dateutil.relativedelta import relativedelta

from creatorledger.utils.date_parser import parse_date


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_slash_date_is_day_first():
    """Test that slash dates are read day first."""
    assert parse_date("05/04/2024") == date(2024, 4, 5)


def test_parse_written_date():
    """Test parsing a written-out date."""
    assert parse_date("6 April 2023") == date(2023, 4, 6)


def test_parse_today():
    """Test parsing 'today'."""
    assert parse_date("Today") == date.today()


def test_parse_yesterday():
    """Test parsing 'yesterday'."""
    assert parse_date("yesterday") == date.today() - timedelta(days=1)


def test_parse_tomorrow():
    """Test parsing 'tomorrow'."""
    assert parse_date("tomorrow") == date.today() + timedelta(days=1)


def test_parse_last_month():
    """Test parsing 'last month' as its first day."""
    expected = (date.today() - relativedelta(months=1)).replace(day=1)
    assert parse_date("last month") == expected


def test_parse_this_year():
    """Test parsing 'this year' as 1 January."""
    assert parse_date("this year") == date(date.today().year, 1, 1)


def test_parse_this_week():
    """Test parsing 'this week' as Monday."""
    result = parse_date("this week")
    assert result.weekday() == 0
    assert result <= date.today()


def test_parse_invalid_date():
    """Test that unparseable dates raise ValueError."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")
