"""Tests for CLI date filter helpers."""

import click
import pytest

from stockroom.cli.date_filters import (
    PERIOD_FLAGS,
    collect_period_flags,
    resolve_cli_date_range,
)
from stockroom.utils.date_parser import get_date_range, parse_date


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_resolve_cli_date_range_rejects_multiple_periods(capsys):
    period_flags = {"this-month": True, "last-month": True}

    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(_ctx(), start_date=None, end_date=None, period_flags=period_flags)

    assert excinfo.value.exit_code == 1
    assert "Only one period option" in capsys.readouterr().err


def test_resolve_cli_date_range_rejects_period_with_start_end(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date="2024-01-01",
            end_date=None,
            period_flags={"last-week": True},
        )

    assert excinfo.value.exit_code == 1
    assert "cannot be combined" in capsys.readouterr().err


def test_resolve_cli_date_range_returns_period_range():
    start, end = resolve_cli_date_range(
        _ctx(), start_date=None, end_date=None, period_flags={"last-month": True}
    )
    assert (start, end) == get_date_range("last-month")


def test_resolve_cli_date_range_parses_explicit_dates():
    start, end = resolve_cli_date_range(
        _ctx(), start_date="2024/01/02", end_date="2024-01-05", period_flags={}
    )
    assert start == parse_date("2024-01-02")
    assert end == parse_date("2024-01-05")


def test_resolve_cli_date_range_open_ended():
    start, end = resolve_cli_date_range(_ctx(), start_date=None, end_date="2024-01-05", period_flags={})
    assert start is None
    assert end == parse_date("2024-01-05")


@pytest.mark.parametrize(
    "kwargs,message",
    [
        ({"start_date": "not-a-date", "end_date": None}, "Invalid start date"),
        ({"start_date": None, "end_date": "not-a-date"}, "Invalid end date"),
    ],
)
def test_resolve_cli_date_range_invalid_dates(capsys, kwargs, message):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(_ctx(), period_flags={}, **kwargs)

    assert excinfo.value.exit_code == 1
    assert message in capsys.readouterr().err


def test_collect_period_flags_pops_click_names():
    kwargs = {"this_month": True, "last_year": False, "search": "x"}
    flags = collect_period_flags(kwargs)

    assert set(flags) == set(PERIOD_FLAGS)
    assert flags["this-month"] is True
    assert flags["today"] is False
    assert kwargs == {"search": "x"}
