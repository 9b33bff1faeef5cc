"""Shared click options for filtered, range-limited report commands."""

import click

from stockroom.domain.entities import Orientation, ReportRange


def filter_options(command):
    """Attach name search and category level options."""
    command = click.option("--minor", help="Minor category")(command)
    command = click.option("--medium", help="Medium category")(command)
    command = click.option("--major", help="Major category")(command)
    command = click.option("--search", "-s", help="Case-insensitive product name search")(command)
    return command


def range_options(command):
    """Attach print range and orientation options."""
    command = click.option(
        "--orientation",
        type=click.Choice([o.value for o in Orientation], case_sensitive=False),
        default=Orientation.PORTRAIT.value,
        show_default=True,
        help="Page orientation hint",
    )(command)
    command = click.option(
        "--range-end", type=int, default=0, help="Last row to print, 1-indexed (default: last row)"
    )(command)
    command = click.option(
        "--range-start", type=int, default=1, show_default=True, help="First row to print, 1-indexed"
    )(command)
    return command


def build_range(range_start: int, range_end: int, orientation: str) -> ReportRange:
    return ReportRange(start=range_start, end=range_end, orientation=Orientation(orientation.lower()))


def range_caption(shown: int, total: int, report_range: ReportRange) -> str:
    """Describe which rows of the filtered set are shown."""
    if shown == total:
        return f"{total} item(s)"
    end = report_range.end if report_range.end > 0 else total
    return f"rows {max(1, report_range.start)}-{min(end, total)} of {total}"
