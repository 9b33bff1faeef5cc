"""Movement history commands."""

import click

from stockroom.cli.date_filters import collect_period_flags, period_options, resolve_cli_date_range
from stockroom.cli.report_options import build_range, filter_options, range_caption, range_options
from stockroom.domain.query import FilterCriteria, build_category_lookup
from stockroom.domain.report import ReportService


@click.command("history")
@filter_options
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'this month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@period_options
@range_options
@click.pass_context
def view_history(
    ctx,
    search,
    major,
    medium,
    minor,
    start_date,
    end_date,
    range_start: int,
    range_end: int,
    orientation: str,
    **period_kwargs,
):
    """View stock movements, most recent first.

    Examples:
        stockroom history --search jacket --this-month
        stockroom history --major Clothing --range-start 1 --range-end 20 --orientation landscape
    """
    state = ctx.obj["state"]
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=collect_period_flags(period_kwargs),
    )

    criteria = FilterCriteria(
        search=search,
        start_date=start,
        end_date=end,
        major=major,
        medium=medium,
        minor=minor,
    )
    report = ReportService(state).transaction_report(
        criteria, build_range(range_start, range_end, orientation)
    )

    if not report.items:
        click.echo("No movements found.")
        return

    click.echo(f"\nStock Movements ({range_caption(len(report.items), report.total_count, report.report_range)})")
    click.echo(f"Issued: {report.issued_on.isoformat()}  Orientation: {report.report_range.orientation.value}")

    if report.is_single_product:
        click.echo(f"Product: {report.single_product_name}")
        if report.single_product_path:
            click.echo(f"Category: {report.single_product_path}")
        click.echo("-" * 70)
        click.echo(f"{'Date':<17} {'User':<16} {'Destination':<24} {'Qty':>8}")
        click.echo("-" * 70)
        for txn in report.items:
            click.echo(
                f"{txn.date:<17} {txn.user[:16]:<16} {(txn.destination or '-')[:24]:<24} {txn.amount:>+8}"
            )
        return

    lookup = build_category_lookup(state.products)
    click.echo("-" * 110)
    click.echo(f"{'Date':<17} {'Product':<30} {'Category':<24} {'User':<14} {'Destination':<14} {'Qty':>7}")
    click.echo("-" * 110)
    for txn in report.items:
        triple = lookup.for_transaction(txn)
        path = " > ".join(part for part in triple if part) if triple else ""
        click.echo(
            f"{txn.date:<17} {txn.product_name[:30]:<30} {path[:24]:<24} {txn.user[:14]:<14} "
            f"{(txn.destination or '-')[:14]:<14} {txn.amount:>+7}"
        )


def register_commands(cli):
    """Register history command with main CLI."""
    cli.add_command(view_history)
