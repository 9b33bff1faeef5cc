"""Inventory report command."""

import click

from stockroom.cli.commands.product import format_price
from stockroom.cli.report_options import build_range, filter_options, range_caption, range_options
from stockroom.domain.query import FilterCriteria
from stockroom.domain.report import ReportService


@click.command("inventory")
@filter_options
@range_options
@click.pass_context
def view_inventory(ctx, search, major, medium, minor, range_start: int, range_end: int, orientation: str):
    """Show stock on hand with its total value.

    The total covers every product matching the filters, including rows
    outside the printed range.
    """
    criteria = FilterCriteria(search=search, major=major, medium=medium, minor=minor)
    report = ReportService(ctx.obj["state"]).inventory_report(
        criteria, build_range(range_start, range_end, orientation)
    )

    if not report.items:
        click.echo("No products found.")
        return

    click.echo(f"\nInventory ({range_caption(len(report.items), report.total_count, report.report_range)})")
    click.echo(f"Issued: {report.issued_on.isoformat()}  Orientation: {report.report_range.orientation.value}")
    click.echo("-" * 100)
    click.echo(f"{'Name':<30} {'Category':<30} {'Stock':>6}  {'Status':<13} {'Price':>12}")
    click.echo("-" * 100)
    for product in report.items:
        click.echo(
            f"{product.name[:30]:<30} {report.category_paths[product.id][:30]:<30} {product.stock:>6}  "
            f"{product.status.value:<13} {format_price(product.price):>12}"
        )
    click.echo("-" * 100)
    click.echo(f"{'Total value':<82} {report.grand_total:>,}")


def register_commands(cli):
    """Register inventory command with main CLI."""
    cli.add_command(view_inventory)
