"""Inbound and outbound stock movement commands."""

import click

from stockroom.cli.error_handling import handle_domain_error, parse_or_exit
from stockroom.domain.entities import MovementType
from stockroom.domain.errors import DomainError
from stockroom.domain.stock import StockService
from stockroom.utils.quantity_parser import parse_quantity


def _record(ctx, product_name: str, quantity: str, movement: MovementType, destination=None, user=None):
    amount = parse_or_exit(ctx, parse_quantity, quantity, "quantity")
    service = StockService(ctx.obj["state"])

    try:
        transaction = service.update_stock(
            product_name, amount, movement, destination=destination, user=user
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if transaction is None:
        click.echo(f"Error: Product '{product_name}' not found", err=True)
        ctx.exit(1)
        return

    product = next(p for p in ctx.obj["state"].products if p.id == transaction.product_id)
    sign = "+" if transaction.amount > 0 else ""
    click.echo(f"Recorded {sign}{transaction.amount} for '{product_name}' by {transaction.user}")
    if transaction.destination:
        click.echo(f"  Destination: {transaction.destination}")
    click.echo(f"  Stock: {product.stock} ({product.status.value})")


@click.command("in")
@click.argument("product_name")
@click.argument("quantity")
@click.option("--user", help="Person receiving the stock")
@click.pass_context
def stock_in(ctx, product_name: str, quantity: str, user: str | None):
    """Record QUANTITY units of PRODUCT_NAME coming in.

    Examples:
        stockroom in "Denim Jacket" 20 --user Tanaka
    """
    _record(ctx, product_name, quantity, MovementType.IN, user=user)


@click.command("out")
@click.argument("product_name")
@click.argument("quantity")
@click.option("--destination", help="Where the stock is going")
@click.option("--user", help="Person handing out the stock")
@click.pass_context
def stock_out(ctx, product_name: str, quantity: str, destination: str | None, user: str | None):
    """Record QUANTITY units of PRODUCT_NAME going out.

    Stock never drops below zero.

    Examples:
        stockroom out "Denim Jacket" 3 --destination "Main Store" --user Suzuki
    """
    _record(ctx, product_name, quantity, MovementType.OUT, destination=destination, user=user)


def register_commands(cli):
    """Register movement commands with main CLI."""
    cli.add_command(stock_in)
    cli.add_command(stock_out)
