"""Product management commands."""

import click

from stockroom.cli.error_handling import handle_domain_error, parse_or_exit
from stockroom.domain.catalog import CatalogService
from stockroom.domain.category import format_category_path
from stockroom.domain.errors import DomainError
from stockroom.utils.quantity_parser import parse_price, parse_stock


def format_price(price) -> str:
    return f"{price:,}" if price is not None else "-"


@click.group()
def product_group():
    """Manage products."""
    pass


@product_group.command("add")
@click.argument("name")
@click.option("--category", "major", help="Major category (defaults to 'Uncategorized')")
@click.option("--medium", help="Medium category")
@click.option("--minor", help="Minor category")
@click.option("--stock", default="0", help="Initial stock (default: 0)")
@click.option("--price", help="Unit price")
@click.option("--image-url", help="Image reference shown by front ends")
@click.pass_context
def add_product(ctx, name: str, major, medium, minor, stock: str, price, image_url):
    """Register a new product.

    Starting stock is recorded in the history as an inbound movement.

    Examples:
        stockroom product add "Denim Jacket" --category Clothing --medium Outerwear --stock 12 --price 8900
    """
    service = CatalogService(ctx.obj["state"])
    stock_value = parse_or_exit(ctx, parse_stock, stock, "stock")
    price_value = parse_or_exit(ctx, parse_price, price, "price")

    try:
        product = service.register_product(
            name=name,
            category=major,
            medium_category=medium,
            small_category=minor,
            stock=stock_value,
            price=price_value,
            image_url=image_url,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created product '{product.name}' (ID: {product.id})")
    click.echo(f"  Stock: {product.stock} ({product.status.value})")


@product_group.command("list")
@click.pass_context
def list_products(ctx):
    """List all products in registration order."""
    service = CatalogService(ctx.obj["state"])

    products = service.list_products()
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"\n{'ID':<34} {'Name':<30} {'Stock':>6}  {'Status':<13} {'Category'}")
    click.echo("-" * 110)
    for product in products:
        click.echo(
            f"{product.id:<34} {product.name[:30]:<30} {product.stock:>6}  "
            f"{product.status.value:<13} {format_category_path(product)}"
        )


@product_group.command("show")
@click.argument("product_id")
@click.pass_context
def show_product(ctx, product_id: str):
    """Show a single product."""
    service = CatalogService(ctx.obj["state"])

    product = service.get_product(product_id)
    if product is None:
        click.echo(f"Error: Product {product_id} not found", err=True)
        ctx.exit(1)
        return

    click.echo(f"Product ID: {product.id}")
    click.echo(f"  Name: {product.name}")
    click.echo(f"  Category: {format_category_path(product)}")
    click.echo(f"  Stock: {product.stock} ({product.status.value})")
    click.echo(f"  Price: {format_price(product.price)}")
    if product.image_url:
        click.echo(f"  Image: {product.image_url}")


@product_group.command("edit")
@click.argument("product_id")
@click.option("--name", help="New product name")
@click.option("--category", "major", help="New major category")
@click.option("--medium", help="New medium category (empty string clears it)")
@click.option("--minor", help="New minor category (empty string clears it)")
@click.option("--stock", help="Corrected stock (not recorded in the history)")
@click.option("--price", help="New unit price (empty string clears it)")
@click.pass_context
def edit_product(ctx, product_id: str, name, major, medium, minor, stock, price):
    """Edit a product. Options that are not given keep their current value.

    Renaming a product keeps its movement history attached to it.
    """
    service = CatalogService(ctx.obj["state"])

    existing = service.get_product(product_id)
    if existing is None:
        click.echo(f"Error: Product {product_id} not found", err=True)
        ctx.exit(1)
        return

    stock_value = existing.stock if stock is None else parse_or_exit(ctx, parse_stock, stock, "stock")
    price_value = existing.price if price is None else parse_or_exit(ctx, parse_price, price, "price")

    try:
        product = service.edit_product(
            product_id,
            name=name if name is not None else existing.name,
            category=major if major is not None else existing.category,
            medium_category=medium if medium is not None else existing.medium_category,
            small_category=minor if minor is not None else existing.small_category,
            stock=stock_value,
            price=price_value,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Updated product '{product.name}' (ID: {product.id})")


@product_group.command("delete")
@click.argument("product_id")
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_product(ctx, product_id: str, yes: bool):
    """Delete a product together with its movement history."""
    service = CatalogService(ctx.obj["state"])

    product = service.get_product(product_id)
    if product is None:
        click.echo(f"Error: Product {product_id} not found", err=True)
        ctx.exit(1)
        return

    if not yes:
        click.confirm(
            f"Delete '{product.name}' and its movement history?", abort=True
        )

    service.delete_product(product_id)
    click.echo(f"Deleted product '{product.name}'")


def register_commands(cli):
    """Register product commands with main CLI."""
    cli.add_command(product_group, name="product")
