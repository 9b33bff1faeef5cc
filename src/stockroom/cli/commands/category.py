"""Category management commands."""

import click

from stockroom.cli.error_handling import handle_domain_error
from stockroom.domain.category import CategoryService
from stockroom.domain.entities import CategoryLevel
from stockroom.domain.errors import DomainError

LEVEL_CHOICE = click.Choice([level.value for level in CategoryLevel], case_sensitive=False)


def print_category_tree(nodes: list[dict], indent: int = 0) -> None:
    """Recursively print category tree."""
    for node in nodes:
        cat = node["category"]
        prefix = "  " * indent
        click.echo(f"{prefix}{cat.name} [{cat.type.value}] (ID: {cat.id})")
        if node["children"]:
            print_category_tree(node["children"], indent + 1)


@click.group()
def category_group():
    """Manage the product category taxonomy."""
    pass


@category_group.command("list")
@click.option("--level", type=LEVEL_CHOICE, help="Only list one level")
@click.option("--tree", is_flag=True, help="Show linked categories as a tree")
@click.pass_context
def list_categories(ctx, level: str | None, tree: bool):
    """List configured categories."""
    service = CategoryService(ctx.obj["state"])

    if tree:
        nodes = service.get_category_tree()
        if not nodes:
            click.echo("No categories found.")
            return
        click.echo("\nCategories:")
        print_category_tree(nodes)
        return

    categories = service.list_categories(level)
    if not categories:
        click.echo("No categories found.")
        return

    click.echo("\nCategories:")
    for cat in categories:
        click.echo(f"{cat.id:<34} {cat.type.value:<7} {cat.name}")


@category_group.command("add")
@click.argument("name")
@click.option("--level", type=LEVEL_CHOICE, default=CategoryLevel.MAJOR.value, show_default=True, help="Taxonomy level")
@click.option("--parent", "parent_id", help="ID of the category one level above")
@click.option("--icon", default="category", show_default=True, help="Display icon name")
@click.pass_context
def add_category(ctx, name: str, level: str, parent_id: str | None, icon: str):
    """Create a new category."""
    service = CategoryService(ctx.obj["state"])

    try:
        category = service.add_category(name, level.lower(), icon=icon, parent_id=parent_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    parent_str = f" under {parent_id}" if parent_id else ""
    click.echo(f"Created {category.type.value} category '{category.name}'{parent_str} (ID: {category.id})")


@category_group.command("delete")
@click.argument("category_id")
@click.pass_context
def delete_category(ctx, category_id: str):
    """Delete a category. Products keep their category names."""
    service = CategoryService(ctx.obj["state"])

    category = service.get_category(category_id)
    if category is None:
        click.echo(f"Error: Category {category_id} not found", err=True)
        ctx.exit(1)
        return

    service.delete_category(category_id)
    click.echo(f"Deleted category '{category.name}'")


@category_group.command("options")
@click.argument("level", type=LEVEL_CHOICE)
@click.pass_context
def category_options(ctx, level: str):
    """List the names available for filtering at LEVEL.

    Includes names used by products even if they are not configured.
    """
    service = CategoryService(ctx.obj["state"])

    for name in service.category_options(level.lower()):
        click.echo(name)


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
