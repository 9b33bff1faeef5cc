"""Staff and destination list commands.

Both lists only feed suggestions for movement commands; recorded movements
keep the names they were recorded with.
"""

import click

from stockroom.cli.error_handling import handle_domain_error
from stockroom.domain.catalog import CatalogService
from stockroom.domain.errors import DomainError


def _build_group(kind: str, plural: str, add, delete, list_all):
    """Build a click group with add/list/delete commands for a name list."""

    @click.group(help=f"Manage {plural}.")
    def group():
        pass

    @group.command("add", help=f"Add a {kind}.")
    @click.argument("name")
    @click.pass_context
    def add_cmd(ctx, name: str):
        service = CatalogService(ctx.obj["state"])
        try:
            entity = add(service, name)
        except DomainError as e:
            handle_domain_error(ctx, e)
            return
        click.echo(f"Added {kind} '{entity.name}' (ID: {entity.id})")

    @group.command("list", help=f"List {plural}.")
    @click.pass_context
    def list_cmd(ctx):
        service = CatalogService(ctx.obj["state"])
        entities = list_all(service)
        if not entities:
            click.echo(f"No {plural} found.")
            return
        for entity in entities:
            click.echo(f"{entity.id:<34} {entity.name}")

    @group.command("delete", help=f"Delete a {kind}.")
    @click.argument("entity_id")
    @click.pass_context
    def delete_cmd(ctx, entity_id: str):
        service = CatalogService(ctx.obj["state"])
        entity = next((e for e in list_all(service) if e.id == entity_id), None)
        if entity is None:
            click.echo(f"Error: {kind.capitalize()} {entity_id} not found", err=True)
            ctx.exit(1)
            return
        delete(service, entity_id)
        click.echo(f"Deleted {kind} '{entity.name}'")

    return group


staff_group = _build_group(
    "staff member",
    "staff",
    CatalogService.add_staff,
    CatalogService.delete_staff,
    CatalogService.list_staff,
)

destination_group = _build_group(
    "destination",
    "destinations",
    CatalogService.add_destination,
    CatalogService.delete_destination,
    CatalogService.list_destinations,
)


def register_commands(cli):
    """Register staff and destination commands with main CLI."""
    cli.add_command(staff_group, name="staff")
    cli.add_command(destination_group, name="destination")
