"""Main CLI entry point."""

import logging

import click

from stockroom.domain.state import InventoryState
from stockroom.storage.factories import create_sqlite_storage

from stockroom.cli.commands import (
    product,
    movement,
    history,
    inventory,
    category,
    reference,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides STOCKROOM_DB_PATH environment variable)",
    envvar="STOCKROOM_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="STOCKROOM_LOG_LEVEL",
    show_default=True,
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Stockroom - Inventory tracking.

    Record stock coming in and going out, keep a movement history, and
    print filtered inventory and history reports.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Open storage only when actually running a command (not for --help)
    if ctx.invoked_subcommand is not None:
        storage = create_sqlite_storage(database_path=db_path)
        ctx.call_on_close(storage.close)
        state = InventoryState(storage)
        state.load()
        ctx.obj["state"] = state


product.register_commands(cli)
movement.register_commands(cli)
history.register_commands(cli)
inventory.register_commands(cli)
category.register_commands(cli)
reference.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
