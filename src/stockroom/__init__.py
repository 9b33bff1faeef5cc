"""stockroom - stock movement tracking with a three-level product taxonomy."""

__version__ = "0.1.0"


def __getattr__(name):
    # Only import click when the CLI is actually used.
    if name == "main":
        from stockroom.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
