"""Command-line interface for stockroom."""
