"""Command-line interface package for medialink."""

from medialink.cli.main import CLIApplication, create_app

__all__ = ["CLIApplication", "create_app"]
