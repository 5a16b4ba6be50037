"""Command registration utilities for the medialink CLI."""

from __future__ import annotations

from typing import Callable

import typer
from rich.console import Console

from medialink.cli.commands import resolve
from medialink.services.resolver import MediaLinkResolver


def register_commands(app: typer.Typer, console: Console, resolver: Callable[[], MediaLinkResolver]) -> None:
    """Attach command groups to the provided Typer application."""

    resolve.register(app, console, resolver)


__all__ = ["register_commands"]
