"""CLI entry point: binds the Typer app to a console, settings and a resolver."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from medialink.cli.commands import register_commands
from medialink.config.settings import Settings, get_settings
from medialink.services.resolver import MediaLinkResolver, get_resolver
from medialink.utils.logs import configure_logging


class CLIApplication:
    """Typer application for resolving links from the command line.

    Without explicit ``settings`` the commands share the process-wide cached resolver
    from :func:`medialink.services.resolver.get_resolver`, so clearing that cache (and
    :func:`get_settings`) is enough to pick up new environment values.
    """

    def __init__(self, console: Optional[Console] = None, settings: Optional[Settings] = None) -> None:
        self.console = console or Console()
        self._settings = settings
        self._resolver: Optional[MediaLinkResolver] = None
        self._app = typer.Typer(
            add_completion=False, rich_markup_mode="rich", help="Resolve pasted music and video links."
        )
        self._register_startup()
        register_commands(self._app, self.console, self.resolver)

    @property
    def app(self) -> typer.Typer:
        return self._app

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def resolver(self) -> MediaLinkResolver:
        """Return the resolver the commands run against."""

        if self._settings is None:
            return get_resolver()
        if self._resolver is None:
            self._resolver = MediaLinkResolver(self._settings)
        return self._resolver

    def _register_startup(self) -> None:
        @self._app.callback(invoke_without_command=True)
        def startup(
            ctx: typer.Context,
            log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL for this run"),
        ) -> None:
            try:
                configure_logging(log_level or self.settings.log_level)
            except ValueError as exc:
                raise typer.BadParameter(str(exc), param_hint="--log-level") from exc

            if ctx.invoked_subcommand is None:
                self.console.print("[bold green]medialink CLI ready for commands.[/bold green]")


def create_app(console: Optional[Console] = None, settings: Optional[Settings] = None) -> typer.Typer:
    return CLIApplication(console=console, settings=settings).app


def main() -> None:
    """Console script entry point for `python -m medialink` or the installed CLI."""

    CLIApplication().app(prog_name="medialink")


__all__ = ["CLIApplication", "create_app", "main"]
