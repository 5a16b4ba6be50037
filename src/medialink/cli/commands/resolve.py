"""CLI commands for resolving, previewing and embedding pasted media links."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Optional, Sequence

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from medialink.errors import InvalidMediaLinkError, InvalidThumbnailQualityError
from medialink.models.media import MediaReference, ThumbnailQuality
from medialink.services.resolver import MediaLinkResolver
from medialink.utils.validation import match_link, require_identifier

_YAML_SUFFIXES = {".yaml", ".yml"}


class ResolveExitCode:
    """Mapping of meaningful CLI exit codes."""

    SUCCESS = 0
    INVALID_INPUT = 1


def register(app: typer.Typer, console: Console, resolver: Callable[[], MediaLinkResolver]) -> None:
    """Register CLI commands for link resolution against the resolver ``resolver()`` returns."""

    @app.command("resolve")
    def resolve(
        url: str = typer.Argument(..., help="Pasted music or video link"),
        json_output: bool = typer.Option(False, "--json", help="Output the reference as JSON"),
    ) -> None:
        reference = resolver().resolve_one(url)

        if json_output:
            typer.echo(json.dumps(_reference_payload(reference), ensure_ascii=False, indent=2))
            return

        style = "green" if reference.recognized else "yellow"
        console.print(Panel.fit(f"[bold]{escape(reference.title)}[/bold]", border_style=style))
        console.print(f"Playable URL: {escape(reference.playable_url)}")
        if reference.recognized:
            match = match_link(url)
            console.print(f"Identifier: {reference.identifier} ({reference.kind.value}, {match.shape.value} link)")
        else:
            console.print("[yellow]Not a recognized video link; passed through unchanged.[/yellow]")

    @app.command("resolve-batch")
    def resolve_batch(
        file: Optional[Path] = typer.Option(
            None, "--file", "-f", exists=True, help="Playlist file: one URL per line, or a YAML list"
        ),
        urls: Optional[str] = typer.Option(None, "--urls", help="Comma-separated list of URLs"),
        json_output: bool = typer.Option(False, "--json", help="Output references as JSON"),
    ) -> None:
        try:
            targets = _collect_urls(file, urls)
        except ValueError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(code=ResolveExitCode.INVALID_INPUT) from exc

        if not targets:
            console.print("[red]Error:[/red] Provide URLs via --file or --urls.")
            raise typer.Exit(code=ResolveExitCode.INVALID_INPUT)

        references = resolver().resolve_batch(targets)

        if json_output:
            typer.echo(json.dumps([_reference_payload(ref) for ref in references], ensure_ascii=False, indent=2))
            return

        _render_references(console, targets, references)

    @app.command("thumbnail")
    def thumbnail(
        url: str = typer.Argument(..., help="Video link to preview"),
        quality: Optional[str] = typer.Option(
            None,
            "--quality",
            "-q",
            help="Thumbnail tier: " + ", ".join(tier.value for tier in ThumbnailQuality),
        ),
    ) -> None:
        try:
            require_identifier(url)
            thumbnail_url = resolver().get_thumbnail(url, quality)
        except (InvalidMediaLinkError, InvalidThumbnailQualityError) as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(code=ResolveExitCode.INVALID_INPUT) from exc

        typer.echo(thumbnail_url)

    @app.command("embed")
    def embed(
        url: str = typer.Argument(..., help="Video link to embed"),
        audio: bool = typer.Option(False, "--audio", help="Build the looping audio-only player URL"),
    ) -> None:
        typer.echo(resolver().to_embed_url(url, audio_only=audio))


def _reference_payload(reference: MediaReference) -> dict[str, object]:
    return {
        "url": reference.playable_url,
        "title": reference.title,
        "identifier": reference.identifier,
        "kind": reference.kind.value if reference.kind else None,
    }


def _collect_urls(file_path: Optional[Path], inline_urls: Optional[str]) -> list[str]:
    urls: list[str] = []
    if file_path:
        text = file_path.read_text(encoding="utf-8")
        if file_path.suffix.lower() in _YAML_SUFFIXES:
            urls.extend(_urls_from_yaml(text))
        else:
            urls.extend(line.strip() for line in text.splitlines() if line.strip())
    if inline_urls:
        urls.extend(url.strip() for url in inline_urls.split(",") if url.strip())
    return urls


def _urls_from_yaml(text: str) -> list[str]:
    """Read a playlist from YAML: a list of URLs, or ``tracks:`` entries with a ``url`` key."""

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid playlist YAML: {exc}") from exc

    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("tracks", [])
    if not isinstance(data, list):
        raise ValueError("Playlist YAML must be a list of URLs or a mapping with a 'tracks' list.")

    urls: list[str] = []
    for entry in data:
        if isinstance(entry, dict):
            entry = entry.get("url")
        urls.append("" if entry is None else str(entry))
    return urls


def _render_references(console: Console, sources: Sequence[str], references: Sequence[MediaReference]) -> None:
    table = Table(title="Resolved Links")
    table.add_column("#", justify="right")
    table.add_column("Title", overflow="fold")
    table.add_column("Playable URL", overflow="fold")
    table.add_column("Source", overflow="fold")

    for index, (source, reference) in enumerate(zip(sources, references), start=1):
        title = escape(reference.title) if reference.recognized else f"[yellow]{escape(reference.title)}[/yellow]"
        table.add_row(str(index), title, escape(reference.playable_url), escape(source))

    recognized = sum(1 for reference in references if reference.recognized)
    console.print(table)
    console.print(f"Recognized: {recognized} | Passed through: {len(references) - recognized}")


__all__ = ["ResolveExitCode", "register"]
