"""Typer application.

Plays the host role locally: builds the plugin, sends a query and prints the
HTML fragment the dictionary application would display. Also exposes the
session cache for inspection.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console

from bing_translator.adapters.session_cache import open_session_cache
from bing_translator.adapters.session_fetcher import SessionContextFetcher
from bing_translator.cli.doctor import app as doctor_app
from bing_translator.cli.logging_setup import setup_logging
from bing_translator.cli.ui_components import (
    build_languages_table,
    build_meta_panel,
    build_session_panel,
)
from bing_translator.core.config import AppSettings, LogLevel
from bing_translator.core.domain.language import LANGUAGE_CODES
from bing_translator.core.domain.models import Query
from bing_translator.core.errors import BingTranslatorError
from bing_translator.core.services.provider import PROVIDER_ID, PROVIDER_META, create_plugin

app = typer.Typer(no_args_is_help=True, help="Bing Translator plugin for DictHub.")
app.add_typer(doctor_app, name="doctor")

_console = Console()


@app.callback()
def main(
    log_level: LogLevel | None = typer.Option(
        None,
        "--log-level",
        case_sensitive=False,
        help="Log level. Defaults to BING_TRANSLATOR_LOG_LEVEL.",
    ),
) -> None:
    setup_logging(log_level or AppSettings().log_level)


async def _translate(settings: AppSettings, query: Query) -> str | None:
    """Return the fragment, or None when the provider does not handle the pair."""

    async with create_plugin(settings) as provider:
        if not provider.can_translate(query):
            return None
        return await provider.translate(query)


@app.command()
def translate(
    text: str = typer.Argument(..., help="Text to translate."),
    source: str = typer.Option("en", "--from", "-f", help="Canonical source language code."),
    target: str = typer.Option("de", "--to", "-t", help="Canonical target language code."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the HTML fragment to a file."),
) -> None:
    """Translate TEXT and print the HTML fragment."""

    query = Query(text=text, source_lang=source, target_lang=target)
    html = asyncio.run(_translate(AppSettings(), query))
    if html is None:
        _console.print(f"[red]Unsupported language pair:[/red] {source} -> {target}")
        raise typer.Exit(code=2)

    if output is None:
        typer.echo(html)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    _console.print(f"[green]Saved fragment to:[/green] {output}")


@app.command()
def languages() -> None:
    """List supported language codes."""

    _console.print(build_languages_table(LANGUAGE_CODES))


@app.command()
def info() -> None:
    """Show the provider metadata."""

    _console.print(build_meta_panel(PROVIDER_META, PROVIDER_ID))


@app.command()
def session(
    refresh: bool = typer.Option(False, "--refresh", help="Fetch a fresh session and cache it."),
) -> None:
    """Show the cached session, optionally refreshing it first."""

    settings = AppSettings()
    cache = open_session_cache(settings)
    if refresh:
        try:
            context = asyncio.run(SessionContextFetcher(settings).fetch())
        except BingTranslatorError as exc:
            _console.print(f"[red]Could not fetch a session:[/red] {exc}")
            raise typer.Exit(code=1) from exc
        cache.save(context)

    _console.print(build_session_panel(cache.load(), path=settings.resolved_session_cache_path()))


@app.command(name="clear-cache")
def clear_cache() -> None:
    """Forget the cached session."""

    settings = AppSettings()
    open_session_cache(settings).clear()
    _console.print(f"[green]Cleared session cache:[/green] {settings.resolved_session_cache_path()}")


def run() -> None:
    app()
