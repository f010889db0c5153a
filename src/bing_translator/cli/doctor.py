"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from bing_translator.adapters.http_client import build_async_client, send_checked
from bing_translator.adapters.session_cache import open_session_cache
from bing_translator.adapters.session_fetcher import extract_session_context
from bing_translator.core.config import AppSettings
from bing_translator.core.domain.models import SessionContext
from bing_translator.core.errors import BingTranslatorError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_landing_page(settings: AppSettings) -> tuple[bool, str, SessionContext | None]:
    """Fetch the landing page once and try to extract a session from it."""

    try:
        async with build_async_client(settings) as client:
            response = await send_checked(client, "GET", settings.translator_url)
    except BingTranslatorError as exc:
        return False, str(exc), None

    detail = f"HTTP {response.status_code} from {response.url.host}"
    try:
        context = extract_session_context(html=response.text, final_url=response.url)
    except BingTranslatorError as exc:
        return True, f"{detail}; {exc}", None
    return True, detail, context


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Bing Translator Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Translator URL", "OK", settings.translator_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    ok_http, detail_http, context = asyncio.run(_check_landing_page(settings))
    table.add_row("Landing page", "OK" if ok_http else "FAIL", detail_http)
    if ok_http:
        if context is not None:
            table.add_row("IG token", "OK", f"{context.token} @ {context.domain}")
        else:
            table.add_row("IG token", "FAIL", "Token marker not found (try another user agent)")

    cache_path = settings.resolved_session_cache_path()
    cached = open_session_cache(settings).load()
    if cached is None:
        table.add_row("Session cache", "EMPTY", str(cache_path))
    else:
        table.add_row("Session cache", "OK", f"{cached.domain} ({cache_path})")

    _console.print(table)

    if ok_http and context is None:
        _console.print(
            "\n[yellow]Note:[/yellow] Bing serves a reduced page to unknown clients; "
            "set BING_TRANSLATOR_USER_AGENT to a regular browser string."
        )
