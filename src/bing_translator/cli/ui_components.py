"""Rich UI components for the CLI.

Kept apart from the commands so tables and panels can be reused by
`main` and `doctor`.
"""

from __future__ import annotations

from pathlib import Path

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from bing_translator.core.domain.language import LanguageCodeMap
from bing_translator.core.domain.models import ProviderMeta, SessionContext


def build_languages_table(codes: LanguageCodeMap) -> Table:
    table = Table(title="Supported languages")
    table.add_column("Canonical", style="cyan", no_wrap=True)
    table.add_column("Bing", style="white")
    for canonical, bing in sorted(codes):
        table.add_row(canonical, bing if bing != canonical else Text(bing, style="dim"))
    return table


def build_session_panel(context: SessionContext | None, *, path: Path) -> Panel:
    """Panel describing the cached session (or its absence)."""

    body = Text()
    if context is None:
        body.append("No cached session.\n", style="yellow")
    else:
        body.append("Domain: ", style="bold")
        body.append(f"{context.domain}\n")
        body.append("Token:  ", style="bold")
        body.append(f"{context.token}\n")
    body.append(f"\nStore: {path}", style="dim")
    return Panel(body, title=Text("Session", style="bold cyan"), border_style="cyan")


def build_meta_panel(meta: ProviderMeta, provider_id: str) -> Panel:
    body = Text.assemble(
        (meta.name, "bold"),
        "\n",
        (meta.description, "dim"),
        "\n\n",
        f"Source: {meta.source} ({meta.source_url})\n",
        f"Author: {meta.author} ({meta.author_url})",
    )
    return Panel(body, title=Text(provider_id, style="bold cyan"), border_style="cyan")
