"""HTML fragment rendering.

Jinja2 templates with autoescaping: every query, translation and example
comes from the user or from Bing and is escaped on the way out.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from bing_translator.core.config import AppSettings
from bing_translator.core.domain.models import Query, TranslationResult

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def random_detail_id() -> str:
    return f"bingTranslationDetail{random.randint(0, 2**31 - 1)}"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def describe_error(error: BaseException) -> str:
    message = str(error).strip()
    return message or type(error).__name__


class ResultRenderer:
    """Turns results (and failures) into the fragments shown by the host.

    `id_generator` scopes the collapsible details panel; the default is
    random, tests inject a fixed one.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        id_generator: Callable[[], str] = random_detail_id,
    ) -> None:
        self._settings = settings or AppSettings()
        self._id_generator = id_generator
        self._env = _get_env()

    def render(self, t: TranslationResult) -> str:
        detail_id = self._id_generator() if t.details else None
        template = self._env.get_template("translation.html")
        return template.render(
            t=t,
            detail_id=detail_id,
            source_url=t.source_url,
            source_icon_url=self._settings.source_icon_url,
        )

    def render_failure(
        self,
        provider_id: str,
        source_url: str,
        query: Query,
        error: BaseException,
    ) -> str:
        template = self._env.get_template("failure.html")
        return template.render(
            provider_id=provider_id,
            query=query,
            message=f"Translation failed: {describe_error(error)}",
            source_url=source_url,
            source_icon_url=self._settings.source_icon_url,
        )
