"""Bing translator API client.

One translation is two independent POSTs over the same session context:

- `ttranslatev3`: the quick, single-string translation (mandatory).
- `tlookupv3`: dictionary alternatives grouped by part of speech (optional;
  an unusable payload degrades to no details).

Both are dispatched concurrently and joined before the result is assembled.
"""

from __future__ import annotations

import asyncio
import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from bing_translator.adapters.bing_payloads import (
    JSON_ARRAY,
    BackTranslation,
    LookupEntry,
    LookupTranslation,
    QuickTranslationEntry,
)
from bing_translator.adapters.http_client import build_async_client, send_checked
from bing_translator.core.config import AppSettings
from bing_translator.core.domain.language import LANGUAGE_CODES, LanguageCodeMap
from bing_translator.core.domain.models import (
    Detail,
    Meaning,
    Query,
    SessionContext,
    TranslationResult,
)
from bing_translator.core.errors import TranslationNotFound

logger = logging.getLogger(__name__)

IID = "translator.5038.1"

# Characters left untouched by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)


def api_url(context: SessionContext, endpoint: str) -> str:
    return f"https://{context.domain}/{endpoint}?isVertical=1&IG={context.token}&IID={IID}"


def voice_url(*, domain: str, token: str, lang: str, text: str) -> str:
    """Text-to-speech URL for `text`. Built, never fetched."""

    return (
        f"https://{domain}/tspeak?&format=audio%2Fmp3&language={lang}"
        f"&IG={token}&IID={IID}&options=female&text={encode_uri_component(text)}"
    )


def source_url(query: Query, *, translator_url: str, codes: LanguageCodeMap = LANGUAGE_CODES) -> str:
    """Link opening the same query on Bing's own translator page."""

    return (
        f"{translator_url}?from={codes.translate(query.source_lang)}"
        f"&to={codes.translate(query.target_lang)}&text={encode_uri_component(query.text)}"
    )


def parse_quick_translation(body: str | bytes) -> str:
    """Extract `[0].translations[0].text` from a `ttranslatev3` body."""

    try:
        items = JSON_ARRAY.validate_json(body)
        entry = QuickTranslationEntry.model_validate(items[0])
    except (ValidationError, IndexError) as exc:
        raise TranslationNotFound("Unexpected quick translation payload") from exc
    return entry.translations[0].text


def parse_detail_translation(body: str | bytes) -> list[Detail]:
    """Group `tlookupv3` alternatives by `posTag`, in first-seen order.

    Returns an empty list when the payload is unusable.
    """

    try:
        items = JSON_ARRAY.validate_json(body)
        entry = LookupEntry.model_validate(items[0])
    except (ValidationError, IndexError):
        logger.debug("Lookup payload has no usable translations")
        return []

    groups: dict[str, list[Meaning]] = {}
    for raw in entry.translations:
        try:
            item = LookupTranslation.model_validate(raw)
        except ValidationError:
            logger.debug("Skipping malformed lookup entry: %r", raw)
            continue

        examples: list[str] = []
        for raw_example in item.back_translations:
            try:
                examples.append(BackTranslation.model_validate(raw_example).normalized_text)
            except ValidationError:
                continue

        groups.setdefault(item.pos_tag, []).append(
            Meaning(meaning=item.normalized_target, examples=examples)
        )

    return [Detail(poc=poc, meanings=meanings) for poc, meanings in groups.items()]


class TranslationClient:
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        codes: LanguageCodeMap = LANGUAGE_CODES,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client
        self._codes = codes

    async def translate(self, context: SessionContext, query: Query) -> TranslationResult:
        if self._client is not None:
            return await self._translate_with(self._client, context, query)
        async with build_async_client(self._settings) as client:
            return await self._translate_with(client, context, query)

    async def _translate_with(
        self,
        client: httpx.AsyncClient,
        context: SessionContext,
        query: Query,
    ) -> TranslationResult:
        from_lang = self._codes.translate(query.source_lang)
        to_lang = self._codes.translate(query.target_lang)

        quick, details = await asyncio.gather(
            self._quick_translation(client, context, from_lang, to_lang, query.text),
            self._detail_translation(client, context, from_lang, to_lang, query.text),
            return_exceptions=True,
        )
        # Both calls have settled; surface the first failure.
        for outcome in (quick, details):
            if isinstance(outcome, BaseException):
                raise outcome

        return TranslationResult(
            source_url=source_url(query, translator_url=self._settings.translator_url, codes=self._codes),
            from_lang=from_lang,
            to_lang=to_lang,
            query=query.text,
            query_voice=voice_url(domain=context.domain, token=context.token, lang=from_lang, text=query.text),
            translation=quick,
            translation_voice=voice_url(domain=context.domain, token=context.token, lang=to_lang, text=quick),
            details=details,
        )

    async def _quick_translation(
        self,
        client: httpx.AsyncClient,
        context: SessionContext,
        from_lang: str,
        to_lang: str,
        text: str,
    ) -> str:
        response = await send_checked(
            client,
            "POST",
            api_url(context, "ttranslatev3"),
            data={"fromLang": from_lang, "to": to_lang, "text": text},
        )
        return parse_quick_translation(response.content)

    async def _detail_translation(
        self,
        client: httpx.AsyncClient,
        context: SessionContext,
        from_lang: str,
        to_lang: str,
        text: str,
    ) -> list[Detail]:
        response = await send_checked(
            client,
            "POST",
            api_url(context, "tlookupv3"),
            data={"from": from_lang, "to": to_lang, "text": text},
        )
        return parse_detail_translation(response.content)
