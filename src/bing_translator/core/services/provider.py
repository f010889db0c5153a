"""Bing translation provider: composition root of the plugin.

This module wires the session fetcher, the session cache, the API client and
the renderer behind the host's capability interface, and owns the retry
policy:

1. If a session context is cached, translate with it. Success is rendered
   as is (the cache is already correct).
2. Otherwise, or when the cached attempt fails for any reason, fetch a fresh
   context, persist it and translate once more. That attempt is terminal:
   its failure is rendered as a failure fragment.

So there is at most one silent retry, and `translate` never raises.
"""

from __future__ import annotations

import logging
from types import TracebackType

import httpx

from bing_translator.adapters.http_client import build_async_client
from bing_translator.adapters.renderer import ResultRenderer
from bing_translator.adapters.session_cache import open_session_cache
from bing_translator.adapters.session_fetcher import SessionContextFetcher
from bing_translator.adapters.translation_client import TranslationClient, source_url
from bing_translator.core.config import AppSettings
from bing_translator.core.domain.language import LANGUAGE_CODES, LanguageCodeMap
from bing_translator.core.domain.models import ProviderMeta, Query
from bing_translator.core.interfaces.provider import SessionFetcher, SessionStore, Translator

logger = logging.getLogger(__name__)

PROVIDER_ID = "plugin-com-bing-translator"

PROVIDER_META = ProviderMeta(
    name="Bing microsoft translator",
    description="Bing multiple language translation",
    source="Bing Microsoft Translator",
    source_url="https://www.bing.com/translator",
    author="DictHub",
    author_url="https://github.com/willings/DictHub",
)


class BingTranslationProvider:
    """Implements `core.interfaces.provider.TranslationProvider`."""

    def __init__(
        self,
        *,
        fetcher: SessionFetcher,
        client: Translator,
        cache: SessionStore,
        renderer: ResultRenderer,
        settings: AppSettings | None = None,
        codes: LanguageCodeMap = LANGUAGE_CODES,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._client = client
        self._cache = cache
        self._renderer = renderer
        self._settings = settings or AppSettings()
        self._codes = codes
        # Owned client (see `create_plugin`), closed by `aclose`.
        self._http_client = http_client

    def id(self) -> str:
        return PROVIDER_ID

    def meta(self) -> ProviderMeta:
        return PROVIDER_META

    def can_translate(self, query: Query) -> bool:
        return self._codes.supports(query.source_lang) and self._codes.supports(query.target_lang)

    async def translate(self, query: Query) -> str:
        cached = self._cache.load()
        if cached is not None:
            try:
                result = await self._client.translate(cached, query)
            except Exception as exc:
                logger.info("Cached session for %s failed (%s), refreshing", cached.domain, exc)
            else:
                return self._renderer.render(result)

        return await self._translate_with_fresh_session(query)

    async def _translate_with_fresh_session(self, query: Query) -> str:
        try:
            context = await self._fetcher.fetch()
            self._cache.save(context)
            result = await self._client.translate(context, query)
        except Exception as exc:
            logger.warning("Translation of %r failed with a fresh session", query.text, exc_info=True)
            return self._renderer.render_failure(
                self.id(),
                source_url(query, translator_url=self._settings.translator_url, codes=self._codes),
                query,
                exc,
            )
        return self._renderer.render(result)

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()

    async def __aenter__(self) -> BingTranslationProvider:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def create_plugin(
    settings: AppSettings | None = None,
    *,
    cache: SessionStore | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> BingTranslationProvider:
    """Build a ready-to-use provider sharing one HTTP client.

    `cache` defaults to the persistent JSON cache in the user config dir.
    """

    settings = settings or AppSettings()
    http_client = build_async_client(settings, transport=transport)
    cache = cache if cache is not None else open_session_cache(settings)
    return BingTranslationProvider(
        fetcher=SessionContextFetcher(settings, client=http_client),
        client=TranslationClient(settings, client=http_client),
        cache=cache,
        renderer=ResultRenderer(settings),
        settings=settings,
        http_client=http_client,
    )
