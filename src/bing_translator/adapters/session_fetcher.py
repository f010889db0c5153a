"""Session context acquisition.

Bing's translator API is undocumented: every call needs the `IG` token that
the landing page embeds in an inline script (`IG:"<alnum>"`). The token is
bound to the host that issued it, and `www.bing.com` may redirect to a
regional domain (`cn.bing.com`, ...), so the domain is read from the final
response URL rather than from the requested one.
"""

from __future__ import annotations

import logging
import re

import httpx

from bing_translator.adapters.http_client import build_async_client, send_checked
from bing_translator.core.config import AppSettings
from bing_translator.core.domain.models import SessionContext
from bing_translator.core.errors import SessionUnavailable

logger = logging.getLogger(__name__)

IG_PATTERN = re.compile(r'IG:"([A-Za-z0-9]+)"')


def extract_session_context(*, html: str, final_url: httpx.URL | str) -> SessionContext:
    """Build a `SessionContext` from a landing-page body and the URL that served it."""

    match = IG_PATTERN.search(html or "")
    if match is None:
        raise SessionUnavailable("No IG token found in the translator landing page")

    # netloc keeps a non-default port.
    domain = httpx.URL(str(final_url)).netloc.decode("ascii")
    if not domain:
        raise SessionUnavailable(f"Cannot derive a domain from {final_url!r}")
    return SessionContext(domain=domain, token=match.group(1))


class SessionContextFetcher:
    """Scrapes a fresh session context. Never touches the cache."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def fetch(self) -> SessionContext:
        url = self._settings.translator_url
        if self._client is not None:
            response = await send_checked(self._client, "GET", url)
        else:
            async with build_async_client(self._settings) as client:
                response = await send_checked(client, "GET", url)

        context = extract_session_context(html=response.text, final_url=response.url)
        if str(response.url) != url:
            logger.debug("Landing page %s redirected to %s", url, response.url)
        logger.info("Fetched session context for %s", context.domain)
        return context
