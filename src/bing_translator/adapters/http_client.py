"""httpx wrapper.

- Standardizes timeouts, headers and redirect policy for every Bing call.
- Eases testing: callers accept a pre-built client, so tests plug in an
  `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from bing_translator.core.config import AppSettings
from bing_translator.core.errors import TransportFailure


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the plugin defaults.

    Redirects are followed: Bing bounces the landing page between regional
    domains, and the final host is what the session fetcher records.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/json;q=0.9,*/*;q=0.8",
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


async def send_checked(client: httpx.AsyncClient, method: str, url: str, **kwargs) -> httpx.Response:
    """Send a request and map any httpx failure (including non-2xx) to `TransportFailure`."""

    try:
        response = await client.request(method, url, **kwargs)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise TransportFailure(
            f"HTTP {exc.response.status_code} from {exc.request.url}",
            url=str(exc.request.url),
            status_code=exc.response.status_code,
        ) from exc
    except httpx.HTTPError as exc:
        raise TransportFailure(f"{type(exc).__name__}: {exc}", url=url) from exc
    return response
