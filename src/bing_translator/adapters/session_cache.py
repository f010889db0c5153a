"""Session cache: last known `{domain, token}` pair.

The pair lives under two independent string keys of a key-value store. Any
`MutableMapping[str, str]` works (a plain dict in tests); `JsonFileStore`
persists the keys in the user config directory so the token survives
across invocations.

There is no expiry: a stale token is only discovered when a call made with
it fails.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, MutableMapping
from pathlib import Path

from bing_translator.core.config import AppSettings
from bing_translator.core.domain.models import SessionContext

logger = logging.getLogger(__name__)

DOMAIN_KEY = "bing_translator.domain"
TOKEN_KEY = "bing_translator.token"


class JsonFileStore(MutableMapping[str, str]):
    """Flat string-to-string store backed by a JSON file.

    Every write rewrites the whole file; the store only ever holds a
    couple of keys.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._data: dict[str, str] = self._read()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable session store %s: %s", self._path, exc)
            return {}
        if not isinstance(raw, dict):
            return {}
        return {k: v for k, v in raw.items() if isinstance(k, str) and isinstance(v, str)}

    def _write(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps(self._data, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            # The in-memory copy stays authoritative for this process.
            logger.warning("Could not write session store %s: %s", self._path, exc)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value
        self._write()

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        self._write()

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


class SessionCache:
    def __init__(self, store: MutableMapping[str, str]) -> None:
        self._store = store

    def load(self) -> SessionContext | None:
        """Return the cached pair, or None unless both keys are present and non-empty."""

        domain = self._store.get(DOMAIN_KEY)
        token = self._store.get(TOKEN_KEY)
        if not domain or not token:
            return None
        return SessionContext(domain=domain, token=token)

    def save(self, context: SessionContext) -> None:
        self._store[DOMAIN_KEY] = context.domain
        self._store[TOKEN_KEY] = context.token
        logger.debug("Cached session context for %s", context.domain)

    def clear(self) -> None:
        for key in (DOMAIN_KEY, TOKEN_KEY):
            self._store.pop(key, None)


def open_session_cache(settings: AppSettings | None = None) -> SessionCache:
    """Session cache persisted at `settings.session_cache_path` (user config dir by default)."""

    settings = settings or AppSettings()
    return SessionCache(JsonFileStore(settings.resolved_session_cache_path()))
