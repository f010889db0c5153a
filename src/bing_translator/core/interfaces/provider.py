"""Provider and collaborator contracts.

Structural (Protocol) contracts: the host only needs duck typing, and tests
can swap any collaborator for a fake without inheritance.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bing_translator.core.domain.models import (
    ProviderMeta,
    Query,
    SessionContext,
    TranslationResult,
)


@runtime_checkable
class TranslationProvider(Protocol):
    """Capability interface expected by the host dictionary application.

    Design rules:
    - `translate` is async because it performs HTTP I/O.
    - `translate` never raises: failures come back as a rendered fragment.
    """

    def id(self) -> str: ...

    def meta(self) -> ProviderMeta: ...

    def can_translate(self, query: Query) -> bool: ...

    async def translate(self, query: Query) -> str:
        """Translate `query` and return an HTML fragment."""

        ...


class SessionFetcher(Protocol):
    async def fetch(self) -> SessionContext: ...


class Translator(Protocol):
    async def translate(self, context: SessionContext, query: Query) -> TranslationResult: ...


class SessionStore(Protocol):
    def load(self) -> SessionContext | None: ...

    def save(self, context: SessionContext) -> None: ...
