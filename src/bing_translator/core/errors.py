"""Error taxonomy of the plugin.

Only the provider's outermost boundary catches these: a failure with a cached
session triggers one refresh, a failure with a fresh session becomes a
failure fragment.
"""

from __future__ import annotations


class BingTranslatorError(Exception):
    """Base class for every error raised by this package."""


class SessionUnavailable(BingTranslatorError):
    """The landing page did not contain an extractable IG token."""


class TransportFailure(BingTranslatorError):
    """Network error or non-2xx HTTP status while talking to Bing."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class TranslationNotFound(BingTranslatorError):
    """The quick-translation payload did not have the expected shape."""
