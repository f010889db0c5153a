"""Language code mapping between the host and Bing.

The host speaks canonical codes (ISO 639-1 plus `zh-CN`/`zh-TW`); Bing uses
its own identifiers for a handful of them. Keeping the table in the domain
layer lets the provider and the CLI share a single source of truth.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

BING_LANG_CODES: Mapping[str, str] = MappingProxyType(
    {
        "af": "af",
        "ar": "ar",
        "bg": "bg",
        "bn": "bn-BD",
        "bs": "bs-Latn",
        "ca": "ca",
        "cs": "cs",
        "cy": "cy",
        "da": "da",
        "de": "de",
        "el": "el",
        "en": "en",
        "es": "es",
        "et": "et",
        "fa": "fa",
        "fi": "fi",
        "fj": "fj",
        "fr": "fr",
        "he": "he",
        "hi": "hi",
        "hr": "hr",
        "ht": "ht",
        "hu": "hu",
        "id": "id",
        "is": "is",
        "it": "it",
        "ja": "ja",
        "ko": "ko",
        "lt": "lt",
        "lv": "lv",
        "mg": "mg",
        "ms": "ms",
        "mt": "mt",
        "nl": "nl",
        "no": "nb",
        "pl": "pl",
        "pt": "pt",
        "ro": "ro",
        "ru": "ru",
        "sk": "sk",
        "sl": "sl",
        "sm": "sm",
        "sr": "sr-Latn",
        "sv": "sv",
        "sw": "sw",
        "ta": "ta",
        "te": "te",
        "th": "th",
        "tl": "fil",
        "to": "to",
        "tr": "tr",
        "ty": "ty",
        "uk": "uk",
        "ur": "ur",
        "vi": "vi",
        "zh-CN": "zh-Hans",
        "zh-TW": "zh-Hant",
    }
)


class LanguageCodeMap:
    """Pure lookup from canonical codes to Bing codes."""

    def __init__(self, codes: Mapping[str, str] | None = None) -> None:
        self._codes = BING_LANG_CODES if codes is None else codes

    def supports(self, code: str) -> bool:
        return code in self._codes

    def translate(self, code: str) -> str:
        """Return Bing's code for `code`, or `code` itself when unmapped."""

        return self._codes.get(code, code)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._codes.items())

    def __len__(self) -> int:
        return len(self._codes)


LANGUAGE_CODES = LanguageCodeMap()
