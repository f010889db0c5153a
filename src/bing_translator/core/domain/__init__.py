"""Domain models and language codes.

Pure data structures (Pydantic v2): no HTTP, no templates, no CLI.
"""

from bing_translator.core.domain.language import LANGUAGE_CODES, LanguageCodeMap
from bing_translator.core.domain.models import (
    Detail,
    Meaning,
    ProviderMeta,
    Query,
    SessionContext,
    TranslationResult,
)

__all__ = [
    "Detail",
    "LANGUAGE_CODES",
    "LanguageCodeMap",
    "Meaning",
    "ProviderMeta",
    "Query",
    "SessionContext",
    "TranslationResult",
]
