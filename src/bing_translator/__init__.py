"""Bing Translator plugin for the DictHub dictionary application.

Entry point for hosts: `create_plugin()` returns a provider exposing
`id()`, `meta()`, `can_translate(query)` and `await translate(query)`.
"""

from bing_translator.core.domain.models import Query
from bing_translator.core.services.provider import BingTranslationProvider, create_plugin

__all__ = ["BingTranslationProvider", "Query", "create_plugin"]

__version__ = "0.2.0"
