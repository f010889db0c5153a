"""Domain models (Pydantic v2).

- Describe *what* a translation is, not *how* it is fetched.
- Frozen: a result is built once per call and handed to the renderer as is.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class SessionContext(BaseModel):
    """Credential pair scraped from the translator landing page.

    The token is only valid against the regional domain that issued it, so
    both travel together.
    """

    model_config = ConfigDict(frozen=True)

    domain: str = Field(
        ...,
        min_length=1,
        description="Host that served the landing page (e.g. 'cn.bing.com').",
    )
    token: str = Field(
        ...,
        min_length=1,
        description="IG token embedded in the landing page.",
    )


class Query(BaseModel):
    """Lookup requested by the host application (canonical language codes)."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Text to translate.")
    source_lang: str = Field(..., min_length=1, description="Canonical source language code.")
    target_lang: str = Field(..., min_length=1, description="Canonical target language code.")


class Meaning(BaseModel):
    model_config = ConfigDict(frozen=True)

    meaning: str = Field(..., description="Alternative translation (headword).")
    examples: list[str] = Field(
        default_factory=list,
        description="Back-translations of the headword into the source language.",
    )


class Detail(BaseModel):
    model_config = ConfigDict(frozen=True)

    poc: str = Field(..., description="Part-of-speech tag (Bing's `posTag`).")
    meanings: list[Meaning] = Field(default_factory=list)


class TranslationResult(BaseModel):
    """Unified result of the quick translation and the dictionary lookup.

    Language labels are Bing's codes, not the host's canonical ones.
    """

    model_config = ConfigDict(frozen=True)

    source_url: str
    from_lang: str
    to_lang: str
    query: str
    query_voice: str = Field(..., description="Audio URL pronouncing the query.")
    translation: str
    translation_voice: str = Field(..., description="Audio URL pronouncing the translation.")
    details: list[Detail] = Field(default_factory=list)


class ProviderMeta(BaseModel):
    """Static metadata shown by the host next to the provider."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    source: str
    source_url: str
    author: str
    author_url: str
