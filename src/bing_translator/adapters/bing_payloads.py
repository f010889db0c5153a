"""Wire models for Bing's translator endpoints.

Both endpoints answer with a JSON array whose first element carries a
`translations` list. The shapes are validated once here; the rest of the
code only sees typed values.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, TypeAdapter, field_validator
from pydantic.config import ConfigDict

JSON_ARRAY = TypeAdapter(list[Any])


class QuickTranslation(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str


class QuickTranslationEntry(BaseModel):
    """Element of the `ttranslatev3` response."""

    model_config = ConfigDict(extra="ignore")

    translations: list[QuickTranslation] = Field(..., min_length=1)


class BackTranslation(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    normalized_text: str = Field(..., alias="normalizedText")


class LookupTranslation(BaseModel):
    """Single alternative of the `tlookupv3` response.

    `back_translations` stays untyped: its elements are validated one by one
    so that a bad example does not discard the whole meaning.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    pos_tag: str = Field(..., alias="posTag")
    normalized_target: str = Field(..., alias="normalizedTarget")
    back_translations: list[Any] = Field(default_factory=list, alias="backTranslations")

    @field_validator("back_translations", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class LookupEntry(BaseModel):
    """Element of the `tlookupv3` response."""

    model_config = ConfigDict(extra="ignore")

    translations: list[Any] = Field(default_factory=list)
