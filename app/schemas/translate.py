"""Translate endpoint request/response schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TranslationRequest(BaseModel):
    """POST / request body.

    Fields accept any JSON value; type and code checks happen in
    TranslationService so the error messages stay stable.
    """

    model_config = ConfigDict(extra="ignore")

    text: Any = None
    from_: Any = Field(default=None, alias="from")
    to: Any = "en"


class TranslationResult(BaseModel):
    """Payload of a successful translation."""

    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(alias="translatedText")
    source_language: str = Field(alias="sourceLanguage")
    target_language: str = Field(alias="targetLanguage")
    original_text: str = Field(alias="originalText")


class TranslationResponse(BaseModel):
    """POST / success envelope."""

    code: int = 200
    status: str = "Success"
    data: TranslationResult


class SupportedLanguages(BaseModel):
    languages: list[str]


class SupportedLanguagesResponse(BaseModel):
    """GET /languages response body."""

    code: int = 200
    status: str = "Success"
    data: SupportedLanguages
