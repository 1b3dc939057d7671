"""Shared FastAPI dependencies for service injection.

The LLM provider is created once during the FastAPI lifespan and stored on
app.state. All downstream code retrieves it via Depends(), never by direct
import.
"""

from fastapi import Depends, Request

from app.services.language.detector import LanguageDetector
from app.services.language.translator import Translator
from app.services.llm.base import LLMProvider
from app.services.translation import TranslationService


def get_llm_provider(request: Request) -> LLMProvider:
    """Return the singleton LLM provider from app state."""
    return request.app.state.llm_provider


def get_language_detector(
    llm: LLMProvider = Depends(get_llm_provider),
) -> LanguageDetector:
    return LanguageDetector(llm=llm)


def get_translator(
    llm: LLMProvider = Depends(get_llm_provider),
) -> Translator:
    return Translator(llm=llm)


def get_translation_service(
    detector: LanguageDetector = Depends(get_language_detector),
    translator: Translator = Depends(get_translator),
) -> TranslationService:
    """Return a TranslationService wired with detector and translator."""
    return TranslationService(detector=detector, translator=translator)
