"""Translation request orchestration.

TranslationService.handle() does exactly these things in order:
1. Validate text, then 'from' (when given), then 'to' (always)
2. Detect the source language when 'from' is absent
3. Return the input unchanged when source and target codes are equal
4. Otherwise translate via the Translator
"""

from __future__ import annotations

import json
from typing import Any

import structlog

from app.core.exceptions import InvalidParameterError
from app.schemas.translate import TranslationRequest, TranslationResult
from app.services.language.codes import validate_language_code
from app.services.language.detector import LanguageDetector
from app.services.language.translator import Translator

logger = structlog.get_logger(__name__)


def _render(value: Any) -> str:
    """Render a body value as it appeared on the wire (null, true, 12, ...)."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def validate_request(request: TranslationRequest) -> None:
    """Raise InvalidParameterError for the first bad field, in wire order."""
    text = request.text
    if not text or not isinstance(text, str) or not text.strip():
        raise InvalidParameterError("Missing or invalid 'text' parameter")

    if request.from_ and not validate_language_code(request.from_):
        raise InvalidParameterError(
            f"Invalid 'from' language code: {_render(request.from_)}"
        )

    if not validate_language_code(request.to):
        raise InvalidParameterError(
            f"Invalid 'to' language code: {_render(request.to)}"
        )


class TranslationService:
    """Validates a request and resolves it into a TranslationResult."""

    def __init__(self, detector: LanguageDetector, translator: Translator) -> None:
        self._detector = detector
        self._translator = translator

    async def handle(self, request: TranslationRequest) -> TranslationResult:
        """Run one translation request.

        Raises:
            InvalidParameterError: On a missing text or unsupported code.
            TranslationError: If the upstream translation fails.
        """
        validate_request(request)
        text: str = request.text
        target: str = request.to

        source = request.from_
        if not source:
            source = await self._detector.detect(text)
            logger.info("source_language_detected", source_language=source)

        # Plain code equality; the text itself is never inspected.
        if source == target:
            translated = text
        else:
            translated = await self._translator.translate(text, source, target)

        return TranslationResult(
            translated_text=translated,
            source_language=source,
            target_language=target,
            original_text=text,
        )
