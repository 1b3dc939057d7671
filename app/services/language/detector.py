"""Language detection through the completion provider.

detect() never raises. Any upstream failure or a reply that is not a bare
two-letter code falls back to English, and callers rely on that.
"""

import re

import structlog

from app.services.llm.base import LLMProvider

logger = structlog.get_logger(__name__)

DEFAULT_LANGUAGE = "en"

_CODE_PATTERN = re.compile(r"^[a-z]{2}$")

_SYSTEM_PROMPT = """You are a language detection expert. Your task is to detect the language of the given text and return ONLY the ISO 639-1 language code (2 letters, lowercase).

Rules:
- Return ONLY the 2-letter ISO 639-1 code
- No explanations, no additional text
- If uncertain, return your best guess
- For mixed languages, return the dominant language
- Common codes: en (English), es (Spanish), fr (French), de (German), it (Italian), pt (Portuguese), ru (Russian), ja (Japanese), ko (Korean), zh (Chinese), ar (Arabic), hi (Hindi), etc."""


class LanguageDetector:
    """Best-guess ISO 639-1 detection backed by an LLMProvider."""

    def __init__(self, llm: LLMProvider) -> None:
        self._llm = llm

    async def detect(self, text: str) -> str:
        """Returns a two-letter lowercase code, or "en" when detection fails."""
        prompt = f'Detect the language of this text: "{text}"'
        try:
            response = await self._llm.generate(prompt, _SYSTEM_PROMPT)
        except Exception as e:
            logger.error(
                "language_detection_failed",
                error=str(e),
                text_len=len(text),
            )
            return DEFAULT_LANGUAGE

        detected = response.text.strip().lower()
        if _CODE_PATTERN.match(detected):
            return detected

        logger.warning(
            "invalid_language_code_detected",
            detected=detected,
            fallback=DEFAULT_LANGUAGE,
        )
        return DEFAULT_LANGUAGE
