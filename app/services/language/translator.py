"""Translation through the completion provider.

Every failure surfaces as TranslationError. There is no retry: a failed
upstream call fails the request once.
"""

import structlog

from app.core.exceptions import TranslationError
from app.services.language.codes import get_language_name
from app.services.llm.base import LLMProvider

logger = structlog.get_logger(__name__)

_SYSTEM_PROMPT_TEMPLATE = """You are a professional translator with expertise in multiple languages. Your task is to translate text accurately while preserving the original meaning, tone, and context.

Rules:
- Translate the given text from {from_language} to {to_language}
- Maintain the original tone and style
- Preserve any formatting, punctuation, and special characters
- For technical terms, use the most appropriate equivalent
- For proper nouns, keep them as-is unless they have established translations
- Return ONLY the translated text, no explanations or additional content
- If the text is already in the target language, return it unchanged
- Handle idioms and cultural references appropriately"""


def build_prompts(text: str, from_code: str, to_code: str) -> tuple[str, str]:
    """Return (user_prompt, system_prompt) for one translation."""
    from_language = get_language_name(from_code)
    to_language = get_language_name(to_code)
    system_prompt = _SYSTEM_PROMPT_TEMPLATE.format(
        from_language=from_language,
        to_language=to_language,
    )
    prompt = f'Translate this {from_language} text to {to_language}: "{text}"'
    return prompt, system_prompt


class Translator:
    """Translates text between ISO 639-1 languages via an LLMProvider."""

    def __init__(self, llm: LLMProvider) -> None:
        self._llm = llm

    async def translate(self, text: str, from_code: str, to_code: str) -> str:
        """Translate ``text`` and return the trimmed reply.

        Raises:
            TranslationError: If the provider fails or replies with nothing.
        """
        prompt, system_prompt = build_prompts(text, from_code, to_code)
        try:
            response = await self._llm.generate(prompt, system_prompt)
            translated = response.text.strip()
            if not translated:
                raise TranslationError("Empty translation received from Copilot API")
        except Exception as e:
            logger.error(
                "translation_failed",
                error=str(e),
                source_language=from_code,
                target_language=to_code,
                text_len=len(text),
            )
            raise TranslationError(f"Translation failed: {e}") from e

        logger.debug(
            "translation_ok",
            source_language=from_code,
            target_language=to_code,
            text_len=len(text),
        )
        return translated
