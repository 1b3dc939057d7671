"""Copilot completion API provider.

The API takes a two-message chat (system + user) with ``stream`` set to the
string "false" and answers with ``{"code", "status", "response": {"content"}}``.
A non-200 ``code`` or missing content is treated as a failed call.
"""

import json

import httpx
import structlog

from app.core.exceptions import CopilotAPIError
from app.services.llm.base import LLMProvider, LLMResponse

logger = structlog.get_logger(__name__)


class CopilotProvider(LLMProvider):
    """Completion provider backed by the Copilot HTTP API."""

    def __init__(self, client: httpx.AsyncClient, base_url: str) -> None:
        self._client = client
        self._base_url = base_url
        logger.info("copilot_provider_initialized", base_url=base_url)

    async def generate(self, prompt: str, system_prompt: str) -> LLMResponse:
        """POST one system/user exchange and return the reply content."""
        payload = {
            "stream": "false",
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
        }
        try:
            response = await self._client.post(
                self._base_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.error(
                "copilot_generate_failed",
                error=str(e),
                prompt_len=len(prompt),
            )
            raise CopilotAPIError(f"Copilot API request failed: {e}") from e

        if not response.is_success:
            logger.error(
                "copilot_generate_bad_status",
                status_code=response.status_code,
                prompt_len=len(prompt),
            )
            raise CopilotAPIError(
                f"Copilot API error: {response.status_code} {response.reason_phrase}"
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error("copilot_generate_invalid_json", prompt_len=len(prompt))
            raise CopilotAPIError(f"Invalid JSON from Copilot API: {e}") from e

        content = _extract_content(data)
        if content is None:
            logger.error("copilot_generate_invalid_response", prompt_len=len(prompt))
            raise CopilotAPIError(
                f"Invalid response from Copilot API: {json.dumps(data)}"
            )

        logger.debug(
            "copilot_generate_ok",
            prompt_len=len(prompt),
            content_len=len(content),
        )
        return LLMResponse(text=content)


def _extract_content(data: object) -> str | None:
    """Return ``response.content`` when the payload reports success."""
    if not isinstance(data, dict) or data.get("code") != 200:
        return None
    body = data.get("response")
    if not isinstance(body, dict):
        return None
    content = body.get("content")
    if not isinstance(content, str) or not content:
        return None
    return content
