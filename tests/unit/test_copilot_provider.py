"""Unit tests for CopilotProvider against an in-process httpx transport.

Tests:
  - request payload matches the completion API schema
  - response.content is returned verbatim
  - transport errors, non-2xx statuses, non-JSON bodies, non-200 logical
    codes and missing content raise CopilotAPIError
"""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from app.core.exceptions import CopilotAPIError
from app.services.llm.copilot import CopilotProvider

BASE_URL = "https://copilot.test/v1/ai/copilot"


def _provider(handler: Callable[[httpx.Request], httpx.Response]) -> CopilotProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return CopilotProvider(client=client, base_url=BASE_URL)


def _ok(content: Any) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"code": 200, "status": "OK", "response": {"content": content}},
        )

    return handler


@pytest.mark.asyncio
class TestCopilotProvider:
    async def test_posts_two_message_chat(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return _ok("fr")(request)

        await _provider(handler).generate("user text", "system text")

        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == BASE_URL
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == {
            "stream": "false",
            "messages": [
                {"role": "system", "content": "system text"},
                {"role": "user", "content": "user text"},
            ],
        }

    async def test_returns_content(self) -> None:
        response = await _provider(_ok(" Hola \n")).generate("p", "s")
        assert response.text == " Hola \n"

    async def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(CopilotAPIError, match="connection refused"):
            await _provider(handler).generate("p", "s")

    async def test_http_error_status(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="down")

        with pytest.raises(CopilotAPIError) as exc_info:
            await _provider(handler).generate("p", "s")
        assert exc_info.value.message == "Copilot API error: 503 Service Unavailable"

    async def test_non_json_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>")

        with pytest.raises(CopilotAPIError, match="Invalid JSON"):
            await _provider(handler).generate("p", "s")

    async def test_logical_error_code(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={"code": 429, "status": "Too Many", "response": {"content": "x"}},
            )

        with pytest.raises(CopilotAPIError, match="Invalid response from Copilot API"):
            await _provider(handler).generate("p", "s")

    @pytest.mark.parametrize(
        "body",
        [
            {"code": 200, "status": "OK"},
            {"code": 200, "status": "OK", "response": None},
            {"code": 200, "status": "OK", "response": {}},
            {"code": 200, "status": "OK", "response": {"content": ""}},
            {"code": 200, "status": "OK", "response": {"content": 42}},
            ["not", "an", "object"],
        ],
    )
    async def test_missing_content(self, body: Any) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=body)

        with pytest.raises(CopilotAPIError) as exc_info:
            await _provider(handler).generate("p", "s")
        assert exc_info.value.message.startswith("Invalid response from Copilot API: ")
