"""Shared pytest fixtures for the translate API test suite.

Provides:
  - MockLLMProvider: LLMProvider fake returning configurable replies and
    recording every call
  - mock_llm: a MockLLMProvider fixture
  - client_factory: builds a TestClient around a given LLMProvider
  - client: TestClient wired to mock_llm

All upstream calls are faked in every test; nothing reaches the network.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_llm_provider
from app.main import app
from app.services.llm.base import LLMProvider, LLMResponse

DETECTION_MARKER = "language detection expert"
TRANSLATION_MARKER = "professional translator"


class MockLLMProvider(LLMProvider):
    """Mock LLM provider for testing. Returns configurable responses.

    ``replies`` are consumed in order; once exhausted, ``generate_text`` is
    returned. Setting ``error`` makes every call raise it.
    """

    def __init__(
        self,
        generate_text: str = "Mock response",
        replies: list[str] | None = None,
        error: Exception | None = None,
    ) -> None:
        self._generate_text = generate_text
        self._replies = list(replies or [])
        self._error = error
        self.generate_calls: list[dict[str, Any]] = []

    async def generate(self, prompt: str, system_prompt: str) -> LLMResponse:
        self.generate_calls.append(
            {"prompt": prompt, "system_prompt": system_prompt}
        )
        if self._error is not None:
            raise self._error
        if self._replies:
            return LLMResponse(text=self._replies.pop(0))
        return LLMResponse(text=self._generate_text)

    def calls_with(self, marker: str) -> list[dict[str, Any]]:
        """Calls whose system prompt contains ``marker``."""
        return [c for c in self.generate_calls if marker in c["system_prompt"]]

    @property
    def detection_calls(self) -> list[dict[str, Any]]:
        return self.calls_with(DETECTION_MARKER)

    @property
    def translation_calls(self) -> list[dict[str, Any]]:
        return self.calls_with(TRANSLATION_MARKER)


@pytest.fixture
def mock_llm() -> MockLLMProvider:
    """Mock LLM provider fixture."""
    return MockLLMProvider()


@pytest.fixture
def client_factory() -> Iterator[Callable[[LLMProvider], TestClient]]:
    """Build a TestClient whose LLM provider dependency is ``llm``.

    The lifespan is not started, so no real HTTP client is created.
    """

    def _make(llm: LLMProvider) -> TestClient:
        app.dependency_overrides[get_llm_provider] = lambda: llm
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(
    client_factory: Callable[[LLMProvider], TestClient],
    mock_llm: MockLLMProvider,
) -> TestClient:
    """TestClient wired to ``mock_llm``."""
    return client_factory(mock_llm)
