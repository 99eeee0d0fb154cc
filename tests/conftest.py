"""Pytest configuration and shared fixtures."""
import asyncio
import os
from typing import Any

import pytest

from mitra.chat import ChatController, ResponseClient
from mitra.llm import ChatMessage, LLMProvider, LLMResponse


class FakeProvider(LLMProvider):
    """LLM provider double that never touches the network.

    Replies with `reply` (reporting `usage`), raises `error` if set, and
    records every request.
    When `gate` is set, each call waits on it before answering.
    """

    def __init__(
        self,
        reply: str = "I hear you. That sounds hard.",
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
        usage: dict[str, int] | None = None,
    ) -> None:
        self.reply = reply
        self.usage = usage
        self.error = error
        self.gate = gate
        self.requests: list[list[ChatMessage]] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "fake-model"

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        self.requests.append(messages)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.reply, model=self.model, usage=self.usage)

    async def close(self) -> None:
        self.closed = True


class BrokenClient(ResponseClient):
    """Client that breaks its own contract by raising from get_reply."""

    def __init__(self) -> None:
        super().__init__(FakeProvider())

    async def get_reply(self, user_text, language):
        raise RuntimeError("client blew up")


@pytest.fixture
def fake_provider():
    """A provider that answers successfully."""
    return FakeProvider()


@pytest.fixture
def failing_provider():
    """A provider whose every call fails, as if the model were unreachable."""
    return FakeProvider(error=ConnectionError("model unreachable"))


@pytest.fixture
def client(fake_provider):
    return ResponseClient(fake_provider)


@pytest.fixture
def controller(client):
    return ChatController(client)


@pytest.fixture
def failing_controller(failing_provider):
    return ChatController(ResponseClient(failing_provider))


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "gemini": os.getenv("GEMINI_API_KEY"),
    }
