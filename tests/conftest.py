from __future__ import annotations

import json
import random

import httpx
import pytest

from chat_proxy.core.settings import Settings
from chat_proxy.services.groq_service import GroqService
from chat_proxy.services.model_registry import ModelRegistry


def make_settings(api_key: str = "", **overrides) -> Settings:
    return Settings(_env_file=None, GROQ_API_KEY=api_key, **overrides)


def completion_body(content: str) -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


class UpstreamRecorder:
    """httpx.MockTransport handler that records what the proxy forwards."""

    def __init__(self, status_code: int = 200, body: dict | None = None):
        self.status_code = status_code
        self.body = body if body is not None else completion_body("Hello from Groq")
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def upstream() -> UpstreamRecorder:
    return UpstreamRecorder()


@pytest.fixture
def make_service():
    def _make(api_key: str = "", handler=None) -> GroqService:
        settings = make_settings(api_key)
        transport = httpx.MockTransport(handler) if handler is not None else None
        return GroqService(
            settings=settings,
            registry=ModelRegistry(current=settings.groq_default_model),
            transport=transport,
            rng=random.Random(0),
        )

    return _make


@pytest.fixture
def make_upstream():
    def _make(status_code: int = 200, body: dict | None = None) -> UpstreamRecorder:
        return UpstreamRecorder(status_code=status_code, body=body)

    return _make


@pytest.fixture
def completion():
    return completion_body
