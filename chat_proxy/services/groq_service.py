from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import httpx

from chat_proxy.core.errors import (
    InvalidCredential,
    InvalidRequest,
    MalformedUpstreamResponse,
    RateLimited,
    UpstreamError,
    UpstreamFailure,
)
from chat_proxy.core.settings import Settings, get_settings
from chat_proxy.models.chat import ChatResponse, ChatTurn
from chat_proxy.models.llm import (
    ConfigResponse,
    HealthResponse,
    ModelsResponse,
    SelectModelResponse,
)
from chat_proxy.services.mock_responses import get_mock_response
from chat_proxy.services.model_registry import ModelRegistry
from chat_proxy.services.prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)

PROVIDER = "Groq"
MAX_HISTORY_TURNS = 6


def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Completion:
    text: str
    is_mock: bool


def build_messages(message: str, history: list[ChatTurn]) -> list[dict[str, str]]:
    """System prompt, then the last few turns in order, then the new message."""
    messages = [{"role": "system", "content": SYSTEM_PROMPT}]
    for turn in history[-MAX_HISTORY_TURNS:]:
        messages.append({"role": "user", "content": turn.user})
        messages.append({"role": "assistant", "content": turn.assistant})
    messages.append({"role": "user", "content": message})
    return messages


class GroqService:
    def __init__(
        self,
        settings: Settings | None = None,
        registry: ModelRegistry | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        rng: random.Random | None = None,
    ):
        self._settings = settings or get_settings()
        self._registry = registry or ModelRegistry(
            current=self._settings.groq_default_model
        )
        # Tests swap in httpx.MockTransport; None means the real network.
        self._transport = transport
        self._rng = rng

    @property
    def has_api_key(self) -> bool:
        return self._settings.has_api_key

    def mock_response(self, message: str) -> str:
        return get_mock_response(message, self._rng)

    async def chat(self, message: str | None, history: list[ChatTurn]) -> ChatResponse:
        if not message:
            raise InvalidRequest("Message is required")

        model = self._registry.current
        completion = await self.complete_or_mock(message, history, model)

        return ChatResponse(
            response=completion.text.strip(),
            timestamp=utc_timestamp(),
            model=model,
            is_mock=completion.is_mock,
        )

    async def complete_or_mock(
        self, message: str, history: list[ChatTurn], model: str
    ) -> Completion:
        if not self.has_api_key:
            logger.info("Using mock response (no valid Groq API key)")
            return Completion(text=self.mock_response(message), is_mock=True)

        try:
            text = await self.complete(build_messages(message, history), model)
        except UpstreamFailure as e:
            logger.warning("Groq API call failed: %s", e.message)
            return Completion(text=self.mock_response(message), is_mock=True)

        return Completion(text=text, is_mock=False)

    async def complete(self, messages: list[dict[str, str]], model: str) -> str:
        payload = {
            "model": model,
            "messages": messages,
            "temperature": self._settings.groq_temperature,
            "max_tokens": self._settings.groq_max_tokens,
            "top_p": self._settings.groq_top_p,
            "stream": False,
        }
        headers = {
            "Authorization": f"Bearer {self._settings.groq_api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(
                base_url=self._settings.groq_base_url,
                timeout=self._settings.groq_timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    "/chat/completions", json=payload, headers=headers
                )
        except httpx.HTTPError as e:
            raise UpstreamError(None, str(e) or e.__class__.__name__) from e

        if response.is_error:
            raise self._error_for(response)

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedUpstreamResponse() from e

        return _extract_content(data)

    def _error_for(self, response: httpx.Response) -> UpstreamFailure:
        error_data: Any = {}
        try:
            error_data = response.json()
        except ValueError:
            pass
        logger.error(
            "Groq API error: %s %s %s",
            response.status_code,
            response.reason_phrase,
            error_data,
        )

        if response.status_code == 401:
            return InvalidCredential()
        if response.status_code == 429:
            return RateLimited()

        detail = None
        if isinstance(error_data, dict) and isinstance(error_data.get("error"), dict):
            detail = error_data["error"].get("message")
        return UpstreamError(response.status_code, detail or response.reason_phrase)

    def list_models(self) -> ModelsResponse:
        return ModelsResponse(
            models=self._registry.models,
            current_model=self._registry.current,
            has_api_key=self.has_api_key,
        )

    def select_model(self, model: object) -> SelectModelResponse:
        current = self._registry.select(model)
        return SelectModelResponse(
            message=f"Model changed to {current}",
            current_model=current,
        )

    def health(self) -> HealthResponse:
        return HealthResponse(
            timestamp=utc_timestamp(),
            model=self._registry.current,
            has_api_key=self.has_api_key,
            message="API key found" if self.has_api_key else "No API key configured",
            provider=PROVIDER,
        )

    def config(self) -> ConfigResponse:
        return ConfigResponse(
            has_api_key=self.has_api_key,
            current_model=self._registry.current,
            available_models=self._registry.models,
            provider=PROVIDER,
        )


def _extract_content(data: Any) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedUpstreamResponse() from e

    if not isinstance(content, str) or not content:
        raise MalformedUpstreamResponse()
    return content
