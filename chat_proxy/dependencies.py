from __future__ import annotations

from functools import lru_cache

from chat_proxy.core.settings import get_settings
from chat_proxy.services.groq_service import GroqService
from chat_proxy.services.model_registry import ModelRegistry


@lru_cache
def get_model_registry() -> ModelRegistry:
    return ModelRegistry(current=get_settings().groq_default_model)


@lru_cache
def get_groq_service() -> GroqService:
    return GroqService(settings=get_settings(), registry=get_model_registry())
