from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ModelsResponse(_CamelModel):
    models: dict[str, str]
    current_model: str = Field(alias="currentModel")
    has_api_key: bool = Field(alias="hasApiKey")


class SelectModelRequest(BaseModel):
    # Left untyped so any unknown value, strings or not, gets the same 400.
    model: Any = None


class SelectModelResponse(_CamelModel):
    message: str
    current_model: str = Field(alias="currentModel")
    note: str = "Model changed successfully"


class HealthResponse(_CamelModel):
    status: str = "OK"
    timestamp: str
    model: str
    has_api_key: bool = Field(alias="hasApiKey")
    message: str
    provider: str


class ConfigResponse(_CamelModel):
    has_api_key: bool = Field(alias="hasApiKey")
    current_model: str = Field(alias="currentModel")
    available_models: dict[str, str] = Field(alias="availableModels")
    provider: str
    note: str = "Set GROQ_API_KEY in .env file for real AI responses"


class ErrorResponse(BaseModel):
    error: str
