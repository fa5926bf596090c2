from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Values shipped in sample .env files; treated the same as an unset key.
PLACEHOLDER_API_KEYS = frozenset(
    {
        "your_groq_api_key_here",
        "your_api_key_here",
        "your_key_here",
        "changeme",
        "none",
        "null",
    }
)

AVAILABLE_MODELS: dict[str, str] = {
    "LLAMA3_70B": "llama-3.3-70b-versatile",
    "KIMI_K2": "moonshotai/kimi-k2-instruct",
    "LLAMA3_8B": "llama-3-8b-8192",
    "MIXTRAL_8X7B": "mixtral-8x7b-32768",
    "GEMMA_7B": "gemma-7b-it",
}

DEFAULT_MODEL = AVAILABLE_MODELS["KIMI_K2"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="Museum Chat Proxy", alias="APP_NAME")
    environment: Literal["local", "dev", "staging", "prod"] = Field(
        default="local", alias="ENVIRONMENT"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=5000, alias="PORT")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], alias="CORS_ORIGINS")

    groq_api_key: str | None = Field(default=None, alias="GROQ_API_KEY")
    groq_base_url: str = Field(
        default="https://api.groq.com/openai/v1", alias="GROQ_BASE_URL"
    )
    groq_default_model: str = Field(default=DEFAULT_MODEL, alias="GROQ_MODEL")
    groq_timeout: float = Field(default=30.0, gt=0, alias="GROQ_TIMEOUT")

    groq_temperature: float = Field(default=0.7, ge=0, le=2, alias="GROQ_TEMPERATURE")
    groq_top_p: float = Field(default=0.9, gt=0, le=1, alias="GROQ_TOP_P")
    groq_max_tokens: int = Field(default=1024, ge=1, alias="GROQ_MAX_TOKENS")

    @field_validator("groq_api_key", mode="before")
    @classmethod
    def _drop_placeholder_key(cls, value: object) -> object:
        if value is None:
            return None
        if isinstance(value, str):
            key = value.strip()
            if not key or key.lower() in PLACEHOLDER_API_KEYS:
                return None
            return key
        return value

    @model_validator(mode="after")
    def _check_default_model(self) -> Settings:
        if self.groq_default_model not in AVAILABLE_MODELS.values():
            raise ValueError(
                f"GROQ_MODEL must be one of: {', '.join(AVAILABLE_MODELS.values())}"
            )
        return self

    @property
    def has_api_key(self) -> bool:
        return self.groq_api_key is not None


@lru_cache
def get_settings() -> Settings:
    return Settings()
