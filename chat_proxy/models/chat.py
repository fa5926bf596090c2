from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChatTurn(BaseModel):
    """One completed exchange, as the website keeps it in its chat log."""

    user: str
    assistant: str


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Optional at the schema level so a missing message maps to a 400 with
    # the same body as an empty one.
    message: str | None = None
    chat_history: list[ChatTurn] = Field(default_factory=list, alias="chatHistory")

    @field_validator("chat_history", mode="before")
    @classmethod
    def _null_history_is_empty(cls, value: object) -> object:
        return [] if value is None else value


class ChatResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    response: str
    timestamp: str
    model: str
    is_mock: bool = Field(alias="isMock")


class ChatErrorResponse(BaseModel):
    error: str
    message: str
    response: str
