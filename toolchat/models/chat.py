"""Chat message, option and response models (backend-agnostic)."""

import json
from typing import Any

from pydantic import BaseModel, Field, field_validator

from toolchat.models.tools import ToolDescriptor


class ToolCallFunction(BaseModel):
    """Name and arguments of a requested function call."""

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)

    class Config:
        frozen = True
        extra = "ignore"

    @field_validator("arguments", mode="before")
    @classmethod
    def decode_arguments(cls, v: Any) -> Any:
        """Accept arguments sent as a JSON-encoded string."""
        if isinstance(v, str):
            return json.loads(v) if v.strip() else {}
        return v


class ToolCall(BaseModel):
    """A tool call requested by the backend."""

    function: ToolCallFunction
    id: str | None = None

    class Config:
        frozen = True
        extra = "ignore"


class Message(BaseModel):
    """A single conversation turn."""

    role: str
    content: str = ""
    tool_calls: list[ToolCall] | None = None
    tool_name: str | None = None

    class Config:
        frozen = True
        extra = "ignore"  # e.g. Ollama's "thinking" and "images"

    @field_validator("content", mode="before")
    @classmethod
    def none_content_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("tool_calls")
    @classmethod
    def empty_tool_calls_to_none(cls, v: list[ToolCall] | None) -> list[ToolCall] | None:
        return v or None

    def to_wire(self) -> dict[str, Any]:
        """Serialize for a backend request, dropping unset optional fields."""
        return self.model_dump(exclude_none=True)


class ChatOptions(BaseModel):
    """Per-call options; unknown keys are kept as backend-specific extras."""

    model: str | None = None
    tools: list[ToolDescriptor] | None = None
    temperature: float | None = None
    max_tokens: int | None = Field(default=None, alias="maxTokens")

    class Config:
        extra = "allow"
        populate_by_name = True

    @property
    def extras(self) -> dict[str, Any]:
        """Backend-specific keys that are not recognised options."""
        return dict(self.model_extra or {})


class ChatResponse(BaseModel):
    """Response from a chat backend."""

    message: Message

    class Config:
        extra = "ignore"  # model, created_at, done, durations...
