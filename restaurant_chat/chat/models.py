from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from ..llm.models import ChatMessage


class CompletionRequest(BaseModel):
    location: str = Field(..., description='e.g. "San Francisco, CA"')
    query: str = Field(default="", description="Additional preferences (optional)")

    @field_validator("query", mode="before")
    @classmethod
    def _none_query_is_empty(cls, value):
        return "" if value is None else value


class CompletionChoice(BaseModel):
    index: int = 0
    message: ChatMessage
    finish_reason: str = "stop"


class ChatCompletionResponse(BaseModel):
    id: str
    object: Literal["chat.completion"] = "chat.completion"
    created: int
    choices: list[CompletionChoice]
