from __future__ import annotations

from pydantic import BaseModel


class ChatMessage(BaseModel):
    role: str
    content: str


class OllamaChatRequest(BaseModel):
    model: str
    messages: list[ChatMessage]
    stream: bool = False


class OllamaReplyMessage(BaseModel):
    role: str = "assistant"
    content: str = ""


class OllamaChatReply(BaseModel):
    # Only message.content is consumed.
    model: str = ""
    created_at: str = ""
    message: OllamaReplyMessage
    done: bool = False
