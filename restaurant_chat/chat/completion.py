from __future__ import annotations

import threading
import time

from ..llm.models import ChatMessage
from .models import ChatCompletionResponse, CompletionChoice

_id_lock = threading.Lock()
_last_id_ns = 0


def _next_id_token() -> int:
    """Nanosecond timestamp, bumped when needed so tokens strictly increase."""
    global _last_id_ns
    with _id_lock:
        _last_id_ns = max(time.time_ns(), _last_id_ns + 1)
        return _last_id_ns


def new_completion_id() -> str:
    return f"chatcmpl-{_next_id_token()}"


def build_completion_response(content: str) -> ChatCompletionResponse:
    """Wrap the assistant's reply text in an OpenAI-style chat completion."""
    return ChatCompletionResponse(
        id=new_completion_id(),
        created=int(time.time()),
        choices=[
            CompletionChoice(
                index=0,
                message=ChatMessage(role="assistant", content=content),
                finish_reason="stop",
            )
        ],
    )
