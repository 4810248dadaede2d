from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from .config import OllamaConfig
from .models import ChatMessage, OllamaChatReply, OllamaChatRequest

logger = logging.getLogger(__name__)


class OllamaError(Exception):
    """Base class for failures talking to the Ollama chat endpoint."""


class OllamaTransportError(OllamaError):
    """Connecting to or sending the request failed (timeouts included)."""


class OllamaReadError(OllamaError):
    """The response body could not be read."""


class OllamaStatusError(OllamaError):
    """Ollama answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Ollama returned HTTP {status_code}: {body[:200]}")
        self.status_code = status_code
        self.body = body


class OllamaDecodeError(OllamaError):
    """The response body is not a valid Ollama chat reply."""


def build_chat_request(prompt: str, model: str) -> OllamaChatRequest:
    return OllamaChatRequest(
        model=model,
        messages=[ChatMessage(role="user", content=prompt)],
        stream=False,
    )


class OllamaClient:
    """
    Synchronous client for the Ollama ``/api/chat`` endpoint.

    One ``httpx.Client`` is created per instance and reused across calls.
    ``transport`` lets tests swap in an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        config: OllamaConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config
        self._http = httpx.Client(timeout=config.timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def converse(self, prompt: str) -> str:
        """
        Send ``prompt`` as a single user message and return the assistant's reply text.

        Raises an ``OllamaError`` subclass on any failure; nothing is retried.
        """
        chat_request = build_chat_request(prompt, self.config.model)
        try:
            request = self._http.build_request(
                "POST",
                self.config.chat_url,
                content=chat_request.model_dump_json(),
                headers={"Content-Type": "application/json"},
            )
            response = self._http.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise OllamaTransportError(
                f"HTTP POST to Ollama at {self.config.chat_url} failed: {exc}"
            ) from exc

        try:
            body = response.read()
        except httpx.HTTPError as exc:
            raise OllamaReadError(f"failed to read Ollama response body: {exc}") from exc
        finally:
            response.close()

        text = body.decode("utf-8", errors="replace")
        logger.info("Ollama raw response: %s", text)

        if not response.is_success:
            raise OllamaStatusError(response.status_code, text)

        try:
            reply = OllamaChatReply.model_validate_json(body)
        except ValidationError as exc:
            raise OllamaDecodeError(f"failed to decode Ollama response: {exc}") from exc

        return reply.message.content
