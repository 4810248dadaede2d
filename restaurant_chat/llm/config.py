from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from ..config import ConfigError

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

DEFAULT_OLLAMA_URL = "http://localhost:11434"
DEFAULT_OLLAMA_MODEL = "llama3.2"


@dataclass(frozen=True)
class OllamaConfig:
    base_url: str = DEFAULT_OLLAMA_URL
    model: str = DEFAULT_OLLAMA_MODEL
    timeout: float = 120.0
    chat_path: str = "/api/chat"

    @property
    def chat_url(self) -> str:
        return self.base_url.rstrip("/") + self.chat_path

    @classmethod
    def from_env(cls) -> OllamaConfig:
        """Build a config from ``OLLAMA_URL``, ``OLLAMA_MODEL`` and ``OLLAMA_TIMEOUT``.

        Unset or empty variables fall back to the defaults.
        """
        timeout = os.getenv("OLLAMA_TIMEOUT")
        try:
            seconds = float(timeout) if timeout else cls.timeout
        except ValueError as exc:
            raise ConfigError(f"OLLAMA_TIMEOUT must be a number of seconds, got {timeout!r}") from exc
        return cls(
            base_url=os.getenv("OLLAMA_URL") or DEFAULT_OLLAMA_URL,
            model=os.getenv("OLLAMA_MODEL") or DEFAULT_OLLAMA_MODEL,
            timeout=seconds,
        )
