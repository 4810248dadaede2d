from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(ValueError):
    """An environment variable holds a value the service cannot use."""


@dataclass(frozen=True)
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> ServerConfig:
        port = os.getenv("PORT")
        if port:
            try:
                port_number = int(port)
            except ValueError as exc:
                raise ConfigError(f"PORT must be an integer, got {port!r}") from exc
        else:
            port_number = cls.port

        log_level = (os.getenv("LOG_LEVEL") or cls.log_level).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        return cls(
            host=os.getenv("HOST") or cls.host,
            port=port_number,
            log_level=log_level,
        )
