from __future__ import annotations

import logging

import uvicorn

from .config import ServerConfig

logger = logging.getLogger(__name__)


def main() -> None:
    config = ServerConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server is running on port %s...", config.port)
    uvicorn.run(
        "restaurant_chat.app:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
