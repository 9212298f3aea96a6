"""Run the API with uvicorn: ``python -m petshop``."""

from __future__ import annotations

import logging
import sys

import uvicorn

from petshop.core.config import get_settings

logger = logging.getLogger("petshop")


def main() -> int:
    try:
        settings = get_settings()
    except Exception:
        logging.basicConfig(level=logging.INFO)
        logger.exception("Invalid configuration")
        return 1

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    try:
        uvicorn.run(
            "petshop.main:app",
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    except (OSError, SystemExit) as exc:
        logger.error("Server failed to start: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
