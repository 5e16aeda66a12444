"""Run the relay API with uvicorn: ``python -m relay_backend``."""
from __future__ import annotations

import logging

import uvicorn

from .app import create_app
from .config import load_settings


def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="[%(asctime)s] %(levelname)s - %(message)s")
    app = create_app(settings)
    logger = logging.getLogger("relay_backend")
    logger.info("Webhook relay running on http://localhost:%s", settings.port)
    logger.info("Webhook endpoint: http://localhost:%s/webhook/receive", settings.port)
    logger.info("Dashboard: http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
