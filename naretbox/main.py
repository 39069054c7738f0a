"""
Naretbox FastAPI Application

Main application entry point: builds the FastAPI app from the global
settings and runs it under uvicorn.
"""

import logging

import uvicorn

from naretbox.core.config.settings import get_settings
from naretbox.factory import create_application

logger = logging.getLogger(__name__)

app = create_application()

if __name__ == "__main__":
    settings = get_settings()

    logger.info(
        "Starting Uvicorn server. Host: %s, Port: %s", settings.SERVER_HOST, settings.SERVER_PORT
    )
    uvicorn.run(
        "naretbox.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.ENVIRONMENT == "development",
    )
