import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from calculator.router import router as calculator_router
from core.logging_config import configure_logging
from core.settings import Settings
from guidelines.router import router as guidelines_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """App factory; serve with `uvicorn --factory main:create_app`."""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_title)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(calculator_router)
    app.include_router(guidelines_router)

    @app.get("/")
    def root():
        return {"status": "Backend running"}

    logger.info("%s started", settings.app_title)
    return app

