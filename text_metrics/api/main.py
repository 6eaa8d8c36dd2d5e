from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from text_metrics.api.routers import health, metrics
from text_metrics.config import AppConfig, load_app_config
from text_metrics.logging_config import setup_logging


logger = logging.getLogger(__name__)

_default_app: FastAPI | None = None


def create_app(config: AppConfig | None = None) -> FastAPI:
    setup_logging()
    cfg = config if config is not None else load_app_config()

    app = FastAPI(title="text_metrics", version="0.1.0")
    app.state.config = cfg
    origins = [o.strip() for o in os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health.router)
    app.include_router(metrics.router, prefix="/metrics", tags=["metrics"])

    # Mounted last so the API routes take precedence over the document root.
    if cfg.static.dir:
        static_dir = Path(cfg.static.dir)
        if static_dir.is_dir():
            app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
            logger.info("static_mounted dir=%s", static_dir)
        else:
            logger.warning("static_dir_missing dir=%s", static_dir)

    logger.info("api_ready")
    return app


def __getattr__(name: str) -> Any:
    # `uvicorn text_metrics.api.main:app` builds the default app on first access only.
    global _default_app
    if name == "app":
        if _default_app is None:
            _default_app = create_app()
        return _default_app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
