from __future__ import annotations

from fastapi import Depends, Request

from text_metrics.config import AppConfig, load_app_config


def get_config(request: Request) -> AppConfig:
    cfg = getattr(request.app.state, "config", None)
    if cfg is None:
        cfg = load_app_config()
        request.app.state.config = cfg
    return cfg


ConfigDep = Depends(get_config)
