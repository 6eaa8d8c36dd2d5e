from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml


DEFAULT_CONFIG_PATH = "config.yaml"


def _env(key: str) -> Optional[str]:
    value = os.environ.get(key)
    return value if value else None


def _deep_update(dst: dict[str, Any], src: dict[str, Any]) -> dict[str, Any]:
    for k, v in src.items():
        if isinstance(v, dict) and isinstance(dst.get(k), dict):
            _deep_update(dst[k], v)
        else:
            dst[k] = v
    return dst


@dataclass(frozen=True)
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 80


@dataclass(frozen=True)
class StaticConfig:
    dir: str | None = None


@dataclass(frozen=True)
class ApiConfig:
    max_text_chars: int = 1_000_000


@dataclass(frozen=True)
class AppConfig:
    server: ServerConfig = ServerConfig()
    static: StaticConfig = StaticConfig()
    api: ApiConfig = ApiConfig()


def load_app_config(path: str | None = None) -> AppConfig:
    config_path = Path(path or _env("TEXT_METRICS_CONFIG") or DEFAULT_CONFIG_PATH)
    data: dict[str, Any] = {}
    if config_path.exists():
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}

    overrides: dict[str, Any] = {}
    if _env("TEXT_METRICS_HOST"):
        overrides.setdefault("server", {})["host"] = _env("TEXT_METRICS_HOST")
    if _env("TEXT_METRICS_PORT"):
        overrides.setdefault("server", {})["port"] = _env("TEXT_METRICS_PORT")
    if _env("TEXT_METRICS_STATIC_DIR"):
        overrides.setdefault("static", {})["dir"] = _env("TEXT_METRICS_STATIC_DIR")
    if _env("TEXT_METRICS_MAX_TEXT_CHARS"):
        overrides.setdefault("api", {})["max_text_chars"] = _env("TEXT_METRICS_MAX_TEXT_CHARS")

    if overrides:
        _deep_update(data, overrides)

    server = data.get("server") or {}
    static = data.get("static") or {}
    api = data.get("api") or {}

    return AppConfig(
        server=ServerConfig(
            host=str(server.get("host", "0.0.0.0")),
            port=int(server.get("port", 80)),
        ),
        static=StaticConfig(
            dir=str(static["dir"]) if static.get("dir") else None,
        ),
        api=ApiConfig(
            max_text_chars=int(api.get("max_text_chars", 1_000_000)),
        ),
    )
