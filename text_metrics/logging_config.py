from __future__ import annotations

import logging
import os


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Loggers uvicorn creates itself; `serve` runs it with log_config=None.
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _align_uvicorn_loggers(log_level: str) -> None:
    for name in UVICORN_LOGGERS:
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.propagate = True
    # One line per metrics request is noise unless debugging.
    access_level = "DEBUG" if log_level == "DEBUG" else "WARNING"
    logging.getLogger("uvicorn.access").setLevel(access_level)


def setup_logging(level: str | None = None) -> None:
    log_level = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    _align_uvicorn_loggers(log_level)
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(log_level)
        return
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
