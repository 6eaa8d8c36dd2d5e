from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from text_metrics.api.deps import ConfigDep
from text_metrics.config import AppConfig
from text_metrics.metrics import analyze


router = APIRouter()
logger = logging.getLogger(__name__)


class MetricsRequest(BaseModel):
    text: str | None = None


class MetricsResponse(BaseModel):
    word_count: int
    char_count: int
    reading_time: int


def _measure(text: str | None, cfg: AppConfig) -> MetricsResponse:
    if text is not None and len(text) > cfg.api.max_text_chars:
        logger.info("metrics_rejected chars=%d limit=%d", len(text), cfg.api.max_text_chars)
        raise HTTPException(status_code=413, detail="text_too_large")
    result = analyze(text)
    logger.debug("metrics_request words=%d chars=%d", result.words, result.characters)
    return MetricsResponse(**result.as_dict())


@router.post("", response_model=MetricsResponse)
def measure_text(payload: MetricsRequest, cfg: AppConfig = ConfigDep) -> MetricsResponse:
    return _measure(payload.text, cfg)


@router.get("", response_model=MetricsResponse)
def measure_query(text: str | None = None, cfg: AppConfig = ConfigDep) -> MetricsResponse:
    return _measure(text, cfg)
