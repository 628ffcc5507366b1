"""Grafana Simple JSON datasource over the annotation engine.

Endpoints:

    GET  /             datasource connectivity test
    POST /search       metric names (none exposed)
    POST /query        time series (none exposed)
    POST /annotations  outage annotations for a time range
    GET  /metrics      Prometheus exposition
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest

from core.annotator import Annotator
from core.errors import CheckListError, InvalidFilterError
from models.annotation import Annotation
from models.check import QueryWindow
from server.schema import AnnotationRequest, AnnotationResponse

log = logging.getLogger(__name__)


def _as_utc(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def _epoch_ms(ts: datetime) -> int:
    return int(ts.timestamp() * 1000)


def _to_response(ann: Annotation, spec: dict[str, Any]) -> AnnotationResponse:
    return AnnotationResponse(
        annotation=spec,
        time=_epoch_ms(ann.start),
        timeEnd=_epoch_ms(ann.end),
        title=ann.title,
        text=ann.text,
        tags=list(ann.tags),
    )


def create_app(annotator: Annotator, registry: CollectorRegistry) -> FastAPI:
    app = FastAPI(title="Pingdom Grafana Bridge", version="0.1.0")

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/search")
    async def search() -> list[str]:
        return []

    @app.post("/query")
    async def query() -> list[dict[str, Any]]:
        return []

    @app.post("/annotations", response_model=list[AnnotationResponse])
    async def annotations(req: AnnotationRequest) -> list[AnnotationResponse]:
        try:
            window = QueryWindow(start=_as_utc(req.range.from_), end=_as_utc(req.range.to))
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        try:
            anns = await annotator.annotations(window, req.annotation.query)
        except InvalidFilterError as exc:
            log.warning("Rejected annotation query: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except CheckListError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc

        spec = req.annotation.model_dump()
        return [_to_response(ann, spec) for ann in anns]

    @app.get("/metrics")
    async def metrics() -> Response:
        return Response(content=generate_latest(registry), media_type=CONTENT_TYPE_LATEST)

    return app
