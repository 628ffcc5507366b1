from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TimeRange(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: datetime = Field(..., alias="from")
    to: datetime


class AnnotationSpec(BaseModel):
    """The annotation definition Grafana echoes back with every query."""

    model_config = ConfigDict(extra="allow")

    name: str = ""
    datasource: Any = None
    enable: bool = True
    iconColor: str | None = None
    query: str = ""


class AnnotationRequest(BaseModel):
    range: TimeRange
    annotation: AnnotationSpec = Field(default_factory=AnnotationSpec)


class AnnotationResponse(BaseModel):
    annotation: dict[str, Any]
    time: int
    timeEnd: int
    isRegion: bool = True
    title: str
    text: str
    tags: list[str]
