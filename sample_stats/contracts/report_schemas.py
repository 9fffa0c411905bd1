from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


SCHEMA_VERSION = "1.0"


class AnalyzerReport(BaseModel):
    schema_version: str = Field(default=SCHEMA_VERSION)
    report_type: Literal["analyzer_report"] = "analyzer_report"
    name: str
    sample_count: int = Field(ge=0)
    average: float = 0.0
