from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field


class SloSuggestRequest(BaseModel):
    throughput: float = Field(gt=0, description="requests per minute")
    slo: float = Field(gt=0.0, lt=100.0, description="objective percentage, e.g. 99.9")
    duration_hours: int = Field(gt=0, le=30 * 24, description="SLO period in hours")


class CpuSuggestRequest(BaseModel):
    instance: str
    utilization: float = Field(gt=0.0, le=100.0, description="average CPU utilization percentage")
    duration_hours: Optional[float] = Field(default=None, gt=0, description="observation period in hours")
