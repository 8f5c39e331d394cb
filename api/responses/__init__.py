"""
Response models for API endpoints and rendered alert recommendations.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from engine.burst import BurstImpact, BurstWindow
from engine.durations import format_duration, format_exhaustion
from engine.enums import WindowName
from engine.slo import AlertWindow, Impact


class AlertRecord(BaseModel):

    type: str
    name: WindowName
    error_rate: float
    burn_rate: Optional[float]
    budget_consumed: Optional[float]
    long_window: str
    short_window: str
    time_remaining: str

    @classmethod
    def from_window(cls, window: AlertWindow) -> AlertRecord:
        return cls(
            type=window.name.burn_label,
            name=window.name,
            error_rate=window.error_rate,
            burn_rate=window.burn_rate,
            budget_consumed=window.budget_spent,
            long_window=format_duration(window.long_window),
            short_window=format_duration(window.short_window),
            time_remaining=format_exhaustion(window.time_to_exhaust),
        )


class ImpactRecord(BaseModel):

    errors: float
    error_rate: Optional[float]
    budget_consumed: Optional[float]
    duration: str
    breach_after: str

    @classmethod
    def from_impact(cls, impact: Impact) -> ImpactRecord:
        return cls(
            errors=impact.error_count,
            error_rate=impact.error_rate,
            budget_consumed=impact.budget_spent,
            duration=format_duration(impact.observed_duration),
            breach_after=format_exhaustion(impact.breach_after),
        )


class SloSuggestResponse(BaseModel):

    slo: str
    low_traffic: bool
    impact: ImpactRecord
    alerts: List[AlertRecord] = Field(default_factory=list)
    advice: Optional[str] = None


class BurstRecord(BaseModel):

    type: str
    name: WindowName
    utilization_threshold: float
    credit_burn_rate: Optional[float]
    long_window: str
    short_window: str
    time_to_deplete: str

    @classmethod
    def from_window(cls, window: BurstWindow) -> BurstRecord:
        return cls(
            type=window.name.burn_label,
            name=window.name,
            utilization_threshold=window.utilization_threshold_percent,
            credit_burn_rate=window.credit_burn_rate,
            long_window=format_duration(window.long_window),
            short_window=format_duration(window.short_window),
            time_to_deplete=format_exhaustion(window.time_to_exhaust),
        )


class BurstImpactRecord(BaseModel):

    utilization: float
    baseline_utilization: float
    above_baseline: bool
    credit_burn_rate: Optional[float]
    time_to_deplete: str

    @classmethod
    def from_impact(cls, impact: BurstImpact) -> BurstImpactRecord:
        return cls(
            utilization=impact.utilization_percent,
            baseline_utilization=impact.baseline_utilization_percent,
            above_baseline=impact.above_baseline,
            credit_burn_rate=impact.credit_burn_rate,
            time_to_deplete=format_exhaustion(impact.time_to_exhaust),
        )


class CpuSuggestResponse(BaseModel):

    instance: str
    observed: BurstImpactRecord
    alerts: List[BurstRecord] = Field(default_factory=list)


class InstancesResponse(BaseModel):

    instances: List[str]
