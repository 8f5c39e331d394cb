"""
CPU credit depletion alert recommendations for burstable instances.

Thresholds are multiples of the instance's baseline utilization; each one is
paired with a lookback window and the time a sustained breach takes to drain
a full credit balance, computed in closed form.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import List, Optional

from config import settings
from engine.burst.cpu import BurstCPU
from engine.durations import (
    DAY,
    TimeToExhaust,
    format_duration,
    format_exhaustion,
    max_duration,
    min_duration,
    short_window_for,
)
from engine.enums import WindowName

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BurstWindow:
    name: WindowName
    utilization_threshold_percent: float
    credit_burn_rate: Optional[float]
    time_to_exhaust: TimeToExhaust
    short_window: timedelta
    long_window: timedelta

    def describe(self) -> str:
        return (
            f"Alert if {self.utilization_threshold_percent:.2f} % consumption sustains for "
            f"{format_duration(self.long_window)} AND recent {format_duration(self.short_window)}.\n"
            f"At this rate, burst credits will deplete after {format_exhaustion(self.time_to_exhaust)}"
        )


@dataclass(frozen=True)
class BurstImpact:
    utilization_percent: float
    baseline_utilization_percent: float
    credit_burn_rate: Optional[float]
    time_to_exhaust: TimeToExhaust

    @property
    def above_baseline(self) -> bool:
        return self.utilization_percent > self.baseline_utilization_percent


def utilization_threshold(baseline_percent: float, multiplier: float) -> float:
    return baseline_percent * multiplier


def slow_window_for(observation: timedelta) -> timedelta:
    if observation > DAY:
        return DAY
    return min_duration(timedelta(seconds=settings.burst_slow_window_cap_seconds), observation / 2)


def fast_window_for(slow_window: timedelta) -> timedelta:
    return max_duration(
        slow_window / settings.fast_window_divisor,
        timedelta(seconds=settings.burst_fast_window_floor_seconds),
    )


def new_burst_window(
    cpu: BurstCPU, name: WindowName, threshold_percent: float, window: timedelta
) -> BurstWindow:
    return BurstWindow(
        name=name,
        utilization_threshold_percent=threshold_percent,
        credit_burn_rate=cpu.credit_burn_rate(threshold_percent),
        time_to_exhaust=cpu.time_to_exhaust(threshold_percent),
        short_window=short_window_for(window),
        long_window=window,
    )


def burst_calculator(cpu: BurstCPU) -> List[BurstWindow]:
    """Recommend a slow and a fast credit depletion alert, in that order."""
    baseline = cpu.capacity.baseline_utilization_percent
    slow_threshold = utilization_threshold(baseline, settings.burst_slow_multiplier)
    fast_threshold = utilization_threshold(baseline, settings.burst_fast_multiplier)

    slow_window = slow_window_for(cpu.total_observation_duration)
    fast_window = fast_window_for(slow_window)

    windows = [
        new_burst_window(cpu, WindowName.slow, slow_threshold, slow_window),
        new_burst_window(cpu, WindowName.fast, fast_threshold, fast_window),
    ]
    for w in windows:
        log.debug("%s %s window: threshold=%.2f%% long=%s short=%s",
                  cpu, w.name.value, w.utilization_threshold_percent, w.long_window, w.short_window)
    return windows


def burst_impact(cpu: BurstCPU) -> BurstImpact:
    utilization = cpu.observed_utilization_percent
    return BurstImpact(
        utilization_percent=utilization,
        baseline_utilization_percent=cpu.capacity.baseline_utilization_percent,
        credit_burn_rate=cpu.credit_burn_rate(utilization),
        time_to_exhaust=cpu.time_to_exhaust(utilization),
    )
