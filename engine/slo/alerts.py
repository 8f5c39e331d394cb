"""
Multi-window burn-rate alert recommendations for a service level objective.

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
from engine.slo.service import SLO

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlertWindow:
    name: WindowName
    error_rate: float
    burn_rate: Optional[float]
    budget_spent: Optional[float]
    time_to_exhaust: TimeToExhaust
    short_window: timedelta
    long_window: timedelta

    def describe(self) -> str:
        spent = "an undefined share" if self.budget_spent is None else f"{self.budget_spent * 100:.2f}%"
        return (
            f"Alert if error_rate > {self.error_rate:.6f} for last [{format_duration(self.long_window)}] "
            f"and also last [{format_duration(self.short_window)}]\n"
            f"This alert will trigger once {spent} of error budget is consumed,\n"
            f"and leaves {format_exhaustion(self.time_to_exhaust)} before the SLO is defeated."
        )


def new_alert_window(slo: SLO, name: WindowName, error_rate: float, window: timedelta) -> AlertWindow:
    return AlertWindow(
        name=name,
        error_rate=error_rate,
        burn_rate=slo.burn_rate(error_rate),
        budget_spent=slo.budget_spent(error_rate, window),
        time_to_exhaust=slo.time_to_exhaust(error_rate),
        short_window=short_window_for(window),
        long_window=window,
    )


def slow_window_for(period: timedelta) -> timedelta:
    # multi-day periods look back over the whole period; shorter ones at most two hours
    if period > DAY:
        return period
    return min_duration(timedelta(seconds=settings.slo_slow_window_cap_seconds), period / 2)


def fast_window_for(slow_window: timedelta) -> timedelta:
    return max_duration(
        slow_window / settings.fast_window_divisor,
        timedelta(seconds=settings.slo_fast_window_floor_seconds),
    )


def alert_calculator(slo: SLO) -> List[AlertWindow]:
    """Recommend a slow-burn and a fast-burn alert, in that order.

    The slow-burn policy alerts at a small multiple of the allowed error rate
    over a long lookback to catch gradual erosion of the budget. The fast-burn
    policy alerts at a large multiple over a short lookback to catch a sudden
    spike that would exhaust the budget soon. Both require the short and the
    long window to breach before firing.
    """
    allowed = 100 - slo.objective_percent
    slow_error_rate = allowed * settings.slow_burn_multiplier / 100
    fast_error_rate = allowed * settings.fast_burn_multiplier / 100

    slow_window = slow_window_for(slo.period)
    fast_window = fast_window_for(slow_window)

    windows = [
        new_alert_window(slo, WindowName.slow, slow_error_rate, slow_window),
        new_alert_window(slo, WindowName.fast, fast_error_rate, fast_window),
    ]
    for w in windows:
        log.debug("%s %s window: error_rate=%.6f long=%s short=%s",
                  slo, w.name.value, w.error_rate, w.long_window, w.short_window)
    return windows
