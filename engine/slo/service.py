"""
Service level objective model: period validation, burn rate, budget spend and the low traffic guard.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Tuple

from config import LOW_TRAFFIC_ADVICE, settings
from engine.durations import (
    DAY,
    HOUR,
    format_duration,
    format_exhaustion,
    from_seconds,
    is_multiple,
    TimeToExhaust,
    to_seconds,
)
from engine.enums import Exhaustion
from engine.exceptions import DegenerateComputationError, ValidationError

log = logging.getLogger(__name__)

MIN_MTR = timedelta(seconds=settings.min_mtr_seconds)


def _finite(value: float, what: str) -> float:
    if not math.isfinite(value):
        raise DegenerateComputationError(f"{what} is not finite")
    return value


@dataclass(frozen=True)
class Impact:
    error_count: float
    error_rate: Optional[float]
    budget_spent: Optional[float]
    observed_duration: timedelta
    breach_after: TimeToExhaust


@dataclass(frozen=True)
class SLO:
    objective_percent: float
    throughput: float
    period: timedelta

    def __str__(self) -> str:
        return (
            f"SLO of {self.objective_percent:.3f}% over {format_duration(self.period)} "
            f"for {self.throughput:.3f} rpm"
        )

    def _error_rate(self, error_count: float) -> float:
        if self.throughput == 0:
            raise DegenerateComputationError("error rate is undefined for zero throughput")
        return _finite(error_count / self.throughput, "error rate")

    def _burn_rate(self, error_rate: float) -> float:
        allowed = 100 - self.objective_percent
        if allowed == 0:
            raise DegenerateComputationError("burn rate is undefined for a 100% objective")
        return _finite(error_rate * 100 / allowed, "burn rate")

    def _budget_spent(self, error_rate: float, window: timedelta) -> float:
        burn = self._burn_rate(error_rate)
        return _finite(burn * to_seconds(window) / to_seconds(self.period), "budget spent")

    def error_rate(self, error_count: float) -> Optional[float]:
        try:
            return self._error_rate(error_count)
        except DegenerateComputationError as exc:
            log.warning("%s: %s", self, exc)
            return None

    def burn_rate(self, error_rate: Optional[float]) -> Optional[float]:
        if error_rate is None:
            return None
        try:
            return self._burn_rate(error_rate)
        except DegenerateComputationError as exc:
            log.warning("%s: %s", self, exc)
            return None

    def budget_spent(self, error_rate: Optional[float], window: timedelta) -> Optional[float]:
        """Fraction of the period's error budget consumed by ``error_rate`` sustained for ``window``."""
        if error_rate is None:
            return None
        try:
            return self._budget_spent(error_rate, window)
        except DegenerateComputationError as exc:
            log.warning("%s: %s", self, exc)
            return None

    def time_to_exhaust(self, error_rate: Optional[float]) -> TimeToExhaust:
        """How long ``error_rate`` can be sustained before the whole budget is gone.

        A zero burn rate never exhausts the budget; a burn rate that cannot be
        computed, or is negative, is reported as undefined.
        """
        burn = self.burn_rate(error_rate)
        if burn is None or burn < 0:
            return Exhaustion.undefined
        if burn == 0:
            return Exhaustion.never
        seconds = to_seconds(self.period) / burn
        # too slow to exhaust within any representable duration
        if not math.isfinite(seconds) or seconds >= timedelta.max.total_seconds():
            return Exhaustion.never
        return from_seconds(seconds)

    def error_impact(self, error_count: float, duration: timedelta) -> Impact:
        rate = self.error_rate(error_count)
        return Impact(
            error_count=error_count,
            error_rate=rate,
            budget_spent=self.budget_spent(rate, duration),
            observed_duration=duration,
            breach_after=self.time_to_exhaust(rate),
        )


def new_slo(period: timedelta, throughput: float, objective_percent: float) -> SLO:
    max_period = timedelta(days=settings.max_period_days)
    if period > max_period:
        raise ValidationError(f"period must be <= {settings.max_period_days} days")
    if period > DAY and not is_multiple(period, DAY):
        raise ValidationError("period must be a multiple of 24 hours")
    if not is_multiple(period, HOUR):
        raise ValidationError("period must be a multiple of hours")
    if period <= 2 * MIN_MTR:
        raise ValidationError(f"period must be longer than {format_duration(2 * MIN_MTR)}")

    return SLO(objective_percent=objective_percent, throughput=throughput, period=period)


def validate_targets(throughput: float, objective_percent: float) -> None:
    if not math.isfinite(throughput) or throughput <= 0:
        raise ValidationError("throughput must be greater than 0")
    if not math.isfinite(objective_percent) or not 0 < objective_percent < 100:
        raise ValidationError("SLO must be between 0 and 100")


def is_low_traffic(slo: SLO) -> Tuple[Impact, bool]:
    """Check whether ``slo`` survives a small reference spike for two repair cycles.

    The spike is ``settings.spike_error_count`` errors per minute for
    ``settings.spike_duration_seconds``. If the budget would be gone before
    two MTTRs elapse the throughput is too low for the objective to be
    enforced with burn-rate alerts.
    """
    impact = slo.error_impact(
        settings.spike_error_count,
        timedelta(seconds=settings.spike_duration_seconds),
    )

    breach_after = impact.breach_after
    if breach_after is Exhaustion.never:
        low = False
    elif breach_after is Exhaustion.undefined:
        low = True
    else:
        low = breach_after < 2 * MIN_MTR

    if low:
        log.warning("%s cannot survive a spike of %.0f errors: breach after %s",
                    slo, impact.error_count, format_exhaustion(breach_after))
    return impact, low


def low_traffic_advice(impact: Impact) -> str:
    return LOW_TRAFFIC_ADVICE.format(
        errors=impact.error_count,
        duration=format_duration(impact.observed_duration),
        breach_after=format_exhaustion(impact.breach_after),
    )
