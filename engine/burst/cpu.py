"""
Burstable CPU model pairing an instance's credit capacity with observed utilization.

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
from typing import Optional

from config import settings
from engine.burst.catalog import InstanceCapacity
from engine.durations import TimeToExhaust, format_duration, from_seconds, hours
from engine.enums import Exhaustion
from engine.exceptions import DegenerateComputationError, ValidationError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BurstCPU:
    capacity: InstanceCapacity
    observed_utilization_percent: float
    observation_duration: Optional[timedelta] = None

    @property
    def total_observation_duration(self) -> timedelta:
        if self.observation_duration is None:
            return hours(settings.default_observation_hours)
        return self.observation_duration

    def _credit_burn_rate(self, utilization_percent: float) -> float:
        burn = utilization_percent / 100 * self.capacity.vcpu_count * 60
        if not math.isfinite(burn):
            raise DegenerateComputationError(f"credit burn rate at {utilization_percent}% is not finite")
        return burn

    def credit_burn_rate(self, utilization_percent: float) -> Optional[float]:
        """Credits consumed per hour while ``utilization_percent`` is sustained."""
        try:
            return self._credit_burn_rate(utilization_percent)
        except DegenerateComputationError as exc:
            log.warning("%s", exc)
            return None

    def time_to_exhaust(self, utilization_percent: float) -> TimeToExhaust:
        burn = self.credit_burn_rate(utilization_percent)
        if burn is None or burn < 0:
            return Exhaustion.undefined
        # accrual outpaces consumption so the balance never runs out
        if burn == 0 or burn < self.capacity.credits_per_hour:
            return Exhaustion.never
        seconds = self.capacity.max_credits / burn * 3600
        # too slow to exhaust within any representable duration
        if not math.isfinite(seconds) or seconds >= timedelta.max.total_seconds():
            return Exhaustion.never
        return from_seconds(seconds)

    def __str__(self) -> str:
        return (
            f"{self.observed_utilization_percent:.2f}% utilization of "
            f"{self.capacity.vcpu_count:g} vCPUs over {format_duration(self.total_observation_duration)}"
        )


def new_burst_cpu(
    capacity: InstanceCapacity,
    utilization_percent: float,
    observation_duration: Optional[timedelta] = None,
) -> BurstCPU:
    if not math.isfinite(utilization_percent) or not 0 < utilization_percent <= 100:
        raise ValidationError("utilization must be between 0 and 100")
    if observation_duration is not None:
        minimum = timedelta(seconds=settings.burst_min_observation_seconds)
        if observation_duration < minimum:
            raise ValidationError(f"observation duration must be at least {format_duration(minimum)}")

    return BurstCPU(
        capacity=capacity,
        observed_utilization_percent=utilization_percent,
        observation_duration=observation_duration,
    )
