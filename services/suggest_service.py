"""
Suggest service that turns target parameters into validated models and alert recommendations.

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

from api.responses import (
    AlertRecord,
    BurstImpactRecord,
    BurstRecord,
    CpuSuggestResponse,
    ImpactRecord,
    SloSuggestResponse,
)
from engine.burst import (
    BurstCPU,
    BurstImpact,
    BurstWindow,
    InstanceCatalog,
    burst_calculator,
    burst_impact,
    new_burst_cpu,
)
from engine.slo import (
    SLO,
    AlertWindow,
    Impact,
    alert_calculator,
    is_low_traffic,
    low_traffic_advice,
    new_slo,
    validate_targets,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceSuggestion:
    slo: SLO
    impact: Impact
    low_traffic: bool
    alerts: List[AlertWindow]

    @property
    def advice(self) -> Optional[str]:
        return low_traffic_advice(self.impact) if self.low_traffic else None

    def to_response(self) -> SloSuggestResponse:
        return SloSuggestResponse(
            slo=str(self.slo),
            low_traffic=self.low_traffic,
            impact=ImpactRecord.from_impact(self.impact),
            alerts=[AlertRecord.from_window(w) for w in self.alerts],
            advice=self.advice,
        )


@dataclass(frozen=True)
class CpuSuggestion:
    instance: str
    cpu: BurstCPU
    impact: BurstImpact
    alerts: List[BurstWindow]

    def to_response(self) -> CpuSuggestResponse:
        return CpuSuggestResponse(
            instance=self.instance,
            observed=BurstImpactRecord.from_impact(self.impact),
            alerts=[BurstRecord.from_window(w) for w in self.alerts],
        )


def suggest_service(throughput: float, objective_percent: float, period: timedelta) -> ServiceSuggestion:
    """Validate the targets and recommend burn-rate alerts.

    An SLO that cannot survive the reference spike gets no alerts; the
    impact explains why.
    """
    validate_targets(throughput, objective_percent)
    slo = new_slo(period, throughput, objective_percent)

    impact, low_traffic = is_low_traffic(slo)
    alerts = [] if low_traffic else alert_calculator(slo)
    log.info("%s: low_traffic=%s alerts=%d", slo, low_traffic, len(alerts))
    return ServiceSuggestion(slo=slo, impact=impact, low_traffic=low_traffic, alerts=alerts)


def suggest_cpu(
    catalog: InstanceCatalog,
    instance: str,
    utilization_percent: float,
    observation_duration: Optional[timedelta] = None,
) -> CpuSuggestion:
    capacity = catalog.lookup(instance)
    cpu = new_burst_cpu(capacity, utilization_percent, observation_duration)
    alerts = burst_calculator(cpu)
    log.info("%s %s: alerts=%d", instance, cpu, len(alerts))
    return CpuSuggestion(instance=instance, cpu=cpu, impact=burst_impact(cpu), alerts=alerts)
