"""
SLO package for validating service level objectives and recommending burn-rate alert windows.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.slo.service import (
    MIN_MTR,
    SLO,
    Impact,
    is_low_traffic,
    low_traffic_advice,
    new_slo,
    validate_targets,
)
from engine.slo.alerts import AlertWindow, alert_calculator

__all__ = [
    "MIN_MTR",
    "SLO",
    "Impact",
    "is_low_traffic",
    "low_traffic_advice",
    "new_slo",
    "validate_targets",
    "AlertWindow",
    "alert_calculator",
]
