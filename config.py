"""
Constants and configuration for SLO Computer.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Optional

from pydantic_settings import BaseSettings


SLOCOMPUTER_LOG_LEVEL: str = os.getenv("SLOCOMPUTER_LOG_LEVEL", "INFO").upper()
SLOCOMPUTER_HOST: str = os.getenv("SLOCOMPUTER_HOST", "0.0.0.0")
SLOCOMPUTER_PORT: int = int(os.getenv("SLOCOMPUTER_PORT", "4323"))
SLOCOMPUTER_CATALOG_PATH: str = os.getenv("SLOCOMPUTER_CATALOG_PATH", "")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

OUTPUT_TEXT = "text"
OUTPUT_JSON = "json"
OUTPUT_YAML = "yaml"

CONFIG_SUFFIXES_YAML = (".yaml", ".yml")
CONFIG_SUFFIXES_JSON = (".json",)

# shown when an SLO cannot survive a small error spike
LOW_TRAFFIC_ADVICE = """
If this service reported {errors:.6f} errors for a duration of {duration}
SLO (for the entire duration) will be defeated within {breach_after}

Probably
- Use ONLY spike alert model, and not SLOs (easiest)
- Reduce the MTTR for this service (toughest)
- SLO is too aggressive and can be lowered (business decision)
- Combine multiple services into one single service (team wide)
"""


class Settings(BaseSettings):
    log_level: str = SLOCOMPUTER_LOG_LEVEL
    host: str = SLOCOMPUTER_HOST
    port: int = SLOCOMPUTER_PORT

    # overrides the bundled aws_instances.json when set
    catalog_path: Optional[str] = SLOCOMPUTER_CATALOG_PATH or None

    # SLO period validation (seconds)
    min_mtr_seconds: float = 3600.0
    max_period_days: int = 30

    # burn-rate policy: multiples of the allowed error rate
    slow_burn_multiplier: float = 2.0
    fast_burn_multiplier: float = 10.0
    slo_slow_window_cap_seconds: float = 2 * 3600.0
    slo_fast_window_floor_seconds: float = 5 * 60.0

    # two-window alerting: short window is long / divisor, never below the floor
    short_window_divisor: int = 12
    short_window_floor_seconds: float = 2 * 60.0
    fast_window_divisor: int = 24

    # low traffic reference spike
    spike_error_count: float = 10.0
    spike_duration_seconds: float = 5 * 60.0

    # burst credit policy: multiples of the baseline utilization
    burst_slow_multiplier: float = 1.2
    burst_fast_multiplier: float = 2.0
    burst_slow_window_cap_seconds: float = 6 * 3600.0
    burst_fast_window_floor_seconds: float = 30 * 60.0
    burst_min_observation_seconds: float = 3600.0
    default_observation_hours: float = 24.0

    float_tolerance: float = 0.005

    model_config = {
        "env_prefix": "SLOCOMPUTER_",
        "extra": "ignore",
    }


settings = Settings()
