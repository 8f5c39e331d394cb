"""
Burst credit package for recommending CPU credit depletion alerts on burstable instances.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.burst.catalog import InstanceCapacity, InstanceCatalog, load_default_catalog
from engine.burst.cpu import BurstCPU, new_burst_cpu
from engine.burst.alerts import BurstImpact, BurstWindow, burst_calculator, burst_impact

__all__ = [
    "InstanceCapacity",
    "InstanceCatalog",
    "load_default_catalog",
    "BurstCPU",
    "new_burst_cpu",
    "BurstImpact",
    "BurstWindow",
    "burst_calculator",
    "burst_impact",
]
