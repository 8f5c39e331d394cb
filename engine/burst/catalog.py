"""
Read-only registry of burstable instance types and their CPU credit parameters.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterator, Mapping, Optional, Union

from config import settings
from engine.exceptions import ConfigError, UnknownInstanceError

log = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).with_name("aws_instances.json")

_FIELDS = ("credit_accrual_rate", "max_credits", "vcpu_count", "baseline_utilization_percent")


@dataclass(frozen=True)
class InstanceCapacity:
    credit_accrual_rate: float  # credits per minute
    max_credits: float
    vcpu_count: float
    # utilization at which accrual exactly offsets consumption
    baseline_utilization_percent: float

    @property
    def credits_per_hour(self) -> float:
        return self.credit_accrual_rate * 60

    @classmethod
    def from_dict(cls, name: str, raw: Mapping[str, Any]) -> InstanceCapacity:
        missing = [f for f in _FIELDS if f not in raw]
        if missing:
            raise ConfigError(f"instance {name!r} is missing {', '.join(missing)}")
        try:
            values = {f: float(raw[f]) for f in _FIELDS}
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"instance {name!r} has a non-numeric field: {exc}") from exc
        if values["vcpu_count"] <= 0 or values["max_credits"] < 0 or values["credit_accrual_rate"] < 0:
            raise ConfigError(f"instance {name!r} has out of range capacity values")
        return cls(**values)


class InstanceCatalog:
    """Immutable mapping of instance type name to :class:`InstanceCapacity`.

    Build one explicitly and pass it to whoever needs lookups; nothing in
    the engine keeps a process-wide copy.
    """

    def __init__(self, capacities: Mapping[str, InstanceCapacity]) -> None:
        self._capacities: Mapping[str, InstanceCapacity] = MappingProxyType(dict(capacities))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Mapping[str, Any]]) -> InstanceCatalog:
        if not isinstance(raw, Mapping):
            raise ConfigError("instance catalog must be a mapping of instance type to capacity")
        return cls({name: InstanceCapacity.from_dict(name, entry) for name, entry in raw.items()})

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> InstanceCatalog:
        path = Path(path)
        try:
            raw: Dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigError(f"failed to read instance catalog {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"failed to parse instance catalog {path}: {exc}") from exc
        catalog = cls.from_mapping(raw)
        log.info("Loaded %d instance types from %s", len(catalog), path)
        return catalog

    def lookup(self, instance_type: str) -> InstanceCapacity:
        try:
            return self._capacities[instance_type]
        except KeyError:
            raise UnknownInstanceError(instance_type) from None

    def known_types(self) -> FrozenSet[str]:
        return frozenset(self._capacities)

    def __contains__(self, instance_type: object) -> bool:
        return instance_type in self._capacities

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._capacities))

    def __len__(self) -> int:
        return len(self._capacities)


@lru_cache(maxsize=None)
def _load(path: str) -> InstanceCatalog:
    return InstanceCatalog.from_file(path)


def load_default_catalog(path: Optional[str] = None) -> InstanceCatalog:
    """Load the bundled catalog, or ``settings.catalog_path`` when configured, once per path."""
    return _load(str(path or settings.catalog_path or DEFAULT_CATALOG_PATH))
