"""
Loading of named service and CPU parameter sets from JSON or YAML files.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import json
import logging
from datetime import timedelta
from pathlib import Path
from typing import Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from config import CONFIG_SUFFIXES_JSON, CONFIG_SUFFIXES_YAML
from engine.durations import hours
from engine.exceptions import ConfigError

log = logging.getLogger(__name__)


class ServiceParams(BaseModel):
    throughput: float
    slo: float
    duration: int = Field(description="SLO period in hours")

    @property
    def period(self) -> timedelta:
        return hours(self.duration)


class CpuParams(BaseModel):
    instance: str
    utilization: float
    duration: Optional[float] = Field(default=None, description="observation period in hours")

    @property
    def observation_duration(self) -> Optional[timedelta]:
        return None if self.duration is None else hours(self.duration)


class ParameterFile(BaseModel):
    services: Dict[str, ServiceParams] = Field(default_factory=dict)
    cpus: Dict[str, CpuParams] = Field(default_factory=dict)

    def service(self, name: str) -> ServiceParams:
        try:
            return self.services[name]
        except KeyError:
            raise ConfigError(f"service '{name}' not found in config") from None

    def cpu(self, name: str) -> CpuParams:
        try:
            return self.cpus[name]
        except KeyError:
            raise ConfigError(f"CPU config '{name}' not found in config") from None


def load_config(path: Union[str, Path]) -> ParameterFile:
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in CONFIG_SUFFIXES_YAML + CONFIG_SUFFIXES_JSON:
        raise ConfigError(f"unsupported config file format: {suffix or path.name}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed to read config file: {exc}") from exc

    try:
        if suffix in CONFIG_SUFFIXES_YAML:
            raw = yaml.safe_load(text)
        else:
            raw = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        kind = "YAML" if suffix in CONFIG_SUFFIXES_YAML else "JSON"
        raise ConfigError(f"failed to parse {kind} config: {exc}") from exc

    try:
        params = ParameterFile.model_validate(raw or {})
    except PydanticValidationError as exc:
        raise ConfigError(f"invalid config {path}: {exc}") from exc

    log.debug("Loaded %d services and %d cpus from %s", len(params.services), len(params.cpus), path)
    return params
