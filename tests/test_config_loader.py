"""
Test Suite for parameter file loading.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import json
from datetime import timedelta

import pytest

from engine.exceptions import ConfigError
from services.config_loader import load_config

YAML_CONFIG = """
services:
  checkout:
    throughput: 4200
    slo: 99.9
    duration: 720
cpus:
  worker:
    instance: t3.micro
    utilization: 8.5
  batch:
    instance: t3.large
    utilization: 40
    duration: 48
"""


def test_load_yaml(tmp_path):
    path = tmp_path / "slo.yaml"
    path.write_text(YAML_CONFIG)
    params = load_config(path)

    checkout = params.service("checkout")
    assert checkout.throughput == 4200
    assert checkout.slo == 99.9
    assert checkout.period == timedelta(days=30)

    worker = params.cpu("worker")
    assert worker.instance == "t3.micro"
    assert worker.observation_duration is None
    assert params.cpu("batch").observation_duration == timedelta(hours=48)


def test_load_json(tmp_path):
    path = tmp_path / "slo.json"
    path.write_text(json.dumps({"services": {"api": {"throughput": 100, "slo": 99, "duration": 24}}}))
    params = load_config(path)
    assert params.service("api").duration == 24
    assert params.cpus == {}


def test_yml_suffix_and_empty_file(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    params = load_config(path)
    assert params.services == {}


def test_unknown_names(tmp_path):
    path = tmp_path / "slo.yaml"
    path.write_text(YAML_CONFIG)
    params = load_config(path)
    with pytest.raises(ConfigError, match="service 'nope' not found"):
        params.service("nope")
    with pytest.raises(ConfigError, match="CPU config 'nope' not found"):
        params.cpu("nope")


def test_unsupported_format(tmp_path):
    path = tmp_path / "slo.toml"
    path.write_text("")
    with pytest.raises(ConfigError, match="unsupported config file format"):
        load_config(path)


def test_parse_errors(tmp_path):
    bad_yaml = tmp_path / "bad.yaml"
    bad_yaml.write_text("services: [unclosed")
    with pytest.raises(ConfigError, match="YAML"):
        load_config(bad_yaml)

    bad_json = tmp_path / "bad.json"
    bad_json.write_text("{")
    with pytest.raises(ConfigError, match="JSON"):
        load_config(bad_json)


def test_invalid_shape(tmp_path):
    path = tmp_path / "shape.yaml"
    path.write_text("services:\n  api:\n    throughput: lots\n")
    with pytest.raises(ConfigError, match="invalid config"):
        load_config(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="failed to read"):
        load_config(tmp_path / "absent.yaml")
