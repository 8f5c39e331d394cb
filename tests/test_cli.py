"""
Test Suite for the command line interface.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import io
import json

import pytest

import cli


def run(*argv):
    buf = io.StringIO()
    code = cli.main(list(argv), stream=buf)
    return code, buf.getvalue()


def test_suggest_text():
    code, out = run("suggest", "--throughput", "1000", "--slo", "99.9", "--duration", "24")
    assert code == 0
    assert out.count("Alert if error_rate") == 2


def test_suggest_json():
    code, out = run("suggest", "--throughput", "1000", "--slo", "99.9", "--duration", "720", "--output", "json")
    assert code == 0
    records = json.loads(out)
    assert records[0]["long_window"] == "30d"
    assert records[1]["long_window"] == "1d6h"


def test_suggest_low_traffic_exits_non_zero():
    code, out = run("suggest", "--throughput", "10", "--slo", "99", "--duration", "24")
    assert code == 1
    assert "Use ONLY spike alert model" in out


@pytest.mark.parametrize(
    "args, message",
    [
        (["--throughput", "100", "--slo", "99", "--duration", "25"], "multiple of 24 hours"),
        (["--throughput", "0", "--slo", "99", "--duration", "24"], "throughput"),
        (["--throughput", "100", "--slo", "100", "--duration", "24"], "SLO must be between"),
        (["--throughput", "100", "--slo", "99", "--duration", "0"], "duration"),
        (["--throughput", "100", "--slo", "99"], "required"),
    ],
)
def test_suggest_invalid_input(capsys, args, message):
    code, _ = run("suggest", *args)
    assert code == 1
    assert message in capsys.readouterr().err


def test_cpu_suggest():
    code, out = run("cpu-suggest", "--instance", "t3.micro", "--utilization", "5")
    assert code == 0
    assert out.count("consumption sustains") == 2


def test_cpu_suggest_unknown_instance(capsys):
    code, _ = run("cpu-suggest", "--instance", "m5.large", "--utilization", "5")
    assert code == 1
    assert "unsupported instance type: m5.large" in capsys.readouterr().err


def test_cpu_suggest_invalid_utilization(capsys):
    code, _ = run("cpu-suggest", "--instance", "t3.micro", "--utilization", "101")
    assert code == 1
    assert "utilization" in capsys.readouterr().err


def test_config_file(tmp_path):
    path = tmp_path / "params.yaml"
    path.write_text(
        "services:\n  checkout:\n    throughput: 5000\n    slo: 99.5\n    duration: 168\n"
        "cpus:\n  worker:\n    instance: t3.small\n    utilization: 30\n    duration: 48\n"
    )

    code, out = run("suggest", "--config", str(path), "--service", "checkout", "--output", "yaml")
    assert code == 0
    assert "slow_burn" in out

    code, out = run("cpu-suggest", "--config", str(path), "--service", "worker", "--output", "json")
    assert code == 0
    payload = json.loads(out)
    assert payload["alerts"][0]["long_window"] == "1d"
    assert payload["alerts"][0]["utilization_threshold"] == pytest.approx(24)


def test_config_file_missing_service(tmp_path, capsys):
    path = tmp_path / "params.json"
    path.write_text(json.dumps({"services": {}}))
    code, _ = run("suggest", "--config", str(path), "--service", "ghost")
    assert code == 1
    assert "service 'ghost' not found" in capsys.readouterr().err


def test_instances():
    code, out = run("instances")
    assert code == 0
    names = out.split()
    assert "t3.micro" in names
    assert names == sorted(names)


def test_unknown_output_rejected():
    with pytest.raises(SystemExit):
        cli.main(["suggest", "--output", "xml"])


def test_log_level_is_case_insensitive():
    code, _ = run("instances", "--log-level", "debug")
    assert code == 0


def test_unknown_log_level_rejected(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["instances", "--log-level", "verbose"])
    assert exc.value.code == 2
    assert "--log-level" in capsys.readouterr().err
