#!/usr/bin/env python3

"""
Command line interface for SLO Computer.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from config import LOG_FORMAT, LOG_LEVELS, OUTPUT_JSON, OUTPUT_TEXT, OUTPUT_YAML, settings
from engine.burst import load_default_catalog
from engine.durations import hours
from engine.exceptions import SloComputerError, ValidationError
from services.config_loader import load_config
from services.formatter import OutputFormatter
from services.suggest_service import suggest_cpu, suggest_service

log = logging.getLogger("slo-computer")


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="path to a JSON or YAML parameter file")
    common.add_argument("--service", help="name of the parameter set to use from --config")
    common.add_argument("--output", default=OUTPUT_TEXT, choices=[OUTPUT_TEXT, OUTPUT_JSON, OUTPUT_YAML],
                        help="output format")
    common.add_argument("--log-level", default=settings.log_level, type=str.upper, choices=LOG_LEVELS,
                        help="logging level")

    parser = argparse.ArgumentParser(
        prog="slo-computer",
        description="Calculate SLO burn-rate and burst credit alert thresholds.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    suggest = sub.add_parser("suggest", parents=[common],
                             help="suggest alerts based on service throughput and SLO duration")
    suggest.add_argument("--throughput", type=float, help="service throughput (requests per minute)")
    suggest.add_argument("--slo", type=float, help="desired SLO percentage")
    suggest.add_argument("--duration", type=int, help="SLO duration in hours")

    cpu = sub.add_parser("cpu-suggest", parents=[common],
                         help="suggest alerts based on CPU utilization and instance type")
    cpu.add_argument("--instance", help="burstable instance type, e.g. t3.micro")
    cpu.add_argument("--utilization", type=float, help="average CPU utilization percentage")
    cpu.add_argument("--duration", type=float, help="observation period in hours (default 24)")

    sub.add_parser("instances", parents=[common], help="list known burstable instance types")

    serve = sub.add_parser("serve", parents=[common], help="run the HTTP API")
    serve.add_argument("--host", default=settings.host)
    serve.add_argument("--port", type=int, default=settings.port)
    return parser


def _run_suggest(args: argparse.Namespace, out: OutputFormatter) -> int:
    throughput, objective, duration = args.throughput, args.slo, args.duration
    if args.config and args.service:
        params = load_config(args.config).service(args.service)
        throughput, objective, duration = params.throughput, params.slo, params.duration

    if throughput is None or objective is None or duration is None:
        raise ValidationError("--throughput, --slo and --duration are required without --config/--service")
    if duration <= 0:
        raise ValidationError("duration must be greater than 0")

    suggestion = suggest_service(throughput, objective, hours(duration))
    if suggestion.low_traffic:
        out.format_low_traffic(suggestion)
        return 1
    out.format_alerts(suggestion)
    return 0


def _run_cpu_suggest(args: argparse.Namespace, out: OutputFormatter) -> int:
    instance, utilization, duration = args.instance, args.utilization, args.duration
    if args.config and args.service:
        params = load_config(args.config).cpu(args.service)
        instance, utilization, duration = params.instance, params.utilization, params.duration

    if not instance:
        raise ValidationError("instance type must be provided")
    if utilization is None:
        raise ValidationError("utilization must be provided")

    observation = None if duration is None else hours(duration)
    suggestion = suggest_cpu(load_default_catalog(), instance, utilization, observation)
    out.format_burst(suggestion)
    return 0


def main(argv: Optional[List[str]] = None, stream: Optional[TextIO] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT, stream=sys.stderr)
    out = OutputFormatter(args.output, stream)

    try:
        if args.command == "suggest":
            return _run_suggest(args, out)
        if args.command == "cpu-suggest":
            return _run_cpu_suggest(args, out)
        if args.command == "instances":
            out.format_instances(list(load_default_catalog()))
            return 0
        if args.command == "serve":
            from main import serve

            serve(args.host, args.port)
            return 0
    except SloComputerError as exc:
        log.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 2


if __name__ == "__main__":
    sys.exit(main())
