"""
Duration and floating point helpers shared by the SLO and burst credit calculators.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
import re
from datetime import timedelta
from typing import Union

from config import settings
from engine.enums import Exhaustion

MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)

TimeToExhaust = Union[timedelta, Exhaustion]

_UNIT_SECONDS = {"d": 86400, "h": 3600, "m": 60, "s": 1}
_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)([dhms])")


def to_seconds(d: timedelta) -> float:
    return d.total_seconds()


def from_seconds(seconds: float) -> timedelta:
    """Nearest whole second, halves rounded up."""
    if not math.isfinite(seconds):
        raise ValueError(f"cannot convert non-finite seconds to a duration: {seconds}")
    return timedelta(seconds=math.floor(seconds + 0.5))


def hours(n: float) -> timedelta:
    return timedelta(hours=n)


def min_duration(*durations: timedelta) -> timedelta:
    if not durations:
        raise ValueError("min_duration requires at least one duration")
    return min(durations)


def max_duration(*durations: timedelta) -> timedelta:
    if not durations:
        raise ValueError("max_duration requires at least one duration")
    return max(durations)


def almost_equal(a: float, b: float, tolerance: float | None = None) -> bool:
    if tolerance is None:
        tolerance = settings.float_tolerance
    return abs(a - b) <= tolerance


def is_multiple(d: timedelta, unit: timedelta) -> bool:
    return d % unit == timedelta(0)


def format_duration(d: timedelta) -> str:
    total = int(d.total_seconds())
    if total == 0:
        return "0s"
    sign = "-" if total < 0 else ""
    total = abs(total)
    parts = []
    for unit, size in _UNIT_SECONDS.items():
        count, total = divmod(total, size)
        if count:
            parts.append(f"{count}{unit}")
    return sign + "".join(parts)


def parse_duration(text: Union[str, float, int]) -> timedelta:
    """Parse ``90m``, ``2h``, ``1d``, ``1h30m`` or a bare number of hours."""
    if isinstance(text, (int, float)):
        if not math.isfinite(text):
            raise ValueError(f"invalid duration: {text!r}")
        return hours(float(text))

    raw = text.strip().lower()
    if not raw:
        raise ValueError("empty duration")
    try:
        value = float(raw)
    except ValueError:
        value = None
    if value is not None:
        if not math.isfinite(value):
            raise ValueError(f"invalid duration: {text!r}")
        return hours(value)

    pos = 0
    seconds = 0.0
    for match in _DURATION_PART.finditer(raw):
        if match.start() != pos:
            break
        seconds += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        pos = match.end()
    if pos != len(raw):
        raise ValueError(f"invalid duration: {text!r}")
    return timedelta(seconds=seconds)


def format_exhaustion(value: TimeToExhaust) -> str:
    if isinstance(value, Exhaustion):
        return value.value
    return format_duration(value)


def short_window_for(window: timedelta) -> timedelta:
    """Confirmation window paired with a long lookback ``window``."""
    return max_duration(
        window / settings.short_window_divisor,
        timedelta(seconds=settings.short_window_floor_seconds),
    )
