"""
Enumerations for alert window names, exhaustion sentinels and output formats.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum

from config import OUTPUT_JSON, OUTPUT_TEXT, OUTPUT_YAML


class WindowName(str, Enum):
    slow = "slow"
    fast = "fast"

    @property
    def burn_label(self) -> str:
        return f"{self.value}_burn"


class Exhaustion(str, Enum):
    """Terminal states reported in place of a time-to-exhaust duration."""

    # consumption never outpaces the budget or credit accrual
    never = "never"
    # inputs make the rate meaningless (zero budget, zero throughput)
    undefined = "undefined"


class OutputFormat(str, Enum):
    text = OUTPUT_TEXT
    json = OUTPUT_JSON
    yaml = OUTPUT_YAML

    @classmethod
    def parse(cls, value: str | None) -> OutputFormat:
        # unknown formats render as text
        try:
            return cls((value or OUTPUT_TEXT).lower())
        except ValueError:
            return cls.text
