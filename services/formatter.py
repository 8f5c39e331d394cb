"""
Rendering of alert recommendations as human-readable text, JSON or YAML.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import json
import sys
from typing import Any, Iterable, List, Optional, TextIO

import yaml

from engine.enums import OutputFormat
from services.suggest_service import CpuSuggestion, ServiceSuggestion


class OutputFormatter:
    def __init__(self, fmt: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
        self.format = OutputFormat.parse(fmt)
        self.stream = stream if stream is not None else sys.stdout

    def _dump(self, payload: Any) -> None:
        if self.format is OutputFormat.json:
            json.dump(payload, self.stream, indent=2)
            self.stream.write("\n")
        else:
            yaml.safe_dump(payload, self.stream, sort_keys=False, default_flow_style=False)

    def _text(self, blocks: Iterable[str]) -> None:
        for block in blocks:
            self.stream.write(f"\n{block}\n\n")

    def format_alerts(self, suggestion: ServiceSuggestion) -> None:
        if self.format is OutputFormat.text:
            self._text(w.describe() for w in suggestion.alerts)
            return
        response = suggestion.to_response()
        self._dump([a.model_dump(mode="json") for a in response.alerts])

    def format_low_traffic(self, suggestion: ServiceSuggestion) -> None:
        if self.format is OutputFormat.text:
            self.stream.write(suggestion.advice or "")
            return
        self._dump(suggestion.to_response().model_dump(mode="json", exclude={"alerts"}))

    def format_burst(self, suggestion: CpuSuggestion) -> None:
        if self.format is OutputFormat.text:
            self._text(w.describe() for w in suggestion.alerts)
            return
        self._dump(suggestion.to_response().model_dump(mode="json"))

    def format_instances(self, names: List[str]) -> None:
        if self.format is OutputFormat.text:
            self.stream.write("\n".join(names) + "\n")
            return
        self._dump(names)
