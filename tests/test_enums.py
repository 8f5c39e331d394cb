"""
Test cases for enums used by the calculators and formatters.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.enums import Exhaustion, OutputFormat, WindowName


def test_window_names_in_order():
    assert list(WindowName) == [WindowName.slow, WindowName.fast]
    assert WindowName.slow.burn_label == "slow_burn"
    assert WindowName.fast.burn_label == "fast_burn"


def test_exhaustion_sentinels_are_distinct():
    assert Exhaustion.never != Exhaustion.undefined
    assert Exhaustion.never.value == "never"


def test_output_format_parse():
    assert OutputFormat.parse("json") is OutputFormat.json
    assert OutputFormat.parse("YAML") is OutputFormat.yaml
    assert OutputFormat.parse(None) is OutputFormat.text
    assert OutputFormat.parse("xml") is OutputFormat.text
