"""
Engine packages for SLO Computer: burn-rate and burst credit alert calculators.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.enums import Exhaustion, OutputFormat, WindowName

__all__ = ["Exhaustion", "OutputFormat", "WindowName"]
