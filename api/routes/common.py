"""
Shared dependencies for API route modules.

Provides a single place for obtaining the instance catalog the CPU routes
look up capacities in. The catalog is built once per process on first use
and never mutated, so handlers share it without locking.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional

from engine.burst import InstanceCatalog, load_default_catalog


_catalog: Optional[InstanceCatalog] = None


def get_catalog() -> InstanceCatalog:
    global _catalog
    if _catalog is None:
        _catalog = load_default_catalog()
    return _catalog


def set_catalog(catalog: Optional[InstanceCatalog]) -> None:
    global _catalog
    _catalog = catalog
