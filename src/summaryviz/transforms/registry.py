"""Scenario name -> transform dispatch.

Every scenario name resolves to *some* transform: either one registered in
:data:`TRANSFORMS`, or the default that only injects a title.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from . import dht_sync_lag

Transform = Callable[[dict[str, Any]], dict[str, Any]]

TRANSFORMS: Mapping[str, Transform] = MappingProxyType(
    {
        "dht_sync_lag": dht_sync_lag.transform,
    }
)


def default_transform(scenario_name: str) -> Transform:
    """Build the pass-through transform for a scenario with no registered shape."""

    def _transform(record: dict[str, Any]) -> dict[str, Any]:
        return {**record, "title": scenario_name, "description": None}

    return _transform


def resolve(scenario_name: str) -> Transform:
    """Return the transform for ``scenario_name`` (exact match)."""
    return TRANSFORMS.get(scenario_name) or default_transform(scenario_name)


def is_registered(scenario_name: str) -> bool:
    """Whether ``scenario_name`` has a dedicated transform."""
    return scenario_name in TRANSFORMS
