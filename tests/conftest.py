"""Shared fixtures for summaryviz test suite."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from summaryviz.reports import TemplateRenderer

DATA_DIR = Path(__file__).parent / "data"
DHT_SYNC_LAG_JSON = DATA_DIR / "dht_sync_lag.json"

# Fragment template that echoes the display model's title and description
ECHO_TEMPLATE = (
    '<section class="scenario scenario-{{ run_summary.scenario_name }}">'
    "{{ title }}|{{ description }}</section>"
)


def make_record(scenario_name: str = "write_read", run_id: str = "run-1", **metrics) -> dict:
    """Create a scenario record with a minimal run summary.

    This is the canonical record factory for tests; keyword arguments become
    scenario metrics.
    """
    return {
        "run_summary": {
            "run_id": run_id,
            "scenario_name": scenario_name,
            "started_at": 1738152337,
            "run_duration": 60,
            "peer_count": 1,
            "peer_end_count": 1,
            "behaviours": {"default": 1},
            "wind_tunnel_version": "0.3.0",
        },
        "scenario_metrics": dict(metrics),
    }


def write_scenario_templates(template_dir: Path, templates: dict[str, str]) -> Path:
    """Write ``scenarios/<name>.html.j2`` files and return the templates dir."""
    scenario_dir = template_dir / "scenarios"
    scenario_dir.mkdir(parents=True, exist_ok=True)
    for name, body in templates.items():
        (scenario_dir / f"{name}.html.j2").write_text(body)
    return template_dir


@pytest.fixture(scope="session")
def dht_sync_lag_data() -> dict[str, Any]:
    """The dht_sync_lag summary fixture, parsed once per session."""
    return json.loads(DHT_SYNC_LAG_JSON.read_text())


@pytest.fixture
def dht_record(dht_sync_lag_data) -> dict[str, Any]:
    """A fresh copy of the dht_sync_lag record that tests may modify."""
    return copy.deepcopy(dht_sync_lag_data)


@pytest.fixture
def echo_renderer(tmp_path) -> TemplateRenderer:
    """Renderer with echo templates for the 'alpha' and 'beta' scenarios."""
    template_dir = write_scenario_templates(
        tmp_path / "templates", {"alpha": ECHO_TEMPLATE, "beta": ECHO_TEMPLATE}
    )
    return TemplateRenderer(template_dir=template_dir)
