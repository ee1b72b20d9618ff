"""Display model for the ``dht_sync_lag`` scenario."""

from __future__ import annotations

from typing import Any

from .common import extract_tagged, ratio_to_percent, shrink_identifier

TITLE = "DHT Sync Lag"
DESCRIPTION = (
    "Agents write timed entries while other agents poll for them. "
    "Sync lag is the time between an entry being created and another agent "
    "seeing it in its local DHT view."
)

# Single-gauge utilisation metrics (one value for the whole conductor)
_GAUGE_UTILISATION_METRICS = ("conductor_db_utilization", "dht_db_utilization")


def authored_db_utilisation(by_cell: dict[str, dict[str, Any]]) -> list[dict[str, Any]]:
    """Flatten per-cell authored DB utilisation into labelled entries.

    Keys look like ``CellId(DnaHash(uhC0k...), AgentPubKey(uhCAk...))``; each
    becomes one ``{name, mean, max}`` entry in the input order.
    """
    entries = []
    for cell_id, metric in by_cell.items():
        dna = shrink_identifier(extract_tagged("DnaHash", cell_id))
        agent = shrink_identifier(extract_tagged("AgentPubKey", cell_id))
        entries.append(
            {
                "name": f"Utilisation for DNA {dna} / agent {agent}",
                **ratio_to_percent(metric),
            }
        )
    return entries


def transform(record: dict[str, Any]) -> dict[str, Any]:
    """Shape a ``dht_sync_lag`` record for its template.

    Utilisation metrics the summariser could not query are ``null`` and are
    left as they are.
    """
    metrics = dict(record["scenario_metrics"])

    if metrics.get("authored_db_utilization") is not None:
        metrics["authored_db_utilization"] = authored_db_utilisation(
            metrics["authored_db_utilization"]
        )
    for key in _GAUGE_UTILISATION_METRICS:
        if metrics.get(key) is not None:
            metrics[key] = ratio_to_percent(metrics[key])

    return {
        **record,
        "scenario_metrics": metrics,
        "title": TITLE,
        "description": DESCRIPTION,
    }
