"""Loading scenario run summaries from JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from summaryviz.errors import InputError

logger = logging.getLogger(__name__)


def validate_records(data: Any) -> list[dict[str, Any]]:
    """Check that ``data`` is one scenario record or a list of them.

    Each record needs a ``run_summary`` with string ``scenario_name`` and
    ``run_id`` fields; nothing else is checked here, since each scenario
    transform and template knows its own shape.

    Returns:
        The records as a list (a single record becomes a one-element list)

    Raises:
        InputError: If the shape is wrong
    """
    records = data if isinstance(data, list) else [data]
    if not records:
        raise InputError("Summary JSON contains no scenario records")

    for i, record in enumerate(records):
        if not isinstance(record, dict):
            raise InputError(f"Record {i} is not a JSON object")
        run_summary = record.get("run_summary")
        if not isinstance(run_summary, dict):
            raise InputError(f"Record {i} has no 'run_summary' object")
        for field in ("scenario_name", "run_id"):
            if not isinstance(run_summary.get(field), str):
                raise InputError(f"Record {i} has no string 'run_summary.{field}'")
    return records


def parse_summary(text: str) -> list[dict[str, Any]]:
    """Parse summary JSON text into a list of scenario records.

    Raises:
        InputError: If the text is not valid JSON or has the wrong shape
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputError(f"Couldn't parse JSON. Error: \"{e}\"")  # noqa: B904
    return validate_records(data)


def load_summary(path: str | Path) -> list[dict[str, Any]]:
    """Read and parse a summary JSON file.

    Raises:
        InputError: If the file can't be read, isn't JSON, or has the wrong shape
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(f"Couldn't read JSON. Error: \"{e}\"")  # noqa: B904

    records = parse_summary(text)
    logger.debug(f"Loaded {len(records)} scenario record(s) from {path}")
    return records
