"""Helpers shared by scenario transforms."""

from __future__ import annotations

import re
from typing import Any

# Hashes this short have nothing to elide.
_MIN_SHRINK_LENGTH = 7


def shrink_identifier(identifier: str) -> str:
    """Shorten a long identifier to ``abc...xyz`` for display.

    Identifiers of six characters or fewer are returned unchanged, since the
    head and tail would overlap.
    """
    if len(identifier) < _MIN_SHRINK_LENGTH:
        return identifier
    return f"{identifier[:3]}...{identifier[-3:]}"


def extract_tagged(tag: str, text: str) -> str:
    """Return the bracketed payload following ``tag`` in ``text``.

    ``extract_tagged("DnaHash", "CellId(DnaHash(uhC0kabc), ...)")`` returns
    ``"uhC0kabc"``.

    Raises:
        ValueError: If the tag is not present
    """
    match = re.search(rf"{re.escape(tag)}\(([^)]+)\)", text)
    if not match:
        raise ValueError(f"No {tag}(...) in identifier: {text!r}")
    return match.group(1)


def ratio_to_percent(metric: dict[str, Any]) -> dict[str, float]:
    """Turn a utilisation ratio gauge into percentages.

    Only ``mean`` and ``max`` are kept; ``min``, ``std`` and ``count`` are
    not shown.
    """
    return {
        "mean": metric["mean"] * 100,
        "max": metric["max"] * 100,
    }
