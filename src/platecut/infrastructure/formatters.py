"""Serialization of packing results for machine consumers."""

from __future__ import annotations

import json
from typing import Any

from platecut.domain import PackingResult


def request_breakdown(result: PackingResult) -> list[dict[str, Any]]:
    """Requested and placed piece counts per request id, in request order."""
    placed = result.placed_counts()
    return [
        {
            "request_id": request_id,
            "requested": requested,
            "placed": placed.get(request_id, 0),
        }
        for request_id, requested in result.requested_counts.items()
    ]


def result_to_dict(result: PackingResult, include_breakdown: bool = True) -> dict[str, Any]:
    """Convert a packing result to plain JSON-compatible data.

    The ``layouts``, ``summary`` and ``unplaced`` keys follow the engine's
    output contract. ``requests`` adds the per-request breakdown used by
    reports; request ids keep their original type, which is why it is a
    list rather than a mapping.

    Args:
        result: Result to convert.
        include_breakdown: Whether to add the ``requests`` breakdown.

    Returns:
        Dictionary ready for ``json.dumps``.
    """
    data = result.to_dict()
    if include_breakdown:
        data["requests"] = request_breakdown(result)
    return data


class JsonResultFormatter:
    """Formats a packing result as a JSON document."""

    def __init__(self, indent: int | None = 2, include_breakdown: bool = True) -> None:
        self.indent = indent
        self.include_breakdown = include_breakdown

    def format(self, result: PackingResult) -> str:
        """Return the JSON text for ``result``."""
        return json.dumps(
            result_to_dict(result, self.include_breakdown), indent=self.indent
        )
