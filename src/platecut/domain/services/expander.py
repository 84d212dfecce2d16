"""Cut list expansion and first-fit-decreasing ordering."""

from __future__ import annotations

import logging
from typing import Sequence

from platecut.domain.exceptions import InvalidRequestError
from platecut.domain.value_objects import CutRequest, Piece

logger = logging.getLogger(__name__)

_NUMERIC_FIELDS = ("width", "height", "quantity")


def validate_requests(requests: Sequence[CutRequest]) -> None:
    """Reject requests whose shape is wrong before anything is expanded.

    Only the shape is checked: every numeric field must be an ``int``
    (``bool`` is refused even though it subclasses ``int``) and ids must
    be unique. Non-positive values are valid shape-wise and are filtered
    later by :func:`expand_requests`.

    Args:
        requests: Requests to check.

    Raises:
        InvalidRequestError: On the first offending request.
    """
    seen: set[object] = set()
    for index, request in enumerate(requests):
        if not isinstance(request.id, (str, int)) or isinstance(request.id, bool):
            raise InvalidRequestError(
                request.id, index, "id", "id must be a string or an integer"
            )
        for name in _NUMERIC_FIELDS:
            value = getattr(request, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidRequestError(
                    request.id, index, name, f"{name} must be an integer, got {value!r}"
                )
        if request.id in seen:
            raise InvalidRequestError(
                request.id, index, "id", f"duplicate request id {request.id!r}"
            )
        seen.add(request.id)


def expand_requests(requests: Sequence[CutRequest]) -> list[Piece]:
    """Expand each valid request into ``quantity`` individual pieces.

    Pieces come out in request order, then instance order. Requests with
    a non-positive width, height or quantity contribute nothing.

    Args:
        requests: Cut requests to expand.

    Returns:
        Flat list of pieces, one per physical piece to cut.
    """
    pieces: list[Piece] = []
    for request in requests:
        if not request.is_valid:
            logger.debug(
                "Skipping request %r (%dx%d x%d): non-positive value",
                request.id,
                request.width,
                request.height,
                request.quantity,
            )
            continue
        pieces.extend(Piece.from_request(request, i) for i in range(request.quantity))
    return pieces


def sort_by_area(pieces: Sequence[Piece]) -> list[Piece]:
    """Sort pieces by area, largest first.

    The sort is stable, so pieces of equal area keep their expansion
    order and the result is deterministic for identical input.
    """
    return sorted(pieces, key=lambda p: p.area, reverse=True)
