"""Domain exceptions.

Pieces that do not fit are reported in the packing result, not raised.
These exceptions cover malformed input and caller-requested cancellation.
"""

from __future__ import annotations

from .value_objects import RequestId


class InvalidRequestError(ValueError):
    """Raised when a cut request has the wrong shape.

    Attributes:
        request_id: Id of the offending request.
        index: Position of the request in the input sequence.
        field: Name of the offending field.
        message: Human-readable description.
    """

    def __init__(
        self,
        request_id: RequestId,
        index: int,
        field: str,
        message: str,
    ) -> None:
        self.request_id = request_id
        self.index = index
        self.field = field
        self.message = message
        super().__init__(f"requests[{index}].{field}: {message}")

    @property
    def path(self) -> str:
        """Location of the error, e.g. ``requests[2].width``."""
        return f"requests[{self.index}].{self.field}"


class PackingCancelledError(Exception):
    """Raised when the caller cancels a calculation between plates.

    Attributes:
        plates_completed: Number of plates packed before cancellation.
    """

    def __init__(self, plates_completed: int) -> None:
        self.plates_completed = plates_completed
        super().__init__(
            f"Packing cancelled after {plates_completed} plate(s)"
        )
