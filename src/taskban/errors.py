"""Board error taxonomy.

Lookup misses are mostly absorbed by the store as no-ops. The exceptions
here are the ones that reach the user: the attempted mutation is discarded
and the board is left exactly as it was.
"""

from __future__ import annotations


class BoardError(Exception):
    """Base class for board errors."""


class ReferenceNotFound(BoardError):
    """An operation named a task or column that is not on the board."""

    def __init__(self, kind: str, ref: str) -> None:
        super().__init__(f"No {kind} with id '{ref}'")
        self.kind = kind
        self.ref = ref


class CapacityExceeded(BoardError):
    """The board already holds the maximum number of columns."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"A board can hold at most {limit} columns")
        self.limit = limit


class ValidationFailed(BoardError):
    """A record failed validation and was not saved."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
