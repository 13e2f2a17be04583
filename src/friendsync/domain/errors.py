"""Failure taxonomy for a reconciliation pass."""

from __future__ import annotations


class FetchFailure(RuntimeError):
    """Raised when the current snapshot cannot be retrieved."""


class FetchTransportError(FetchFailure):
    """The remote service could not be reached or answered with an error status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FetchDecodeError(FetchFailure):
    """The remote service answered with a payload we could not decode."""


class StoreFailure(RuntimeError):
    """Raised when the persisted store rejects an operation."""
