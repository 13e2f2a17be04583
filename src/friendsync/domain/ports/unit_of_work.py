"""Unit-of-work abstractions for coordinating repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from friendsync.domain.ports.persistence import ProfileRepository


@dataclass(slots=True)
class ProfileRepositories:
    """Repositories required to reconcile a snapshot."""

    profiles: ProfileRepository


@runtime_checkable
class ProfileUnitOfWork(Protocol):
    """Transaction boundary around the profile repositories.

    Leaving the block without ``commit`` discards the work. Store errors escape
    as :class:`friendsync.domain.errors.StoreFailure`.
    """

    @property
    def repositories(self) -> ProfileRepositories: ...

    def __enter__(self) -> ProfileUnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
