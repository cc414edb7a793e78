"""Repository ports used by the service layer.

Services depend on these Protocols rather than concrete stores, so the
in-memory repositories can be swapped for a persistent backend.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from todoctl.domain.models import Owner, Task


@runtime_checkable
class OwnerRepository(Protocol):
    """Storage capability for owners."""

    def save(self, owner: Owner) -> None:
        """Insert or overwrite the entry keyed by ``owner.id``."""
        ...

    def find_by_id(self, owner_id: str) -> Owner:
        """Return the owner, or raise ``NotFoundError``."""
        ...

    def list(self) -> list[Owner]:
        """Return all stored owners in no particular order."""
        ...


@runtime_checkable
class TaskRepository(Protocol):
    """Storage capability for tasks."""

    def save(self, task: Task) -> None:
        """Insert or overwrite the entry keyed by ``task.id``."""
        ...

    def find_by_id(self, task_id: str) -> Task:
        """Return the task, or raise ``NotFoundError``."""
        ...

    def list_by_owner(self, owner_id: str) -> list[Task]:
        """Return every task whose ``owner_id`` equals *owner_id*."""
        ...

    def update(self, task: Task) -> None:
        """Replace an existing task entirely, or raise ``NotFoundError``."""
        ...
