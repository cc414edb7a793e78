"""Map-backed in-memory repositories for owners and tasks.

Each repository exclusively owns a ``dict`` keyed by entity id. Entities
are frozen models, so values handed in or out cannot alter stored state.
Every map access is serialized with a lock; the stores stay single-writer
even behind a concurrent interface.

All data is lost when the process exits.
"""

from __future__ import annotations

import logging
import threading

from todoctl.domain.errors import NotFoundError
from todoctl.domain.models import Owner, Task

logger = logging.getLogger(__name__)


class InMemoryOwnerRepository:
    """Owner store backed by a ``dict[str, Owner]``."""

    def __init__(self) -> None:
        self._owners: dict[str, Owner] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._owners)

    def save(self, owner: Owner) -> None:
        with self._lock:
            self._owners[owner.id] = owner
        logger.debug("owner_saved", extra={"owner_id": owner.id})

    def find_by_id(self, owner_id: str) -> Owner:
        with self._lock:
            owner = self._owners.get(owner_id)
        if owner is None:
            logger.debug("owner_missing", extra={"owner_id": owner_id})
            raise NotFoundError("owner", owner_id)
        return owner

    def list(self) -> list[Owner]:
        with self._lock:
            return list(self._owners.values())


class InMemoryTaskRepository:
    """Task store backed by a ``dict[str, Task]``."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def save(self, task: Task) -> None:
        with self._lock:
            self._tasks[task.id] = task
        logger.debug("task_saved", extra={"task_id": task.id, "owner_id": task.owner_id})

    def find_by_id(self, task_id: str) -> Task:
        with self._lock:
            task = self._tasks.get(task_id)
        if task is None:
            logger.debug("task_missing", extra={"task_id": task_id})
            raise NotFoundError("task", task_id)
        return task

    def list_by_owner(self, owner_id: str) -> list[Task]:
        with self._lock:
            return [t for t in self._tasks.values() if t.owner_id == owner_id]

    def update(self, task: Task) -> None:
        """Replace the stored task with the same id (full replace, no merge)."""
        with self._lock:
            if task.id not in self._tasks:
                raise NotFoundError("task", task.id)
            self._tasks[task.id] = task
        logger.debug("task_updated", extra={"task_id": task.id, "status": str(task.status)})
