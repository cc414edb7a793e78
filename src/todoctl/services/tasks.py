"""TaskService: task creation, completion, and listing.

Repository errors (``NotFoundError``) propagate unchanged; nothing here
retries or converts them.
"""

from __future__ import annotations

import logging

from todoctl.domain.lifecycle import TaskStatus
from todoctl.domain.models import Task
from todoctl.services.base import BaseService

logger = logging.getLogger(__name__)


class TaskService(BaseService):
    """Use cases for tasks."""

    def create_task(self, owner_id: str, title: str) -> Task:
        """Create a pending task for *owner_id*.

        The owner is only looked up when ``tasks.require_existing_owner``
        is enabled; by default a task may reference an unknown owner.

        Raises:
            NotFoundError: If owner checking is enabled and *owner_id*
                is not registered.
        """
        if self._tracker.settings.tasks.require_existing_owner:
            self._tracker.owners.find_by_id(owner_id)

        task = Task(
            id=self._tracker.next_id("task"),
            owner_id=owner_id,
            title=title,
            status=TaskStatus.PENDING,
        )
        self._tracker.tasks.save(task)
        logger.info("task_created", extra={"task_id": task.id, "owner_id": owner_id})
        return task

    def complete_task(self, task_id: str) -> None:
        """Mark a task completed, whatever its current status.

        Completing an already-completed task still writes it back.

        Raises:
            NotFoundError: If no task has *task_id*.
        """
        task = self._tracker.tasks.find_by_id(task_id)
        self._tracker.tasks.update(task.completed())
        logger.info(
            "task_completed",
            extra={"task_id": task_id, "previous_status": str(task.status)},
        )

    def list_tasks_by_owner(self, owner_id: str) -> list[Task]:
        """Return every task owned by *owner_id*, in no particular order."""
        return self._tracker.tasks.list_by_owner(owner_id)
