"""BaseService: shared foundation for todoctl services.

Every service receives a :class:`Tracker` at construction time and reads
repositories, the id generator, and settings from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from todoctl.infrastructure.tracker import Tracker


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class TaskService(BaseService):
            def create_task(self, owner_id: str, title: str) -> Task:
                task = Task(id=self._tracker.next_id("task"), ...)
                self._tracker.tasks.save(task)
                return task
    """

    def __init__(self, tracker: Tracker) -> None:
        self._tracker = tracker
