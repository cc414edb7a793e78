"""Owner and Task entities.

Both are frozen pydantic models, so a stored entity can never be changed
in place. State changes produce a new value that must be written back
through a repository.
"""

from __future__ import annotations

from pydantic import BaseModel

from todoctl.domain.lifecycle import TaskStatus


class Owner(BaseModel):
    """A registered actor who can hold zero or more tasks.

    Attributes:
        id: Unique owner identifier.
        name: Display name.
        role: Free-form role tag (e.g. ``"admin"``, ``"user"``).
    """

    model_config = {"frozen": True}

    id: str
    name: str
    role: str


class Task(BaseModel):
    """A unit of work belonging to exactly one owner.

    ``owner_id`` is not checked against the owner store here; that is a
    service-level decision.
    """

    model_config = {"frozen": True}

    id: str
    owner_id: str
    title: str
    status: TaskStatus = TaskStatus.PENDING

    def completed(self) -> Task:
        """Return a copy of this task with status ``completed``.

        Applies regardless of the current status.
        """
        return self.model_copy(update={"status": TaskStatus.COMPLETED})
