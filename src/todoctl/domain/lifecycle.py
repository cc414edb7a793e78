"""Task status lifecycle.

Tasks start as ``pending``. Completion is one-directional: any status
moves to ``completed`` and nothing moves out of it.
"""

from __future__ import annotations

from enum import StrEnum


class TaskStatus(StrEnum):
    """Lifecycle status for tasks."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
