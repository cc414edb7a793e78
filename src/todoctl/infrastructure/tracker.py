"""Tracker: the explicit store handle injected into every service.

The Tracker owns the owner and task repositories and the id generator.
Services never reach for module-level state; they receive a Tracker and
go through its repositories.

INVARIANT: an id handed out by :meth:`Tracker.next_id` is not present in
the matching repository at the time it is issued, even when the
repositories were populated before this Tracker existed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from todoctl.domain.errors import NotFoundError
from todoctl.domain.ids import IdGenerator
from todoctl.infrastructure.repositories.memory import (
    InMemoryOwnerRepository,
    InMemoryTaskRepository,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from todoctl.config.settings import TodoSettings
    from todoctl.domain.ports import OwnerRepository, TaskRepository

logger = logging.getLogger(__name__)


class Tracker:
    """Wires settings, repositories, and identifier generation together.

    Repositories default to the in-memory implementations; any object
    satisfying the repository ports can be passed instead.

    Attributes:
        settings: The frozen settings this tracker was built from.
        owners: Owner repository.
        tasks: Task repository.
        ids: Identifier generator configured by ``settings.ids.strategy``.
    """

    def __init__(
        self,
        settings: TodoSettings,
        *,
        owners: OwnerRepository | None = None,
        tasks: TaskRepository | None = None,
    ) -> None:
        self.settings = settings
        self.owners: OwnerRepository = owners if owners is not None else InMemoryOwnerRepository()
        self.tasks: TaskRepository = tasks if tasks is not None else InMemoryTaskRepository()
        self.ids = IdGenerator(settings.ids.strategy)
        logger.debug(
            "tracker_ready",
            extra={
                "id_strategy": str(self.ids.strategy),
                "require_existing_owner": settings.tasks.require_existing_owner,
            },
        )

    def next_id(self, kind: str) -> str:
        """Claim an identifier for *kind* that the matching store does not hold.

        The generator's sequential counters start at 1 for every Tracker, so
        ids already taken in an injected repository are skipped rather than
        overwritten.

        Raises:
            ValueError: If *kind* is not ``"owner"`` or ``"task"``.
        """
        lookups: dict[str, Callable[[str], object]] = {
            "owner": self.owners.find_by_id,
            "task": self.tasks.find_by_id,
        }
        if kind not in lookups:
            msg = f"Unknown entity kind: {kind!r}. Expected one of {sorted(lookups)}"
            raise ValueError(msg)

        while True:
            candidate = self.ids.next_id(kind)
            try:
                lookups[kind](candidate)
            except NotFoundError:
                return candidate
            logger.debug("id_taken", extra={"kind": kind, "entity_id": candidate})
