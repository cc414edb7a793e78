"""Exception hierarchy for todoctl.

Repositories raise these; services let them propagate unchanged.
"""

from __future__ import annotations


class TodoError(Exception):
    """Base class for all todoctl errors."""


class NotFoundError(TodoError):
    """An owner or task lookup by identifier found nothing."""

    def __init__(self, kind: str, entity_id: str) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} not found: {entity_id}")


class ConfigError(TodoError):
    """A configuration file could not be parsed."""
