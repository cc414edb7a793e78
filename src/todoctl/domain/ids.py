"""ID patterns, validation, and generation.

Two ID strategies:
- UUID (default): ``{prefix}{uuid4 hex}``, e.g. ``usr_3f0c...``.
- Sequential: per-kind monotonic counter, minimum 4 digits, e.g. ``TASK-0042``.

INVARIANT: IDs are unique within one generator. Once issued, an ID is
never issued again by the same generator.
"""

from __future__ import annotations

import itertools
import re
import threading
import uuid
from enum import StrEnum


class IdStrategy(StrEnum):
    """Supported identifier generation strategies."""

    UUID = "uuid"
    SEQUENTIAL = "sequential"


ID_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = {
    "owner": (re.compile(r"^usr_[0-9a-f]{32}$"), re.compile(r"^USR-\d{4,}$")),
    "task": (re.compile(r"^task_[0-9a-f]{32}$"), re.compile(r"^TASK-\d{4,}$")),
}

UUID_PREFIXES: dict[str, str] = {
    "owner": "usr_",
    "task": "task_",
}

SEQUENTIAL_PREFIXES: dict[str, str] = {
    "owner": "USR-",
    "task": "TASK-",
}


def validate_id(entity_id: str, kind: str) -> bool:
    """Check whether *entity_id* matches any known pattern for *kind*."""
    patterns = ID_PATTERNS.get(kind)
    if patterns is None:
        return False
    return any(p.match(entity_id) for p in patterns)


class IdGenerator:
    """Issues fresh identifiers for owners and tasks.

    Thread-safe: the sequential counters are advanced under a lock, and
    ``uuid4`` needs no coordination.
    """

    def __init__(self, strategy: IdStrategy | str = IdStrategy.UUID) -> None:
        self.strategy = IdStrategy(strategy)
        self._lock = threading.Lock()
        self._counters = {kind: itertools.count(1) for kind in SEQUENTIAL_PREFIXES}

    def next_id(self, kind: str) -> str:
        """Claim the next identifier for *kind*.

        Args:
            kind: One of ``"owner"`` or ``"task"``.

        Returns:
            The new ID string (e.g. ``"usr_<hex>"`` or ``"TASK-0001"``).

        Raises:
            ValueError: If *kind* is not a recognized entity kind.
        """
        if kind not in UUID_PREFIXES:
            msg = f"Unknown entity kind: {kind!r}. Expected one of {sorted(UUID_PREFIXES)}"
            raise ValueError(msg)

        if self.strategy is IdStrategy.UUID:
            return f"{UUID_PREFIXES[kind]}{uuid.uuid4().hex}"

        with self._lock:
            value = next(self._counters[kind])
        return f"{SEQUENTIAL_PREFIXES[kind]}{value:04d}"
