"""Repository implementations."""

from todoctl.infrastructure.repositories.memory import (
    InMemoryOwnerRepository,
    InMemoryTaskRepository,
)

__all__ = ["InMemoryOwnerRepository", "InMemoryTaskRepository"]
