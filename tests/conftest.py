"""Shared pytest fixtures for todoctl tests."""

from __future__ import annotations

import os

import pytest

from todoctl.config.settings import TodoSettings
from todoctl.infrastructure.repositories.memory import (
    InMemoryOwnerRepository,
    InMemoryTaskRepository,
)
from todoctl.infrastructure.tracker import Tracker


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's TODOCTL_* environment out of every test."""
    for key in list(os.environ):
        if key.startswith("TODOCTL_"):
            monkeypatch.delenv(key)


@pytest.fixture
def settings() -> TodoSettings:
    """Code-default settings (no TOML, no env vars)."""
    return TodoSettings()


@pytest.fixture
def tracker(settings: TodoSettings) -> Tracker:
    """Tracker with empty in-memory repositories."""
    return Tracker(settings)


@pytest.fixture
def strict_tracker() -> Tracker:
    """Tracker that rejects tasks for unregistered owners."""
    return Tracker(TodoSettings(tasks={"require_existing_owner": True}))


@pytest.fixture
def owner_repo() -> InMemoryOwnerRepository:
    return InMemoryOwnerRepository()


@pytest.fixture
def task_repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()
