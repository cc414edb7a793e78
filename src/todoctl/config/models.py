"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, todoctl.toml only contains overrides.
An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

from todoctl.domain.ids import IdStrategy


class IdsConfig(BaseModel):
    """[ids] section."""

    model_config = {"frozen": True}

    strategy: IdStrategy = IdStrategy.UUID


class TasksConfig(BaseModel):
    """[tasks] section."""

    model_config = {"frozen": True}

    require_existing_owner: bool = False


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False
