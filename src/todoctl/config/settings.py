"""Unified settings: init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  - overrides passed by the caller
  2. Env vars     - ``TODOCTL_*`` prefix, ``__`` for nested sections
  3. TOML file    - ``todoctl.toml`` discovered via walk-up
  4. Code defaults - baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from todoctl.config.discovery import find_config
from todoctl.config.models import IdsConfig, LoggingConfig, TasksConfig
from todoctl.domain.errors import ConfigError


# Top-level tables accepted in todoctl.toml. ``config_path`` is derived from
# where the file was found and cannot be set from inside it.
TOML_SECTIONS = frozenset({"ids", "tasks", "logging"})


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``todoctl.toml`` file.

    Only the tables in ``TOML_SECTIONS`` are accepted; any other top-level
    key is reported as a ``ConfigError`` naming the file.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if not (toml_path and toml_path.is_file()):
            return
        try:
            data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise ConfigError(msg) from exc

        unknown = sorted(set(data) - TOML_SECTIONS)
        if unknown:
            msg = (
                f"Unknown keys in {toml_path}: {', '.join(unknown)}. "
                f"Expected only the sections {sorted(TOML_SECTIONS)}"
            )
            raise ConfigError(msg)
        self._data = data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path is chosen in load() but consumed in settings_customise_sources(),
# which pydantic calls as a classmethod during __init__.
_tls = threading.local()


class TodoSettings(BaseSettings):
    """Settings for a todoctl process, frozen after construction.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TODOCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    ids: IdsConfig = Field(default_factory=IdsConfig)
    tasks: TasksConfig = Field(default_factory=TasksConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> TodoSettings:
        """Build settings from an explicit or discovered ``todoctl.toml``.

        Args:
            config_path: Explicit TOML file. Skips discovery when given;
                a path that does not exist means no file is read.
            start: Directory to begin the walk-up search from (default: cwd).
            **overrides: Highest-priority field values, e.g.
                ``tasks={"require_existing_owner": True}``.

        Raises:
            ConfigError: If the TOML file cannot be parsed or has a top-level
                key outside ``TOML_SECTIONS``.
        """
        toml_path: Path | None
        if config_path is not None:
            p = Path(config_path)
            toml_path = p if p.is_file() else None
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
