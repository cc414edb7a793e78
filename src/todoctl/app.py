"""Application bootstrap.

``bootstrap()`` is the single entry point for an interface adapter: it
resolves settings, configures logging once, and returns a ready Tracker.
"""

from __future__ import annotations

from pathlib import Path

from todoctl.config.logging import configure_logging
from todoctl.config.settings import TodoSettings
from todoctl.infrastructure.tracker import Tracker


def bootstrap(
    settings: TodoSettings | None = None,
    *,
    config_path: str | Path | None = None,
) -> Tracker:
    """Build a Tracker with logging configured from *settings*.

    Args:
        settings: Pre-built settings. When None, settings are loaded from
            *config_path* or from a discovered ``todoctl.toml``.
        config_path: Explicit TOML file, used only when *settings* is None.

    Raises:
        ConfigError: If the TOML file cannot be parsed.
    """
    if settings is None:
        settings = TodoSettings.load(config_path=config_path)

    configure_logging(
        verbose=settings.logging.verbose,
        log_json=settings.logging.log_json,
        context={"id_strategy": str(settings.ids.strategy)},
    )
    return Tracker(settings)
