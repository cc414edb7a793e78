"""todoctl: in-memory owner and task tracking."""

from __future__ import annotations

__version__ = "0.1.0"
