from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("scenecam")
except PackageNotFoundError:  # pragma: no cover
    # Allow running from source (e.g. `PYTHONPATH=src`) without installed package metadata.
    __version__ = "0.0.0+dev"

__all__ = [
    "app",
    "camera",
    "cli",
    "config",
    "debug_log",
    "geom",
    "gestures",
    "input",
    "math",
    "node",
    "pan",
    "trace",
    "views",
]
