from __future__ import annotations

import datetime as dt
import os
from pathlib import Path
from threading import Lock

DEBUG_ENV_VAR = "SCENECAM_DEBUG"

_LOG_LOCK = Lock()
_LOG_PATH: Path | None = None
_ENABLED_OVERRIDE: bool | None = None


def camera_debug_enabled() -> bool:
    """True when `--debug` forced the log on or `SCENECAM_DEBUG=1` is set."""
    override = _ENABLED_OVERRIDE
    if override is not None:
        return override
    return os.environ.get(DEBUG_ENV_VAR) == "1"


def set_camera_debug_enabled(enabled: bool | None) -> None:
    """Force the debug switch on/off; `None` defers to the environment again."""
    global _ENABLED_OVERRIDE
    _ENABLED_OVERRIDE = None if enabled is None else bool(enabled)


def _format_value(value: object) -> str:
    if isinstance(value, float):
        text = f"{value:.4f}".rstrip("0").rstrip(".")
        return text or "0"
    return str(value).replace("\n", "\\n")


def _format_line(event: str, fields: dict[str, object]) -> str:
    timestamp = dt.datetime.now(dt.timezone.utc).isoformat(timespec="milliseconds")
    parts = [timestamp, f"event={str(event).strip()}"]
    parts.extend(f"{key}={_format_value(fields[key])}" for key in sorted(fields))
    return " ".join(parts) + "\n"


def camera_debug_log_path() -> Path | None:
    with _LOG_LOCK:
        return _LOG_PATH


def init_camera_debug_log(*, base_dir: Path, label: str = "camera") -> Path | None:
    """Open a fresh per-process log under `base_dir/logs`.

    Returns `None` without touching the filesystem when debugging is off.
    """
    if not camera_debug_enabled():
        return None

    name = str(label).strip().lower() or "camera"
    stamp = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%S.%fZ")
    path = base_dir / "logs" / f"{name}-pid{os.getpid()}-{stamp}.log"
    path.parent.mkdir(parents=True, exist_ok=True)

    global _LOG_PATH
    with _LOG_LOCK:
        _LOG_PATH = path
    camera_debug_log("init", label=name, pid=int(os.getpid()))
    return path


def close_camera_debug_log() -> None:
    global _LOG_PATH
    with _LOG_LOCK:
        _LOG_PATH = None


def camera_debug_log(event: str, **fields: object) -> None:
    line = _format_line(event, fields)
    # Path check and append share one critical section.
    with _LOG_LOCK:
        if _LOG_PATH is None:
            return
        with _LOG_PATH.open("a", encoding="utf-8") as handle:
            handle.write(line)
