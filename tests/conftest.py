from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure(config: pytest.Config) -> None:
    # Ensure the local `src/` tree wins over any other installed copy of the package.
    src_dir = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src_dir)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


@pytest.fixture(autouse=True)
def _isolate_debug_state(monkeypatch: pytest.MonkeyPatch):
    from scenecam.debug_log import close_camera_debug_log, set_camera_debug_enabled

    monkeypatch.delenv("SCENECAM_DEBUG", raising=False)
    set_camera_debug_enabled(None)
    close_camera_debug_log()
    yield
    set_camera_debug_enabled(None)
    close_camera_debug_log()
