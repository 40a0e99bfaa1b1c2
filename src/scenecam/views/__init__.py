from __future__ import annotations

from .camera_view import CameraView

__all__ = ["CameraView"]
