from __future__ import annotations

from typing import TYPE_CHECKING

from .debug_log import camera_debug_log
from .geom import Vec2
from .gestures import DragSample, GesturePhase

if TYPE_CHECKING:
    from .camera import Camera


class DragPanner:
    """Single-finger drag-to-pan behaviour attached to a camera.

    View space is y-down while the scene is y-up, so a drag moves the camera
    against the finger horizontally and with it vertically.
    """

    def __init__(self, camera: Camera) -> None:
        self._camera = camera
        self.previous_pointer_location: Vec2 | None = None

    @property
    def in_progress(self) -> bool:
        return self.previous_pointer_location is not None

    def reset(self) -> None:
        self.previous_pointer_location = None

    def handle(self, sample: DragSample) -> None:
        if sample.phase is GesturePhase.BEGAN:
            self.previous_pointer_location = sample.location
            camera_debug_log("drag_begin", x=sample.location.x, y=sample.location.y)
            return

        if sample.phase is GesturePhase.CHANGED:
            previous = self.previous_pointer_location
            if previous is None:
                return
            delta = sample.location - previous
            position = self._camera.position
            target = Vec2(position.x - delta.x, position.y + delta.y).truncated()
            self._camera.center_on_position(target)
            self.previous_pointer_location = sample.location
            return

        if sample.phase.finished:
            self.reset()
            camera_debug_log("drag_end", phase=sample.phase.value)
