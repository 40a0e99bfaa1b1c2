from __future__ import annotations

import math
from typing import Any

from .config import DEFAULT_SCALE_MAX, DEFAULT_SCALE_MIN, CameraConfig, validate_scale_range
from .debug_log import camera_debug_log
from .geom import Rect, Vec2
from .gestures import DragSample, GesturePhase, ScaleRecognizer, ScaleSample
from .math import clamp, strictly_between, trunc_toward_zero
from .node import SupportsSize, ViewportSize, WorldNode
from .pan import DragPanner

DEFAULT_SCALE_RANGE = (DEFAULT_SCALE_MIN, DEFAULT_SCALE_MAX)


class Camera:
    """Pinch-to-zoom / drag-to-pan camera bounded by a world node's frame.

    The camera anchor is its center: `position` is the scene point shown in the
    middle of the viewport. Zooming rescales the world node; panning and zoom
    recentering move `position`, which is then kept inside the world frame
    inset by half a viewport on each side.
    """

    def __init__(
        self,
        viewport: SupportsSize | Vec2,
        world_node: WorldNode,
        *,
        config: CameraConfig | None = None,
        pan: bool | None = None,
        position: Vec2 | None = None,
    ) -> None:
        self.world_node = world_node
        self.viewport_size = ViewportSize.from_size(viewport)
        self._world_bounds = Rect.from_xywh(world_node.frame)
        self.position = position if position is not None else Vec2()

        self._scale = 1.0
        self._scale_range = DEFAULT_SCALE_RANGE
        self.zoom_enabled = True
        self.clamp_enabled = True
        self._enabled = True
        self.scale_recognizer = ScaleRecognizer()
        self.initial_touch_anchor: Vec2 | None = None
        if pan is None:
            pan = config.pan_enabled if config is not None else True
        self.panner: DragPanner | None = DragPanner(self) if pan else None

        if config is not None:
            self.apply_config(config)

    @classmethod
    def from_config(
        cls,
        viewport: SupportsSize | Vec2,
        world_node: WorldNode,
        config: CameraConfig,
        *,
        position: Vec2 | None = None,
    ) -> Camera:
        return cls(viewport, world_node, config=config, position=position)

    def apply_config(self, config: CameraConfig) -> None:
        self.scale_range = config.scale_range
        self.zoom_enabled = bool(config.zoom_enabled)
        self.clamp_enabled = bool(config.clamp_enabled)
        self.enabled = bool(config.enabled)
        if config.scale != self._scale:
            self.apply_zoom_scale(config.scale)

    # Serialization is not a supported way to build a camera.

    def __getstate__(self) -> Any:
        raise TypeError("Camera cannot be serialized")

    def __setstate__(self, state: Any) -> None:
        raise TypeError("Camera cannot be restored from serialized state")

    @property
    def world_bounds(self) -> Rect:
        return self._world_bounds

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def scale_range(self) -> tuple[float, float]:
        return self._scale_range

    @scale_range.setter
    def scale_range(self, value: tuple[float, float]) -> None:
        self._scale_range = validate_scale_range(value[0], value[1])
        if not self.scale_min <= self._scale <= self.scale_max:
            self.apply_zoom_scale(self._scale)

    @property
    def scale_min(self) -> float:
        return self._scale_range[0]

    @property
    def scale_max(self) -> float:
        return self._scale_range[1]

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = bool(value)
        self.scale_recognizer.enabled = self._enabled

    @property
    def drag_in_progress(self) -> bool:
        return self.panner is not None and self.panner.in_progress

    # Scale

    def apply_zoom_scale(self, scale: float) -> None:
        if math.isnan(scale):
            camera_debug_log("zoom_skipped", requested=float(scale), scale=self._scale)
            return
        zoom_scale = clamp(float(scale), self.scale_min, self.scale_max)
        self._scale = zoom_scale
        self.world_node.set_scale(zoom_scale)
        camera_debug_log("zoom", requested=float(scale), scale=zoom_scale)

    # Bounds

    def clamp_bounds(self) -> tuple[float, float, float, float]:
        """Legal range of `position` as `(min_x, max_x, min_y, max_y)`.

        When the world is narrower (or shorter) than the viewport the naive
        bounds cross, so they are swapped to keep the range well-formed.
        """
        frame = self._world_bounds
        half = self.viewport_size.half
        min_x = frame.min_x + half.x
        max_x = frame.max_x - half.x
        min_y = frame.min_y + half.y
        max_y = frame.max_y - half.y

        if frame.max_x - frame.min_x < self.viewport_size.width:
            min_x, max_x = max_x, min_x
        if frame.max_y - frame.min_y < self.viewport_size.height:
            min_y, max_y = max_y, min_y
        return min_x, max_x, min_y, max_y

    def clamp_world_node(self) -> None:
        if not self.clamp_enabled:
            return

        min_x, max_x, min_y, max_y = self.clamp_bounds()
        x = self.position.x
        y = self.position.y
        if x < min_x:
            x = trunc_toward_zero(min_x)
        elif x > max_x:
            x = trunc_toward_zero(max_x)
        if y < min_y:
            y = trunc_toward_zero(min_y)
        elif y > max_y:
            y = trunc_toward_zero(max_y)

        clamped = Vec2(x, y)
        if clamped != self.position:
            camera_debug_log("clamp", x=clamped.x, y=clamped.y, from_x=self.position.x, from_y=self.position.y)
        self.position = clamped

    # Position

    def can_center(self) -> bool:
        return strictly_between(self._scale, self.scale_min, self.scale_max) or self.drag_in_progress

    def center_on_position(self, scene_position: Vec2) -> None:
        if not self.can_center():
            camera_debug_log("center_skipped", x=scene_position.x, y=scene_position.y, scale=self._scale)
            return
        self.position = scene_position
        self.clamp_world_node()
        camera_debug_log("center", x=self.position.x, y=self.position.y)

    # Coordinate conversion

    def convert_point_from_view(self, point: Vec2) -> Vec2:
        """Map a view point (top-left origin, y down) into world node space."""
        half = self.viewport_size.half
        scene = Vec2(
            self.position.x + (point.x - half.x),
            self.position.y - (point.y - half.y),
        )
        node = self.world_node
        return (scene - node.position) / node.scale

    def convert_point_to_view(self, point: Vec2) -> Vec2:
        node = self.world_node
        scene = node.position + point * node.scale
        half = self.viewport_size.half
        return Vec2(
            scene.x - self.position.x + half.x,
            half.y - (scene.y - self.position.y),
        )

    # Input

    def handle_scale(self, sample: ScaleSample) -> None:
        if sample.phase is GesturePhase.BEGAN:
            self.initial_touch_anchor = self.convert_point_from_view(sample.location)
            return

        if sample.phase is GesturePhase.CHANGED:
            if not (self._enabled and self.zoom_enabled):
                return
            anchor = self.initial_touch_anchor
            if anchor is None:
                return
            self.apply_zoom_scale(self._scale * sample.scale)
            sample.scale = 1.0
            self.center_on_position(Vec2(anchor.x * self._scale, anchor.y * self._scale))
            return

        if sample.phase.finished:
            self.initial_touch_anchor = None

    def handle_drag(self, sample: DragSample) -> None:
        if self.panner is None:
            return
        self.panner.handle(sample)
