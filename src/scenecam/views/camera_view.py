from __future__ import annotations

from pathlib import Path

import pyray as rl

from ..camera import Camera
from ..config import CameraConfig
from ..debug_log import close_camera_debug_log, init_camera_debug_log
from ..geom import Vec2
from ..input import MouseGestureInput, read_mouse_state
from ..node import SceneNode, ViewportSize

GRID_STEP = 64.0

BG_COLOR = rl.Color(18, 20, 24, 255)
WORLD_COLOR = rl.Color(36, 52, 44, 255)
GRID_COLOR = rl.Color(70, 90, 78, 255)
BORDER_COLOR = rl.Color(200, 200, 120, 255)
ANCHOR_COLOR = rl.Color(240, 80, 80, 255)
UI_TEXT_COLOR = rl.Color(220, 220, 220, 255)
UI_HINT_COLOR = rl.Color(140, 140, 140, 255)
UI_TEXT_SIZE = 18


class CameraView:
    def __init__(
        self,
        *,
        viewport: ViewportSize,
        world_size: Vec2,
        config: CameraConfig | None = None,
        log_dir: Path | None = None,
    ) -> None:
        self.node = SceneNode(size=world_size)
        self.camera = Camera.from_config(
            viewport,
            self.node,
            config or CameraConfig(),
            position=Vec2(world_size.x * 0.5, world_size.y * 0.5),
        )
        self.input = MouseGestureInput(self.camera)
        self._log_dir = log_dir
        self._log_path: Path | None = None

    def open(self) -> None:
        if self._log_dir is not None:
            self._log_path = init_camera_debug_log(base_dir=self._log_dir, label="view")

    def close(self) -> None:
        if self._log_path is not None:
            close_camera_debug_log()
            self._log_path = None

    def update(self, dt: float) -> None:
        if rl.is_key_pressed(rl.KeyboardKey.KEY_Z):
            self.camera.zoom_enabled = not self.camera.zoom_enabled
        if rl.is_key_pressed(rl.KeyboardKey.KEY_C):
            self.camera.clamp_enabled = not self.camera.clamp_enabled
        if rl.is_key_pressed(rl.KeyboardKey.KEY_E):
            self.camera.enabled = not self.camera.enabled
        self.input.poll(read_mouse_state())

    def _to_view(self, x: float, y: float) -> Vec2:
        return self.camera.convert_point_to_view(Vec2(x, y))

    def _draw_world(self) -> None:
        size = self.node.size
        top_left = self._to_view(0.0, size.y)
        bottom_right = self._to_view(size.x, 0.0)
        width = bottom_right.x - top_left.x
        height = bottom_right.y - top_left.y
        rl.draw_rectangle(int(top_left.x), int(top_left.y), int(width), int(height), WORLD_COLOR)

        x = 0.0
        while x <= size.x:
            start = self._to_view(x, 0.0)
            end = self._to_view(x, size.y)
            rl.draw_line_v(start.to_rl(), end.to_rl(), GRID_COLOR)
            x += GRID_STEP
        y = 0.0
        while y <= size.y:
            start = self._to_view(0.0, y)
            end = self._to_view(size.x, y)
            rl.draw_line_v(start.to_rl(), end.to_rl(), GRID_COLOR)
            y += GRID_STEP

        rl.draw_rectangle_lines(int(top_left.x), int(top_left.y), int(width), int(height), BORDER_COLOR)

    def _draw_anchor(self) -> None:
        anchor = self.camera.initial_touch_anchor
        if anchor is None:
            return
        pos = self._to_view(anchor.x, anchor.y)
        rl.draw_circle_v(pos.to_rl(), 5.0, ANCHOR_COLOR)

    def _draw_hud(self) -> None:
        camera = self.camera
        lines = [
            f"pos=({camera.position.x:.1f}, {camera.position.y:.1f})  scale={camera.scale:.3f}",
            f"range=[{camera.scale_min:.2f}, {camera.scale_max:.2f}]",
            f"enabled={camera.enabled}  zoom={camera.zoom_enabled}  clamp={camera.clamp_enabled}",
        ]
        y = 8
        for line in lines:
            rl.draw_text(line, 8, y, UI_TEXT_SIZE, UI_TEXT_COLOR)
            y += UI_TEXT_SIZE + 4
        hint = "wheel / ctrl+drag: zoom   drag: pan   Z/C/E: toggle zoom/clamp/camera"
        rl.draw_text(hint, 8, y + 4, UI_TEXT_SIZE - 4, UI_HINT_COLOR)

    def draw(self) -> None:
        rl.clear_background(BG_COLOR)
        self._draw_world()
        self._draw_anchor()
        self._draw_hud()
