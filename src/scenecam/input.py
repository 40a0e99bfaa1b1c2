from __future__ import annotations

from dataclasses import dataclass

from .camera import Camera
from .geom import Vec2
from .gestures import DragSample, GesturePhase, ScaleSample

WHEEL_SCALE_STEP = 0.08
PINCH_IDLE_FRAMES = 8
DRAG_PINCH_SENSITIVITY = 0.01


@dataclass(frozen=True, slots=True)
class MouseState:
    position: Vec2
    wheel: float = 0.0
    left_down: bool = False
    pinch_modifier: bool = False


def read_mouse_state() -> MouseState:
    import pyray as rl

    return MouseState(
        position=Vec2.from_xy(rl.get_mouse_position()),
        wheel=float(rl.get_mouse_wheel_move()),
        left_down=bool(rl.is_mouse_button_down(rl.MouseButton.MOUSE_BUTTON_LEFT)),
        pinch_modifier=bool(
            rl.is_key_down(rl.KeyboardKey.KEY_LEFT_CONTROL) or rl.is_key_down(rl.KeyboardKey.KEY_RIGHT_CONTROL)
        ),
    )


class MouseGestureInput:
    """Synthesizes the two camera gesture streams from a mouse.

    Wheel ticks (or a vertical drag while Ctrl is held) become one pinch
    gesture that ends after a few idle frames; a plain left-button drag with no
    press delay and no movement tolerance becomes the pan gesture.
    """

    def __init__(
        self,
        camera: Camera,
        *,
        wheel_step: float = WHEEL_SCALE_STEP,
        idle_frames: int = PINCH_IDLE_FRAMES,
    ) -> None:
        self.camera = camera
        self.wheel_step = float(wheel_step)
        self.idle_frames = int(idle_frames)
        self._pinch_active = False
        self._pinch_idle = 0
        self._pinch_focus = Vec2()
        self._pinch_drag_last: Vec2 | None = None
        self._drag_active = False

    @property
    def pinch_active(self) -> bool:
        return self._pinch_active

    @property
    def drag_active(self) -> bool:
        return self._drag_active

    def poll(self, state: MouseState) -> None:
        self._poll_pinch(state)
        self._poll_drag(state)

    def _pinch_delta(self, state: MouseState) -> float:
        if state.wheel != 0.0:
            return max(0.1, 1.0 + state.wheel * self.wheel_step)
        if state.pinch_modifier and state.left_down:
            last = self._pinch_drag_last
            self._pinch_drag_last = state.position
            if last is None:
                return 1.0
            return max(0.1, 1.0 - (state.position.y - last.y) * DRAG_PINCH_SENSITIVITY)
        self._pinch_drag_last = None
        return 1.0

    def _poll_pinch(self, state: MouseState) -> None:
        recognizer = self.camera.scale_recognizer
        if not recognizer.enabled:
            if self._pinch_active:
                self._end_pinch(GesturePhase.CANCELLED)
            self._pinch_drag_last = None
            return

        delta = self._pinch_delta(state)
        if delta == 1.0:
            if self._pinch_active:
                self._pinch_idle += 1
                if self._pinch_idle >= self.idle_frames:
                    self._end_pinch(GesturePhase.ENDED)
            return

        if not self._pinch_active:
            self._pinch_active = True
            self._pinch_focus = state.position
            self.camera.handle_scale(ScaleSample(phase=GesturePhase.BEGAN, location=state.position))
        self._pinch_idle = 0
        self.camera.handle_scale(ScaleSample(phase=GesturePhase.CHANGED, location=state.position, scale=delta))

    def _end_pinch(self, phase: GesturePhase) -> None:
        self._pinch_active = False
        self._pinch_idle = 0
        self.camera.handle_scale(ScaleSample(phase=phase, location=self._pinch_focus))

    def _poll_drag(self, state: MouseState) -> None:
        panning = state.left_down and not state.pinch_modifier
        if panning and not self._drag_active:
            self._drag_active = True
            self.camera.handle_drag(DragSample(phase=GesturePhase.BEGAN, location=state.position))
            return
        if panning:
            self.camera.handle_drag(DragSample(phase=GesturePhase.CHANGED, location=state.position))
            return
        if self._drag_active:
            self._drag_active = False
            phase = GesturePhase.CANCELLED if state.pinch_modifier and state.left_down else GesturePhase.ENDED
            self.camera.handle_drag(DragSample(phase=phase, location=state.position))
