from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

import msgspec

from .camera import Camera
from .config import CameraConfig, CameraConfigError, validate_camera_config
from .geom import Rect, Vec2
from .gestures import DragSample, GesturePhase, ScaleSample
from .node import SceneNode, ViewportSize


class GestureScriptError(ValueError):
    pass


class PointRecord(msgspec.Struct, forbid_unknown_fields=True):
    x: float = 0.0
    y: float = 0.0

    def to_vec2(self) -> Vec2:
        return Vec2(float(self.x), float(self.y))


class RectRecord(msgspec.Struct, forbid_unknown_fields=True):
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def to_rect(self) -> Rect:
        return Rect(float(self.x), float(self.y), float(self.w), float(self.h))


class ViewportRecord(msgspec.Struct, forbid_unknown_fields=True):
    width: float
    height: float


class ScaleEvent(msgspec.Struct, tag_field="kind", tag="scale", forbid_unknown_fields=True):
    phase: GesturePhase
    location: PointRecord = msgspec.field(default_factory=PointRecord)
    scale: float = 1.0


class DragEvent(msgspec.Struct, tag_field="kind", tag="drag", forbid_unknown_fields=True):
    phase: GesturePhase
    location: PointRecord = msgspec.field(default_factory=PointRecord)


GestureEvent: TypeAlias = ScaleEvent | DragEvent


class GestureScript(msgspec.Struct, forbid_unknown_fields=True):
    world: RectRecord
    viewport: ViewportRecord
    position: PointRecord = msgspec.field(default_factory=PointRecord)
    config: CameraConfig = msgspec.field(default_factory=CameraConfig)
    events: list[GestureEvent] = msgspec.field(default_factory=list)


@dataclass(frozen=True, slots=True)
class TraceFrame:
    index: int
    kind: str
    phase: str
    scale: float
    position: Vec2

    def to_dict(self) -> dict[str, object]:
        return {
            "index": self.index,
            "kind": self.kind,
            "phase": self.phase,
            "scale": round(self.scale, 6),
            "position": self.position.to_dict(ndigits=6),
        }


_SCRIPT_DECODER = msgspec.json.Decoder(type=GestureScript)


def decode_script(blob: bytes | str) -> GestureScript:
    try:
        script = _SCRIPT_DECODER.decode(blob)
    except msgspec.DecodeError as exc:
        raise GestureScriptError(f"invalid gesture script: {exc}") from exc
    if script.viewport.width <= 0.0 or script.viewport.height <= 0.0:
        raise GestureScriptError("viewport size must be positive")
    try:
        validate_camera_config(script.config)
    except CameraConfigError as exc:
        raise GestureScriptError(str(exc)) from exc
    return script


def load_script(path: Path) -> GestureScript:
    try:
        blob = path.read_bytes()
    except OSError as exc:
        raise GestureScriptError(f"cannot read gesture script {path}: {exc}") from exc
    return decode_script(blob)


def encode_script(script: GestureScript) -> bytes:
    return msgspec.json.encode(script)


def build_camera(script: GestureScript) -> Camera:
    node = SceneNode.from_rect(script.world.to_rect())
    viewport = ViewportSize(width=float(script.viewport.width), height=float(script.viewport.height))
    return Camera.from_config(viewport, node, script.config, position=script.position.to_vec2())


def replay_script(script: GestureScript, *, camera: Camera | None = None) -> list[TraceFrame]:
    if camera is None:
        camera = build_camera(script)
    frames: list[TraceFrame] = []
    for index, event in enumerate(script.events):
        location = event.location.to_vec2()
        if isinstance(event, ScaleEvent):
            camera.handle_scale(ScaleSample(phase=event.phase, location=location, scale=float(event.scale)))
            kind = "scale"
        else:
            camera.handle_drag(DragSample(phase=event.phase, location=location))
            kind = "drag"
        frames.append(
            TraceFrame(
                index=index,
                kind=kind,
                phase=event.phase.value,
                scale=camera.scale,
                position=camera.position,
            )
        )
    return frames


def format_frame(frame: TraceFrame) -> str:
    return (
        f"{frame.index:03d}  {frame.kind:5s} {frame.phase:9s}  "
        f"scale={frame.scale:.4f}  pos=({frame.position.x:.2f}, {frame.position.y:.2f})"
    )
