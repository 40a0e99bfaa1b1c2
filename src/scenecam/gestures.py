from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .geom import Vec2


class GesturePhase(str, Enum):
    BEGAN = "began"
    CHANGED = "changed"
    ENDED = "ended"
    CANCELLED = "cancelled"

    @property
    def finished(self) -> bool:
        return self in (GesturePhase.ENDED, GesturePhase.CANCELLED)


@dataclass(slots=True)
class ScaleSample:
    """One pinch sample. `scale` is the delta since the previous sample and is
    reset to 1.0 by the camera once consumed."""

    phase: GesturePhase
    location: Vec2
    scale: float = 1.0


@dataclass(slots=True)
class DragSample:
    phase: GesturePhase
    location: Vec2


@dataclass(slots=True)
class ScaleRecognizer:
    """Input-layer switch for the pinch stream; adapters skip delivery while disabled."""

    enabled: bool = True
