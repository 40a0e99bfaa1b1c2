from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .geom import Rect, Vec2


class SupportsSize(Protocol):
    width: float
    height: float


class WorldNode(Protocol):
    """The content a camera pans and zooms. The camera never owns it."""

    position: Vec2
    scale: float

    @property
    def frame(self) -> Rect: ...

    def set_scale(self, value: float) -> None: ...


@dataclass(slots=True, frozen=True)
class ViewportSize:
    width: float
    height: float

    @classmethod
    def from_size(cls, value: SupportsSize | Vec2) -> ViewportSize:
        if isinstance(value, Vec2):
            return cls(width=float(value.x), height=float(value.y))
        return cls(width=float(value.width), height=float(value.height))

    @property
    def half(self) -> Vec2:
        return Vec2(self.width * 0.5, self.height * 0.5)


@dataclass(slots=True)
class SceneNode:
    """Plain world node: content of `size` laid out from `position`, uniformly scaled."""

    size: Vec2
    position: Vec2 = field(default_factory=Vec2)
    scale: float = 1.0

    @property
    def frame(self) -> Rect:
        return Rect(
            x=self.position.x,
            y=self.position.y,
            w=self.size.x * self.scale,
            h=self.size.y * self.scale,
        )

    def set_scale(self, value: float) -> None:
        self.scale = float(value)

    @classmethod
    def from_rect(cls, rect: Rect) -> SceneNode:
        return cls(size=rect.size, position=Vec2(rect.x, rect.y))
