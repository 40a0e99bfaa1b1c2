from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from .math import trunc_toward_zero

if TYPE_CHECKING:
    import pyray as rl


class SupportsXY(Protocol):
    x: float
    y: float


class SupportsRect(Protocol):
    x: float
    y: float
    width: float
    height: float


@dataclass(slots=True, frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return self * scalar

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    @classmethod
    def from_xy(cls, value: SupportsXY) -> Vec2:
        return cls(x=float(value.x), y=float(value.y))

    def truncated(self) -> Vec2:
        return Vec2(trunc_toward_zero(self.x), trunc_toward_zero(self.y))

    def to_rl(self) -> rl.Vector2:
        import pyray as rl

        return rl.Vector2(self.x, self.y)

    def to_dict(self, *, ndigits: int | None = None) -> dict[str, float]:
        if ndigits is None:
            return {"x": self.x, "y": self.y}
        return {
            "x": round(self.x, ndigits),
            "y": round(self.y, ndigits),
        }


@dataclass(slots=True, frozen=True)
class Rect:
    """Axis-aligned rectangle in scene space (origin at the minimum corner)."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    @classmethod
    def from_xywh(cls, value: SupportsRect) -> Rect:
        return cls(
            x=float(value.x),
            y=float(value.y),
            w=float(value.width),
            h=float(value.height),
        )

    @property
    def width(self) -> float:
        return self.w

    @property
    def height(self) -> float:
        return self.h

    @property
    def min_x(self) -> float:
        return min(self.x, self.x + self.w)

    @property
    def max_x(self) -> float:
        return max(self.x, self.x + self.w)

    @property
    def min_y(self) -> float:
        return min(self.y, self.y + self.h)

    @property
    def max_y(self) -> float:
        return max(self.y, self.y + self.h)

    @property
    def size(self) -> Vec2:
        return Vec2(self.w, self.h)

    @property
    def center(self) -> Vec2:
        return Vec2(self.x + self.w * 0.5, self.y + self.h * 0.5)
