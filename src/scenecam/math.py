from __future__ import annotations

import math


def clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def trunc_toward_zero(value: float) -> float:
    # Integer truncation kept as a float so positions stay homogeneous.
    return float(math.trunc(value))


def strictly_between(value: float, low: float, high: float) -> bool:
    return low < value < high
