from __future__ import annotations

import math
from pathlib import Path

import msgspec

DEFAULT_SCALE_MIN = 1.0
DEFAULT_SCALE_MAX = 1.5
DEFAULT_SCALE = 1.0


class CameraConfigError(ValueError):
    pass


class CameraConfig(msgspec.Struct, forbid_unknown_fields=True, frozen=True):
    scale_min: float = DEFAULT_SCALE_MIN
    scale_max: float = DEFAULT_SCALE_MAX
    scale: float = DEFAULT_SCALE
    zoom_enabled: bool = True
    enabled: bool = True
    clamp_enabled: bool = True
    pan_enabled: bool = True

    @property
    def scale_range(self) -> tuple[float, float]:
        return self.scale_min, self.scale_max


def validate_scale_range(scale_min: float, scale_max: float) -> tuple[float, float]:
    low = float(scale_min)
    high = float(scale_max)
    if not (math.isfinite(low) and math.isfinite(high)):
        raise CameraConfigError(f"scale range must be finite: ({low}, {high})")
    if not (low > 0.0 and high > 0.0):
        raise CameraConfigError(f"scale range must be positive: ({low}, {high})")
    if not low <= high:
        raise CameraConfigError(f"scale range min exceeds max: ({low}, {high})")
    return low, high


def validate_camera_config(config: CameraConfig) -> CameraConfig:
    validate_scale_range(config.scale_min, config.scale_max)
    if not (math.isfinite(config.scale) and config.scale > 0.0):
        raise CameraConfigError(f"initial scale must be finite and positive: {config.scale}")
    return config


def decode_camera_config(data: bytes | str, *, fmt: str = "json") -> CameraConfig:
    try:
        if fmt == "toml":
            config = msgspec.toml.decode(data, type=CameraConfig)
        elif fmt == "json":
            config = msgspec.json.decode(data, type=CameraConfig)
        else:
            raise CameraConfigError(f"unknown config format: {fmt!r}")
    except msgspec.DecodeError as exc:
        raise CameraConfigError(f"invalid camera config: {exc}") from exc
    return validate_camera_config(config)


def load_camera_config(path: Path) -> CameraConfig:
    suffix = path.suffix.lower()
    if suffix not in (".toml", ".json"):
        raise CameraConfigError(f"unsupported config file type: {path.name}")
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise CameraConfigError(f"cannot read camera config {path}: {exc}") from exc
    return decode_camera_config(data, fmt=suffix[1:])


def dump_camera_config(config: CameraConfig, path: Path) -> Path:
    validate_camera_config(config)
    path.parent.mkdir(parents=True, exist_ok=True)
    blob = msgspec.json.format(msgspec.json.encode(config), indent=2)
    path.write_bytes(blob + b"\n")
    return path
