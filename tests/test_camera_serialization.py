from __future__ import annotations

import copy
import pickle

import pytest

from scenecam.camera import Camera
from scenecam.config import CameraConfig
from scenecam.geom import Vec2
from scenecam.node import SceneNode, ViewportSize


def _camera() -> Camera:
    return Camera(ViewportSize(100.0, 100.0), SceneNode(size=Vec2(1000.0, 1000.0)))


def test_camera_refuses_pickling() -> None:
    with pytest.raises(TypeError):
        pickle.dumps(_camera())


def test_camera_refuses_restore_from_state() -> None:
    bare = Camera.__new__(Camera)

    with pytest.raises(TypeError):
        bare.__setstate__({"_scale": 1.0})


def test_camera_refuses_copy() -> None:
    with pytest.raises(TypeError):
        copy.copy(_camera())


def test_from_config_applies_switches_and_scale() -> None:
    node = SceneNode(size=Vec2(1000.0, 1000.0))
    config = CameraConfig(
        scale_min=0.5,
        scale_max=3.0,
        scale=2.0,
        zoom_enabled=False,
        enabled=False,
        clamp_enabled=False,
        pan_enabled=False,
    )

    camera = Camera.from_config(ViewportSize(100.0, 100.0), node, config)

    assert camera.scale_range == (0.5, 3.0)
    assert camera.scale == 2.0
    assert node.scale == 2.0
    assert camera.zoom_enabled is False
    assert camera.enabled is False
    assert camera.scale_recognizer.enabled is False
    assert camera.clamp_enabled is False
    assert camera.panner is None


def test_viewport_accepts_vec2_and_sized_objects() -> None:
    node = SceneNode(size=Vec2(1000.0, 1000.0))

    from_vec = Camera(Vec2(320.0, 240.0), node)
    from_size = Camera(ViewportSize(320.0, 240.0), node)

    assert from_vec.viewport_size == from_size.viewport_size == ViewportSize(320.0, 240.0)


def test_constructor_config_controls_panner() -> None:
    node = SceneNode(size=Vec2(1000.0, 1000.0))

    camera = Camera(ViewportSize(100.0, 100.0), node, config=CameraConfig(pan_enabled=False))

    assert camera.panner is None


def test_explicit_pan_overrides_config() -> None:
    node = SceneNode(size=Vec2(1000.0, 1000.0))

    camera = Camera(ViewportSize(100.0, 100.0), node, config=CameraConfig(pan_enabled=False), pan=True)

    assert camera.panner is not None
