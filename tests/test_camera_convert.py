from __future__ import annotations

from scenecam.camera import Camera
from scenecam.geom import Vec2
from scenecam.node import SceneNode, ViewportSize


def test_view_center_maps_to_camera_position() -> None:
    camera = Camera(ViewportSize(200.0, 100.0), SceneNode(size=Vec2(1000.0, 1000.0)), position=Vec2(300.0, 400.0))

    assert camera.convert_point_from_view(Vec2(100.0, 50.0)) == Vec2(300.0, 400.0)
    assert camera.convert_point_from_view(Vec2(0.0, 0.0)) == Vec2(200.0, 450.0)


def test_view_conversion_accounts_for_node_offset_and_scale() -> None:
    node = SceneNode(size=Vec2(1000.0, 1000.0), position=Vec2(100.0, 100.0), scale=2.0)
    camera = Camera(ViewportSize(100.0, 100.0), node, position=Vec2(500.0, 500.0))

    local = camera.convert_point_from_view(Vec2(50.0, 50.0))

    assert local == Vec2(200.0, 200.0)
    assert camera.convert_point_to_view(local) == Vec2(50.0, 50.0)
