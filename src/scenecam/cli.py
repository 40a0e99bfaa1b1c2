from __future__ import annotations

import json
from pathlib import Path

import typer

from .camera import Camera
from .config import CameraConfig, CameraConfigError, load_camera_config
from .debug_log import close_camera_debug_log, init_camera_debug_log, set_camera_debug_enabled
from .geom import Rect, Vec2
from .node import SceneNode, ViewportSize
from .trace import GestureScriptError, format_frame, load_script, replay_script


app = typer.Typer(add_completion=False)


def _parse_floats(text: str, sep: str, count: int, what: str) -> list[float]:
    parts = [p.strip() for p in str(text).split(sep)]
    if len(parts) != count:
        raise ValueError(f"{what} expects {count} values separated by {sep!r}: {text!r}")
    try:
        return [float(p) for p in parts]
    except ValueError as exc:
        raise ValueError(f"{what} has a non-numeric value: {text!r}") from exc


def parse_world(text: str) -> Rect:
    x, y, w, h = _parse_floats(text, ",", 4, "world")
    return Rect(x, y, w, h)


def parse_viewport(text: str) -> ViewportSize:
    width, height = _parse_floats(text.lower(), "x", 2, "viewport")
    if width <= 0.0 or height <= 0.0:
        raise ValueError(f"viewport size must be positive: {text!r}")
    return ViewportSize(width=width, height=height)


def _load_config(path: Path | None) -> CameraConfig:
    if path is None:
        return CameraConfig()
    try:
        return load_camera_config(path)
    except CameraConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


def _maybe_init_log(log_dir: Path, label: str) -> None:
    path = init_camera_debug_log(base_dir=log_dir, label=label)
    if path is not None:
        typer.echo(f"debug log: {path}", err=True)


def _release_debug(forced: bool) -> None:
    close_camera_debug_log()
    if forced:
        set_camera_debug_enabled(None)


@app.command("trace")
def cmd_trace(
    script_path: Path = typer.Argument(..., help="gesture script (.json)"),
    as_json: bool = typer.Option(False, "--json", help="print frames as JSON lines"),
    debug: bool = typer.Option(False, "--debug", help="write a camera debug log"),
    log_dir: Path = typer.Option(Path("artifacts"), help="debug log root (default: ./artifacts)"),
) -> None:
    """Replay a gesture script through a camera and print each frame."""
    try:
        script = load_script(script_path)
    except GestureScriptError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    if debug:
        set_camera_debug_enabled(True)
    try:
        _maybe_init_log(log_dir, "trace")
        for frame in replay_script(script):
            if as_json:
                typer.echo(json.dumps(frame.to_dict(), sort_keys=True))
            else:
                typer.echo(format_frame(frame))
    finally:
        _release_debug(debug)


@app.command("bounds")
def cmd_bounds(
    world: str = typer.Option(..., help="world frame as X,Y,W,H"),
    viewport: str = typer.Option(..., help="viewport size as WxH"),
    position: str | None = typer.Option(None, help="clamp this X,Y as well"),
) -> None:
    """Print the legal camera-center range for a world frame and viewport."""
    try:
        rect = parse_world(world)
        size = parse_viewport(viewport)
        target = None
        if position is not None:
            px, py = _parse_floats(position, ",", 2, "position")
            target = Vec2(px, py)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    camera = Camera(size, SceneNode.from_rect(rect), pan=False)
    min_x, max_x, min_y, max_y = camera.clamp_bounds()
    typer.echo(f"x: [{min_x:g}, {max_x:g}]")
    typer.echo(f"y: [{min_y:g}, {max_y:g}]")
    if target is not None:
        camera.position = target
        camera.clamp_world_node()
        typer.echo(f"clamped: ({camera.position.x:g}, {camera.position.y:g})")


@app.command("view")
def cmd_view(
    width: int = typer.Option(1024, help="window width"),
    height: int = typer.Option(768, help="window height"),
    fps: int = typer.Option(60, help="target fps"),
    world_size: float = typer.Option(2048.0, help="square world size"),
    config: Path | None = typer.Option(None, help="camera config (.toml or .json)"),
    debug: bool = typer.Option(False, "--debug", help="write a camera debug log"),
    log_dir: Path = typer.Option(Path("artifacts"), help="debug log root (default: ./artifacts)"),
) -> None:
    """Open the interactive camera view."""
    from .app import run_view
    from .views import CameraView

    camera_config = _load_config(config)
    if debug:
        set_camera_debug_enabled(True)
    try:
        view = CameraView(
            viewport=ViewportSize(width=float(width), height=float(height)),
            world_size=Vec2(float(world_size), float(world_size)),
            config=camera_config,
            log_dir=log_dir,
        )
        run_view(view, width=width, height=height, title="scenecam", fps=fps)
    finally:
        _release_debug(debug)


def main(argv: list[str] | None = None) -> None:
    app(prog_name="scenecam", args=argv)


if __name__ == "__main__":
    main()
