"""The render loop: projecting a mesh through a camera and drawing it."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence

from softraster.camera import Camera
from softraster.framebuffer import FrameBuffer
from softraster.mesh import Mesh
from softraster.objfile import load_obj
from softraster.vector import Vector2D, Vector3D

FPS = 200
BACKGROUND_COLOR = 0xFF000000
GRID_COLOR = 0xFF333333
DRAW_COLOR = 0xFFFFFFFF
MOVE_STEP = 0.05
FOV_STEP = 10.0
MESH_ROTATION_X = 180.0
MESH_ROTATION_Y = -45.0
_DEG_TO_RAD = 3.14 / 180
DEFAULT_OBJ_PATH = "../obj/teddy.obj"

_MOVES = {
    "w": Vector3D(0.0, MOVE_STEP, 0.0),
    "s": Vector3D(0.0, -MOVE_STEP, 0.0),
    "a": Vector3D(MOVE_STEP, 0.0, 0.0),
    "d": Vector3D(-MOVE_STEP, 0.0, 0.0),
    "z": Vector3D(0.0, 0.0, MOVE_STEP),
    "x": Vector3D(0.0, 0.0, -MOVE_STEP),
}
_FOV_CHANGES = {"c": FOV_STEP, "v": -FOV_STEP}


def handle_key(camera: Camera, key: str) -> bool:
    """Apply a key press to the camera; return False when it asks to quit.

    Keys: ``w``/``s`` move up/down, ``a``/``d`` move along X, ``z``/``x``
    move along Z, ``c``/``v`` widen/narrow the field of view and
    ``escape`` quits.
    """
    if key == "escape":
        return False
    if key in _MOVES:
        camera.position = camera.position + _MOVES[key]
    elif key in _FOV_CHANGES:
        camera.fov += _FOV_CHANGES[key]
    return True


def project_mesh(mesh: Mesh, camera: Camera) -> list[Vector2D]:
    """Rotate the mesh, move it into camera space and project every vertex."""
    mesh.rotation = Vector3D(MESH_ROTATION_X, MESH_ROTATION_Y, mesh.rotation.z)
    angle_x = mesh.rotation.x * _DEG_TO_RAD
    angle_y = mesh.rotation.y * _DEG_TO_RAD
    cam_pos = camera.position
    projected = []
    for vertex in mesh.vertices:
        point = mesh.rotate_y(mesh.rotate_x(vertex, angle_x), angle_y)
        projected.append(camera.project(point - cam_pos))
    mesh.projected_points = projected
    return projected


def render_mesh(framebuffer: FrameBuffer, mesh: Mesh) -> None:
    """Draw the background, the grid, the projected vertices and the wireframe."""
    framebuffer.clear(BACKGROUND_COLOR)
    framebuffer.draw_grid(GRID_COLOR)
    points = mesh.projected_points
    for point in points:
        framebuffer.draw_rect(int(point.x), int(point.y), 2, 2, DRAW_COLOR)
    for tri in mesh.indices:
        p1, p2, p3 = points[tri.a], points[tri.b], points[tri.c]
        for start, end in ((p1, p2), (p2, p3), (p1, p3)):
            framebuffer.draw_line(
                int(start.x), int(start.y), int(end.x), int(end.y), DRAW_COLOR
            )


class RenderEngine:
    """Owns the camera, the mesh and the frame buffer, and runs the window loop."""

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        obj_path: str | os.PathLike[str] | None = None,
    ) -> None:
        self.camera = Camera()
        self.mesh = Mesh()
        self.framebuffer = FrameBuffer(width, height)
        self.running = True
        if obj_path is not None:
            self.mesh.vertices, self.mesh.indices = load_obj(obj_path)
        self.mesh.projected_points = [Vector2D() for _ in self.mesh.vertices]

    def update(self) -> list[Vector2D]:
        """Recompute the screen positions of the mesh vertices."""
        return project_mesh(self.mesh, self.camera)

    def render(self) -> FrameBuffer:
        """Draw the current frame into the frame buffer and return it."""
        render_mesh(self.framebuffer, self.mesh)
        return self.framebuffer

    def run(self) -> None:
        """Open a borderless window and render until quit or Escape."""
        import pygame

        keymap = {
            pygame.K_ESCAPE: "escape",
            pygame.K_w: "w",
            pygame.K_s: "s",
            pygame.K_a: "a",
            pygame.K_d: "d",
            pygame.K_z: "z",
            pygame.K_x: "x",
            pygame.K_c: "c",
            pygame.K_v: "v",
        }
        size = (self.framebuffer.width, self.framebuffer.height)
        pygame.init()
        try:
            screen = pygame.display.set_mode(size, pygame.NOFRAME)
            pygame.display.set_caption("SoftRender")
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        key = keymap.get(event.key)
                        if key is not None and not handle_key(self.camera, key):
                            self.running = False
                if not self.running:
                    break
                self.update()
                frame = self.render()
                surface = pygame.image.frombuffer(frame.to_bytes(), size, "BGRA")
                screen.blit(surface, (0, 0))
                pygame.display.flip()
                clock.tick(FPS)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: load a model and show it in a window."""
    parser = argparse.ArgumentParser(description="Wireframe software renderer.")
    parser.add_argument("obj", nargs="?", default=DEFAULT_OBJ_PATH, help="OBJ model to show")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    args = parser.parse_args(argv)
    try:
        engine = RenderEngine(args.width, args.height, args.obj)
    except (OSError, ValueError) as exc:
        print(f"Failed to load model {args.obj}: {exc}", file=sys.stderr)
        return 1
    engine.run()
    return 0