"""The interactive viewer and the full render pipeline it runs each frame."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Iterable, Sequence

from .controls import HOME_POSITION, Controls
from .culling import cull_triangles
from .drawer import Display, pygame
from .matrix import Mat4, Vec3, Vec4
from .model import Face, Vertex
from .objfile import read_model
from .pipeline import camera_from_world, clip_from_camera, ndc_from_clip, world_from_model
from .quat import Quat
from .screenspace import FrameBuffer, screen_from_ndc

ZNEAR = 0.1
ZFAR = 50.0
FOV = math.pi / 2.0
FRAME_DELAY_MS = 16


def render_model(
    framebuffer: FrameBuffer,
    vertices: Sequence[Vertex],
    faces: Sequence[Face],
    transform: Mat4,
    camera_pos: Vec3,
    camera_rot: Quat,
) -> tuple[list[Vertex], list[Face]]:
    """Run the model through the pipeline and draw its visible triangle outlines.

    Returns the screen-space vertices and the clipped faces that index them.
    """
    aspect = framebuffer.width / framebuffer.height
    world = world_from_model(vertices, transform)
    camera = camera_from_world(camera_pos, camera_rot, world)
    clip = clip_from_camera(camera, FOV, aspect, ZNEAR, ZFAR)
    culled_vertices, culled_faces = cull_triangles(clip, faces)
    ndc = ndc_from_clip(culled_vertices)
    screen = screen_from_ndc(ndc, framebuffer.width, framebuffer.height)

    framebuffer.clear_depth()
    framebuffer.draw_model(
        [v.position for v in screen],
        [i for face in culled_faces for i in face.indices],
        [face.color for face in culled_faces],
    )
    return screen, culled_faces


def format_vertices(vertices: Iterable[Vec4]) -> str:
    """One ``Vertex i: (x, y, z, w)`` line per vertex."""
    return "\n".join(
        f"Vertex {i}: ({v.x:f}, {v.y:f}, {v.z:f}, {v.w:f})" for i, v in enumerate(vertices)
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="softrender", description="Software 3D model viewer.")
    parser.add_argument("model", nargs="?", default="cube.obj", help="OBJ file to show")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    args = parser.parse_args(argv)

    try:
        vertices, faces = read_model(args.model)
    except OSError as exc:
        print(f"Failed to open model file: {exc}", file=sys.stderr)
        return 1

    print("Read vertices:")
    for i, vertex in enumerate(vertices[:1]):
        p = vertex.position
        print(f"Vertex {i}: ({p.x:f}, {p.y:f}, {p.z:f})")

    transform = Mat4.identity()
    print("Model transform:")
    print(transform.format())
    change = Mat4.rotation_y(0.01)

    camera_pos = HOME_POSITION
    camera_rot = Quat()
    controls = Controls()
    framebuffer = FrameBuffer(args.width, args.height)

    with Display(args.width, args.height) as display:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    controls.keydown(pygame.key.name(event.key))
                elif event.type == pygame.KEYUP:
                    controls.keyup(pygame.key.name(event.key))

            pygame.time.delay(FRAME_DELAY_MS)

            render_model(framebuffer, vertices, faces, transform, camera_pos, camera_rot)
            display.present(framebuffer)
            framebuffer.clear()

            transform = transform @ change
            camera_pos, camera_rot = controls.tick(camera_pos, camera_rot)

            print(f"Camera position: ({camera_pos.x:f}, {camera_pos.y:f}, {camera_pos.z:f})")
            print(
                f"Camera rotation: ({camera_rot.w:f}, {camera_rot.x:f}, "
                f"{camera_rot.y:f}, {camera_rot.z:f})"
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())