"""Fragment generation along triangle edges."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .matrix import Vec2, Vec3
from .model import Face, Vertex


@dataclass(frozen=True)
class Fragment:
    """A candidate pixel with depth, colour and normal."""

    screen_coord: Vec2
    depth: float
    color: int
    normal: Vec3


def _round(value: float) -> int:
    """Round half away from zero."""
    rounded = math.floor(abs(value) + 0.5)
    return rounded if value >= 0 else -rounded


def _blend(point: Vec2, point_a: Vec2, point_b: Vec2, color_a: int, color_b: int, dist: float) -> int:
    if dist == 0.0:
        return color_a
    value = point.distance(point_a) * color_a / dist + point.distance(point_b) * color_b / dist
    return int(value) & 0xFFFFFFFF


def fragment_line(a: Vertex, b: Vertex) -> list[Fragment]:
    """Fragments along the screen-space edge from ``a`` to ``b``."""
    dx = _round(b.position.x) - _round(a.position.x)
    dy = _round(b.position.y) - _round(a.position.y)
    dz = _round(b.position.z) - _round(a.position.z)
    point_a = Vec2(int(a.position.x), int(a.position.y))
    point_b = Vec2(int(b.position.x), int(b.position.y))
    dist = point_a.distance(point_b)

    fragments = []
    if abs(dy) <= abs(dx):
        if a.position.x > b.position.x:
            a, b = b, a
        start, end = a.position, b.position
        slope = dy / dx if dx else 0.0
        z_step = dz / dx if dx else 0.0
        z = start.z
        for x in range(int(start.x), math.floor(end.x) + 1):
            point = Vec2(x, int(slope * (x - start.x) + start.y))
            color = _blend(point, point_a, point_b, a.color, b.color, dist)
            fragments.append(Fragment(point, z, color, a.normal))
            z += z_step * (x - start.x)
    else:
        if a.position.y > b.position.y:
            a, b = b, a
        start, end = a.position, b.position
        slope = dx / dy
        z_step = dz / dy
        z = start.z
        for y in range(int(start.y), math.floor(end.y) + 1):
            point = Vec2(int(slope * (y - start.y) + start.x), y)
            color = _blend(point, point_a, point_b, a.color, b.color, dist)
            fragments.append(Fragment(point, z, color, a.normal))
            z += z_step * (y - start.y)
    return fragments


def draw_fragments(vertices: Sequence[Vertex], faces: Sequence[Face]) -> list[Fragment]:
    """Fragments for the three edges of every face."""
    fragments: list[Fragment] = []
    for face in faces:
        i0, i1, i2 = face.indices
        fragments.extend(fragment_line(vertices[i0], vertices[i1]))
        fragments.extend(fragment_line(vertices[i0], vertices[i2]))
        fragments.extend(fragment_line(vertices[i1], vertices[i2]))
    return fragments