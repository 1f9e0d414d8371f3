"""Frustum clipping of clip-space triangles in homogeneous coordinates."""

from __future__ import annotations

from typing import Sequence

from .matrix import Vec3, Vec4
from .model import Face, Vertex

_PLANES = tuple((axis, sign) for axis in ("x", "y", "z") for sign in (1.0, -1.0))


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _channels(color: int) -> tuple[int, int, int, int]:
    return ((color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def lerp_vertex(a: Vertex, b: Vertex, t: float) -> Vertex:
    """Interpolate every attribute of a vertex along the edge from ``a`` to ``b``."""
    pa, pb = a.position, b.position
    position = Vec4(
        _lerp(pa.x, pb.x, t), _lerp(pa.y, pb.y, t), _lerp(pa.z, pb.z, t), _lerp(pa.w, pb.w, t)
    )
    normal = Vec3(*(_lerp(p, q, t) for p, q in zip(a.normal, b.normal)))
    world_pos = Vec3(*(_lerp(p, q, t) for p, q in zip(a.world_pos, b.world_pos)))
    r, g, bl, al = (
        int(_lerp(ca, cb, t)) & 0xFF for ca, cb in zip(_channels(a.color), _channels(b.color))
    )
    color = (r << 24) | (g << 16) | (bl << 8) | al
    return Vertex(position=position, normal=normal, color=color, world_pos=world_pos)


def _inside(v: Vertex, axis: str, sign: float) -> bool:
    return getattr(v.position, axis) * sign <= v.position.w


def _intersect(a: Vertex, b: Vertex, axis: str, sign: float) -> Vertex:
    da = a.position.w - getattr(a.position, axis) * sign
    db = b.position.w - getattr(b.position, axis) * sign
    return lerp_vertex(a, b, da / (da - db))


def _clip_polygon(poly: list[Vertex], axis: str, sign: float) -> list[Vertex]:
    out: list[Vertex] = []
    previous = [poly[-1], *poly[:-1]]
    for prev, curr in zip(previous, poly):
        curr_in = _inside(curr, axis, sign)
        prev_in = _inside(prev, axis, sign)
        if curr_in and prev_in:
            out.append(curr)
        elif curr_in:
            out.append(_intersect(prev, curr, axis, sign))
            out.append(curr)
        elif prev_in:
            out.append(_intersect(prev, curr, axis, sign))
    return out


def clip_triangle(v0: Vertex, v1: Vertex, v2: Vertex) -> list[Vertex]:
    """Clip a triangle against all six frustum planes; empty if nothing remains."""
    poly = [v0, v1, v2]
    for axis, sign in _PLANES:
        poly = _clip_polygon(poly, axis, sign)
        if not poly:
            return []
    return poly


def _fan(poly: list[Vertex], color: int, base: int) -> list[Face]:
    faces = []
    anchor = poly[0].position.xyz()
    for i, (first, second) in enumerate(zip(poly[1:-1], poly[2:]), start=1):
        a = first.position.xyz()
        c = second.position.xyz()
        normal = (anchor - a).cross(c - a).normalize()
        faces.append(Face((base, base + i, base + i + 1), color, normal, 0))
    return faces


def cull_triangles(
    vertices: Sequence[Vertex], faces: Sequence[Face]
) -> tuple[list[Vertex], list[Face]]:
    """Clip every face to the view frustum and fan-triangulate what is left."""
    out_vertices: list[Vertex] = []
    out_faces: list[Face] = []
    for face in faces:
        poly = clip_triangle(*(vertices[i] for i in face.indices))
        if not poly:
            continue
        base = len(out_vertices)
        out_vertices.extend(poly)
        out_faces.extend(_fan(poly, face.color, base))
    return out_vertices, out_faces