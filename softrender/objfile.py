"""Wavefront OBJ reading: positions, normals and triangulated faces."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Iterable

from .matrix import Vec3, Vec4
from .model import WHITE, Face, Vertex

MAX_VERTICES = 10000
MAX_FACES = 30000


def _parse_floats(text: str, lineno: int) -> Vec3:
    parts = text.split()
    if len(parts) < 3:
        raise ValueError(f"line {lineno}: expected three coordinates, got {text.strip()!r}")
    try:
        x, y, z = (float(p) for p in parts[:3])
    except ValueError as exc:
        raise ValueError(f"line {lineno}: bad coordinate in {text.strip()!r}") from exc
    return Vec3(x, y, z)


def _parse_face_token(token: str) -> tuple[int, int] | None:
    """Return ``(vertex, normal)`` from a ``v/t/n`` token, or None if it is not one."""
    parts = token.split("/")
    if len(parts) != 3:
        return None
    try:
        vertex, _texture, normal = (int(p) for p in parts)
    except ValueError:
        return None
    return vertex, normal


def _face_corners(text: str) -> list[tuple[int, int]]:
    corners = []
    for token in text.split()[:4]:
        corner = _parse_face_token(token)
        if corner is None:
            break
        corners.append(corner)
    return corners


def parse_model(lines: Iterable[str]) -> tuple[list[Vertex], list[Face]]:
    """Parse OBJ text lines into vertices and triangle faces.

    Only ``v``, ``vn`` and ``f`` lines are read. Faces must use the
    ``v/t/n`` form; triangles and quads are accepted, quads being split
    into two triangles.
    """
    positions: list[Vec3] = []
    normals: list[Vec3] = []
    raw_faces: list[tuple[list[tuple[int, int]], int]] = []

    for lineno, line in enumerate(lines, start=1):
        if line.startswith("v "):
            positions.append(_parse_floats(line[2:], lineno))
            if len(positions) > MAX_VERTICES:
                raise ValueError(f"model has more than {MAX_VERTICES} vertices")
        elif line.startswith("vn "):
            normals.append(_parse_floats(line[3:], lineno))
        elif line.startswith("f "):
            corners = _face_corners(line[2:])
            if len(corners) >= 3:
                raw_faces.append((corners, lineno))

    def normal_at(index: int, lineno: int) -> Vec3:
        if not 1 <= index <= len(normals):
            raise ValueError(f"line {lineno}: normal index {index} out of range")
        return normals[index - 1]

    vertex_normals: dict[int, Vec3] = {}
    faces: list[Face] = []
    for corners, lineno in raw_faces:
        for vertex_index, normal_index in corners:
            if not 1 <= vertex_index <= len(positions):
                raise ValueError(f"line {lineno}: vertex index {vertex_index} out of range")
            vertex_normals[vertex_index - 1] = normal_at(normal_index, lineno)
        face_normal = normal_at(corners[0][1], lineno)
        v = [vertex_index - 1 for vertex_index, _ in corners]
        faces.append(Face((v[0], v[1], v[2]), WHITE, face_normal, 0))
        if len(v) == 4:
            faces.append(Face((v[0], v[2], v[3]), WHITE, face_normal, 0))
        if len(faces) > MAX_FACES:
            raise ValueError(f"model has more than {MAX_FACES} faces")

    vertices = [
        Vertex(position=Vec4(p.x, p.y, p.z, 1.0), color=WHITE, world_pos=p) for p in positions
    ]
    for index, normal in vertex_normals.items():
        vertices[index] = replace(vertices[index], normal=normal)
    return vertices, faces


def read_model(path) -> tuple[list[Vertex], list[Face]]:
    """Read an OBJ file from ``path``."""
    with Path(path).open("r", encoding="utf-8") as handle:
        return parse_model(handle)