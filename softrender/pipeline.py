"""Vertex transforms from model space through to normalised device coordinates."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Iterable

from .matrix import Mat4, Vec3, Vec4
from .model import Vertex
from .quat import Quat


def _transform_vertices(matrix: Mat4, vertices: Iterable[Vertex]) -> list[Vertex]:
    return [
        replace(
            vertex,
            position=matrix.transform_vec4(vertex.position),
            normal=matrix.transform_vec3(vertex.normal),
        )
        for vertex in vertices
    ]


def world_from_model(vertices: Iterable[Vertex], transform: Mat4) -> list[Vertex]:
    """Place model-space vertices in the world using ``transform``."""
    return _transform_vertices(transform, vertices)


def camera_from_world(
    camera_pos: Vec3, camera_rot: Quat, vertices: Iterable[Vertex]
) -> list[Vertex]:
    """Express world-space vertices relative to a camera at ``camera_pos``."""
    rotation = camera_rot.conjugate().to_mat4()
    translation = Mat4.translation(-camera_pos.x, -camera_pos.y, -camera_pos.z)
    return _transform_vertices(rotation @ translation, vertices)


def projection_matrix(fov: float, aspect: float, znear: float, zfar: float) -> Mat4:
    """Perspective projection matrix in column-major order."""
    f = 1.0 / math.tan(fov * 0.5)
    z_range = znear - zfar
    return Mat4(
        (
            f / aspect, 0.0, 0.0, 0.0,
            0.0, f, 0.0, 0.0,
            0.0, 0.0, (zfar + znear) / z_range, -1.0,
            0.0, 0.0, (2.0 * zfar * znear) / z_range, 0.0,
        )
    )


def clip_from_camera(
    vertices: Iterable[Vertex], fov: float, aspect: float, znear: float, zfar: float
) -> list[Vertex]:
    """Project camera-space vertices into homogeneous clip space."""
    return _transform_vertices(projection_matrix(fov, aspect, znear, zfar), vertices)


def ndc_from_clip(vertices: Iterable[Vertex]) -> list[Vertex]:
    """Perspective divide: x, y and z over w, with w kept."""
    result = []
    for vertex in vertices:
        p = vertex.position
        result.append(replace(vertex, position=Vec4(p.x / p.w, p.y / p.w, p.z / p.w, p.w)))
    return result