"""Vertex and face records that flow through the pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .matrix import Vec3, Vec4

WHITE = 0xFFFFFFFF


@dataclass(frozen=True)
class Vertex:
    """A vertex: homogeneous position, normal, packed RGBA colour and world position."""

    position: Vec4 = field(default_factory=Vec4)
    normal: Vec3 = field(default_factory=Vec3)
    color: int = WHITE
    world_pos: Vec3 = field(default_factory=Vec3)


@dataclass(frozen=True)
class Face:
    """A triangle referring to three vertices by index."""

    indices: tuple = (0, 0, 0)
    color: int = WHITE
    normal: Vec3 = field(default_factory=Vec3)
    material: int = 0

    def __post_init__(self) -> None:
        indices = tuple(int(i) for i in self.indices)
        if len(indices) != 3:
            raise ValueError(f"a face needs exactly 3 indices, got {len(indices)}")
        object.__setattr__(self, "indices", indices)


def add_w(points: Iterable[Vec3]) -> list[Vec4]:
    """Lift 3D points to homogeneous coordinates with w = 1."""
    return [Vec4(p.x, p.y, p.z, 1.0) for p in points]