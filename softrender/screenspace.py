"""Screen-space conversion and a depth-tested framebuffer with line drawing."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Iterable, Sequence

from .matrix import Vec4
from .model import Vertex

CLEAR_COLOR = 0xFF000000
POINT_COLOR = 0xFFFF0000
VERTICAL_LINE_COLOR = 0xFF00FF00


def _round(value: float) -> int:
    """Round half away from zero."""
    rounded = math.floor(abs(value) + 0.5)
    return rounded if value >= 0 else -rounded


def screen_from_ndc(vertices: Iterable[Vertex], width: int, height: int) -> list[Vertex]:
    """Map NDC x and y onto pixel coordinates, flipping y; z and w are kept."""
    result = []
    for vertex in vertices:
        p = vertex.position
        position = Vec4(
            (p.x + 1.0) * 0.5 * width,
            (1.0 - (p.y + 1.0) * 0.5) * height,
            p.z,
            p.w,
        )
        result.append(replace(vertex, position=position))
    return result


class FrameBuffer:
    """ARGB pixels and a depth buffer of the same size."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"framebuffer size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = [CLEAR_COLOR] * (width * height)
        self.depth = [1.0] * (width * height)

    def _index(self, x: int, y: int) -> int | None:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        return None

    def clear(self, color: int = CLEAR_COLOR) -> None:
        """Fill every pixel with ``color``."""
        self.pixels = [color] * (self.width * self.height)

    def clear_depth(self) -> None:
        """Reset every depth value to the far plane."""
        self.depth = [1.0] * (self.width * self.height)

    def pixel(self, x: int, y: int) -> int:
        index = self._index(x, y)
        if index is None:
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[index]

    def plot_point(self, x: int, y: int) -> None:
        """Draw a 5x5 marker centred on ``(x, y)``."""
        for py in range(y - 2, y + 3):
            for px in range(x - 2, x + 3):
                index = self._index(px, py)
                if index is not None:
                    self.pixels[index] = POINT_COLOR

    def add_point_depth(self, point: Vec4, color: int) -> None:
        """Write ``color`` if ``point`` is nearer than what is stored there."""
        index = self._index(_round(point.x), _round(point.y))
        if index is not None and point.z < self.depth[index]:
            self.depth[index] = point.z
            self.pixels[index] = color

    def draw_line(self, p1: Vec4, p2: Vec4, color: int) -> None:
        """Rasterise a depth-tested line, stepping along its major axis."""
        dx = int(p2.x - p1.x)
        dy = int(p2.y - p1.y)
        dz = int(p2.z - p1.z)
        if abs(dy) <= abs(dx):
            if p1.x > p2.x:
                p1, p2 = p2, p1
            slope = dy / dx if dx else 0.0
            z_step = dz / dx if dx else 0.0
            z = p1.z
            for x in range(int(p1.x), math.floor(p2.x) + 1):
                y = int(slope * (x - p1.x) + p1.y)
                self.add_point_depth(Vec4(x, y, z, 1.0), color)
                z += z_step * (x - p1.x)
        else:
            if p1.y > p2.y:
                p1, p2 = p2, p1
            slope = dx / dy
            z_step = dz / dy
            z = p1.z
            for y in range(int(p1.y), math.floor(p2.y) + 1):
                x = int(slope * (y - p1.y) + p1.x)
                self.add_point_depth(Vec4(x, y, z, 1.0), color)
                z += z_step * (y - p1.y)

    def draw_vertical_line(self, p1: Vec4, p2: Vec4) -> None:
        """Draw a green vertical line; does nothing unless both x are equal."""
        if p1.x != p2.x:
            return
        if p1.y > p2.y:
            p1, p2 = p2, p1
        column = _round(p1.x)
        for y in range(int(p1.y), math.floor(p2.y) + 1):
            index = self._index(column, _round(y))
            if index is not None:
                self.pixels[index] = VERTICAL_LINE_COLOR

    def draw_triangle(self, a: Vec4, b: Vec4, c: Vec4, color: int) -> None:
        """Draw the outline of a triangle."""
        self.draw_line(a, b, color)
        self.draw_line(b, c, color)
        self.draw_line(c, a, color)

    def draw_model(
        self, screen_vertices: Sequence[Vec4], indices: Sequence[int], colors: Sequence[int]
    ) -> None:
        """Draw each index triple as a triangle outline with its own colour."""
        triples = zip(*[iter(indices)] * 3)
        for (i0, i1, i2), color in zip(triples, colors):
            self.draw_triangle(screen_vertices[i0], screen_vertices[i1], screen_vertices[i2], color)