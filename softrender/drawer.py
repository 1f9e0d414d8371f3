"""Window output for framebuffers."""

from __future__ import annotations

import os
import sys
from array import array

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


def to_surface_bytes(framebuffer) -> bytes:
    """Pack ARGB pixels as big-endian bytes, four per pixel, row by row."""
    packed = array("I", framebuffer.pixels)
    if sys.byteorder == "little":
        packed.byteswap()
    return packed.tobytes()


class Display:
    """A window that shows framebuffers of a fixed size."""

    def __init__(self, width: int, height: int, title: str = "3DRenderer") -> None:
        pygame.display.init()
        self.width = width
        self.height = height
        self.surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)

    def present(self, framebuffer) -> None:
        """Copy ``framebuffer`` to the window and show it."""
        if (framebuffer.width, framebuffer.height) != (self.width, self.height):
            raise ValueError(
                f"framebuffer is {framebuffer.width}x{framebuffer.height}, "
                f"window is {self.width}x{self.height}"
            )
        image = pygame.image.frombuffer(
            to_surface_bytes(framebuffer), (self.width, self.height), "ARGB"
        )
        self.surface.fill((0, 0, 0))
        self.surface.blit(image, (0, 0))
        pygame.display.flip()

    def close(self) -> None:
        if pygame.display.get_init():
            pygame.display.quit()
        pygame.quit()

    def __enter__(self) -> Display:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()