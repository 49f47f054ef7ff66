"""A 32-bit ARGB colour buffer with simple drawing primitives."""

from __future__ import annotations

import math
import struct

GRID_SPACING = 10


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


class FrameBuffer:
    """Pixels stored row by row as ARGB8888 integers.

    Drawing coordinates are relative to the centre of the buffer; pixels
    that fall outside it are silently dropped.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"frame buffer size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels: list[int] = [0] * (width * height)

    def clear(self, color: int) -> None:
        """Fill the whole buffer with ``color``."""
        self.pixels[:] = [color] * (self.width * self.height)

    def draw_grid(self, color: int) -> None:
        """Paint every tenth row and column with ``color``."""
        for y in range(self.height):
            row = y * self.width
            if y % GRID_SPACING == 0:
                self.pixels[row : row + self.width] = [color] * self.width
            else:
                for x in range(0, self.width, GRID_SPACING):
                    self.pixels[row + x] = color

    def draw_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Fill the rectangle covering ``x+1..x+width`` and ``y+1..y+height``."""
        for dy in range(height):
            for dx in range(width):
                self.draw_pixel(x + (width - dx), y + (height - dy), color)

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel, with (0, 0) at the centre of the buffer."""
        px = x + self.width // 2
        py = y + self.height // 2
        if 0 <= px < self.width and 0 <= py < self.height:
            self.pixels[self.width * py + px] = color

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a line between two points with a DDA walk."""
        dx = x1 - x0
        dy = y1 - y0
        length = max(abs(dx), abs(dy))
        if length == 0:
            x_inc = y_inc = 0.0
        else:
            x_inc = dx / length
            y_inc = dy / length
        cur_x = float(x0)
        cur_y = float(y0)
        for _ in range(length + 1):
            self.draw_rect(_round_half_away(cur_x), _round_half_away(cur_y), 1, 1, color)
            cur_x += x_inc
            cur_y += y_inc

    def to_bytes(self) -> bytes:
        """Return the pixels as little-endian 32-bit words (B, G, R, A bytes)."""
        return struct.pack(f"<{len(self.pixels)}I", *self.pixels)