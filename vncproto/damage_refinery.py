"""Narrowing damage hints down to the 32x32 tiles whose content changed."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable

TILE_SIZE = 32

Rect = tuple[int, int, int, int]


def _div_up(a: int, b: int) -> int:
    return -(-a // b)


def tile_region_from_rects(rects: Iterable[Rect]) -> frozenset[tuple[int, int]]:
    """The tiles (tx, ty) touched by pixel rectangles (x, y, width, height)."""
    tiles: set[tuple[int, int]] = set()
    for x, y, width, height in rects:
        if width <= 0 or height <= 0:
            continue
        x1, y1 = x // TILE_SIZE, y // TILE_SIZE
        x2 = _div_up(x + width, TILE_SIZE)
        y2 = _div_up(y + height, TILE_SIZE)
        tiles.update((tx, ty) for ty in range(y1, y2) for tx in range(x1, x2))
    return frozenset(tiles)


class DamageRefinery:
    """Remembers a hash of every tile and reports tiles whose hash changed."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._reset(width, height)

    def _reset(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("dimensions must not be negative")
        self.width = width
        self.height = height
        self._tiles_x = _div_up(width, TILE_SIZE)
        self._tiles_y = _div_up(height, TILE_SIZE)
        self._hashes: list[bytes | None] = [None] * (self._tiles_x
                                                     * self._tiles_y)

    def resize(self, width: int, height: int) -> None:
        """Change the frame size; forgets all tile hashes if it changed."""
        if (width, height) != (self.width, self.height):
            self._reset(width, height)

    def _hash_tile(self, view: memoryview, tx: int, ty: int,
                   byte_stride: int, bytes_per_pixel: int) -> bytes:
        x_start = tx * TILE_SIZE
        x_stop = min(x_start + TILE_SIZE, self.width)
        y_start = ty * TILE_SIZE
        y_stop = min(y_start + TILE_SIZE, self.height)
        row_len = (x_stop - x_start) * bytes_per_pixel
        offset = x_start * bytes_per_pixel
        digest = hashlib.blake2b(digest_size=8)
        for y in range(y_start, y_stop):
            start = y * byte_stride + offset
            digest.update(view[start:start + row_len])
        return digest.digest()

    def refine(self, hint: Iterable[Rect], pixels: bytes, stride: int,
               bytes_per_pixel: int) -> list[Rect]:
        """Return the changed tiles within hint, clipped to the frame.

        pixels holds the frame row by row, stride pixels per row. The tiles
        come back as (x, y, width, height), top to bottom, left to right.
        """
        if bytes_per_pixel <= 0:
            raise ValueError("bytes per pixel must be positive")
        if stride < self.width:
            raise ValueError("stride is smaller than the frame width")
        view = memoryview(pixels).cast("B")
        byte_stride = stride * bytes_per_pixel
        if self.width and self.height:
            needed = ((self.height - 1) * byte_stride
                      + self.width * bytes_per_pixel)
            if len(view) < needed:
                raise ValueError(
                    f"pixel buffer holds {len(view)} bytes, needs {needed}")

        damaged: list[Rect] = []
        tiles = sorted(tile_region_from_rects(hint), key=lambda t: (t[1], t[0]))
        for tx, ty in tiles:
            if not (0 <= tx < self._tiles_x and 0 <= ty < self._tiles_y):
                continue
            digest = self._hash_tile(view, tx, ty, byte_stride, bytes_per_pixel)
            index = tx + ty * self._tiles_x
            if self._hashes[index] == digest:
                continue
            self._hashes[index] = digest
            x, y = tx * TILE_SIZE, ty * TILE_SIZE
            damaged.append((x, y, min(TILE_SIZE, self.width - x),
                            min(TILE_SIZE, self.height - y)))
        return damaged