"""RGB colours and the row-major colour grid that visualizations paint."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union

import numpy as np

Index = Union[int, tuple[int, int]]


@dataclass(frozen=True)
class Color3:
    """An RGB triple with each component in the range 0-255."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour component {name}={value} outside 0-255")

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))


def _as_color(value: Color3 | Iterable[int]) -> Color3:
    return value if isinstance(value, Color3) else Color3(*value)


class ImageBuffer:
    """A grid of RGB pixels stored in row-major order, row 0 first.

    Pixels are addressed either by a flat offset ``row * width + col``
    or by a ``(row, col)`` tuple. The underlying ``pixels`` array has
    shape ``(height, width, 3)`` and may be written to directly.
    """

    def __init__(self, width: int, height: int, depth: int = 1) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid image dimensions {width}x{height}")
        self.width = width
        self.height = height
        self.depth = depth
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)

    def __len__(self) -> int:
        return self.width * self.height

    def _locate(self, key: Index) -> tuple[int, int]:
        if isinstance(key, tuple):
            row, col = key
            if not (0 <= row < self.height and 0 <= col < self.width):
                raise IndexError(f"pixel {key} outside {self.width}x{self.height} image")
            return row, col
        if not 0 <= key < len(self):
            raise IndexError(f"pixel offset {key} outside image of {len(self)} pixels")
        return divmod(key, self.width)

    def __getitem__(self, key: Index) -> Color3:
        row, col = self._locate(key)
        r, g, b = (int(v) for v in self.pixels[row, col])
        return Color3(r, g, b)

    def __setitem__(self, key: Index, value: Color3 | Iterable[int]) -> None:
        row, col = self._locate(key)
        self.pixels[row, col] = tuple(_as_color(value))

    def __iter__(self) -> Iterator[Color3]:
        for offset in range(len(self)):
            yield self[offset]

    def fill(self, color: Color3 | Iterable[int]) -> None:
        """Set every pixel to ``color``."""
        self.pixels[...] = tuple(_as_color(color))

    def to_bytes(self) -> bytes:
        """Return the pixels as packed RGB bytes in row-major order."""
        return self.pixels.tobytes()