"""A stack of 4x4 transformation matrices."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np


def _rotation(angle: float, axis: Sequence[float]) -> np.ndarray:
    x, y, z = (float(v) for v in axis)
    length = math.sqrt(x * x + y * y + z * z)
    if length == 0.0:
        raise ValueError("rotation axis must be non-zero")
    x, y, z = x / length, y / length, z / length
    rad = math.radians(angle)
    c, s = math.cos(rad), math.sin(rad)
    t = 1.0 - c
    return np.array(
        [
            [x * x * t + c, x * y * t - z * s, x * z * t + y * s, 0.0],
            [y * x * t + z * s, y * y * t + c, y * z * t - x * s, 0.0],
            [x * z * t - y * s, y * z * t + x * s, z * z * t + c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


class MatrixStack:
    """A stack of matrices; transforms multiply on the right of the top."""

    def __init__(self) -> None:
        self._stack: list[np.ndarray] = [np.identity(4)]

    def __len__(self) -> int:
        return len(self._stack)

    def top(self) -> np.ndarray:
        """Return the top matrix, pushing an identity if the stack is empty."""
        if not self._stack:
            self._stack.append(np.identity(4))
        return self._stack[-1]

    def push(self) -> None:
        """Push a copy of the top matrix."""
        self._stack.append(self.top().copy())

    def pop(self) -> None:
        """Remove the top matrix; does nothing on an empty stack."""
        if self._stack:
            self._stack.pop()

    def _apply(self, matrix: np.ndarray) -> None:
        top = self.top()
        top[...] = top @ matrix

    def translate(self, dx: float, dy: float, dz: float = 0.0) -> None:
        matrix = np.identity(4)
        matrix[:3, 3] = (dx, dy, dz)
        self._apply(matrix)

    def scale(self, xfac: float, yfac: float = 1.0, zfac: float = 1.0) -> None:
        self._apply(np.diag([xfac, yfac, zfac, 1.0]))

    def rotate(self, angle: float, axis: Sequence[float]) -> None:
        """Rotate by ``angle`` degrees about ``axis``."""
        self._apply(_rotation(angle, axis))

    def rotate_x(self, angle: float) -> None:
        self.rotate(angle, (1.0, 0.0, 0.0))

    def rotate_y(self, angle: float) -> None:
        self.rotate(angle, (0.0, 1.0, 0.0))

    def rotate_z(self, angle: float) -> None:
        self.rotate(angle, (0.0, 0.0, 1.0))