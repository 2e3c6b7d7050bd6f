"""Vertex data and draw ranges for simple textured shapes."""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import Enum

import numpy as np

Rgba = tuple[float, float, float, float]
DrawRange = tuple["DrawMode", int, int]

_WHITE: Rgba = (1.0, 1.0, 1.0, 1.0)


class DrawMode(Enum):
    """Primitive type used to draw a run of vertices."""

    POINTS = "points"
    TRIANGLE_STRIP = "triangle_strip"
    TRIANGLE_FAN = "triangle_fan"


def _opaque(color: Iterable[float]) -> Rgba:
    r, g, b = (float(v) for v in color)
    return (r, g, b, 1.0)


def _array(rows: list[tuple[float, ...]]) -> np.ndarray:
    return np.array(rows, dtype=np.float32)


class _Shape:
    """Shared colour handling for the shapes."""

    def __init__(self, color: Rgba) -> None:
        self._color = color
        self._spec_color = _WHITE

    @property
    def color(self) -> Rgba:
        """Ambient and diffuse colour; assigning RGB makes it opaque."""
        return self._color

    @color.setter
    def color(self, value: Iterable[float]) -> None:
        self._color = _opaque(value)

    @property
    def specular_color(self) -> Rgba:
        """Specular colour; assigning RGB makes it opaque."""
        return self._spec_color

    @specular_color.setter
    def specular_color(self, value: Iterable[float]) -> None:
        self._spec_color = _opaque(value)

    def draw_color(self, points: bool = False) -> Rgba:
        """Colour to draw with: white for points, the shape colour otherwise."""
        return _WHITE if points else self._color


class Sphere(_Shape):
    """A sphere about the origin split into slices and stacks.

    The middle stacks are triangle strips; the polar caps are fans.
    """

    def __init__(self, radius: float, slices: int, stacks: int) -> None:
        if slices < 1 or stacks < 2:
            raise ValueError(f"sphere needs slices >= 1 and stacks >= 2, got {slices}, {stacks}")
        super().__init__((0.0, 0.0, 1.0, 1.0))
        self.radius = radius
        self.slices = slices
        self.stacks = stacks
        self.strip_size = (slices + 1) * 2

        latstep = math.pi / stacks
        longstep = 2.0 * math.pi / slices
        tex_xstep = 1.0 / slices
        tex_ystep = 1.0 / stacks

        vertices: list[tuple[float, ...]] = []
        normals: list[tuple[float, ...]] = []
        tangents: list[tuple[float, ...]] = []
        tex: list[tuple[float, ...]] = []

        def ring_point(lat: float, lng: float, tex_x: float, tex_y: float) -> None:
            clat, slat = math.cos(lat), math.sin(lat)
            clng, slng = math.cos(lng), math.sin(lng)
            vertices.append((radius * clat * clng, radius * clat * slng, radius * slat))
            normals.append((clat * clng, clat * slng, slat))
            tangents.append((-slng, clng, 0.0))
            tex.append((tex_x, tex_y))

        for i in range(1, stacks - 1):
            lat0 = -math.pi / 2.0 + i * latstep
            lat1 = lat0 + latstep
            tex_y = i * tex_ystep
            for j in range(slices + 1):
                lng = -math.pi + j * longstep
                tex_x = j * tex_xstep
                ring_point(lat1, lng, tex_x, tex_y + tex_ystep)
                ring_point(lat0, lng, tex_x, tex_y)

        vertices.append((0.0, 0.0, radius))
        normals.append((0.0, 0.0, 1.0))
        tangents.append((1.0, 0.0, 0.0))
        tex.append((0.5, 1.0))
        north = math.pi / 2.0 - latstep
        for j in range(slices + 1):
            ring_point(north, -math.pi + j * longstep, j * tex_xstep, 1.0 - tex_ystep)

        vertices.append((0.0, 0.0, -radius))
        normals.append((0.0, 0.0, -1.0))
        tangents.append((-1.0, 0.0, 0.0))
        tex.append((0.5, 0.0))
        south = -math.pi / 2.0 + latstep
        for j in range(slices + 1):
            ring_point(south, math.pi - j * longstep, 1.0 - j * tex_xstep, tex_ystep)

        self.vertices = _array(vertices)
        self.normals = _array(normals)
        self.tangents = _array(tangents)
        self.tex_coords = _array(tex)

    def __len__(self) -> int:
        return len(self.vertices)

    def draw_ranges(self, points: bool = False) -> list[DrawRange]:
        """Return ``(mode, first, count)`` runs covering every vertex."""
        strip = DrawMode.POINTS if points else DrawMode.TRIANGLE_STRIP
        fan = DrawMode.POINTS if points else DrawMode.TRIANGLE_FAN
        ranges: list[DrawRange] = [
            (strip, i * self.strip_size, self.strip_size) for i in range(self.stacks - 2)
        ]
        offset = (self.stacks - 2) * self.strip_size
        fan_size = self.slices + 2
        ranges.append((fan, offset, fan_size))
        ranges.append((fan, offset + fan_size, fan_size))
        return ranges


class Cylinder(_Shape):
    """A cylinder standing on the origin along +y, with capped ends."""

    def __init__(self, radius: float, height: float, slices: int, stacks: int) -> None:
        if slices < 1 or stacks < 1:
            raise ValueError(f"cylinder needs slices >= 1 and stacks >= 1, got {slices}, {stacks}")
        super().__init__((0.0, 0.0, 1.0, 1.0))
        self.radius = radius
        self.height = height
        self.slices = slices
        self.stacks = stacks
        self.strip_size = (slices + 1) * 2

        ystep = height / stacks
        longstep = 2.0 * math.pi / slices
        tex_xstep = 1.0 / slices
        tex_ystep = 1.0 / stacks

        vertices: list[tuple[float, ...]] = []
        normals: list[tuple[float, ...]] = []
        tex: list[tuple[float, ...]] = []

        for i in range(stacks):
            y0 = i * ystep
            y1 = y0 + ystep
            tex_y = i * tex_ystep
            for j in range(slices + 1):
                lng = -math.pi + j * longstep
                tex_x = j * tex_xstep
                s, c = math.sin(lng), math.cos(lng)
                for y, ty in ((y1, tex_y + tex_ystep), (y0, tex_y)):
                    vertices.append((radius * s, y, radius * c))
                    normals.append((s, 0.0, c))
                    tex.append((tex_x, ty))

        for y, ny, ty, start, step in (
            (height, 1.0, 1.0, -math.pi, longstep),
            (0.0, -1.0, 0.0, math.pi, -longstep),
        ):
            vertices.append((0.0, y, 0.0))
            normals.append((0.0, ny, 0.0))
            tex.append((0.5, ty))
            for j in range(slices + 1):
                lng = start + j * step
                vertices.append((radius * math.sin(lng), y, radius * math.cos(lng)))
                normals.append((0.0, ny, 0.0))
                tex.append((0.5, ty))

        self.vertices = _array(vertices)
        self.normals = _array(normals)
        self.tex_coords = _array(tex)

    def __len__(self) -> int:
        return len(self.vertices)

    def draw_ranges(self) -> list[DrawRange]:
        """Return ``(mode, first, count)`` runs covering every vertex."""
        ranges: list[DrawRange] = [
            (DrawMode.TRIANGLE_STRIP, i * self.strip_size, self.strip_size)
            for i in range(self.stacks)
        ]
        offset = self.stacks * self.strip_size
        fan_size = self.slices + 2
        ranges.append((DrawMode.TRIANGLE_FAN, offset, fan_size))
        ranges.append((DrawMode.TRIANGLE_FAN, offset + fan_size, fan_size))
        return ranges


class Square(_Shape):
    """A square of the given width centred on the origin in the z=0 plane."""

    def __init__(self, width: float) -> None:
        super().__init__((1.0, 0.0, 0.0, 1.0))
        self.width = width
        d = width / 2.0
        self.vertices = _array([(-d, -d, 0.0), (d, -d, 0.0), (-d, d, 0.0), (d, d, 0.0)])
        self.tex_coords = _array([(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0)])
        self.normals = _array([(0.0, 0.0, 1.0)] * 4)
        self.tangents = _array([(1.0, 0.0, 0.0)] * 4)

    def __len__(self) -> int:
        return len(self.vertices)

    def draw_ranges(self, points: bool = False) -> list[DrawRange]:
        """Return the single run drawing all four vertices."""
        mode = DrawMode.POINTS if points else DrawMode.TRIANGLE_STRIP
        return [(mode, 0, 4)]