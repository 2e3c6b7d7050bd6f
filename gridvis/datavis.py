"""Visualizations that colour an image buffer each animation step."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from os import PathLike
from typing import Any, TypeVar, Union

import numpy as np
from PIL import Image

from gridvis.image import ImageBuffer

T = TypeVar("T", bound="DataVis")


class Animator(ABC):
    """User code that colours an image buffer owned by a DataVisAnimator."""

    @abstractmethod
    def update(self, img: ImageBuffer) -> None:
        """Write the next frame's colours into ``img``."""


class DataVis(ABC):
    """Base visualization holding the image buffer and its uploaded texture."""

    def __init__(self, width: int, height: int, depth: int = 1) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid dimensions {width}x{height}")
        self._width = width
        self._height = height
        self._depth = depth
        self._ready = False
        self._image: ImageBuffer | None = None
        self._initial: np.ndarray | None = None
        self._texture: bytes | None = None

    @classmethod
    def from_image_file(cls: type[T], path: Union[str, PathLike]) -> T:
        """Create a visualization sized and coloured from an image file.

        The image's bottom row becomes row 0 of the buffer. Subclasses
        used this way must accept ``(width, height)`` as constructor
        arguments.
        """
        with Image.open(path) as img:
            rgb = np.asarray(img.convert("RGB"), dtype=np.uint8)
        pixels = rgb[::-1].copy()
        height, width = pixels.shape[:2]
        vis = cls(width, height)
        vis._load_initial(pixels)
        return vis

    def _load_initial(self, pixels: np.ndarray) -> None:
        self._initial = pixels
        if self._image is not None and self._image.pixels.size:
            self._image.pixels[...] = pixels

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def ready(self) -> bool:
        """True once the image buffer has been allocated."""
        return self._ready

    @property
    def texture(self) -> bytes | None:
        """RGB bytes from the most recent texture reload."""
        return self._texture

    @abstractmethod
    def update(self) -> None:
        """Compute new colours for the image buffer."""

    @abstractmethod
    def texture_reload(self) -> None:
        """Update the image and copy it into the texture."""

    def image_data(self) -> ImageBuffer | None:
        """Return the image buffer itself, or None before it is allocated."""
        return self._image


class DataVisCPU(DataVis):
    """A visualization whose buffer is allocated at construction."""

    def __init__(self, width: int, height: int, depth: int = 1) -> None:
        super().__init__(width, height, depth)
        self._image = ImageBuffer(width, height, depth)
        self._ready = True

    def texture_reload(self) -> None:
        self.update()
        assert self._image is not None
        self._texture = self._image.to_bytes()


class DataVisFunction(DataVisCPU):
    """A visualization whose update calls a plain function.

    The function receives the image buffer and the application data.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        app_data: Any,
        update_func: Callable[[ImageBuffer, Any], None],
    ) -> None:
        super().__init__(cols, rows)
        self.app_data = app_data
        self.update_func = update_func

    def update(self) -> None:
        assert self._image is not None
        self.update_func(self._image, self.app_data)


class DataVisAnimator(DataVis):
    """A visualization that defers colouring to an Animator.

    The buffer is allocated on the first update, and any initial image
    is copied into it then.
    """

    def __init__(
        self,
        width: int,
        height: int,
        depth: int = 1,
        animator: Animator | None = None,
    ) -> None:
        super().__init__(width, height, depth)
        self.animator = animator

    def _init(self) -> None:
        self._image = ImageBuffer(self._width, self._height, self._depth)
        if self._initial is not None and self._width > 0 and self._height > 0:
            self._image.pixels[...] = self._initial
        self._ready = True

    def update(self) -> None:
        if not self._ready:
            self._init()
        if self.animator is not None:
            assert self._image is not None
            self.animator.update(self._image)

    def texture_reload(self) -> None:
        self.update()
        assert self._image is not None
        self._texture = self._image.to_bytes()