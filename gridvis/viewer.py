"""A window that animates a visualization, and the panel state behind it."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Any

import numpy as np
from PIL import Image

from gridvis.datavis import DataVis, DataVisFunction
from gridvis.image import ImageBuffer

_STEP_INTERVAL_MS = 10
_SNAPSHOT_NAME = "snappy.png"


class Key(Enum):
    """Keys the animation panel responds to."""

    SPACE = "space"
    ESCAPE = "escape"
    T = "t"
    S = "s"


def _sample_texture(size: int = 64, tile: int = 8) -> np.ndarray:
    """A checkerboard used as the sample background texture."""
    rows, cols = np.indices((size, size))
    mask = ((rows // tile) + (cols // tile)) % 2 == 0
    texture = np.zeros((size, size, 3), dtype=np.uint8)
    texture[mask] = (200, 200, 200)
    texture[~mask] = (60, 60, 60)
    return texture


class AnimationPanel:
    """Drives a visualization step by step and reacts to key presses.

    ``max_steps`` below zero means no limit. ``tex_map`` selects the
    displayed texture: 0 for the sample texture, 1 for the animation.
    """

    def __init__(self) -> None:
        self.vis: DataVis | None = None
        self.max_steps = -1
        self.num_steps = 0
        self.paused = False
        self.tex_map = 1
        self.quit_requested = False
        self.snapshot_path = Path(_SNAPSHOT_NAME)
        self._background = _sample_texture()

    @property
    def finished(self) -> bool:
        """True once the step limit, if any, has been reached."""
        return 0 <= self.max_steps <= self.num_steps

    def set_animation(self, vis: DataVis) -> None:
        """Attach a visualization and load its first frame."""
        self.vis = vis
        self.texture_reload()

    def texture_reload(self) -> None:
        """Run one visualization update unless the step limit is reached."""
        if self.vis is None or self.finished:
            return
        self.vis.texture_reload()
        self.num_steps += 1
        if self.max_steps == self.num_steps:
            print("Maximum number of steps reached")

    def step(self) -> None:
        """Advance the animation by one tick unless paused."""
        if not self.paused:
            self.texture_reload()

    def handle_key(self, key: Key, ctrl: bool = False) -> None:
        """React to a key press; Ctrl+S saves a snapshot of the frame."""
        if ctrl and key is Key.S:
            self.save_snapshot()
        elif key is Key.SPACE:
            self.paused = not self.paused
        elif key is Key.ESCAPE:
            self.quit_requested = True
        elif key is Key.T:
            self.tex_map = (self.tex_map + 1) % 2

    def frame(self) -> np.ndarray | None:
        """The image to display, top row first, or None if there is none yet."""
        if self.tex_map == 0:
            return self._background
        vis = self.vis
        if vis is None or vis.texture is None:
            return None
        pixels = np.frombuffer(vis.texture, dtype=np.uint8)
        return pixels.reshape(vis.height, vis.width, 3)[::-1]

    def save_snapshot(self) -> Path | None:
        """Write the current frame as a PNG and return its path."""
        frame = self.frame()
        if frame is None or frame.size == 0:
            return None
        Image.fromarray(np.ascontiguousarray(frame), "RGB").save(self.snapshot_path)
        return self.snapshot_path


class Viewer:
    """A window showing an animated visualization."""

    def __init__(self, width: int = 600, height: int = 500, title: str = "Demo") -> None:
        self.width = width
        self.height = height
        self.title = title
        self.panel = AnimationPanel()

    def set_animation(self, vis: DataVis) -> None:
        """Connect a visualization; must be called before ``run``."""
        self.panel.set_animation(vis)

    def run(self, max_steps: int = -1) -> int:
        """Animate until the window is closed or ``max_steps`` is reached."""
        import pygame

        panel = self.panel
        panel.max_steps = max_steps
        keymap = {
            pygame.K_SPACE: Key.SPACE,
            pygame.K_ESCAPE: Key.ESCAPE,
            pygame.K_t: Key.T,
            pygame.K_s: Key.S,
        }
        pygame.display.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(self.title)
            clock = pygame.time.Clock()
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return 0
                    if event.type == pygame.KEYDOWN and event.key in keymap:
                        ctrl = bool(event.mod & pygame.KMOD_CTRL)
                        panel.handle_key(keymap[event.key], ctrl)
                if panel.quit_requested:
                    return 0
                panel.step()
                self._draw(pygame, screen)
                if panel.finished:
                    return 0
                clock.tick(1000 // _STEP_INTERVAL_MS)
        finally:
            pygame.display.quit()

    def _draw(self, pygame: Any, screen: Any) -> None:
        screen.fill((0, 0, 0))
        frame = self.panel.frame()
        if frame is not None and frame.size:
            surface = pygame.surfarray.make_surface(np.ascontiguousarray(frame.swapaxes(0, 1)))
            screen.blit(pygame.transform.scale(surface, screen.get_size()), (0, 0))
        pygame.display.flip()


class GridVisiWrapper:
    """Pairs a viewer with a single visualization for function-style use."""

    def __init__(self, name: str) -> None:
        self.viewer = Viewer(600, 500, name)
        self.vis: DataVis | None = None

    def set_animation(self, anim: DataVis) -> None:
        self.vis = anim

    def update(self) -> None:
        """Run the visualization's update outside the animation loop."""
        if self.vis is None:
            raise RuntimeError("no animation has been set")
        self.vis.update()

    def buffer(self) -> ImageBuffer | None:
        """The visualization's image buffer, or None without one."""
        if self.vis is None:
            return None
        return self.vis.image_data()

    def run(self, iters: int = -1) -> int:
        """Run for ``iters`` steps, or until closed when ``iters`` <= 0."""
        if self.vis is None:
            raise RuntimeError("no animation has been set")
        self.viewer.set_animation(self.vis)
        if iters > 0:
            return self.viewer.run(iters)
        return self.viewer.run()


def init_and_run_animation(
    rows: int,
    cols: int,
    app_data: Any,
    update_func: Callable[[ImageBuffer, Any], None],
    name: str,
    iters: int = 0,
) -> int:
    """Animate a ``rows`` by ``cols`` grid coloured by ``update_func``."""
    wrapper = GridVisiWrapper(name)
    wrapper.set_animation(DataVisFunction(rows, cols, app_data, update_func))
    return wrapper.run(iters)