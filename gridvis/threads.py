"""Visualizations coloured by application threads that meet at a barrier."""

from __future__ import annotations

import threading
from dataclasses import dataclass

from gridvis.datavis import DataVisCPU
from gridvis.image import ImageBuffer
from gridvis.viewer import GridVisiWrapper


class DataVisThreads(DataVisCPU):
    """A visualization shared by ``num_threads`` worker threads.

    The barrier has one party per worker plus one for the thread that
    drives the animation. Workers colour their part of the buffer and
    then wait on the barrier; each animation update waits there too, so
    a frame is shown only once every worker has finished it.
    """

    def __init__(self, num_threads: int, rows: int, cols: int) -> None:
        if num_threads < 0:
            raise ValueError(f"number of threads must not be negative, got {num_threads}")
        super().__init__(cols, rows)
        self.num_threads = num_threads
        self._barrier = threading.Barrier(num_threads + 1)

    @property
    def barrier(self) -> threading.Barrier:
        """The barrier shared by the workers and the animation loop."""
        return self._barrier

    @property
    def closed(self) -> bool:
        return self._barrier.broken

    def update(self) -> None:
        """Wait until every worker has finished the current frame."""
        self._barrier.wait()

    def close(self) -> None:
        """Release all threads waiting on the barrier.

        Threads waiting now, and any later wait, get
        ``threading.BrokenBarrierError``.
        """
        self._barrier.abort()

    def __enter__(self) -> "DataVisThreads":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass
class VisiHandle:
    """State passed between the thread animation functions."""

    app: GridVisiWrapper


def _require(handle: VisiHandle | None) -> VisiHandle:
    if handle is None:
        raise ValueError("no visualization handle given")
    return handle


def init_thread_animation(num_tids: int, rows: int, cols: int, name: str) -> VisiHandle:
    """Set up a threaded visualization; call once, from one thread."""
    app = GridVisiWrapper(name)
    app.set_animation(DataVisThreads(num_tids, rows, cols))
    return VisiHandle(app)


def get_animation_buffer(handle: VisiHandle) -> ImageBuffer | None:
    """Return the image buffer the worker threads colour."""
    return _require(handle).app.buffer()


def draw_ready(handle: VisiHandle) -> None:
    """Signal that the calling thread has finished its part of the frame."""
    _require(handle).app.update()


def run_animation(handle: VisiHandle, iters: int = 0) -> int:
    """Run the animation for ``iters`` steps, or until closed if ``iters`` <= 0."""
    return _require(handle).app.run(iters)