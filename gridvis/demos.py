"""Gradient demonstrations, single-threaded and parallel, and their launcher."""

from __future__ import annotations

import argparse
import os
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from gridvis.datavis import DataVis, DataVisCPU
from gridvis.viewer import Viewer


def _paint_rows(pixels: np.ndarray, start: int, stop: int, divisor: int, ticks: int) -> None:
    """Colour rows ``start``..``stop`` with a red-to-blue gradient shifted by ``ticks``."""
    rows = np.arange(start, stop)
    if rows.size == 0:
        return
    val = ((128.0 * rows / divisor).astype(np.int64) + ticks) % 128
    pixels[start:stop, :, 0] = val[:, None]
    pixels[start:stop, :, 1] = 0
    pixels[start:stop, :, 2] = (128 - val)[:, None]


class GradientVis(DataVisCPU):
    """A gradient that scrolls one step per update, computed in one thread."""

    def __init__(self, width: int, height: int, depth: int = 1) -> None:
        super().__init__(width, height, depth)
        self.ticks = 0

    def update(self) -> None:
        pixels = self.image_data().pixels
        _paint_rows(pixels, 0, self.height, self.height, self.ticks)
        self.ticks += 1


class ParallelGradientVis(DataVisCPU):
    """The same gradient as GradientVis, with rows shared among a thread pool."""

    def __init__(self, width: int, height: int, depth: int = 1) -> None:
        super().__init__(width, height, depth)
        self.ticks = 0
        self.workers = max(1, os.cpu_count() or 1)

    def update(self) -> None:
        pixels = self.image_data().pixels
        height = self.height
        chunk = max(1, -(-height // self.workers))
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            futures = [
                pool.submit(_paint_rows, pixels, start, min(start + chunk, height), height, self.ticks)
                for start in range(0, height, chunk)
            ]
            for future in futures:
                future.result()
        self.ticks += 1


class ThreadedGradientVis(DataVisCPU):
    """A gradient painted by long-running worker threads, one band of rows each.

    Each worker paints its band, then waits on a barrier shared with the
    animation loop; an update is that loop's wait. The constructor waits
    once so the first frame is complete on return.
    """

    def __init__(self, num_threads: int, width: int, height: int, depth: int = 1) -> None:
        if num_threads < 1:
            raise ValueError(f"need at least one thread, got {num_threads}")
        super().__init__(width, height, depth)
        self.num_threads = num_threads
        self._barrier = threading.Barrier(num_threads + 1)
        max_rows = -(-height // num_threads)
        self._threads = []
        for tid in range(num_threads):
            start = min(max_rows * tid, height)
            stop = min(start + max_rows, height)
            thread = threading.Thread(
                target=self._work, args=(start, stop, max_rows), daemon=True
            )
            self._threads.append(thread)
            thread.start()
        self._barrier.wait()

    def _work(self, start: int, stop: int, max_rows: int) -> None:
        pixels = self.image_data().pixels
        ticks = 0
        while True:
            _paint_rows(pixels, start, stop, max_rows, ticks)
            try:
                self._barrier.wait()
            except threading.BrokenBarrierError:
                return
            ticks += 1

    @property
    def running(self) -> bool:
        return any(t.is_alive() for t in self._threads)

    def update(self) -> None:
        """Wait for the workers to finish the current frame."""
        self._barrier.wait()

    def close(self) -> None:
        """Stop the worker threads and wait for them to exit."""
        self._barrier.abort()
        for thread in self._threads:
            thread.join()

    def __enter__(self) -> "ThreadedGradientVis":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


_DEMOS: dict[str, tuple[str, Callable[[], DataVis]]] = {
    "cpu": ("QtCPU", lambda: GradientVis(50, 50)),
    "openmp": ("QtOpenMP", lambda: ParallelGradientVis(50, 50)),
    "threads": ("QtThreads", lambda: ThreadedGradientVis(2, 200, 200)),
}


def main(argv: list[str] | None = None) -> int:
    """Show one of the gradient demonstrations in a window."""
    parser = argparse.ArgumentParser(prog="gridvis", description="Animated grid demos.")
    parser.add_argument("demo", nargs="?", choices=sorted(_DEMOS), default="cpu")
    parser.add_argument(
        "--steps", type=int, default=-1, help="stop after this many steps (default: run until closed)"
    )
    args = parser.parse_args(argv)

    title, factory = _DEMOS[args.demo]
    viewer = Viewer(600, 500, title)
    vis = factory()
    try:
        viewer.set_animation(vis)
        return viewer.run(args.steps)
    finally:
        if isinstance(vis, ThreadedGradientVis):
            vis.close()


if __name__ == "__main__":
    raise SystemExit(main())