import numpy as np
import pytest

from gridvis.demos import GradientVis, ParallelGradientVis, ThreadedGradientVis, main
from gridvis.image import Color3


def _check_gradient_invariants(pixels):
    assert np.all(pixels[:, :, 1] == 0)
    assert np.all(pixels[:, :, 0].astype(int) + pixels[:, :, 2].astype(int) == 128)
    assert np.all(pixels == pixels[:, :1, :])


def test_first_frame_starts_blue():
    vis = GradientVis(4, 4)
    vis.update()
    assert vis.image_data()[0] == Color3(0, 0, 128)
    assert vis.ticks == 1


def test_gradient_invariants():
    vis = GradientVis(7, 9)
    for _ in range(5):
        vis.update()
        pixels = vis.image_data().pixels
        assert pixels.shape == (9, 7, 3)
        assert np.all(pixels[:, :, 1] == 0)
        assert np.all(pixels[:, :, 0].astype(int) + pixels[:, :, 2].astype(int) == 128)
        assert np.all(pixels == pixels[:, :1, :])
    assert vis.ticks == 5


def test_gradient_red_increases_with_row():
    vis = GradientVis(3, 16)
    vis.update()
    reds = vis.image_data().pixels[:, 0, 0].astype(int)
    assert list(reds) == sorted(reds)


def test_gradient_wraps_after_128_ticks():
    vis = GradientVis(5, 6)
    vis.update()
    first = vis.image_data().to_bytes()
    for _ in range(128):
        vis.update()
    assert vis.image_data().to_bytes() == first


def test_successive_frames_differ():
    vis = GradientVis(5, 6)
    vis.update()
    first = vis.image_data().to_bytes()
    vis.update()
    assert vis.image_data().to_bytes() != first


def test_parallel_matches_serial():
    serial = GradientVis(13, 37)
    parallel = ParallelGradientVis(13, 37)
    for _ in range(3):
        serial.texture_reload()
        parallel.texture_reload()
        assert parallel.texture == serial.texture
    assert parallel.ticks == serial.ticks == 3


def test_threaded_frames_keep_invariants():
    vis = ThreadedGradientVis(2, 8, 10)
    for _ in range(4):
        vis.update()
    vis.close()
    assert not vis.running
    _check_gradient_invariants(vis.image_data().pixels)


def test_threaded_more_threads_than_rows():
    with ThreadedGradientVis(4, 3, 2) as vis:
        vis.texture_reload()
    assert not vis.running
    assert len(vis.texture) == 3 * 2 * 3
    _check_gradient_invariants(vis.image_data().pixels)


def test_threaded_needs_a_thread():
    with pytest.raises(ValueError):
        ThreadedGradientVis(0, 4, 4)


def test_main_rejects_unknown_demo():
    with pytest.raises(SystemExit) as excinfo:
        main(["bogus"])
    assert excinfo.value.code == 2