import time

import pytest

from gridvis.timer import CPUTimer, Timer


def test_timer_is_abstract():
    with pytest.raises(TypeError):
        Timer()


def test_elapsed_before_start_raises():
    with pytest.raises(RuntimeError):
        CPUTimer().elapsed()


def test_stop_before_start_raises():
    with pytest.raises(RuntimeError):
        CPUTimer().stop()


def test_report_before_stop_raises():
    timer = CPUTimer()
    timer.start()
    with pytest.raises(RuntimeError):
        timer.report()


def test_elapsed_grows():
    timer = CPUTimer()
    timer.start()
    time.sleep(0.01)
    first = timer.elapsed()
    time.sleep(0.01)
    assert first >= 10.0
    assert timer.elapsed() > first


def test_report_prints_interval(capsys):
    timer = CPUTimer()
    timer.start()
    time.sleep(0.005)
    timer.stop()
    diff = timer.report()
    out = capsys.readouterr().out
    assert diff >= 5.0
    assert out == f"Elapsed time: {diff:.3f} \n"


def test_context_manager_stops():
    with CPUTimer() as timer:
        time.sleep(0.002)
    first = timer.report()
    time.sleep(0.005)
    assert timer.report() == first