import time

from dmrgw.stopwatch import StopWatch


def test_time_is_wall_clock_ms():
    watch = StopWatch()
    now = time.time() * 1000
    assert abs(watch.time() - now) < 1000


def test_elapsed_after_sleep():
    watch = StopWatch()
    watch.start()
    time.sleep(0.05)
    elapsed = watch.elapsed()
    assert 45 <= elapsed < 5000


def test_elapsed_right_after_start_is_small():
    watch = StopWatch()
    watch.start()
    assert 0 <= watch.elapsed() < 1000


def test_start_is_monotonic():
    watch = StopWatch()
    first = watch.start()
    second = watch.start()
    assert second >= first


def test_restart_resets_elapsed():
    watch = StopWatch()
    watch.start()
    time.sleep(0.05)
    watch.start()
    assert watch.elapsed() < 45