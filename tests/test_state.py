import threading

import pytest

from bezierbeauty.config import PALETTE, TIME_STEP
from bezierbeauty.model.state import AnimationDriver, AnimationState, FrameData


def tick_until(driver, predicate, limit=5000):
    for count in range(1, limit + 1):
        driver.tick()
        if predicate(driver.state):
            return count
    raise AssertionError("Condition never reached")


def test_initial_state():
    driver = AnimationDriver()
    assert driver.state == AnimationState(t=0.0, sides=3)
    assert driver.trail == ()
    assert driver.cascade == ()
    assert not driver.is_frozen


def test_first_tick_draws_the_triangle_at_t_zero():
    driver = AnimationDriver()
    frame = driver.tick()

    assert frame.sides == 3
    assert frame.t == 0.0
    assert len(frame.cascade) == 3
    assert len(frame.cascade[0]) == 4
    assert frame.cascade[0][0] == frame.cascade[0][-1]
    assert len(frame.trail) == 1
    # At t = 0 the curve sits on the first polygon vertex
    assert frame.trail[0] == frame.cascade[0][0]
    assert driver.state.t == pytest.approx(TIME_STEP)


def test_shape_changes_after_a_full_sweep():
    driver = AnimationDriver()
    ticks = tick_until(driver, lambda s: s.sides == 4)
    assert 100 <= ticks <= 102
    assert driver.state.t == 0.0


def test_wrap_happens_only_once_t_exceeds_one():
    driver = AnimationDriver(state=AnimationState(t=1.0, sides=3))
    driver.tick()
    assert driver.state.sides == 3
    assert driver.state.t > 1

    driver.tick()
    assert driver.state == AnimationState(t=0.0, sides=4)


def test_sides_never_decrease():
    driver = AnimationDriver()
    previous = driver.state.sides
    for _ in range(1000):
        driver.tick()
        assert driver.state.sides >= previous
        previous = driver.state.sides


def test_animation_freezes_on_the_last_shape():
    driver = AnimationDriver()
    tick_until(driver, lambda s: s.sides == len(PALETTE) and s.t > 1)
    driver.tick()
    frozen = driver.state
    assert driver.is_frozen

    for _ in range(50):
        frame = driver.tick()
        assert frame.sides == len(PALETTE)
        assert driver.state == frozen


def test_frozen_state_reached_from_custom_start():
    driver = AnimationDriver(state=AnimationState(t=1.5, sides=9))
    for _ in range(5):
        driver.tick()
    assert driver.state == AnimationState(t=1.5, sides=9)
    assert driver.is_frozen


def test_trail_is_never_cleared():
    driver = AnimationDriver()
    ticks = tick_until(driver, lambda s: s.sides == 5)
    assert len(driver.trail) == ticks


def test_cascade_tracks_current_shape():
    driver = AnimationDriver(state=AnimationState(t=0.5, sides=9))
    frame = driver.tick()
    assert len(frame.cascade) == 9
    assert driver.cascade == frame.cascade


def test_frame_is_a_snapshot():
    driver = AnimationDriver()
    frame = driver.tick()
    driver.tick()
    driver.tick()
    assert len(frame.trail) == 1
    assert len(driver.trail) == 3


def test_frame_reports_values_before_advancing():
    driver = AnimationDriver(state=AnimationState(t=1.2, sides=4))
    frame = driver.tick()
    assert frame.sides == 4
    assert frame.t == 1.2
    assert frame.palette_index == 2
    assert driver.state == AnimationState(t=0.0, sides=5)


def test_given_state_is_copied():
    start = AnimationState(t=0.0, sides=3)
    driver = AnimationDriver(state=start)
    driver.tick()
    assert start == AnimationState(t=0.0, sides=3)


def test_state_accessor_returns_a_copy():
    driver = AnimationDriver()
    state = driver.state
    state.sides = 8
    assert driver.state.sides == 3


def test_concurrent_ticks_are_serialized():
    driver = AnimationDriver()

    def worker():
        for _ in range(50):
            driver.tick()

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    # One wrap after ~101 ticks, then ~99 more steps into the square sweep
    assert len(driver.trail) == 200
    assert driver.state.sides == 4
    assert driver.state.t == pytest.approx(99 * TIME_STEP, abs=1.5 * TIME_STEP)


def test_empty_frame_defaults():
    frame = FrameData()
    assert frame.cascade == ()
    assert frame.trail == ()
    assert frame.palette_index == 1
