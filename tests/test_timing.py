from unittest.mock import Mock, call

import pytest

from jjjengine.timing import TimeManager


def _started(*readings):
    values = iter(readings)
    manager = TimeManager(lambda: next(values))
    manager.init()
    return manager


def test_delta_time_starts_at_zero():
    assert _started(1.0).delta_time == 0.0


def test_update_measures_elapsed_time():
    tm = _started(1.0, 1.25)
    tm.update()
    assert tm.delta_time == pytest.approx(0.25)


def test_successive_updates_measure_from_previous_update():
    tm = _started(0.0, 2.0, 2.5)
    tm.update()
    tm.update()
    assert tm.delta_time == pytest.approx(0.5)


def test_fps_text_truncates_rate():
    tm = _started(0.0, 0.25)
    tm.update()
    assert tm.fps_text() == "FPS : 4"


def test_fps_text_without_elapsed_time():
    assert _started(0.0).fps_text() == "FPS : 0"


def test_render_draws_fps_at_top_left():
    tm = _started(0.0, 0.1)
    tm.update()
    canvas = Mock()
    tm.render(canvas)
    assert canvas.mock_calls == [call.text(0, 0, tm.fps_text())]