import io

import pytest

from supernova.config import CLEAR_SEQUENCE, HEIGHT
from supernova.state.simulation import Simulation
from supernova.visualization.terminal import clear_screen, run_animation, write_frame
from conftest import FixedRandom


class ClosedPipe(io.StringIO):
    def write(self, s):
        raise BrokenPipeError()


class FailingStream(io.StringIO):
    def write(self, s):
        raise RuntimeError("disk full")


def test_clear_screen():
    out = io.StringIO()
    clear_screen(out)
    assert out.getvalue() == "\033[H\033[J"


def test_write_frame_without_clear():
    out = io.StringIO()
    write_frame(out, "abc\n", clear=False)
    assert out.getvalue() == "abc\n"


def test_run_animation_paces_frames():
    out = io.StringIO()
    delays = []

    frames = run_animation(
        Simulation(FixedRandom()), stream=out, max_frames=3, sleep=delays.append
    )

    assert frames == 3
    assert delays == [pytest.approx(1 / 30)] * 3
    assert out.getvalue().count(CLEAR_SEQUENCE) == 3
    assert out.getvalue().count('\n') == 3 * HEIGHT


def test_run_animation_custom_rate_keeps_timestep():
    sim = Simulation(FixedRandom())
    delays = []

    run_animation(sim, stream=io.StringIO(), fps=10, max_frames=5, clear=False, sleep=delays.append)

    assert delays == [pytest.approx(0.1)] * 5
    assert sim.star.phase_time == pytest.approx(5 / 30)


def test_run_animation_without_clear():
    out = io.StringIO()
    run_animation(Simulation(FixedRandom()), stream=out, max_frames=2, clear=False, sleep=lambda s: None)
    assert CLEAR_SEQUENCE not in out.getvalue()


def test_broken_pipe_stops_quietly():
    frames = run_animation(
        Simulation(FixedRandom()), stream=ClosedPipe(), max_frames=5, sleep=lambda s: None
    )
    assert frames == 0


def test_other_errors_propagate():
    with pytest.raises(RuntimeError):
        run_animation(
            Simulation(FixedRandom()), stream=FailingStream(), max_frames=1, sleep=lambda s: None
        )


def test_rejects_bad_rate():
    with pytest.raises(ValueError):
        run_animation(Simulation(FixedRandom()), stream=io.StringIO(), fps=0)
