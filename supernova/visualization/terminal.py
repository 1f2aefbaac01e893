"""Terminal output and frame pacing for the ASCII animation."""

import sys
import time
from typing import Callable, Optional, TextIO

from ..config import CLEAR_SEQUENCE, FPS
from ..state.simulation import Simulation


def clear_screen(stream: TextIO):
    """Move the cursor home and clear the terminal."""
    stream.write(CLEAR_SEQUENCE)


def write_frame(stream: TextIO, text: str, clear: bool = True):
    """Write one frame, optionally clearing the screen first."""
    if clear:
        clear_screen(stream)
    stream.write(text)
    stream.flush()


def run_animation(
    simulation: Simulation,
    stream: Optional[TextIO] = None,
    fps: float = FPS,
    max_frames: Optional[int] = None,
    clear: bool = True,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Main animation loop: tick, draw, wait.

    Pacing only affects how fast frames appear; the simulation always
    advances by its own fixed timestep.

    Args:
        simulation: Simulation to drive
        stream: Output sink (defaults to sys.stdout)
        fps: Target frames per second
        max_frames: Stop after this many frames (None runs forever)
        clear: Emit the clear-screen sequence before every frame
        sleep: Delay function taking seconds

    Returns:
        Number of frames written
    """
    if stream is None:
        stream = sys.stdout
    if fps <= 0:
        raise ValueError(f"Frame rate must be positive, got {fps}")

    delay = 1.0 / fps
    frames = 0

    try:
        while max_frames is None or frames < max_frames:
            write_frame(stream, simulation.tick(), clear=clear)
            frames += 1
            sleep(delay)
    except BrokenPipeError:
        # Reader went away (e.g. piped into head); nothing left to draw to
        pass
    except Exception as e:
        print(f"Animation error: {e}", file=sys.stderr)
        raise

    return frames
