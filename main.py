#!/usr/bin/env python3
"""
ASCII Supernova

A terminal animation of a massive star going through core collapse,
bounce, explosion and remnant nebula, then starting over.

Usage:
    python main.py                  # Run forever at 30 frames per second
    python main.py --seed 42        # Reproducible ejecta and nebula texture
    python main.py --frames 300     # Stop after 300 frames
    python main.py --no-clear > out.txt   # Dump frames without escape codes
"""

import argparse
import sys

from supernova.config import FPS, HELP_CONTENT
from supernova.state.simulation import Simulation
from supernova.visualization.terminal import run_animation


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='ASCII Supernova - core-collapse supernova in the terminal',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HELP_CONTENT,
    )
    parser.add_argument(
        '--seed',
        '-s',
        type=int,
        default=None,
        metavar='SEED',
        help='Random seed for reproducible ejecta (default: seeded from the OS)',
    )
    parser.add_argument(
        '--fps',
        '-f',
        type=float,
        default=FPS,
        metavar='FPS',
        help=f'Frames drawn per second (default: {FPS}). '
        f'Only changes pacing, the simulation always steps 1/{FPS} s per frame.',
    )
    parser.add_argument(
        '--frames',
        '-n',
        type=int,
        default=None,
        metavar='N',
        help='Stop after N frames (default: run until interrupted)',
    )
    parser.add_argument(
        '--no-clear',
        action='store_true',
        help='Do not clear the terminal between frames',
    )
    args = parser.parse_args(argv)

    if args.fps <= 0:
        parser.error('--fps must be positive')
    if args.frames is not None and args.frames < 0:
        parser.error('--frames must not be negative')
    return args


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    simulation = Simulation.create(seed=args.seed)
    print("Starting supernova animation (Ctrl-C to quit)...", file=sys.stderr)

    try:
        run_animation(
            simulation,
            stream=sys.stdout,
            fps=args.fps,
            max_frames=args.frames,
            clear=not args.no_clear,
        )
    except KeyboardInterrupt:
        print("\nInterrupted by user.", file=sys.stderr)
    finally:
        star = simulation.star
        print(
            f"Stopped after {simulation.frame_count} frames "
            f"in phase {star.phase.name}, {star.cycle} full cycles.",
            file=sys.stderr,
        )


if __name__ == '__main__':
    main()
