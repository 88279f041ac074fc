#!/usr/bin/env python3
#
# PROJECT: text-cube
# MODULE: spin_cube.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import argparse
import logging
import sys
import traceback

from text_cube.config import RenderConfig
from text_cube.demo import run_ansi, run_curses
from text_cube.renderer import Renderer

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(debug: bool = False, fmt: str = DEFAULT_FORMAT) -> None:
    """Configure the root logger once, writing to stderr."""
    level = logging.DEBUG if debug else logging.WARNING
    root = logging.getLogger()
    root.setLevel(level)
    for h in root.handlers[:]:
        root.removeHandler(h)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                          Spin forever (Ctrl-C to quit)
  %(prog)s --frames 300             Stop after 300 frames
  %(prog)s --rate 0.05 --interval 0.01   Faster spin
  %(prog)s --once                   Print the first frame and exit
  %(prog)s --curses                 Draw through curses instead of ANSI escapes
"""
    defaults = RenderConfig()
    parser = argparse.ArgumentParser(
        description="Spinning wireframe text cube",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--frames", type=int, default=None,
                        help="Number of frames to show (default: run until interrupted)")
    parser.add_argument("--interval", type=float, default=defaults.frame_interval,
                        help=f"Seconds between frames (default: {defaults.frame_interval})")
    parser.add_argument("--rate", type=float, default=defaults.angular_rate,
                        help=f"Rotation per frame in radians (default: {defaults.angular_rate})")
    parser.add_argument("--distance", type=float, default=defaults.camera_distance,
                        help=f"Camera distance from the cube center (default: {defaults.camera_distance})")
    parser.add_argument("--once", action="store_true",
                        help="Print frame 0 and exit")
    parser.add_argument("--curses", action="store_true",
                        help="Render through curses")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging on stderr")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(debug=args.debug)

    try:
        config = RenderConfig.detect_terminal(
            angular_rate=args.rate,
            camera_distance=args.distance,
            frame_interval=args.interval,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        if args.once:
            print(Renderer(config).render(0).render())
        elif args.curses:
            run_curses(config, args.frames)
        else:
            run_ansi(config, args.frames)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
