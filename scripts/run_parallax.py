"""Parallax preview — plays a config's camera path and prints layer positions.

Loads the scene from config/parallax.yaml (or PARALLAX_CONFIG / --config),
moves the camera from its start to its end state, and prints where every
layer sits every K frames.

Usage:
    python scripts/run_parallax.py
    python scripts/run_parallax.py --config my_scene.yaml --frames 60 --every 10
"""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from parallax.authoring.config import ConfigError, build_scroller, load_config  # noqa: E402
from parallax.playback.camera import camera_path_from_config  # noqa: E402
from parallax.playback.runner import iter_frames  # noqa: E402

load_dotenv()


def _format_position(position):
    return "(" + ", ".join(f"{v:8.3f}" for v in position) + ")"


def print_frame(snap):
    print(f"\n{'='*60}")
    print(f"  FRAME {snap['frame']}  camera {_format_position(snap['camera'])}")
    print(f"{'='*60}")
    for name, position in snap["layers"].items():
        print(f"  {name:<16} {_format_position(position)}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Preview a parallax scene in the terminal.")
    parser.add_argument("--config", help="Path to a parallax YAML config")
    parser.add_argument("--frames", type=int, help="Override the camera path frame count")
    parser.add_argument("--every", type=int, default=30, help="Print every Nth frame (default: 30)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=os.getenv("PARALLAX_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    try:
        scroller, camera = build_scroller(config)
    except ConfigError as e:
        print(f"  ERROR: {e}")
        return 1

    start, end, frames = camera_path_from_config(config)
    if args.frames:
        frames = args.frames
    every = max(1, args.every)

    last = None
    for snap in iter_frames(scroller, camera, start, end, frames):
        last = snap
        if snap["frame"] % every == 0:
            print_frame(snap)
    if last is not None and last["frame"] % every != 0:
        print_frame(last)
    return 0


if __name__ == "__main__":
    sys.exit(main())
