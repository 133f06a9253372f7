"""Headless playback — a minimal host frame loop for a parallax scroller.

Moves a camera from a start to an end state over a number of frames,
calling setup() once and tick() every frame, and records where every layer
ended up. Useful for previews, the CLI and integration tests.
"""

import logging

from parallax.playback.camera import interpolate

logger = logging.getLogger(__name__)


def _progress(frame, frames):
    if frames <= 1:
        return 0.0
    return frame / (frames - 1)


def snapshot(scroller, camera, frame):
    """Capture the positions of the camera and every layer for one frame."""
    return {
        "frame": frame,
        "camera": camera.get_position().as_tuple(),
        "layers": {
            layer.name: layer.entity.get_position().as_tuple()
            for layer in scroller.layers
        },
    }


def iter_frames(scroller, camera, start, end, frames):
    """Yield one snapshot per frame while driving the scroller.

    The scroller's reference is bound to `camera`. The camera is placed at
    `start` before setup so the baseline matches frame 0.

    Args:
        scroller: ParallaxScroller with its layers populated.
        camera: Camera used as the reference point (moved in place).
        start: Camera state at the first frame.
        end: Camera state at the last frame.
        frames: Number of frames to play.

    Yields:
        Snapshot dicts (see snapshot()).
    """
    scroller.reference = camera
    camera.set_position(start.get_position())
    camera.zoom = start.zoom
    scroller.setup()

    for frame in range(frames):
        state = interpolate(start, end, _progress(frame, frames))
        camera.set_position(state.get_position())
        camera.zoom = state.zoom
        scroller.tick()
        yield snapshot(scroller, camera, frame)


def play(scroller, camera, start, end, frames):
    """Run iter_frames() to completion.

    Returns:
        List of snapshot dicts, one per frame.
    """
    logger.info(f"Playing {frames} frames with {len(scroller.layers)} layers")
    return list(iter_frames(scroller, camera, start, end, frames))
