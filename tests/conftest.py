"""Shared test fixtures for the parallax test suite."""

import shutil
import tempfile

import pytest

from parallax.scroller.entity import Transform
from parallax.scroller.layer import ParallaxLayer


@pytest.fixture
def tmp_dir():
    """Create a temporary directory that's cleaned up after the test."""
    d = tempfile.mkdtemp()
    yield d
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def make_layer():
    """Factory for a layer backed by a fresh Transform."""
    def _make(position=(0.0, 0.0, 0.0), **kwargs):
        name = kwargs.pop("name", "layer")
        return ParallaxLayer(entity=Transform(position, name=name), name=name, **kwargs)
    return _make


@pytest.fixture
def sample_config():
    """A minimal valid parallax config (the "parallax" section)."""
    return {
        "affect_axes": [1, 1],
        "scroll_behaviour": "absolute",
        "adaptive_parallax_scale": False,
        "horizon_distance": 10,
        "custom_reference_position": False,
        "start_reference": [0, 0],
        "snap_to_pixel_grid": False,
        "pixels_per_unit": 16,
        "pixel_offset": [0, 0],
        "reference": [0, 0, -10],
        "layers": [
            {"name": "sky", "position": [0, 4, 10], "parallax_scale": 1.0},
            {
                "name": "hills",
                "position": [0, 0, 5],
                "parallax_scale": 0.5,
                "wrap": True,
                "wrap_length": [20, float("inf")],
            },
            {"name": "ground", "position": [0, -3, 0], "parallax_scale": 0.0},
        ],
        "camera": {
            "start": {"x": 0, "y": 0},
            "end": {"x": 40, "y": 0},
            "frames": 5,
        },
    }
