"""Parallax config — loads a scene composition from YAML and builds a scroller.

Config location (first wins):
  1. The path passed to load_config().
  2. PARALLAX_CONFIG environment variable (a .env file is honoured).
  3. config/parallax.yaml at the project root.

A missing file falls back to the built-in defaults (no layers).
"""

import logging
import os

import yaml
from dotenv import load_dotenv

from parallax.authoring.validator import validate_config
from parallax.playback.camera import Camera
from parallax.scroller.controller import ParallaxScroller
from parallax.scroller.entity import Transform
from parallax.scroller.layer import ParallaxLayer, ScrollBehaviour
from parallax.scroller.vector import Vector2, as_vector2, as_vector3

load_dotenv()

logger = logging.getLogger(__name__)

CONFIG_DIR = os.path.join(os.path.dirname(__file__), "..", "..", "config")
DEFAULT_CONFIG_PATH = os.path.join(CONFIG_DIR, "parallax.yaml")


class ConfigError(ValueError):
    """Raised when a config fails validation."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("Invalid parallax config:\n  " + "\n  ".join(self.errors))


def _defaults():
    return {
        "affect_axes": [1.0, 1.0],
        "scroll_behaviour": "absolute",
        "adaptive_parallax_scale": False,
        "horizon_distance": 10.0,
        "custom_reference_position": False,
        "start_reference": [0.0, 0.0],
        "snap_to_pixel_grid": False,
        "pixels_per_unit": 100,
        "pixel_offset": [0.0, 0.0],
        "reference": [0.0, 0.0, 0.0],
        "layers": [],
    }


def resolve_config_path(path=None):
    """Pick the config file to load (explicit path, then env var, then default)."""
    if path:
        return str(path)
    return os.getenv("PARALLAX_CONFIG") or DEFAULT_CONFIG_PATH


def load_config(path=None):
    """Load the "parallax" section of a YAML config, merged over defaults.

    Args:
        path: Optional path to a YAML file.

    Returns:
        Config dict.
    """
    path = resolve_config_path(path)
    if not os.path.exists(path):
        logger.warning(f"Parallax config not found at {path}, using defaults")
        return _defaults()

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        logger.warning(f"Parallax config at {path} is not a mapping, using defaults")
        return _defaults()

    section = data.get("parallax") or {}
    if not isinstance(section, dict):
        logger.warning(f"'parallax' section in {path} is not a mapping, using defaults")
        return _defaults()

    logger.info(f"Loaded parallax config from {path}")
    return {**_defaults(), **section}


def build_layer(layer_config):
    """Create a ParallaxLayer (and its Transform) from one layer dict."""
    name = layer_config["name"]
    entity = Transform(layer_config["position"], name=name)
    wrap_length = layer_config.get("wrap_length")
    return ParallaxLayer(
        entity=entity,
        parallax_scale=layer_config.get("parallax_scale", 0.0),
        wrap=bool(layer_config.get("wrap", False)),
        wrap_length=as_vector2(wrap_length) if wrap_length is not None else Vector2.infinite(),
        name=name,
    )


def build_scroller(config):
    """Validate a config and build the scroller it describes.

    Adaptive scales are applied immediately from layer depth, so scales are
    correct before setup() runs.

    Args:
        config: Config dict as returned by load_config().

    Returns:
        (scroller, camera) — the scroller has `camera` bound as its reference.

    Raises:
        ConfigError: if validate_config() reports errors.
    """
    is_valid, errors = validate_config(config)
    if not is_valid:
        raise ConfigError(errors)

    camera = Camera()
    camera.set_position(as_vector3(config.get("reference", [0.0, 0.0, 0.0])))

    scroller = ParallaxScroller(
        layers=[build_layer(layer) for layer in config.get("layers", [])],
        reference=camera,
        affect_axes=as_vector2(config.get("affect_axes", [1.0, 1.0])),
        scroll_behaviour=ScrollBehaviour(str(config.get("scroll_behaviour", "absolute")).lower()),
        adaptive_parallax_scale=bool(config.get("adaptive_parallax_scale", False)),
        horizon_distance=float(config.get("horizon_distance", 10.0)),
        custom_reference_position=bool(config.get("custom_reference_position", False)),
        start_reference=as_vector2(config.get("start_reference", [0.0, 0.0])),
        snap_to_pixel_grid=bool(config.get("snap_to_pixel_grid", False)),
        pixels_per_unit=config.get("pixels_per_unit", 100),
        pixel_offset=as_vector2(config.get("pixel_offset", [0.0, 0.0])),
    )
    scroller.sync_adaptive_scale()
    return scroller, camera
