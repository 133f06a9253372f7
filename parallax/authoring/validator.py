"""Config validator — checks a parallax config dict before a scroller is built."""

import math
import numbers

VALID_BEHAVIOURS = ["absolute", "relative"]

REQUIRED_LAYER_KEYS = ["name", "position"]


def _is_number(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _check_vector(value, size, label, errors, min_size=None):
    """Append an error unless value is a list of `size` numbers (or min_size..size)."""
    min_size = size if min_size is None else min_size
    if not isinstance(value, (list, tuple)) or not (min_size <= len(value) <= size):
        expected = f"{size}" if min_size == size else f"{min_size}-{size}"
        errors.append(f"{label}: expected a list of {expected} numbers, got {value!r}")
        return False
    if not all(_is_number(v) and not math.isnan(v) for v in value):
        errors.append(f"{label}: all components must be numbers, got {value!r}")
        return False
    return True


def _validate_layer(layer, index, seen_names, errors):
    label = f"Layer {index + 1}"
    if not isinstance(layer, dict):
        errors.append(f"{label}: expected a mapping, got {type(layer).__name__}")
        return

    for key in REQUIRED_LAYER_KEYS:
        if key not in layer:
            errors.append(f"{label}: missing key '{key}'")

    name = layer.get("name")
    if name is not None:
        label = f"Layer '{name}'"
        if name in seen_names:
            # Two layers on one entity would fight over its position
            errors.append(f"{label}: duplicate layer name")
        seen_names.add(name)

    if "position" in layer:
        _check_vector(layer["position"], 3, f"{label} position", errors, min_size=2)

    scale = layer.get("parallax_scale", 0.0)
    if not _is_number(scale):
        errors.append(f"{label}: parallax_scale must be a number, got {scale!r}")

    # Shape is checked even with wrap off; the layer is built with it either way
    wrap_length = layer.get("wrap_length")
    if wrap_length is None:
        wrap_length = [math.inf, math.inf]
    if _check_vector(wrap_length, 2, f"{label} wrap_length", errors) and layer.get("wrap", False):
        for axis, length in zip("xy", wrap_length):
            if length <= 0:
                errors.append(f"{label}: wrap_length.{axis} must be > 0 (got {length})")


def validate_config(config):
    """Validate the "parallax" section of a config.

    Args:
        config: The "parallax" config dict.

    Returns:
        (is_valid, errors) — tuple of bool and list of error strings.
    """
    errors = []
    if not isinstance(config, dict):
        return False, [f"Config must be a mapping, got {type(config).__name__}"]

    behaviour = str(config.get("scroll_behaviour", "absolute")).lower()
    if behaviour not in VALID_BEHAVIOURS:
        errors.append(f"Unknown scroll_behaviour '{behaviour}' (expected one of {VALID_BEHAVIOURS})")

    for key in ("affect_axes", "start_reference", "pixel_offset"):
        if key in config:
            _check_vector(config[key], 2, key, errors)
    if "reference" in config:
        _check_vector(config["reference"], 3, "reference", errors, min_size=2)

    if config.get("adaptive_parallax_scale", False):
        horizon = config.get("horizon_distance", 10.0)
        if not _is_number(horizon) or horizon == 0:
            errors.append(f"horizon_distance must be a non-zero number when adaptive_parallax_scale is on (got {horizon!r})")

    if config.get("snap_to_pixel_grid", False):
        ppu = config.get("pixels_per_unit", 100)
        if not _is_number(ppu) or ppu == 0:
            errors.append(f"pixels_per_unit must be a non-zero number when snap_to_pixel_grid is on (got {ppu!r})")

    layers = config.get("layers", [])
    if not isinstance(layers, list):
        errors.append("layers must be a list")
        layers = []

    seen_names = set()
    for i, layer in enumerate(layers):
        _validate_layer(layer, i, seen_names, errors)

    camera = config.get("camera")
    if camera is not None:
        if not isinstance(camera, dict):
            errors.append(f"camera must be a mapping, got {type(camera).__name__}")
        else:
            _validate_camera(camera, errors)

    return len(errors) == 0, errors


def _validate_camera(camera, errors):
    frames = camera.get("frames", 1)
    if not isinstance(frames, int) or isinstance(frames, bool) or frames < 1:
        errors.append(f"camera.frames must be a positive integer (got {frames!r})")

    for key in ("start", "end"):
        state = camera.get(key, {})
        if not isinstance(state, dict):
            errors.append(f"camera.{key} must be a mapping, got {type(state).__name__}")
            continue
        for field in ("x", "y", "z", "zoom"):
            if field in state and not _is_number(state[field]):
                errors.append(f"camera.{key}.{field} must be a number (got {state[field]!r})")
