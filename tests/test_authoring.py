"""Tests for config loading, validation and scroller building.

Tests cover:
- validate_config: behaviour, vectors, wrap lengths, duplicate names, grid, horizon, camera path
- load_config: defaults, YAML merge, non-mapping files, PARALLAX_CONFIG override, bundled example
- build_scroller: layers, reference camera, adaptive scales, ConfigError
"""

import copy
import os
from unittest.mock import patch

import pytest
import yaml

from parallax.authoring.config import (
    DEFAULT_CONFIG_PATH,
    ConfigError,
    build_scroller,
    load_config,
)
from parallax.authoring.validator import validate_config
from parallax.scroller.layer import ScrollBehaviour
from parallax.scroller.vector import Vector2, Vector3


def _write_yaml(tmp_dir, data, name="parallax.yaml"):
    path = os.path.join(tmp_dir, name)
    with open(path, "w") as f:
        yaml.safe_dump(data, f)
    return path


# ---------------------------------------------------------------------------
# validate_config
# ---------------------------------------------------------------------------

class TestValidateConfig:
    """Test config validation rules."""

    def test_valid_config(self, sample_config):
        is_valid, errors = validate_config(sample_config)
        assert is_valid, errors
        assert errors == []

    def test_not_a_mapping(self):
        is_valid, errors = validate_config(["nope"])
        assert not is_valid
        assert "mapping" in errors[0]

    def test_unknown_behaviour(self, sample_config):
        sample_config["scroll_behaviour"] = "sideways"
        is_valid, errors = validate_config(sample_config)
        assert not is_valid
        assert any("scroll_behaviour" in e for e in errors)

    def test_behaviour_is_case_insensitive(self, sample_config):
        sample_config["scroll_behaviour"] = "Relative"
        is_valid, _ = validate_config(sample_config)
        assert is_valid

    def test_bad_affect_axes(self, sample_config):
        sample_config["affect_axes"] = [1, "x"]
        is_valid, errors = validate_config(sample_config)
        assert not is_valid
        assert any("affect_axes" in e for e in errors)

    def test_zero_wrap_length_rejected(self, sample_config):
        sample_config["layers"][1]["wrap_length"] = [0, 10]
        is_valid, errors = validate_config(sample_config)
        assert not is_valid
        assert any("wrap_length.x" in e for e in errors)

    def test_zero_wrap_length_allowed_when_wrap_off(self, sample_config):
        sample_config["layers"][1]["wrap"] = False
        sample_config["layers"][1]["wrap_length"] = [0, 0]
        is_valid, _ = validate_config(sample_config)
        assert is_valid

    def test_infinite_wrap_length_allowed(self, sample_config):
        sample_config["layers"][1]["wrap_length"] = [float("inf"), float("inf")]
        is_valid, _ = validate_config(sample_config)
        assert is_valid

    def test_duplicate_layer_names(self, sample_config):
        sample_config["layers"].append(copy.deepcopy(sample_config["layers"][0]))
        is_valid, errors = validate_config(sample_config)
        assert not is_valid
        assert any("duplicate" in e for e in errors)

    def test_missing_layer_keys(self, sample_config):
        sample_config["layers"].append({"parallax_scale": 0.5})
        is_valid, errors = validate_config(sample_config)
        assert not is_valid
        assert any("missing key 'name'" in e for e in errors)
        assert any("missing key 'position'" in e for e in errors)

    def test_snap_needs_pixels_per_unit(self, sample_config):
        sample_config["snap_to_pixel_grid"] = True
        sample_config["pixels_per_unit"] = 0
        is_valid, errors = validate_config(sample_config)
        assert not is_valid
        assert any("pixels_per_unit" in e for e in errors)

    def test_adaptive_needs_horizon(self, sample_config):
        sample_config["adaptive_parallax_scale"] = True
        sample_config["horizon_distance"] = 0
        is_valid, errors = validate_config(sample_config)
        assert not is_valid
        assert any("horizon_distance" in e for e in errors)

    def test_wrap_length_shape_checked_when_wrap_off(self, sample_config):
        sample_config["layers"][0]["wrap_length"] = 5
        is_valid, errors = validate_config(sample_config)
        assert not is_valid
        assert any("'sky' wrap_length" in e for e in errors)

    def test_null_wrap_length_allowed(self, sample_config):
        sample_config["layers"][0]["wrap_length"] = None
        is_valid, errors = validate_config(sample_config)
        assert is_valid, errors

    @pytest.mark.parametrize("key", ["start", "end"])
    def test_camera_states_must_be_mappings(self, sample_config, key):
        sample_config["camera"][key] = [0, 0]
        is_valid, errors = validate_config(sample_config)
        assert not is_valid
        assert any(f"camera.{key} must be a mapping" in e for e in errors)

    def test_camera_state_fields_must_be_numbers(self, sample_config):
        sample_config["camera"]["end"]["x"] = "far"
        is_valid, errors = validate_config(sample_config)
        assert not is_valid
        assert any("camera.end.x" in e for e in errors)

    def test_camera_must_be_mapping(self, sample_config):
        sample_config["camera"] = "pan"
        is_valid, errors = validate_config(sample_config)
        assert not is_valid
        assert any("camera must be a mapping" in e for e in errors)

    def test_camera_frames_positive(self, sample_config):
        sample_config["camera"]["frames"] = 0
        is_valid, errors = validate_config(sample_config)
        assert not is_valid
        assert any("camera.frames" in e for e in errors)


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------

class TestLoadConfig:
    """Test YAML loading."""

    def test_missing_file_returns_defaults(self, tmp_dir):
        config = load_config(os.path.join(tmp_dir, "missing.yaml"))
        assert config["layers"] == []
        assert config["scroll_behaviour"] == "absolute"

    def test_merges_over_defaults(self, tmp_dir):
        path = _write_yaml(tmp_dir, {"parallax": {"scroll_behaviour": "relative"}})
        config = load_config(path)
        assert config["scroll_behaviour"] == "relative"
        assert config["pixels_per_unit"] == 100

    def test_empty_file_returns_defaults(self, tmp_dir):
        path = os.path.join(tmp_dir, "empty.yaml")
        open(path, "w").close()
        assert load_config(path)["layers"] == []

    @pytest.mark.parametrize("content", [
        "- just\n- a list\n",
        "42\n",
        "parallax:\n  - not\n  - a mapping\n",
        "parallax: 7\n",
    ])
    def test_non_mapping_yaml_returns_defaults(self, tmp_dir, content):
        path = os.path.join(tmp_dir, "odd.yaml")
        with open(path, "w") as f:
            f.write(content)
        config = load_config(path)
        assert config["layers"] == []
        assert config["scroll_behaviour"] == "absolute"

    def test_env_var_overrides_default_path(self, tmp_dir, sample_config):
        path = _write_yaml(tmp_dir, {"parallax": sample_config}, name="scene.yaml")
        with patch.dict(os.environ, {"PARALLAX_CONFIG": path}):
            config = load_config()
        assert [layer["name"] for layer in config["layers"]] == ["sky", "hills", "ground"]

    def test_yaml_infinity(self, tmp_dir):
        path = os.path.join(tmp_dir, "inf.yaml")
        with open(path, "w") as f:
            f.write("parallax:\n  layers:\n    - {name: a, position: [0, 0, 0], wrap: true, wrap_length: [8, .inf]}\n")
        config = load_config(path)
        assert config["layers"][0]["wrap_length"][1] == float("inf")

    def test_bundled_example_is_valid(self):
        config = load_config(DEFAULT_CONFIG_PATH)
        is_valid, errors = validate_config(config)
        assert is_valid, errors
        assert len(config["layers"]) > 0


# ---------------------------------------------------------------------------
# build_scroller
# ---------------------------------------------------------------------------

class TestBuildScroller:
    """Test building a scroller from a config."""

    def test_builds_layers_in_order(self, sample_config):
        scroller, _ = build_scroller(sample_config)
        assert [layer.name for layer in scroller.layers] == ["sky", "hills", "ground"]
        hills = scroller.layers[1]
        assert hills.wrap is True
        assert hills.wrap_length == Vector2(20, float("inf"))
        assert hills.entity.get_position() == Vector3(0, 0, 5)
        assert scroller.layers[0].wrap_length == Vector2.infinite()

    def test_camera_is_bound_reference(self, sample_config):
        scroller, camera = build_scroller(sample_config)
        assert scroller.reference is camera
        assert camera.get_position() == Vector3(0, 0, -10)

    def test_settings_copied(self, sample_config):
        sample_config["scroll_behaviour"] = "relative"
        sample_config["affect_axes"] = [1, 0]
        sample_config["pixel_offset"] = [0.5, 0.5]
        scroller, _ = build_scroller(sample_config)
        assert scroller.scroll_behaviour is ScrollBehaviour.RELATIVE
        assert scroller.affect_axes == Vector2(1, 0)
        assert scroller.pixel_offset == Vector2(0.5, 0.5)
        assert scroller.pixels_per_unit == 16

    def test_adaptive_scales_applied_on_build(self, sample_config):
        sample_config["adaptive_parallax_scale"] = True
        sample_config["horizon_distance"] = 10
        scroller, _ = build_scroller(sample_config)
        assert [layer.parallax_scale for layer in scroller.layers] == pytest.approx([1.0, 0.5, 0.0])

    def test_invalid_config_raises(self, sample_config):
        sample_config["layers"][1]["wrap_length"] = [0, 0]
        with pytest.raises(ConfigError) as exc_info:
            build_scroller(sample_config)
        assert len(exc_info.value.errors) == 2
        assert "wrap_length" in str(exc_info.value)

    def test_malformed_wrap_length_raises_config_error(self, sample_config):
        sample_config["layers"][2]["wrap_length"] = 5
        with pytest.raises(ConfigError):
            build_scroller(sample_config)

    def test_malformed_camera_rejected_before_path_is_read(self, sample_config):
        sample_config["camera"]["start"] = "origin"
        with pytest.raises(ConfigError) as exc_info:
            build_scroller(sample_config)
        assert "camera.start" in str(exc_info.value)
