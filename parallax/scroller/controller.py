"""Parallax scroller — drives every layer from one reference point.

Call order:
  1. Build the scroller with its layers fully populated.
  2. setup() once, before the first frame.
  3. tick() every frame.

The reference is normally a camera. It can be bound once (`reference`) and
read automatically, or its position can be passed to setup()/tick().
"""

import logging

from parallax.grid.snap import align_to_grid
from parallax.scroller.layer import ScrollBehaviour
from parallax.scroller.vector import Vector2, as_vector2, as_vector3

logger = logging.getLogger(__name__)


class ParallaxScroller:
    """Owns the layers and the settings shared by all of them."""

    def __init__(self, layers=None, reference=None, affect_axes=None,
                 scroll_behaviour=ScrollBehaviour.ABSOLUTE,
                 adaptive_parallax_scale=False, horizon_distance=10.0,
                 custom_reference_position=False, start_reference=None,
                 snap_to_pixel_grid=False, pixels_per_unit=100, pixel_offset=None):
        self.layers = list(layers) if layers is not None else []
        self.reference = reference
        self.affect_axes = affect_axes if affect_axes is not None else Vector2(1.0, 1.0)
        self.scroll_behaviour = scroll_behaviour

        self.adaptive_parallax_scale = adaptive_parallax_scale
        self.horizon_distance = horizon_distance

        self.custom_reference_position = custom_reference_position
        self.start_reference = start_reference if start_reference is not None else Vector2()

        self.snap_to_pixel_grid = snap_to_pixel_grid
        self.pixels_per_unit = pixels_per_unit
        self.pixel_offset = pixel_offset if pixel_offset is not None else Vector2()

        # Last observed adaptive settings, compared by sync_adaptive_scale()
        self._last_adaptive_scale = False
        self._last_horizon_distance = 0.0

    def _reference_position(self, reference_position):
        if reference_position is not None:
            return as_vector3(reference_position)
        return self.reference.get_position()

    def setup(self, reference_position=None):
        """Capture the baseline state of every layer.

        Args:
            reference_position: Current reference position. Defaults to the
                bound reference's position.
        """
        ref = self._reference_position(reference_position)
        if not self.custom_reference_position:
            self.start_reference = as_vector2(ref)

        adaptive = self.adaptive_parallax_scale and self.horizon_distance != 0
        for layer in self.layers:
            layer.setup(ref, self.start_reference)
            if adaptive:
                layer.set_scale(self.horizon_distance)

        self._last_adaptive_scale = self.adaptive_parallax_scale
        self._last_horizon_distance = self.horizon_distance

        logger.info(
            f"Parallax setup: {len(self.layers)} layers, behaviour={self.scroll_behaviour.value}, "
            f"start_reference=({self.start_reference.x}, {self.start_reference.y})"
        )

    def tick(self, reference_position=None):
        """Move every layer for one frame, then snap to the pixel grid if enabled.

        Snapping only applies to ABSOLUTE behaviour. Adaptive settings changed
        since the last frame are picked up before any layer moves.
        """
        self.sync_adaptive_scale()
        ref = self._reference_position(reference_position)

        for layer in self.layers:
            layer.update(self.scroll_behaviour, ref, self.affect_axes)

        if self.scroll_behaviour is ScrollBehaviour.ABSOLUTE and self.snap_to_pixel_grid:
            self._snap_layers()

    def _snap_layers(self):
        if self.pixels_per_unit == 0:
            logger.warning("Pixel grid snapping enabled with pixels_per_unit=0, skipping")
            return
        for layer in self.layers:
            position = layer.entity.get_position()
            layer.entity.set_position(align_to_grid(position, self.pixels_per_unit, self.pixel_offset))

    def sync_adaptive_scale(self):
        """Recompute layer scales if the adaptive settings changed since last call.

        Returns:
            True if layer scales were recomputed.
        """
        if (self._last_adaptive_scale == self.adaptive_parallax_scale
                and self._last_horizon_distance == self.horizon_distance):
            return False

        self._last_adaptive_scale = self.adaptive_parallax_scale
        self._last_horizon_distance = self.horizon_distance

        if not self.adaptive_parallax_scale:
            return False
        if self.horizon_distance == 0:
            logger.warning("Adaptive parallax scale enabled with horizon_distance=0, skipping")
            return False

        for layer in self.layers:
            layer.set_scale(self.horizon_distance)
        return True
