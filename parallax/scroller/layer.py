"""Parallax layer — one entity's scale and wrap settings plus its movement state.

Scale semantics (relative to the reference point, usually the camera):
  >1     inverts apparent direction
  =1     moves 1:1 with the reference (stays put on screen)
  0..1   background layer
  =0     main layer, never moves
  <0     foreground layer (moves against the reference, exaggerated)

Two update algorithms share the same wrap rule:
  RELATIVE  adds this tick's reference movement to wherever the entity is now.
  ABSOLUTE  rebuilds the position from the start position and the total
            reference movement since setup, so outside moves are overwritten.
"""

import logging
from enum import Enum

from parallax.scroller.vector import Vector2, Vector3, as_vector3, sign

logger = logging.getLogger(__name__)


class ScrollBehaviour(Enum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"


class ParallaxLayer:
    """Parallax configuration and per-layer state for a single entity."""

    def __init__(self, entity=None, parallax_scale=0.0, wrap=False, wrap_length=None, name=""):
        self.entity = entity
        self.parallax_scale = float(parallax_scale)
        self.wrap = wrap
        self.wrap_length = wrap_length if wrap_length is not None else Vector2.infinite()
        self.name = name or getattr(entity, "name", "")

        self._object_start_position = Vector3()
        self._last_reference_position = Vector3()
        self._start_reference_position = Vector3()

    def setup(self, reference_object_position, reference_baseline_position):
        """Record the starting state. Must run once before any update.

        Args:
            reference_object_position: Where the reference is right now.
            reference_baseline_position: Baseline for ABSOLUTE movement
                (the reference position at setup, or a custom point).
        """
        self._last_reference_position = as_vector3(reference_object_position)
        self._start_reference_position = as_vector3(reference_baseline_position)
        if self.entity is None:
            return
        self._object_start_position = self.entity.get_position()

    def set_scale(self, horizon_distance):
        """Derive the parallax scale from the entity's depth.

        A layer at depth z with horizon distance h gets scale z / h. The
        caller guards against h == 0.
        """
        if self.entity is None:
            return
        self.parallax_scale = self.entity.get_position().z / horizon_distance

    def update(self, behaviour, reference_position, affect_axes, override_scale=None):
        """Move the entity for one tick.

        Args:
            behaviour: ScrollBehaviour selecting the algorithm.
            reference_position: Current reference position.
            affect_axes: Vector2 multiplier per axis.
            override_scale: Use this scale instead of the layer's own.
        """
        scale = self.parallax_scale if override_scale is None else override_scale
        reference_position = as_vector3(reference_position)

        if behaviour is ScrollBehaviour.RELATIVE:
            self._update_relative(reference_position, affect_axes, scale)
        else:
            self._update_absolute(reference_position, affect_axes, scale)

        # Kept current in both modes so a behaviour switch does not jump
        self._last_reference_position = reference_position

    def _update_relative(self, reference_position, affect_axes, scale):
        moved_by = _scaled_delta(reference_position - self._last_reference_position, affect_axes, scale)
        position = self.entity.get_position() + moved_by

        if self.wrap:
            position = self._wrap_target(position, position, reference_position)

        self.entity.set_position(position)

    def _update_absolute(self, reference_position, affect_axes, scale):
        moved_by = _scaled_delta(reference_position - self._start_reference_position, affect_axes, scale)

        if self.wrap:
            # Distance is measured from last tick's position, before the new move
            self._object_start_position = self._wrap_target(
                self._object_start_position, self.entity.get_position(), reference_position
            )

        self.entity.set_position(self._object_start_position + moved_by)

    def _wrap_target(self, target, position, reference_position):
        """Shift `target` by whole wrap windows if `position` left the window.

        The window is centered on the reference. Each axis wraps at most once
        per tick.
        """
        dist = position - reference_position
        shift_x = 0.0
        shift_y = 0.0
        if abs(dist.x) > self.wrap_length.x / 2:
            shift_x = -self.wrap_length.x * sign(dist.x)
        if abs(dist.y) > self.wrap_length.y / 2:
            shift_y = -self.wrap_length.y * sign(dist.y)

        if shift_x or shift_y:
            logger.debug(f"Wrapped layer '{self.name}' by ({shift_x}, {shift_y})")
            return Vector3(target.x + shift_x, target.y + shift_y, target.z)
        return target


def _scaled_delta(reference_delta, affect_axes, scale):
    """Reference movement scaled per axis and by the layer scale. Depth is never moved."""
    return Vector3(
        reference_delta.x * affect_axes.x * scale,
        reference_delta.y * affect_axes.y * scale,
        0.0,
    )
