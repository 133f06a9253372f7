"""Pixel grid alignment.

`align_to_grid` rounds each axis to the nearest 1/grid_size unit and adds a
sub-pixel offset (offset is in pixels, so 0.5 is half a pixel). Rounding
uses Python's round(), which is round-half-to-even: 0.5 -> 0, 1.5 -> 2.

`GridSnapper` wraps the same alignment for a single entity and can pin
individual axes to a fixed value.
"""

from parallax.scroller.vector import Vector2, Vector3


def _align_axis(value, grid_size, offset):
    return round(value * grid_size) / grid_size + offset / grid_size


def align_to_grid(position, grid_size, offset=None):
    """Align a position to a pixel grid.

    Args:
        position: Vector2 or Vector3.
        grid_size: Pixels per unit. Must be non-zero.
        offset: Pixel offset per axis. Vector2 or Vector3; components the
            offset does not have count as 0.

    Returns:
        A vector of the same type as `position`.
    """
    ox = getattr(offset, "x", 0.0)
    oy = getattr(offset, "y", 0.0)
    oz = getattr(offset, "z", 0.0)

    if isinstance(position, Vector2):
        return Vector2(
            _align_axis(position.x, grid_size, ox),
            _align_axis(position.y, grid_size, oy),
        )
    return Vector3(
        _align_axis(position.x, grid_size, ox),
        _align_axis(position.y, grid_size, oy),
        _align_axis(position.z, grid_size, oz),
    )


class GridSnapper:
    """Snaps an entity's position to a pixel grid, with optional fixed axes."""

    def __init__(self, pixels_per_unit, offset=None, fix_x=False, fix_y=False, fix_z=False,
                 fixed_position=None):
        self.pixels_per_unit = pixels_per_unit
        self.offset = offset if offset is not None else Vector3()
        self.fix_x = fix_x
        self.fix_y = fix_y
        self.fix_z = fix_z
        self.fixed_position = fixed_position if fixed_position is not None else Vector3()

    def snap(self, entity):
        """Align the entity in place. Does nothing when pixels_per_unit is 0.

        Returns:
            The position written, or None if nothing was done.
        """
        if self.pixels_per_unit == 0:
            return None

        gp = align_to_grid(entity.get_position(), self.pixels_per_unit, self.offset)
        snapped = Vector3(
            self.fixed_position.x if self.fix_x else gp.x,
            self.fixed_position.y if self.fix_y else gp.y,
            self.fixed_position.z if self.fix_z else gp.z,
        )
        entity.set_position(snapped)
        return snapped
