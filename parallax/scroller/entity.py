"""Position handles for host-owned entities.

The scroller never creates or destroys entities. It only talks to them
through two methods:

    get_position() -> Vector3
    set_position(Vector3)

Any object with those methods can be handed to a layer. `Transform` is the
minimal concrete handle used by configuration loading, playback and tests.
"""

from parallax.scroller.vector import Vector3, as_vector3


class Transform:
    """A named, mutable position owned by the host."""

    __slots__ = ("name", "_position")

    def __init__(self, position=None, name=""):
        self.name = name
        self._position = as_vector3(position) if position is not None else Vector3()

    def get_position(self):
        return self._position

    def set_position(self, position):
        self._position = as_vector3(position)

    def __repr__(self):
        p = self._position
        return f"Transform(name={self.name!r}, position=({p.x}, {p.y}, {p.z}))"
