"""Camera — the usual reference point for a parallax scroller.

A camera has a world position (x, y, z) and a zoom level. Playback moves it
linearly between a start and an end state; the scroller reads its position
through the same get_position/set_position pair every entity exposes.
"""

from parallax.scroller.vector import Vector3, as_vector3


class Camera:
    """Camera state: position in world space + zoom level."""

    __slots__ = ("x", "y", "z", "zoom")

    def __init__(self, x=0.0, y=0.0, z=0.0, zoom=1.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.zoom = float(zoom)

    def get_position(self):
        return Vector3(self.x, self.y, self.z)

    def set_position(self, position):
        position = as_vector3(position)
        self.x = position.x
        self.y = position.y
        self.z = position.z

    def copy(self):
        return Camera(x=self.x, y=self.y, z=self.z, zoom=self.zoom)


def interpolate(start, end, t):
    """Linear interpolation between two camera states.

    Args:
        start: Camera at t=0.
        end: Camera at t=1.
        t: Progress in [0.0, 1.0].

    Returns:
        New Camera at the interpolated position.
    """
    t = max(0.0, min(1.0, t))
    return Camera(
        x=start.x + (end.x - start.x) * t,
        y=start.y + (end.y - start.y) * t,
        z=start.z + (end.z - start.z) * t,
        zoom=start.zoom + (end.zoom - start.zoom) * t,
    )


def camera_path_from_config(config):
    """Extract camera start/end states and frame count from a parallax config.

    If the config has no "camera" key, the camera stays at the configured
    reference position for a single frame.

    Args:
        config: The "parallax" section of a config dict.

    Returns:
        (start_camera, end_camera, frames) tuple.
    """
    reference = list(config.get("reference", [0, 0, 0])) + [0, 0, 0]
    cam_spec = config.get("camera")
    if cam_spec is None:
        static = Camera(x=reference[0], y=reference[1], z=reference[2])
        return static, static.copy(), 1

    start_data = cam_spec.get("start", {})
    end_data = cam_spec.get("end", {})

    start = Camera(
        x=start_data.get("x", reference[0]),
        y=start_data.get("y", reference[1]),
        z=start_data.get("z", reference[2]),
        zoom=start_data.get("zoom", 1.0),
    )
    end = Camera(
        x=end_data.get("x", start.x),
        y=end_data.get("y", start.y),
        z=end_data.get("z", start.z),
        zoom=end_data.get("zoom", start.zoom),
    )
    return start, end, int(cam_spec.get("frames", 1))
