"""Virtual trackball camera: modelview and projection handling for a viewer."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

DEFAULT_FOVY = 45.0
_ZOOM_SPEED = 3.0
_SCROLL_SPEED = 0.12


def translation_matrix(t: Sequence[float]) -> np.ndarray:
    """Return the 4x4 homogeneous matrix translating by ``t``."""
    m = np.eye(4)
    m[:3, 3] = np.asarray(t, dtype=float)[:3]
    return m


def rotation_matrix(axis: Sequence[float], angle: float) -> np.ndarray:
    """Return the 4x4 matrix rotating by ``angle`` degrees about ``axis``."""
    a = np.asarray(axis, dtype=float)[:3]
    length = float(np.linalg.norm(a))
    if length == 0.0:
        raise ValueError("rotation axis must not be zero")
    x, y, z = a / length
    theta = math.radians(angle)
    c = math.cos(theta)
    s = math.sin(theta)
    t = 1.0 - c
    m = np.eye(4)
    m[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return m


def perspective_matrix(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a perspective projection with vertical field of view ``fovy`` degrees."""
    if near <= 0 or far <= near:
        raise ValueError("clipping planes must satisfy 0 < near < far")
    if aspect <= 0:
        raise ValueError("aspect ratio must be positive")
    top = near * math.tan(math.radians(fovy) / 2.0)
    right = aspect * top
    m = np.zeros((4, 4))
    m[0, 0] = near / right
    m[1, 1] = near / top
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -2.0 * far * near / (far - near)
    m[3, 2] = -1.0
    return m


class Trackball:
    """Camera state driven by trackball-style mouse interaction."""

    def __init__(self, width: int, height: int) -> None:
        self.width = 1
        self.height = 1
        self.resize(width, height)
        self.center = np.zeros(3)
        self.radius = 1.0
        self.near = 0.01
        self.far = 10.0
        self.fovy = DEFAULT_FOVY
        self.modelview = np.eye(4)
        self.projection = np.eye(4)
        self.last_point_2d = (0.0, 0.0)
        self.last_point_3d = np.zeros(3)
        self.last_point_ok = False

    def resize(self, width: int, height: int) -> None:
        """Set the viewport size in pixels."""
        if width <= 0 or height <= 0:
            raise ValueError("viewport size must be positive")
        self.width = width
        self.height = height

    def _eye_center(self) -> np.ndarray:
        return self.modelview @ np.append(self.center, 1.0)

    def set_scene(self, center: Sequence[float], radius: float) -> None:
        """Define the scene's bounding sphere and show all of it."""
        self.center = np.asarray(center, dtype=float)[:3].copy()
        self.radius = float(radius)
        self.view_all()

    def view_all(self) -> None:
        """Move the camera so the whole scene is visible."""
        t = self._eye_center()
        self.translate((-t[0], -t[1], -t[2] - 2.5 * self.radius))

    def translate(self, t: Sequence[float]) -> None:
        """Translate the scene in eye coordinates."""
        self.modelview = translation_matrix(t) @ self.modelview

    def rotate(self, axis: Sequence[float], angle: float) -> None:
        """Rotate the scene by ``angle`` degrees about ``axis`` through its center."""
        ec = self._eye_center()
        c = ec[:3] / ec[3]
        self.modelview = (
            translation_matrix(c)
            @ rotation_matrix(axis, angle)
            @ translation_matrix(-c)
            @ self.modelview
        )

    def map_to_sphere(self, x: float, y: float) -> np.ndarray | None:
        """Map a window point onto the unit hemisphere, or None if outside."""
        w = float(self.width)
        h = float(self.height)
        if not (0 <= x <= w and 0 <= y <= h):
            return None
        sx = math.sin(math.pi * ((x - 0.5 * w) / w) * 0.5)
        sy = math.sin(math.pi * ((0.5 * h - y) / h) * 0.5)
        s2 = sx * sx + sy * sy
        sz = math.sqrt(1.0 - s2) if s2 < 1.0 else 0.0
        return np.array([sx, sy, sz])

    def _remember(self, x: float, y: float) -> bool:
        self.last_point_2d = (x, y)
        mapped = self.map_to_sphere(x, y)
        self.last_point_ok = mapped is not None
        if mapped is not None:
            self.last_point_3d = mapped
        return self.last_point_ok

    def begin_drag(self, x: float, y: float) -> bool:
        """Start a drag at window position (x, y); return whether it hit the sphere."""
        return self._remember(x, y)

    def end_drag(self) -> None:
        """Finish the current drag."""
        self.last_point_ok = False

    def rotation(self, x: float, y: float) -> None:
        """Rotate the scene following the mouse to (x, y)."""
        if self.last_point_ok:
            new_point = self.map_to_sphere(x, y)
            if new_point is not None:
                axis = np.cross(self.last_point_3d, new_point)
                cos_angle = float(np.dot(self.last_point_3d, new_point))
                if abs(cos_angle) < 1.0 and np.linalg.norm(axis) > 0.0:
                    angle = 2.0 * math.degrees(math.acos(cos_angle))
                    self.rotate(axis, angle)
        self._remember(x, y)

    def translation(self, x: float, y: float) -> None:
        """Shift the scene in the view plane following the mouse to (x, y)."""
        dx = x - self.last_point_2d[0]
        dy = y - self.last_point_2d[1]
        ec = self._eye_center()
        z = -(ec[2] / ec[3])
        aspect = self.width / self.height
        up = math.tan(math.radians(self.fovy) / 2.0) * self.near
        right = aspect * up
        self.translate(
            (
                2.0 * dx / self.width * right / self.near * z,
                -2.0 * dy / self.height * up / self.near * z,
                0.0,
            )
        )
        self._remember(x, y)

    def zoom(self, x: float, y: float) -> None:
        """Move the scene along the view direction following the mouse."""
        dy = y - self.last_point_2d[1]
        self.translate((0.0, 0.0, self.radius * dy * _ZOOM_SPEED / self.height))
        self._remember(x, y)

    def scroll(self, yoffset: float) -> None:
        """Move the scene along the view direction for a scroll wheel step."""
        self.translate((0.0, 0.0, -yoffset * _SCROLL_SPEED * self.radius))

    def update_projection(self) -> np.ndarray:
        """Fit the clipping planes to the scene and return the projection matrix."""
        z = -self._eye_center()[2]
        self.fovy = DEFAULT_FOVY
        self.near = max(0.001 * self.radius, z - self.radius)
        self.far = max(0.002 * self.radius, z + self.radius)
        self.projection = perspective_matrix(
            self.fovy, self.width / self.height, self.near, self.far
        )
        return self.projection

    def unproject(
        self, x: float, y: float, depth: float, viewport: Sequence[float]
    ) -> np.ndarray | None:
        """Return the scene point under window (x, y) at a depth-buffer value.

        ``y`` counts from the top of the window; ``viewport`` is
        ``(x, y, width, height)``. A depth of 1.0 means background: None.
        """
        if depth == 1.0:
            return None
        vx, vy, vw, vh = (float(v) for v in viewport)
        y = vh - y
        xf = (x - vx) / vw * 2.0 - 1.0
        yf = (y - vy) / vh * 2.0 - 1.0
        zf = depth * 2.0 - 1.0
        inv = np.linalg.inv(self.projection @ self.modelview)
        p = inv @ np.array([xf, yf, zf, 1.0])
        return p[:3] / p[3]

    def fly_to(self, point: Sequence[float]) -> None:
        """Make ``point`` the rotation center and move halfway towards it."""
        self.center = np.asarray(point, dtype=float)[:3].copy()
        t = self._eye_center()
        self.translate((-t[0], -t[1], -0.5 * t[2]))