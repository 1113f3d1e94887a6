"""Material, texture and crease-angle settings for mesh rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Color = tuple[float, float, float]

MAX_INDEX = 0xFFFFFFFF
"""Largest representable element index."""

MIN_CREASE_ANGLE = 0.0
MAX_CREASE_ANGLE = 180.0


class TextureMode(Enum):
    """Which texture is currently bound to a rendered mesh."""

    COLD_WARM = "cold_warm"
    CHECKERBOARD = "checkerboard"
    MATCAP = "matcap"
    OTHER = "other"


class TextureFormat(Enum):
    """Internal pixel formats a texture may be stored in."""

    RGB = "rgb"
    RGBA = "rgba"
    SRGB8 = "srgb8"
    SRGB8_ALPHA8 = "srgb8_alpha8"


def clamp_crease_angle(angle: float) -> float:
    """Clamp a crease angle in degrees to the range [0, 180]."""
    return max(MIN_CREASE_ANGLE, min(MAX_CREASE_ANGLE, float(angle)))


def texture_components(format: TextureFormat) -> tuple[int, TextureFormat]:
    """Number of channels to load and the pixel layout for an internal format.

    RGB-like formats load three channels as RGB, alpha formats four as RGBA;
    anything else falls back to RGB.
    """
    if format in (TextureFormat.RGBA, TextureFormat.SRGB8_ALPHA8):
        return 4, TextureFormat.RGBA
    return 3, TextureFormat.RGB


@dataclass
class Material:
    """Shading parameters of a rendered surface mesh."""

    front_color: Color = (0.6, 0.6, 0.6)
    back_color: Color = (0.5, 0.0, 0.0)
    ambient: float = 0.1
    diffuse: float = 0.8
    specular: float = 0.6
    shininess: float = 100.0
    alpha: float = 1.0
    srgb: bool = False
    use_colors: bool = True
    crease_angle: float = 180.0
    point_size: float = 5.0
    texture_mode: TextureMode = TextureMode.OTHER

    def set_crease_angle(self, angle: float) -> bool:
        """Set the crease angle, clamped to [0, 180].

        Returns True when the requested angle differs from the current one,
        meaning normals must be recomputed.
        """
        if angle == self.crease_angle:
            return False
        self.crease_angle = clamp_crease_angle(angle)
        return True

    def use_texture_lighting(self) -> None:
        """Switch to lighting suited to showing a texture image."""
        self.ambient = 1.0
        self.diffuse = 0.9
        self.specular = 0.0
        self.shininess = 1.0