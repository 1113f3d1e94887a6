"""Building blocks for interactive polygon mesh viewers: heap, tessellation, textures, camera and viewer state."""

__version__ = "0.1.0"