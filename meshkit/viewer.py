"""Draw modes, help bindings and picking for trackball and mesh viewers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from meshkit.controls import ViewerState

TRACKBALL_DRAW_MODES = ("Wireframe", "Solid Flat", "Solid Smooth")
MESH_DRAW_MODES = ("Points", "Hidden Line", "Line", "Smooth Shading", "Texture")


class DrawModes:
    """An ordered list of named draw modes with one of them active."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: list[str] = list(names)
        self._index = 0

    def __len__(self) -> int:
        return len(self._names)

    @property
    def names(self) -> list[str]:
        return list(self._names)

    def clear(self) -> None:
        """Remove all draw modes."""
        self._names.clear()
        self._index = 0

    def add(self, name: str) -> int:
        """Append a draw mode and return its index."""
        self._names.append(name)
        return len(self._names) - 1

    def set(self, name: str) -> bool:
        """Activate the named mode; unknown names leave the mode unchanged."""
        try:
            self._index = self._names.index(name)
        except ValueError:
            return False
        return True

    def cycle(self) -> str:
        """Activate the next mode, wrapping around, and return its name."""
        if not self._names:
            raise IndexError("no draw modes to cycle through")
        self._index += 1
        if self._index >= len(self._names):
            self._index = 0
        return self._names[self._index]

    def current(self) -> str:
        """Name of the active mode, or an empty string if there is none."""
        if self._index < len(self._names):
            return self._names[self._index]
        return ""


def trackball_viewer_state(
    title: str, width: int, height: int, show_gui: bool = True
) -> tuple[ViewerState, DrawModes]:
    """Window state and draw modes of a plain trackball viewer."""
    state = ViewerState(title, width, height, show_gui)
    modes = DrawModes(TRACKBALL_DRAW_MODES)
    modes.set("Solid Smooth")
    state.add_help_item("Left/Right", "Rotate model horizontally", 0)
    state.add_help_item("Up/Down", "Rotate model vertically", 1)
    state.add_help_item("Space", "Cycle through draw modes", 2)
    return state, modes


def mesh_viewer_state(
    title: str, width: int, height: int, show_gui: bool = True
) -> tuple[ViewerState, DrawModes]:
    """Window state and draw modes of a surface mesh viewer."""
    state, modes = trackball_viewer_state(title, width, height, show_gui)
    modes.clear()
    for name in MESH_DRAW_MODES:
        modes.add(name)
    modes.set("Smooth Shading")
    state.add_help_item("Backspace", "Reload mesh", 3)
    state.add_help_item("W", "Write mesh to 'output.off'", 4)
    return state, modes


def nearest_vertex(
    positions: Sequence[Sequence[float]], point: Sequence[float]
) -> int | None:
    """Index of the position closest to ``point``; the first wins ties.

    Returns None when there are no positions.
    """
    pts = np.asarray(positions, dtype=float)
    if pts.size == 0:
        return None
    if pts.ndim != 2:
        raise ValueError("positions must be a sequence of points")
    target = np.asarray(point, dtype=float)
    distances = np.linalg.norm(pts - target, axis=1)
    return int(np.argmin(distances))