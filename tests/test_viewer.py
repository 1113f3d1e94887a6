import pytest

from meshkit.viewer import DrawModes, mesh_viewer_state, nearest_vertex, trackball_viewer_state


def test_add_returns_indices():
    modes = DrawModes()
    assert modes.add("A") == 0
    assert modes.add("B") == 1
    assert len(modes) == 2


def test_set_and_current():
    modes = DrawModes(["A", "B", "C"])
    assert modes.current() == "A"
    assert modes.set("C") is True
    assert modes.current() == "C"


def test_set_unknown_keeps_mode():
    modes = DrawModes(["A", "B"])
    modes.set("B")
    assert modes.set("Z") is False
    assert modes.current() == "B"


def test_cycle_wraps():
    modes = DrawModes(["A", "B", "C"])
    assert [modes.cycle() for _ in range(4)] == ["B", "C", "A", "B"]


def test_cycle_empty_raises():
    with pytest.raises(IndexError):
        DrawModes().cycle()


def test_clear_leaves_no_current():
    modes = DrawModes(["A"])
    modes.clear()
    assert len(modes) == 0
    assert modes.current() == ""


def test_trackball_viewer_state():
    state, modes = trackball_viewer_state("my viewer", 640, 480)
    assert modes.current() == "Solid Smooth"
    assert modes.names == ["Wireframe", "Solid Flat", "Solid Smooth"]
    assert state.help_items[0] == ("Left/Right", "Rotate model horizontally")
    assert state.help_items[2] == ("Space", "Cycle through draw modes")
    assert state.title == "my_viewer"


def test_mesh_viewer_state():
    state, modes = mesh_viewer_state("mesh", 640, 480, False)
    assert modes.current() == "Smooth Shading"
    assert modes.names == ["Points", "Hidden Line", "Line", "Smooth Shading", "Texture"]
    assert state.help_items[3] == ("Backspace", "Reload mesh")
    assert state.help_items[4] == ("W", "Write mesh to 'output.off'")
    assert len(state.help_items) == 10
    assert state.show_gui is False


def test_mesh_viewer_cycles_modes():
    _, modes = mesh_viewer_state("mesh", 640, 480)
    assert modes.cycle() == "Texture"
    assert modes.cycle() == "Points"


def test_nearest_vertex():
    positions = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 2.0, 0.0)]
    assert nearest_vertex(positions, (0.9, 0.1, 0.0)) == 1
    assert nearest_vertex(positions, (0.0, 1.8, 0.0)) == 2


def test_nearest_vertex_first_of_ties():
    positions = [(1.0, 0.0, 0.0), (-1.0, 0.0, 0.0)]
    assert nearest_vertex(positions, (0.0, 0.0, 0.0)) == 0


def test_nearest_vertex_empty():
    assert nearest_vertex([], (0.0, 0.0, 0.0)) is None