# meshkit

Pure-Python building blocks for interactive polygon mesh viewers. The package
holds the parts of a viewer that can be used and tested without a screen: an
indexed heap, polygon tessellation, built-in textures, a trackball camera,
window and draw-mode state, GUI styling and material settings. An application
supplies the window, the rendering back end and the mesh itself.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `meshkit.heap`: `Heap` is a binary min-heap whose entries know their own
  position, so they can be updated (`update`) and removed (`remove`) as well as
  popped (`front`, `pop_front`). You supply a `HeapInterface` that compares
  entries (`less`, `greater`) and stores their positions
  (`get_heap_position`, `set_heap_position`). `check()` verifies the heap
  property.
- `meshkit.memory`: `max_size()` and `current_size()` report the peak and
  current resident memory of the process in bytes, or 0 where the platform
  does not offer the figure.
- `meshkit.colormap`: two built-in textures as `numpy` uint8 arrays.
  `cold_warm_texture()` is the 256-entry cold-to-warm colour map for scalar
  fields; `checkerboard_texture(resolution=512)` is a blue and white
  checkerboard with 32-pixel cells.
- `meshkit.tessellation`: `tessellate(points)` splits a polygon of 3D points
  into triangles, given as index triples, so that the sum of squared triangle
  areas is as small as possible. `squared_triangle_area(p0, p1, p2)` is the
  measure it uses.
- `meshkit.controls`: `ViewerState` keeps the back-end independent state of a
  viewer window: help items, pressed mouse buttons (`MouseButton`) and
  modifiers (`Modifier`), GUI visibility and scale, window size and screenshot
  names. `keyboard(key, action)` returns a `Command` for the caller to carry
  out instead of quitting or switching to fullscreen itself.
- `meshkit.trackball`: the `Trackball` camera, with rotation, translation,
  zoom, scrolling, fitting the scene into view, clipping-plane fitting
  (`update_projection`), `unproject` for picking and `fly_to`. The helpers
  `translation_matrix`, `rotation_matrix` (angles in degrees) and
  `perspective_matrix` return 4x4 `numpy` arrays.
- `meshkit.viewer`: `DrawModes`, an ordered list of named draw modes with one
  active; `trackball_viewer_state` and `mesh_viewer_state`, which return a
  `ViewerState` and `DrawModes` set up with their default modes and help
  items; and `nearest_vertex(positions, point)` for picking.
- `meshkit.guistyle`: the GUI look. `GuiStyle` holds element sizes and colours
  and `scaled(scale)` resizes them; `pmp_style(scale)` is the viewer's light
  colour scheme; `font_size(scale)` gives the font's pixel size.
- `meshkit.material`: `Material` holds shading parameters, the crease angle
  and the current `TextureMode`; `clamp_crease_angle` and
  `texture_components` (for a `TextureFormat`) are the matching helpers.

## Example

```python
import numpy as np
from meshkit.tessellation import tessellate
from meshkit.trackball import Trackball

square = np.array([[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]], dtype=float)
print(tessellate(square))          # two triangles as index triples

camera = Trackball(800, 600)
camera.set_scene(np.zeros(3), 1.0)  # look at the unit sphere around the origin
camera.rotate(np.array([0.0, 1.0, 0.0]), 5.0)
projection = camera.update_projection()
```

## What it does not do

meshkit opens no window and draws nothing: there is no OpenGL, shader or GUI
code. It has no surface mesh data structure, no per-element property storage
and no mesh file reading or writing. It provides no command to run; a viewer
application built on it has to supply these parts itself.