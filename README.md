# softraster

A small software renderer. It loads a triangle mesh from a Wavefront OBJ
file, rotates it by a fixed angle, projects its vertices with a simple
perspective camera, and draws the points and triangle edges as a wireframe
into a 32-bit ARGB pixel buffer, which is shown in a borderless pygame
window.

## Installing

```
pip install .
```

## Running

```
softraster path/to/model.obj
```

The model path is optional and defaults to `../obj/teddy.obj`. The window
size can be set with `--width` and `--height` (800 × 600 by default). If
the model cannot be read, an error is printed and the command exits with
status 1.

Keys while the window is open:

| Key       | Action                                   |
|-----------|------------------------------------------|
| `W` / `S` | camera y position + / − 0.05             |
| `A` / `D` | camera x position + / − 0.05             |
| `Z` / `X` | camera z position + / − 0.05             |
| `C` / `V` | field-of-view factor + / − 10            |
| `Esc`     | quit                                     |

Closing the window also quits. The loop is capped at 200 frames per second.

## Using it as a library

The pieces can be used without opening a window:

```python
from softraster.camera import Camera
from softraster.mesh import Mesh
from softraster.framebuffer import FrameBuffer
from softraster.engine import project_mesh, render_mesh

mesh = Mesh()                   # a unit box
camera = Camera()
project_mesh(mesh, camera)      # fills mesh.projected_points

frame = FrameBuffer(800, 600)
render_mesh(frame, mesh)        # background, grid, points and edges
pixels = frame.to_bytes()       # row by row, each pixel as B, G, R, A bytes
```

Building blocks:

- `softraster.vector`: the frozen dataclasses `Vector2D`, `Vector3D` and
  `Triangle` (three zero-based vertex indices `a`, `b`, `c`).
- `softraster.transform.Transform`: `position`, `rotation` and `scale`,
  plus `rotate_x`, `rotate_y` and `rotate_z` (angles in radians).
- `softraster.camera.Camera`: `fov` (default 500) and `position`
  (default `(0, -0.25, -50)`); `project` divides by `z`, so a point with
  `z == 0` raises `ZeroDivisionError`.
- `softraster.cube.Cube`: a 9 × 9 × 9 lattice of points from −1 to 1.
- `softraster.mesh.Mesh`: vertices, triangles and projected points,
  starting out as a box.
- `softraster.objfile.load_obj`: reads the `v` and `f` lines of an OBJ file,
  making face indices zero-based and keeping the first three of each face;
  raises `OSError` if the file cannot be opened and `ValueError` on a
  malformed record.
- `softraster.framebuffer.FrameBuffer`: `clear`, `draw_grid`, `draw_rect`,
  `draw_pixel`, `draw_line` and `to_bytes`. Drawing coordinates have (0, 0)
  at the centre of the buffer; pixels outside it are dropped.
- `softraster.engine`: `handle_key`, `project_mesh`, `render_mesh`, and
  `RenderEngine` with `update`, `render` and `run()` for the window loop.

## What it does not do

Only wireframes are drawn: triangles are not filled, and there is no depth
buffer, back-face culling or clipping of points behind the camera. The
mesh rotation is fixed (180° about x, −45° about y), and `scale` is stored
but not applied. Only vertex positions and faces are read from OBJ files;
normals, texture coordinates and materials are ignored.

## Tests

```
pip install .[test]
pytest
```