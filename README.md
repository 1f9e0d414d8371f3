# softrender

A small software 3D renderer. Every stage of the pipeline runs on the CPU in plain Python, and a pygame window shows the result.

## What is in the package

- `softrender.matrix`: vectors `Vec2`, `Vec3` and `Vec4`, and the column-major 4×4 matrix `Mat4`. Matrices compose with the `@` operator. `Mat4` has constructors for the identity, translation, rotation about each axis and scaling, and it has `inverse_rigid()` for rotation-plus-translation matrices and `format()` for printing. `collinear()` tests three points in the XY plane.
- `softrender.quat`: the quaternion type `Quat`. It provides `from_axis_angle`, multiplication, `conjugate`, `normalized`, `rotate_vector`, the `forward`/`up`/`right` directions and `to_mat4`.
- `softrender.model`: the `Vertex` and `Face` records, plus `add_w()`, which lifts 3D points to homogeneous coordinates.
- `softrender.pipeline`: the transforms `world_from_model`, `camera_from_world`, `projection_matrix`, `clip_from_camera` and `ndc_from_clip`.
- `softrender.culling`: homogeneous clipping of triangles against the six frustum planes. `clip_triangle` clips a single triangle. `cull_triangles` clips a whole mesh and splits each clipped polygon into a fan of triangles. `lerp_vertex` interpolates every vertex attribute.
- `softrender.screenspace`: `screen_from_ndc` and a `FrameBuffer`. The frame buffer holds ARGB pixels and a depth buffer. It can draw depth-tested lines and triangle outlines, and draw whole models with `draw_model`.
- `softrender.fragment`: `Fragment` records generated along triangle edges by `fragment_line` and `draw_fragments`.
- `softrender.objfile`: `read_model(path)` and `parse_model(lines)` for Wavefront `.obj` data.
- `softrender.controls`: `Controls` tracks which keys are held and turns them into camera movement each frame. `clamp_movement` limits the translation of a per-tick transform.
- `softrender.drawer`: `Display`, a pygame window that also works as a context manager and shows a `FrameBuffer`. `to_surface_bytes` packs the pixels of a frame buffer.
- `softrender.app`: `render_model`, which runs the full pipeline, and the viewer's `main`.

## Installation

```
pip install .
```

## Running the viewer

```
softrender
```

With no arguments the viewer loads `cube.obj` from the current directory. You can give a different model file, and choose the window size:

```
softrender path/to/model.obj --width 1024 --height 768
```

The model turns slowly about the Y axis. The keys below move the camera:

| Key     | Action                       |
|---------|------------------------------|
| W / S   | move forward / backward      |
| A / D   | move left / right            |
| Q / E   | move up / down               |
| J / L   | turn left / right            |
| I / K   | look up / down               |
| Space   | reset the camera             |
| Escape  | quit                         |

The viewer prints the camera position and rotation to standard output on every frame.

## Using the library

```python
import math

from softrender.matrix import Mat4, Vec3
from softrender.quat import Quat

spin = Mat4.rotation_y(0.01) @ Mat4.translation(0.0, 0.0, -6.0)
camera = Quat.from_axis_angle(Vec3(0.0, 1.0, 0.0), math.pi / 4)
print(camera.forward())
print(spin.format())
```

To render a model into a frame buffer:

```python
from softrender.app import render_model
from softrender.matrix import Mat4, Vec3
from softrender.objfile import read_model
from softrender.quat import Quat
from softrender.screenspace import FrameBuffer

vertices, faces = read_model("cube.obj")
fb = FrameBuffer(800, 600)
screen_vertices, visible_faces = render_model(
    fb, vertices, faces, Mat4.identity(), Vec3(0.0, 0.0, 6.0), Quat()
)
print(hex(fb.pixel(400, 300)))
```

## Limitations

- Rendering is wireframe only. `render_model` draws the outline of each visible triangle. It does not fill triangles and does no shading or lighting. `draw_fragments` generates edge fragments, but the viewer does not use them.
- The OBJ loader reads only `v`, `vn` and `f` lines. Faces must use the `v/t/n` form and have three or four corners; a face with four corners is split into two triangles. Texture coordinates, materials and other statements are ignored.

## Tests

```
pip install .[test]
pytest
```