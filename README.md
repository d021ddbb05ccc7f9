# apeiron

A small toolkit for geometry and everyday numerical chores:

- `apeiron.vector`: the `Vector` sequence type with element-wise arithmetic
  (with vectors of equal size or with scalars), named components `x`, `y`, `z`,
  and the functions `to_vector`, `inner_product`, `cross_product`, `l1_norm`,
  `l2_norm`, `linf_norm`, `magnitude`, `is_normalised`, `normalise`,
  `compute_angle` and `is_aligned`. Axis constants `X_AXIS2`, `Y_AXIS2`,
  `X_AXIS3`, `Y_AXIS3` and `Z_AXIS3` are provided.
- `apeiron.explicit`: `linear`, `quadratic` and `cubic` polynomials, and the
  `ellipse`, `circle`, `ellipsoid` and `sphere` parametrisations.
- `apeiron.curve`: parametric curves `Line`, `Ray`, `LineSegment`,
  `LineSegmentChain`, `Circle`, `Arc` and `Ellipse`. Each has `point(t)` and
  `length()`, and `make_unit_speed()` switches it to arc-length
  parametrisation.
- `apeiron.categories`: `PolytopeCategory` with `polytope_dimension`,
  `polytope_vertex_count`, `polytope_face_count`, `polytope_faces` and related
  checks, plus the `StaticPolytope` and `DynamicPolytope` containers.
- `apeiron.sorting`: `Sort`, which collects indexed tuples of numbers and sorts
  them lexicographically.
- `apeiron.filesystem`: file and directory helpers (`file_exists`,
  `copy_file`, `copy_directory`, `delete_directory`, ...) and shell command
  helpers (`run_command`, `run_command_from`, `command_exists`,
  `compile_tex_file`, `convert_pdf_to_png`).
- `apeiron.file`: `File`, a UTF-8 text file opened in exactly one of a read or
  a write `Mode`, usable as a context manager, with `read_line`, `write`,
  `read_values` and `write_values`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from apeiron.vector import Vector, cross_product, compute_angle, normalise

x = Vector([1.0, 0.0, 0.0])
y = Vector([0.0, 1.0, 0.0])
print(cross_product(x, y))                  # Vector([0.0, 0.0, 1.0])
print(compute_angle(x, y))                  # pi / 2
print(compute_angle(y, x, oriented=True))   # -pi / 2
print(normalise(Vector([3.0, 4.0])))        # Vector([0.6, 0.8])
```

```python
from apeiron.curve import LineSegment, Circle

segment = LineSegment([0.0, 0.0], [3.0, 4.0])
print(segment.point(0.5))       # midpoint
segment.make_unit_speed()
print(segment.point(5.0))       # the end, reached at arc length 5

circle = Circle(2.0, [1.0, 1.0])
print(circle.point(0.25))       # a quarter of the way round
```

Parameters outside a curve's range raise `ValueError`.

```python
from apeiron.categories import PolytopeCategory, polytope_faces

print(polytope_faces(PolytopeCategory.TETRAHEDRON))
```

```python
from apeiron.sorting import Sort

s = Sort(width=2)
s.add(0, (2, 1))
s.add(1, (1, 5))
s.sort_all()
print(s.index(0))               # 1
```

```python
from apeiron.file import File, Mode

with File("data.txt", Mode.WRITE) as f:
    f.write_values(1, 2.5, 3, sep=",")

with File("data.txt", Mode.READ) as f:
    print(f.read_values(int, float, int, sep=","))   # (1, 2.5, 3)
```

## What it does not do

- There is no command-line program; everything is used as a library.
- Curves give tangents and normals only where listed: `Line` and `Ray` have
  `tangent`, `Circle` and `Arc` have `tangent` and `normal`; `LineSegmentChain`
  and `Ellipse` give points and lengths only. `Ellipse` has no unit-speed
  point evaluation.
- There is no vector rotation, no matrix type and no surfaces.
- `polytope_faces` returns no faces for dodecahedra and icosahedra, and the
  polytope containers hold zeroed vertices without any shape construction.
- The shell helpers run commands through the system shell; `compile_tex_file`
  and `convert_pdf_to_png` need the external TeX compiler and `convert`
  programs to be installed.