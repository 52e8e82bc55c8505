# sketchgeo

A small geometry toolkit for sketching and inspecting 3D shapes. It works on
plain Python data and NumPy arrays and returns points, segments, quads,
matrices and files, so its output can go to any renderer or plotter.

## Modules

- `sketchgeo.vector`: the immutable `Vec3` with arithmetic operators and
  `length`, `normalized`, `dot` and `cross`.
- `sketchgeo.bezier`: `de_casteljau`, `sample_curve`, surfaces of revolution
  about the Y axis (`revolve_curve`, `revolved_surface`), `screen_to_ndc`, and
  `BezierEditor`, which picks, adds, drags and clears control points from
  pixel positions.
- `sketchgeo.voronoi`: `Point`, `Edge` and `compute_voronoi_cells`, which clips
  the sites' bounding box, grown by a padding, against perpendicular bisectors.
  The helpers `cross`, `dot`, `line_intersect`, `perpendicular_bisector`,
  `is_left` and `clip_polygon` are public too.
- `sketchgeo.shapes`: wireframe primitives `Cube`, `Cylinder` and `Sphere`
  (all with `edges()`), plus `Circle`. `Cylinder`, `Sphere` and `Circle` can
  write their points to a whitespace-separated `.dat` file with `save_to_file`.
- `sketchgeo.line`: a 2D or 3D `Line` that produces a gnuplot script
  (`gnuplot_script`, `write_gnuplot_script`) and runs `gnuplot` on it (`plot`).
- `sketchgeo.meshes`: `uv_sphere` and `lat_long_sphere` meshes (`SphereMesh`),
  4×4 matrices (`translation`, `scaling`, `rotation`, `perspective`,
  `look_at`), the animated wireframe robot (`robot_part_models`, `robot_mvps`,
  `advance_angle`) and `OrbitControl`.
- `sketchgeo.extrusion`: `PolygonExtruder`, which builds a polygon from
  double-clicks, closes it when a click lands near the first point, and
  extrudes it along `polygon_normal`; `MouseButton` names the buttons.
- `sketchgeo.meshio`: `read_obj`, `convert_obj_to_stl` (fan triangulation,
  duplicate faces removed), `extract_triangles` from ASCII STL,
  `write_dat_file`, `load_model` and `wireframe_edges`.
- `sketchgeo.transform`: `read_data_file`, `write_transformed_data`,
  `scaling`, `translation`, `rotation` of homogeneous point rows, and
  `transform_file`, which appends transformed entities to a data file.
  Rotation converts degrees with π taken as 3.14.
- `sketchgeo.scene`: `Scene`, holding the current primitive or a loaded OBJ
  model together with camera rotation and zoom, and `axis_lines`;
  `draw_robot` plots a data file with `gnuplot`.

## Installation

```
pip install sketchgeo
```

NumPy is the only runtime dependency. `Line.plot` and `draw_robot` need
`gnuplot` on the `PATH`.

## Examples

```python
from sketchgeo.vector import Vec3
from sketchgeo.bezier import de_casteljau, revolved_surface

points = [Vec3(-0.5, -0.5, 0.0), Vec3(0.0, 0.5, 0.0), Vec3(0.5, -0.5, 0.0)]
midpoint = de_casteljau(0.5, points)
quads = revolved_surface(points)          # 100 curve steps × 36 angle steps
```

```python
from sketchgeo.voronoi import Point, compute_voronoi_cells

cells = compute_voronoi_cells([Point(0, 0), Point(10, 0), Point(5, 10)], 5.0)
```

```python
from sketchgeo.meshes import robot_mvps

mvps = robot_mvps(angle=0.5, aspect=800 / 600)
body = mvps["body"]
```

## Command line

```
sketchgeo voronoi [x,y ...] [--pad PAD]
sketchgeo obj2stl MODEL.obj MODEL.stl
sketchgeo stl2dat MODEL.stl MODEL.dat
sketchgeo transform FILE {translate,scale,rotate} VALUES...
```

- `voronoi` prints each cell's vertices as `x y` lines, cells separated by a
  blank line. Without sites it uses `0,0 10,0 5,10`; the padding defaults to 5.
- `obj2stl` and `stl2dat` report how many facets or triangles they wrote.
- `transform` takes three numbers for `translate` and `scale`, and an angle in
  degrees followed by `x`, `y` or `z` for `rotate`. It appends the results to
  the file; an entity is only transformed when a blank line follows it.

Errors reading or writing files and bad values print a message and exit with
status 1. Run `sketchgeo --help` for the full usage.

## What it does not do

The package does not open windows or render anything; the editors and the
scene are state models whose output a renderer has to draw. It does not read
STL into a `Scene` or save scenes to files, and it does not load textures or
shader programs.

## Running the tests

```
pip install "sketchgeo[test]"
pytest
```