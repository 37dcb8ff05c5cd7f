# roughcut

Geometry and bookkeeping for core-roughing toolpaths on a 3-axis milling
machine. The package uses only the standard library.

## What is in it

- **`roughcut.paths`** — `P2` and `P3` points with arithmetic, `length()`
  and a dot product written `a @ b`; `P2.aperp()`, `P2.cperp()` and
  `P2.arg()` (angle in `[0, 2π)`). `Interval` with `inflate`, `half`,
  `leng`, `union` and `push_into`. `MachineParams`, a dataclass of linking,
  cutting, weave, steering and output settings. `PathXSeries`, one
  constant-Z level: points `pths`, break indices `brks` ending each run, and
  one 3D link in `linkpths` per break; `add`, `break_path`, `append` and
  `segments` build and read it. `Toolpath` groups levels with a corner and
  flat radius and the boundary used; `is_boundary()` is true when both radii
  are zero, `bounds()` gives the x, y and z extents of its completed runs,
  `rect_boundary(z)` a rectangle around them, and `draw_whole()` sets its
  replay position to the end. Also `along`, `convert_gz` and
  `make_rect_boundary`.
- **`roughcut.linking`** — `build_retract` (up to `retractzheight`, across,
  down), `build_curl` (a lead-off arc of length `leadofflen`, in or out),
  `build_link` (arc, common tangent, arc between two passes) and
  `build_link_z` (lifts a planar link by `leadoffdz` with a ramp at each
  end). Bad input raises `ValueError`.
- **`roughcut.postprocess`** — `advance` walks one level by a given length
  (negative means all of it), updating an `AnimatedPos` and optionally
  writing the moves passed; `total_length` and `position_at` work over a
  list of levels. `post_process` writes every level as lines of the form
  `LX…Y…Z…F…`, `LX…Y…Z…` and `LX…Y…`: the first line of a level carries
  its Z and the cutting feed `fcut`, each non-empty link begins with a line
  carrying the retract feed `fretract`, and `ThinFilter` drops cutting
  points within `thintol` of a straight run.
- **`roughcut.preview`** — `visible_polylines` lists the `"cut"` and
  `"link"` polylines shown between two replay positions, cutting the
  current level short when animating; `start_level` gives the first level
  shown for a `ReplayStyle` (`FROM_START` or `ONE_LEVEL`); `bad_gen_bound`
  returns a rough closed sample boundary.
- **`roughcut.settings`** — `CoreRoughSettings` (corner radius, flat
  radius, step down, step in), `BoundingBox` (rejects reversed ranges),
  `read_double` and `parse_bounding_box` for checking typed numbers.
- **`roughcut.session`** — `Workspace` holds surfaces and toolpaths in
  order, with `add`, `combined_extent`, `actor_labels` ("Surface 0",
  "Boundary 0", "Toolpath 0", …), `animatable` and `selected_boundary`.
  Any non-`Toolpath` item is treated as a surface and needs `bounds()` and
  `visible`. `machine_params` turns `CoreRoughSettings` into a full
  `MachineParams`.

## Example

```python
import io

from roughcut.paths import Interval, make_rect_boundary
from roughcut.postprocess import post_process, total_length
from roughcut.session import machine_params
from roughcut.settings import CoreRoughSettings

boundary = make_rect_boundary(Interval(0.0, 50.0), Interval(0.0, 30.0), 11.0)
params = machine_params(CoreRoughSettings(3.0, 0.0, 15.0, 1.5), 10.0)

print(total_length([boundary]))   # 160.0

out = io.StringIO()
post_process(out, [boundary], params)
print(out.getvalue())
```

## What it does not do

The package does not generate roughing passes from a part surface: there is
no surface model, no STL reading and no material-removal search, so levels
of `PathXSeries` must come from elsewhere. It draws nothing on screen and
has no command line; `roughcut.preview` only computes what would be shown.

## Running the tests

Install the package with its `test` extra and run `pytest` in the project
directory.