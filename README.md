# pyrosim

Building blocks for a real-time particle simulation. The package has:

- small vector and colour types;
- a container whose identifiers stay stable;
- easing curves and values that ease towards a target;
- rolling statistics over a window of values;
- a DAG with depth ordering;
- seedable random generators;
- a grid;
- a thread pool;
- signal dispatch and key routing;
- asset stores;
- entity containers;
- render layers with camera transforms, and vertex geometry for lines and a background grid.

## Installation

```
pip install .
```

Loading textures and fonts in `pyrosim.resources` uses pygame.

## Modules

- `pyrosim.vec` has three value types: `Vec2`, `Vec4` and `Color`. It also has three conversions: `to_vec4`, `to_color` and `set_alpha`. `to_color` clamps each component to 0..255.
- `pyrosim.mathutils` has planar vector helpers: `dot`, `cross`, `length`, `length2`, `normalize`, `normal`, `rotate` and `angle`. It has `rad_to_deg` and `deg_to_rad`. `to_string` formats floats with a fixed number of decimals. `zip_apply` calls a callback on pairs from two sequences of equal length.
- `pyrosim.index_vector.IndexVector` stores objects densely. Its identifiers keep pointing to the same object while other objects are erased. A `Handle` tells whether its object has been erased.
- `pyrosim.interpolation` has the easing curves. Pick one with `InterpolationFunction` and evaluate it with `interpolation_value`.
- `pyrosim.interpolated` has values that ease towards a target as a clock advances: `InterpolatedData`, `InterpolatedColor` and `InterpolatedValue`. The clock is `time.monotonic` unless you pass another one.
- `pyrosim.racc` has `RollingSum`, `RollingMean` and `RollingDiff`, which work over a window of fixed size.
- `pyrosim.dag.Dag` rejects edges that would form a cycle. It computes node depths and orders the nodes by depth.
- `pyrosim.rng` has `RealNumberGenerator` and `IntegerNumberGenerator`. Both are seeded with 0 by default.
- `pyrosim.grid.Grid` is a fixed-size grid stored row by row.
- `pyrosim.concurrency` has `ThreadPool`, which splits a range of indices into one batch per thread. It also has `AsyncTask`, which runs work on a background thread, at most one run at a time.
- `pyrosim.signals` has `Dispatcher` and `dispatcher_for`, which dispatch signals. `create_singleton` and `get_singleton` keep shared instances. `EventHandler` routes key presses to callbacks.
- `pyrosim.resources` has `Store` and `ResourcesStore`, which keep assets by name.
- `pyrosim.entities` has `Entity` and `EntityPack`, which keeps one `IndexVector` per entity type.
- `pyrosim.render` has `VertexArray`, `Transform`, `RenderStates`, `Layer` and `RenderContext`. They route draw calls to any target that has `draw`, `clear` and `display` methods.
- `pyrosim.shapes` has `generate_line`, which writes a line quad into a vertex array, and `BackgroundGrid`.

## Examples

```python
from pyrosim.index_vector import IndexVector

items = IndexVector()
first = items.append("first")
second = items.append("second")
handle = items.create_handle(first)
items.erase(first)
assert not handle.is_valid()
assert items[second] == "second"
```

```python
from pyrosim.interpolation import InterpolationFunction, interpolation_value

interpolation_value(0.25, InterpolationFunction.LINEAR)   # 0.25
```

```python
from pyrosim.racc import RollingMean

mean = RollingMean(4)
for value in (1.0, 2.0, 3.0, 4.0, 5.0):
    mean.add_value(value)
mean.get()   # 3.5, the mean of the last four values
```

```python
from pyrosim.dag import Dag

dag = Dag()
a, b, c = dag.create_node(), dag.create_node(), dag.create_node()
dag.create_connection(a, b)
dag.create_connection(b, c)
assert not dag.create_connection(c, a)   # would form a cycle
dag.compute_depth()
dag.order()   # [a, b, c]
```

```python
from pyrosim.concurrency import ThreadPool

results = [0] * 100

def fill(start, end):
    for i in range(start, end):
        results[i] = i * i

with ThreadPool(4) as pool:
    pool.dispatch(len(results), fill)
```

## What the package does not do

The package has no particle solver, no window and no command that starts a
simulation. It supplies the data structures, maths, concurrency and rendering
pieces such a program is built from. Drawing goes to whatever target object
you give `RenderContext`.