# gridvis

`gridvis` animates a two-dimensional grid of RGB colours. Your code fills an
image buffer once per frame, and a pygame window shows the buffer scaled to
fill the window. The code that fills the buffer can be a method, a callback
function, an `Animator` object or a set of worker threads.

## Installation

```
pip install gridvis
```

Install the test tools with `pip install gridvis[test]`.

## Quick start

Make a subclass of `DataVisCPU` and write its `update` method. The method sets
the colours in `self.image_data()`, which is an `ImageBuffer`:

```python
from gridvis.datavis import DataVisCPU
from gridvis.image import Color3
from gridvis.viewer import Viewer


class Stripes(DataVisCPU):
    def __init__(self, width, height, depth=1):
        super().__init__(width, height, depth)
        self.ticks = 0

    def update(self):
        image = self.image_data()
        image.fill(Color3(0, 0, 0))
        image.pixels[self.ticks % image.height, :] = (255, 255, 255)
        self.ticks += 1


viewer = Viewer(600, 500, "Stripes")
viewer.set_animation(Stripes(50, 50))
viewer.run(-1)   # -1 runs until the window is closed
```

Row 0 of the buffer is shown at the bottom of the window. A non-negative
`max_steps` passed to `run` stops the animation after that many frames.

## The image buffer

`gridvis.image.ImageBuffer` holds `width * height` pixels in row-major order.
Index it with a flat offset (`row * width + col`) or a `(row, col)` tuple to
read or write a single `Color3`; an index outside the grid raises
`IndexError`. `fill(color)` sets every pixel, `to_bytes()` returns packed RGB
bytes, and the `pixels` attribute is the underlying numpy array of shape
`(height, width, 3)`, which you may write to directly. `Color3` rejects
components outside 0–255 with `ValueError`.

## Ways to drive the animation

All of these live in `gridvis.datavis`:

- `DataVisCPU`: subclass it and write `update`.
- `DataVisFunction(rows, cols, app_data, update_func)`: calls
  `update_func(buffer, app_data)` once for every frame.
- `DataVisAnimator(width, height, depth, animator)`: calls the `update(img)`
  method of an `Animator`. The buffer is allocated on the first update.
- `from_image_file(path)`: a class method that sizes a visualization from a
  picture file and copies its colours into the buffer. Call it on a class
  whose constructor takes `(width, height)`.

The quickest route for a callback is `init_and_run_animation` in
`gridvis.viewer`:

```python
from gridvis.viewer import init_and_run_animation

def step(buffer, state):
    ...

init_and_run_animation(100, 100, {"step": 0}, step, "My grid", 0)
```

An `iters` value of 0 or less runs until the user quits.

## Worker threads

`gridvis.threads` keeps worker threads and the display in step with a
`threading.Barrier` that has one party per worker plus one for the animation
loop:

```python
from gridvis.threads import (
    init_thread_animation, get_animation_buffer, draw_ready, run_animation,
)

handle = init_thread_animation(4, 200, 200, "Threads")
buffer = get_animation_buffer(handle)
# start 4 workers. Each one fills its rows of `buffer`, then calls draw_ready(handle)
run_animation(handle, 0)
```

A frame is shown only after every worker has reached the barrier. Calling
`close()` on the `DataVisThreads` visualization aborts the barrier, so waiting
threads get `threading.BrokenBarrierError`.

## Viewer keys

| Key      | Action                                                  |
|----------|---------------------------------------------------------|
| Space    | pause or resume                                         |
| T        | switch between the animation and a checkerboard texture |
| Ctrl+S   | save the current frame to `snappy.png`                  |
| Escape   | quit                                                    |

## Extras

- `gridvis.timer.CPUTimer` times code in milliseconds. `report()` prints and
  returns the time between `start()` and `stop()`; `elapsed()` gives the time
  since `start()`. It also works as a context manager.
- `gridvis.matrixstack.MatrixStack` is a stack of 4×4 numpy transforms with
  `push`, `pop`, `translate`, `scale`, `rotate`, `rotate_x`, `rotate_y` and
  `rotate_z`.
- `gridvis.geometry` builds vertex, normal and texture-coordinate arrays for a
  `Sphere`, a `Cylinder` and a `Square`, and gives the `(DrawMode, first,
  count)` runs that cover their vertices.

## Demo

```
gridvis-demo
```

The demo shows a scrolling gradient. Choose the version with an argument:
`cpu` (the default, a 50×50 grid painted in one thread), `openmp` (the same
grid painted by a thread pool) or `threads` (a 200×200 grid painted by two
worker threads meeting at a barrier). `--steps N` stops after N frames.

## What it does not do

The viewer shows the grid only as a flat image in a 2D window. It does not
render 3D scenes: the shapes in `gridvis.geometry` supply vertex data but are
not drawn by the viewer. There is no GPU computation; every visualization
fills its buffer on the CPU.