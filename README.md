# momosaic

Building blocks for photo mosaics. A set of tile pictures is laid out over a
target picture, and a layout is scored by a "badness": tiles interact with
each other and with a ring of fixed cells around the edge of the target through
a pair potential such as Lennard-Jones, integrated over the tile areas with
Gauss-Legendre quadrature.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

```
momosaic -t target.png tile1.jpg tile2.jpg
```

`-t` names the target picture and the positional arguments name the tile
pictures. The command prints the target and the list of sources it was given
to standard error and exits with status 0. `momosaic --help` lists the
options; `momosaic --version` (or `-v`) prints `0.0.1`.

## Library use

```python
import numpy as np

from momosaic.images import Tile, create_test_image
from momosaic.model import MosaicModel
from momosaic.lennardjones import LennardJones, LennardJonesPotential
from momosaic.interactions import TileTileInteraction, TileBorderInteraction
from momosaic.badness import CompositeBadness

target = create_test_image()            # a 22 x 33 single-colour target
tiles = [Tile(np.zeros((30, 20, 4), dtype=np.uint8)) for _ in range(3)]

model = MosaicModel()
model.construct_initial_state(target, tiles)
model.x = [-5.0, 0.0, 5.0]              # length must match len(model)

potential = LennardJonesPotential(LennardJones(epsilon=1.0, sigma=10.0))
badness = CompositeBadness()
badness.add(TileTileInteraction(potential))
badness.add(TileBorderInteraction(potential))
print(badness.compute_badness(model, target))
```

### Modules

- `momosaic.images`: `Tile` (an optional RGB/RGBA `uint8` array with `width`
  and `height`), `TargetImage` (an image and a `(width, height)` size, with
  `world_size`), `create_test_image()`, and `gaussian_blur(image, sigma)`, a
  separable Gaussian blur with clamped edges that returns an opaque image of
  the same shape.
- `momosaic.model`: `MosaicModel` holds per-tile `x`, `y`, `rotations` and
  `scales` as numpy arrays; assigning a sequence of the wrong length raises
  `ValueError`. `construct_initial_state` places every tile at the origin,
  unrotated, with a common scale of 1.2 times the target area over the total
  tile area. `widths` and `heights` give scaled tile sizes; `resize` and
  `copy` do what their names say.
- `momosaic.lennardjones`: `LennardJones.evaluate_at(r)`, the abstract
  `Potential` (`__call__(x1, x2)` and `range()`, negative meaning infinite),
  and `LennardJonesPotential`, whose range is three times sigma.
- `momosaic.quadrature`: `gauss_legendre(order)` returns nodes and weights for
  orders 1 to 4.
- `momosaic.interactions`: `transform_to_world_coordinates`,
  `compute_badness_pair`, `TileTileInteraction` and `TileBorderInteraction`.
  Pairs whose bounding circles are further apart than the potential's range
  contribute nothing.
- `momosaic.badness`: the abstract `Badness` and `CompositeBadness`, the sum
  of the measures added to it.
- `momosaic.evolution`: `MosaicEvolution` holds a model and applies its
  `MosaicUpdate`s in order on every `take_step()`. `DelayUpdate(delay_ms=100)`
  sleeps; `OptimizeUpdate(badness)` evaluates the badness, stores it in
  `last_badness` and logs it at debug level. `EvolutionRunner(evolution,
  on_model_changed=None, notification_period=10)` steps an evolution on a
  background thread (`start`, `stop`, `join`) and passes a copy of the model
  to the callback every `notification_period` steps.
- `momosaic.sourceimages`: `Thumbnail.load(path)` reads a picture with Pillow
  as RGBA (the image is `None` if it cannot be read); `SourceImages` is an
  ordered list of thumbnails with `add_images`, `data(index, role)` for the
  `Role.FILE_NAME` and `Role.IMAGE` roles, `image(image_id)`, `role_names()`
  and `connect(callback)` for notification when images are added.
- `momosaic.driver`: `MainDriver(source_images)` loads `target_path` and the
  existing source files, sets up an evolution with a delay and an optimize
  update, and runs it in the background on `start()`; `stop()` (or leaving a
  `with` block) ends it. `connect(callback)` receives every new
  `current_model`.

## What it does not do

- Nothing moves the tiles: `OptimizeUpdate` only evaluates and records the
  badness, and the driver's composite badness has no terms added to it.
- There is no rendering or display of a mosaic, and no output image is
  written.
- The `momosaic` command only reports its arguments; it does not build a
  mosaic.