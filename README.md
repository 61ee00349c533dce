# quadsim

quadsim provides simulation cores for small 2D games in plain Python. It has
no dependencies and does no rendering. You can drive it from any game loop, or
run it headless in tests.

## Modules

- `quadsim.geometry` holds an immutable `Vec2` with arithmetic, `length()` and
  `normalize()`. `normalize()` raises `ValueError` on a zero vector. It also holds
  `Rect`, with `overlaps(other)` (touching edges count) and `contains(point)`
  (the right and bottom edges are excluded).
- `quadsim.platformer` holds a `World` made of static tile layers,
  `Actor` bodies and moving `Solid` platforms.
  - `add_static_tiled_layer` takes a list of `Tile` values laid out row by row.
  - `move_h` and `move_v` move an actor one pixel at a time. They keep the
    sub-pixel remainder and return `False` when the actor is blocked.
  - `Tile.JUMP_THROUGH` tiles let actors pass through them from below.
    `descent(actor)` lets an actor drop through them.
  - `solid_move` carries the actors riding on a solid and pushes the actors in
    its way. An actor that cannot be pushed is marked as squished, which you can
    read back with `squished(actor)`.
  - `collide_check`, `collide_solids`, `collide_tag`, `solid_at` and `tag_at`
    are the collision queries.
- `quadsim.curve` holds `Curve`, which is a set of key points with linear
  interpolation. `batch()` samples it into a `BatchedCurve`, and you read values
  from that with `get(t)`. `Interpolation.BEZIER` is declared, but `batch()`
  raises `ValueError` for it.
- `quadsim.colors` holds `Color` with `lerp`, a three-stop `ColorCurve` (read it
  with `at(t)`), the `WHITE` constant and the `BlendMode` enum.
- `quadsim.shapes` holds three groups of types:
  - emission regions: `PointEmission`, `RectEmission` and `SphereEmission`. Each
    has `random_point(rng)`.
  - particle meshes: `RectangleShape`, `CircleShape` and `CustomMeshShape`.
    `geometry()` returns a vertex list (position, uv and RGBA for each vertex)
    and a list of triangle indices.
  - `AtlasConfig`, for sprite-sheet animation. Build it with
    `AtlasConfig.from_range(n, m, start, stop)` and get the texture rectangle of
    a frame with `frame_uv(frame)`.
- `quadsim.emitter` holds the particle classes:
  - `EmitterConfig` sets lifetime, amount, explosiveness, direction and spread,
    velocity, rotation, damping, size and size curve, colour curve, gravity,
    atlas and one-shot mode.
  - `Emitter` spawns particles, ages them and retires them. Its methods are
    `update(dt)`, `advance(pos, dt)`, `emit(pos, n)` and `reset()`. The live
    particles are in `emitter.particles` as `Particle` records.
  - `EmittersCache` is a pool of emitters. You start one with `spawn(pos)`.
    `update(dt)` advances all of them, and emitters that have stopped go back to
    the pool.
- `quadsim.life` holds Conway's Game of Life on a bounded, non-wrapping
  `LifeGrid`. It offers `LifeGrid.random(width, height, rng)`, `neighbors(x, y)`,
  `step()`, `alive_cells()` and `grid[x, y]` indexing. `next_state(cell, neighbors)`
  applies the rules to a single cell.
- `quadsim.snake` holds `SnakeGame`, which plays on a square board that is 16
  squares wide by default.
  - `steer(direction)` allows one turn per tick and never straight back.
  - `tick()` moves the snake one square, eats fruit for 100 points each and ends
    the game when the snake hits a wall or its own body.
  - `restart()` starts a new game.
- `quadsim.angles` holds `short_angle_dist`, `angle_lerp` and `wrap_degrees` for
  smooth rotation in degrees.

## Installing

```
pip install .
```

## Example: platformer physics

```python
from quadsim.geometry import Vec2
from quadsim.platformer import Tile, World

world = World()
tiles = [Tile.EMPTY] * 40 * 18 + [Tile.SOLID] * 40
world.add_static_tiled_layer(tiles, 8.0, 8.0, 40, 1)

player = world.add_actor(Vec2(50.0, 80.0), 8, 8)
platform = world.add_solid(Vec2(170.0, 130.0), 32, 8)

on_ground = world.collide_check(player, world.actor_pos(player) + Vec2(0.0, 1.0))
world.move_h(player, 1.6)
world.move_v(player, 3.2)
world.solid_move(platform, 0.8, 0.0)
print(world.actor_pos(player), world.solid_pos(platform))
```

## Example: particles

```python
from quadsim.emitter import Emitter, EmitterConfig
from quadsim.geometry import Vec2

emitter = Emitter(EmitterConfig(amount=30, lifetime=0.5))
for _ in range(60):
    emitter.advance(Vec2(100.0, 100.0), 1 / 60)
print(len(emitter.particles))
```

## Example: Game of Life

```python
import random
from quadsim.life import LifeGrid

grid = LifeGrid.random(64, 48, random.Random(1))
grid.step()
print(sum(1 for _ in grid.alive_cells()))
```

## What it does not do

quadsim covers the state and rules of a game only. It does not open windows,
read keyboard or mouse input, draw anything or play sound.

- Particle meshes come back as plain vertex and index lists. `BlendMode` is a
  setting that you pass on to your own renderer.
- `SnakeGame.speed` is the number of seconds between ticks. Your loop decides
  when to call `tick()`.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```