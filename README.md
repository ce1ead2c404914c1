# tynbox

A small game sandbox in plain Python with no runtime dependencies.
It holds the simulation side of a few toy games and experiments: the
stage loop they run in, the math they share, and the game logic itself.
Each piece takes its inputs as arguments and returns or updates state.
That means any front end can drive it, and tests can check it directly.

## What is inside

- `tynbox.geometry` holds the shared math:
  - `Vec2` and `Vec3` are immutable vectors. They support `+`, `-`, scalar `*` and methods such as `normalize`, `dot`, `lerp` and `angle`.
  - `lerp` interpolates linearly.
  - `dlerp` decays towards a target independently of frame rate: `b + (a - b) * exp(-decay * dt)`.
  - `get_barycentric_coordinates`, `barycentric_to_cartesian` and `clamp_barycentric` work with barycentric weights. `get_barycentric_coordinates` raises `ValueError` for a degenerate triangle. `clamp_barycentric` raises it when the weights clamp to zero.
- `tynbox.stage` holds the frame loop:
  - `StageFlag` and `CmdFlag` are flag enums.
  - `Stage` is a base class with `dispose`, `step` and `draw` hooks.
  - `ResizeThrottle` applies a window resize only after the size has stopped changing. The first resize is applied at once.
  - `run_loop(stage, should_close)` steps and draws a stage. It stops when `should_close()` is true or when a step returns flags with `StageFlag.DISABLED` set. It then disposes the stage and returns the number of frames drawn.
- `tynbox.sdf2d` packs shapes for a 2D signed distance field:
  - `Dataset` is a pixel buffer, 2048x2 by default, written with additive, saturating blending.
  - `Dataset.write_entity` writes one `ShapeType` shape into five pixels and returns the next free index.
  - `pos_to_color`, `color_to_pos` and `index_to_pos` are the encoding helpers.
- `tynbox.collisions` holds box collisions:
  - `AABB` is an axis-aligned box with integer-sized construction (`from_center_size`, `set`, `set_position`), `extend_by_size`, `center`, `extents`, `overlaps` and `union`.
  - `simple_aabb_collision` returns the centre that pushes a box out of every box it overlaps, along the axis of least penetration.
- `tynbox.spaceexp` is a top-down space shooter:
  - `Game` holds the player `Pawn`, 16 bots and a pool of 100 `Bullet`s. `Game.step` advances it one frame from a `FrameInput`, which carries the mouse, time, buttons, keyboard direction and screen size.
  - `pointer_controls`, `wasd_controls` and `step_pawn_look` steer a pawn.
  - `Game.world_tiles` lists the floor tiles around the camera.
  - `remove_duplicate_codepoints` lists a text's codepoints without repeats.
- `tynbox.maze` is a grid maze walked in quarter turns:
  - `MazeMap.from_rows` builds the map. In string rows, `#` is a wall.
  - `MazeGame.step(key)` takes one of the keys `w`, `s`, `a`, `d` or `e`, or `None`. `w` and `s` move, `a` and `d` turn, and `e` drops a tag. At most 10 tags are kept.
  - `MazeGame.command` accepts `mode fp`, `mode topdown` and `mode free` to switch the `ViewMode` camera, and `?` to get a reply text.
  - `distlerp` is a distance-damped interpolation.

## Examples

```python
from tynbox.geometry import lerp

lerp(0.0, 10.0, 0.5)  # 5.0
```

```python
from tynbox.collisions import AABB, simple_aabb_collision

player = AABB.from_center_size(16, 16, 32, 32)
walls = [AABB.from_center_size(40, 16, 32, 32)]
new_center = simple_aabb_collision(player, walls, 1)
```

```python
from tynbox.sdf2d import pos_to_color, color_to_pos

color_to_pos(pos_to_color(300, 5))  # Vec2(x=300.0, y=5.0)
```

```python
from tynbox.maze import MazeMap, MazeGame

maze = MazeMap.from_rows([
    "#####",
    "#...#",
    "#.#.#",
    "#...#",
    "#####",
])
maze.is_wall(0, 0)  # True
game = MazeGame(maze)
game.step("w")
game.command("mode topdown")
```

## What it does not do

- It does not open a window or draw anything.
- It does not read a keyboard or mouse, and it does not load images, fonts, shaders or sounds.
- It has no in-game console and no command to run.

The camera positions, sprite rotations and dataset pixels it computes are state for a front end to render. The front end must supply that front end itself.

## Tests

The test suite uses pytest. Install the `test` extra and run `pytest`.