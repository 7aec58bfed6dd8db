# katana

Building blocks for two-dimensional games that do not depend on any
particular window or graphics library: frame timing, sprite-sheet
animation, a sprite batch that orders draw calls, keyboard, mouse and game
pad input state, particle pools, colours, points and menu items.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `katana.mathutil`: the constants `PI`, `PI_OVER2`, `PI_OVER4`,
  `INVERSE_PI`, `NORMALIZE_PI_OVER4`, `INVERSE_180` and `RAND_MAX`, and the
  functions `lerp`, `clamp`, `is_in_range`, `to_radians`, `to_degrees`,
  `get_random_int` (both bounds inclusive; raises `ValueError` if
  `maximum < minimum`) and `get_random_float`.
- `katana.color`: `Color`, an RGBA dataclass with `Color.lerp`,
  multiplication by a number and `as_tuple()`. Named colours such as
  `Color.WHITE`, `Color.CORNFLOWER` or `Color.TRANSPARENT` are class
  attributes; `NAMED_COLORS` lists all their names.
- `katana.point`: `Point`, an integer 2D point with `+`, `-`, `+=`, `-=`,
  `set()`, `is_origin()` and `Point.ORIGIN`. `str(Point(3, 4))` is
  `"{ 3, 4 }"`.
- `katana.resource`: `Resource`, the abstract base class for loadable
  assets (`load`, `is_cloneable`, `clone`), and the line helpers `split`,
  `strip_comment` (removes a `//` comment) and `trim_line`.
- `katana.gametime`: `GameTime`, which tracks `total_time` and
  `elapsed_time`. Gaps longer than `MAX_ELAPSED` (0.2 s) are logged and
  leave `elapsed_time` unchanged. A custom clock can be passed in.
- `katana.animation`: `Frame` and `Animation`, which loads a sprite-sheet
  animation file and steps through its frames.
- `katana.spritebatch`: `SpriteBatch` with `TextAlign`, `SpriteSortMode`,
  `BlendState` and `Drawable`. Draw calls between `begin()` and `end()`
  are handed, in their final order, to a renderer callable.
- `katana.particlepool`: `ParticlePool`, which updates and draws active
  particles through an updater and a renderer and hands out inactive ones
  for reuse.
- `katana.inputstate`: `InputState`, which holds the current and previous
  frame's keyboard, mouse and game pad state (up to four pads).
- `katana.menuitem`: `MenuItem`, a text entry that draws itself through a
  sprite batch and runs an `on_select` callback when selected.

## Animation files

An animation file holds the sprite-sheet path on its first line, the
seconds per frame on its second, and then one `x,y,width,height` frame per
line. `//` starts a comment; blank lines are skipped. `Animation.load`
passes the sprite-sheet path to `manager.load(path)` and stores the result
as `texture`. It raises `OSError` if the file cannot be read and
`ValueError` for a frame line with fewer than four fields.

```python
from katana.animation import Animation
from katana.gametime import GameTime


class Textures:
    def load(self, path):
        return path  # return whatever texture object your renderer uses


walk = Animation()
walk.load("walk.anim", Textures())
walk.set_loop_count(0)  # play once, then stop on the first frame

clock = GameTime()
while walk.is_playing:
    clock.update()
    walk.update(clock)
```

By default an animation loops forever. `clone()` gives a copy that shares
the texture and frames but keeps its own playback position.

## Sprite batching

```python
from katana.spritebatch import SpriteBatch, SpriteSortMode

drawn = []
batch = SpriteBatch(renderer=drawn.append)
batch.begin(SpriteSortMode.BACK_TO_FRONT)
batch.draw_string(font, "Score", (10, 10), draw_depth=1.0)
batch.draw_string(font, "Shadow", (11, 11), draw_depth=0.0)
batch.end()  # drawn now holds the "Shadow" drawable first
```

`DEFERRED` keeps submission order, `BACK_TO_FRONT` sorts by ascending
depth, `FRONT_TO_BACK` by descending depth, and `IMMEDIATE` hands each
drawable to the renderer as soon as it is submitted. Drawing or calling
`batch_settings()` outside `begin()`/`end()` raises `RuntimeError`.

## Input

```python
from katana.inputstate import InputState

state = InputState()
state.set_key("enter", True)
assert state.is_new_key_press("enter")
state.update()                 # end of frame
assert not state.is_new_key_press("enter")

pad = state.connect_gamepad("pad-1")
state.handle_button_event("pad-1", 0, pressed=True)   # button 0 is "a"
assert state.is_button_down("a") == pad
```

Game pad queries return the index of the matching pad, or `None`. Buttons
are named `"a"`, `"b"`, `"x"`, `"y"`, `"right_shoulder"`,
`"left_shoulder"`, `"right_stick"`, `"left_stick"`, `"back"`, `"start"`,
`"dpad_right"`, `"dpad_left"`, `"dpad_down"` and `"dpad_up"`; any other
name raises `ValueError`.

## What this package does not do

It opens no window, plays no sound and draws nothing itself: rendering is
left to the renderer callable you give `SpriteBatch`, and device events
must be fed to `InputState` by your own code. There is no main game loop,
no screen stack with transitions and no menu screen that navigates between
`MenuItem` objects; a program built on this package supplies those itself.