# triengine

A small 3D game engine built on pyglet and numpy. It loads Wavefront OBJ
models and 24-bit BMP textures, draws textured models and screen sprites
with OpenGL shaders, moves a mouse-and-keyboard fly-through camera, checks
axis-aligned bounding boxes for overlap and plays WAV sounds.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running the demo

```
triengine-demo
```

The demo opens a 1280×720 window, loads a model, a sprite and a sound, and
shows the frame rate in the window title. By default the files are read
from the `assets/` directory relative to the working directory; other
files can be given with options:

| Option      | Default                     |
|-------------|-----------------------------|
| `--obj`     | `assets/objs/PLATFORM.obj`  |
| `--texture` | `assets/bmps/PLATFORM.bmp`  |
| `--sprite`  | `assets/sprites/HUD.bmp`    |
| `--sound`   | `assets/wavs/ding.wav`      |

Move with W, A, S, D, rise with Space, sink with Left Shift and look
around with the mouse. Close the window to quit.

## Using the engine

```python
from triengine.engine import initialize
from triengine.model import Model
from triengine.sprite import Sprite
from triengine.sound import Sound

engine = initialize()
engine.window.set_title("Game")

model = Model("assets/objs/PLATFORM.obj", "assets/bmps/PLATFORM.bmp")
sprite = Sprite("assets/sprites/HUD.bmp")
Sound("assets/wavs/ding.wav").play()

while not engine.window.should_close():
    engine.camera.update()
    engine.window.set_title(f"FPS: {engine.window.fps()}")
    engine.renderer.update()
    engine.renderer.render_model(model)
    engine.renderer.render_sprite(sprite)
    engine.window.update()

engine.window.close()
```

`initialize()` opens the window and returns an `Engine` holding `window`,
`renderer` and `camera`; the camera starts at (4, 3, 3). To build an engine
around a window you made yourself, use `Engine.from_window(window)`.

- `Model` has `pos_x`, `pos_y`, `pos_z` for its place in the world, its
  loaded `mesh` and `texture`, and `triangles`, the number of face corners.
- `Sprite` has `pos_x`, `pos_y` (its bottom-left corner in pixels) and its
  `width` and `height`. Pure white pixels in a sprite are drawn transparent.
- `Text(text, x, y)` can be drawn with `renderer.render_text(text)`, which
  uses a pyglet label at that position.
- `Camera` turns with the mouse and moves with the keyboard on each
  `update()`; set `controls_mouse` or `controls_keyboard` to `False` to turn
  either off. `sensitivity` and `speed` tune it.
- `Window` offers `is_key_pressed(Key.W)` and the like, `cursor`,
  `set_cursor(x, y)`, `delta_time()`, `fps()` and `sleep(seconds)`.
- `Sound(path).play()` starts playback and returns the pyglet player;
  `duration` gives the length in seconds.

## Pieces that need no window

Some modules work without a display and are useful on their own:

- `triengine.utils.read_bmp(path)` returns a `BitmapImage` holding the
  width, height and raw BGR pixel bytes of a BMP file; `read_file(path)`
  returns a file's contents as bytes.
- `triengine.model.parse_obj(lines)` and `load_obj(path)` turn OBJ text
  with triangular `v/vt/vn` faces into a `Mesh` of flat vertex, UV and
  normal arrays, one row per face corner. Malformed lines and out-of-range
  indices raise `ValueError`.
- `triengine.physics.AABB` is an axis-aligned box; `a.intersects(b)` is
  true when the boxes touch or overlap.
- `triengine.text.glyph_quads(text)` lays out fixed 32×32 character cells.
- `triengine.window.FpsCounter` counts the frames ticked within the last
  second.
- `triengine.renderer` provides the matrix helpers `perspective`,
  `look_at`, `translation` and `sprite_transform`.

```python
from triengine.physics import AABB

floor = AABB(0, 0, 0, 10, 1, 10)
crate = AABB(2, 1, 2, 3, 2, 3)
print(floor.intersects(crate))  # True: the faces touch
```

## What it does not do

- Models are placed by position only: the `rot_x`, `rot_y`, `rot_z`
  attributes are kept but not applied when drawing.
- Models are drawn with their texture colour alone; there is no lighting.
- Only uncompressed 24-bit BMP textures whose pixel data follows the
  54-byte header, and OBJ files with triangular `v/vt/vn` faces, are read.
- There is no scene graph, collision response or physics simulation beyond
  the bounding-box overlap test.