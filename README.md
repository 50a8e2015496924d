# novella

Building blocks for visual novels on pygame. The package keeps scenes of
objects (backgrounds, characters, labels and buttons), lays them out against
a fixed virtual resolution, draws them in render-layer order onto a canvas
that is scaled to fit the window, loads images, textures and fonts by name,
queues audio commands for a mixer, and tracks keyboard and mouse state from
pygame events.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `novella.vector`: `Vector2` (immutable, with `+`, `-`, `*`, `/`,
  `length`, `length_squared`, `normalized`, `dot`, `clamped`, `mirror`,
  and the static `distance` and `lerp`) and `Rectangle` with `as_tuple()`.
- `novella.color`: `Color` (RGBA, each channel 0 to 255, opaque white by
  default; other values raise `ValueError`) and the constants `RED`,
  `GREEN`, `BLUE`, `BLACK` and `WHITE`.
- `novella.attributes`: the capabilities an object may have:
  `GameObject`, `Renderable`, `Clickable`, `Interactable`, `Layoutable`,
  and the `ComponentType` enumeration.
- `novella.layout`: `Anchor`, `SizeMode`, `Layout` and `LayoutSystem`.
  `compute(layout, parent_size)` gives a `Rectangle`; `compute_scene`
  lays out every layoutable object of a scene; `compute_label` places a
  text of known size.
- `novella.components`: `Background` (render layer -1 by default),
  `Character`, `Button` and `Label`. Buttons and labels answer
  `contains(point)`, edges included; `Label.compute_size` places the label
  from its measured text.
- `novella.graphics`: `Image`, `Texture` and `Font`, loaded from files
  (a missing file raises `FileNotFoundError`). `Font.measure` and
  `Font.render` take a size and a letter spacing.
- `novella.resources.ResourceManager`: `load_image`, `load_texture`,
  `load_font`, `get_image`, `get_texture`, `get_font`, `clear`, and
  `serialize()` / `deserialize()` of its textures and fonts. Loading a
  second asset under a taken name raises `ValueError`; an unknown name
  raises `KeyError`.
- `novella.scene`: `Scene` (`create_object`, `add_object`,
  `remove_object`, `find_object`, `get_object_as`, an optional `bgm`) and
  `SceneManager`, which holds the current scene and starts its `bgm`
  through the audio system when a scene is loaded.
- `novella.renderer.Renderer`: draws textures, text and whole scenes onto a
  canvas of the virtual resolution; `resize` fits the canvas into a window
  keeping its aspect ratio, `to_virtual_coordinates` maps window positions
  back, and `end_frame(target)` draws the scaled canvas onto a surface.
- `novella.audio`: `AudioResource`, `AudioCommand`, `SoundRegistry`,
  `AudioBackend` and `AudioSystem`. The system registers files by name with
  `create_resource`, queues `play`, `stop`, `volume`, `pitch` and `pan`,
  tracks the current background music in `current_bgm`, and hands the queue
  to the backend on `update()`. The mixer cannot change pitch while playing,
  so pitch values are only recorded.
- `novella.window`: `WindowFlags` and `Window`, a pygame display with a
  frame clock. `process_events` updates its closed, resized, minimised and
  maximised state; `flip()` shows the frame and holds the target frame rate.
- `novella.input_types`: `Key` and `MouseButton` with conversions to and
  from pygame codes, and the `KeyEvent` and `ClickEvent` records.
- `novella.input_system.InputSystem`: call `update(events)` once per frame;
  it then answers pressed, down, released and up queries for keys and mouse
  buttons, the mouse position, delta and wheel, and shows, hides, grabs and
  moves the cursor.

## Layout example

```python
from novella.layout import Anchor, Layout, LayoutSystem, SizeMode
from novella.vector import Vector2

layout = Layout(
    anchor=Anchor.CENTER,
    width_mode=SizeMode.FIXED,
    height_mode=SizeMode.FIXED,
    width=500,
    height=300,
    offset=Vector2(10, 20),
)
rect = LayoutSystem().compute(layout, Vector2(1920, 1200))
print(rect.as_tuple())  # (720.0, 470.0, 500.0, 300.0)
```

A fixed-size box anchored at the centre is placed half of the leftover space
from each edge, and then moved by its offset.

## What it does not do

The package has no ready-made main loop and no command to run: an
application reads pygame events itself, passes them to `Window` and
`InputSystem`, lays out and draws the current scene with `LayoutSystem` and
`Renderer`, calls `AudioSystem.update()`, and flips the window. There are
no named commands and no bindings from clicks or key presses to actions;
`KeyEvent` and `ClickEvent` are plain records for an application to act on.
Components do not yet serialise themselves: their `serialize()` returns an
empty dict.