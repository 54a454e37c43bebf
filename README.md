# fractview

Render the Mandelbrot set and Julia sets with the escape-time method. The
package draws fractals into 800×800 in-memory images and reacts to key,
mouse-button and pointer-motion events. These events are delivered through
a small windowing layer that is also kept in memory. The package can also
read XPM images and look up X11 colour names.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
fractview mandelbrot
fractview julia <real> <imaginary>
```

- For `julia`, both values must lie between -1 and 1.
  - A value outside that range prints `Wrong input: put number between 1 and -1` to standard error and exits with status 0.
  - A value that is not a plain decimal number, such as `abc`, selects the default constant `-0.7 + 0.27015i`.
- Any other set of arguments prints a usage message to standard error and exits with status 1.

The command renders the fractal into an in-memory window and returns once
no events are pending. Events come only from code that posts them.

## What it does not do

The package does not open a window on a real screen, and it does not read
a real keyboard or mouse. `fractview.display.Display` only simulates a
screen. Events reach windows only through `Display.post`. Drawn pixels can
be read back with `Image.get_pixel` or `Surface.get_pixel`. The package does
not write rendered images to files.

## Library use

Rendering one image:

```python
from fractview.view import Fractal
from fractview.image import Image
from fractview.render import render, pixel_color, escape_count

fractal = Fractal("mandelbrot")
image = render(fractal, Image(800, 800))
print(hex(image.get_pixel(400, 400)))   # 0x0: the origin never escapes
print(escape_count(fractal, 0, 0), hex(pixel_color(fractal, 0, 0)))
```

A `Fractal` whose name starts with `julia` is a Julia set. If its constant
is left at (0, 0), it gets the default `-0.7 + 0.27015i`:

```python
julia = Fractal("julia", 0.285, 0.01)
```

### Driving the viewer with events

```python
from fractview.app import Viewer
from fractview.display import Display, Event, EventType
from fractview.view import Fractal, Key

display = Display()
viewer = Viewer(Fractal("julia"), display)
display.post(Event(EventType.KEY_PRESS, viewer.window, keysym=Key.LEFT))
display.post(Event(EventType.BUTTON_PRESS, viewer.window, button=4, x=400, y=400))
viewer.run()    # draws, handles the queued events, then returns
```

The viewer responds to these inputs:

| Event                                  | Effect                                                  |
|----------------------------------------|---------------------------------------------------------|
| `Key.LEFT` / `RIGHT` / `UP` / `DOWN`   | Pan by 0.1 × zoom                                       |
| Button 4 / button 5                    | Zoom in / out by 1.1, pulling toward the pointer        |
| Button 1 (Julia only)                  | Set the Julia constant from the pointer position        |
| `Key.J`                                | Toggle whether pointer motion sets the Julia constant   |
| `Key.C`, `Key.PLUS`, `Key.EQUAL`       | Shift the palette forward by 64                         |
| `Key.MINUS`                            | Shift the palette back by 64                            |
| `Key.ESCAPE`, or a close request       | Close the window and the display                        |

A close request is `Event(EventType.CLIENT_MESSAGE, window, close_request=True)`.

The same rules are available without a viewer as `Fractal.key_press`,
`Fractal.mouse_press` and `Fractal.track_motion`. Each returns whether the
view changed.

### Other modules

- `fractview.color`
  - `get_color(iteration, max_iterations, color_shift)` maps an escape count to a `0xRRGGBB` colour.
  - `Palette` names a few colours.
- `fractview.complexmath`: `Range`, `map_range`, `sum_complex` and `square_complex`.
- `fractview.image`
  - `Image` is a 32-bit pixel buffer with `put_pixel`, `get_pixel` and `fill`.
  - `convert_color` fits a colour to a shallower `PixelFormat`.
- `fractview.drawing.Surface` is a window's drawable area. It supports:
  - pixels, strings, image copies and clearing;
  - a font name;
  - a pointer position and visibility.
- `fractview.display`
  - `Display` provides windows, hooks, an event queue and `loop`.
  - The module also defines `Window`, `Event`, `EventType` and `EventMask`.
- `fractview.xpm`
  - `load_xpm(path)`, `parse_xpm_text(text)` and `parse_xpm_lines(lines)` read XPM data into an `Image`. Bad data raises `XpmError`.
  - `strip_comments` blanks out C comments.
- `fractview.colornames`
  - `lookup_color(name)` looks up an X11 colour name, ignoring case. It raises `KeyError` for unknown names; `none` gives -1.
  - `text_to_rgb` also accepts `#rrggbb`.
- `fractview.textutil` holds the argument helpers used by the command line: `parse_double`, `is_numeric_arg`, `prefix_compare` and `write_error`.