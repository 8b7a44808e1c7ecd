# fractview

Escape-time rendering of three classic fractals — the Julia set, the
Mandelbrot set and the Burning Ship — into an in-memory pixel buffer, plus a
reader for XPM images and the X11 named-colour table.

The package is pure Python and has no runtime dependencies.

## Installing

```
pip install .
```

## Rendering a fractal

```python
from fractview.fractal import FractalSet, View
from fractview.image import Image

view = View.for_set(FractalSet.MANDELBROT)   # or "0", "1", "2"
image = Image(500, 500)                       # 32 bits per pixel, little endian
view.render(image)

# Write the result as a binary PPM file.
with open("mandelbrot.ppm", "wb") as out:
    out.write(b"P6 500 500 255\n")
    out.write(image.to_rgb_bytes())
```

Rendering is done pixel by pixel in Python, so a full 500×500 image takes a
while.

### `fractview.fractal`

- `FractalSet` — `JULIA` (`"0"`), `MANDELBROT` (`"1"`), `SHIP` (`"2"`).
- `View` — a dataclass with `kind`, `zoom` (default 125.0), `shift_x` and
  `shift_y` (default -2.0), `color` (default `0xFF0000`) and the Julia seed
  pixel `c_x`, `c_y`. Pixel `(i, j)` maps to the point
  `i / zoom + shift_x + (j / zoom + shift_y)j`.
  `View.for_set(kind)` returns the starting view; `view.render(image)` draws
  the view's set.
- `render_mandelbrot`, `render_ship`, `render_julia` — the individual
  renderers, each taking a `View` and an `Image`. At most 500×500 pixels are
  drawn. Each pixel receives its escape count multiplied by `view.color`.
- `next_point(z, c, is_ship)` — one iteration, `z*z + c`; for the Burning
  Ship both parts are made positive.
- `escape_count(z, c, is_ship)` — iterations before `|z|²` reaches 4.0;
  -1 if `z` starts outside, and 200 (`MAX_ITER`) if it never escapes.

### `fractview.image`

- `Image(width, height, bits_per_pixel=32, big_endian=False)` — a byte
  buffer (`data`) of `height` rows, each `size_line` bytes long (padded to
  32 bits). Methods: `put_pixel`, `get_pixel`, `fill`, `to_rgb_bytes`.
  Out-of-range coordinates raise `IndexError`.
- `Visual(depth=24, red_mask, green_mask, blue_mask)` — `color_value(color)`
  converts `0xRRGGBB` into the pixel value for the visual's channel masks
  (unchanged at depth 24 and above).

### `fractview.xpm`

- `read_xpm(path)`, `parse_xpm_text(text)`, `parse_xpm_lines(lines)` decode
  XPM data into an `Image`. Transparent (`none`) pixels are stored as
  `0xFF000000`. Malformed data raises `XpmError`, a `ValueError`.
- Helpers: `strip_comments`, `quoted_lines`, `parse_color`.

### `fractview.colors` and `fractview.text`

- `lookup_color(name)` — case-insensitive lookup in the X11 colour table;
  `none` gives -1 and unknown names raise `KeyError`. `color_names()` lists
  every name once.
- `split_words`, `find`, `find_unquoted` — string helpers used by the XPM
  reader.

## What it does not do

fractview has no window, no event loop and no command-line program: it does
not open an interactive viewer, and it does not pan, zoom or recolour a view
in response to keyboard or mouse input. To look at a render, write the image
out yourself, for example as a PPM file as shown above.

## Tests

```
pip install .[test]
pytest
```