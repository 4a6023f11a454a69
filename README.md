# fontcraft

`fontcraft` provides the basic types for locating fonts and drawing glyph
bitmaps. It uses only the standard library.

## What is in it

- `fontcraft.handle`: where a font lives.
  - `Handle.from_path(path, font_index=0)` returns a `PathHandle`.
  - `Handle.from_memory(data, font_index=0)` returns a `MemoryHandle` that holds
    the raw bytes.
  - `Handle.from_native(font)` returns a `NativeHandle` that wraps
    `font.native_font()`.
  - The font index selects a font inside a collection. It must be an integer
    from 0 to 2³²−1.
  - `native_as(kind)` returns the wrapped object if it is an instance of `kind`,
    and `None` otherwise.
  - `load(loader)` calls `loader.from_handle(handle)`.
- `fontcraft.family_handle`: `FamilyHandle` is an ordered set of handles.
  - Build one with `FamilyHandle.from_font_handles(...)` or add handles with
    `push`.
  - `fonts()` returns the handles as a tuple. `is_empty()` tells whether the set
    is empty.
  - It also supports `len()` and iteration.
- `fontcraft.canvas`: an in-memory bitmap.
  - `Canvas(size, format)` computes the stride from the width.
    `Canvas.with_stride(size, stride, format)` takes an explicit stride.
  - Pixels are a `bytearray` that starts zeroed. `row(y)` returns one row.
  - `blit_from(dst_point, src_bytes, src_size, src_stride, src_format)` clips
    the copy to the canvas. It converts A8↔RGB24 and RGB24↔RGBA32: alpha is
    taken from the green channel, and alpha 255 is added when going to RGBA32.
    Any other pair of formats raises `ValueError`. So does a source whose length
    or stride does not match its size.
  - `blit_from_canvas(src)` copies another canvas to the top left corner.
  - `blit_from_bitmap_1bpp(...)` expands a 1-bit bitmap onto an A8 canvas, most
    significant bit first.
  - `PixelFormat` has the members `RGBA32`, `RGB24` and `A8`, with
    `bits_per_pixel()`, `components_per_pixel()`, `bits_per_component()` and
    `bytes_per_pixel()`.
  - `RasterizationOptions` has the members `BILEVEL`, `GRAYSCALE_AA` and
    `SUBPIXEL_AA`.
  - `shade(value)` maps a coverage value from 0 to 255 to one of ` ░▒▓█`.
  - `render_text(canvas)` draws an A8 canvas with two characters per pixel, and
    an RGB24 canvas with one ANSI-coloured character per channel.
- `fontcraft.hinting`: `HintingOptions.none()`, `.vertical(size)`,
  `.vertical_subpixel(size)` and `.full(size)`. `grid_fitting_size()` returns
  the size, or `None` when hinting is off.
- `fontcraft.family_name`: `FamilyName` is either a title, such as
  `FamilyName.title("Arial")`, or a `GenericFamily`: serif, sans-serif,
  monospace, cursive or fantasy. `FamilyName.parse` and `parse_family_list` read
  CSS-style family lists.
- `fontcraft.file_type`: `FileType.single()` or `FileType.collection(count)`,
  with `is_collection()`.
- `fontcraft.geometry`: the immutable types `Vector2`, `Rect` and the affine
  `Transform2`.
  - `Rect` has `intersection`, `scale`, `round_out` and `to_int`.
  - `Transform2` has `identity`, `from_translation`, `from_scale`, `row_major`,
    `apply` and `apply_rect`. Transforms compose with `s @ t`.

## Examples

```python
from fontcraft.family_name import FamilyName, GenericFamily, parse_family_list

families = parse_family_list("'Times New Roman', Arial, serif")
assert families[0] == FamilyName.title("Times New Roman")
assert families[2].generic is GenericFamily.SERIF
```

```python
from fontcraft.hinting import HintingOptions

assert HintingOptions.none().grid_fitting_size() is None
assert HintingOptions.full(16.0).grid_fitting_size() == 16.0
```

```python
from fontcraft.canvas import Canvas, PixelFormat, render_text, shade
from fontcraft.geometry import Vector2

canvas = Canvas.with_stride(Vector2(4, 2), 4, PixelFormat.A8)
canvas.blit_from(Vector2(0, 0), bytes([0, 90, 180, 255]), Vector2(4, 1), 4, PixelFormat.A8)
print(render_text(canvas))
print(shade(255))  # a full block
```

```python
from fontcraft.geometry import Transform2, Vector2

move = Transform2.from_translation(Vector2(10, 0))
grow = Transform2.from_scale(2.0)
assert (move @ grow).apply(Vector2(1, 1)) == Vector2(12.0, 2.0)
```

## What it does not do

`fontcraft` does not read font files. It does not parse TrueType or OpenType
data, and it does not find fonts installed on the system. It has no glyph
outlines, no metrics and no rasterizer of its own. `Handle.load` needs a loader
class that you supply, one that provides `from_handle`. There are no
command-line tools.

## Running the tests

```
pip install -e .[test]
pytest
```