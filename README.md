# vedit

vedit is a small vector shape editor. You place simple shapes on a canvas,
move them, scale, stretch, rotate and recolour them, and draw freehand with a
brush. Drawings are saved to SVG and can be loaded back.

The window uses `tkinter` from the standard library; nothing else needs to
be installed.

## Running the editor

```
vedit [FILE] [--seed N] [--export OUT]
```

- `FILE` – an SVG drawing to open at start.
- `--seed N` – seed the random placement of new shapes.
- `--export OUT` – load `FILE`, write it to `OUT` as SVG and exit without
  opening a window. It needs `FILE`.

The window has a fixed size of 640 × 640 with a 600 × 600 canvas. Shortly
after the window is laid out, the drawing area is set to the canvas size less
a margin of 20; until then it is 500 × 500.

### Working with shapes

Each button (Square, Circle, Rhomb, Oval, Rectangle, Triangle) places a new
shape at a random spot between 30 and 470 on both axes. New shapes are green
with a black outline. Click a shape to select it and drag it to move it. With
a shape selected:

| Key | Action |
| --- | --- |
| `+` | scale up by 10 % |
| `-` | scale down by 10 % |
| `C` | choose a new fill colour |
| `R` | rotate by a further 90 degrees |
| `X` / `Z` | stretch / shrink horizontally |
| `Y` / `T` | stretch / shrink vertically |

Letters work in either case. Each of these replaces the shape's transform as
a whole, so scaling drops an earlier stretch and stretching drops an earlier
scale or rotation.

A right click on a shape removes it.

### Brush

The Brush button toggles freehand drawing; it starts switched on. While it is
on, pressing the mouse leaves a red dot of size 10 and dragging leaves red
strokes 10 wide with round caps. Placing a shape or opening a file turns the
brush off.

### Files

The File menu has Open, Save and Clear scene.

**Save** writes an SVG document the size of the drawing area. Each shape
becomes a `<g>` group carrying its fill colour, opacity and transform, with a
`rect`, `circle`, `ellipse` or `path` inside. Brush strokes are written as
`line` elements; the red brush dots are left out.

**Open** clears the canvas and rebuilds shapes from the `<g>` groups of an SVG
file. For each group the first direct child of a kind is taken: `rect`
(square when width equals height, rectangle otherwise), `circle`, `ellipse`,
and `path` elements whose data outline the rhombus
(`M0,-30 L30,0 L0,30 L-30,0`) or the triangle (`M0,-30 L30,30 L-30,30`);
triangles are only read when the document root is `svg`. Shapes are added in
the order ovals, rhombi, triangles, circles, rectangles, squares. The fill
colour comes from the group's `fill` and `fill-opacity` attributes (opacity
defaults to 0, or 1 for triangles). A file that cannot be read or parsed
yields an empty canvas.

## What it does not do

Opening a drawing keeps only each shape's kind and fill colour. Position,
size, stretch, rotation and outline are not restored; every loaded shape sits
at the origin at its standard size. Brush strokes are not loaded back. There
is no undo.

## Using it as a library

The editor's model works without a window:

```python
from vedit.editor import Editor
from vedit.shapes import ShapeKind

editor = Editor()
editor.load_svg("drawing.svg")
item = editor.add_shape(ShapeKind.TRIANGLE)
item.scale_up()
editor.save_svg("copy.svg")
```

- `vedit.editor.Editor` – `add_shape(kind)` (a `ShapeKind` or its one-letter
  code), `toggle_brush()`, `clear()`, `resize(width, height)`,
  `load_svg(path)` and `save_svg(path)`. Pass `rng=random.Random(seed)` for
  repeatable placement.
- `vedit.shapes` – `Color` (`from_name`, `with_alpha`, `to_hex`),
  `ShapeKind`, and `MoveItem` with `scale_up`, `scale_down`, `rotate`,
  `stretch_x_plus`, `stretch_x_minus`, `stretch_y_plus`, `stretch_y_minus`,
  `transform`, `outline`, `bounding_rect` and `handle_key(key, choose_color)`.
- `vedit.scene.Scene` – holds items and brush marks: `add_item`,
  `remove_item`, `clear`, `mouse_press`, `mouse_move`, `mouse_release` and
  `create_item_group`, which binds items so they can no longer be moved or
  selected alone. Brush marks are `Dot` and `Stroke`.
- `vedit.svgread` – `read_rects`, `read_circles`, `read_ovals`,
  `read_diamonds` and `read_triangles` return lists of `SvgShape`;
  `read_view_box` returns the first `svg` element's view box, (0, 0, 200,
  200) when there is none, and raises `ValueError` when it has fewer than
  four parts. `is_diamond` and `is_triangle` test path data.
- `vedit.svgwrite` – `render_svg(items, width, height)` returns the document
  as a string and `write_svg(path, items, width, height)` writes it.

## Tests

```
pip install -e ".[test]"
pytest
```