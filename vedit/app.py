"""The main window of the editor and the command that starts it."""

from __future__ import annotations

import argparse
import logging
import math
import random
from typing import Optional, Sequence

from .editor import Editor
from .scene import Dot, Stroke, _ItemGroup
from .shapes import BLACK, Color, MoveItem, Primitive, ShapeKind

log = logging.getLogger(__name__)

_WINDOW_SIZE = 640
_VIEW_SIZE = 600
_RESIZE_DELAY_MS = 100
_ELLIPSE_SEGMENTS = 48

_BUTTONS = (
    ("Square", ShapeKind.SQUARE),
    ("Circle", ShapeKind.CIRCLE),
    ("Rhomb", ShapeKind.RHOMB),
    ("Oval", ShapeKind.OVAL),
    ("Rectangle", ShapeKind.RECTANGLE),
    ("Triangle", ShapeKind.TRIANGLE),
)


def _outline_points(item: MoveItem) -> list[tuple[float, float]]:
    """Corners of the item's shape in scene coordinates."""
    outline = item.outline()
    if outline.primitive is Primitive.RECT:
        x, y, w, h = outline.rect
        local = [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]
    elif outline.primitive is Primitive.ELLIPSE:
        x, y, w, h = outline.rect
        cx, cy, rx, ry = x + w / 2, y + h / 2, w / 2, h / 2
        local = [
            (
                cx + rx * math.cos(2 * math.pi * k / _ELLIPSE_SEGMENTS),
                cy + ry * math.sin(2 * math.pi * k / _ELLIPSE_SEGMENTS),
            )
            for k in range(_ELLIPSE_SEGMENTS)
        ]
    else:
        local = list(outline.points)
    m11, m12, m21, m22, dx, dy = item.transform()
    px, py = item.pos
    return [
        (m11 * x + m21 * y + dx + px, m12 * x + m22 * y + dy + py) for x, y in local
    ]


class PaintWindow:
    """A fixed-size window with shape buttons, a canvas and a file menu."""

    def __init__(self, path: Optional[str] = None, seed: Optional[int] = None) -> None:
        self.editor = Editor(rng=random.Random(seed))
        self.width = _WINDOW_SIZE
        self.height = _WINDOW_SIZE
        self.view_size = _VIEW_SIZE
        if path is not None:
            self.editor.load_svg(path)
        self._selected: Optional[MoveItem] = None
        self._drag_from: Optional[tuple[float, float]] = None
        self._canvas_items: dict[int, object] = {}
        self._canvas = None
        self._root = None
        self._timer = None

    def run(self) -> None:
        """Open the window and run until it is closed."""
        import tkinter as tk

        root = tk.Tk()
        root.title("vedit")
        root.geometry(f"{self.width}x{self.height}")
        root.resizable(False, False)
        self._root = root

        menu = tk.Menu(root)
        file_menu = tk.Menu(menu, tearoff=False)
        file_menu.add_command(label="Open...", command=self._open)
        file_menu.add_command(label="Save...", command=self._save)
        file_menu.add_separator()
        file_menu.add_command(label="Clear scene", command=self._clear)
        menu.add_cascade(label="File", menu=file_menu)
        root.config(menu=menu)

        bar = tk.Frame(root)
        bar.pack(side=tk.TOP, fill=tk.X)
        for label, kind in _BUTTONS:
            tk.Button(bar, text=label, command=lambda k=kind: self._add(k)).pack(
                side=tk.LEFT
            )
        tk.Button(bar, text="Brush", command=self._toggle_brush).pack(side=tk.LEFT)

        canvas = tk.Canvas(
            root, width=self.view_size, height=self.view_size, background="white"
        )
        canvas.pack(side=tk.TOP)
        self._canvas = canvas

        canvas.bind("<ButtonPress-1>", self._on_press)
        canvas.bind("<B1-Motion>", self._on_motion)
        canvas.bind("<ButtonRelease-1>", self._on_release)
        canvas.bind("<ButtonPress-3>", self._on_right_press)
        root.bind("<Key>", self._on_key)
        root.bind("<Configure>", self._on_configure)

        self._schedule_resize()
        self._redraw()
        canvas.focus_set()
        root.mainloop()

    # -- window plumbing -------------------------------------------------

    def _schedule_resize(self) -> None:
        if self._root is None:
            return
        if self._timer is not None:
            self._root.after_cancel(self._timer)
        self._timer = self._root.after(_RESIZE_DELAY_MS, self._fit_scene)

    def _fit_scene(self) -> None:
        self._timer = None
        self.editor.resize(self._canvas.winfo_width(), self._canvas.winfo_height())
        self._redraw()

    def _on_configure(self, _event) -> None:
        self._schedule_resize()

    def _redraw(self) -> None:
        canvas = self._canvas
        if canvas is None:
            return
        canvas.delete("all")
        self._canvas_items.clear()
        for item in self.editor.scene.items:
            self._draw(item, item)

    def _draw(self, item, owner) -> None:
        canvas = self._canvas
        if isinstance(item, _ItemGroup):
            for member in item.items:
                self._draw(member, owner)
            return
        if isinstance(item, MoveItem):
            points = [c for point in _outline_points(item) for c in point]
            width = 2 if item is self._selected else 1
            ident = canvas.create_polygon(
                *points, fill=item.color.to_hex(), outline=BLACK.to_hex(), width=width
            )
        elif isinstance(item, Stroke):
            (x1, y1), (x2, y2) = item.start, item.end
            ident = canvas.create_line(
                x1,
                y1,
                x2,
                y2,
                fill=item.color.to_hex(),
                width=item.width,
                capstyle="round" if item.round_cap else "butt",
            )
        elif isinstance(item, Dot):
            ident = canvas.create_oval(
                item.x,
                item.y,
                item.x + item.width,
                item.y + item.height,
                fill=item.color.to_hex(),
                outline="",
            )
        else:
            return
        self._canvas_items[ident] = owner

    def _item_at(self, x: float, y: float):
        for ident in reversed(self._canvas.find_overlapping(x, y, x, y)):
            owner = self._canvas_items.get(ident)
            if owner is not None:
                return owner
        return None

    # -- commands --------------------------------------------------------

    def _add(self, kind: ShapeKind) -> None:
        self.editor.add_shape(kind)
        self._redraw()

    def _toggle_brush(self) -> None:
        self.editor.toggle_brush()

    def _clear(self) -> None:
        self.editor.clear()
        self._selected = None
        self._redraw()

    def _open(self) -> None:
        from tkinter import filedialog

        name = filedialog.askopenfilename(
            parent=self._root,
            title="Open SVG File",
            filetypes=[("SVG Files", "*.svg")],
        )
        if not name:
            log.warning("No file selected")
            return
        self.editor.load_svg(name)
        self._selected = None
        self._redraw()

    def _save(self) -> None:
        from tkinter import filedialog

        name = filedialog.asksaveasfilename(
            parent=self._root,
            title="Save SVG",
            initialfile=self.editor.path + ".svg",
            filetypes=[("SVG files", "*.svg")],
        )
        if not name:
            return
        self.editor.save_svg(name)

    def _choose_color(self) -> Optional[Color]:
        from tkinter import colorchooser

        rgb, _ = colorchooser.askcolor(parent=self._root)
        if rgb is None:
            return None
        r, g, b = (int(channel) for channel in rgb)
        return Color(r, g, b)

    # -- input -----------------------------------------------------------

    def _on_press(self, event) -> None:
        scene = self.editor.scene
        hit = self._item_at(event.x, event.y)
        if isinstance(hit, MoveItem) and hit.selectable:
            self._selected = hit
            self._drag_from = (event.x, event.y)
        else:
            self._selected = None
            self._drag_from = None
        scene.mouse_press(event.x, event.y)
        self._redraw()

    def _on_motion(self, event) -> None:
        scene = self.editor.scene
        item = self._selected
        if item is not None and item.movable and self._drag_from is not None:
            fx, fy = self._drag_from
            px, py = item.pos
            item.pos = (px + event.x - fx, py + event.y - fy)
            self._drag_from = (event.x, event.y)
        scene.mouse_move(event.x, event.y)
        self._redraw()

    def _on_release(self, event) -> None:
        self._drag_from = None
        self.editor.scene.mouse_release(event.x, event.y)
        self._redraw()

    def _on_right_press(self, event) -> None:
        scene = self.editor.scene
        hit = self._item_at(event.x, event.y)
        if isinstance(hit, MoveItem):
            scene.remove_item(hit)
            if hit is self._selected:
                self._selected = None
        scene.mouse_press(event.x, event.y)
        self._redraw()

    def _on_key(self, event) -> None:
        if self._selected is None:
            return
        key = event.char or event.keysym
        if self._selected.handle_key(key, self._choose_color):
            self._redraw()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(
        prog="vedit", description="Draw and arrange simple shapes, saved as SVG."
    )
    parser.add_argument("file", nargs="?", help="SVG drawing to open at start")
    parser.add_argument(
        "--export",
        metavar="OUT",
        help="write the opened drawing to OUT as SVG and exit without a window",
    )
    parser.add_argument(
        "--seed", type=int, help="seed for placing new shapes at random"
    )
    args = parser.parse_args(argv)
    if args.export is not None and args.file is None:
        parser.error("--export needs a file to open")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the editor, or export a drawing when asked to."""
    args = parse_args(argv)
    window = PaintWindow(path=args.file, seed=args.seed)
    if args.export is not None:
        window.editor.save_svg(args.export)
        return 0
    window.run()
    return 0