"""The editor: places shapes on a scene and loads and saves drawings."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass, field
from typing import Union

from .scene import Scene
from .shapes import MoveItem, ShapeKind
from .svgread import (
    read_circles,
    read_diamonds,
    read_ovals,
    read_rects,
    read_triangles,
)
from .svgwrite import write_svg

_SCENE_SIZE = 500
_PLACE_LOW, _PLACE_HIGH = 30, 470
_VIEW_MARGIN = 20

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(eq=False)
class Editor:
    """Shape editing on one scene; ``path`` is the last file saved to."""

    rng: random.Random = field(default_factory=random.Random)
    scene: Scene = field(
        default_factory=lambda: Scene(rect=(0.0, 0.0, _SCENE_SIZE, _SCENE_SIZE))
    )
    path: str = ""

    def add_shape(self, kind: Union[ShapeKind, str]) -> MoveItem:
        """Put a new shape at a random spot; this turns the brush off."""
        self.scene.arrow_tool = False
        item = MoveItem(
            kind=ShapeKind(kind),
            pos=(
                float(self.rng.randint(_PLACE_LOW, _PLACE_HIGH)),
                float(self.rng.randint(_PLACE_LOW, _PLACE_HIGH)),
            ),
        )
        self.scene.add_item(item)
        return item

    def toggle_brush(self) -> bool:
        """Switch the brush on or off; return the new state."""
        self.scene.arrow_tool = not self.scene.arrow_tool
        return self.scene.arrow_tool

    def clear(self) -> None:
        self.scene.clear()

    def resize(self, width: float, height: float) -> None:
        """Fit the scene to a view of the given size, less a margin."""
        self.scene.rect = (0.0, 0.0, width - _VIEW_MARGIN, height - _VIEW_MARGIN)

    def load_svg(self, path: PathLike) -> list[MoveItem]:
        """Replace the scene with the shapes of a drawing; return them.

        Shapes come in this order: ovals, diamonds, triangles, circles,
        rectangles, squares. They keep their fill colour only.
        """
        self.scene.clear()
        self.scene.arrow_tool = False
        rects = read_rects(path)
        batches = [
            (ShapeKind.OVAL, read_ovals(path)),
            (ShapeKind.RHOMB, read_diamonds(path)),
            (ShapeKind.TRIANGLE, read_triangles(path)),
            (ShapeKind.CIRCLE, read_circles(path)),
            (ShapeKind.RECTANGLE, [r for r in rects if not r.is_square]),
            (ShapeKind.SQUARE, [r for r in rects if r.is_square]),
        ]
        loaded = []
        for kind, shapes in batches:
            for shape in shapes:
                item = MoveItem(kind=kind, color=shape.fill)
                self.scene.add_item(item)
                loaded.append(item)
        return loaded

    def save_svg(self, path: PathLike) -> None:
        """Write the scene to ``path`` and remember it."""
        self.path = os.fspath(path)
        write_svg(path, self.scene.items, int(self.scene.width), int(self.scene.height))