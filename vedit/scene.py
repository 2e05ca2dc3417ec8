"""The drawing scene: holds shapes and lays down brush marks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union

from .shapes import RED, Color, MoveItem, Point, Rect

_DOT_SIZE = 10.0
_STROKE_WIDTH = 10.0


@dataclass(frozen=True)
class Dot:
    """A filled brush dot with no outline, placed where the mouse went down."""

    x: float
    y: float
    width: float = _DOT_SIZE
    height: float = _DOT_SIZE
    color: Color = RED

    @property
    def center(self) -> Point:
        return (self.x + self.width / 2, self.y + self.height / 2)


@dataclass(frozen=True)
class Stroke:
    """A straight brush segment with a round cap."""

    start: Point
    end: Point
    color: Color = RED
    width: float = _STROKE_WIDTH
    round_cap: bool = True


@dataclass(eq=False)
class _ItemGroup:
    """Items bound together; they can no longer be moved or selected alone."""

    items: list


SceneItem = Union[MoveItem, Dot, Stroke, _ItemGroup]


@dataclass(eq=False)
class Scene:
    """A canvas holding shapes, brush dots and brush strokes.

    While ``arrow_tool`` is on, pressing the mouse leaves a dot and
    dragging it draws strokes from the previous point.
    """

    rect: Rect = (0.0, 0.0, 0.0, 0.0)
    arrow_tool: bool = True
    items: list = field(default_factory=list)
    previous_point: Point = (0.0, 0.0)

    @property
    def width(self) -> float:
        return self.rect[2]

    @property
    def height(self) -> float:
        return self.rect[3]

    def add_item(self, item: SceneItem) -> None:
        """Put ``item`` on the scene; an item already there stays once."""
        if not any(existing is item for existing in self.items):
            self.items.append(item)

    def remove_item(self, item: SceneItem) -> None:
        """Take ``item`` off the scene; ValueError if it is not there."""
        for index, existing in enumerate(self.items):
            if existing is item:
                del self.items[index]
                return
        raise ValueError("item is not on the scene")

    def clear(self) -> None:
        self.items.clear()

    def mouse_press(self, x: float, y: float) -> None:
        if self.arrow_tool:
            half = _DOT_SIZE / 2
            self.add_item(Dot(x - half, y - half))
            self.previous_point = (x, y)

    def mouse_move(self, x: float, y: float) -> None:
        if self.arrow_tool:
            self.add_item(Stroke(self.previous_point, (x, y)))
            self.previous_point = (x, y)

    def mouse_release(self, x: float, y: float) -> None:
        if self.arrow_tool:
            self.previous_point = (x, y)

    def create_item_group(self, items: Iterable[SceneItem]) -> _ItemGroup:
        """Bind ``items`` into a group placed on the scene in their stead."""
        members = list(items)
        group = _ItemGroup(members)
        for member in members:
            if any(existing is member for existing in self.items):
                self.remove_item(member)
            if isinstance(member, MoveItem):
                member.movable = False
                member.selectable = False
        self.add_item(group)
        return group