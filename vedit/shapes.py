"""Movable shapes placed on the drawing scene, and the colours they use."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Optional

Matrix = tuple[float, float, float, float, float, float]
Rect = tuple[float, float, float, float]
Point = tuple[float, float]

_IDENTITY: Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
_STEP = 1.1

_NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 128, 0),
    "lime": (0, 255, 0),
    "blue": (0, 0, 255),
    "yellow": (255, 255, 0),
    "cyan": (0, 255, 255),
    "aqua": (0, 255, 255),
    "magenta": (255, 0, 255),
    "fuchsia": (255, 0, 255),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
    "silver": (192, 192, 192),
    "maroon": (128, 0, 0),
    "olive": (128, 128, 0),
    "navy": (0, 0, 128),
    "purple": (128, 0, 128),
    "teal": (0, 128, 128),
    "orange": (255, 165, 0),
    "pink": (255, 192, 203),
    "brown": (165, 42, 42),
}


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    @classmethod
    def from_name(cls, name: str) -> Color:
        """Parse '#rgb', '#rrggbb', '#aarrggbb' or a colour name."""
        text = name.strip().lower()
        if text.startswith("#"):
            digits = text[1:]
            if not digits or any(c not in string.hexdigits for c in digits):
                raise ValueError(f"invalid colour: {name!r}")
            if len(digits) == 3:
                r, g, b = (int(c * 2, 16) for c in digits)
                return cls(r, g, b)
            if len(digits) == 6:
                return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
            if len(digits) == 8:
                a, r, g, b = (int(digits[i:i + 2], 16) for i in range(0, 8, 2))
                return cls(r, g, b, a)
            raise ValueError(f"invalid colour: {name!r}")
        if text == "transparent":
            return cls(0, 0, 0, 0)
        try:
            r, g, b = _NAMED_COLORS[text]
        except KeyError:
            raise ValueError(f"unknown colour name: {name!r}") from None
        return cls(r, g, b)

    def with_alpha(self, alpha: float) -> Color:
        """Return this colour with opacity ``alpha``, clamped to 0..1."""
        alpha = min(max(alpha, 0.0), 1.0)
        return replace(self, a=int(alpha * 255 + 0.5))

    def to_hex(self) -> str:
        """Return the colour as '#rrggbb', ignoring opacity."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)


class ShapeKind(Enum):
    """The shapes an item can take; values are their one-letter codes."""

    SQUARE = "r"
    CIRCLE = "e"
    RHOMB = "p"
    RECTANGLE = "R"
    OVAL = "E"
    TRIANGLE = "t"


class Primitive(Enum):
    """How an outline is drawn."""

    RECT = "rect"
    ELLIPSE = "ellipse"
    POLYGON = "polygon"


@dataclass(frozen=True)
class Outline:
    """Geometry of a shape in item coordinates.

    ``rect`` is (x, y, width, height) for rectangles and ellipses;
    ``points`` holds the corners of a polygon.
    """

    primitive: Primitive
    rect: Optional[Rect] = None
    points: tuple[Point, ...] = ()


_OUTLINES: dict[ShapeKind, Outline] = {
    ShapeKind.CIRCLE: Outline(Primitive.ELLIPSE, rect=(-30, -30, 60, 60)),
    ShapeKind.RHOMB: Outline(
        Primitive.POLYGON, points=((0, -30), (30, 0), (0, 30), (-30, 0))
    ),
    ShapeKind.SQUARE: Outline(Primitive.RECT, rect=(-30, -30, 60, 60)),
    ShapeKind.RECTANGLE: Outline(Primitive.RECT, rect=(-30, -20, 60, 40)),
    ShapeKind.OVAL: Outline(Primitive.ELLIPSE, rect=(-30, -20, 60, 40)),
    ShapeKind.TRIANGLE: Outline(
        Primitive.POLYGON, points=((0, -30), (30, 30), (-30, 30))
    ),
}


@dataclass(eq=False)
class MoveItem:
    """A movable, selectable shape that can be scaled, rotated and stretched.

    Each transforming operation replaces the item's transform as a whole,
    so a uniform scale discards an earlier stretch and vice versa.
    """

    kind: ShapeKind = ShapeKind.SQUARE
    color: Color = GREEN
    pos: Point = (0.0, 0.0)
    scale: float = 1.0
    rotation: float = 1.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    movable: bool = True
    selectable: bool = True
    focusable: bool = True
    _matrix: Matrix = field(default=_IDENTITY, init=False, repr=False)

    def bounding_rect(self) -> Rect:
        """The item's bounds in item coordinates."""
        return (-30, -30, 60, 60)

    def outline(self) -> Outline:
        """The geometry drawn for the item's shape."""
        return _OUTLINES[self.kind]

    def transform(self) -> Matrix:
        """The current affine transform as (m11, m12, m21, m22, dx, dy)."""
        return self._matrix

    def _set_scale(self, sx: float, sy: float) -> None:
        self._matrix = (sx, 0.0, 0.0, sy, 0.0, 0.0)

    def scale_up(self) -> None:
        self.scale *= _STEP
        self._set_scale(self.scale, self.scale)

    def scale_down(self) -> None:
        self.scale /= _STEP
        self._set_scale(self.scale, self.scale)

    def rotate(self) -> None:
        """Turn by a further 90 degrees, keeping the uniform scale."""
        self.rotation += 90
        angle = math.radians(self.rotation)
        c, s = math.cos(angle), math.sin(angle)
        k = self.scale
        self._matrix = (k * c, k * s, -k * s, k * c, 0.0, 0.0)

    def stretch_x_plus(self) -> None:
        self.scale_x *= _STEP
        self._set_scale(self.scale_x, self.scale_y)

    def stretch_y_plus(self) -> None:
        self.scale_y *= _STEP
        self._set_scale(self.scale_x, self.scale_y)

    def stretch_x_minus(self) -> None:
        self.scale_x /= _STEP
        self._set_scale(self.scale_x, self.scale_y)

    def stretch_y_minus(self) -> None:
        self.scale_y /= _STEP
        self._set_scale(self.scale_x, self.scale_y)

    def handle_key(
        self, key: str, choose_color: Optional[Callable[[], Optional[Color]]] = None
    ) -> bool:
        """Apply the action bound to ``key``; return whether it was one.

        '+' and '-' scale, 'R' rotates, 'X'/'Z' stretch horizontally,
        'Y'/'T' stretch vertically and 'C' asks ``choose_color`` for a new
        colour, which is kept unless it returns None. Letters are
        case-insensitive.
        """
        match key.upper():
            case "+":
                self.scale_up()
            case "-":
                self.scale_down()
            case "C":
                if choose_color is not None:
                    chosen = choose_color()
                    if chosen is not None:
                        self.color = chosen
            case "R":
                self.rotate()
            case "X":
                self.stretch_x_plus()
            case "Y":
                self.stretch_y_plus()
            case "Z":
                self.stretch_x_minus()
            case "T":
                self.stretch_y_minus()
            case _:
                return False
        return True