"""Reading shapes from SVG drawings.

Every reader looks at each ``g`` element of the document in order and
takes the first direct child of the wanted kind; colours and stroke come
from the ``g`` element. A file that cannot be read or parsed yields no
shapes.
"""

from __future__ import annotations

import os
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from .shapes import BLACK, Color

PathLike = Union[str, "os.PathLike[str]"]

_DIAMOND_PATH = "M0,-30 L30,0 L0,30 L-30,0"
_TRIANGLE_PATH = "M0,-30 L30,30 L-30,30"
_DIAMOND_POINTS = ((0, -30), (30, 0), (0, 30), (-30, 0))
_TRIANGLE_POINTS = ((0, -30), (30, 30), (-30, 30))
_DEFAULT_VIEW_BOX = (0, 0, 200, 200)
_PATH_PEN_WIDTH = 1

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


@dataclass(frozen=True)
class SvgShape:
    """A shape read from a drawing.

    ``rect`` is (x, y, width, height) for rectangles and ellipses;
    ``points`` holds polygon corners; ``index`` is the position of the
    enclosing group among all groups, kept for circles.
    """

    fill: Color
    stroke: Color
    stroke_width: int
    rect: Optional[tuple[int, int, int, int]] = None
    points: tuple[tuple[int, int], ...] = ()
    index: Optional[int] = None

    @property
    def is_square(self) -> bool:
        """Whether width and height are equal within floating-point noise."""
        if self.rect is None:
            return False
        width, height = self.rect[2], self.rect[3]
        return abs(width - height) * 1e12 <= min(abs(width), abs(height))


def _to_int(text: str) -> int:
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        return 0
    value = int(text)
    return value if _INT_MIN <= value <= _INT_MAX else 0


def _to_float(text: str) -> float:
    text = text.strip()
    return float(text) if _FLOAT_RE.fullmatch(text) else 0.0


def _local(tag: object) -> str:
    return tag.rpartition("}")[2] if isinstance(tag, str) else ""


def _load(path: PathLike) -> Optional[ET.Element]:
    try:
        return ET.parse(path).getroot()
    except (OSError, ET.ParseError):
        return None


def _groups(root: ET.Element) -> Iterator[tuple[int, ET.Element]]:
    return enumerate(e for e in root.iter() if _local(e.tag) == "g")


def _first_child(element: ET.Element, name: str) -> Optional[ET.Element]:
    return next((child for child in element if _local(child.tag) == name), None)


def _color(name: str) -> Color:
    try:
        return Color.from_name(name)
    except ValueError:
        return BLACK


def _fill(group: ET.Element, default_opacity: str) -> Color:
    opacity = _to_float(group.get("fill-opacity", default_opacity))
    return _color(group.get("fill", "#ffffff")).with_alpha(opacity)


def _stroke(group: ET.Element) -> Color:
    opacity = _to_float(group.get("stroke-opacity", ""))
    return _color(group.get("stroke", "#000000")).with_alpha(opacity)


def _stroke_width(group: ET.Element) -> int:
    return _to_int(group.get("stroke-width", "0"))


def read_rects(path: PathLike) -> list[SvgShape]:
    """Read the rectangles of a drawing, squares included."""
    root = _load(path)
    if root is None:
        return []
    shapes = []
    for _, group in _groups(root):
        rect = _first_child(group, "rect")
        if rect is None:
            continue
        shapes.append(
            SvgShape(
                fill=_fill(group, "0"),
                stroke=_stroke(group),
                stroke_width=_stroke_width(group),
                rect=(
                    _to_int(rect.get("x", "")),
                    _to_int(rect.get("y", "")),
                    _to_int(rect.get("width", "")),
                    _to_int(rect.get("height", "")),
                ),
            )
        )
    return shapes


def read_circles(path: PathLike) -> list[SvgShape]:
    """Read the circles of a drawing as bounding rectangles."""
    root = _load(path)
    if root is None:
        return []
    shapes = []
    for index, group in _groups(root):
        circle = _first_child(group, "circle")
        if circle is None:
            continue
        r = _to_int(circle.get("r", ""))
        shapes.append(
            SvgShape(
                fill=_fill(group, "0"),
                stroke=_stroke(group),
                stroke_width=_stroke_width(group),
                rect=(
                    _to_int(circle.get("cx", "")) - r,
                    _to_int(circle.get("cy", "")) - r,
                    r * 2,
                    r * 2,
                ),
                index=index,
            )
        )
    return shapes


def read_ovals(path: PathLike) -> list[SvgShape]:
    """Read the ellipses of a drawing as bounding rectangles."""
    root = _load(path)
    if root is None:
        return []
    shapes = []
    for _, group in _groups(root):
        ellipse = _first_child(group, "ellipse")
        if ellipse is None:
            continue
        rx = _to_int(ellipse.get("rx", ""))
        ry = _to_int(ellipse.get("ry", ""))
        shapes.append(
            SvgShape(
                fill=_fill(group, "0"),
                stroke=_stroke(group),
                stroke_width=_stroke_width(group),
                rect=(
                    _to_int(ellipse.get("cx", "")) - rx,
                    _to_int(ellipse.get("cy", "")) - ry,
                    rx * 2,
                    ry * 2,
                ),
            )
        )
    return shapes


def _read_paths(
    root: ET.Element, matches, points, default_opacity: str
) -> list[SvgShape]:
    shapes = []
    for _, group in _groups(root):
        path_element = _first_child(group, "path")
        if path_element is None or not matches(path_element.get("d", "")):
            continue
        shapes.append(
            SvgShape(
                fill=_fill(group, default_opacity),
                stroke=_stroke(group),
                stroke_width=_PATH_PEN_WIDTH,
                points=points,
            )
        )
    return shapes


def read_diamonds(path: PathLike) -> list[SvgShape]:
    """Read the diamond paths of a drawing."""
    root = _load(path)
    if root is None:
        return []
    return _read_paths(root, is_diamond, _DIAMOND_POINTS, "0")


def read_triangles(path: PathLike) -> list[SvgShape]:
    """Read the triangle paths of a drawing whose root is ``svg``."""
    root = _load(path)
    if root is None or _local(root.tag) != "svg":
        return []
    return _read_paths(root, is_triangle, _TRIANGLE_POINTS, "1")


def read_view_box(path: PathLike) -> tuple[int, int, int, int]:
    """Return the view box of the first ``svg`` element.

    Falls back to (0, 0, 200, 200) when the file cannot be read or has no
    ``svg`` element; raises ValueError for a view box with fewer than four
    space-separated parts.
    """
    root = _load(path)
    if root is None:
        return _DEFAULT_VIEW_BOX
    svg = next((e for e in root.iter() if _local(e.tag) == "svg"), None)
    if svg is None:
        return _DEFAULT_VIEW_BOX
    parts = svg.get("viewBox", "").split(" ")
    if len(parts) < 4:
        raise ValueError(f"malformed viewBox: {svg.get('viewBox', '')!r}")
    x, y, width, height = (_to_int(part) for part in parts[:4])
    return (x, y, width, height)


def is_diamond(path_data: str) -> bool:
    return _DIAMOND_PATH in path_data


def is_triangle(path_data: str) -> bool:
    return _TRIANGLE_PATH in path_data