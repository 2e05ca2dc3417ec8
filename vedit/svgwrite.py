"""Writing scene contents as an SVG drawing."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, Iterator, Union

from .scene import Dot, Stroke, _ItemGroup
from .shapes import RED, Color, MoveItem, Primitive

_SVG_NS = "http://www.w3.org/2000/svg"
_TITLE = "SVG Example"
_DESCRIPTION = "File created by SVG Example"
_HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n'


def _num(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def _opacity(color: Color) -> str:
    return _num(round(color.a / 255, 6))


def _flatten(items: Iterable) -> Iterator:
    for item in items:
        if isinstance(item, _ItemGroup):
            yield from _flatten(item.items)
        else:
            yield item


def _is_brush_dot(item: object) -> bool:
    return isinstance(item, Dot) and item.color.to_hex() == RED.to_hex()


def _shape_element(parent: ET.Element, item: MoveItem) -> None:
    m11, m12, m21, m22, dx, dy = item.transform()
    x, y = item.pos
    group = ET.SubElement(
        parent,
        "g",
        {
            "fill": item.color.to_hex(),
            "fill-opacity": _opacity(item.color),
            "stroke": "#000000",
            "stroke-opacity": "1",
            "stroke-width": "1",
            "transform": "matrix("
            + " ".join(_num(v) for v in (m11, m12, m21, m22, dx + x, dy + y))
            + ")",
        },
    )
    outline = item.outline()
    if outline.primitive is Primitive.RECT:
        rx, ry, width, height = outline.rect
        ET.SubElement(
            group,
            "rect",
            {"x": _num(rx), "y": _num(ry), "width": _num(width), "height": _num(height)},
        )
    elif outline.primitive is Primitive.ELLIPSE:
        ex, ey, width, height = outline.rect
        cx, cy = ex + width / 2, ey + height / 2
        if width == height:
            ET.SubElement(
                group, "circle", {"cx": _num(cx), "cy": _num(cy), "r": _num(width / 2)}
            )
        else:
            ET.SubElement(
                group,
                "ellipse",
                {
                    "cx": _num(cx),
                    "cy": _num(cy),
                    "rx": _num(width / 2),
                    "ry": _num(height / 2),
                },
            )
    else:
        first, *rest = outline.points
        data = f"M{_num(first[0])},{_num(first[1])}"
        data += "".join(f" L{_num(px)},{_num(py)}" for px, py in rest)
        ET.SubElement(group, "path", {"d": data + " Z"})


def _stroke_element(parent: ET.Element, stroke: Stroke) -> None:
    group = ET.SubElement(
        parent,
        "g",
        {
            "fill": "none",
            "stroke": stroke.color.to_hex(),
            "stroke-opacity": _opacity(stroke.color),
            "stroke-width": _num(stroke.width),
            "stroke-linecap": "round" if stroke.round_cap else "butt",
        },
    )
    (x1, y1), (x2, y2) = stroke.start, stroke.end
    ET.SubElement(
        group, "line", {"x1": _num(x1), "y1": _num(y1), "x2": _num(x2), "y2": _num(y2)}
    )


def _dot_element(parent: ET.Element, dot: Dot) -> None:
    group = ET.SubElement(
        parent,
        "g",
        {
            "fill": dot.color.to_hex(),
            "fill-opacity": _opacity(dot.color),
            "stroke": "none",
        },
    )
    ET.SubElement(
        group,
        "ellipse",
        {
            "cx": _num(dot.x + dot.width / 2),
            "cy": _num(dot.y + dot.height / 2),
            "rx": _num(dot.width / 2),
            "ry": _num(dot.height / 2),
        },
    )


def render_svg(items: Iterable, width: float, height: float) -> str:
    """Return an SVG document drawing ``items`` on a width x height canvas.

    Groups are drawn as their members; red brush dots are left out.
    """
    w, h = _num(int(width)), _num(int(height))
    root = ET.Element(
        "svg",
        {
            "xmlns": _SVG_NS,
            "width": w,
            "height": h,
            "viewBox": f"0 0 {w} {h}",
            "version": "1.2",
            "baseProfile": "tiny",
        },
    )
    ET.SubElement(root, "title").text = _TITLE
    ET.SubElement(root, "desc").text = _DESCRIPTION
    for item in _flatten(items):
        if _is_brush_dot(item):
            continue
        if isinstance(item, MoveItem):
            _shape_element(root, item)
        elif isinstance(item, Stroke):
            _stroke_element(root, item)
        elif isinstance(item, Dot):
            _dot_element(root, item)
        else:
            raise TypeError(f"cannot draw {type(item).__name__}")
    return _HEADER + ET.tostring(root, encoding="unicode") + "\n"


def write_svg(
    path: Union[str, "os.PathLike[str]"], items: Iterable, width: float, height: float
) -> None:
    """Write ``render_svg(items, width, height)`` to ``path``."""
    Path(path).write_text(render_svg(items, width, height), encoding="utf-8")