import xml.etree.ElementTree as ET

from vedit.scene import Dot, Scene, Stroke
from vedit.shapes import Color, MoveItem, ShapeKind
from vedit.svgread import (
    is_diamond,
    is_triangle,
    read_circles,
    read_diamonds,
    read_ovals,
    read_rects,
    read_triangles,
    read_view_box,
)
from vedit.svgwrite import render_svg, write_svg


def _local(tag):
    return tag.rpartition("}")[2]


def _parse(text):
    return ET.fromstring(text.encode("utf-8"))


def test_header_carries_size_and_titles():
    root = _parse(render_svg([], 320, 240))
    assert _local(root.tag) == "svg"
    assert root.get("viewBox") == "0 0 320 240"
    texts = {_local(e.tag): e.text for e in root}
    assert texts["title"] == "SVG Example"
    assert texts["desc"] == "File created by SVG Example"


def test_view_box_round_trip(tmp_path):
    path = tmp_path / "out.svg"
    write_svg(path, [], 480, 360)
    assert read_view_box(path) == (0, 0, 480, 360)


def test_shapes_round_trip(tmp_path):
    colors = {
        ShapeKind.SQUARE: Color(10, 20, 30),
        ShapeKind.RECTANGLE: Color(40, 50, 60),
        ShapeKind.CIRCLE: Color(70, 80, 90),
        ShapeKind.OVAL: Color(100, 110, 120),
        ShapeKind.RHOMB: Color(130, 140, 150),
        ShapeKind.TRIANGLE: Color(160, 170, 180),
    }
    items = [MoveItem(kind, color) for kind, color in colors.items()]
    path = tmp_path / "shapes.svg"
    write_svg(path, items, 500, 500)

    rects = read_rects(path)
    assert [r.fill for r in rects if r.is_square] == [colors[ShapeKind.SQUARE]]
    assert [r.fill for r in rects if not r.is_square] == [colors[ShapeKind.RECTANGLE]]
    assert [c.fill for c in read_circles(path)] == [colors[ShapeKind.CIRCLE]]
    assert [o.fill for o in read_ovals(path)] == [colors[ShapeKind.OVAL]]
    assert [d.fill for d in read_diamonds(path)] == [colors[ShapeKind.RHOMB]]
    assert [t.fill for t in read_triangles(path)] == [colors[ShapeKind.TRIANGLE]]


def test_square_geometry_matches_item_outline(tmp_path):
    item = MoveItem(ShapeKind.SQUARE)
    path = tmp_path / "square.svg"
    write_svg(path, [item], 500, 500)
    assert read_rects(path)[0].rect == item.outline().rect


def test_translucent_fill_survives(tmp_path):
    color = Color(1, 2, 3, 128)
    path = tmp_path / "alpha.svg"
    write_svg(path, [MoveItem(ShapeKind.SQUARE, color)], 100, 100)
    assert read_rects(path)[0].fill == color


def test_polygon_paths_are_recognised():
    root = _parse(render_svg([MoveItem(ShapeKind.RHOMB), MoveItem(ShapeKind.TRIANGLE)], 50, 50))
    paths = [e.get("d") for e in root.iter() if _local(e.tag) == "path"]
    assert len(paths) == 2
    assert is_diamond(paths[0])
    assert is_triangle(paths[1])


def test_red_brush_dots_are_left_out():
    root = _parse(render_svg([Dot(0, 0)], 50, 50))
    assert [e for e in root.iter() if _local(e.tag) == "g"] == []


def test_strokes_are_drawn():
    stroke = Stroke((1, 2), (3, 4))
    root = _parse(render_svg([stroke], 50, 50))
    lines = [e for e in root.iter() if _local(e.tag) == "line"]
    assert [(l.get("x1"), l.get("y1"), l.get("x2"), l.get("y2")) for l in lines] == [
        ("1", "2", "3", "4")
    ]
    groups = [e for e in root.iter() if _local(e.tag) == "g"]
    assert groups[0].get("stroke") == stroke.color.to_hex()
    assert groups[0].get("stroke-linecap") == "round"


def test_groups_are_drawn_as_members(tmp_path):
    scene = Scene()
    a, b = MoveItem(ShapeKind.SQUARE), MoveItem(ShapeKind.SQUARE)
    scene.add_item(a)
    scene.add_item(b)
    scene.create_item_group([a, b])
    path = tmp_path / "group.svg"
    write_svg(path, scene.items, 200, 200)
    assert len(read_rects(path)) == 2


def test_position_goes_into_transform():
    item = MoveItem(ShapeKind.SQUARE, pos=(40.0, 70.0))
    root = _parse(render_svg([item], 100, 100))
    group = next(e for e in root.iter() if _local(e.tag) == "g")
    assert group.get("transform") == "matrix(1 0 0 1 40 70)"