import pytest

from vedit.shapes import Color
from vedit.svgread import (
    SvgShape,
    is_diamond,
    is_triangle,
    read_circles,
    read_diamonds,
    read_ovals,
    read_rects,
    read_triangles,
    read_view_box,
)

DIAMOND_D = "M0,-30 L30,0 L0,30 L-30,0 Z"
TRIANGLE_D = "M0,-30 L30,30 L-30,30 Z"


def _svg(tmp_path, body, root="svg", attrs=' viewBox="0 0 500 500"'):
    path = tmp_path / "drawing.svg"
    path.write_text(f"<{root}{attrs}>{body}</{root}>")
    return path


def test_rect_with_full_style(tmp_path):
    path = _svg(
        tmp_path,
        '<g fill="#ff0000" fill-opacity="1" stroke="#0000ff" stroke-opacity="1"'
        ' stroke-width="2"><rect x="10" y="20" width="30" height="40"/></g>',
    )
    shapes = read_rects(path)
    assert len(shapes) == 1
    shape = shapes[0]
    assert shape.rect == (10, 20, 30, 40)
    assert shape.fill == Color.from_name("#ff0000")
    assert shape.stroke == Color.from_name("#0000ff")
    assert shape.stroke_width == 2


def test_rect_defaults(tmp_path):
    path = _svg(tmp_path, '<g><rect x="1" y="2" width="3" height="4"/></g>')
    shape = read_rects(path)[0]
    assert shape.fill == Color.from_name("#ffffff").with_alpha(0.0)
    assert shape.stroke == Color.from_name("#000000").with_alpha(0.0)
    assert shape.stroke_width == 0


def test_non_integer_coordinates_read_as_zero(tmp_path):
    path = _svg(tmp_path, '<g><rect x="1" y="2" width="12.5" height="4"/></g>')
    assert read_rects(path)[0].rect[2] == 0


def test_invalid_fill_falls_back_to_black(tmp_path):
    path = _svg(
        tmp_path,
        '<g fill="nonsense" fill-opacity="1"><rect x="1" y="2" width="3" height="4"/></g>',
    )
    assert read_rects(path)[0].fill == Color.from_name("#000000")


def test_rects_only_first_direct_child(tmp_path):
    path = _svg(
        tmp_path,
        '<g><rect x="1" y="1" width="5" height="5"/>'
        '<rect x="2" y="2" width="6" height="6"/></g>'
        '<g><a><rect x="3" y="3" width="7" height="7"/></a></g>'
        '<g><circle cx="1" cy="1" r="1"/></g>',
    )
    shapes = read_rects(path)
    assert [s.rect for s in shapes] == [(1, 1, 5, 5)]


def test_is_square(tmp_path):
    path = _svg(
        tmp_path,
        '<g><rect x="0" y="0" width="30" height="30"/></g>'
        '<g><rect x="0" y="0" width="30" height="40"/></g>',
    )
    square, rectangle = read_rects(path)
    assert square.is_square is True
    assert rectangle.is_square is False


def test_path_shape_is_not_square():
    shape = SvgShape(
        fill=Color.from_name("#ffffff"),
        stroke=Color.from_name("#000000"),
        stroke_width=0,
        points=((0, -30), (30, 30), (-30, 30)),
    )
    assert shape.is_square is False


def test_namespaced_document(tmp_path):
    path = _svg(
        tmp_path,
        '<g><rect x="10" y="20" width="30" height="40"/></g>',
        attrs=' xmlns="urn:example:drawing" viewBox="0 0 500 500"',
    )
    assert [s.rect for s in read_rects(path)] == [(10, 20, 30, 40)]


def test_circle_geometry_and_index(tmp_path):
    path = _svg(
        tmp_path,
        '<g><rect x="0" y="0" width="1" height="1"/></g>'
        '<g fill="#00ff00" fill-opacity="1"><circle cx="50" cy="60" r="10"/></g>',
    )
    shapes = read_circles(path)
    assert len(shapes) == 1
    x, y, w, h = shapes[0].rect
    assert x + w / 2 == 50
    assert y + h / 2 == 60
    assert w == h
    assert w / 2 == 10
    assert shapes[0].index == 1
    assert shapes[0].fill == Color.from_name("#00ff00")


def test_oval_geometry(tmp_path):
    path = _svg(tmp_path, '<g><ellipse cx="50" cy="60" rx="20" ry="10"/></g>')
    x, y, w, h = read_ovals(path)[0].rect
    assert x + w / 2 == 50
    assert y + h / 2 == 60
    assert w / 2 == 20
    assert h / 2 == 10


def test_diamonds(tmp_path):
    path = _svg(
        tmp_path,
        f'<g fill="#ff0000" fill-opacity="1"><path d="{DIAMOND_D}"/></g>'
        f'<g><path d="{TRIANGLE_D}"/></g>'
        '<g><path d="M0,0 L1,1"/></g>',
    )
    shapes = read_diamonds(path)
    assert len(shapes) == 1
    assert shapes[0].points == ((0, -30), (30, 0), (0, 30), (-30, 0))
    assert shapes[0].fill == Color.from_name("#ff0000")
    assert shapes[0].stroke_width == 1


def test_triangles_are_opaque_by_default(tmp_path):
    path = _svg(
        tmp_path,
        f'<g><path d="{TRIANGLE_D}"/></g><g><path d="{DIAMOND_D}"/></g>',
    )
    shapes = read_triangles(path)
    assert len(shapes) == 1
    assert shapes[0].points == ((0, -30), (30, 30), (-30, 30))
    assert shapes[0].fill == Color.from_name("#ffffff")


def test_triangles_need_svg_root(tmp_path):
    body = f'<g><path d="{TRIANGLE_D}"/></g><g><path d="{DIAMOND_D}"/></g>'
    path = _svg(tmp_path, body, root="drawing", attrs="")
    assert read_triangles(path) == []
    assert len(read_diamonds(path)) == 1


@pytest.mark.parametrize(
    "reader", [read_rects, read_circles, read_ovals, read_diamonds, read_triangles]
)
def test_missing_file_gives_no_shapes(tmp_path, reader):
    assert reader(tmp_path / "absent.svg") == []


@pytest.mark.parametrize(
    "reader", [read_rects, read_circles, read_ovals, read_diamonds, read_triangles]
)
def test_malformed_file_gives_no_shapes(tmp_path, reader):
    path = tmp_path / "broken.svg"
    path.write_text("<svg><g><rect x='1'></g>")
    assert reader(path) == []


def test_view_box(tmp_path):
    path = _svg(tmp_path, "")
    assert read_view_box(path) == (0, 0, 500, 500)


def test_view_box_missing_file(tmp_path):
    assert read_view_box(tmp_path / "absent.svg") == (0, 0, 200, 200)


def test_view_box_without_svg_element(tmp_path):
    path = _svg(tmp_path, "", root="drawing", attrs="")
    assert read_view_box(path) == (0, 0, 200, 200)


def test_view_box_too_short(tmp_path):
    path = _svg(tmp_path, "", attrs=' viewBox="0 0 500"')
    with pytest.raises(ValueError):
        read_view_box(path)


def test_path_matchers():
    assert is_diamond("M0,-30 L30,0 L0,30 L-30,0") is True
    assert is_diamond(TRIANGLE_D) is False
    assert is_triangle("M0,-30 L30,30 L-30,30") is True
    assert is_triangle(DIAMOND_D) is False