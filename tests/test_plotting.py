import math

import matplotlib.pyplot as plt
import pytest
from matplotlib.path import Path as mplPath
from PIL import Image
from shapely.geometry import Point as ShapelyPoint

from figures import (
    Circle,
    CompositeShape,
    Diamond,
    Drop,
    HalfCircle,
    Layer,
    Petal,
    Point,
    Polygon,
    Ring,
    Trapeze,
)
from plotting import (
    RenderConfig,
    draw_layers_on_axis,
    fit_canvas,
    layers_bounds,
    render_to_file,
    save_layers_as_png,
    shape_to_path,
    shape_to_shapely,
)


def test_every_basic_shape_has_a_path(basic_shapes):
    for shape in basic_shapes:
        path = shape_to_path(shape)
        assert isinstance(path, mplPath)
        assert len(path.vertices) > 0


def test_filled_shapes_contain_their_center(basic_shapes):
    for shape in basic_shapes:
        if isinstance(shape, (Ring, HalfCircle)):
            continue
        c = shape.center()
        assert shape_to_path(shape).contains_point((c.x, c.y)), type(shape).__name__


def test_ring_geometry_has_a_hole(origin):
    geom = shape_to_shapely(Ring(origin, 40.0, 10.0))
    assert not geom.contains(ShapelyPoint(100.0, 100.0))
    assert geom.contains(ShapelyPoint(145.0, 100.0))
    assert not geom.contains(ShapelyPoint(155.0, 100.0))


def test_ring_renders_with_an_unfilled_hole(origin):
    ring = Ring(origin, 40.0, 10.0)
    img = save_layers_as_png([Layer([ring])], None, 200.0, 200.0, RenderConfig(fill_color="black"))
    gray = img.convert("L")
    assert gray.getpixel((100, 100)) == 255
    assert gray.getpixel((145, 100)) == 0


def test_half_circle_path_bulges_towards_apex(origin):
    path = shape_to_path(HalfCircle(origin, 60.0))
    assert path.contains_point((100.0, 70.0))
    assert not path.contains_point((100.0, 130.0))

    turned = shape_to_path(HalfCircle(origin, 60.0).rotate(origin, 180.0))
    assert turned.contains_point((100.0, 130.0))
    assert not turned.contains_point((100.0, 70.0))


def test_drop_and_petal_use_bezier_codes(origin):
    drop = shape_to_path(Drop(origin, 100.0, 120.0))
    assert list(drop.codes[:4]) == [mplPath.MOVETO, mplPath.CURVE4, mplPath.CURVE4, mplPath.CURVE4]
    petal = shape_to_path(Petal(origin, 120.0, 80.0))
    assert list(petal.codes[1:5]) == [mplPath.CURVE3] * 4


def test_diamond_path_visits_top_right_bottom_left(origin):
    d = Diamond(origin, 60.0, 120.0)
    verts = shape_to_path(d).vertices[:4]
    expected = [d.center_top, d.right_center, d.center_bottom, d.left_center]
    for v, p in zip(verts, expected):
        assert (v[0], v[1]) == pytest.approx((p.x, p.y))


def test_closed_polygon_path_ends_with_closepoly(origin):
    tri = Polygon((Point(0.0, 0.0), Point(5.0, 10.0), Point(10.0, 0.0), Point(0.0, 0.0)))
    assert shape_to_path(tri).codes[-1] == mplPath.CLOSEPOLY
    open_line = Polygon((Point(0.0, 0.0), Point(5.0, 10.0)))
    assert shape_to_path(open_line).codes is None


def test_empty_polygon_path_is_empty():
    assert len(shape_to_path(Polygon(())).vertices) == 0


def test_composites_must_be_flattened(origin):
    with pytest.raises(TypeError):
        shape_to_path(CompositeShape((Circle(origin, 1.0),)))


def test_shapely_circle_area(origin):
    geom = shape_to_shapely(Circle(origin, 10.0))
    assert geom.area == pytest.approx(math.pi * 100.0, rel=1e-2)


def test_shapely_ring_area(origin):
    geom = shape_to_shapely(Ring(origin, 40.0, 10.0))
    assert geom.area == pytest.approx(math.pi * (50.0 ** 2 - 40.0 ** 2), rel=1e-2)


def test_shapely_trapeze_and_composite(origin):
    trap = Trapeze(origin, 10.0, 20.0, 20.0)
    assert shape_to_shapely(trap).area == pytest.approx(200.0)
    far = trap.move(Point(500.0, 500.0))
    union = shape_to_shapely(CompositeShape((trap, far)))
    assert union.area == pytest.approx(400.0)


def test_layers_bounds(origin):
    layer = Layer([Circle(Point(50.0, 50.0), 10.0), Trapeze(Point(200.0, 100.0), 20.0, 40.0, 40.0)])
    minx, miny, maxx, maxy = layers_bounds([layer])
    assert (minx, miny) == pytest.approx((40.0, 40.0), abs=1e-6)
    assert (maxx, maxy) == pytest.approx((220.0, 110.0), abs=1e-6)
    assert layers_bounds([Layer()]) is None


def test_fit_canvas_adds_margin():
    layer = Layer([Circle(Point(50.0, 50.0), 10.0)])
    assert fit_canvas([layer], margin=5.0) == pytest.approx((65.0, 65.0), abs=1e-6)
    assert fit_canvas([], margin=5.0) == (10.0, 10.0)


def test_draw_layers_adds_one_patch_per_basic_shape(generator, origin):
    flower = generator.flower(origin, 40.0, 5, kind="petal")
    outline = Polygon((Point(0.0, 0.0), Point(10.0, 0.0), Point(5.0, 5.0)), fill=False)
    layers = [Layer([Circle(origin, 5.0)]), Layer([flower, outline])]

    fig, ax = plt.subplots()
    try:
        count = draw_layers_on_axis(ax, layers, 300.0, 200.0)
        assert count == 1 + 6 + 1
        assert len(ax.patches) == count
        # y axis points down
        assert ax.get_ylim() == (200.0, 0.0)
        # z-order follows layer order then shape order
        assert ax.patches[0].get_path().vertices[0] == pytest.approx(shape_to_path(Circle(origin, 5.0)).vertices[0])
        assert ax.patches[-1].get_facecolor()[3] == 0.0
    finally:
        plt.close(fig)


def test_render_svg(tmp_path, origin):
    out = tmp_path / "nested" / "scene.svg"
    layers = [Layer([Circle(origin, 20.0), Ring(origin, 30.0, 5.0)])]
    size = render_to_file(layers, str(out), 300.0, 200.0)
    assert size == (300.0, 200.0)
    text = out.read_text()
    assert "<svg" in text
    assert "<path" in text


def test_render_png_has_canvas_size(tmp_path, origin):
    out = tmp_path / "scene.png"
    render_to_file([Layer([Circle(origin, 20.0)])], str(out), 320.0, 240.0, RenderConfig(dpi=80))
    with Image.open(out) as img:
        assert img.size == (320, 240)


def test_render_fits_canvas_when_size_is_missing(tmp_path):
    out = tmp_path / "fit.svg"
    width, height = render_to_file([Layer([Circle(Point(50.0, 50.0), 10.0)])], str(out))
    assert (width, height) == pytest.approx((70.0, 70.0), abs=1e-6)
    assert out.exists()


def test_render_rejects_unknown_format(tmp_path, origin):
    with pytest.raises(ValueError):
        render_to_file([Layer([Circle(origin, 1.0)])], str(tmp_path / "scene.pdf"), 10.0, 10.0)


def test_png_in_memory(origin):
    img = save_layers_as_png([Layer([Circle(origin, 20.0)])], None, 200.0, 100.0)
    assert isinstance(img, Image.Image)
    assert img.size == (200, 100)
    # Circle outline is black on a white background
    assert img.convert("L").getextrema()[0] < 128
