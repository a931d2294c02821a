import math

import pytest

from fsmgeom import (
    ShapeDescriptor,
    ShapeKind,
    UnsupportedShapeError,
    closest_point_on_segment,
    closest_point_on_shape,
    contains_point,
    inset_shape,
    intersects_rectangle,
    polygon_vertices,
    shape_outline,
)

POLYGON_KINDS = [ShapeKind.TRIANGLE, ShapeKind.SQUARE, ShapeKind.PENTAGON, ShapeKind.HEXAGON]

QUERIES = [
    (100.0, 0.0),
    (-80.0, 35.0),
    (3.0, -250.0),
    (12.0, 9.0),
    (-4.0, -2.0),
    (41.0, 41.0),
    (0.5, 300.0),
]


def _edges(shape):
    verts = [tuple(v) for v in polygon_vertices(shape)]
    return [(verts[i], verts[(i + 1) % len(verts)]) for i in range(len(verts))]


def _distance_to_outline(point, shape):
    return min(
        math.dist(point, closest_point_on_segment(point, a, b)) for a, b in _edges(shape)
    )


def test_circle_scenario():
    shape = ShapeDescriptor((0.0, 0.0), 30.0)
    assert closest_point_on_shape((100.0, 0.0), shape) == pytest.approx((30.0, 0.0))


def test_square_scenario_uses_shrunk_half_width():
    shape = ShapeDescriptor((0.0, 0.0), 30.0, ShapeKind.SQUARE)
    assert closest_point_on_shape((1000.0, 0.0), shape) == pytest.approx((25.5, 0.0))


@pytest.mark.parametrize("query", QUERIES)
def test_circle_points_lie_on_the_circle(query):
    shape = ShapeDescriptor((7.0, -3.0), 30.0)
    x, y = closest_point_on_shape(query, shape)
    assert math.hypot(x - 7.0, y + 3.0) == pytest.approx(30.0)


def test_circle_query_at_center_uses_fallback_direction():
    shape = ShapeDescriptor((5.0, 5.0), 30.0)
    assert closest_point_on_shape((5.0, 5.0), shape) == (35.0, 5.0)


@pytest.mark.parametrize("kind", POLYGON_KINDS)
@pytest.mark.parametrize("query", QUERIES)
def test_polygon_point_is_on_outline_and_minimal(kind, query):
    shape = ShapeDescriptor((0.0, 0.0), 30.0, kind)
    point = closest_point_on_shape(query, shape)
    assert _distance_to_outline(point, shape) == pytest.approx(0.0, abs=1e-9)
    gap = math.dist(query, point)
    for vertex in polygon_vertices(shape):
        assert gap <= math.dist(query, tuple(vertex)) + 1e-9


@pytest.mark.parametrize("kind", [ShapeKind.CIRCLE] + POLYGON_KINDS)
def test_points_on_outline_are_fixed(kind):
    shape = ShapeDescriptor((20.0, 10.0), 30.0, kind)
    for query in QUERIES:
        on_outline = closest_point_on_shape(query, shape)
        assert closest_point_on_shape(on_outline, shape) == pytest.approx(on_outline, abs=1e-9)


@pytest.mark.parametrize("kind", [ShapeKind.CIRCLE] + POLYGON_KINDS)
def test_zero_radius_collapses_to_center(kind):
    shape = ShapeDescriptor((4.0, 2.0), 0.0, kind)
    point = closest_point_on_shape((50.0, 50.0), shape)
    assert point == pytest.approx((4.0, 2.0))
    assert all(math.isfinite(v) for v in point)


def test_shape_tags():
    assert ShapeKind.from_tag("dot") is ShapeKind.CIRCLE
    assert ShapeKind.from_tag(" Hexagon ") is ShapeKind.HEXAGON
    assert ShapeKind.from_tag(ShapeKind.SQUARE) is ShapeKind.SQUARE
    assert ShapeKind.PENTAGON.vertex_count == 5
    assert ShapeKind.CIRCLE.vertex_count == 0
    with pytest.raises(UnsupportedShapeError):
        ShapeKind.from_tag("star")
    with pytest.raises(UnsupportedShapeError):
        ShapeKind.from_tag(4)


def test_descriptor_coerces_and_validates():
    shape = ShapeDescriptor([1, 2], 30, "square")
    assert shape.center == (1.0, 2.0)
    assert shape.kind is ShapeKind.SQUARE
    assert isinstance(shape.circumradius, float)
    with pytest.raises(ValueError):
        ShapeDescriptor((0.0, 0.0), -1.0)
    with pytest.raises(ValueError):
        ShapeDescriptor((float("nan"), 0.0), 30.0)


def test_contains_point():
    circle = ShapeDescriptor((0.0, 0.0), 30.0)
    square = ShapeDescriptor((0.0, 0.0), 30.0, ShapeKind.SQUARE)
    triangle = ShapeDescriptor((0.0, 0.0), 30.0, ShapeKind.TRIANGLE)
    assert contains_point((29.0, 0.0), circle)
    assert not contains_point((30.0, 0.0), circle)
    assert contains_point((20.0, 0.0), square)
    assert not contains_point((26.0, 0.0), square)
    assert contains_point((0.0, 14.0), triangle)
    assert not contains_point((0.0, 16.0), triangle)


def test_inset_shape_for_accept_state():
    shape = ShapeDescriptor((0.0, 0.0), 30.0, ShapeKind.HEXAGON)
    inner = inset_shape(shape, 6.0)
    assert inner.circumradius == 24.0
    assert inner.kind is ShapeKind.HEXAGON
    assert inset_shape(shape, 50.0).circumradius == 0.0


def test_shape_outline():
    assert shape_outline(ShapeDescriptor((0.0, 0.0), 30.0)) == []
    assert len(shape_outline(ShapeDescriptor((0.0, 0.0), 30.0, ShapeKind.PENTAGON))) == 5


def test_rectangle_intersection_circle():
    circle = ShapeDescriptor((0.0, 0.0), 30.0)
    assert intersects_rectangle(circle, (25.0, -5.0, 50.0, 5.0))
    assert not intersects_rectangle(circle, (31.0, -5.0, 50.0, 5.0))
    assert not intersects_rectangle(circle, (26.0, 26.0, 40.0, 40.0))
    assert intersects_rectangle(circle, (50.0, 5.0, 25.0, -5.0))


def test_rectangle_intersection_polygons():
    hexagon = ShapeDescriptor((0.0, 0.0), 30.0, ShapeKind.HEXAGON)
    assert intersects_rectangle(hexagon, (25.0, -5.0, 50.0, 5.0))
    assert not intersects_rectangle(hexagon, (27.0, -5.0, 50.0, 5.0))
    triangle = ShapeDescriptor((0.0, 0.0), 30.0, ShapeKind.TRIANGLE)
    # Inside the triangle's bounding box but outside the triangle itself.
    assert not intersects_rectangle(triangle, (20.0, -20.0, 40.0, -10.0))
    assert intersects_rectangle(triangle, (-100.0, -100.0, 100.0, 100.0))
