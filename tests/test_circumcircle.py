import math

from fsmgeom import circle_from_three_points


def test_right_triangle_circumcircle():
    circle = circle_from_three_points((0.0, 0.0), (2.0, 0.0), (0.0, 2.0))
    assert circle is not None
    assert math.isclose(circle.center[0], 1.0, abs_tol=1e-12)
    assert math.isclose(circle.center[1], 1.0, abs_tol=1e-12)
    assert math.isclose(circle.radius, math.sqrt(2.0), rel_tol=1e-12)


def test_center_is_equidistant_from_all_points():
    pts = [(13.0, -4.0), (250.0, 37.5), (90.0, 180.0)]
    circle = circle_from_three_points(*pts)
    assert circle is not None
    for x, y in pts:
        assert math.isclose(math.hypot(x - circle.center[0], y - circle.center[1]), circle.radius, rel_tol=1e-9)


def test_colinear_points_are_degenerate():
    assert circle_from_three_points((0.0, 0.0), (1.0, 0.0), (2.0, 0.0)) is None
    assert circle_from_three_points((0.0, 0.0), (1000.0, 1000.0), (2000.0, 2000.0)) is None


def test_coincident_points_are_degenerate():
    assert circle_from_three_points((5.0, 5.0), (5.0, 5.0), (9.0, 1.0)) is None
    assert circle_from_three_points((5.0, 5.0), (5.0, 5.0), (5.0, 5.0)) is None


def test_nearly_colinear_control_point_is_degenerate():
    assert circle_from_three_points((0.0, 0.0), (200.0, 0.0), (100.0, 1e-9)) is None


def test_non_finite_points_are_degenerate():
    assert circle_from_three_points((0.0, 0.0), (200.0, 0.0), (math.inf, 0.0)) is None
    assert circle_from_three_points((0.0, 0.0), (200.0, 0.0), (math.nan, math.inf)) is None
