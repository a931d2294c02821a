import math

import numpy as np

from fsmgeom.segment import closest_point_on_segment, closest_points_on_segments, distance, midpoint


def test_projection_inside_segment():
    assert closest_point_on_segment((1.0, 5.0), (0.0, 0.0), (2.0, 0.0)) == (1.0, 0.0)


def test_projection_clamps_to_endpoints():
    assert closest_point_on_segment((5.0, 1.0), (0.0, 0.0), (2.0, 0.0)) == (2.0, 0.0)
    assert closest_point_on_segment((-3.0, 2.0), (0.0, 0.0), (2.0, 0.0)) == (0.0, 0.0)


def test_collapsed_segment_returns_first_endpoint():
    assert closest_point_on_segment((4.0, 4.0), (1.0, 2.0), (1.0, 2.0)) == (1.0, 2.0)


def test_vectorised_matches_scalar():
    starts = np.array([[0.0, 0.0], [2.0, 0.0], [3.0, 3.0]])
    ends = np.array([[2.0, 0.0], [2.0, 2.0], [3.0, 3.0]])
    query = (3.5, 1.0)
    points, dists = closest_points_on_segments(query, starts, ends)
    for start, end, point, dist in zip(starts, ends, points, dists):
        expected = closest_point_on_segment(query, start, end)
        assert math.isclose(point[0], expected[0], abs_tol=1e-12)
        assert math.isclose(point[1], expected[1], abs_tol=1e-12)
        assert math.isclose(dist, distance(query, expected), abs_tol=1e-12)


def test_midpoint_and_distance():
    assert midpoint((0.0, 0.0), (200.0, 10.0)) == (100.0, 5.0)
    assert distance((0.0, 0.0), (3.0, 4.0)) == 5.0
