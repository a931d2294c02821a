"""Regular-polygon outlines and boundary queries.

Vertices are generated on demand from a :class:`ShapeDescriptor` and never
stored. Triangles, pentagons and hexagons use the polar rule
``center + r * (cos(theta_i), sin(theta_i))`` with
``theta_i = orientation + 2*pi*i/n``. Squares are an axis-aligned box whose
half-width is ``0.85 * r`` so they read the same size as the other shapes on
screen; they are not a rotated polar square.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .segment import closest_points_on_segments
from .types import SQUARE_SHRINK, Point, ShapeDescriptor, ShapeKind, UnsupportedShapeError


def regular_polygon_vertices(
    center: Sequence[float], radius: float, sides: int, orientation: float
) -> np.ndarray:
    angles = orientation + 2.0 * np.pi * np.arange(sides) / sides
    cx, cy = float(center[0]), float(center[1])
    return np.column_stack((cx + radius * np.cos(angles), cy + radius * np.sin(angles)))


def square_vertices(center: Sequence[float], radius: float) -> np.ndarray:
    half = radius * SQUARE_SHRINK
    cx, cy = float(center[0]), float(center[1])
    return np.array(
        [
            [cx - half, cy - half],
            [cx + half, cy - half],
            [cx + half, cy + half],
            [cx - half, cy + half],
        ],
        dtype=float,
    )


def polygon_vertices(shape: ShapeDescriptor) -> np.ndarray:
    """Return the ``(n, 2)`` vertex array of a polygonal ``shape``."""

    kind = shape.kind
    if kind is ShapeKind.SQUARE:
        return square_vertices(shape.center, shape.circumradius)
    if kind in (ShapeKind.TRIANGLE, ShapeKind.PENTAGON, ShapeKind.HEXAGON):
        return regular_polygon_vertices(
            shape.center, shape.circumradius, kind.vertex_count, shape.vertex_orientation
        )
    raise UnsupportedShapeError(f"{kind} has no polygon outline")


def closest_point_on_polygon(query: Sequence[float], vertices: np.ndarray) -> Point:
    """Return the perimeter point of ``vertices`` nearest to ``query``.

    Every edge ``(v[i], v[i+1 mod n])`` is tested; on equal distances the
    earliest edge in vertex order wins.
    """

    verts = np.asarray(vertices, dtype=float)
    if len(verts) == 0:
        return (float(query[0]), float(query[1]))
    points, dists = closest_points_on_segments(query, verts, np.roll(verts, -1, axis=0))
    best = int(np.argmin(dists))
    return (float(points[best, 0]), float(points[best, 1]))


def point_in_polygon(query: Sequence[float], vertices: np.ndarray) -> bool:
    """Even-odd ray casting test; points on the outline may go either way."""

    px, py = float(query[0]), float(query[1])
    verts: List[Point] = [(float(v[0]), float(v[1])) for v in np.asarray(vertices, dtype=float)]
    inside = False
    j = len(verts) - 1
    for i in range(len(verts)):
        xi, yi = verts[i]
        xj, yj = verts[j]
        if (yi > py) != (yj > py):
            cross_x = (xj - xi) * (py - yi) / (yj - yi) + xi
            if px < cross_x:
                inside = not inside
        j = i
    return inside


__all__ = [
    "closest_point_on_polygon",
    "point_in_polygon",
    "polygon_vertices",
    "regular_polygon_vertices",
    "square_vertices",
]
