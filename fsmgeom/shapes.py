"""Shape boundary dispatch.

:func:`closest_point_on_shape` is the only place that turns a node shape into
a boundary point. Link geometry (straight, curved, self-loop and entry
arrows) always goes through it so polygon nodes are never treated as circles.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Callable, Dict, List, Sequence, Tuple

import numpy as np

from .polygon import closest_point_on_polygon, point_in_polygon, polygon_vertices
from .types import SQUARE_SHRINK, Point, ShapeDescriptor, ShapeKind, UnsupportedShapeError

logger = logging.getLogger(__name__)

Rect = Tuple[float, float, float, float]

_EPS = 1e-12
_FALLBACK_DIRECTION = (1.0, 0.0)


def closest_point_on_circle(query: Sequence[float], center: Sequence[float], radius: float) -> Point:
    cx, cy = float(center[0]), float(center[1])
    dx = float(query[0]) - cx
    dy = float(query[1]) - cy
    length = math.hypot(dx, dy)
    if length <= _EPS:
        logger.debug("Query at circle center %s; using fallback direction", (cx, cy))
        ux, uy = _FALLBACK_DIRECTION
    else:
        ux, uy = dx / length, dy / length
    return (cx + ux * radius, cy + uy * radius)


def _circle_boundary(query: Sequence[float], shape: ShapeDescriptor) -> Point:
    return closest_point_on_circle(query, shape.center, shape.circumradius)


def _polygon_boundary(query: Sequence[float], shape: ShapeDescriptor) -> Point:
    return closest_point_on_polygon(query, polygon_vertices(shape))


_BOUNDARY_HANDLERS: Dict[ShapeKind, Callable[[Sequence[float], ShapeDescriptor], Point]] = {
    ShapeKind.CIRCLE: _circle_boundary,
    ShapeKind.TRIANGLE: _polygon_boundary,
    ShapeKind.SQUARE: _polygon_boundary,
    ShapeKind.PENTAGON: _polygon_boundary,
    ShapeKind.HEXAGON: _polygon_boundary,
}

_unhandled = set(ShapeKind) - set(_BOUNDARY_HANDLERS)
if _unhandled:  # pragma: no cover - guards edits to ShapeKind
    raise UnsupportedShapeError(f"no boundary handler for {sorted(k.value for k in _unhandled)}")


def closest_point_on_shape(query: Sequence[float], shape: ShapeDescriptor) -> Point:
    """Return the point on ``shape``'s outline nearest to ``query``."""

    try:
        handler = _BOUNDARY_HANDLERS[shape.kind]
    except KeyError:
        raise UnsupportedShapeError(f"unsupported shape kind {shape.kind!r}") from None
    return handler(query, shape)


def shape_outline(shape: ShapeDescriptor) -> List[Point]:
    """Vertices to stroke for ``shape``; empty for circles."""

    if shape.kind is ShapeKind.CIRCLE:
        return []
    return [(float(x), float(y)) for x, y in polygon_vertices(shape)]


def contains_point(query: Sequence[float], shape: ShapeDescriptor) -> bool:
    """Return ``True`` when ``query`` lies strictly inside ``shape``."""

    px, py = float(query[0]), float(query[1])
    cx, cy = shape.center
    r = shape.circumradius
    if shape.kind is ShapeKind.CIRCLE:
        return (px - cx) ** 2 + (py - cy) ** 2 < r * r
    if shape.kind is ShapeKind.SQUARE:
        half = r * SQUARE_SHRINK
        return abs(px - cx) < half and abs(py - cy) < half
    return point_in_polygon((px, py), polygon_vertices(shape))


def inset_shape(shape: ShapeDescriptor, margin: float) -> ShapeDescriptor:
    """Return the inner outline drawn for accept states."""

    return replace(shape, circumradius=max(shape.circumradius - float(margin), 0.0))


def _normalize_rect(rect: Rect) -> Rect:
    left, top, right, bottom = (float(v) for v in rect)
    return (min(left, right), min(top, bottom), max(left, right), max(top, bottom))


def _projection_gap(axis: np.ndarray, a: np.ndarray, b: np.ndarray) -> bool:
    pa = a @ axis
    pb = b @ axis
    return bool(pa.max() < pb.min() or pb.max() < pa.min())


def intersects_rectangle(shape: ShapeDescriptor, rect: Rect) -> bool:
    """Return ``True`` when ``shape`` overlaps the selection rectangle.

    ``rect`` is ``(left, top, right, bottom)``; the edges are inclusive.
    """

    left, top, right, bottom = _normalize_rect(rect)
    cx, cy = shape.center
    if shape.kind is ShapeKind.CIRCLE:
        nearest_x = max(left, min(cx, right))
        nearest_y = max(top, min(cy, bottom))
        return (cx - nearest_x) ** 2 + (cy - nearest_y) ** 2 <= shape.circumradius ** 2

    poly = polygon_vertices(shape)
    box = np.array([[left, top], [right, top], [right, bottom], [left, bottom]], dtype=float)
    # Both outlines are convex, so a separating axis exists iff they are disjoint.
    axes = [np.array([1.0, 0.0]), np.array([0.0, 1.0])]
    edges = np.roll(poly, -1, axis=0) - poly
    for ex, ey in edges:
        if ex * ex + ey * ey > _EPS:
            axes.append(np.array([-ey, ex]))
    return not any(_projection_gap(axis, poly, box) for axis in axes)


__all__ = [
    "Rect",
    "closest_point_on_circle",
    "closest_point_on_shape",
    "contains_point",
    "inset_shape",
    "intersects_rectangle",
    "shape_outline",
]
