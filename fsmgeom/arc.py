"""Where a curved link's arc meets its end nodes.

The arc is the circle through both node centers and a control point. Each
end is first estimated on the arc by stepping ``node_radius / arc_radius``
radians away from the node center, then snapped onto the node's real outline
with :func:`closest_point_on_shape`. For circles the snap is exact. For
polygons it is the outline point nearest to the estimate, not the analytic
arc/edge crossing, which is close enough for drawing but can sit slightly
off the stroke on tight curves around small polygons.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from .circumcircle import circle_from_three_points
from .shapes import closest_point_on_shape
from .types import Circle, Point, ShapeDescriptor

logger = logging.getLogger(__name__)

_EPS = 1e-12


@dataclass(frozen=True)
class ArcEndpoints:
    start: Point
    end: Point
    start_angle: float
    end_angle: float
    circle: Circle
    is_reversed: bool

    @property
    def reverse_scale(self) -> float:
        return 1.0 if self.is_reversed else -1.0


def arc_anchor_point(
    a: Sequence[float],
    b: Sequence[float],
    parallel_offset: float,
    perpendicular_offset: float,
) -> Optional[Point]:
    """Return the curvature control point of a link from ``a`` to ``b``.

    ``parallel_offset`` is the fraction of the way from ``a`` to ``b``;
    ``perpendicular_offset`` is the signed distance off the line, positive to
    the left of ``a -> b`` in screen coordinates. ``None`` when ``a == b``.
    """

    ax, ay = float(a[0]), float(a[1])
    dx = float(b[0]) - ax
    dy = float(b[1]) - ay
    length = math.hypot(dx, dy)
    if length <= _EPS:
        return None
    return (
        ax + dx * parallel_offset - dy * perpendicular_offset / length,
        ay + dy * parallel_offset + dx * perpendicular_offset / length,
    )


def point_on_circle(circle: Circle, angle: float) -> Point:
    cx, cy = circle.center
    return (cx + circle.radius * math.cos(angle), cy + circle.radius * math.sin(angle))


def arc_endpoints(
    node_a: ShapeDescriptor,
    node_b: ShapeDescriptor,
    parallel_offset: float,
    perpendicular_offset: float,
) -> Optional[ArcEndpoints]:
    """Estimate where the arc of a curved link crosses both node outlines.

    Returns ``None`` when no arc exists (coincident centers or a control
    point on the center line); callers draw a straight link instead.
    """

    anchor = arc_anchor_point(node_a.center, node_b.center, parallel_offset, perpendicular_offset)
    if anchor is None:
        logger.debug("Curved link between coincident centers %s", node_a.center)
        return None
    circle = circle_from_three_points(node_a.center, node_b.center, anchor)
    if circle is None or not math.isfinite(circle.radius) or circle.radius <= _EPS:
        return None

    is_reversed = perpendicular_offset > 0
    reverse_scale = 1.0 if is_reversed else -1.0
    cx, cy = circle.center
    start_angle = math.atan2(node_a.y - cy, node_a.x - cx) - reverse_scale * node_a.circumradius / circle.radius
    end_angle = math.atan2(node_b.y - cy, node_b.x - cx) + reverse_scale * node_b.circumradius / circle.radius

    start = closest_point_on_shape(point_on_circle(circle, start_angle), node_a)
    end = closest_point_on_shape(point_on_circle(circle, end_angle), node_b)
    return ArcEndpoints(
        start=start,
        end=end,
        start_angle=start_angle,
        end_angle=end_angle,
        circle=circle,
        is_reversed=is_reversed,
    )


__all__ = ["ArcEndpoints", "arc_anchor_point", "arc_endpoints", "point_on_circle"]
