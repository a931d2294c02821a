"""Circle through three points, used for the supporting circle of curved links."""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from .types import Circle

logger = logging.getLogger(__name__)

_COLLINEAR_EPS = 1e-9


def circle_from_three_points(
    p1: Sequence[float], p2: Sequence[float], p3: Sequence[float]
) -> Optional[Circle]:
    """Return the circumcircle of ``p1``, ``p2``, ``p3``.

    Returns ``None`` when the points are colinear (or coincide) or when the
    determinant is not finite. The colinearity threshold scales with the
    squared extent of the points so the test behaves the same at any zoom
    level.
    """

    ax, ay = float(p1[0]), float(p1[1])
    bx, by = float(p2[0]), float(p2[1])
    cx, cy = float(p3[0]), float(p3[1])

    d = 2.0 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
    extent = max(abs(bx - ax), abs(by - ay), abs(cx - ax), abs(cy - ay), abs(cx - bx), abs(cy - by))
    if not math.isfinite(d) or abs(d) <= _COLLINEAR_EPS * max(extent * extent, 1.0):
        logger.debug("Degenerate circumcircle for %s, %s, %s", p1, p2, p3)
        return None

    a_sq = ax * ax + ay * ay
    b_sq = bx * bx + by * by
    c_sq = cx * cx + cy * cy
    ux = (a_sq * (by - cy) + b_sq * (cy - ay) + c_sq * (ay - by)) / d
    uy = (a_sq * (cx - bx) + b_sq * (ax - cx) + c_sq * (bx - ax)) / d
    radius = math.hypot(ax - ux, ay - uy)
    return Circle(center=(ux, uy), radius=radius)


__all__ = ["circle_from_three_points"]
