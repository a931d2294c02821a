"""Point-on-link tests against resolved link geometry."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from .config import EngineConfig, resolve_config
from .types import ConnectionResult, LinkKind

_EPS = 1e-12


def segment_contains_point(
    start: Sequence[float], end: Sequence[float], point: Sequence[float], padding: float
) -> bool:
    """``True`` when ``point`` projects strictly inside the segment within ``padding``."""

    sx, sy = float(start[0]), float(start[1])
    dx = float(end[0]) - sx
    dy = float(end[1]) - sy
    length_sq = dx * dx + dy * dy
    if length_sq <= _EPS:
        return False
    length = math.sqrt(length_sq)
    px = float(point[0]) - sx
    py = float(point[1]) - sy
    percent = (dx * px + dy * py) / length_sq
    offset = (dx * py - dy * px) / length
    return 0.0 < percent < 1.0 and abs(offset) < padding


def arc_contains_point(result: ConnectionResult, point: Sequence[float], padding: float) -> bool:
    """``True`` when ``point`` is within ``padding`` of the drawn arc span."""

    if result.arc_center is None or result.arc_radius is None:
        return False
    dx = float(point[0]) - result.arc_center[0]
    dy = float(point[1]) - result.arc_center[1]
    if abs(math.hypot(dx, dy) - result.arc_radius) >= padding:
        return False
    if result.start_angle is None or result.end_angle is None:
        return False

    angle = math.atan2(dy, dx)
    start_angle = result.start_angle
    end_angle = result.end_angle
    if result.is_reversed:
        start_angle, end_angle = end_angle, start_angle
    if end_angle < start_angle:
        end_angle += 2 * math.pi
    if angle < start_angle:
        angle += 2 * math.pi
    elif angle > end_angle:
        angle -= 2 * math.pi
    return start_angle < angle < end_angle


def link_contains_point(
    result: ConnectionResult,
    point: Sequence[float],
    *,
    config: Optional[EngineConfig] = None,
) -> bool:
    """Return ``True`` when ``point`` hits the link described by ``result``.

    Self loops accept any point near their loop circle, since the loop covers
    almost all of it.
    """

    padding = resolve_config(config).hit_target_padding
    if result.kind is LinkKind.SELF_LINK:
        if result.arc_center is None or result.arc_radius is None:
            return False
        distance = math.hypot(float(point[0]) - result.arc_center[0], float(point[1]) - result.arc_center[1])
        return abs(distance - result.arc_radius) < padding
    if result.has_arc:
        return arc_contains_point(result, point, padding)
    return segment_contains_point(result.start, result.end, point, padding)


__all__ = ["arc_contains_point", "link_contains_point", "segment_contains_point"]
