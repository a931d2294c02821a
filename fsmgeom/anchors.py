"""Convert dragged handle positions back into link parameters.

These are the inverses of the constructions in :mod:`fsmgeom.arc` and
:mod:`fsmgeom.connection`, with the editor's snapping rules applied.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from .config import EngineConfig, resolve_config
from .types import Point

_EPS = 1e-12


@dataclass(frozen=True)
class LinkOffsets:
    parallel_offset: float
    perpendicular_offset: float
    line_angle_adjust: float = 0.0

    @property
    def is_straight(self) -> bool:
        return self.perpendicular_offset == 0


def link_offsets_from_point(
    a: Sequence[float],
    b: Sequence[float],
    point: Sequence[float],
    *,
    line_angle_adjust: float = 0.0,
    config: Optional[EngineConfig] = None,
) -> LinkOffsets:
    """Return the offsets that put the link's control point at ``point``.

    A control point within ``snap_to_padding`` of the segment ``ab`` snaps
    the link straight; ``line_angle_adjust`` then records which side the
    handle was on so the label keeps facing the same way.
    """

    cfg = resolve_config(config)
    ax, ay = float(a[0]), float(a[1])
    dx = float(b[0]) - ax
    dy = float(b[1]) - ay
    length_sq = dx * dx + dy * dy
    if length_sq <= _EPS:
        return LinkOffsets(0.5, 0.0, line_angle_adjust)
    length = math.sqrt(length_sq)
    px = float(point[0]) - ax
    py = float(point[1]) - ay
    parallel = (dx * px + dy * py) / length_sq
    perpendicular = (dx * py - dy * px) / length
    if 0.0 < parallel < 1.0 and abs(perpendicular) < cfg.snap_to_padding:
        line_angle_adjust = math.pi if perpendicular < 0 else 0.0
        perpendicular = 0.0
    return LinkOffsets(parallel, perpendicular, line_angle_adjust)


def self_link_mouse_offset(center: Sequence[float], point: Sequence[float], anchor_angle: float) -> float:
    """Angle between the loop and the grab point, kept constant while dragging."""

    return anchor_angle - math.atan2(float(point[1]) - float(center[1]), float(point[0]) - float(center[0]))


def self_link_anchor_angle(
    center: Sequence[float],
    point: Sequence[float],
    mouse_offset_angle: float = 0.0,
    *,
    config: Optional[EngineConfig] = None,
) -> float:
    """Return the loop angle for a handle dragged to ``point``.

    Snaps to the nearest quarter turn within ``self_link_snap_angle`` radians
    and keeps the result in ``[-pi, pi]``.
    """

    cfg = resolve_config(config)
    angle = math.atan2(float(point[1]) - float(center[1]), float(point[0]) - float(center[0])) + mouse_offset_angle
    quarter = math.pi / 2
    snapped = round(angle / quarter) * quarter
    if abs(angle - snapped) < cfg.self_link_snap_angle:
        angle = snapped
    if angle < -math.pi:
        angle += 2 * math.pi
    if angle > math.pi:
        angle -= 2 * math.pi
    return angle


def start_link_offset(
    center: Sequence[float],
    point: Sequence[float],
    *,
    config: Optional[EngineConfig] = None,
) -> Tuple[float, float]:
    """Offset of an entry arrow's tail from the node center, axis-snapped."""

    cfg = resolve_config(config)
    dx = float(point[0]) - float(center[0])
    dy = float(point[1]) - float(center[1])
    if abs(dx) < cfg.snap_to_padding:
        dx = 0.0
    if abs(dy) < cfg.snap_to_padding:
        dy = 0.0
    return dx, dy


def snap_position(
    position: Sequence[float],
    others: Iterable[Sequence[float]],
    *,
    config: Optional[EngineConfig] = None,
) -> Point:
    """Align ``position`` with any other node center that is nearly level or plumb."""

    cfg = resolve_config(config)
    x, y = float(position[0]), float(position[1])
    for other in others:
        ox, oy = float(other[0]), float(other[1])
        if abs(x - ox) < cfg.snap_to_padding:
            x = ox
        if abs(y - oy) < cfg.snap_to_padding:
            y = oy
    return (x, y)


__all__ = [
    "LinkOffsets",
    "link_offsets_from_point",
    "self_link_anchor_angle",
    "self_link_mouse_offset",
    "snap_position",
    "start_link_offset",
]
