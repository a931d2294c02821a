"""Resolve link geometry for every link variant of the editor.

Each ``resolve_*`` function reads node descriptors and link parameters and
returns a :class:`ConnectionResult`. Boundary points always come from
:func:`closest_point_on_shape`, either directly or through the arc
approximation in :mod:`fsmgeom.arc`.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from .arc import arc_endpoints
from .config import EngineConfig, resolve_config
from .logging_utils import apply_debug_logging
from .segment import midpoint
from .shapes import closest_point_on_shape
from .types import ConnectionResult, LinkGeometryRequest, LinkKind, Point, ShapeDescriptor, as_point

logger = logging.getLogger(__name__)

_EPS = 1e-12


def _direction_angle(frm: Sequence[float], to: Sequence[float]) -> Optional[float]:
    dx = float(to[0]) - float(frm[0])
    dy = float(to[1]) - float(frm[1])
    if dx * dx + dy * dy <= _EPS:
        return None
    return math.atan2(dy, dx)


def _unwrap_near(angle: float, reference: float) -> float:
    return reference + (angle - reference + math.pi) % (2.0 * math.pi) - math.pi


def resolve_straight_link(node_a: ShapeDescriptor, node_b: ShapeDescriptor) -> ConnectionResult:
    """Connect two nodes with a segment aimed at the midpoint of their centers."""

    mid = midpoint(node_a.center, node_b.center)
    start = closest_point_on_shape(mid, node_a)
    end = closest_point_on_shape(mid, node_b)
    arrow = _direction_angle(start, end)
    if arrow is None:
        arrow = _direction_angle(node_a.center, node_b.center) or 0.0
    return ConnectionResult(start=start, end=end, kind=LinkKind.LINK, arrow_angle=arrow)


def resolve_link(
    node_a: ShapeDescriptor,
    node_b: ShapeDescriptor,
    parallel_offset: float = 0.5,
    perpendicular_offset: float = 0.0,
) -> ConnectionResult:
    """Resolve a transition from ``node_a`` to ``node_b``.

    ``perpendicular_offset == 0`` gives a straight link. Otherwise the link is
    an arc through both centers and the control point described by the two
    offsets; when that arc is degenerate the straight link is returned.
    Non-finite offsets raise ``ValueError``.
    """

    if not (math.isfinite(parallel_offset) and math.isfinite(perpendicular_offset)):
        raise ValueError(
            f"link offsets must be finite, got ({parallel_offset!r}, {perpendicular_offset!r})"
        )
    if perpendicular_offset == 0:
        return resolve_straight_link(node_a, node_b)

    arc = arc_endpoints(node_a, node_b, parallel_offset, perpendicular_offset)
    if arc is None:
        logger.debug("Falling back to a straight link for offsets (%s, %s)", parallel_offset, perpendicular_offset)
        return resolve_straight_link(node_a, node_b)

    return ConnectionResult(
        start=arc.start,
        end=arc.end,
        kind=LinkKind.LINK,
        has_arc=True,
        start_angle=arc.start_angle,
        end_angle=arc.end_angle,
        arc_center=arc.circle.center,
        arc_radius=arc.circle.radius,
        is_reversed=arc.is_reversed,
        arrow_angle=arc.end_angle - arc.reverse_scale * (math.pi / 2),
    )


def resolve_self_link(
    node: ShapeDescriptor,
    anchor_angle: float = 0.0,
    *,
    config: Optional[EngineConfig] = None,
) -> ConnectionResult:
    """Resolve a loop from ``node`` back to itself, centered on ``anchor_angle``.

    The loop circle sits ``self_loop_distance`` radii from the node center
    with a radius of ``self_loop_radius`` node radii. The loop meets the node
    where a synthetic query on either side of ``anchor_angle`` snaps onto the
    node outline.
    """

    cfg = resolve_config(config)
    r = node.circumradius
    distance = cfg.self_loop_distance * r
    loop_radius = cfg.self_loop_radius * r
    sweep = cfg.self_loop_sweep * math.pi
    spread = math.atan2(
        cfg.self_loop_radius * math.sin(sweep),
        cfg.self_loop_distance + cfg.self_loop_radius * math.cos(sweep),
    )

    cx, cy = node.center
    loop_center = (cx + distance * math.cos(anchor_angle), cy + distance * math.sin(anchor_angle))
    start_query = (cx + distance * math.cos(anchor_angle - spread), cy + distance * math.sin(anchor_angle - spread))
    end_query = (cx + distance * math.cos(anchor_angle + spread), cy + distance * math.sin(anchor_angle + spread))
    start = closest_point_on_shape(start_query, node)
    end = closest_point_on_shape(end_query, node)

    nominal_start = anchor_angle - sweep
    nominal_end = anchor_angle + sweep
    start_angle = _direction_angle(loop_center, start)
    end_angle = _direction_angle(loop_center, end)
    start_angle = nominal_start if start_angle is None else _unwrap_near(start_angle, nominal_start)
    end_angle = nominal_end if end_angle is None else _unwrap_near(end_angle, nominal_end)

    return ConnectionResult(
        start=start,
        end=end,
        kind=LinkKind.SELF_LINK,
        has_arc=True,
        start_angle=start_angle,
        end_angle=end_angle,
        arc_center=loop_center,
        arc_radius=loop_radius,
        is_reversed=False,
        arrow_angle=end_angle + cfg.self_loop_arrow_turn * math.pi,
        anchor_angle=anchor_angle,
    )


def resolve_start_link(node: ShapeDescriptor, external_anchor: Sequence[float]) -> ConnectionResult:
    """Resolve the entry arrow from ``external_anchor`` into ``node``.

    The arrow points along the drawn segment, from the anchor to the outline
    point it meets. The editor aimed it at the node center instead; the two
    agree for circles but differ by a few degrees on polygons when the
    anchor is off an axis of symmetry.
    """

    start: Point = as_point(external_anchor)
    end = closest_point_on_shape(start, node)
    arrow = _direction_angle(start, end)
    if arrow is None:
        arrow = _direction_angle(start, node.center) or 0.0
    return ConnectionResult(start=start, end=end, kind=LinkKind.START_LINK, arrow_angle=arrow)


def resolve(request: LinkGeometryRequest, *, config: Optional[EngineConfig] = None) -> ConnectionResult:
    """Dispatch ``request`` to the resolver of its link kind."""

    kind = request.kind
    if kind is LinkKind.START_LINK:
        if request.external_anchor is None:
            raise ValueError("entry arrow requests need an external_anchor")
        return resolve_start_link(request.node_a, request.external_anchor)
    if kind is LinkKind.SELF_LINK:
        return resolve_self_link(request.node_a, request.anchor_angle, config=config)
    if request.node_b is None:
        raise ValueError("link requests need node_b")
    return resolve_link(
        request.node_a,
        request.node_b,
        request.parallel_offset,
        request.perpendicular_offset,
    )


__all__ = [
    "resolve",
    "resolve_link",
    "resolve_self_link",
    "resolve_start_link",
    "resolve_straight_link",
]


apply_debug_logging(globals(), logger=logger)
