"""Arrowheads and label placement for resolved links."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from .config import EngineConfig, resolve_config
from .segment import midpoint
from .types import ConnectionResult, LinkKind, Point


def arrowhead_points(
    tip: Sequence[float], angle: float, *, config: Optional[EngineConfig] = None
) -> List[Point]:
    """Triangle of an arrowhead whose point is ``tip``, facing ``angle``."""

    cfg = resolve_config(config)
    x, y = float(tip[0]), float(tip[1])
    dx = math.cos(angle)
    dy = math.sin(angle)
    back_x = x - cfg.arrow_length * dx
    back_y = y - cfg.arrow_length * dy
    w = cfg.arrow_half_width
    return [
        (x, y),
        (back_x + w * dy, back_y - w * dx),
        (back_x - w * dy, back_y + w * dx),
    ]


def label_anchor(result: ConnectionResult, line_angle_adjust: float = 0.0) -> Tuple[Point, float]:
    """Return where a link's label is anchored and the angle it leans away at."""

    if result.kind is LinkKind.START_LINK:
        angle = math.atan2(result.start[1] - result.end[1], result.start[0] - result.end[0])
        return result.start, angle

    if result.has_arc and result.arc_center is not None and result.arc_radius is not None:
        cx, cy = result.arc_center
        radius = result.arc_radius
        if result.kind is LinkKind.SELF_LINK:
            if result.anchor_angle is not None:
                angle = result.anchor_angle
            else:
                angle = ((result.start_angle or 0.0) + (result.end_angle or 0.0)) / 2
        else:
            start_angle = result.start_angle or 0.0
            end_angle = result.end_angle or 0.0
            if end_angle < start_angle:
                end_angle += 2 * math.pi
            angle = (start_angle + end_angle) / 2 + (math.pi if result.is_reversed else 0.0)
        return (cx + radius * math.cos(angle), cy + radius * math.sin(angle)), angle

    angle = math.atan2(result.end[0] - result.start[0], result.start[1] - result.end[1])
    return midpoint(result.start, result.end), angle + line_angle_adjust


def place_text(
    anchor: Sequence[float],
    angle: Optional[float],
    text_width: float,
    *,
    config: Optional[EngineConfig] = None,
) -> Point:
    """Return the center of a label of ``text_width`` drawn at ``anchor``.

    With an angle the label is pushed off the anchor toward the outside of
    the link, sliding around the corner of its bounding box so it never
    overlaps the stroke. Without one (node labels) it is simply centered.
    """

    cfg = resolve_config(config)
    x = float(anchor[0]) - text_width / 2
    y = float(anchor[1])
    if angle is not None:
        cos = math.cos(angle)
        sin = math.sin(angle)
        corner_x = (text_width / 2 + cfg.label_padding) * (1 if cos > 0 else -1)
        corner_y = (cfg.label_half_height + cfg.label_padding) * (1 if sin > 0 else -1)
        slide = sin * abs(sin) ** 40 * corner_x - cos * abs(cos) ** 10 * corner_y
        x += corner_x - sin * slide
        y += corner_y + cos * slide
    y += cfg.label_baseline
    return (x + text_width / 2, y)


__all__ = ["arrowhead_points", "label_anchor", "place_text"]
