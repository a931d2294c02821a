"""Core data structures for the connection engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

Point = Tuple[float, float]

SQUARE_SHRINK = 0.85
DEFAULT_ORIENTATION = -math.pi / 2


class UnsupportedShapeError(ValueError):
    """Raised when a shape tag or kind has no boundary implementation."""


class ShapeKind(Enum):
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    SQUARE = "square"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"

    @property
    def vertex_count(self) -> int:
        return _VERTEX_COUNTS[self]

    @classmethod
    def from_tag(cls, tag: object) -> "ShapeKind":
        """Return the kind for an editor shape tag such as ``"dot"`` or ``"hexagon"``."""

        if isinstance(tag, ShapeKind):
            return tag
        if not isinstance(tag, str):
            raise UnsupportedShapeError(f"shape tag must be a string, got {tag!r}")
        key = tag.strip().lower()
        if key in _TAG_ALIASES:
            return _TAG_ALIASES[key]
        raise UnsupportedShapeError(f"unsupported shape tag {tag!r}")


_VERTEX_COUNTS = {
    ShapeKind.CIRCLE: 0,
    ShapeKind.TRIANGLE: 3,
    ShapeKind.SQUARE: 4,
    ShapeKind.PENTAGON: 5,
    ShapeKind.HEXAGON: 6,
}

_TAG_ALIASES = {kind.value: kind for kind in ShapeKind}
_TAG_ALIASES["dot"] = ShapeKind.CIRCLE


def as_point(value: Sequence[float]) -> Point:
    x = float(value[0])
    y = float(value[1])
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"point coordinates must be finite, got {value!r}")
    return (x, y)


@dataclass(frozen=True)
class ShapeDescriptor:
    """Geometry of a single node: where it is, how big, and which outline."""

    center: Point
    circumradius: float
    kind: ShapeKind = ShapeKind.CIRCLE
    vertex_orientation: float = DEFAULT_ORIENTATION

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", as_point(self.center))
        object.__setattr__(self, "kind", ShapeKind.from_tag(self.kind))
        radius = float(self.circumradius)
        if not math.isfinite(radius) or radius < 0.0:
            raise ValueError(f"circumradius must be finite and non-negative, got {self.circumradius!r}")
        object.__setattr__(self, "circumradius", radius)
        object.__setattr__(self, "vertex_orientation", float(self.vertex_orientation))

    @property
    def x(self) -> float:
        return self.center[0]

    @property
    def y(self) -> float:
        return self.center[1]


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float


class LinkKind(Enum):
    LINK = "Link"
    SELF_LINK = "SelfLink"
    START_LINK = "StartLink"


@dataclass
class LinkGeometryRequest:
    """Everything the resolver needs to place one link.

    ``perpendicular_offset == 0`` requests a straight link between ``node_a``
    and ``node_b``. Self links use ``node_a`` and ``anchor_angle``; entry
    arrows use ``node_a`` and ``external_anchor``.
    """

    node_a: ShapeDescriptor
    node_b: Optional[ShapeDescriptor] = None
    parallel_offset: float = 0.5
    perpendicular_offset: float = 0.0
    is_self_link: bool = False
    is_entry_arrow: bool = False
    external_anchor: Optional[Point] = None
    anchor_angle: float = 0.0

    def __post_init__(self) -> None:
        for name in ("parallel_offset", "perpendicular_offset", "anchor_angle"):
            value = float(getattr(self, name))
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")
            setattr(self, name, value)
        if self.external_anchor is not None:
            self.external_anchor = as_point(self.external_anchor)

    @property
    def kind(self) -> LinkKind:
        if self.is_entry_arrow:
            return LinkKind.START_LINK
        if self.is_self_link:
            return LinkKind.SELF_LINK
        return LinkKind.LINK


@dataclass(frozen=True)
class ConnectionResult:
    """Resolved geometry of a link, ready for drawing and hit testing."""

    start: Point
    end: Point
    kind: LinkKind = LinkKind.LINK
    has_arc: bool = False
    start_angle: Optional[float] = None
    end_angle: Optional[float] = None
    arc_center: Optional[Point] = None
    arc_radius: Optional[float] = None
    is_reversed: bool = False
    arrow_angle: float = 0.0
    anchor_angle: Optional[float] = None

    @property
    def reverse_scale(self) -> float:
        return 1.0 if self.is_reversed else -1.0


__all__ = [
    "Point",
    "SQUARE_SHRINK",
    "DEFAULT_ORIENTATION",
    "UnsupportedShapeError",
    "ShapeKind",
    "ShapeDescriptor",
    "Circle",
    "LinkKind",
    "LinkGeometryRequest",
    "ConnectionResult",
    "as_point",
]
