"""Read-only import of the editor's JSON export.

Only the fields that drive geometry are read: node positions and shapes, and
the parameters of ``Link``, ``SelfLink`` and ``StartLink`` entries. Text is
kept so diagnostics can name links; colors and legend data are ignored.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .config import EngineConfig
from .connection import resolve
from .types import ConnectionResult, LinkGeometryRequest, ShapeDescriptor, ShapeKind, UnsupportedShapeError

logger = logging.getLogger(__name__)

DEFAULT_NODE_RADIUS = 30.0
DEFAULT_START_DELTA_X = -50.0


class SceneError(ValueError):
    """Raised when an exported diagram cannot be interpreted."""


@dataclass
class SceneNode:
    id: int
    shape: ShapeDescriptor
    text: str = ""


@dataclass
class SceneLink:
    request: LinkGeometryRequest
    text: str = ""
    line_angle_adjust: float = 0.0
    source: Dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def type(self) -> str:
        return self.request.kind.value


@dataclass
class Scene:
    nodes: List[SceneNode] = field(default_factory=list)
    links: List[SceneLink] = field(default_factory=list)


def _number(entry: Mapping[str, Any], key: str, default: Optional[float] = None) -> float:
    value = entry.get(key)
    if value is None:
        if default is None:
            raise SceneError(f"missing {key!r} in {entry!r}")
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise SceneError(f"{key!r} must be a number in {entry!r}") from None
    if not math.isfinite(number):
        raise SceneError(f"{key!r} must be finite in {entry!r}")
    return number


def _parse_node(index: int, entry: Mapping[str, Any], node_radius: float) -> SceneNode:
    try:
        kind = ShapeKind.from_tag(entry.get("shape") or "circle")
    except UnsupportedShapeError as exc:
        raise SceneError(f"node {index}: {exc}") from exc
    node_id = entry.get("id", index)
    if not isinstance(node_id, int):
        raise SceneError(f"node {index}: id must be an integer, got {node_id!r}")
    shape = ShapeDescriptor(
        center=(_number(entry, "x"), _number(entry, "y")),
        circumradius=node_radius,
        kind=kind,
    )
    return SceneNode(id=node_id, shape=shape, text=str(entry.get("text") or ""))


def _lookup(nodes: Dict[int, SceneNode], entry: Mapping[str, Any], key: str) -> ShapeDescriptor:
    ref = entry.get(key)
    if not isinstance(ref, int) or ref not in nodes:
        raise SceneError(f"link references unknown node {ref!r} via {key!r}")
    return nodes[ref].shape


def _parse_link(nodes: Dict[int, SceneNode], entry: Mapping[str, Any]) -> SceneLink:
    link_type = entry.get("type")
    text = str(entry.get("text") or "")
    if link_type == "Link":
        request = LinkGeometryRequest(
            node_a=_lookup(nodes, entry, "nodeA"),
            node_b=_lookup(nodes, entry, "nodeB"),
            parallel_offset=_number(entry, "parallelPart", 0.5),
            perpendicular_offset=_number(entry, "perpendicularPart", 0.0),
        )
        return SceneLink(request, text, _number(entry, "lineAngleAdjust", 0.0), dict(entry))
    if link_type == "SelfLink":
        request = LinkGeometryRequest(
            node_a=_lookup(nodes, entry, "node"),
            is_self_link=True,
            anchor_angle=_number(entry, "anchorAngle", 0.0),
        )
        return SceneLink(request, text, source=dict(entry))
    if link_type == "StartLink":
        node = _lookup(nodes, entry, "node")
        anchor = (
            node.x + _number(entry, "deltaX", DEFAULT_START_DELTA_X),
            node.y + _number(entry, "deltaY", 0.0),
        )
        request = LinkGeometryRequest(node_a=node, is_entry_arrow=True, external_anchor=anchor)
        return SceneLink(request, text, source=dict(entry))
    raise SceneError(f"unknown link type {link_type!r}")


def scene_from_dict(data: Mapping[str, Any], *, node_radius: float = DEFAULT_NODE_RADIUS) -> Scene:
    """Build a :class:`Scene` from the decoded JSON export."""

    if not isinstance(data, Mapping):
        raise SceneError("scene must be a JSON object")
    raw_nodes = data.get("nodes") or []
    raw_links = data.get("links") or []
    if not isinstance(raw_nodes, list) or not isinstance(raw_links, list):
        raise SceneError("'nodes' and 'links' must be lists")

    scene = Scene()
    by_id: Dict[int, SceneNode] = {}
    for index, entry in enumerate(raw_nodes):
        if not isinstance(entry, Mapping):
            raise SceneError(f"node {index} must be an object")
        node = _parse_node(index, entry, node_radius)
        scene.nodes.append(node)
        by_id[node.id] = node

    for entry in raw_links:
        if not isinstance(entry, Mapping):
            raise SceneError(f"link entries must be objects, got {entry!r}")
        scene.links.append(_parse_link(by_id, entry))

    logger.info("Loaded scene with %d node(s) and %d link(s)", len(scene.nodes), len(scene.links))
    return scene


def load_scene(path: Union[str, Path], *, node_radius: float = DEFAULT_NODE_RADIUS) -> Scene:
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SceneError(f"{path}: invalid JSON ({exc})") from exc
    return scene_from_dict(data, node_radius=node_radius)


def resolve_scene(
    scene: Scene, *, config: Optional[EngineConfig] = None
) -> List[Tuple[SceneLink, ConnectionResult]]:
    return [(link, resolve(link.request, config=config)) for link in scene.links]


__all__ = [
    "DEFAULT_NODE_RADIUS",
    "Scene",
    "SceneError",
    "SceneLink",
    "SceneNode",
    "load_scene",
    "resolve_scene",
    "scene_from_dict",
]
