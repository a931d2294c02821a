from .types import (
    Circle,
    ConnectionResult,
    LinkGeometryRequest,
    LinkKind,
    Point,
    ShapeDescriptor,
    ShapeKind,
    UnsupportedShapeError,
)
from .config import EngineConfig, get_engine_config, set_engine_config
from .segment import closest_point_on_segment
from .circumcircle import circle_from_three_points
from .polygon import closest_point_on_polygon, point_in_polygon, polygon_vertices
from .shapes import (
    closest_point_on_shape,
    contains_point,
    inset_shape,
    intersects_rectangle,
    shape_outline,
)
from .arc import ArcEndpoints, arc_anchor_point, arc_endpoints
from .connection import (
    resolve,
    resolve_link,
    resolve_self_link,
    resolve_start_link,
    resolve_straight_link,
)
from .anchors import (
    LinkOffsets,
    link_offsets_from_point,
    self_link_anchor_angle,
    self_link_mouse_offset,
    snap_position,
    start_link_offset,
)
from .hit_testing import link_contains_point
from .labels import arrowhead_points, label_anchor, place_text
from .scene import (
    DEFAULT_NODE_RADIUS,
    Scene,
    SceneError,
    SceneLink,
    SceneNode,
    load_scene,
    resolve_scene,
    scene_from_dict,
)

__all__ = [
    'Circle',
    'ConnectionResult',
    'LinkGeometryRequest',
    'LinkKind',
    'Point',
    'ShapeDescriptor',
    'ShapeKind',
    'UnsupportedShapeError',
    'EngineConfig',
    'get_engine_config',
    'set_engine_config',
    'closest_point_on_segment',
    'circle_from_three_points',
    'closest_point_on_polygon',
    'point_in_polygon',
    'polygon_vertices',
    'closest_point_on_shape',
    'contains_point',
    'inset_shape',
    'intersects_rectangle',
    'shape_outline',
    'ArcEndpoints',
    'arc_anchor_point',
    'arc_endpoints',
    'resolve',
    'resolve_link',
    'resolve_self_link',
    'resolve_start_link',
    'resolve_straight_link',
    'LinkOffsets',
    'link_offsets_from_point',
    'self_link_anchor_angle',
    'self_link_mouse_offset',
    'snap_position',
    'start_link_offset',
    'link_contains_point',
    'arrowhead_points',
    'label_anchor',
    'place_text',
    'DEFAULT_NODE_RADIUS',
    'Scene',
    'SceneError',
    'SceneLink',
    'SceneNode',
    'load_scene',
    'resolve_scene',
    'scene_from_dict',
]
