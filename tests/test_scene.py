import json

import pytest

from fsmgeom import LinkKind, ShapeKind, SceneError, load_scene, resolve_scene, scene_from_dict


def _export():
    return {
        "version": "1.0",
        "nodes": [
            {"id": 0, "x": 100, "y": 100, "text": "q0", "shape": "dot", "color": "yellow"},
            {"id": 1, "x": 300, "y": 100, "text": "q1", "shape": "square", "color": "blue"},
        ],
        "links": [
            {"type": "Link", "nodeA": 0, "nodeB": 1, "parallelPart": 0.5, "perpendicularPart": 0, "text": "a"},
            {"type": "SelfLink", "node": 1, "anchorAngle": 0, "text": "b"},
            {"type": "StartLink", "node": 0, "deltaX": -80, "deltaY": 0, "text": ""},
        ],
        "legend": {"yellow_dot": "initial"},
    }


def test_scene_from_export():
    scene = scene_from_dict(_export())
    assert [node.shape.kind for node in scene.nodes] == [ShapeKind.CIRCLE, ShapeKind.SQUARE]
    assert scene.nodes[0].text == "q0"
    assert [link.type for link in scene.links] == ["Link", "SelfLink", "StartLink"]
    assert scene.links[2].request.external_anchor == (20.0, 100.0)


def test_resolve_scene():
    resolved = resolve_scene(scene_from_dict(_export()))
    assert len(resolved) == 3
    (_, straight), (_, loop), (_, entry) = resolved
    assert straight.start == pytest.approx((130.0, 100.0))
    assert straight.end == pytest.approx((274.5, 100.0))
    assert loop.kind is LinkKind.SELF_LINK
    assert entry.end == pytest.approx((70.0, 100.0))


def test_node_radius_is_applied_to_every_node():
    scene = scene_from_dict(_export(), node_radius=20.0)
    assert {node.shape.circumradius for node in scene.nodes} == {20.0}


def test_unknown_shape_is_rejected():
    data = _export()
    data["nodes"][0]["shape"] = "star"
    with pytest.raises(SceneError, match="node 0"):
        scene_from_dict(data)


def test_unknown_node_reference_is_rejected():
    data = _export()
    data["links"][0]["nodeB"] = 7
    with pytest.raises(SceneError, match="unknown node"):
        scene_from_dict(data)


def test_missing_coordinates_are_rejected():
    with pytest.raises(SceneError, match="'y'"):
        scene_from_dict({"nodes": [{"x": 1}], "links": []})


def test_load_scene(tmp_path):
    path = tmp_path / "diagram.json"
    path.write_text(json.dumps(_export()), encoding="utf-8")
    assert len(load_scene(path).links) == 3

    broken = tmp_path / "broken.json"
    broken.write_text("{nodes", encoding="utf-8")
    with pytest.raises(SceneError):
        load_scene(broken)


def test_unknown_link_type_is_rejected():
    data = _export()
    data["links"].append({"type": "Mystery", "node": 0})
    with pytest.raises(SceneError, match="unknown link type 'Mystery'"):
        scene_from_dict(data)


def test_start_link_without_offset_sits_left_of_the_node():
    data = {"nodes": [{"id": 0, "x": 100, "y": 100}], "links": [{"type": "StartLink", "node": 0}]}
    scene = scene_from_dict(data)
    assert scene.links[0].request.external_anchor == (50.0, 100.0)

    (_, entry), = resolve_scene(scene)
    assert entry.start == pytest.approx((50.0, 100.0))
    assert entry.end == pytest.approx((70.0, 100.0))
    assert entry.arrow_angle == pytest.approx(0.0)


def test_null_fields_fall_back_to_defaults():
    data = _export()
    data["links"][0]["perpendicularPart"] = None
    data["links"][0]["lineAngleAdjust"] = None
    data["links"][2]["deltaY"] = None
    scene = scene_from_dict(data)
    assert scene.links[0].request.perpendicular_offset == 0.0
    assert scene.links[0].line_angle_adjust == 0.0
    assert scene.links[2].request.external_anchor == (20.0, 100.0)


def test_null_coordinates_are_still_required():
    with pytest.raises(SceneError, match="missing 'x'"):
        scene_from_dict({"nodes": [{"x": None, "y": 1}], "links": []})


def test_non_finite_offsets_are_rejected():
    data = _export()
    data["links"][0]["perpendicularPart"] = float("inf")
    with pytest.raises(SceneError, match="must be finite"):
        scene_from_dict(data)
