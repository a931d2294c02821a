import argparse
import logging
import math
import sys
from typing import Optional, Sequence

from fsmgeom import (
    DEFAULT_NODE_RADIUS,
    SceneError,
    label_anchor,
    load_scene,
    resolve_scene,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _fmt_point(point) -> str:
    return f"({point[0]:.3f}, {point[1]:.3f})"


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Report link geometry of an exported state diagram")
    parser.add_argument("path", help="Path to the diagram JSON export")
    parser.add_argument(
        "--node-radius",
        type=float,
        default=DEFAULT_NODE_RADIUS,
        help=f"Circumradius used for every node (default: {DEFAULT_NODE_RADIUS:g})",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    logger.info("Loading scene from %s", args.path)
    try:
        scene = load_scene(args.path, node_radius=args.node_radius)
    except (OSError, SceneError, ValueError) as exc:
        logger.error("Cannot load scene: %s", exc)
        raise SystemExit(1)

    print(f"Nodes: {len(scene.nodes)}")
    for node in scene.nodes:
        shape = node.shape
        print(f"  [{node.id}] {shape.kind.value} at {_fmt_point(shape.center)} {node.text!r}")

    print(f"Links: {len(scene.links)}")
    for idx, (link, result) in enumerate(resolve_scene(scene)):
        print(f"  [{idx}] {link.type} {link.text!r}")
        print(f"    start: {_fmt_point(result.start)}")
        print(f"    end: {_fmt_point(result.end)}")
        if result.has_arc:
            print(
                f"    arc: center={_fmt_point(result.arc_center)} radius={result.arc_radius:.3f} "
                f"angles=({result.start_angle:.4f}, {result.end_angle:.4f}) reversed={result.is_reversed}"
            )
        print(f"    arrow: {math.degrees(result.arrow_angle):.2f} deg")
        label_pos, label_angle = label_anchor(result, link.line_angle_adjust)
        print(f"    label: {_fmt_point(label_pos)} at {math.degrees(label_angle):.2f} deg")


if __name__ == "__main__":
    main(sys.argv[1:])
