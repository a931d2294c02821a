"""Example: connect differently shaped states and print where the links land."""

import math

from fsmgeom import (
    ShapeDescriptor,
    ShapeKind,
    arrowhead_points,
    label_anchor,
    resolve_link,
    resolve_self_link,
    resolve_start_link,
)

NODE_RADIUS = 30.0


def _fmt(point) -> str:
    return f"({point[0]:.2f}, {point[1]:.2f})"


def main() -> None:
    idle = ShapeDescriptor((100.0, 200.0), NODE_RADIUS, ShapeKind.CIRCLE)
    busy = ShapeDescriptor((320.0, 200.0), NODE_RADIUS, ShapeKind.HEXAGON)
    done = ShapeDescriptor((320.0, 380.0), NODE_RADIUS, ShapeKind.TRIANGLE)

    links = {
        "start -> idle": resolve_start_link(idle, (20.0, 200.0)),
        "idle -> busy": resolve_link(idle, busy),
        "busy -> idle": resolve_link(busy, idle, 0.5, 45.0),
        "busy -> busy": resolve_self_link(busy, -math.pi / 2),
        "busy -> done": resolve_link(busy, done, 0.5, -30.0),
    }

    for name, result in links.items():
        print(f"{name}:")
        print(f"  start={_fmt(result.start)} end={_fmt(result.end)}")
        if result.has_arc:
            print(f"  arc center={_fmt(result.arc_center)} radius={result.arc_radius:.2f}")
        tip = ", ".join(_fmt(p) for p in arrowhead_points(result.end, result.arrow_angle))
        print(f"  arrowhead=[{tip}]")
        position, angle = label_anchor(result)
        print(f"  label at {_fmt(position)} leaning {math.degrees(angle):.1f} deg")


if __name__ == "__main__":
    main()
