"""Closest-point queries against finite line segments."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from .types import Point

_EPS = 1e-12


def _sub(a: Sequence[float], b: Sequence[float]) -> Tuple[float, float]:
    return (float(a[0]) - float(b[0]), float(a[1]) - float(b[1]))


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return float(a[0]) * float(b[0]) + float(a[1]) * float(b[1])


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    return math.hypot(float(a[0]) - float(b[0]), float(a[1]) - float(b[1]))


def midpoint(a: Sequence[float], b: Sequence[float]) -> Point:
    return ((float(a[0]) + float(b[0])) * 0.5, (float(a[1]) + float(b[1])) * 0.5)


def closest_point_on_segment(query: Sequence[float], a: Sequence[float], b: Sequence[float]) -> Point:
    """Return the point of segment ``ab`` nearest to ``query``.

    A collapsed segment returns ``a``.
    """

    ab = _sub(b, a)
    length_sq = _dot(ab, ab)
    if length_sq <= _EPS:
        return (float(a[0]), float(a[1]))
    t = _dot(_sub(query, a), ab) / length_sq
    t = min(max(t, 0.0), 1.0)
    return (float(a[0]) + t * ab[0], float(a[1]) + t * ab[1])


def closest_points_on_segments(
    query: Sequence[float], starts: np.ndarray, ends: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    """Vectorised :func:`closest_point_on_segment` over ``k`` segments.

    ``starts`` and ``ends`` are ``(k, 2)`` arrays. Returns the ``(k, 2)``
    closest points and their ``(k,)`` distances to ``query``.
    """

    q = np.asarray(query, dtype=float)
    starts = np.asarray(starts, dtype=float)
    edges = np.asarray(ends, dtype=float) - starts
    length_sq = np.einsum("ij,ij->i", edges, edges)
    rel = q - starts
    safe = np.where(length_sq > _EPS, length_sq, 1.0)
    t = np.where(length_sq > _EPS, np.einsum("ij,ij->i", rel, edges) / safe, 0.0)
    t = np.clip(t, 0.0, 1.0)
    points = starts + edges * t[:, None]
    dists = np.linalg.norm(points - q, axis=1)
    return points, dists


__all__ = [
    "closest_point_on_segment",
    "closest_points_on_segments",
    "distance",
    "midpoint",
]
