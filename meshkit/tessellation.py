"""Triangulation of polygonal faces for rendering.

Polygons are split into triangles so that the sum of squared triangle areas
is minimal. This keeps triangles from overlapping or folding over for
non-convex polygons.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

Triangle = tuple[int, int, int]


def squared_triangle_area(p0: Sequence[float], p1: Sequence[float], p2: Sequence[float]) -> float:
    """Squared norm of the cross product of the triangle's two edges at ``p0``.

    This is four times the squared triangle area.
    """
    a = np.asarray(p0, dtype=float)
    b = np.asarray(p1, dtype=float)
    c = np.asarray(p2, dtype=float)
    n = np.cross(b - a, c - a)
    return float(np.dot(n, n))


def _as_points(points: Sequence[Sequence[float]]) -> np.ndarray:
    pts = np.asarray(points, dtype=float)
    if pts.ndim != 2 or pts.shape[1] != 3:
        raise ValueError("polygon points must be a sequence of 3D points")
    if len(pts) < 3:
        raise ValueError("a polygon needs at least three corners")
    return pts


def tessellate(points: Sequence[Sequence[float]]) -> list[Triangle]:
    """Split a polygon into triangles given as index triples into ``points``.

    Triangles and quads are handled directly; larger polygons are solved by
    dynamic programming over all splits.
    """
    pts = _as_points(points)
    n = len(pts)

    def area(i: int, j: int, k: int) -> float:
        return squared_triangle_area(pts[i], pts[j], pts[k])

    if n == 3:
        return [(0, 1, 2)]

    if n == 4:
        if area(0, 1, 2) + area(0, 2, 3) < area(0, 1, 3) + area(1, 2, 3):
            return [(0, 1, 2), (0, 2, 3)]
        return [(0, 1, 3), (1, 2, 3)]

    # best[(i, k)] = (minimal weight of sub-polygon i..k, chosen split vertex)
    best: dict[tuple[int, int], tuple[float, int]] = {
        (i, i + 1): (0.0, -1) for i in range(n - 1)
    }
    for span in range(2, n):
        for i in range(n - span):
            k = i + span
            wmin = float("inf")
            split = -1
            for m in range(i + 1, k):
                w = best[(i, m)][0] + area(i, m, k) + best[(m, k)][0]
                if w < wmin:
                    wmin = w
                    split = m
            best[(i, k)] = (wmin, split)

    triangles: list[Triangle] = []
    todo = [(0, n - 1)]
    while todo:
        start, end = todo.pop()
        if end - start < 2:
            continue
        split = best[(start, end)][1]
        if split < 0:
            raise ValueError("polygon could not be triangulated")
        triangles.append((start, split, end))
        todo.append((start, split))
        todo.append((split, end))
    return triangles