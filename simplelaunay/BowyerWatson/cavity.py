from collections import Counter, defaultdict

import numpy as np

from simplelaunay.Mesh.triangle import Triangle
from simplelaunay.Mesh.geometry import in_triangle_symbolic


def collect_edges(bad_rows):
    """Edges ab, bc, ca of every bad triangle, in scan order."""
    polygon = []
    for a, b, c in bad_rows:
        polygon.extend(Triangle(a, b, c).edges())
    return polygon


def pairwise_boundary(polygon):
    """
    Cavity boundary by pairwise comparison, O(k^2).
    Both edges of every matching pair are dropped; survivors keep their order.
    """
    bad = set()
    for i in range(len(polygon)):
        for j in range(i + 1, len(polygon)):
            if polygon[i] == polygon[j]:
                bad.add(i)
                bad.add(j)
    return [e for i, e in enumerate(polygon) if i not in bad]


def hashed_boundary(polygon):
    """Same result as pairwise_boundary, counting canonical keys instead."""
    counts = Counter(polygon)
    return [e for e in polygon if counts[e] == 1]


def connected_cavity(rows, tri_poly, bad, p):
    """
    Restrict the bad mask to triangles reachable, through shared edges of
    bad triangles, from a bad triangle that contains p.

    tri_poly holds the resolved vertex polynomials of `rows`
    (see resolve_coordinates), so containment is decided for triangles with
    vertices at infinity as well.

    With exact arithmetic the bad set is always connected and this returns
    `bad` unchanged. Rounding on (nearly) cocircular points can flag a
    detached triangle, which would otherwise produce overlapping triangles.
    If no bad triangle contains p the mask is returned as is.
    """
    candidates = np.flatnonzero(bad)
    if len(candidates) <= 1:
        return bad

    inside = in_triangle_symbolic(tri_poly[candidates], p)
    seeds = candidates[inside].tolist()
    if not seeds:
        return bad

    rows = np.asarray(rows).tolist()
    faces = {i: Triangle(*rows[i]) for i in candidates.tolist()}
    owners = defaultdict(list)
    for i, face in faces.items():
        for e in face.edges():
            owners[e].append(i)

    reached = set(seeds)
    stack = list(seeds)
    while stack:
        for e in faces[stack.pop()].edges():
            for j in owners[e]:
                if j not in reached:
                    reached.add(j)
                    stack.append(j)

    if len(reached) == len(candidates):
        return bad
    mask = np.zeros_like(bad)
    mask[sorted(reached)] = True
    return mask
