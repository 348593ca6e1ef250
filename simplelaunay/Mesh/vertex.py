import math

import numpy as np

from simplelaunay.errors import DegenerateInputError


class Vertex:
    __slots__ = ("_x", "_y")

    def __init__(self, x: float, y: float):
        self._x = float(x)
        self._y = float(y)

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def __iter__(self):
        yield self._x
        yield self._y

    def __repr__(self):
        return f"Vertex({self.x:.2f}, {self.y:.2f})"

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return math.isclose(self.x, other.x, rel_tol=1e-9) and math.isclose(self.y, other.y, rel_tol=1e-9)


def as_coordinates(points):
    """
    Turn the caller's points into a read-only (n, 2) float array.

    Accepts an (n, 2) array-like of numbers or a sequence of objects with
    .x / .y attributes (Vertex). The input itself is never modified.
    """
    if len(points) > 0 and hasattr(points[0], "x"):
        coords = np.array([(p.x, p.y) for p in points], dtype=float)
    else:
        coords = np.array(points, dtype=float)

    if coords.size == 0:
        raise DegenerateInputError("At least one point is required.")
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise DegenerateInputError(f"Expected an (n, 2) point array, got shape {coords.shape}.")
    if not np.all(np.isfinite(coords)):
        raise DegenerateInputError("Point coordinates must be finite.")

    coords.setflags(write=False)
    return coords


def find_duplicates(coords):
    """Return (first, repeat) index pairs of exactly coincident points."""
    seen = {}
    duplicates = []
    for i, xy in enumerate(map(tuple, coords.tolist())):
        if xy in seen:
            duplicates.append((seen[xy], i))
        else:
            seen[xy] = i
    return duplicates


def is_synthetic(index, vertex_count):
    """Indices at or past vertex_count name super triangle vertices."""
    return index >= vertex_count


def resolve_coordinates(triangles, coords, center, directions):
    """
    Look up the coordinates of every vertex index in `triangles`.

    Indices below len(coords) are real points. Index n + i is the i-th
    super vertex, center + R * directions[i] with R -> infinity.

    triangles  : int array of shape (m, 3)
    coords     : (n, 2) real points
    center     : (2,) base point of the super vertices
    directions : (3, 2) directions of the super vertices
    Returns an (m, 3, 2, 2) float array of coordinate polynomials in R
    (last axis: constant term, coefficient of R). Real points have a zero
    R coefficient, so [..., 0] is the plain coordinate array for them.
    """
    n = len(coords)
    synthetic = is_synthetic(triangles, n)
    base = np.where(synthetic[..., None], np.asarray(center, dtype=float),
                    coords[np.where(synthetic, 0, triangles)])
    slope = np.where(synthetic[..., None], directions[np.where(synthetic, triangles - n, 0)], 0.0)
    return np.stack([base, slope], axis=-1)
