import numpy as np

from simplelaunay.errors import DegenerateInputError, DegenerateTriangleError


def orientation(p, q, r):
    """
    Cross product of (q - p) and (r - p):

          ToLeft(p, q, r) = | p.x p.y 1 |
                            | q.x q.y 1 | = (q.x - p.x)*(r.y - p.y) - (q.y - p.y)*(r.x - p.x)
                            | r.x r.y 1 |

    > 0  r is left of the directed line p->q (counter-clockwise turn)
    = 0  p, q, r are collinear
    < 0  r is on the right
    """
    return (q[0] - p[0]) * (r[1] - p[1]) - (q[1] - p[1]) * (r[0] - p[0])


def in_circle_test(p, q, r, d):
    """
    4x4 InCircle determinant.
    For counter-clockwise p, q, r a positive result means d lies inside the
    circle through p, q, r; for clockwise input the sign flips.
    """
    M = np.array([
        [p[0], p[1], p[0]**2 + p[1]**2, 1],
        [q[0], q[1], q[0]**2 + q[1]**2, 1],
        [r[0], r[1], r[0]**2 + r[1]**2, 1],
        [d[0], d[1], d[0]**2 + d[1]**2, 1]
    ])
    return np.linalg.det(M)


def circumcircle(a, b, c):
    """
    Circumcircle of triangle ABC.

    Parameters
    ----------
    a, b, c : (x, y)
        Triangle vertices.

    Returns
    -------
    ((ux, uy), radius_sq)
        Circumcenter and squared circumradius.

    Raises
    ------
    DegenerateTriangleError
        When the denominator (twice the signed area) is exactly zero.
    """
    ax, ay = a[0], a[1]
    bx, by = b[0], b[1]
    cx, cy = c[0], c[1]

    d = 2 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
    if d == 0:
        raise DegenerateTriangleError(
            f"Points {tuple(a)}, {tuple(b)}, {tuple(c)} are collinear; circumcircle is undefined.")

    ax2_ay2 = ax ** 2 + ay ** 2
    bx2_by2 = bx ** 2 + by ** 2
    cx2_cy2 = cx ** 2 + cy ** 2

    ux = (ax2_ay2 * (by - cy) +
          bx2_by2 * (cy - ay) +
          cx2_cy2 * (ay - by)) / d

    uy = (ax2_ay2 * (cx - bx) +
          bx2_by2 * (ax - cx) +
          cx2_cy2 * (bx - ax)) / d

    radius_sq = (ax - ux) ** 2 + (ay - uy) ** 2
    return (ux, uy), radius_sq


def in_circumcircle(a, b, c, p):
    """True if p lies inside or on the circle through a, b, c."""
    (ux, uy), radius_sq = circumcircle(a, b, c)
    distance_sq = (p[0] - ux) ** 2 + (p[1] - uy) ** 2
    return distance_sq <= radius_sq


def in_circumcircle_many(tri_coords, p):
    """
    Vectorised in_circumcircle over a stack of triangles.

    tri_coords : ndarray of shape (m, 3, 2), the resolved vertex coordinates
    p          : (x, y)
    Returns a boolean mask of length m. Uses the same arithmetic as
    circumcircle() so both agree on ties.
    """
    ax, ay = tri_coords[:, 0, 0], tri_coords[:, 0, 1]
    bx, by = tri_coords[:, 1, 0], tri_coords[:, 1, 1]
    cx, cy = tri_coords[:, 2, 0], tri_coords[:, 2, 1]

    d = 2 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
    if np.any(d == 0):
        k = int(np.flatnonzero(d == 0)[0])
        raise DegenerateTriangleError(
            f"Triangle {tri_coords[k].tolist()} is collinear; circumcircle is undefined.")

    ax2_ay2 = ax ** 2 + ay ** 2
    bx2_by2 = bx ** 2 + by ** 2
    cx2_cy2 = cx ** 2 + cy ** 2

    ux = (ax2_ay2 * (by - cy) + bx2_by2 * (cy - ay) + cx2_cy2 * (ay - by)) / d
    uy = (ax2_ay2 * (cx - bx) + bx2_by2 * (ax - cx) + cx2_cy2 * (bx - ax)) / d

    radius_sq = (ax - ux) ** 2 + (ay - uy) ** 2
    distance_sq = (p[0] - ux) ** 2 + (p[1] - uy) ** 2
    return distance_sq <= radius_sq


def bounding_box(coords):
    """Axis-aligned (min_x, min_y, max_x, max_y) of an (n, 2) array."""
    coords = np.asarray(coords, dtype=float)
    if len(coords) == 0:
        raise DegenerateInputError("Cannot compute the bounding box of an empty point set.")
    lo = coords.min(axis=0)
    hi = coords.max(axis=0)
    return float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1])


def midpoint(box):
    min_x, min_y, max_x, max_y = box
    return (min_x + max_x) / 2, (min_y + max_y) / 2


# Vertices of the super triangle sit at infinity: base + R * direction with
# R -> infinity. Their coordinates are stored as polynomials in R, the last
# axis holding the coefficients of R^0, R^1, ...

def _pad(a, length):
    return np.concatenate([a, np.zeros(a.shape[:-1] + (length - a.shape[-1],))], axis=-1)


def _poly_add(a, b):
    length = max(a.shape[-1], b.shape[-1])
    return _pad(a, length) + _pad(b, length)


def _poly_sub(a, b):
    length = max(a.shape[-1], b.shape[-1])
    return _pad(a, length) - _pad(b, length)


def _poly_mul(a, b):
    shape = np.broadcast_shapes(a.shape[:-1], b.shape[:-1])
    out = np.zeros(shape + (a.shape[-1] + b.shape[-1] - 1,))
    for i in range(a.shape[-1]):
        for j in range(b.shape[-1]):
            out[..., i + j] += a[..., i] * b[..., j]
    return out


def leading_sign(poly):
    """Sign of the highest nonzero coefficient, i.e. the sign for R -> infinity (0 if all vanish)."""
    signs = np.sign(poly)
    top = poly.shape[-1] - 1 - np.argmax(signs[..., ::-1] != 0, axis=-1)
    return np.take_along_axis(signs, top[..., None], axis=-1)[..., 0].astype(int)


def as_polynomial(p):
    """A finite point (x, y) as a constant polynomial of shape (2, 2)."""
    return np.array([[p[0], 0.0], [p[1], 0.0]])


def orientation_poly(p, q, r):
    """orientation() for points given as (..., 2, k) coefficient arrays."""
    qp = _poly_sub(q, p)
    rp = _poly_sub(r, p)
    return _poly_sub(_poly_mul(qp[..., 0, :], rp[..., 1, :]),
                     _poly_mul(qp[..., 1, :], rp[..., 0, :]))


def in_circumcircle_symbolic(tri_poly, p):
    """
    in_circumcircle_many for triangles that may have vertices at infinity.

    tri_poly : ndarray of shape (m, 3, 2, k), coordinate polynomials in R
    p        : (x, y)

    The InCircle determinant of the rows (v - p, |v - p|^2) and the
    orientation of the triangle are expanded in R and compared by their
    leading signs. A circle through a vertex at infinity is a half plane,
    so a finite circumcircle never contains the super vertices. A point on
    the circle counts as inside, as in in_circumcircle().

    Raises DegenerateTriangleError if a triangle's orientation vanishes
    identically.
    """
    rel = _poly_sub(tri_poly, as_polynomial(p))
    x, y = rel[..., 0, :], rel[..., 1, :]
    z = _poly_add(_poly_mul(x, x), _poly_mul(y, y))

    x0, x1, x2 = x[:, 0], x[:, 1], x[:, 2]
    y0, y1, y2 = y[:, 0], y[:, 1], y[:, 2]
    z0, z1, z2 = z[:, 0], z[:, 1], z[:, 2]
    det = _poly_add(
        _poly_sub(_poly_mul(x0, _poly_sub(_poly_mul(y1, z2), _poly_mul(z1, y2))),
                  _poly_mul(y0, _poly_sub(_poly_mul(x1, z2), _poly_mul(z1, x2)))),
        _poly_mul(z0, _poly_sub(_poly_mul(x1, y2), _poly_mul(y1, x2))))

    turn = leading_sign(orientation_poly(tri_poly[:, 0], tri_poly[:, 1], tri_poly[:, 2]))
    if np.any(turn == 0):
        k = int(np.flatnonzero(turn == 0)[0])
        raise DegenerateTriangleError(
            f"Triangle {tri_poly[k].tolist()} is collinear; circumcircle is undefined.")
    return leading_sign(det) * turn >= 0


def in_triangle_symbolic(tri_poly, p):
    """Mask of triangles containing p, boundary included, either orientation."""
    q = as_polynomial(p)
    a, b, c = tri_poly[:, 0], tri_poly[:, 1], tri_poly[:, 2]
    o1 = leading_sign(orientation_poly(a, b, q))
    o2 = leading_sign(orientation_poly(b, c, q))
    o3 = leading_sign(orientation_poly(c, a, q))
    ccw = (o1 >= 0) & (o2 >= 0) & (o3 >= 0)
    cw = (o1 <= 0) & (o2 <= 0) & (o3 <= 0)
    return ccw | cw
