import logging

import numpy as np

from simplelaunay.constants import VERIFY_TOL
from simplelaunay.Mesh.geometry import orientation, in_circle_test
from simplelaunay.Mesh.vertex import as_coordinates

logger = logging.getLogger(__name__)


def GlobalTestDelaunay(points, triangles, tol=VERIFY_TOL):
    """
    Brute force empty circumcircle check of every (triangle, point) pair.

    points    : (n, 2) array-like or sequence of Vertex
    triangles : flat index sequence or (m, 3) array
    tol       : relative tolerance; a point counts as inside only when the
                InCircle determinant exceeds tol * extent**4

    Returns False on the first point found strictly inside a circumcircle.
    """
    coords = as_coordinates(points)
    triangles = np.asarray(triangles).reshape(-1, 3)

    extent = float(np.ptp(coords, axis=0).max()) or 1.0
    threshold = tol * extent ** 4

    for a, b, c in triangles.tolist():
        A, B, C = coords[a], coords[b], coords[c]
        sign = np.sign(orientation(A, B, C))
        for i, point in enumerate(coords):
            if i in (a, b, c):
                continue
            det = sign * in_circle_test(A, B, C, point)
            if det > threshold:
                logger.warning("Triangle: %d %d %d INCLUDES point %d (det=%.3e)", a, b, c, i, det)
                return False
    return True


def main():
    from simplelaunay.RandomPoints import random_points_in_box
    from simplelaunay.BowyerWatson import triangulate

    points = random_points_in_box(200)
    print(GlobalTestDelaunay(points, triangulate(points)))


if __name__ == '__main__':
    main()
