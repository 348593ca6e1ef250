import logging

import numpy as np

from simplelaunay.constants import SUPER_DIRECTION_ANGLES, SUPER_TRIANGLE_SCALE, MIN_EXTENT
from simplelaunay.Mesh.geometry import bounding_box, midpoint

logger = logging.getLogger(__name__)


class SuperTriangle:
    """
    Three synthetic vertices at infinity, center + R * directions[i].

    center     : (2,) bbox midpoint of the input
    extent     : larger bbox side (MIN_EXTENT for a zero extent input)
    directions : (3, 2) unit vectors, ordered left, top, right
    """

    def __init__(self, center, extent, directions):
        self.center = np.asarray(center, dtype=float)
        self.extent = float(extent)
        self.directions = np.asarray(directions, dtype=float)

    def vertices(self, scale=SUPER_TRIANGLE_SCALE):
        """Finite (3, 2) stand-in with R = scale * extent, for drawing."""
        return self.center + scale * self.extent * self.directions

    def __repr__(self):
        return f"SuperTriangle(center={self.center.tolist()}, extent={self.extent})"


def super_triangle(coords, angles=SUPER_DIRECTION_ANGLES):
    """
    Super triangle enclosing every point of `coords`.

    Parameters
    ----------
    coords : (n, 2) array, n >= 1
    angles : directions of the three vertices at infinity, in radians

    Returns
    -------
    SuperTriangle centred on the bbox midpoint.
    """
    box = bounding_box(coords)
    delta_max = max(box[2] - box[0], box[3] - box[1])
    if delta_max == 0:
        # all points coincide
        logger.debug("Zero extent point set, using MIN_EXTENT=%s", MIN_EXTENT)
        delta_max = MIN_EXTENT

    angles = np.asarray(angles, dtype=float)
    directions = np.column_stack([np.cos(angles), np.sin(angles)])
    return SuperTriangle(midpoint(box), delta_max, directions)


def seed_buffer(triangles, vertex_count):
    """Put the super triangle (n, n+1, n+2) in slot 0 of an empty buffer."""
    triangles.count = 0
    triangles.append(vertex_count, vertex_count + 1, vertex_count + 2)
    return triangles
