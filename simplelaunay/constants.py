"""Numeric constants shared by the triangulation modules."""
import numpy as np

# angles of the three super vertices at infinity (left, top, right),
# turned off the coordinate axes so axis-aligned input edges never run
# parallel to them
SUPER_DIRECTION_ANGLES = (7 * np.pi / 6 + 0.1, np.pi / 2 + 0.1, -np.pi / 6 + 0.1)

# finite stand-ins for the super vertices (plots, demos) sit this many
# extents away from the bbox midpoint
SUPER_TRIANGLE_SCALE = 20.0

# extent used when every input point is identical
MIN_EXTENT = 1.0

INDEX_DTYPE = np.intp

# relative tolerance of GlobalTestDelaunay
VERIFY_TOL = 1e-9
