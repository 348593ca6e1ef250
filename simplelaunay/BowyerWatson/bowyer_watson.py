import logging

import numpy as np

from simplelaunay.constants import INDEX_DTYPE
from simplelaunay.errors import CapacityError, DegenerateInputError
from simplelaunay.Mesh.buffer import TriangleBuffer, buffer_size
from simplelaunay.Mesh.geometry import in_circumcircle_many, in_circumcircle_symbolic
from simplelaunay.Mesh.vertex import as_coordinates, find_duplicates, is_synthetic, resolve_coordinates
from simplelaunay.BowyerWatson.super_triangle import SuperTriangle, super_triangle, seed_buffer
from simplelaunay.BowyerWatson.cavity import collect_edges, hashed_boundary, connected_cavity

logger = logging.getLogger(__name__)


def insert_point(triangles: TriangleBuffer, coords, hull: SuperTriangle, v: int):
    """
    Insert point v into the triangulation held in `triangles`.

    1. find every triangle whose circumcircle contains the point, keeping
       the ones connected to the triangle the point falls in
    2. remove them, keeping the order of the rest
    3. keep the edges of the removed triangles that are not shared
    4. connect each boundary edge to v
    Triangles touching the super vertices at infinity are tested
    symbolically, the others with the plain circumcircle.
    Returns the number of removed triangles.
    """
    live = triangles.live()
    p = coords[v]
    tri_poly = resolve_coordinates(live, coords, hull.center, hull.directions)

    finite = ~is_synthetic(live, len(coords)).any(axis=1)
    bad = np.empty(len(live), dtype=bool)
    bad[finite] = in_circumcircle_many(tri_poly[finite][..., 0], p)
    bad[~finite] = in_circumcircle_symbolic(tri_poly[~finite], p)
    bad = connected_cavity(live, tri_poly, bad, p)

    polygon = collect_edges(live[bad].tolist())
    triangles.remove_bad_indices(bad)

    boundary = hashed_boundary(polygon)
    triangles.extend([(e.a, e.b, v) for e in boundary])

    logger.debug("point %d: %d bad triangles, %d boundary edges", v, len(polygon) // 3, len(boundary))
    return len(polygon) // 3


def _triangulate(coords, triangles: TriangleBuffer):
    vertex_count = len(coords)

    duplicates = find_duplicates(coords)
    if duplicates:
        first, repeat = duplicates[0]
        raise DegenerateInputError(
            f"Point {repeat} coincides with point {first} ({len(duplicates)} duplicate(s) in total).")

    hull = super_triangle(coords)
    logger.debug("Triangulating %d points, %r", vertex_count, hull)

    seed_buffer(triangles, vertex_count)
    for v in range(vertex_count):
        insert_point(triangles, coords, hull, v)

    triangles.remove_synthetic(vertex_count)
    logger.debug("Triangulation finished with %d triangles", triangles.count)
    return triangles.count


def triangulate(points):
    """
    Delaunay triangulation of `points`.

    Parameters
    ----------
    points : (n, 2) array-like or sequence of Vertex

    Returns
    -------
    ndarray of vertex indices, length 3 * triangle_count; every consecutive
    triplet is one triangle.
    """
    coords = as_coordinates(points)
    triangles = TriangleBuffer(buffer_size(len(coords)))
    _triangulate(coords, triangles)
    return triangles.flatten()


def triangulate_into(points, output):
    """
    Delaunay triangulation written into a caller supplied buffer.

    `output` is a mutable integer sequence (list or 1-D numpy array) of at
    least 3 * buffer_size(len(points)) entries. The first 3 * count entries
    receive the index triplets. A contiguous integer numpy array is used as
    the working buffer itself, so its entries past 3 * count hold scratch
    values afterwards; a list is only written up to 3 * count. An integer
    array whose dtype cannot hold index len(points) + 2 is rejected.
    Returns the triangle count.
    """
    coords = as_coordinates(points)
    capacity = buffer_size(len(coords))
    if len(output) < 3 * capacity:
        raise CapacityError(
            f"Output buffer holds {len(output)} indices, {3 * capacity} are required for {len(coords)} points.")

    if (isinstance(output, np.ndarray) and output.ndim == 1 and output.flags.c_contiguous
            and np.issubdtype(output.dtype, np.integer)):
        if np.iinfo(output.dtype).max < len(coords) + 2:
            raise CapacityError(
                f"Output dtype {output.dtype} cannot hold vertex index {len(coords) + 2}.")
        # work directly in the caller's memory
        triangles = TriangleBuffer(capacity, output[:3 * capacity].reshape(capacity, 3))
        return _triangulate(coords, triangles)

    triangles = TriangleBuffer(capacity)
    count = _triangulate(coords, triangles)
    output[:3 * count] = triangles.flatten().tolist()
    return count


def triangle_array(flat):
    """Reshape a flat index sequence to (count, 3)."""
    return np.asarray(flat, dtype=INDEX_DTYPE).reshape(-1, 3)


if __name__ == "__main__":
    from simplelaunay.Mesh.vertex import Vertex

    vertexs = [Vertex(0.5, 0.3),
               Vertex(0.3, 0.4),
               Vertex(0.4, 0.1),
               Vertex(0.6, 0.4),
               Vertex(0.3, 0.2),
               Vertex(0.5, 0.45),
               Vertex(0.6, 0.2),
               Vertex(0.7, 0.35),
               Vertex(0.7, 0.1), ]

    print(triangle_array(triangulate(vertexs)))
