from collections import Counter

from simplelaunay.Mesh.triangle import Triangle
from simplelaunay.Mesh.vertex import as_coordinates
from simplelaunay.BowyerWatson.bowyer_watson import triangulate, triangle_array


class Triangulation:
    """Points plus the (m, 3) triangle index array computed for them."""

    def __init__(self, points):
        self.points = as_coordinates(points)
        self.triangles = triangle_array(triangulate(self.points))

    def __len__(self):
        return len(self.triangles)

    def _edge_counts(self):
        counts = Counter()
        for a, b, c in self.triangles.tolist():
            counts.update(Triangle(a, b, c).edges())
        return counts

    def edges(self):
        """Unique undirected edges as sorted (a, b) pairs."""
        return sorted(e.key() for e in self._edge_counts())

    def hull_edges(self):
        """Edges used by exactly one triangle."""
        return sorted(e.key() for e, k in self._edge_counts().items() if k == 1)

    def hull_edge_count(self):
        return len(self.hull_edges())

    def draw(self, show=True, **kwargs):
        from simplelaunay.plot import draw_triangulation
        return draw_triangulation(self.points, self.triangles, show=show, **kwargs)

    def __repr__(self):
        return f"Triangulation(points={len(self.points)}, triangles={len(self.triangles)})"


def euler_triangle_count(vertex_count, hull_edges):
    """Triangle count of a full triangulation: 2n - 2 - h."""
    return 2 * vertex_count - 2 - hull_edges
