from simplelaunay.Mesh.edge import Edge


class Triangle:
    """
    One face of the triangulation as three vertex indices.
    Vertex order is kept as constructed; orientation is not normalised.
    """
    __slots__ = ("a", "b", "c")

    def __init__(self, a: int, b: int, c: int):
        self.a = a
        self.b = b
        self.c = c

    def edges(self):
        """Edges ab, bc, ca."""
        return [Edge(self.a, self.b), Edge(self.b, self.c), Edge(self.c, self.a)]

    def __repr__(self):
        return f"Triangle({self.a}, {self.b}, {self.c})"
