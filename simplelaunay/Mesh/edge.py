class Edge:
    """Undirected edge between two vertex indices; Edge(a, b) == Edge(b, a)."""
    __slots__ = ("a", "b")

    def __init__(self, a: int, b: int):
        self.a = a
        self.b = b

    def key(self):
        # canonical (min, max) pair
        return (self.a, self.b) if self.a <= self.b else (self.b, self.a)

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.a == other.a and self.b == other.b) or (self.a == other.b and self.b == other.a)

    def __hash__(self):
        return hash(self.key())

    def __repr__(self):
        return f"Edge({self.a}, {self.b})"
