import numpy as np

from simplelaunay.constants import INDEX_DTYPE
from simplelaunay.errors import CapacityError


def buffer_size(vertex_count: int) -> int:
    # At most 2n - 5 triangles for n points, plus room for the super triangle.
    return 2 * vertex_count + 1


class TriangleBuffer:
    """
    Fixed capacity triangle store.

    data  : (capacity, 3) integer array; rows at or past `count` are stale
    count : logical number of triangles
    """

    def __init__(self, capacity: int, storage=None):
        if storage is None:
            storage = np.empty((capacity, 3), dtype=INDEX_DTYPE)
        elif storage.shape != (capacity, 3):
            raise CapacityError(f"Storage of shape {storage.shape} cannot hold {capacity} triangles.")
        self.capacity = capacity
        self.data = storage
        self.count = 0

    def __len__(self):
        return self.count

    def live(self):
        """View of the triangles in use."""
        return self.data[:self.count]

    def append(self, a: int, b: int, c: int):
        if self.count >= self.capacity:
            raise CapacityError(f"Triangle buffer full ({self.capacity} triangles).")
        self.data[self.count] = (a, b, c)
        self.count += 1

    def extend(self, rows):
        rows = np.asarray(rows, dtype=INDEX_DTYPE).reshape(-1, 3)
        end = self.count + len(rows)
        if end > self.capacity:
            raise CapacityError(
                f"Triangle buffer overflow: {end} triangles needed, capacity is {self.capacity}.")
        self.data[self.count:end] = rows
        self.count = end

    def remove_bad_indices(self, bad):
        """
        Drop the triangles flagged in the boolean mask `bad` (length == count),
        keeping the survivors in their existing relative order.
        """
        keep = self.live()[~bad]
        self.data[:len(keep)] = keep
        self.count = len(keep)

    def remove_synthetic(self, vertex_count: int):
        """Drop every triangle with any vertex index >= vertex_count."""
        self.remove_bad_indices((self.live() >= vertex_count).any(axis=1))

    def flatten(self):
        """Index triplets as a flat integer array of length 3 * count."""
        return self.live().ravel().copy()

    def __repr__(self):
        return f"TriangleBuffer(count={self.count}, capacity={self.capacity})"
