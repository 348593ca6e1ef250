from simplelaunay.errors import CapacityError, DegenerateInputError, DegenerateTriangleError
from simplelaunay.Mesh.buffer import buffer_size
from simplelaunay.Mesh.vertex import Vertex
from simplelaunay.BowyerWatson import triangulate, triangulate_into, triangle_array, Triangulation

__all__ = [
    'buffer_size',
    'triangulate',
    'triangulate_into',
    'triangle_array',
    'Triangulation',
    'Vertex',
    'CapacityError',
    'DegenerateInputError',
    'DegenerateTriangleError',
]
