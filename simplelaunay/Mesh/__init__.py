from simplelaunay.Mesh.vertex import Vertex
from simplelaunay.Mesh.edge import Edge
from simplelaunay.Mesh.triangle import Triangle
from simplelaunay.Mesh.buffer import TriangleBuffer, buffer_size
