from simplelaunay.BowyerWatson.bowyer_watson import triangulate, triangulate_into, insert_point, triangle_array
from simplelaunay.BowyerWatson.result import Triangulation, euler_triangle_count
