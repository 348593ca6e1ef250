import unittest

from ..GlobalTestDelaunay import GlobalTestDelaunay
from ..BowyerWatson.result import euler_triangle_count


class TestGlobalTestDelaunay(unittest.TestCase):

    def setUp(self):
        # a thin quadrilateral: only the short 1-3 diagonal is Delaunay
        self.points = [(0.0, 0.0), (1.0, -0.2), (2.0, 0.0), (1.0, 0.2)]

    def test_accepts_delaunay(self):
        self.assertTrue(GlobalTestDelaunay(self.points, [0, 1, 3, 1, 2, 3]))

    def test_rejects_wrong_diagonal(self):
        with self.assertLogs('simplelaunay.GlobalTestDelaunay', level='WARNING'):
            self.assertFalse(GlobalTestDelaunay(self.points, [0, 1, 2, 0, 2, 3]))

    def test_orientation_does_not_matter(self):
        self.assertTrue(GlobalTestDelaunay(self.points, [[3, 1, 0], [1, 2, 3]]))

    def test_euler_triangle_count(self):
        self.assertEqual(euler_triangle_count(4, 4), 2)
        self.assertEqual(euler_triangle_count(7, 6), 6)


if __name__ == "__main__":
    unittest.main()
