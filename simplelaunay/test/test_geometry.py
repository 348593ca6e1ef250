# test/test_geometry.py

import random
import unittest

import numpy as np

from ..errors import DegenerateInputError, DegenerateTriangleError
from ..Mesh.geometry import (orientation, in_circle_test, circumcircle, in_circumcircle,
                             in_circumcircle_many, in_circumcircle_symbolic, in_triangle_symbolic,
                             leading_sign, bounding_box, midpoint)


class TestCircumcircle(unittest.TestCase):

    def test_circumcircle_right_angle(self):
        """Right triangle: the circumcenter is the midpoint of the hypotenuse."""
        (ux, uy), radius_sq = circumcircle((0.0, 0.0), (2.0, 0.0), (0.0, 2.0))
        self.assertAlmostEqual(ux, 1.0)
        self.assertAlmostEqual(uy, 1.0)
        self.assertAlmostEqual(radius_sq, 2.0)

    def test_circumcircle_equilateral(self):
        (ux, uy), radius_sq = circumcircle((0.0, 0.0), (2.0, 0.0), (1.0, 3 ** 0.5))
        self.assertAlmostEqual(ux, 1.0)
        self.assertAlmostEqual(uy, 1.0 / 3 ** 0.5)
        self.assertAlmostEqual(radius_sq, 4.0 / 3.0)

    def test_circumcircle_collinear(self):
        with self.assertRaises(DegenerateTriangleError):
            circumcircle((0.0, 0.0), (1.0, 1.0), (2.0, 2.0))

    def test_circumcircle_coincident_vertices(self):
        with self.assertRaises(DegenerateTriangleError):
            circumcircle((1.0, 1.0), (1.0, 1.0), (3.0, 0.0))

    def test_in_circumcircle(self):
        a, b, c = (0.0, 0.0), (2.0, 0.0), (1.0, 1.0)
        self.assertTrue(in_circumcircle(a, b, c, (1.0, 0.1)))
        self.assertFalse(in_circumcircle(a, b, c, (1.0, 2.0)))

    def test_point_on_circle_counts_as_inside(self):
        self.assertTrue(in_circumcircle((0.0, 0.0), (2.0, 0.0), (0.0, 2.0), (2.0, 2.0)))

    def test_vertex_of_triangle_is_inside(self):
        self.assertTrue(in_circumcircle((0.0, 0.0), (2.0, 0.0), (0.0, 2.0), (0.0, 0.0)))

    def test_orientation_agnostic(self):
        a, b, c, p = (0.0, 0.0), (2.0, 0.0), (1.0, 1.0), (1.5, 0.5)
        self.assertEqual(in_circumcircle(a, b, c, p), in_circumcircle(a, c, b, p))

    def test_in_circumcircle_many_matches_scalar(self):
        random.seed(7)
        tris = np.array([[(random.uniform(-5, 5), random.uniform(-5, 5)) for _ in range(3)]
                         for _ in range(200)])
        p = (0.3, -0.2)
        mask = in_circumcircle_many(tris, p)
        expected = [in_circumcircle(t[0], t[1], t[2], p) for t in tris.tolist()]
        self.assertEqual(mask.tolist(), expected)

    def test_in_circumcircle_many_collinear(self):
        tris = np.array([[(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)],
                         [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]])
        with self.assertRaises(DegenerateTriangleError):
            in_circumcircle_many(tris, (0.2, 0.2))


class TestPredicates(unittest.TestCase):

    def test_orientation(self):
        self.assertGreater(orientation((0, 0), (1, 0), (0, 1)), 0)
        self.assertLess(orientation((0, 0), (0, 1), (1, 0)), 0)
        self.assertEqual(orientation((0, 0), (1, 1), (2, 2)), 0)

    def test_in_circle_test_sign(self):
        p, q, r = (0.0, 0.0), (2.0, 0.0), (0.0, 2.0)
        self.assertGreater(in_circle_test(p, q, r, (1.0, 1.0)), 0)
        self.assertLess(in_circle_test(p, q, r, (5.0, 5.0)), 0)
        # clockwise order flips the sign
        self.assertLess(in_circle_test(p, r, q, (1.0, 1.0)), 0)


def constant(tris):
    """Finite (m, 3, 2) triangles as coordinate polynomials with no R term."""
    tris = np.asarray(tris, dtype=float)
    return np.stack([tris, np.zeros_like(tris)], axis=-1)


class TestSymbolicPredicates(unittest.TestCase):

    def setUp(self):
        # a, b finite; s = (0.5, 0) + R * (0, 1), straight up at infinity
        self.half_plane = np.array([[
            [[0.0, 0.0], [0.0, 0.0]],
            [[1.0, 0.0], [0.0, 0.0]],
            [[0.5, 0.0], [0.0, 1.0]],
        ]])

    def test_leading_sign(self):
        polys = np.array([[1.0, 0.0, 0.0], [5.0, -2.0, 0.0], [0.0, 0.0, 0.0], [-3.0, 0.0, 1e-300]])
        self.assertEqual(leading_sign(polys).tolist(), [1, -1, 0, 1])

    def test_in_triangle_symbolic(self):
        tris = constant([[(0.0, 0.0), (2.0, 0.0), (0.0, 2.0)],
                         [(0.0, 0.0), (0.0, 2.0), (2.0, 0.0)],
                         [(3.0, 3.0), (4.0, 3.0), (3.0, 4.0)]])
        self.assertEqual(in_triangle_symbolic(tris, (0.5, 0.5)).tolist(), [True, True, False])
        # on an edge
        self.assertEqual(in_triangle_symbolic(tris, (1.0, 0.0)).tolist(), [True, True, False])

    def test_in_triangle_with_vertex_at_infinity(self):
        self.assertEqual(in_triangle_symbolic(self.half_plane, (0.5, 100.0)).tolist(), [True])
        self.assertEqual(in_triangle_symbolic(self.half_plane, (0.5, -0.1)).tolist(), [False])
        self.assertEqual(in_triangle_symbolic(self.half_plane, (3.0, 1.0)).tolist(), [False])

    def test_finite_triangles_match_circumcircle(self):
        random.seed(7)
        rng = np.random.default_rng(7)
        tris = rng.uniform(-5, 5, size=(200, 3, 2))
        for _ in range(20):
            p = (random.uniform(-5, 5), random.uniform(-5, 5))
            clear = [abs(in_circle_test(*t.tolist(), p)) > 1e-6 for t in tris]
            expected = in_circumcircle_many(tris, p)[clear]
            self.assertEqual(in_circumcircle_symbolic(constant(tris), p)[clear].tolist(), expected.tolist())

    def test_circle_through_vertex_at_infinity(self):
        """The circle through a, b and a vertex at infinity is the half plane above ab."""
        self.assertEqual(in_circumcircle_symbolic(self.half_plane, (0.5, 3.0)).tolist(), [True])
        self.assertEqual(in_circumcircle_symbolic(self.half_plane, (-40.0, 0.01)).tolist(), [True])
        self.assertEqual(in_circumcircle_symbolic(self.half_plane, (0.5, -1.0)).tolist(), [False])
        # inside segment ab: inside the circle for every R
        self.assertEqual(in_circumcircle_symbolic(self.half_plane, (0.5, 0.0)).tolist(), [True])

    def test_two_vertices_at_infinity(self):
        """a, R * (-1, 0) and R * (0, 1): the circle tends to the half plane y > x."""
        tri = np.array([[
            [[0.0, 0.0], [0.0, 0.0]],
            [[0.0, 0.0], [-1.0, 0.0]],
            [[0.0, 0.0], [0.0, 1.0]],
        ]])
        self.assertEqual(in_circumcircle_symbolic(tri, (-2.0, 2.0)).tolist(), [True])
        self.assertEqual(in_circumcircle_symbolic(tri, (2.0, -2.0)).tolist(), [False])

    def test_super_triangle_contains_everything(self):
        angles = np.array([7 * np.pi / 6, np.pi / 2, -np.pi / 6]) + 0.1
        tri = np.zeros((1, 3, 2, 2))
        tri[0, :, :, 1] = np.column_stack([np.cos(angles), np.sin(angles)])
        for p in [(0.0, 0.0), (1e6, -3e5), (-42.0, 17.0)]:
            self.assertTrue(in_circumcircle_symbolic(tri, p)[0])
            self.assertTrue(in_triangle_symbolic(tri, p)[0])

    def test_collinear_at_infinity_raises(self):
        tri = np.array([[
            [[0.0, 0.0], [0.0, 0.0]],
            [[1.0, 0.0], [0.0, 0.0]],
            [[2.0, 1.0], [0.0, 0.0]],
        ]])
        with self.assertRaises(DegenerateTriangleError):
            in_circumcircle_symbolic(tri, (0.0, 1.0))


class TestBoundingBox(unittest.TestCase):

    def test_bounding_box(self):
        box = bounding_box([(1.0, 5.0), (-2.0, 3.0), (4.0, -1.0)])
        self.assertEqual(box, (-2.0, -1.0, 4.0, 5.0))
        self.assertEqual(midpoint(box), (1.0, 2.0))

    def test_empty(self):
        with self.assertRaises(DegenerateInputError):
            bounding_box(np.zeros((0, 2)))


if __name__ == "__main__":
    unittest.main()
