
import unittest

import numpy as np

from socialellipse import EllipseParameters, fold_axis_angle, make_points, normalize_angle, project_vectors


class TestBasic(unittest.TestCase):

    def test_normalize_angle(self):
        self.assertAlmostEqual(normalize_angle(3*np.pi/2), -np.pi/2)
        self.assertAlmostEqual(normalize_angle(-3*np.pi/2), np.pi/2)
        self.assertAlmostEqual(normalize_angle(np.pi), np.pi)
        self.assertAlmostEqual(normalize_angle(-np.pi), np.pi)
        self.assertAlmostEqual(normalize_angle(0.25 + 4*np.pi), 0.25)

    def test_normalize_angle_array(self):
        res = normalize_angle(np.array([0, 2*np.pi, -5*np.pi/2]))
        self.assertTrue(np.allclose(res, [0, 0, -np.pi/2]))

    def test_fold_axis_angle(self):
        self.assertAlmostEqual(fold_axis_angle(np.pi/2), -np.pi/2)
        self.assertAlmostEqual(fold_axis_angle(-np.pi/2), -np.pi/2)
        self.assertAlmostEqual(fold_axis_angle(3*np.pi/4), -np.pi/4)
        self.assertAlmostEqual(fold_axis_angle(-2.0), np.pi - 2.0)
        self.assertAlmostEqual(fold_axis_angle(0.3), 0.3)

    def test_project_vectors(self):
        px, py = project_vectors(
            np.array([1.0, -2.0]), np.array([1.0, 0.5]), 0.0, 2.0)
        self.assertTrue(np.allclose(px, 0))
        self.assertTrue(np.allclose(py, [1.0, 0.5]))

    def test_make_points(self):
        params = EllipseParameters(1.0, 2.0, 3.0, 1.0, np.pi/2)
        x, y = make_points(params, [0, np.pi/2, np.pi])
        self.assertTrue(np.allclose(x, [1, 0, 1]))
        self.assertTrue(np.allclose(y, [5, 2, -1]))


if __name__ == '__main__':
    unittest.main()
