
import unittest

import numpy as np

from socialellipse import conic_to_parametric


class TestConicToParametric(unittest.TestCase):

    def test_circle(self):
        # x**2 + y**2 - 4 = 0
        params = conic_to_parametric([1, 0, 1, 0, 0, -4])
        self.assertTrue(np.allclose(params, [0, 0, 2, 2, 0]))

    def test_axis_aligned(self):
        # (x - 1)**2/4 + (y - 2)**2 - 1 = 0
        c = np.array([0.25, 0, 1, -0.5, -4, 3.25])
        params = conic_to_parametric(c)
        self.assertTrue(np.allclose(params, [1, 2, 2, 1, 0]))

    def test_sign_invariant(self):
        c = np.array([0.25, 0, 1, -0.5, -4, 3.25])
        self.assertTrue(np.allclose(
            conic_to_parametric(c), conic_to_parametric(-c)))

    def test_rotated(self):
        # x**2/9 + y**2 - 1 = 0 rotated by pi/4
        s = 1/np.sqrt(2)
        u2 = np.array([s**2, 2*s*s, s**2])
        v2 = np.array([s**2, -2*s*s, s**2])
        c = np.concatenate((u2/9 + v2, [0, 0, -1]))
        params = conic_to_parametric(c)
        self.assertTrue(np.allclose(params, [0, 0, 3, 1, np.pi/4]))

    def test_vertical_major_axis(self):
        # x**2 + y**2/4 - 1 = 0
        params = conic_to_parametric([1, 0, 0.25, 0, 0, -1])
        self.assertTrue(np.allclose(params, [0, 0, 2, 1, -np.pi/2]))

    def test_hyperbola(self):
        params = conic_to_parametric([1, 0, -1, 0, 0, -1])
        self.assertTrue(np.any(np.isnan(params)))

    def test_nan(self):
        params = conic_to_parametric(np.full(6, np.nan))
        self.assertTrue(np.all(np.isnan(params)))


if __name__ == '__main__':
    unittest.main()
