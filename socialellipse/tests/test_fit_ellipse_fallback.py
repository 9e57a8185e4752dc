
import unittest

import numpy as np

from socialellipse import FALLBACK_SIZE, FitSettings, fit_fallback_multiple, fit_fallback_single


class TestFallback(unittest.TestCase):
    """Expected values come from an equivalent MATLAB implementation."""

    def assertParams(self, params, expected):
        self.assertTrue(
            np.allclose(params, expected, atol=1e-3), msg=(params, expected))

    def test_single(self):
        params = fit_fallback_single(-3.5, 0.25)
        self.assertEqual(
            params, (-3.5, 0.25, FALLBACK_SIZE, FALLBACK_SIZE, 0.0))

    def test_five_points(self):
        params = fit_fallback_multiple(
            [0.5, 2.0, -2.0, -3.0, -1.0], [1.0, -2.5, 0.0, 3.0, 1.0])
        self.assertParams(
            params, (-0.7, 0.5, 3.716517, 1.261261, -0.83298127))

    def test_three_points(self):
        params = fit_fallback_multiple([0.5, 2.0, -2.0], [1.0, -2.5, 0.0])
        self.assertParams(
            params, (0.166667, -0.5, 2.358495, 1.086498, -0.55859932))

    def test_three_points_other(self):
        params = fit_fallback_multiple([0.1, 1.0, -2.0], [0.0, -2.5, -1.0])
        self.assertParams(
            params, (-0.3, -1.166667, 1.677051, 0.916788, -0.46364761))

    def test_two_points(self):
        params = fit_fallback_multiple([0.1, 1.0], [0.0, -2.5])
        self.assertParams(
            params, (0.55, -1.25, 1.328533, FALLBACK_SIZE, -1.22524075))

    def test_two_points_other(self):
        params = fit_fallback_multiple([-2.5, -1.5], [1.5, -2.5])
        self.assertParams(
            params, (-2.0, -0.5, 2.061553, FALLBACK_SIZE, -1.32581766))

    def test_vertical_line(self):
        """Vertical axis is reported as -pi/2, like algebraic fits."""
        params = fit_fallback_multiple([-2.0, -2.0, -2.0], [1.5, -2.5, -2.0])
        self.assertParams(
            params, (-2.0, -1.0, 2.0, FALLBACK_SIZE, -1.57079633))

    def test_orientation_interval(self):
        for x, y in [([0.0, 0.0], [0.0, 1.0]), ([0.0, 0.0], [1.0, 0.0]),
                     ([0.0, 1.0], [0.0, 0.0]), ([1.0, 0.0], [0.0, 0.0]),
                     ([0.0, 1.0], [0.0, -1.0]), ([0.0, -1.0], [0.0, 1.0])]:
            phi = fit_fallback_multiple(x, y).orientation
            self.assertGreaterEqual(phi, -np.pi/2, msg=(x, y))
            self.assertLess(phi, np.pi/2, msg=(x, y))

    def test_custom_size(self):
        settings = FitSettings(fallback_size=0.5)
        params = fit_fallback_multiple([0.0, 0.0], [0.0, 1.0], settings)
        self.assertEqual(params.semi_axis_minor, 0.5)
        self.assertAlmostEqual(params.semi_axis_major, 0.5)

    def test_orientation_is_axis(self):
        """Point order does not flip the orientation."""
        x = np.array([0.5, 2.0, -2.0, -3.0, -1.0])
        y = np.array([1.0, -2.5, 0.0, 3.0, 1.0])
        forward = fit_fallback_multiple(x, y)
        backward = fit_fallback_multiple(x[::-1], y[::-1])
        self.assertTrue(np.allclose(forward, backward))


if __name__ == '__main__':
    unittest.main()
