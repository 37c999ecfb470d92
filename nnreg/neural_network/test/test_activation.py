import unittest

import numpy as np

from nnreg.neural_network.activation import sigmoid, sigmoid_prime


class TestActivation(unittest.TestCase):

    def setUp(self):
        self.random_state = np.random.RandomState(1234)

    def test_sigmoid_known_values(self):
        self.assertEqual(sigmoid(0.0), 0.5)
        self.assertAlmostEqual(sigmoid(np.log(3.0)), 0.75)
        self.assertAlmostEqual(sigmoid(-np.log(3.0)), 0.25)

    def test_sigmoid_matches_formula(self):
        x = self.random_state.randn(4, 5) * 5
        expected = 1.0 / (1.0 + np.exp(-x))
        self.assertLessEqual(np.abs(sigmoid(x) - expected).max(), 1e-12)

    def test_sigmoid_large_magnitude(self):
        x = np.array([-1e4, -800.0, 800.0, 1e4])

        with np.errstate(over='raise', divide='raise', invalid='raise'):
            s = sigmoid(x)
            ds = sigmoid_prime(x)

        self.assertTrue(np.all(np.isfinite(s)))
        self.assertTrue(np.all(np.isfinite(ds)))
        np.testing.assert_allclose(s, [0, 0, 1, 1], atol=1e-300)
        np.testing.assert_allclose(ds, 0, atol=1e-300)

    def test_sigmoid_prime_matches_formula(self):
        x = self.random_state.randn(3, 7) * 3
        expected = np.exp(-x) / (1.0 + np.exp(-x))**2
        self.assertLessEqual(np.abs(sigmoid_prime(x) - expected).max(), 1e-12)

    def test_sigmoid_prime_finite_difference(self):
        x = self.random_state.randn(50)
        eps = 1e-6
        numeric = (sigmoid(x + eps) - sigmoid(x - eps)) / (2 * eps)
        self.assertLessEqual(np.abs(sigmoid_prime(x) - numeric).max(), 1e-8)

    def test_shape_preserved(self):
        for shape in [(3,), (2, 4), (2, 3, 4)]:
            x = self.random_state.randn(*shape)
            self.assertEqual(sigmoid(x).shape, shape)
            self.assertEqual(sigmoid_prime(x).shape, shape)


if __name__ == '__main__':
    unittest.main()
