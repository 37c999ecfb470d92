import unittest

import numpy as np
from sklearn.base import clone

from nnreg.core.exception import ModelNotFit
from nnreg.core.model import NeuralNetworkRegressor
from nnreg.data.synthetic import make_dataset
from nnreg.neural_network.parameters import ParameterSet


class TestNeuralNetworkRegressor(unittest.TestCase):

    def setUp(self):
        self.random_state = np.random.RandomState(1234)
        self.X, self.y = make_dataset(
            n_samples=1000, input_dim=3, random_state=self.random_state)

    def test_predict_before_fit(self):
        model = NeuralNetworkRegressor()

        self.assertFalse(model.is_fitted)
        with self.assertRaises(ModelNotFit):
            model.predict(self.X)

    def test_fit_sets_attributes(self):
        model = NeuralNetworkRegressor(
            hidden_layer_size=16, n_epochs=3, batch_size=64,
            random_state=1234)

        result = model.fit(self.X, self.y)

        self.assertIs(result, model)
        self.assertTrue(model.is_fitted)
        self.assertIsInstance(model.params_, ParameterSet)
        self.assertEqual(model.params_.W1.shape, (3, 16))
        self.assertEqual(len(model.cost_history_), 4)
        self.assertLess(model.cost_history_[-1], model.cost_history_[0])
        self.assertEqual(model.predict(self.X).shape, (1000,))

    def test_score_positive(self):
        model = NeuralNetworkRegressor(
            hidden_layer_size=16, n_epochs=20, batch_size=32,
            learning_rate=0.1, random_state=1234)
        model.fit(self.X, self.y)

        self.assertGreater(model.score(self.X, self.y), 0.0)

    def test_reproducible_with_integer_seed(self):
        kwargs = dict(hidden_layer_size=8, n_epochs=2, batch_size=100,
                      random_state=7)

        first = NeuralNetworkRegressor(**kwargs).fit(self.X, self.y)
        second = NeuralNetworkRegressor(**kwargs).fit(self.X, self.y)

        for a, b in zip(first.params_, second.params_):
            np.testing.assert_array_equal(a, b)
        self.assertEqual(first.cost_history_, second.cost_history_)

    def test_random_state_object_matches_seed(self):
        kwargs = dict(hidden_layer_size=8, n_epochs=2, batch_size=100)

        seeded = NeuralNetworkRegressor(random_state=7, **kwargs)
        seeded.fit(self.X, self.y)

        given = NeuralNetworkRegressor(
            random_state=np.random.RandomState(7), **kwargs)
        given.fit(self.X, self.y)

        for a, b in zip(seeded.params_, given.params_):
            np.testing.assert_array_equal(a, b)

        with self.assertRaises(ValueError):
            NeuralNetworkRegressor(random_state='seed').fit(self.X, self.y)

    def test_get_params_and_clone(self):
        model = NeuralNetworkRegressor(hidden_layer_size=10, n_epochs=2)
        params = model.get_params()

        self.assertEqual(params['hidden_layer_size'], 10)
        self.assertEqual(params['n_epochs'], 2)
        self.assertEqual(params['batch_size'], 512)
        self.assertEqual(params['learning_rate'], 0.01)

        cloned = clone(model)
        self.assertEqual(cloned.get_params(), params)
        self.assertFalse(cloned.is_fitted)

    def test_invalid_hyperparameters(self):
        bad = [
            dict(hidden_layer_size=0),
            dict(n_epochs=-1),
            dict(batch_size=2.5),
            dict(learning_rate=0),
            dict(learning_rate=np.inf),
            dict(learning_rate='fast'),
            dict(init_scale=-1e-4),
        ]

        for kwargs in bad:
            model = NeuralNetworkRegressor(**kwargs)
            with self.assertRaises(ValueError):
                model.fit(self.X, self.y)

    def test_shape_mismatch(self):
        model = NeuralNetworkRegressor(n_epochs=1, random_state=0)

        with self.assertRaises(ValueError):
            model.fit(self.X, self.y[:-1])

        with self.assertRaises(ValueError):
            model.fit(self.X[:, 0], self.y)

        model.fit(self.X, self.y)

        with self.assertRaises(ValueError):
            model.predict(self.X[:, :2])


if __name__ == '__main__':
    unittest.main()
