import unittest

import numpy as np

from nnreg.neural_network import initialize_parameters, train
from nnreg.util.on_epoch import collect_costs, log_progress


class TestOnEpoch(unittest.TestCase):

    def test_collect_costs(self):
        costs = []
        on_epoch = collect_costs(costs)

        on_epoch(0, 3.0)
        on_epoch(1, 2.0)

        self.assertEqual(costs, [3.0, 2.0])

    def test_log_progress(self):
        on_epoch = log_progress(n_epochs=10)

        with self.assertLogs('nnreg.util.on_epoch', level='INFO') as captured:
            on_epoch(3, 0.5)

        self.assertIn("(03 / 10) Training cost = 0.5000000",
                      captured.output[0])

    def test_with_train(self):
        rs = np.random.RandomState(1234)
        X = rs.randn(50, 2)
        y = rs.randn(50)
        params = initialize_parameters(2, 4, random_state=rs)

        costs = []
        with self.assertLogs('nnreg.util.on_epoch', level='INFO') as captured:
            train(X, y, params, n_epochs=3, batch_size=10,
                  learning_rate=0.01, random_state=rs,
                  on_epoch=[collect_costs(costs), log_progress(3)])

        self.assertEqual(len(costs), 4)
        self.assertEqual(len(captured.output), 4)


if __name__ == '__main__':
    unittest.main()
