import unittest

import numpy as np

from nnreg.data.splitter import DatasetSplit, train_test_split


class TestDatasetSplit(unittest.TestCase):

    def test_valid(self):
        split = DatasetSplit(np.zeros((4, 3)), np.zeros(4))

        self.assertEqual(split.n_examples, 4)
        self.assertEqual(split.input_dim, 3)

        features, targets = split
        self.assertEqual(features.shape, (4, 3))
        self.assertEqual(targets.shape, (4,))

    def test_row_count_mismatch(self):
        with self.assertRaises(ValueError):
            DatasetSplit(np.zeros((4, 3)), np.zeros(5))

    def test_bad_dimensions(self):
        with self.assertRaises(ValueError):
            DatasetSplit(np.zeros(4), np.zeros(4))
        with self.assertRaises(ValueError):
            DatasetSplit(np.zeros((4, 3)), np.zeros((4, 1)))


class TestTrainTestSplit(unittest.TestCase):

    def setUp(self):
        self.random_state = np.random.RandomState(1234)
        self.features = self.random_state.randn(100, 3)
        self.targets = np.arange(100, dtype=float)

    def test_split_sizes_and_disjointness(self):
        training, testing = train_test_split(
            self.features, self.targets, test_fraction=0.25,
            random_state=self.random_state)

        self.assertEqual(training.n_examples, 75)
        self.assertEqual(testing.n_examples, 25)

        # Targets are the row indices so they identify the rows
        all_targets = np.concatenate([training.targets, testing.targets])
        np.testing.assert_array_equal(np.sort(all_targets), self.targets)

        # Rows keep their features
        for split in (training, testing):
            rows = split.targets.astype(int)
            np.testing.assert_array_equal(split.features, self.features[rows])

    def test_reproducible(self):
        first = train_test_split(self.features, self.targets,
                                 random_state=np.random.RandomState(3))
        second = train_test_split(self.features, self.targets,
                                  random_state=np.random.RandomState(3))

        for a, b in zip(first, second):
            np.testing.assert_array_equal(a.targets, b.targets)

    def test_bad_fraction(self):
        for fraction in [0, 1, -0.1, 1.5]:
            with self.assertRaises(ValueError):
                train_test_split(self.features, self.targets,
                                 test_fraction=fraction)

    def test_empty_side(self):
        with self.assertRaises(ValueError):
            train_test_split(self.features[:2], self.targets[:2],
                             test_fraction=0.1)


if __name__ == '__main__':
    unittest.main()
