from collections import namedtuple

import numpy


class DatasetSplit(namedtuple('DatasetSplit', ['features', 'targets'])):
    """ A feature matrix (observations by row) paired with its target
    vector (one value per observation)
    """
    __slots__ = ()

    def __new__(cls, features, targets):
        features = numpy.asarray(features, dtype=float)
        targets = numpy.asarray(targets, dtype=float)

        if features.ndim != 2:
            msg = "`features` should be 2d but has shape {}"
            raise ValueError(msg.format(features.shape))

        if targets.ndim != 1:
            msg = "`targets` should be 1d but has shape {}"
            raise ValueError(msg.format(targets.shape))

        if features.shape[0] != targets.shape[0]:
            msg = "Mismatch in number of examples: features ({}), targets ({})"
            raise ValueError(msg.format(features.shape[0], targets.shape[0]))

        return super().__new__(cls, features, targets)

    @property
    def n_examples(self):
        return self.features.shape[0]

    @property
    def input_dim(self):
        return self.features.shape[1]


def train_test_split(features, targets, test_fraction=0.2, random_state=None):
    """ Randomly split the examples into training and testing datasets

    Parameters
    ----------
    features: ndarray, shape=(n_examples, input_dim)

    targets: ndarray, shape=(n_examples,)

    test_fraction: float, default=0.2
        The fraction of examples placed in the testing dataset.

    random_state: numpy.random.RandomState, default=None
        For reproducible results.

    Returns
    -------
    training, testing: DatasetSplit, DatasetSplit
    """
    dataset = DatasetSplit(features, targets)

    if not 0 < test_fraction < 1:
        msg = "`test_fraction` ({}) should be between 0 and 1"
        raise ValueError(msg.format(test_fraction))

    n_test = int(round(test_fraction * dataset.n_examples))

    if n_test == 0 or n_test == dataset.n_examples:
        msg = ("Splitting {} examples with test_fraction={} leaves "
               "an empty dataset")
        raise ValueError(msg.format(dataset.n_examples, test_fraction))

    if random_state is None:
        random_state = numpy.random.RandomState()

    permutation = random_state.permutation(dataset.n_examples)
    test_indices = permutation[:n_test]
    train_indices = permutation[n_test:]

    training = DatasetSplit(dataset.features[train_indices],
                            dataset.targets[train_indices])
    testing = DatasetSplit(dataset.features[test_indices],
                           dataset.targets[test_indices])

    return training, testing
