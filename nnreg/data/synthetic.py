import numpy

from .splitter import DatasetSplit


def make_dataset(n_samples=10000, input_dim=3, noise=0.1, random_state=None):
    """
    Make a smooth, non-linear regression dataset.

    The features are standard normal. The target is

        y = 2 + sin(x_0) + 0.5 * x_1 - 0.25 * x_2**2 + ... + noise

    where the pattern (sin, linear, negative quadratic) repeats over
    the remaining feature columns.

    Parameters
    ----------
    n_samples: int, default=10000
        Number of rows.

    input_dim: int, default=3
        Number of feature columns.

    noise: float, default=0.1
        Standard deviation of the additive Gaussian noise on the target.

    random_state: numpy.random.RandomState
        RandomState object for reproducible results.

    Returns
    -------
    dataset: DatasetSplit
    """
    if n_samples < 1 or input_dim < 1:
        msg = "`n_samples` ({}) and `input_dim` ({}) must be positive"
        raise ValueError(msg.format(n_samples, input_dim))

    rs = random_state if random_state is not None else \
        numpy.random.RandomState()

    features = rs.randn(n_samples, input_dim)
    targets = 2.0 * numpy.ones(n_samples)

    terms = [
        numpy.sin,
        lambda x: 0.5 * x,
        lambda x: -0.25 * x**2,
    ]

    for j in range(input_dim):
        targets += terms[j % len(terms)](features[:, j])

    targets += noise * rs.randn(n_samples)

    return DatasetSplit(features, targets)
