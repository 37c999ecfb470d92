import logging

import numpy

from .network import cost, gradients, validate_inputs
from .parameters import update_parameters


logger = logging.getLogger(__name__)


def batch_indices(n_samples, batch_size, random_state=None):
    """ Yield the indices of a random permutation of `range(n_samples)` in
    consecutive chunks of `batch_size`. The last chunk holds the remainder
    when `n_samples` is not divisible by `batch_size`.
    """
    if random_state is None:
        random_state = numpy.random.RandomState()

    permutation = random_state.permutation(n_samples)

    for start in range(0, n_samples, batch_size):
        yield permutation[start:start + batch_size]


def train(X, y, params, n_epochs, batch_size, learning_rate,
          random_state=None, on_epoch=None):
    """ Mini-batch gradient descent on the half sum of squared errors

    Parameters
    ----------
    X: ndarray, shape=(n_samples, input_dim)
        The training inputs -- examples by row.

    y: ndarray, shape=(n_samples,)
        The training outputs.

    params: ParameterSet
        The initial parameters. These are not modified.

    n_epochs: int
        Number of passes over the training data.

    batch_size: int
        Number of examples per gradient step.

    learning_rate: float
        Step size for the gradient descent steps. Each batch's gradient is
        divided by the number of rows in that batch.

    random_state: numpy.random.RandomState, default=None
        Source of the per-epoch permutations. Provide one for reproducible
        results.

    on_epoch: callable or list of callables, default=None
        Each is called as `on_epoch(epoch, cost)` with the cost over the
        full training set, first with epoch 0 before any update and then
        after every epoch.

    Returns
    -------
    params: ParameterSet
        The trained parameters.
    """
    X, y = validate_inputs(X, params, y)

    if random_state is None:
        random_state = numpy.random.RandomState()

    if on_epoch is None:
        on_epoch = []
    elif callable(on_epoch):
        on_epoch = [on_epoch]

    n_samples = X.shape[0]
    fmt = "Epoch {{:0{:d}d}} / {:d}, cost = {{:.7f}}".format(
        len(str(n_epochs)), n_epochs)
    warned = False

    for epoch in range(n_epochs + 1):

        if epoch > 0:
            for indices in batch_indices(n_samples, batch_size, random_state):
                grads = gradients(X[indices], y[indices], params)
                step = learning_rate / len(indices)
                params = update_parameters(params, grads, step)

        current_cost = cost(X, y, params)
        logger.info(fmt.format(epoch, current_cost))

        if not numpy.isfinite(current_cost) and not warned:
            msg = ("Cost is not finite at epoch {:d}; "
                   "the learning rate ({}) may be too large")
            logger.warning(msg.format(epoch, learning_rate))
            warned = True

        for func in on_epoch:
            func(epoch, current_cost)

    return params
