"""
Forward pass, cost and gradient for a single hidden layer network
with a single, identity output unit:

    Input (R^n) => Hidden (R^h) => Output (R)

For a batch of inputs X (one observation per row), the computation is:

    z1 = dot(X, W1) + b1
    a1 = sigmoid(z1)
    y_hat = dot(a1, W2) + b2

The cost is the (un-averaged) half sum of squared errors. Its gradient
with respect to each parameter is computed analytically.
"""
import numpy

from .activation import sigmoid, sigmoid_prime
from .parameters import GradientSet


def validate_inputs(X, params, y=None):
    """ Checks `X` (and `y`) against each other and the parameters
    and returns them as float arrays. A column vector `y` is flattened.
    """
    X = numpy.asarray(X, dtype=float)

    if X.ndim != 2:
        msg = "`X` should be 2d (n_samples, input_dim) but has shape {}"
        raise ValueError(msg.format(X.shape))

    if X.shape[1] != params.input_dim:
        msg = "`X` has {} columns but the parameters expect input_dim={}"
        raise ValueError(msg.format(X.shape[1], params.input_dim))

    if y is None:
        return X

    y = numpy.asarray(y, dtype=float)

    if y.ndim == 2 and y.shape[1] == 1:
        y = y.ravel()

    if y.ndim != 1:
        msg = "`y` should be 1d (n_samples,) but has shape {}"
        raise ValueError(msg.format(y.shape))

    if y.shape[0] != X.shape[0]:
        msg = "Mismatch in number of examples: X {}, y {}"
        raise ValueError(msg.format(X.shape, y.shape))

    return X, y


def _forward(X, params):
    z1 = numpy.dot(X, params.W1) + params.b1[numpy.newaxis, :]
    a1 = sigmoid(z1)
    y_hat = numpy.dot(a1, params.W2)[:, 0] + params.b2
    return z1, a1, y_hat


def predict(X, params):
    """
    Parameters
    ----------
    X: ndarray, shape=(n_samples, input_dim)
        Each row of `X` is an observation.

    params: ParameterSet

    Returns
    -------
    y_hat: ndarray, shape=(n_samples,)
        y_hat = dot(sigmoid(dot(X, W1) + b1), W2) + b2
    """
    X = validate_inputs(X, params)
    return _forward(X, params)[-1]


def cost(X, y, params):
    """ Half the sum of squared errors between `predict(X, params)`
    and `y`. Not divided by the number of samples.
    """
    X, y = validate_inputs(X, params, y)
    diff = y - _forward(X, params)[-1]
    return 0.5 * numpy.dot(diff, diff)


def gradients(X, y, params):
    """ Gradient of `cost(X, y, params)` with respect to each parameter

    Parameters
    ----------
    X: ndarray, shape=(n_samples, input_dim)

    y: ndarray, shape=(n_samples,)

    params: ParameterSet

    Returns
    -------
    grads: GradientSet
        [dW1, db1, dW2, db2], each with the shape of its parameter. These
        are sums over the batch; subtracting a positive multiple of them
        decreases the cost.
    """
    X, y = validate_inputs(X, params, y)

    z1, a1, y_hat = _forward(X, params)

    # The output unit is the identity, so its delta is the residual.
    error = (y - y_hat)[:, numpy.newaxis]

    delta_hidden = numpy.dot(error, params.W2.T) * sigmoid_prime(z1)

    dW1 = -numpy.dot(X.T, delta_hidden)
    db1 = -delta_hidden.sum(axis=0)
    dW2 = -numpy.dot(a1.T, error)
    db2 = -float(error.sum())

    return GradientSet(dW1=dW1, db1=db1, dW2=dW2, db2=db2)
