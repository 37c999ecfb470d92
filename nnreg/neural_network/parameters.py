from collections import namedtuple

import numpy


DEFAULT_INIT_SCALE = 1e-4


class ParameterSet(namedtuple('ParameterSet', ['W1', 'b1', 'W2', 'b2'])):
    """ The trainable state of the network

    W1: ndarray, shape=(input_dim, hidden_layer_size)
        W1[i, j] = weight from input i to hidden unit j.

    b1: ndarray, shape=(hidden_layer_size,)
        b1[j] = bias into hidden unit j.

    W2: ndarray, shape=(hidden_layer_size, 1)
        W2[j, 0] = weight from hidden unit j to the output unit.

    b2: float
        Bias into the output unit.
    """
    __slots__ = ()

    def __new__(cls, W1, b1, W2, b2):
        W1 = numpy.asarray(W1, dtype=float)
        b1 = numpy.asarray(b1, dtype=float)
        W2 = numpy.asarray(W2, dtype=float)

        if W1.ndim != 2:
            msg = "`W1` should be 2d but has shape {}"
            raise ValueError(msg.format(W1.shape))

        hidden_layer_size = W1.shape[1]

        if b1.shape != (hidden_layer_size,):
            msg = "`b1` has shape {} but should be {}"
            raise ValueError(msg.format(b1.shape, (hidden_layer_size,)))

        if W2.shape != (hidden_layer_size, 1):
            msg = "`W2` has shape {} but should be {}"
            raise ValueError(msg.format(W2.shape, (hidden_layer_size, 1)))

        if numpy.ndim(b2) != 0:
            msg = "`b2` should be a scalar but has shape {}"
            raise ValueError(msg.format(numpy.shape(b2)))

        return super().__new__(cls, W1, b1, W2, float(b2))

    @property
    def input_dim(self):
        return self.W1.shape[0]

    @property
    def hidden_layer_size(self):
        return self.W1.shape[1]

    def copy(self):
        return ParameterSet(self.W1.copy(), self.b1.copy(),
                            self.W2.copy(), self.b2)

    def flatten(self):
        """ The parameters concatenated into a single 1d array,
        in the order W1, b1, W2, b2
        """
        return numpy.hstack([numpy.atleast_1d(p).ravel() for p in self])

    @classmethod
    def unflatten(cls, flat, input_dim, hidden_layer_size):
        """ Inverse of :meth:`flatten` """
        flat = numpy.asarray(flat, dtype=float)
        sizes = [input_dim * hidden_layer_size, hidden_layer_size,
                 hidden_layer_size, 1]

        if flat.shape != (sum(sizes),):
            msg = "`flat` has shape {} but should be {}"
            raise ValueError(msg.format(flat.shape, (sum(sizes),)))

        W1, b1, W2, b2 = numpy.split(flat, numpy.cumsum(sizes)[:-1])

        return cls(W1.reshape(input_dim, hidden_layer_size), b1,
                   W2.reshape(hidden_layer_size, 1), b2[0])


# Mirrors the shapes of `ParameterSet`, one gradient per parameter
GradientSet = namedtuple('GradientSet', ['dW1', 'db1', 'dW2', 'db2'])


def initialize_parameters(input_dim, hidden_layer_size,
                          scale=DEFAULT_INIT_SCALE, random_state=None):
    """ Draw initial parameters: IID normal weights and zero biases

    Parameters
    ----------
    input_dim: int
        Number of input features.

    hidden_layer_size: int
        Number of hidden units.

    scale: float, default=1e-4
        Standard deviation of the normal distribution for the weights.

    random_state: numpy.random.RandomState, default=None
        Provide a RandomState object for reproducible results.

    Returns
    -------
    params: ParameterSet
    """
    if random_state is None:
        random_state = numpy.random.RandomState()

    W1 = random_state.normal(0, scale, size=(input_dim, hidden_layer_size))
    b1 = numpy.zeros(hidden_layer_size)
    W2 = random_state.normal(0, scale, size=(hidden_layer_size, 1))
    b2 = 0.0

    return ParameterSet(W1=W1, b1=b1, W2=W2, b2=b2)


def update_parameters(params, grads, step):
    """ Returns a new ParameterSet, `param - step * grad` for each parameter
    """
    return ParameterSet(*[
        param - step * grad for param, grad in zip(params, grads)
    ])
