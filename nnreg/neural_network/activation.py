import numpy


def sigmoid(x):
    """ The logistic function, 1 / (1 + exp(-x)), applied elementwise

    Computed from exp(-|x|), which cannot overflow, so large magnitude
    inputs saturate to 0 or 1.
    """
    x = numpy.asarray(x, dtype=float)
    z = numpy.exp(-numpy.abs(x))
    return numpy.where(x >= 0, 1.0 / (1.0 + z), z / (1.0 + z))


def sigmoid_prime(x):
    """ Derivative of the logistic function, exp(-x) / (1 + exp(-x))**2
    """
    s = sigmoid(x)
    return s * (1.0 - s)
