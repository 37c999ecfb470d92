import numpy


def _validate(y_hat, y):
    y_hat = numpy.asarray(y_hat, dtype=float).ravel()
    y = numpy.asarray(y, dtype=float).ravel()

    if y_hat.shape != y.shape:
        msg = "Mismatch in number of values: y_hat ({}), y ({})"
        raise ValueError(msg.format(y_hat.shape[0], y.shape[0]))

    return y_hat, y


def rmse(y_hat, y):
    """ Root mean squared error between predictions `y_hat` and targets `y`
    """
    y_hat, y = _validate(y_hat, y)
    return float(numpy.sqrt(numpy.mean((y_hat - y)**2)))


def r2(y_hat, y):
    """ Coefficient of determination of predictions `y_hat` for targets `y`
    """
    y_hat, y = _validate(y_hat, y)

    total = ((y - y.mean())**2).sum()
    residual = ((y - y_hat)**2).sum()

    if total == 0:
        # Constant targets: perfect if predicted exactly, otherwise nil.
        return 1.0 if residual == 0 else 0.0
    else:
        return float(1.0 - residual / total)
