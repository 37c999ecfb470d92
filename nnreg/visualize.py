import matplotlib.pyplot as plt
import numpy


def plot_cost_history(costs, ax=None, log_scale=False,
                      line_kwargs=dict(c='b', ls='-', lw=2, marker='o')):
    """ Plot the training cost against the epoch index

    Parameters
    ----------
    costs: list or ndarray, shape=(n_epochs+1,)
        The cost before training followed by the cost after each epoch,
        e.g., the `cost_history_` attribute of a fitted model.

    ax: matplotlib.axes.Axes, default=None
        The default (None) creates a new figure and axis.

    log_scale: bool, default=False
        If True, the cost axis uses a log scale.

    line_kwargs: args
        Any keyword arguments that can be passed to `matplotlib.pyplot.plot`.

    Returns
    -------
    ax: matplotlib.axes.Axes
    """
    costs = numpy.asarray(costs, dtype=float)

    if costs.ndim != 1 or costs.shape[0] == 0:
        raise ValueError("`costs` must be a non-empty 1d sequence.")

    if ax is None:
        _, ax = plt.subplots(1, 1)

    ax.plot(numpy.arange(costs.shape[0]), costs, **line_kwargs)
    ax.set_xlabel('Epoch')
    ax.set_ylabel('Training cost')

    if log_scale:
        ax.set_yscale('log')

    ax.grid(True)

    return ax
