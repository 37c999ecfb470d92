""" This module provides a few simple `on_epoch` functions that can be
used in `nnreg.neural_network.train`
"""
import logging


logger = logging.getLogger(__name__)


def collect_costs(cost_list):
    """ Collects the costs from the epochs. Costs are appended to
    :code:`cost_list` and so an empty list should be provided. Usage::

        costs = []
        params = train(X, y, params, ..., on_epoch=collect_costs(costs))
    """

    def on_epoch(epoch, cost):
        cost_list.append(cost)

    return on_epoch


def log_progress(n_epochs, msg="Training cost = {:.7f}"):
    """ Logs `msg`, formatted with the cost and prefixed with the
    epoch count, e.g., "(03 / 10) Training cost = 0.1234567"
    """
    fmt = "({{:0{:d}d}} / {:d}) {}".format(len(str(n_epochs)), n_epochs, msg)

    def on_epoch(epoch, cost):
        logger.info(fmt.format(epoch, cost))

    return on_epoch
