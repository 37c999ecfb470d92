import logging

from nnreg.baseline import compare
from nnreg.core.model import NeuralNetworkRegressor


logger = logging.getLogger(__name__)


def run_experiment(training, testing, **hyperparameters):
    """ Fit a network to the training dataset and compare it to a linear
    regression baseline on both datasets

    Parameters
    ----------
    training, testing: DatasetSplit

    **hyperparameters:
        Keyword arguments for :class:`NeuralNetworkRegressor`.

    Returns
    -------
    model, scores: NeuralNetworkRegressor, dict
        The fitted model and the output of :func:`nnreg.baseline.compare`.
    """
    if training.input_dim != testing.input_dim:
        msg = "Mismatch in number of features: training ({}), testing ({})"
        raise ValueError(msg.format(training.input_dim, testing.input_dim))

    msg = "Training on {} examples, testing on {} examples"
    logger.info(msg.format(training.n_examples, testing.n_examples))

    model = NeuralNetworkRegressor(**hyperparameters)
    model.fit(training.features, training.targets)

    scores = compare(model, training, testing)

    return model, scores
