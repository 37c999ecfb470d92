import logging
import numbers

import numpy
from sklearn.base import BaseEstimator, RegressorMixin
from sklearn.utils import check_random_state

from nnreg.core.exception import ModelNotFit
from nnreg.neural_network import (
    initialize_parameters, predict, train)
from nnreg.neural_network.parameters import DEFAULT_INIT_SCALE
from nnreg.util.on_epoch import collect_costs


logger = logging.getLogger(__name__)

DEFAULT_HIDDEN_LAYER_SIZE = 64
DEFAULT_N_EPOCHS = 5
DEFAULT_BATCH_SIZE = 512
DEFAULT_LEARNING_RATE = 0.01


class NeuralNetworkRegressor(RegressorMixin, BaseEstimator):
    """ Single hidden layer neural network for regression, trained by
    mini-batch gradient descent. Follows the scikit-learn estimator
    interface, so it can be used wherever a regressor with `fit` and
    `predict` is expected.
    """

    def __init__(self,
                 hidden_layer_size=DEFAULT_HIDDEN_LAYER_SIZE,
                 n_epochs=DEFAULT_N_EPOCHS,
                 batch_size=DEFAULT_BATCH_SIZE,
                 learning_rate=DEFAULT_LEARNING_RATE,
                 init_scale=DEFAULT_INIT_SCALE,
                 random_state=None):
        """
        Parameters
        ----------
        hidden_layer_size: int, default=64
            Number of hidden units.

        n_epochs: int, default=5
            Number of passes over the training data.

        batch_size: int, default=512
            Number of examples per gradient descent step.

        learning_rate: float, default=0.01
            Step size for gradient descent steps.

        init_scale: float, default=1e-4
            Standard deviation of the normal distribution from which the
            initial weights are drawn. Biases start at zero.

        random_state: numpy.random.RandomState or int, default=None
            Provide a RandomState object (or a seed) for reproducible
            results. It is used for both the initial weights and the
            per-epoch shuffling. None uses numpy's global random state.
        """
        self.hidden_layer_size = hidden_layer_size
        self.n_epochs = n_epochs
        self.batch_size = batch_size
        self.learning_rate = learning_rate
        self.init_scale = init_scale
        self.random_state = random_state

    def _validate_hyperparameters(self):
        for name in ('hidden_layer_size', 'n_epochs', 'batch_size'):
            value = getattr(self, name)
            if not isinstance(value, numbers.Integral) or value <= 0:
                msg = "`{}` must be a positive integer (got {!r})"
                raise ValueError(msg.format(name, value))

        for name in ('learning_rate', 'init_scale'):
            try:
                value = float(getattr(self, name))
            except (ValueError, TypeError):
                msg = "`{}` must be numeric (got {!r})"
                raise ValueError(msg.format(name, getattr(self, name)))
            if not numpy.isfinite(value) or value <= 0:
                msg = "`{}` must be positive and finite (got {!r})"
                raise ValueError(msg.format(name, value))

    def fit(self, X, y):
        """ Fit the network to features `X`, shape=(n_samples, input_dim),
        and targets `y`, shape=(n_samples,)
        """
        self._validate_hyperparameters()

        X = numpy.asarray(X, dtype=float)
        if X.ndim != 2:
            msg = "`X` should be 2d (n_samples, input_dim) but has shape {}"
            raise ValueError(msg.format(X.shape))

        random_state = check_random_state(self.random_state)

        initial_params = initialize_parameters(
            input_dim=X.shape[1],
            hidden_layer_size=self.hidden_layer_size,
            scale=self.init_scale,
            random_state=random_state)

        msg = ("Fitting network: input_dim={}, hidden_layer_size={}, "
               "n_samples={}")
        logger.info(msg.format(
            X.shape[1], self.hidden_layer_size, X.shape[0]))

        self.cost_history_ = []

        self.params_ = train(
            X, y, initial_params,
            n_epochs=self.n_epochs,
            batch_size=self.batch_size,
            learning_rate=self.learning_rate,
            random_state=random_state,
            on_epoch=collect_costs(self.cost_history_))

        return self

    @property
    def is_fitted(self):
        return hasattr(self, 'params_')

    def predict(self, X):
        """
        Parameters
        ----------
        X: ndarray, shape=(n_samples, input_dim)

        Returns
        -------
        y_hat: ndarray, shape=(n_samples,)
        """
        if not self.is_fitted:
            msg = "This model has not been fit yet; call `fit` first"
            raise ModelNotFit(msg)
        return predict(X, self.params_)
