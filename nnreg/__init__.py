# flake8: noqa

from .core.model import NeuralNetworkRegressor
