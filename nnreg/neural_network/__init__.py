# flake8: noqa

from .activation import sigmoid, sigmoid_prime

from .network import cost, gradients, predict

from .parameters import (
    GradientSet,
    initialize_parameters,
    ParameterSet,
    update_parameters,
)

from .training import batch_indices, train
