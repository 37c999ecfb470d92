import matplotlib.pyplot as plt
import numpy as np

from nnreg.core.logger import setup_logging
from nnreg.data import make_dataset, train_test_split
from nnreg.experiment import run_experiment
from nnreg.visualize import plot_cost_history


setup_logging(filename='fit-log.txt')

random_state = np.random.RandomState(1234)


# Create a toy dataset ########################################################

features, targets = make_dataset(
    n_samples=10000, input_dim=3, noise=0.1, random_state=random_state)

training, testing = train_test_split(
    features, targets, test_fraction=0.3, random_state=random_state)

# Fit the network and compare it to linear regression #########################

model, scores = run_experiment(
    training, testing,
    hidden_layer_size=64,
    n_epochs=5,
    batch_size=512,
    learning_rate=0.01,
    init_scale=1e-4,
    random_state=random_state,
)

plot_cost_history(model.cost_history_)
plt.show()
