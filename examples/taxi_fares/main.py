import os
import sys

import numpy as np

from nnreg.core.logger import setup_logging
from nnreg.data import load_csv, load_splits, save_splits, train_test_split
from nnreg.experiment import run_experiment


# Expects a CSV with (at least) these columns, e.g., an export of
# taxi trip records. Pass its location as the first argument.
FEATURE_COLUMNS = ['trip_distance', 'passenger_count', 'pickup_hour']
TARGET_COLUMN = 'fare_amount'
SPLITS_FILE = 'taxi-fares.h5'


setup_logging(filename='fit-log.txt')

random_state = np.random.RandomState(1234)

# Load the data, or the cached splits if they exist ###########################

if os.path.exists(SPLITS_FILE):
    training, testing = load_splits(SPLITS_FILE)
else:
    if len(sys.argv) < 2:
        sys.exit("usage: python main.py trips.csv")

    features, targets = load_csv(
        sys.argv[1], FEATURE_COLUMNS, TARGET_COLUMN, log_target=True)

    training, testing = train_test_split(
        features, targets, test_fraction=0.3, random_state=random_state)

    save_splits(SPLITS_FILE, training, testing)

# Fit the network and compare it to linear regression #########################

model, scores = run_experiment(
    training, testing,
    hidden_layer_size=64,
    n_epochs=5,
    batch_size=512,
    learning_rate=0.01,
    random_state=random_state,
)
