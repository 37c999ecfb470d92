# flake8: noqa

from .csv_loader import load_csv

from .datasets_handler import load_splits, save_splits

from .splitter import DatasetSplit, train_test_split

from .synthetic import make_dataset
