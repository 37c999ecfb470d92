import logging
import os

import h5py

from .splitter import DatasetSplit


logger = logging.getLogger(__name__)


TRAINING_DATASET_KEY = 'training'
TESTING_DATASET_KEY = 'testing'
DATASET_KEYS = (
    TRAINING_DATASET_KEY,
    TESTING_DATASET_KEY,
)
FEATURES_KEY = 'features'
TARGETS_KEY = 'targets'


def save_splits(h5_file, training, testing, compress=True):
    """ Store the training and testing datasets in an hdf5 file

    The format, assuming `hf` is an h5py `File`, is as follows::

        'training'
        |_ features
        |_ targets
        'testing'
        |_ features
        |_ targets

    Parameters
    ----------
    h5_file: str
        Location of the hdf5 file to create. It must not exist yet.

    training, testing: DatasetSplit

    compress: bool, default=True
        If True, :code:`gzip` compression with default compression
        options is used for the arrays.
    """
    if os.path.exists(h5_file):
        msg = "Dataset already exists at {}"
        raise FileExistsError(msg.format(h5_file))

    splits = dict(zip(DATASET_KEYS, (training, testing)))

    for dataset_key, split in splits.items():
        if not isinstance(split, DatasetSplit):
            msg = "`{}` should be a DatasetSplit but was type {}"
            raise TypeError(msg.format(dataset_key, type(split)))

    if training.input_dim != testing.input_dim:
        msg = "Mismatch in number of features: training ({}), testing ({})"
        raise ValueError(msg.format(training.input_dim, testing.input_dim))

    compress_method = "gzip" if compress else None

    with h5py.File(h5_file, mode='w') as hf:
        for dataset_key, split in splits.items():
            group = hf.create_group(dataset_key)
            group.create_dataset(
                FEATURES_KEY, data=split.features,
                compression=compress_method)
            group.create_dataset(
                TARGETS_KEY, data=split.targets,
                compression=compress_method)

    msg = "Stored {} training and {} testing examples in {}"
    logger.info(msg.format(
        training.n_examples, testing.n_examples, h5_file))


def load_splits(h5_file):
    """ Load the datasets stored by :func:`save_splits`

    Returns
    -------
    training, testing: DatasetSplit, DatasetSplit
    """
    if not os.path.exists(h5_file):
        msg = "No dataset file at {}"
        raise FileNotFoundError(msg.format(h5_file))

    splits = []

    with h5py.File(h5_file, mode='r') as hf:
        for dataset_key in DATASET_KEYS:
            if dataset_key not in hf:
                msg = "Dataset file {} has no `{}` group"
                raise ValueError(msg.format(h5_file, dataset_key))

            group = hf[dataset_key]
            splits.append(DatasetSplit(
                features=group[FEATURES_KEY][...],
                targets=group[TARGETS_KEY][...]))

    return tuple(splits)
