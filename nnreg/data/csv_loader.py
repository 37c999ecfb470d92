import logging

import numpy
import pandas as pd

from .splitter import DatasetSplit


logger = logging.getLogger(__name__)


def load_csv(path, feature_columns, target_column, log_target=False,
             delimiter=','):
    """ Load a numeric regression dataset from a CSV file with a header row

    Parameters
    ----------
    path: str
        Location of the CSV file.

    feature_columns: list of str
        Names of the columns used as features, in order.

    target_column: str
        Name of the column holding the regression target.

    log_target: bool, default=False
        If True, the natural log of the target is used. Rows whose
        target is not positive are dropped.

    delimiter: str, default=','

    Returns
    -------
    dataset: DatasetSplit
        Rows with missing or non-numeric values in any of the used
        columns are dropped.
    """
    if len(feature_columns) == 0:
        raise ValueError("At least one feature column is required")

    table = pd.read_csv(path, sep=delimiter, skipinitialspace=True)

    columns = list(feature_columns) + [target_column]
    missing = [name for name in columns if name not in table.columns]

    if missing:
        msg = "Columns {} not found in {} (available: {})"
        raise ValueError(msg.format(missing, path, list(table.columns)))

    # Only the used columns are converted; anything non-numeric becomes nan
    table = table[columns].apply(pd.to_numeric, errors='coerce')

    features = table[list(feature_columns)].to_numpy(dtype=float)
    targets = table[target_column].to_numpy(dtype=float)

    keep = numpy.isfinite(features).all(axis=1) & numpy.isfinite(targets)
    n_dropped = (~keep).sum()
    if n_dropped > 0:
        msg = "Dropped {} of {} rows with missing values from {}"
        logger.warning(msg.format(n_dropped, keep.shape[0], path))

    features = features[keep]
    targets = targets[keep]

    if log_target:
        positive = targets > 0
        n_dropped = (~positive).sum()
        if n_dropped > 0:
            msg = "Dropped {} of {} rows with non-positive targets"
            logger.warning(msg.format(n_dropped, positive.shape[0]))

        features = features[positive]
        targets = numpy.log(targets[positive])

    msg = "Loaded {} rows with {} features from {}"
    logger.info(msg.format(features.shape[0], features.shape[1], path))

    return DatasetSplit(features, targets)
