import logging

from sklearn.linear_model import LinearRegression

from nnreg.score_functions import r2, rmse


logger = logging.getLogger(__name__)


def fit_linear_baseline(training):
    """ Fit an ordinary least squares model to the training dataset

    Parameters
    ----------
    training: DatasetSplit

    Returns
    -------
    model: sklearn.linear_model.LinearRegression
    """
    model = LinearRegression()
    model.fit(training.features, training.targets)
    return model


def compare(model, training, testing, baseline=None):
    """ Root mean squared errors and coefficients of determination of the
    fitted `model` and of a linear regression baseline over the training
    and testing datasets

    Parameters
    ----------
    model: object with a `predict` member function
        The fitted model, e.g., a NeuralNetworkRegressor.

    training, testing: DatasetSplit

    baseline: object with a `predict` member function, default=None
        The default (None) fits a LinearRegression to `training`.

    Returns
    -------
    scores: dict
        Keys are 'model' and 'baseline', each mapping to a dict with
        'training' and 'testing' keys. Those map to dicts with 'rmse'
        and 'r2' values.
    """
    if baseline is None:
        baseline = fit_linear_baseline(training)

    scores = {}

    datasets = (('training', training), ('testing', testing))

    for name, regressor in (('model', model), ('baseline', baseline)):
        scores[name] = {}

        for dataset_key, dataset in datasets:
            y_hat = regressor.predict(dataset.features)
            scores[name][dataset_key] = {
                'rmse': rmse(y_hat, dataset.targets),
                'r2': r2(y_hat, dataset.targets),
            }

        msg = ("{:<8s} training: RMSE = {:.7f}, R2 = {:.4f}; "
               "testing: RMSE = {:.7f}, R2 = {:.4f}")
        logger.info(msg.format(
            name,
            scores[name]['training']['rmse'], scores[name]['training']['r2'],
            scores[name]['testing']['rmse'], scores[name]['testing']['r2']))

    return scores
