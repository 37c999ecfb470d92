import logging


LOGGER_NAME = 'nnreg'

LINE_FORMAT = ("[%(asctime)s] [%(name)s:%(lineno)d] "
               "%(levelname)-8s %(message)s")
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(filename=None, stdout=True, level=logging.INFO):
    """ Sets up logging formatting, etc, for all `nnreg` loggers

    Parameters
    ----------
    filename: str, default=None
        If given, log records are written to this file, which is
        truncated first.

    stdout: bool, default=True
        If True, log records are also written to the console (stderr).

    level: int, default=logging.INFO
        The logging level of the `nnreg` logger.

    Returns
    -------
    logger: logging.Logger
        The configured `nnreg` logger.
    """
    formatter = logging.Formatter(fmt=LINE_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Calling this twice should not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if filename is not None:
        fhandler = logging.FileHandler(filename, mode='w')
        fhandler.setFormatter(formatter)
        logger.addHandler(fhandler)

    if stdout:
        shandler = logging.StreamHandler()
        shandler.setFormatter(formatter)
        logger.addHandler(shandler)

    return logger
