class ModelNotFit(Exception):
    """ Raised when trying to access properties or methods that require a
    fitted model
    """
