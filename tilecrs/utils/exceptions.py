class CRSException(Exception):
    """
    Base class for errors raised by tilecrs.
    """


class CRSConfigurationError(CRSException):
    """
    Raised when a CRS is assembled from parameters that can never produce valid
    conversions, e.g. a transformation with a zero scale coefficient.
    """
