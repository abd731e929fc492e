"""Exceptions raised by the taxi fare package."""


class TaxiFareError(Exception):
    """Base class for all package errors."""


class MalformedDataError(TaxiFareError):
    """A data row has the wrong shape or a value that fails to parse."""


class ModelLoadError(TaxiFareError):
    """A persisted model is corrupt, truncated or from an incompatible format."""
