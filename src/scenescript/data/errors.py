"""Custom exceptions for script and string-table loading."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when script or table files are missing or unreadable."""


class DataValidationError(DataError):
    """Raised when loaded content fails structural validation."""
