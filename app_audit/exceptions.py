"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class ProfileInventoryError(BaseAppError):
    """Exception raised when the deployed profile inventory cannot be read."""

    pass


class ApplicationSearchError(BaseAppError):
    """Exception raised when the application search hits an I/O failure."""

    pass


class VersionMetadataError(BaseAppError):
    """Exception raised when a bundle version cannot be read or compared."""

    pass
