"""Custom exceptions for brickset."""


class BricksetError(Exception):
    """Base exception for brickset errors."""
    pass


class DataLoadError(BricksetError):
    """Raised when the record file cannot be read or contains invalid records."""
    pass


class ConfigurationError(BricksetError):
    """Raised when there's an error in configuration."""
    pass
