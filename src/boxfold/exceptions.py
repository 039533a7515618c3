"""Exceptions raised within the `boxfold` library."""


class ConfigError(Exception):
    """Raised when a transformation policy is configured inconsistently."""
