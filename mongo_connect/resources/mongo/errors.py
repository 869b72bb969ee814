"""Errors raised by mongo_connect itself. Driver errors are never wrapped."""


class ConfigurationError(Exception):
    """Raised when no MongoDB URI can be resolved. Always raised before any I/O."""
