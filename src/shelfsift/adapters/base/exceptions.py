"""Adapter-specific exceptions.

These signal programming or configuration mistakes and are always raised.
Failures of the remote provider itself are reported through
``ResultSet.error`` instead.
"""


class AdapterError(Exception):
    """Base exception for adapter errors."""


class ConnectionError(AdapterError):
    """Raised when the adapter is used before its HTTP client is ready."""


class ConfigurationError(AdapterError):
    """Raised when adapter configuration is invalid or incomplete."""


class InvalidSearchArgumentsError(AdapterError):
    """Raised when search arguments cannot be normalized for an adapter."""
