"""
Exceptions
Errors raised by the Twitter API exchange client.
"""


class TwitterExchangeError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(TwitterExchangeError, ValueError):
    """A required credential is missing or empty."""


class EnvironmentCapabilityError(TwitterExchangeError, RuntimeError):
    """The host environment has no usable HTTP client."""


class UsageError(TwitterExchangeError):
    """The client was called in a way it does not support."""


class TransportError(TwitterExchangeError):
    """The HTTP request could not be completed."""
