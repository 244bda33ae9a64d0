"""
Twitter API Exchange
Sign requests with OAuth 1.0a and send them to the Twitter/X REST API.
"""

__version__ = "0.1.0"
__author__ = "Developer"

from .auth import Credentials
from .client import TwitterClient
from .exceptions import (
    ConfigurationError,
    EnvironmentCapabilityError,
    TransportError,
    TwitterExchangeError,
    UsageError,
)
from .oauth import OAuth1Signer, SignedRequest, percent_encode
from .request_spec import ParamSource, RequestSpec
from .transport import RequestsTransport, TransportResponse

__all__ = [
    "TwitterClient",
    "Credentials",
    "RequestSpec",
    "ParamSource",
    "OAuth1Signer",
    "SignedRequest",
    "percent_encode",
    "RequestsTransport",
    "TransportResponse",
    "TwitterExchangeError",
    "ConfigurationError",
    "EnvironmentCapabilityError",
    "UsageError",
    "TransportError",
]
