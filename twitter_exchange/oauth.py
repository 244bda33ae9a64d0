"""
OAuth 1.0a Signing
Build the signature base string, HMAC-SHA1 signature and Authorization header
for a request made with already-issued access tokens.
"""

import base64
import hashlib
import hmac
import secrets
import time
from typing import Any, Callable, Dict, NamedTuple, Optional
from urllib.parse import quote

from .auth import Credentials
from .exceptions import UsageError
from .logger import logger
from .request_spec import RequestSpec

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"
ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE")

# Request parameters never take part in the base string.
BASE_STRING_KEYS = (
    "oauth_consumer_key",
    "oauth_nonce",
    "oauth_signature_method",
    "oauth_timestamp",
    "oauth_token",
    "oauth_version",
)

# Header order is fixed, not re-sorted.
HEADER_KEYS = (
    "oauth_consumer_key",
    "oauth_nonce",
    "oauth_signature",
    "oauth_signature_method",
    "oauth_timestamp",
    "oauth_token",
    "oauth_version",
)


def percent_encode(value: Any) -> str:
    """RFC 3986 encoding: only A-Z a-z 0-9 - . _ ~ are left as is."""
    if not isinstance(value, (str, bytes)):
        value = str(value)
    return quote(value, safe="~")


def build_base_string(method: str, url: str, oauth_params: Dict[str, Any]) -> str:
    pairs = [
        percent_encode(key) + "=" + percent_encode(oauth_params[key])
        for key in sorted(oauth_params)
        if key in BASE_STRING_KEYS
    ]
    return "&".join([method.upper(), percent_encode(url), percent_encode("&".join(pairs))])


def signing_key(consumer_secret: str, token_secret: str) -> str:
    return percent_encode(consumer_secret) + "&" + percent_encode(token_secret)


def hmac_sha1_signature(base_string: str, key: str) -> str:
    digest = hmac.new(key.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")


def build_authorization_header(oauth_params: Dict[str, Any]) -> str:
    """Render the Authorization header value, e.g. 'OAuth oauth_consumer_key="ck", ...'."""
    values = [
        '%s="%s"' % (key, percent_encode(oauth_params[key]))
        for key in HEADER_KEYS
        if key in oauth_params
    ]
    return "OAuth " + ", ".join(values)


def random_nonce() -> str:
    return secrets.token_hex(16)


def timestamp_nonce() -> str:
    """Legacy nonce: the current unix time. Not unique across calls in the same second."""
    return str(int(time.time()))


class SignedRequest(NamedTuple):
    """Everything needed to dispatch one signed request."""

    method: str
    url: str
    headers: Dict[str, str]
    body: Optional[str]
    authorization: str
    oauth_params: Dict[str, str]
    base_string: str
    spec: RequestSpec


class OAuth1Signer:
    """Sign requests with a fixed set of credentials."""

    def __init__(self, credentials: Credentials,
                 nonce_factory: Optional[Callable[[], str]] = None,
                 clock: Optional[Callable[[], float]] = None):
        """
        Initialize the signer.

        Args:
            credentials: Consumer and access-token credentials
            nonce_factory: Returns a fresh nonce per request (default: random hex)
            clock: Returns the current unix time (default: time.time)
        """
        self.credentials = credentials
        self.nonce_factory = nonce_factory or random_nonce
        self.clock = clock or time.time

    def oauth_params(self) -> Dict[str, str]:
        """Fresh protocol parameters for one signing pass."""
        return {
            "oauth_consumer_key": self.credentials.consumer_key,
            "oauth_nonce": str(self.nonce_factory()),
            "oauth_signature_method": SIGNATURE_METHOD,
            "oauth_token": self.credentials.access_token,
            "oauth_timestamp": str(int(self.clock())),
            "oauth_version": OAUTH_VERSION,
        }

    def sign(self, spec: RequestSpec, request_method: Optional[str] = None) -> SignedRequest:
        """
        Sign a request.

        Args:
            spec: The request to sign
            request_method: Overrides spec.method when given

        Returns:
            The signed request with its headers and final URL/body

        Raises:
            UsageError: If the method is not GET, POST, PUT or DELETE, or the
                spec carries both query and body parameters
        """
        method = request_method if request_method is not None else spec.method
        if not isinstance(method, str) or method.upper() not in ALLOWED_METHODS:
            raise UsageError("Request method must be either POST, GET, PUT or DELETE")
        method = method.upper()
        spec.validate()
        if method != spec.method:
            spec = spec.with_method(method)

        oauth = self.oauth_params()
        base_string = build_base_string(method, spec.url, oauth)
        key = signing_key(self.credentials.consumer_secret, self.credentials.access_token_secret)
        oauth["oauth_signature"] = hmac_sha1_signature(base_string, key)
        authorization = build_authorization_header(oauth)
        logger.debug("Signed %s %s (nonce=%s)", method, spec.url, oauth["oauth_nonce"])

        headers = {
            "Authorization": authorization,
            "Content-Type": "application/json",
            "Expect": "",
        }
        return SignedRequest(
            method=method,
            url=spec.target_url,
            headers=headers,
            body=spec.body,
            authorization=authorization,
            oauth_params=oauth,
            base_string=base_string,
            spec=spec,
        )
