"""
Twitter API Client
Sign requests with OAuth 1.0a and exchange them with the API.
"""
from typing import Any, Mapping, Optional, Union

from .auth import Credentials
from .exceptions import UsageError
from .oauth import OAuth1Signer, SignedRequest
from .request_spec import RequestSpec
from .transport import RequestsTransport, Transport


class TwitterClient:
    """Twitter API client for requests signed with already-issued access tokens."""

    def __init__(self, credentials: Union[Credentials, Mapping[str, str]],
                 transport: Optional[Transport] = None, signer: Optional[OAuth1Signer] = None):
        """
        Initialize the client.

        Args:
            credentials: Credentials, or a settings mapping with consumer_key,
                consumer_secret, access_token and access_token_secret
            transport: Object with send(method, url, headers, body)
                (default: RequestsTransport)
            signer: Signer to use (default: OAuth1Signer over the credentials)

        Raises:
            ConfigurationError: If a credential is missing
            EnvironmentCapabilityError: If no HTTP client is available
        """
        if isinstance(credentials, Credentials):
            self.credentials = credentials.validate()
        else:
            self.credentials = Credentials.from_settings(credentials)
        self.transport = transport if transport is not None else RequestsTransport()
        self.signer = signer or OAuth1Signer(self.credentials)
        self.http_code = None

    def sign(self, spec: RequestSpec, request_method: Optional[str] = None) -> SignedRequest:
        """Sign a request without sending it."""
        return self.signer.sign(spec, request_method)

    def perform(self, signed: SignedRequest, return_body: bool = True) -> Optional[str]:
        """
        Send a signed request.

        Args:
            signed: Result of sign()
            return_body: Return the response body when True, None when False

        Returns:
            Raw response body. The status code is stored in http_code.
            http_code is None after a failed dispatch.

        Raises:
            UsageError: If return_body is not a bool
            TransportError: If the request could not be completed
        """
        if not isinstance(return_body, bool):
            raise UsageError("perform() return_body must be True or False")
        self.http_code = None
        response = self.transport.send(signed.method, signed.url, signed.headers, signed.body)
        self.http_code = response.status_code
        return response.body if return_body else None

    def execute(self, spec: RequestSpec, return_body: bool = True) -> Optional[str]:
        """Sign and send a request."""
        return self.perform(self.sign(spec), return_body)

    def get(self, url: str, params: Union[str, Mapping[str, Any], None] = None) -> Optional[str]:
        spec = RequestSpec.create(url, "GET")
        if params is not None:
            spec = spec.with_query_params(params)
        return self.execute(spec)

    def post(self, url: str, data: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        """
        POST body parameters as JSON.

        Args:
            url: API endpoint, e.g. https://api.twitter.com/2/tweets
            data: Body parameters

        Returns:
            Raw response body
        """
        spec = RequestSpec.create(url, "POST")
        if data is not None:
            spec = spec.with_body_params(data)
        return self.execute(spec)

    def put(self, url: str, data: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        spec = RequestSpec.create(url, "PUT")
        if data is not None:
            spec = spec.with_body_params(data)
        return self.execute(spec)

    def delete(self, url: str, params: Union[str, Mapping[str, Any], None] = None) -> Optional[str]:
        spec = RequestSpec.create(url, "DELETE")
        if params is not None:
            spec = spec.with_query_params(params)
        return self.execute(spec)
