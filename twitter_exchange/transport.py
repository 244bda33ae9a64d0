"""
HTTP Transport
Send a prepared request and hand back the status code and raw body.
"""
from typing import Dict, NamedTuple, Optional, Protocol

try:
    import requests
except ImportError:  # checked when a transport is constructed
    requests = None

from .config import Config
from .exceptions import EnvironmentCapabilityError, TransportError
from .logger import logger


class TransportResponse(NamedTuple):
    """Status code and undecoded response body."""
    status_code: int
    body: str


class Transport(Protocol):
    """Anything that can send a prepared request."""

    def send(self, method: str, url: str, headers: Dict[str, str],
             body: Optional[str] = None) -> TransportResponse:
        ...


class RequestsTransport:
    """Blocking transport backed by requests. One connection per call, no retries."""

    def __init__(self, timeout: Optional[float] = None, verify: Optional[bool] = None):
        if requests is None:
            raise EnvironmentCapabilityError(
                'RequestsTransport requires the requests library, install it with: pip install requests'
            )
        self.timeout = Config.HTTP_TIMEOUT if timeout is None else timeout
        self.verify = Config.VERIFY_TLS if verify is None else verify
        if not self.verify:
            logger.warning('TLS certificate and hostname verification is disabled')

    def send(self, method: str, url: str, headers: Dict[str, str],
             body: Optional[str] = None) -> TransportResponse:
        """Issue the request. Non-2xx statuses are returned, not raised."""
        logger.debug('Request URL: %s', url)
        logger.debug('Request Method: %s', method)
        if body is not None:
            logger.debug('Request Body: %s', body)
        try:
            response = requests.request(
                method,
                url,
                headers=headers,
                data=body.encode('utf-8') if body is not None else None,
                timeout=self.timeout,
                verify=self.verify,
            )
        except requests.RequestException as e:
            logger.error('%s %s failed: %s', method, url, e)
            raise TransportError(str(e)) from e
        logger.info('HTTP Status Code: %s', response.status_code)
        return TransportResponse(status_code=response.status_code, body=response.text)
