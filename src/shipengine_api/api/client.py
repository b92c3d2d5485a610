"""
HTTP transport for the ShipEngine API

Sends ``ApiRequest`` descriptors over a pooled ``requests`` session. Each call
is a single exchange: nothing is retried, and network failures raised by
``requests`` reach the caller unchanged.
"""

import time
import logging
from typing import Dict, Optional, Protocol, runtime_checkable
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter

from ..core.config_manager import APIConfig, DEFAULT_BASE_URL
from .request_factory import ApiRequest, sanitize_for_logging
from .response_handler import ApiResponse, ResponseHandler


@runtime_checkable
class Transport(Protocol):
    """Anything that can send an ``ApiRequest`` and return an ``ApiResponse``."""

    def send(self, request: ApiRequest) -> ApiResponse:
        ...


class HTTPClient:
    """
    requests-based transport for the ShipEngine API.

    Features:
    - Session reuse with connection pooling
    - Status code mapping to typed API errors
    - Credential masking in debug logs
    - SSL verification and proxy support
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = 30,
        pool_connections: int = 10,
        pool_maxsize: int = 10,
        verify_ssl: bool = True,
        proxies: Optional[Dict[str, str]] = None,
        user_agent: str = "shipengine-api-client/1.0.0",
        session: Optional[requests.Session] = None
    ):
        """
        Initialize HTTP client with configuration

        Args:
            base_url: Base URL for all API requests
            timeout: Request timeout in seconds
            pool_connections: Number of connection pools
            pool_maxsize: Maximum size per connection pool
            verify_ssl: Whether to verify SSL certificates
            proxies: Proxy configuration
            user_agent: User agent string for requests
            session: Pre-built session to use instead of a new one
        """
        self.base_url = base_url.rstrip('/') + '/'
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.proxies = proxies or {}
        self.user_agent = user_agent

        self.session = session or requests.Session()
        self.response_handler = ResponseHandler()
        self.logger = logging.getLogger(__name__)

        self._configure_session(pool_connections, pool_maxsize)

    @classmethod
    def from_config(cls, config: APIConfig) -> 'HTTPClient':
        """Build a client from the ``api`` section of the configuration"""
        proxies = None
        if config.proxy_url:
            proxies = {'http': config.proxy_url, 'https': config.proxy_url}

        return cls(
            base_url=config.base_url,
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
            proxies=proxies,
            user_agent=config.user_agent
        )

    def _configure_session(self, pool_connections: int, pool_maxsize: int):
        """Configure the requests session with adapters and headers"""
        self.session.headers.update({
            'User-Agent': self.user_agent,
            'Accept': 'application/json'
        })

        adapter = HTTPAdapter(
            pool_connections=pool_connections,
            pool_maxsize=pool_maxsize,
            max_retries=0
        )
        for scheme in ['http', 'https']:
            self.session.mount(f'{scheme}://', adapter)

        self.session.verify = self.verify_ssl
        if self.proxies:
            self.session.proxies.update(self.proxies)

    def _build_url(self, path: str) -> str:
        """Build full URL from base URL and request path"""
        return urljoin(self.base_url, path.lstrip('/'))

    def send(self, request: ApiRequest) -> ApiResponse:
        """
        Send one request and return the parsed response

        Args:
            request: Request built by ``RequestFactory``

        Returns:
            Parsed response

        Raises:
            APIError: Subclass matching the HTTP status for non-success responses
            requests.RequestException: On network failures
        """
        url = self._build_url(request.path)
        body = request.body
        start_time = time.time()

        self.logger.info(f"Making {request.method} request to {url}")
        self.logger.debug(f"Request details: {sanitize_for_logging(request)}")

        try:
            response = self.session.request(
                method=request.method,
                url=url,
                data=body.encode('utf-8') if body is not None else None,
                headers=request.headers,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            self.logger.debug(f"{request.method} {url} failed: {e}")
            raise

        result = self.response_handler.handle_response(response)
        self.logger.info(
            f"{request.method} {request.path} completed with {response.status_code} "
            f"in {time.time() - start_time:.2f}s"
        )
        return result

    def close(self):
        """Close the HTTP client and cleanup resources"""
        if self.session:
            self.session.close()
            self.logger.info("HTTP client session closed")

    def __enter__(self) -> 'HTTPClient':
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
