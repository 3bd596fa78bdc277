"""
REST client that runs the authenticated request pipeline.

One call performs one HTTP request: headers are merged, the request is signed
when an authorizer is in effect, the body is encoded, the transport sends it,
and the response is mapped to an ``Ok`` or ``Fail`` result.

Configuration (default headers, auth header, transport config, JSON options,
authorizer) lives on the client instance and is read at call time. Concurrent
requests may share a client; changing its configuration while requests are in
flight needs external synchronization.
"""

import logging
import os
from dataclasses import dataclass
from functools import partialmethod
from typing import Any, Dict, Mapping, Optional, Union

from .authorizer import Authorizer
from .codec import JsonCodec, JsonOptions
from .constants import (
    DEFAULT_CONFIG,
    ENV_PREFIX,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    REASON_DECODE,
    REASON_EMPTY,
    REASON_STATUS,
)
from .endpoint import Endpoint
from .exceptions import ConfigurationError, DecodeError
from .headers import AuthHeader, HeaderSet
from .methods import HttpMethod
from .result import Fail, Ok, Result
from .transport import HttpxTransport, RawResponse, RequestsTransport

logger = logging.getLogger(__name__)


@dataclass
class PreparedRequest:
    """Everything the transport needs for one request."""
    method: HttpMethod
    url: str
    headers: HeaderSet
    body: Optional[bytes]
    config: Dict[str, Any]
    codec: JsonCodec


class RestClient:
    """
    Client for a REST API rooted at base_url.

    Example:
        client = RestClient("https://api.example.com", timeout=10)
        client.use_authorizer(Authorizer("my-app", "my-key"))
        result = client.get(Endpoint().with_path("users/{id}", {"id": "42"}), result_type=dict)
    """

    def __init__(self, base_url: str, transport=None, async_transport=None, **config):
        """
        Initialize client.

        Args:
            base_url: Base URL prepended to non-custom endpoints
            transport: Synchronous transport, defaults to RequestsTransport
            async_transport: Asynchronous transport, defaults to HttpxTransport
            **config: Transport configuration (timeout, verify, allow_redirects, proxies)
        """
        if not base_url:
            raise ConfigurationError("base_url cannot be empty")

        self.base_url = base_url.rstrip('/')
        self.transport = transport or RequestsTransport()
        self.async_transport = async_transport or HttpxTransport()

        self.default_headers: Dict[str, str] = {}
        self._auth_header: Optional[AuthHeader] = None
        self._json_options = JsonOptions()
        self._authorizer: Optional[Authorizer] = None
        self.config = self._validate_config({**DEFAULT_CONFIG, **config})

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, **config) -> 'RestClient':
        """
        Create a client from environment variables.

        Reads ``<prefix>BASE_URL`` (required), ``<prefix>APP_ID`` and
        ``<prefix>APP_KEY`` (authorizer) and ``<prefix>TOKEN`` (bearer token).
        """
        base_url = os.environ.get(f"{prefix}BASE_URL")
        if not base_url:
            raise ConfigurationError(f"{prefix}BASE_URL is not set")

        client = cls(base_url, **config)

        app_id = os.environ.get(f"{prefix}APP_ID")
        app_key = os.environ.get(f"{prefix}APP_KEY")
        if app_id or app_key:
            client.use_authorizer(Authorizer(app_id, app_key))

        token = os.environ.get(f"{prefix}TOKEN")
        if token:
            client.set_authentication_header(token)
        return client

    @staticmethod
    def _validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """Validate transport configuration."""
        unknown = set(config) - set(DEFAULT_CONFIG)
        if unknown:
            raise ConfigurationError(f"Unknown config options: {', '.join(sorted(unknown))}")

        timeout = config['timeout']
        if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0):
            raise ConfigurationError("timeout must be a positive number or None")

        if not isinstance(config['verify'], (bool, str)):
            raise ConfigurationError("verify must be a bool or a CA bundle path")

        if not isinstance(config['allow_redirects'], bool):
            raise ConfigurationError("allow_redirects must be a bool")

        return config

    # Configuration surface

    def set_default_header(self, name: str, value: str):
        self.default_headers[name] = value

    def clear_default_headers(self):
        self.default_headers = {}

    def set_authentication_header(self, value: Union[AuthHeader, str], parameter: Optional[str] = None):
        """
        Set the default ``Authorization`` header.

        ``set_authentication_header(token)`` uses the Bearer scheme;
        ``set_authentication_header(scheme, parameter)`` sets both parts.
        """
        if isinstance(value, AuthHeader):
            self._auth_header = value
        elif parameter is None:
            self._auth_header = AuthHeader.bearer(value)
        else:
            self._auth_header = AuthHeader(value, parameter)

    def clear_authentication_header(self):
        self._auth_header = None

    @property
    def authentication_header(self) -> Optional[AuthHeader]:
        return self._auth_header

    def set_transport_config(self, **config):
        """Override transport options; unspecified options keep their current values."""
        self.config = self._validate_config({**self.config, **config})

    def clear_transport_config(self):
        self.config = dict(DEFAULT_CONFIG)

    def set_json_options(self, options: JsonOptions):
        self._json_options = options

    def clear_json_options(self):
        self._json_options = JsonOptions()

    @property
    def json_options(self) -> JsonOptions:
        return self._json_options

    def use_authorizer(self, authorizer: Authorizer):
        self._authorizer = authorizer

    def clear_authorizer(self):
        self._authorizer = None

    @property
    def authorizer(self) -> Optional[Authorizer]:
        return self._authorizer

    # Pipeline

    def _prepare(
        self,
        method: Union[HttpMethod, str],
        endpoint: Endpoint,
        body: Any = None,
        json_options: Optional[JsonOptions] = None,
        auth_header: Optional[Union[AuthHeader, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
        transport_config: Optional[Mapping[str, Any]] = None,
        authorizer: Optional[Authorizer] = None,
    ) -> PreparedRequest:
        method = HttpMethod.parse(method)
        url = endpoint.build(None if endpoint.custom_url else self.base_url)
        codec = JsonCodec(json_options or self._json_options)

        config = self.config
        if transport_config:
            config = self._validate_config({**config, **transport_config})

        header_set = HeaderSet()

        effective_auth = auth_header if auth_header is not None else self._auth_header
        if effective_auth is not None:
            header_set.add(HEADER_AUTHORIZATION, str(effective_auth))

        header_set.extend(self.default_headers)
        if headers:
            header_set.extend(headers)

        payload = None
        if method.has_body and body is not None:
            payload = codec.encode(body)
            if HEADER_CONTENT_TYPE not in header_set:
                header_set.add(HEADER_CONTENT_TYPE, JSON_CONTENT_TYPE)

        # signed last so caller headers can't shadow the signature
        effective_authorizer = authorizer or self._authorizer
        if effective_authorizer is not None:
            header_set.extend(effective_authorizer.headers_for(method, body, codec=codec))

        return PreparedRequest(method, url, header_set, payload, config, codec)

    def _to_result(self, prepared: PreparedRequest, response: RawResponse, result_type: Any) -> Result:
        raw = response.text
        logger.debug(f"Response: {response.status_code} {prepared.method.text} {prepared.url}")

        if not response.ok:
            reason = REASON_STATUS.format(status_code=response.status_code, reason=response.reason)
            logger.warning(f"{prepared.method.text} {prepared.url}: {reason}")
            return Fail(raw, [reason], status_code=response.status_code)

        if result_type is str:
            return Ok(raw)

        if not raw.strip():
            return Fail(raw, [REASON_EMPTY], status_code=response.status_code)

        try:
            return Ok(prepared.codec.decode(raw, result_type))
        except DecodeError as e:
            logger.warning(f"{prepared.method.text} {prepared.url}: {REASON_DECODE}: {e}")
            return Fail(raw, [REASON_DECODE], error=e, status_code=response.status_code)

    def _log_request(self, prepared: PreparedRequest):
        logger.debug(f"Request: {prepared.method.text} {prepared.url}")
        logger.debug(f"HEADERS: {[name for name, _ in prepared.headers.items()]}")

    def request(
        self,
        method: Union[HttpMethod, str],
        endpoint: Endpoint,
        body: Any = None,
        *,
        result_type: Any = Any,
        **options,
    ) -> Result:
        """
        Perform one request and map the response to a result.

        Args:
            method: HTTP method
            endpoint: Target endpoint
            body: Request body, sent for POST, PUT and PATCH only
            result_type: Expected type of the decoded body; ``str`` returns the raw text
            **options: json_options, auth_header, headers, transport_config, authorizer

        Returns:
            Ok with the decoded body, or Fail with the raw body and reasons

        Raises:
            requests.RequestException: On transport faults
        """
        prepared = self._prepare(method, endpoint, body, **options)
        self._log_request(prepared)
        response = self.transport.send(
            prepared.method.text,
            prepared.url,
            prepared.headers.items(),
            prepared.body,
            prepared.config,
        )
        return self._to_result(prepared, response, result_type)

    async def request_async(
        self,
        method: Union[HttpMethod, str],
        endpoint: Endpoint,
        body: Any = None,
        *,
        result_type: Any = Any,
        **options,
    ) -> Result:
        """Asynchronous version of request; transport faults raise httpx.HTTPError."""
        prepared = self._prepare(method, endpoint, body, **options)
        self._log_request(prepared)
        response = await self.async_transport.send(
            prepared.method.text,
            prepared.url,
            prepared.headers.items(),
            prepared.body,
            prepared.config,
        )
        return self._to_result(prepared, response, result_type)

    # get(endpoint, **options), post(endpoint, body=None, **options), ...
    get = partialmethod(request, HttpMethod.GET)
    post = partialmethod(request, HttpMethod.POST)
    put = partialmethod(request, HttpMethod.PUT)
    patch = partialmethod(request, HttpMethod.PATCH)
    delete = partialmethod(request, HttpMethod.DELETE)

    get_async = partialmethod(request_async, HttpMethod.GET)
    post_async = partialmethod(request_async, HttpMethod.POST)
    put_async = partialmethod(request_async, HttpMethod.PUT)
    patch_async = partialmethod(request_async, HttpMethod.PATCH)
    delete_async = partialmethod(request_async, HttpMethod.DELETE)
