"""
HMAC request authorizer.

Produces the ``X-Req-*`` authentication headers for the remote API from an
app id, an app key and a signature template. The template holds
``{placeholder}`` tokens that are replaced with per-request values:

    appid      public app identifier
    method     canonical method name (GET, POST, ...)
    timestamp  seconds since epoch
    nonce      random UUID4
    bodyhash   SHA-256 of the request body (body-bearing methods only)

The resulting string is signed with HMAC-SHA256 keyed by the app key. The key
itself is never sent.
"""

import time
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .codec import JsonCodec
from .constants import (
    DEFAULT_BODY_SIGNATURE_TEMPLATE,
    DEFAULT_SIGNATURE_TEMPLATE,
    HEADER_APP_ID,
    HEADER_REQ_NONCE,
    HEADER_REQ_SIG,
    HEADER_REQ_TIMESTAMP,
)
from .crypto import hmac_sha256_hex, sha256_hex
from .exceptions import ConfigurationError, UnsupportedMethodError
from .methods import HttpMethod
from .utils import replace_placeholders


@dataclass(frozen=True)
class SignatureContext:
    """Values for one signing operation. Never reuse across requests."""
    timestamp: str
    nonce: str
    app_id: str
    method: str
    body_hash: Optional[str] = None

    @classmethod
    def create(cls, app_id: str, method: HttpMethod, body_hash: Optional[str] = None) -> 'SignatureContext':
        """Build a context with a fresh timestamp and nonce."""
        return cls(
            timestamp=str(int(time.time())),
            nonce=str(uuid.uuid4()),
            app_id=app_id,
            method=method.text,
            body_hash=body_hash,
        )

    def values(self) -> Dict[str, str]:
        values = {
            'timestamp': self.timestamp,
            'nonce': self.nonce,
            'appid': self.app_id,
            'method': self.method,
        }
        if self.body_hash is not None:
            values['bodyhash'] = self.body_hash
        return values


class Authorizer:
    """
    Generates the authentication headers for requests to the API.
    """

    def __init__(self, app_id: str, app_key: str):
        """
        Initialize authorizer.

        Args:
            app_id: Public app identifier, sent as X-App-Id
            app_key: Secret key used for the HMAC, never sent

        Raises:
            ConfigurationError: If app_id or app_key is empty
        """
        if not app_id:
            raise ConfigurationError("app_id cannot be empty")
        if not app_key:
            raise ConfigurationError("app_key cannot be empty")

        self.app_id = app_id
        self._app_key = app_key

    def __repr__(self):
        return f"Authorizer(app_id={self.app_id!r})"

    def sign(self, context: SignatureContext, template: str) -> Dict[str, str]:
        """
        Sign template with the values in context.

        Identical context and template always produce the same headers.

        Returns:
            Headers X-Req-Timestamp, X-Req-Nonce, X-Req-Sig and X-App-Id
        """
        message = replace_placeholders(template, context.values())
        signature = hmac_sha256_hex(message, self._app_key)
        return {
            HEADER_REQ_TIMESTAMP: context.timestamp,
            HEADER_REQ_NONCE: context.nonce,
            HEADER_REQ_SIG: signature,
            HEADER_APP_ID: self.app_id,
        }

    def generate_header(
        self,
        method: Union[HttpMethod, str] = HttpMethod.GET,
        template: str = DEFAULT_SIGNATURE_TEMPLATE,
    ) -> Dict[str, str]:
        """
        Generate headers for a request without body (GET, HEAD, DELETE).

        Args:
            method: Request method
            template: Signature template

        Returns:
            The authentication headers

        Raises:
            UnsupportedMethodError: If method carries a body
        """
        method = HttpMethod.parse(method)
        if method.has_body:
            raise UnsupportedMethodError(
                f"{method.text} carries a body, use generate_body_header"
            )
        return self.sign(SignatureContext.create(self.app_id, method), template)

    def generate_body_header(
        self,
        body: Any,
        method: Union[HttpMethod, str] = HttpMethod.POST,
        is_json: bool = True,
        template: str = DEFAULT_BODY_SIGNATURE_TEMPLATE,
        codec: Optional[JsonCodec] = None,
    ) -> Dict[str, str]:
        """
        Generate headers for a request with body (POST, PUT, PATCH).

        Args:
            body: Request body
            method: Request method
            is_json: Hash the JSON encoding of body; otherwise hash str(body)
            template: Signature template
            codec: Codec used to encode body, should match the one sending it

        Returns:
            The authentication headers

        Raises:
            UnsupportedMethodError: If method does not carry a body
        """
        method = HttpMethod.parse(method)
        if not method.has_body:
            raise UnsupportedMethodError(
                f"{method.text} has no body, use generate_header"
            )
        body_hash = sha256_hex(self.body_text(body, is_json, codec))
        return self.sign(SignatureContext.create(self.app_id, method, body_hash), template)

    @staticmethod
    def body_text(body: Any, is_json: bool = True, codec: Optional[JsonCodec] = None) -> str:
        """Text whose hash goes into the signature."""
        if is_json:
            return (codec or JsonCodec()).encode_text(body)
        return '' if body is None else str(body)

    def headers_for(
        self,
        method: Union[HttpMethod, str],
        body: Any = None,
        codec: Optional[JsonCodec] = None,
    ) -> Dict[str, str]:
        """Generate headers for method with the default templates."""
        method = HttpMethod.parse(method)
        if method.has_body:
            return self.generate_body_header(body, method, codec=codec)
        return self.generate_header(method)
