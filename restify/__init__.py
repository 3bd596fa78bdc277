"""
restify - authenticated REST client library.

Builds endpoint URLs, signs requests with HMAC headers and returns every
response as an ``Ok`` or ``Fail`` result.

Example usage:
    from restify import Authorizer, Endpoint, RestClient

    client = RestClient("https://api.example.com")
    client.use_authorizer(Authorizer("my-app", "my-key"))
    result = client.get(Endpoint().with_version("v1").with_path("users"))
"""

from .authorizer import Authorizer, SignatureContext
from .client import RestClient
from .codec import JsonCodec, JsonOptions
from .constants import (
    HEADER_APP_ID,
    HEADER_REQ_NONCE,
    HEADER_REQ_SIG,
    HEADER_REQ_TIMESTAMP,
    DEFAULT_CONFIG,
    DEFAULT_SIGNATURE_TEMPLATE,
    DEFAULT_BODY_SIGNATURE_TEMPLATE,
)
from .describable import describable, describe, display_text, register_descriptions
from .endpoint import Endpoint
from .exceptions import (
    RestifyError,
    ConfigurationError,
    UnsupportedMethodError,
    UndescribedMemberError,
    DecodeError,
    ResultError,
)
from .headers import AuthHeader, HeaderSet
from .methods import HttpMethod
from .result import Fail, Ok, Result
from .transport import HttpxTransport, RawResponse, RequestsTransport

__version__ = "1.0.0"
__all__ = [
    "RestClient",
    "Endpoint",
    "Authorizer",
    "SignatureContext",
    "HttpMethod",
    "Ok",
    "Fail",
    "Result",
    "JsonCodec",
    "JsonOptions",
    "AuthHeader",
    "HeaderSet",
    "RawResponse",
    "RequestsTransport",
    "HttpxTransport",
    "describable",
    "describe",
    "display_text",
    "register_descriptions",
    "RestifyError",
    "ConfigurationError",
    "UnsupportedMethodError",
    "UndescribedMemberError",
    "DecodeError",
    "ResultError",
    "HEADER_REQ_TIMESTAMP",
    "HEADER_REQ_NONCE",
    "HEADER_REQ_SIG",
    "HEADER_APP_ID",
    "DEFAULT_CONFIG",
    "DEFAULT_SIGNATURE_TEMPLATE",
    "DEFAULT_BODY_SIGNATURE_TEMPLATE",
]
