"""
Constants for the restify client library.
Header names are a wire contract with the remote API and must not change.
"""

# Authorizer headers
HEADER_REQ_TIMESTAMP = "X-Req-Timestamp"
HEADER_REQ_NONCE = "X-Req-Nonce"
HEADER_REQ_SIG = "X-Req-Sig"
HEADER_APP_ID = "X-App-Id"

HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"

# Signature templates
DEFAULT_SIGNATURE_TEMPLATE = "{appid}{method}{timestamp}{nonce}"
DEFAULT_BODY_SIGNATURE_TEMPLATE = "{appid}{method}{timestamp}{nonce}{bodyhash}"

# Default transport configuration
DEFAULT_CONFIG = {
    'timeout': 30,             # HTTP timeout in seconds
    'verify': True,            # TLS verification, or a CA bundle path
    'allow_redirects': True,
    'proxies': None,
}

# Reason strings carried by Fail results
REASON_STATUS = "Request failed with status code {status_code} ({reason})"
REASON_DECODE = "Failed to deserialize response body"
REASON_EMPTY = "Response body is empty"

ENV_PREFIX = "RESTIFY_"
