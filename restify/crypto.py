"""
Hash primitives used for request signing.

Both functions operate on UTF-8 text and return lowercase hex digests.
"""

import hashlib
import hmac


def sha256_hex(text: str) -> str:
    """SHA-256 of text as lowercase hex."""
    return hashlib.sha256(text.encode('utf-8')).hexdigest()


def hmac_sha256_hex(text: str, key: str) -> str:
    """
    HMAC-SHA256 of text keyed with key.

    Args:
        text: Message to authenticate
        key: Secret key

    Returns:
        Hex-encoded HMAC signature
    """
    mac = hmac.new(
        key.encode('utf-8'),
        text.encode('utf-8'),
        hashlib.sha256
    )
    return mac.hexdigest()
