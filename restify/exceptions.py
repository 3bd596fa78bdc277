"""
Custom exceptions for the restify client library.

HTTP-status and decode failures are returned as ``Fail`` results, not raised.
Transport faults from ``requests``/``httpx`` propagate unwrapped.
"""


class RestifyError(Exception):
    """Base exception for restify errors."""
    pass


class ConfigurationError(RestifyError):
    """Raised when client or authorizer configuration is invalid."""
    pass


class UnsupportedMethodError(RestifyError):
    """Raised when an HTTP method is unknown or used with the wrong signer."""
    pass


class UndescribedMemberError(RestifyError):
    """Raised when a describable enum has members without display text."""

    def __init__(self, enum_cls, missing):
        self.enum_cls = enum_cls
        self.missing = list(missing)
        super().__init__(
            f"{enum_cls.__name__} members without description: {', '.join(self.missing)}"
        )


class DecodeError(RestifyError):
    """Raised by the codec when a body cannot be decoded into the expected type."""
    pass


class ResultError(RestifyError):
    """Raised when unwrapping a failed result."""

    def __init__(self, result):
        self.result = result
        super().__init__(result.reason or "Request failed")
