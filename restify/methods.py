"""HTTP methods understood by the client and the authorizer."""

from enum import Enum
from typing import Union

from .describable import describable, display_text
from .exceptions import UnsupportedMethodError


@describable({
    'GET': 'GET',
    'HEAD': 'HEAD',
    'DELETE': 'DELETE',
    'POST': 'POST',
    'PUT': 'PUT',
    'PATCH': 'PATCH',
})
class HttpMethod(Enum):
    GET = 'get'
    HEAD = 'head'
    DELETE = 'delete'
    POST = 'post'
    PUT = 'put'
    PATCH = 'patch'

    @property
    def has_body(self) -> bool:
        return self in BODY_METHODS

    @property
    def text(self) -> str:
        """Canonical short name, e.g. ``GET``."""
        return display_text(self)

    @classmethod
    def parse(cls, value: Union['HttpMethod', str]) -> 'HttpMethod':
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise UnsupportedMethodError(f"Unsupported HTTP method: {value!r}")


BODY_METHODS = frozenset({HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH})
