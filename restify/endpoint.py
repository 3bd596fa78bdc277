"""
Fluent URL builder for a single request target.
"""

from enum import Enum
from typing import Dict, List, Mapping, Optional, Union
from urllib.parse import quote

from .describable import display_text
from .utils import clean_component, replace_placeholders

Segment = Union[str, Enum]
_QUERY_SAFE = "!#$%&'()*+,/:;=?@[]~"


def _segment_text(value: Segment) -> str:
    if isinstance(value, Enum):
        return display_text(value)
    return value


def _query_string(query: Mapping[str, str]) -> str:
    # values go in as given; only characters illegal in a URL are escaped
    return '&'.join(
        f"{quote(str(key), safe=_QUERY_SAFE)}={quote(str(value), safe=_QUERY_SAFE)}"
        for key, value in query.items()
    )


class Endpoint:
    """
    Mutable builder for a request URL.

    Each builder method appends to this instance and returns it, so calls
    chain. Endpoints are cheap; build one per request target.

    Example:
        endpoint = Endpoint().with_version("v1").with_path("users/{id}", {"id": "42"})
        endpoint.build("https://api.example.com")
        # 'https://api.example.com/v1/users/42'
    """

    def __init__(self, url: Optional[str] = None):
        """
        Initialize endpoint.

        Args:
            url: Full URL to use instead of the client base URL
        """
        self._base = clean_component(url) if url else ''
        self._segments: List[str] = []
        self._query: Dict[str, str] = {}
        self.custom_url = bool(url)

    def with_version(self, version: Segment) -> 'Endpoint':
        """
        Append a version segment, e.g. ``v1`` or ``v2.0``.

        Enum members resolve to their registered display text.
        """
        self._segments.append(clean_component(_segment_text(version)))
        return self

    def with_path(self, path: Segment, params: Optional[Mapping[str, str]] = None) -> 'Endpoint':
        """
        Append a path segment.

        Args:
            path: Path string or describable enum member
            params: Values for ``{name}`` placeholders in path

        Returns:
            This endpoint
        """
        segment = clean_component(_segment_text(path))
        if params:
            segment = replace_placeholders(segment, params)
        self._segments.append(segment)
        return self

    def with_query(self, query: Mapping[str, str]) -> 'Endpoint':
        """Replace the query parameters."""
        self._query = dict(query)
        return self

    @property
    def query(self) -> Dict[str, str]:
        return dict(self._query)

    @property
    def path(self) -> str:
        return ''.join('/' + segment for segment in self._segments if segment)

    def build(self, base_url: Optional[str] = None) -> str:
        """
        Produce the final URL.

        Args:
            base_url: Client base URL, ignored for custom URL endpoints

        Returns:
            URL with the query string appended when one is set
        """
        if self.custom_url:
            base = self._base
        else:
            base = base_url.rstrip('/') if base_url else ''

        url = base + self.path
        if self._query:
            url = f"{url}?{_query_string(self._query)}"
        return url

    @property
    def url(self) -> str:
        return self.build()

    def __repr__(self):
        return f"Endpoint({self.url!r}, custom_url={self.custom_url})"
