"""
Transports that put one request on the wire.

Each call opens its own session/client and closes it on every exit path.
Network, DNS and TLS faults are not caught here and reach the caller as
``requests.RequestException`` or ``httpx.HTTPError``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

import httpx
import requests

from .headers import HeaderSet


@dataclass(frozen=True)
class RawResponse:
    """Status, headers and body of a response, detached from the transport."""
    status_code: int
    reason: str = ''
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b''

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode('utf-8', errors='replace')


class RequestsTransport:
    """Synchronous transport backed by ``requests``."""

    def send(
        self,
        method: str,
        url: str,
        headers: List[Tuple[str, str]],
        body: Optional[bytes],
        config: Dict[str, Any],
    ) -> RawResponse:
        # requests keeps one value per header name
        merged = HeaderSet(headers).to_dict()

        with requests.Session() as session:
            response = session.request(
                method,
                url,
                headers=merged,
                data=body,
                timeout=config.get('timeout'),
                verify=config.get('verify', True),
                allow_redirects=config.get('allow_redirects', True),
                proxies=config.get('proxies'),
            )
            try:
                return RawResponse(
                    status_code=response.status_code,
                    reason=response.reason or '',
                    headers=dict(response.headers),
                    content=response.content or b'',
                )
            finally:
                response.close()


class HttpxTransport:
    """
    Asynchronous transport backed by ``httpx``.

    Extra keyword arguments are passed to ``httpx.AsyncClient``.
    """

    def __init__(self, **client_kwargs):
        self.client_kwargs = client_kwargs

    async def send(
        self,
        method: str,
        url: str,
        headers: List[Tuple[str, str]],
        body: Optional[bytes],
        config: Dict[str, Any],
    ) -> RawResponse:
        client_kwargs = {
            'timeout': config.get('timeout'),
            'verify': config.get('verify', True),
            'follow_redirects': config.get('allow_redirects', True),
            **self.client_kwargs,
        }
        proxies = config.get('proxies')
        if proxies:
            client_kwargs.setdefault('proxy', _pick_proxy(proxies, url))

        async with httpx.AsyncClient(**client_kwargs) as client:
            response = await client.request(method, url, headers=headers, content=body)
            return RawResponse(
                status_code=response.status_code,
                reason=response.reason_phrase,
                headers=dict(response.headers),
                content=response.content,
            )


def _pick_proxy(proxies: Any, url: str) -> Optional[str]:
    """Choose a proxy from a requests-style scheme mapping."""
    if isinstance(proxies, str):
        return proxies
    scheme = url.split(':', 1)[0].lower()
    return proxies.get(scheme) or proxies.get('all')
