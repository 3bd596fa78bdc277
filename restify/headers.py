"""Header accumulation for outgoing requests."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

HeaderSource = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


@dataclass(frozen=True)
class AuthHeader:
    """Value of the ``Authorization`` header, e.g. ``Bearer <token>``."""
    scheme: str
    parameter: Optional[str] = None

    @classmethod
    def bearer(cls, token: str) -> 'AuthHeader':
        return cls('Bearer', token)

    def __str__(self):
        if self.parameter is None:
            return self.scheme
        return f"{self.scheme} {self.parameter}"


class HeaderSet:
    """
    Ordered header pairs with append semantics.

    Adding a name that is already present keeps both values; nothing is
    overwritten or removed.
    """

    def __init__(self, source: Optional[HeaderSource] = None):
        self._items: List[Tuple[str, str]] = []
        if source:
            self.extend(source)

    def add(self, name: str, value: str) -> 'HeaderSet':
        self._items.append((name, str(value)))
        return self

    def extend(self, source: HeaderSource) -> 'HeaderSet':
        pairs = source.items() if isinstance(source, Mapping) else source
        for name, value in pairs:
            self.add(name, value)
        return self

    def get_all(self, name: str) -> List[str]:
        lowered = name.lower()
        return [value for key, value in self._items if key.lower() == lowered]

    def items(self) -> List[Tuple[str, str]]:
        return list(self._items)

    def to_dict(self) -> Dict[str, str]:
        """
        Collapse to a dict, joining repeated names with ``", "``.

        The first spelling of each name is kept.
        """
        merged: Dict[str, str] = {}
        spelling: Dict[str, str] = {}
        for name, value in self._items:
            key = spelling.setdefault(name.lower(), name)
            merged[key] = f"{merged[key]}, {value}" if key in merged else value
        return merged

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and bool(self.get_all(name))

