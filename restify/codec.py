"""
JSON codec for request and response bodies.

Encoding goes through ``pydantic_core.to_jsonable_python`` so pydantic models,
dataclasses, datetimes and UUIDs serialize without custom hooks. Decoding
validates against the expected result type with a pydantic ``TypeAdapter``.
"""

import json
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional, Tuple

from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_jsonable_python

from .exceptions import DecodeError


@dataclass(frozen=True)
class JsonOptions:
    """Serializer options shared by encode and decode."""
    separators: Tuple[str, str] = (',', ':')
    sort_keys: bool = False
    ensure_ascii: bool = False
    strict: bool = False


@lru_cache(maxsize=128)
def _adapter(result_type) -> TypeAdapter:
    return TypeAdapter(result_type)


class JsonCodec:
    """Encode values to JSON bytes and decode JSON text to typed values."""

    def __init__(self, options: Optional[JsonOptions] = None):
        self.options = options or JsonOptions()

    def encode_text(self, value: Any) -> str:
        return json.dumps(
            to_jsonable_python(value),
            separators=self.options.separators,
            sort_keys=self.options.sort_keys,
            ensure_ascii=self.options.ensure_ascii,
        )

    def encode(self, value: Any) -> bytes:
        """Encode value as UTF-8 JSON bytes."""
        return self.encode_text(value).encode('utf-8')

    def decode(self, text: str, result_type: Any = Any) -> Any:
        """
        Decode JSON text into result_type.

        Args:
            text: JSON document
            result_type: Target type (``Any``, ``dict``, a pydantic model, ...)

        Returns:
            The validated value

        Raises:
            DecodeError: If text is not valid JSON for result_type
        """
        try:
            adapter = _adapter(result_type)
        except TypeError:
            # unhashable generic aliases can't be cached
            adapter = TypeAdapter(result_type)
        try:
            return adapter.validate_json(text, strict=self.options.strict or None)
        except (ValidationError, ValueError) as e:
            raise DecodeError(f"Cannot decode body as {result_type!r}: {e}") from e
