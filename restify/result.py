"""
Result values returned by every client operation.

A request either succeeds with a decoded value (``Ok``) or fails with the raw
response body and human readable reasons (``Fail``). Transport faults are the
only failures raised as exceptions.

Example:
    result = client.get(endpoint, result_type=User)
    match result:
        case Ok(value=user):
            ...
        case Fail(raw_body=raw, reasons=reasons):
            ...
"""

from dataclasses import dataclass, field, replace
from typing import Any, Generic, Optional, Tuple, TypeVar, Union

from .exceptions import ResultError

T = TypeVar('T')


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_fail(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Fail:
    """
    A failed request.

    Attributes:
        raw_body: Response body as text, possibly empty
        reasons: Human readable failure reasons, in order
        error: Underlying exception, when one was caught (decode failures)
        status_code: HTTP status of the response
    """
    raw_body: str
    reasons: Tuple[str, ...] = ()
    error: Optional[BaseException] = field(default=None, compare=False)
    status_code: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, 'reasons', tuple(self.reasons))

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_fail(self) -> bool:
        return True

    @property
    def reason(self) -> str:
        return '; '.join(self.reasons)

    def add_reason(self, reason: str) -> 'Fail':
        """Return a copy with reason appended."""
        return replace(self, reasons=self.reasons + (reason,))

    def unwrap(self):
        raise ResultError(self)

    def unwrap_or(self, default: Any) -> Any:
        return default


Result = Union[Ok[T], Fail]
