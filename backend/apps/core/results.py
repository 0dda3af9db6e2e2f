"""
Typed service results.

Every service operation that crosses the API boundary returns either
``Ok(data)`` or ``Err(message, kind)`` instead of raising, so callers can
branch on the outcome and user-facing messages never carry internal detail.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeAlias, TypeVar

from ninja.errors import HttpError

T = TypeVar("T")


class ErrorKind(StrEnum):
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    FAILED = "failed"


STATUS_FOR_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID: 400,
    ErrorKind.UNAUTHORIZED: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.FAILED: 500,
}


@dataclass(frozen=True)
class Ok(Generic[T]):
    data: T
    message: str = ""

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    message: str
    kind: ErrorKind = ErrorKind.FAILED

    @property
    def success(self) -> bool:
        return False

    @property
    def status_code(self) -> int:
        return STATUS_FOR_KIND[self.kind]


Result: TypeAlias = Ok[T] | Err


def unwrap(result: "Ok[T] | Err") -> T:
    """
    Return the payload of an Ok result or raise the matching HttpError.

    Used by API endpoints; django-ninja renders HttpError as
    ``{"detail": message}`` with the mapped status code.
    """
    if isinstance(result, Err):
        raise HttpError(result.status_code, result.message)
    return result.data
