"""Result values returned by the service layer.

Services never raise for expected outcomes (bad input, missing records).
They return a ``ServiceResult`` that either carries a value or a
``ServiceError``; ``userapi.responses.to_response`` turns it into HTTP.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Categories of service failures, one HTTP status each."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    PROBLEM = "problem"


@dataclass(frozen=True)
class ServiceError:
    """A failed service outcome."""

    kind: ErrorKind
    message: str = ""


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Either a value or an error, never both."""

    value: T | None = None
    error: ServiceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def invalid(cls, message: str) -> "ServiceResult[T]":
        return cls(error=ServiceError(ErrorKind.VALIDATION, message))

    @classmethod
    def not_found(cls) -> "ServiceResult[T]":
        return cls(error=ServiceError(ErrorKind.NOT_FOUND))

    @classmethod
    def problem(cls, message: str) -> "ServiceResult[T]":
        return cls(error=ServiceError(ErrorKind.PROBLEM, message))
