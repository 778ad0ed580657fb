"""Explicit success/failure values returned by application handlers.

Handlers never raise for bad input: validation failures are part of each
handler's declared return type.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(Enum):
    INVALID_INPUT = "INVALID_INPUT"  # raw UI input could not be parsed
    INVALID_ARGUMENT = "INVALID_ARGUMENT"  # the domain rejected the call
    NOT_FOUND = "NOT_FOUND"


class ResultError(Exception):
    """Raised by ``Failure.unwrap()``."""

    def __init__(self, failure: Failure) -> None:
        super().__init__(failure.message)
        self.failure = failure


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise ResultError(self)


Result = Union[Success[T], Failure]
