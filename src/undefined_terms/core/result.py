"""
Result types threaded through the extraction pipeline.

Stages return ``Success`` or ``Failure`` instead of raising, so the failure
kind is part of the data flow rather than discovered at a catch site.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

TSuccess = TypeVar("TSuccess")
TFailure = TypeVar("TFailure", bound=Exception)


@dataclass(frozen=True)
class Success(Generic[TSuccess]):
    """A successful pipeline outcome."""

    value: TSuccess


@dataclass(frozen=True)
class Failure(Generic[TFailure]):
    """A failed pipeline outcome, carrying the error."""

    error: TFailure


Result = Union[Success[TSuccess], Failure[TFailure]]


def is_success(result: Result) -> bool:
    return isinstance(result, Success)


def unwrap(result: Result):
    """Return the success value, or raise the carried error."""
    if isinstance(result, Success):
        return result.value
    raise result.error
