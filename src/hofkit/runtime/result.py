"""
hofkit Result Helpers.

A Result is a two-tuple with a boolean flag: ``(True, value)`` is Ok and
``(False, error)`` is Err. The ``try_*`` variants of the transforms return a
Result instead of raising, stopping at the first failing element just like
their raising counterparts.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from hofkit.runtime.iterators import (
    filter_assoc,
    filter_seq,
    map_assoc,
    map_seq,
    reduce_seq,
)
from hofkit.utils.errors import InvalidArgumentError, UnwrapError

T = TypeVar("T")
U = TypeVar("U")

Result = tuple[bool, Any]


def ok(value: Any) -> Result:
    return (True, value)


def err(error: Any) -> Result:
    return (False, error)


def _is_result(value: Any) -> bool:
    return isinstance(value, tuple) and len(value) == 2 and isinstance(value[0], bool)


def is_ok(value: Any) -> bool:
    """Check if a Result is Ok. Non-Result values are considered Ok."""
    if _is_result(value):
        return value[0]
    return True


def is_err(value: Any) -> bool:
    """Check if a Result is Err."""
    if _is_result(value):
        return not value[0]
    return False


def unwrap(value: Any) -> Any:
    """
    Unwrap a Result value.

    Returns the Ok value. An Err carrying an exception re-raises that
    exception; any other Err payload raises UnwrapError.
    """
    if _is_result(value):
        is_success, inner = value
        if is_success:
            return inner
        if isinstance(inner, BaseException):
            raise inner
        raise UnwrapError(f"unwrap called on Err: {inner!r}")
    return value


def unwrap_or(value: Any, default: Any) -> Any:
    """Unwrap a Result value, returning default on Err."""
    if _is_result(value):
        is_success, inner = value
        return inner if is_success else default
    return value


def _attempt(operation: Callable[..., Any], *args: Any) -> Result:
    try:
        return ok(operation(*args))
    except InvalidArgumentError as exc:
        return err(exc)


# =============================================================================
# Result-returning Transforms
# =============================================================================


def try_map_seq(input: Iterable[T], transform: Callable[[T], U]) -> Result:
    """map_seq that returns ok(result) or err(InvalidArgumentError)."""
    return _attempt(map_seq, input, transform)


def try_filter_seq(input: Iterable[T], predicate: Callable[[T], bool]) -> Result:
    """filter_seq that returns ok(result) or err(InvalidArgumentError)."""
    return _attempt(filter_seq, input, predicate)


def try_reduce_seq(input: Iterable[T], seed: Any, combine: Callable[[Any, T], Any]) -> Result:
    """reduce_seq that returns ok(result) or err(InvalidArgumentError)."""
    return _attempt(reduce_seq, input, seed, combine)


def try_map_assoc(input: Mapping[Any, T], transform: Callable[[T], U]) -> Result:
    """map_assoc that returns ok(result) or err(InvalidArgumentError)."""
    return _attempt(map_assoc, input, transform)


def try_filter_assoc(input: Mapping[Any, T], predicate: Callable[[T], bool]) -> Result:
    """filter_assoc that returns ok(result) or err(InvalidArgumentError)."""
    return _attempt(filter_assoc, input, predicate)
