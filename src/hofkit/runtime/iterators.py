"""
hofkit Transform Runtime.

This module provides the higher-order collection transforms: map, filter
and reduce over ordered sequences, plus map and filter over the value side
of a mapping.

Every operation is a single synchronous pass that allocates a fresh result
and never mutates its input. When a caller-supplied function raises, the
pass stops at that element and an InvalidArgumentError is raised carrying
the element, its index (or key) and the original exception.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any, TypeVar

import numpy as np

from hofkit.utils.errors import ElementLocation, InvalidArgumentError

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
Acc = TypeVar("Acc")

logger = logging.getLogger(__name__)


# =============================================================================
# Argument Checks
# =============================================================================


def _check_callable(func: Any, role: str, operation: str) -> None:
    if not callable(func):
        raise TypeError(f"{operation}() {role} must be callable, got {type(func).__name__}")


def _check_sequence(value: Any, operation: str) -> None:
    """
    Reject inputs that iterate but are not meant as element sequences.

    Strings and bytes iterate character by character, and mappings iterate
    over their keys; both are almost always a mistake here.
    """
    if isinstance(value, (str, bytes, bytearray)):
        raise TypeError(f"{operation}() expects a sequence of elements, got {type(value).__name__}")
    if isinstance(value, Mapping):
        message = f"{operation}() expects a sequence, got a mapping"
        if operation != "reduce_seq":
            message += f"; use {operation.replace('_seq', '_assoc')}() instead"
        raise TypeError(message)
    if not isinstance(value, Iterable):
        raise TypeError(f"{operation}() expects an iterable, got {type(value).__name__}")


def _check_mapping(value: Any, operation: str) -> None:
    if not isinstance(value, Mapping):
        raise TypeError(f"{operation}() expects a mapping, got {type(value).__name__}")


_SCALAR_TYPES = (np.generic, int, float, complex)


def _to_array(items: list[Any]) -> np.ndarray:
    """
    Pack mapped results into a 1-D array without changing any element.

    Results that all share one scalar type get a typed array. Anything else
    (mixed types, strings, tuples, nested sequences) goes into an object
    array with one slot per result.
    """
    kinds = {type(item) for item in items}
    if len(kinds) <= 1 and all(issubclass(kind, _SCALAR_TYPES) for kind in kinds):
        return np.asarray(items)
    out = np.empty(len(items), dtype=object)
    for i, item in enumerate(items):
        out[i] = item
    return out


def _rebuild(source: Any, items: list[Any], keep_dtype: bool) -> Any:
    """Build the output container in the same shape as the input."""
    if isinstance(source, np.ndarray):
        if keep_dtype:
            return np.asarray(items, dtype=source.dtype)
        return _to_array(items)
    if isinstance(source, tuple):
        return tuple(items)
    return items


def _failure(
    operation: str,
    element: Any,
    cause: Exception,
    index: int | None = None,
    key: Hashable | None = None,
) -> InvalidArgumentError:
    location = ElementLocation(operation, index=index, key=key)
    logger.debug("%s: callback raised %s for %r", location, type(cause).__name__, element)
    return InvalidArgumentError(element, cause, location)


# =============================================================================
# Scalar Map
# =============================================================================


def apply(value: T, transform: Callable[[T], U]) -> U:
    """
    Apply a transform to a single value.

    Example:
        apply(10, lambda x: x * x) -> 100
    """
    _check_callable(transform, "transform", "apply")
    try:
        return transform(value)
    except Exception as exc:
        raise _failure("apply", value, exc) from exc


# =============================================================================
# Sequence Transforms
# =============================================================================


def map_seq(input: Iterable[T], transform: Callable[[T], U]) -> list[U]:
    """
    Apply a function to each element, preserving order and length.

    The transform is called once per element in index order. Tuples and
    numpy arrays come back as tuples and numpy arrays; any other iterable
    comes back as a list.

    Example:
        map_seq([10, 11, 12, 20], lambda x: x * x) -> [100, 121, 144, 400]

    Raises:
        InvalidArgumentError: the transform raised for some element
        TypeError: ``input`` is not a sequence or ``transform`` is not callable
    """
    _check_sequence(input, "map_seq")
    _check_callable(transform, "transform", "map_seq")

    result: list[U] = []
    for index, item in enumerate(input):
        try:
            result.append(transform(item))
        except Exception as exc:
            raise _failure("map_seq", item, exc, index=index) from exc
    return _rebuild(input, result, keep_dtype=False)


def filter_seq(input: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """
    Keep the elements that satisfy the predicate, preserving relative order.

    The predicate is evaluated exactly once per element, in order.

    Example:
        filter_seq([1, 2, 3, 4, 5, 6, 890], lambda x: x % 2 == 0) -> [2, 4, 6, 890]
    """
    _check_sequence(input, "filter_seq")
    _check_callable(predicate, "predicate", "filter_seq")

    result: list[T] = []
    for index, item in enumerate(input):
        try:
            keep = bool(predicate(item))
        except Exception as exc:
            raise _failure("filter_seq", item, exc, index=index) from exc
        if keep:
            result.append(item)
    return _rebuild(input, result, keep_dtype=True)


def reduce_seq(input: Iterable[T], seed: Acc, combine: Callable[[Acc, T], Acc]) -> Acc:
    """
    Fold the elements left to right into a single value.

    acc_0 = seed, acc_i = combine(acc_{i-1}, element_i). An empty input
    returns ``seed`` itself.

    Example:
        reduce_seq([3, 6, 891], 0, lambda acc, x: acc + x) -> 900
    """
    _check_sequence(input, "reduce_seq")
    _check_callable(combine, "combine", "reduce_seq")

    acc = seed
    for index, item in enumerate(input):
        try:
            acc = combine(acc, item)
        except Exception as exc:
            raise _failure("reduce_seq", item, exc, index=index) from exc
    return acc


# =============================================================================
# Mapping Transforms
# =============================================================================


def map_assoc(input: Mapping[K, V], transform: Callable[[V], U]) -> dict[K, U]:
    """
    Apply a function to each value of a mapping, keeping every key.

    Example:
        map_assoc({"City 1": 1000}, lambda v: v * 2) -> {"City 1": 2000}
    """
    _check_mapping(input, "map_assoc")
    _check_callable(transform, "transform", "map_assoc")

    result: dict[K, U] = {}
    for key, value in input.items():
        try:
            result[key] = transform(value)
        except Exception as exc:
            raise _failure("map_assoc", value, exc, key=key) from exc
    return result


def filter_assoc(input: Mapping[K, V], predicate: Callable[[V], bool]) -> dict[K, V]:
    """Keep the entries whose value satisfies the predicate."""
    _check_mapping(input, "filter_assoc")
    _check_callable(predicate, "predicate", "filter_assoc")

    result: dict[K, V] = {}
    for key, value in input.items():
        try:
            keep = bool(predicate(value))
        except Exception as exc:
            raise _failure("filter_assoc", value, exc, key=key) from exc
        if keep:
            result[key] = value
    return result
