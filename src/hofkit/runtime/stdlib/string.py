"""
hofkit Standard Library - String Module.

Transforms, predicates and combine functions for text.
"""

from __future__ import annotations

from collections.abc import Callable


def prefix_with(prefix: str) -> Callable[[str], str]:
    """Build a transform that prepends prefix."""
    return lambda s: prefix + s


def ends_with(suffix: str) -> Callable[[str], bool]:
    """Build a predicate that checks for a suffix."""
    return lambda s: s.endswith(suffix)


def join_with(sep: str = " ") -> Callable[[str, str], str]:
    """
    Build a combine function that concatenates with a separator.

    The separator is only inserted once the accumulator holds some text,
    so folding from an empty seed never produces a leading separator.

    Example:
        reduce_seq(["This", "is", "a", "text"], "", join_with(" ")) -> "This is a text"
    """

    def combine(acc: str, text: str) -> str:
        return text if acc == "" else acc + sep + text

    return combine
