"""
hofkit Utilities Package.

Error types and element locations shared by the transform runtime.
"""

from hofkit.utils.errors import (
    ElementLocation,
    HofkitError,
    InvalidArgumentError,
    UnwrapError,
)

__all__ = [
    "HofkitError",
    "InvalidArgumentError",
    "UnwrapError",
    "ElementLocation",
]
