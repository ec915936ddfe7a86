"""
hofkit Runtime Package.

Collection transforms and their Result-returning variants.
"""

from hofkit.runtime.iterators import (
    apply,
    filter_assoc,
    filter_seq,
    map_assoc,
    map_seq,
    reduce_seq,
)
from hofkit.runtime.result import (
    err,
    is_err,
    is_ok,
    ok,
    try_filter_assoc,
    try_filter_seq,
    try_map_assoc,
    try_map_seq,
    try_reduce_seq,
    unwrap,
    unwrap_or,
)

__all__ = [
    # Transforms
    "apply",
    "map_seq",
    "filter_seq",
    "reduce_seq",
    "map_assoc",
    "filter_assoc",
    # Result helpers
    "ok",
    "err",
    "is_ok",
    "is_err",
    "unwrap",
    "unwrap_or",
    "try_map_seq",
    "try_filter_seq",
    "try_reduce_seq",
    "try_map_assoc",
    "try_filter_assoc",
]
