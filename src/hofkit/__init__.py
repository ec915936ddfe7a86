"""
hofkit - higher-order collection transforms.

Map, filter and reduce over ordered sequences, and map and filter over the
values of a mapping. Every operation is a single pure pass that returns a
fresh result and stops at the first element whose callback raises.
"""

from hofkit.runtime.iterators import (
    apply,
    filter_assoc,
    filter_seq,
    map_assoc,
    map_seq,
    reduce_seq,
)
from hofkit.utils.errors import HofkitError, InvalidArgumentError

__version__ = "0.1.0"
__all__ = [
    "apply",
    "map_seq",
    "filter_seq",
    "reduce_seq",
    "map_assoc",
    "filter_assoc",
    "HofkitError",
    "InvalidArgumentError",
]
