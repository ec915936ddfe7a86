"""
hofkit Standard Library.

Generic transforms, predicates and combine functions to pass to the
runtime operations.
"""

from hofkit.runtime.stdlib import math, string

__all__ = ["math", "string"]
