"""Diagnostics and debugging utilities for graphkit."""

from .core import (
    assert_same_closure,
    assert_symmetric,
    assert_valid_topological_order,
    is_symmetric,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_symmetric",
    "assert_symmetric",
    "assert_valid_topological_order",
    "assert_same_closure",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
