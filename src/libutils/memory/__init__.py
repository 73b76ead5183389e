"""
Allocation guard: byte blocks whose allocation never fails visibly.

Usage:
    from libutils.memory import allocate, reallocate, release

    buf = allocate(64)
    buf[0:5] = b"hello"
    buf = reallocate(buf, 128)
    release(buf)
"""

from libutils.memory.block import Block
from libutils.memory.guard import (
    AllocationGuard,
    allocate,
    get_guard,
    reallocate,
    release,
    reset_guard,
    set_guard,
)

__all__ = [
    "AllocationGuard",
    "Block",
    "allocate",
    "get_guard",
    "reallocate",
    "release",
    "reset_guard",
    "set_guard",
]
