"""
Allocation guard.

Allocation failure is not an error the caller handles: the guard writes a
diagnostic to the error stream and aborts the process. Every block it
returns is therefore valid at the moment of return.
"""

import logging
import operator
from typing import Callable, NoReturn

from libutils.core.config import MemoryConfig, get_config
from libutils.core.process import DEFAULT_PROCESS, ProcessControl
from libutils.memory.block import Block

logger = logging.getLogger(__name__)

Allocator = Callable[[int], bytearray]


def _check_size(size: int) -> int:
    size = operator.index(size)
    if size < 0:
        raise ValueError(f"Block size must be non-negative, got {size}")
    return size


class AllocationGuard:
    """
    Allocates, resizes and releases blocks, terminating on exhaustion.

    Args:
        config: Diagnostic settings. None follows the process-wide config.
        allocator: Returns a zero-filled bytearray of the requested size and
            raises ``MemoryError`` (or ``OverflowError`` for sizes beyond
            the address space) when it cannot.
        process: Termination hooks.
    """

    def __init__(
        self,
        config: MemoryConfig | None = None,
        allocator: Allocator = bytearray,
        process: ProcessControl = DEFAULT_PROCESS,
    ):
        self._config = config
        self._allocator = allocator
        self._process = process

    @property
    def config(self) -> MemoryConfig:
        return self._config if self._config is not None else get_config().memory

    def allocate(self, size: int) -> Block:
        """Return a new block of exactly ``size`` bytes."""
        size = _check_size(size)
        try:
            data = self._allocator(size)
        except (MemoryError, OverflowError):
            self._fail("memory allocation failed!")

        logger.debug("Allocated block of %d bytes", size)
        return Block(data)

    def reallocate(self, block: Block | None, new_size: int) -> Block:
        """
        Resize a block, preserving its first ``min(old, new)`` bytes.

        The input block is null after this call whether or not its storage
        was reused. A null input behaves like ``allocate``.
        """
        new_size = _check_size(new_size)
        if block is None or block.is_null:
            return self.allocate(new_size)

        data = block._take()
        old_size = len(data)
        try:
            data = self._resize(data, new_size)
        except (MemoryError, OverflowError):
            self._fail("memory reallocation failed!")

        logger.debug("Reallocated block from %d to %d bytes", old_size, new_size)
        return Block(data)

    def release(self, block: Block | None) -> None:
        """Free a block and leave it null. No-op for None or a null block."""
        if block is None:
            return
        if block._free():
            logger.debug("Released block")

    def _resize(self, data: bytearray, new_size: int) -> bytearray:
        old_size = len(data)
        try:
            if new_size < old_size:
                del data[new_size:]
            elif new_size > old_size:
                data.extend(self._allocator(new_size - old_size))
            return data
        except BufferError:
            # Storage is pinned by an exported memoryview; move to fresh storage.
            fresh = self._allocator(new_size)
            keep = min(old_size, new_size)
            fresh[:keep] = data[:keep]
            return fresh

    def _fail(self, what: str) -> NoReturn:
        config = self.config
        stream = config.err_stream()
        logger.debug("Allocation guard terminating: %s", what)
        stream.write(f"{config.diagnostic_prefix} FATAL: {what}\n")
        self._process.terminate(stream)


# Global guard instance
_guard: AllocationGuard | None = None


def get_guard() -> AllocationGuard:
    """Get the process-wide allocation guard."""
    global _guard
    if _guard is None:
        _guard = AllocationGuard()
    return _guard


def set_guard(guard: AllocationGuard) -> None:
    """Set the process-wide allocation guard."""
    global _guard
    _guard = guard


def reset_guard() -> None:
    """Reset the process-wide allocation guard."""
    global _guard
    _guard = None


def allocate(size: int) -> Block:
    """Allocate ``size`` bytes, aborting the process on exhaustion."""
    return get_guard().allocate(size)


def reallocate(block: Block | None, new_size: int) -> Block:
    """Resize ``block`` to ``new_size`` bytes, aborting the process on exhaustion."""
    return get_guard().reallocate(block, new_size)


def release(block: Block | None) -> None:
    """Release ``block``; safe on None and on an already released block."""
    get_guard().release(block)
