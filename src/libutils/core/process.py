"""
Process termination primitives.

The guard and the reporter never call ``os.abort`` or ``sys.exit``
directly. They go through a ``ProcessControl`` value so a host (or a test)
can substitute its own termination behavior.
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Callable, NoReturn


def _abort() -> NoReturn:
    os.abort()


def _exit(code: int) -> NoReturn:
    sys.exit(code)


@dataclass(frozen=True)
class ProcessControl:
    """Abort and exit hooks used on the fatal paths."""

    abort: Callable[[], NoReturn] = field(default=_abort)
    exit: Callable[[int], NoReturn] = field(default=_exit)

    def terminate(self, *streams) -> NoReturn:
        """Flush the given streams and abort the process."""
        for stream in streams:
            if stream is not None:
                stream.flush()
        self.abort()
        # A replacement abort hook must not return either.
        raise SystemExit(134)


DEFAULT_PROCESS = ProcessControl()
