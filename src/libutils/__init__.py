"""
libutils - fatal-on-exhaustion allocation and leveled console reporting.

A small dependency for command-line programs that want a uniform,
location-annotated way to report informational messages, warnings that may
require acknowledgment, and fatal errors.
"""

__version__ = "0.1.0"
__version_tuple__ = (0, 1, 0)

from libutils.core.config import LibutilsConfig, get_config, load_config
from libutils.memory import Block, allocate, reallocate, release
from libutils.reporting import (
    CallSite,
    Severity,
    error,
    info,
    output,
    warn,
    warn_ack,
    warn_noack,
    warning,
)

__all__ = [
    "__version__",
    "__version_tuple__",
    "LibutilsConfig",
    "get_config",
    "load_config",
    "Block",
    "allocate",
    "reallocate",
    "release",
    "CallSite",
    "Severity",
    "output",
    "info",
    "warn_noack",
    "warn_ack",
    "warn",
    "warning",
    "error",
]
