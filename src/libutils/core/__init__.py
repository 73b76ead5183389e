"""libutils core components: configuration, errors and process control."""

from libutils.core.config import (
    DECLINED_EXIT_CODE,
    DEFAULT_TAG,
    LibutilsConfig,
    MemoryConfig,
    ReporterConfig,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from libutils.core.errors import ConfigError, InvalidHandleError, LibutilsError
from libutils.core.process import DEFAULT_PROCESS, ProcessControl

__all__ = [
    # Config
    "DEFAULT_TAG",
    "DECLINED_EXIT_CODE",
    "LibutilsConfig",
    "MemoryConfig",
    "ReporterConfig",
    "get_config",
    "load_config",
    "reset_config",
    "set_config",
    # Errors
    "LibutilsError",
    "InvalidHandleError",
    "ConfigError",
    # Process
    "ProcessControl",
    "DEFAULT_PROCESS",
]
