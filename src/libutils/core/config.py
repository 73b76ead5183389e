"""
libutils configuration management.

Nothing is read from disk unless a caller asks for it with
``load_config()``; the defaults reproduce the stock console behavior.
"""

import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import IO, Any

import yaml

from libutils.core.errors import ConfigError

DEFAULT_TAG = " ** libutils:"
DECLINED_EXIT_CODE = 255


@dataclass(frozen=True)
class ReporterConfig:
    """
    Output configuration for the leveled reporter.

    Streams left as None resolve to the live ``sys.stdout``, ``sys.stderr``
    and ``sys.stdin`` at the moment of each report, so redirections made
    after import are honored.
    """

    tag: str = DEFAULT_TAG
    stdout: IO[str] | None = None
    stderr: IO[str] | None = None
    stdin: IO[str] | None = None
    declined_exit_code: int = DECLINED_EXIT_CODE
    color: bool | None = None  # None: style only when writing to a terminal

    def out_stream(self) -> IO[str]:
        return self.stdout if self.stdout is not None else sys.stdout

    def err_stream(self) -> IO[str]:
        return self.stderr if self.stderr is not None else sys.stderr

    def in_stream(self) -> IO[str]:
        return self.stdin if self.stdin is not None else sys.stdin

    def with_streams(
        self,
        stdout: IO[str] | None = None,
        stderr: IO[str] | None = None,
        stdin: IO[str] | None = None,
    ) -> "ReporterConfig":
        """Return a copy bound to the given streams."""
        return replace(
            self,
            stdout=stdout if stdout is not None else self.stdout,
            stderr=stderr if stderr is not None else self.stderr,
            stdin=stdin if stdin is not None else self.stdin,
        )


@dataclass(frozen=True)
class MemoryConfig:
    """Diagnostics for the allocation guard."""

    diagnostic_prefix: str = DEFAULT_TAG
    stderr: IO[str] | None = None

    def err_stream(self) -> IO[str]:
        return self.stderr if self.stderr is not None else sys.stderr


@dataclass
class LibutilsConfig:
    """
    Complete libutils configuration.

    Optionally loaded from a YAML file of the form::

        libutils:
          reporter:
            tag: " ** mytool:"
            declined_exit_code: 3
            color: false
          memory:
            diagnostic_prefix: " ** mytool:"
    """

    reporter: ReporterConfig = field(default_factory=ReporterConfig)
    memory: MemoryConfig = field(default_factory=MemoryConfig)

    @classmethod
    def from_file(cls, path: Path) -> "LibutilsConfig":
        """Load configuration from YAML file."""
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Invalid configuration file {path}: expected a mapping")

        return cls.from_dict(data.get("libutils", data))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LibutilsConfig":
        """Create config from dictionary."""
        config = cls()

        if "reporter" in data:
            r = data["reporter"] or {}
            color = r.get("color")
            config.reporter = ReporterConfig(
                tag=str(r.get("tag", DEFAULT_TAG)),
                declined_exit_code=int(r.get("declined_exit_code", DECLINED_EXIT_CODE)),
                color=None if color is None else bool(color),
            )

        if "memory" in data:
            m = data["memory"] or {}
            config.memory = MemoryConfig(
                diagnostic_prefix=str(m.get("diagnostic_prefix", DEFAULT_TAG)),
            )

        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization. Streams are not serialized."""
        return {
            "libutils": {
                "reporter": {
                    "tag": self.reporter.tag,
                    "declined_exit_code": self.reporter.declined_exit_code,
                    "color": self.reporter.color,
                },
                "memory": {
                    "diagnostic_prefix": self.memory.diagnostic_prefix,
                },
            }
        }

    def save(self, path: Path) -> None:
        """Save configuration to YAML file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)


# Global config instance
_config: LibutilsConfig | None = None


def get_config() -> LibutilsConfig:
    """Get the process-wide configuration, defaults unless one was loaded or set."""
    global _config

    if _config is None:
        _config = LibutilsConfig()

    return _config


def set_config(config: LibutilsConfig) -> None:
    """Set the process-wide configuration."""
    global _config
    _config = config


def load_config(path: Path) -> LibutilsConfig:
    """Load a YAML configuration file and make it the process-wide configuration."""
    config = LibutilsConfig.from_file(path)
    set_config(config)
    return config


def reset_config() -> None:
    """Reset the process-wide configuration to defaults."""
    global _config
    _config = None
