"""
Exceptions raised for caller and setup errors.

Resource exhaustion and fatal reports never surface as exceptions; they
terminate the process (see ``libutils.core.process``).
"""


class LibutilsError(Exception):
    """Base exception for libutils errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidHandleError(LibutilsError):
    """Raised when a released or reallocated block is accessed."""

    pass


class ConfigError(LibutilsError):
    """Raised when a configuration file cannot be parsed."""

    pass
