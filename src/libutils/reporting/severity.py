"""Message severities."""

from enum import Enum


class Severity(str, Enum):
    """
    Severity of a reported message.

    Each variant selects distinct behavior; ordering between them carries no
    meaning.
    """

    INFO = "info"
    WARN_NO_ACK = "warn_noack"  # Non-urgent, no user interaction
    WARN_ACK = "warn_ack"  # Blocks until the user answers y/N
    ERROR = "error"  # Fatal, aborts after reporting

    @property
    def label(self) -> str:
        """Label shown in the message header."""
        return _LABELS[self]

    @property
    def style(self) -> str:
        """Rich style applied to the label on color terminals."""
        return _STYLES[self]

    @property
    def to_stderr(self) -> bool:
        return self is Severity.ERROR


_LABELS = {
    Severity.INFO: "INFO",
    Severity.WARN_NO_ACK: "WARN",
    Severity.WARN_ACK: "WARN",
    Severity.ERROR: "FAIL",
}

_STYLES = {
    Severity.INFO: "cyan",
    Severity.WARN_NO_ACK: "yellow",
    Severity.WARN_ACK: "yellow",
    Severity.ERROR: "bold red",
}
