"""
Leveled reporter: location-annotated console messages.

Usage:
    from libutils.reporting import info, warn, warn_ack, error

Architecture:
    - Severity: INFO, WARN_NO_ACK, WARN_ACK, ERROR
    - CallSite: (file, function, line) of the report
    - Reporter: formatting, emission and the per-report state machine
    - Confirmation: the y/N acknowledgment loop used by WARN_ACK
"""

from libutils.reporting.callsite import CallSite
from libutils.reporting.confirm import PROMPT, REPROMPT, Confirmation, ConfirmState
from libutils.reporting.reporter import (
    Reporter,
    ReportState,
    error,
    format_message,
    get_reporter,
    info,
    output,
    render_header,
    reset_reporter,
    set_reporter,
    warn,
    warn_ack,
    warn_noack,
    warning,
)
from libutils.reporting.severity import Severity

__all__ = [
    # Types
    "CallSite",
    "Severity",
    "Reporter",
    "ReportState",
    "Confirmation",
    "ConfirmState",
    "PROMPT",
    "REPROMPT",
    # Helpers
    "format_message",
    "render_header",
    # Global reporter
    "get_reporter",
    "set_reporter",
    "reset_reporter",
    # Entry points
    "output",
    "info",
    "warn_noack",
    "warn_ack",
    "warn",
    "warning",
    "error",
]
