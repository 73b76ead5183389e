"""
Leveled reporter.

Writes ``<tag> In <function> (<file>:<line>) <LEVEL>: <message>`` lines to
the console. ``WARN_ACK`` then waits for a y/N answer and ``ERROR`` aborts
the process.

Usage:
    from libutils.reporting import info, warn_ack, error

    info("loaded %d records", count)
    warn_ack("overwriting %s", path)   # exits 255 if the user declines
    error("cannot continue: %s", reason)  # never returns
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, NoReturn

from rich.text import Text

from libutils.core.config import ReporterConfig, get_config
from libutils.core.process import DEFAULT_PROCESS, ProcessControl
from libutils.reporting.callsite import CallSite
from libutils.reporting.confirm import Confirmation
from libutils.reporting.console import make_console
from libutils.reporting.severity import Severity

logger = logging.getLogger(__name__)


class ReportState(str, Enum):
    """States a single report passes through."""

    START = "start"
    FORMATTING = "formatting"
    EMITTING = "emitting"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    DONE = "done"
    TERMINATED = "terminated"


def format_message(template: Any, args: tuple) -> str:
    """
    Render a printf-style template.

    The template is always run through ``%``, so ``%%`` renders as ``%`` even
    without arguments. As in ``logging``, a single non-empty mapping argument
    feeds ``%(name)s`` placeholders. Mismatched placeholders raise whatever
    ``%`` raises.
    """
    message = str(template)
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        return message % args[0]
    return message % args


def render_header(tag: str, site: CallSite, severity: Severity) -> str:
    return f"{tag} In {site.function} ({site.file}:{site.line}) {severity.label}: "


class Reporter:
    """
    Emits leveled messages.

    Args:
        config: Output configuration. None follows the process-wide config.
        process: Termination hooks for ``ERROR`` and declined confirmations.
    """

    def __init__(
        self,
        config: ReporterConfig | None = None,
        process: ProcessControl = DEFAULT_PROCESS,
    ):
        self._config = config
        self._process = process

    @property
    def config(self) -> ReporterConfig:
        return self._config if self._config is not None else get_config().reporter

    def report(
        self,
        severity: Severity,
        template: Any,
        *args: Any,
        site: CallSite | None = None,
        stacklevel: int = 1,
    ) -> None:
        """
        Report a message.

        Returns normally for ``INFO``, ``WARN_NO_ACK`` and an accepted
        ``WARN_ACK``; otherwise the process is terminated.

        Args:
            severity: Message severity.
            template: printf-style template.
            *args: Values substituted into the template.
            site: Explicit call-site. Captured from the stack when omitted.
            stacklevel: Which caller to capture, as in ``logging``.
        """
        severity = Severity(severity)
        config = self.config
        state = ReportState.START
        message = ""

        while True:
            logger.debug("Report %s: %s", severity.value, state.value)

            if state is ReportState.START:
                if site is None:
                    site = CallSite.capture(stacklevel + 1)
                state = ReportState.FORMATTING

            elif state is ReportState.FORMATTING:
                message = format_message(template, args)
                state = ReportState.EMITTING

            elif state is ReportState.EMITTING:
                self._emit(config, severity, site, message)
                if severity is Severity.ERROR:
                    state = ReportState.TERMINATED
                elif severity is Severity.WARN_ACK:
                    state = ReportState.AWAITING_CONFIRMATION
                else:
                    state = ReportState.DONE

            elif state is ReportState.AWAITING_CONFIRMATION:
                console = make_console(config.out_stream(), config.color)
                confirmation = Confirmation(console, config.in_stream())
                if confirmation.run():
                    state = ReportState.DONE
                else:
                    state = ReportState.TERMINATED

            elif state is ReportState.DONE:
                return

            else:
                self._terminate(config, severity)

    def info(self, template: Any, *args: Any, site: CallSite | None = None, stacklevel: int = 1) -> None:
        self.report(Severity.INFO, template, *args, site=site, stacklevel=stacklevel + 1)

    def warn_noack(self, template: Any, *args: Any, site: CallSite | None = None, stacklevel: int = 1) -> None:
        self.report(Severity.WARN_NO_ACK, template, *args, site=site, stacklevel=stacklevel + 1)

    def warn_ack(self, template: Any, *args: Any, site: CallSite | None = None, stacklevel: int = 1) -> None:
        self.report(Severity.WARN_ACK, template, *args, site=site, stacklevel=stacklevel + 1)

    def error(self, template: Any, *args: Any, site: CallSite | None = None, stacklevel: int = 1) -> None:
        self.report(Severity.ERROR, template, *args, site=site, stacklevel=stacklevel + 1)

    warn = warn_noack
    warning = warn_noack

    def _emit(self, config: ReporterConfig, severity: Severity, site: CallSite, message: str) -> None:
        stream = config.err_stream() if severity.to_stderr else config.out_stream()
        console = make_console(stream, config.color)
        header = render_header(config.tag, site, severity)
        label_at = header.rindex(severity.label)

        # Only the label goes through rich; the message is written unaltered.
        stream.write(header[:label_at])
        console.print(Text(severity.label, style=severity.style), end="")
        stream.write(header[label_at + len(severity.label):] + message + "\n")
        stream.flush()

    def _terminate(self, config: ReporterConfig, severity: Severity) -> NoReturn:
        if severity is Severity.ERROR:
            logger.debug("Aborting after fatal report")
            self._process.terminate(config.out_stream(), config.err_stream())

        logger.debug("User declined, exiting with %d", config.declined_exit_code)
        config.out_stream().flush()
        self._process.exit(config.declined_exit_code)
        raise SystemExit(config.declined_exit_code)


# Global reporter instance
_reporter: Reporter | None = None


def get_reporter() -> Reporter:
    """Get the process-wide reporter."""
    global _reporter
    if _reporter is None:
        _reporter = Reporter()
    return _reporter


def set_reporter(reporter: Reporter) -> None:
    """Set the process-wide reporter."""
    global _reporter
    _reporter = reporter


def reset_reporter() -> None:
    """Reset the process-wide reporter."""
    global _reporter
    _reporter = None


def output(
    severity: Severity,
    template: Any,
    *args: Any,
    site: CallSite | None = None,
    stacklevel: int = 1,
) -> None:
    """Report a message at ``severity`` through the process-wide reporter."""
    get_reporter().report(severity, template, *args, site=site, stacklevel=stacklevel + 1)


def info(template: Any, *args: Any, site: CallSite | None = None, stacklevel: int = 1) -> None:
    """Report an informational message."""
    get_reporter().report(Severity.INFO, template, *args, site=site, stacklevel=stacklevel + 1)


def warn_noack(template: Any, *args: Any, site: CallSite | None = None, stacklevel: int = 1) -> None:
    """Report a warning that needs no acknowledgment."""
    get_reporter().report(Severity.WARN_NO_ACK, template, *args, site=site, stacklevel=stacklevel + 1)


def warn_ack(template: Any, *args: Any, site: CallSite | None = None, stacklevel: int = 1) -> None:
    """Report a warning and wait for the user to answer y/N."""
    get_reporter().report(Severity.WARN_ACK, template, *args, site=site, stacklevel=stacklevel + 1)


def error(template: Any, *args: Any, site: CallSite | None = None, stacklevel: int = 1) -> None:
    """Report a fatal error and abort."""
    get_reporter().report(Severity.ERROR, template, *args, site=site, stacklevel=stacklevel + 1)


warn = warn_noack
warning = warn
