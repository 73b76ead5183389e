"""
Interactive y/N acknowledgment.

The loop reads one character at a time and is driven as an explicit state
machine so it can run against any pair of text streams.
"""

import logging
from enum import Enum
from typing import IO

from rich.console import Console

logger = logging.getLogger(__name__)

PROMPT = " -> Continue? [y/N]"
REPROMPT = "    Please answer [y]es or [N]o."


class ConfirmState(str, Enum):
    """States of the acknowledgment loop."""

    PROMPT = "prompt"
    READ = "read"
    REPROMPT = "reprompt"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class Confirmation:
    """
    Blocks until the user accepts or declines.

    Answers:
        ``y``/``Y``: accept; the rest of the pending input is discarded.
        ``n``/``N``/``\\r`` or end of input: decline.
        ``\\n`` ending a line whose answer was already judged: ignored.
        anything else: re-prompt.
    """

    def __init__(self, console: Console, stdin: IO[str]):
        self.console = console
        self.stdin = stdin
        self.state = ConfirmState.PROMPT
        self._line_has_answer = False

    def run(self) -> bool:
        """Run to a decision. Returns True if the user accepted."""
        while self.state not in (ConfirmState.ACCEPTED, ConfirmState.DECLINED):
            self.state = self.step()

        logger.debug("Confirmation %s", self.state.value)
        return self.state is ConfirmState.ACCEPTED

    def step(self) -> ConfirmState:
        """Perform the action of the current state and return the next one."""
        if self.state is ConfirmState.PROMPT:
            self.console.print(PROMPT, end="")
            return ConfirmState.READ

        if self.state is ConfirmState.REPROMPT:
            self.console.print(REPROMPT)
            return ConfirmState.PROMPT

        if self.state is ConfirmState.READ:
            return self._judge(self.stdin.read(1))

        return self.state

    def _judge(self, char: str) -> ConfirmState:
        if char in ("y", "Y"):
            self._drain()
            return ConfirmState.ACCEPTED

        if char in ("n", "N", "\r", ""):
            return ConfirmState.DECLINED

        if char == "\n":
            if self._line_has_answer:
                self._line_has_answer = False
                return ConfirmState.READ
            return ConfirmState.REPROMPT

        self._line_has_answer = True
        return ConfirmState.REPROMPT

    def _drain(self) -> None:
        isatty = getattr(self.stdin, "isatty", None)
        if isatty is not None and isatty():
            self.stdin.readline()
        else:
            self.stdin.read()
