"""
Tests for the y/N confirmation state machine.
"""

import io

import pytest

from libutils.reporting import PROMPT, REPROMPT, Confirmation, ConfirmState
from libutils.reporting.console import make_console


class TtyInput(io.StringIO):
    """StringIO that claims to be a terminal."""

    def isatty(self):
        return True


@pytest.fixture
def out():
    return io.StringIO()


def make_confirmation(out, answer, stdin_cls=io.StringIO):
    return Confirmation(make_console(out, color=False), stdin_cls(answer))


class TestConfirmState:
    """Tests for ConfirmState enum."""

    def test_all_states_exist(self):
        assert ConfirmState.PROMPT.value == "prompt"
        assert ConfirmState.READ.value == "read"
        assert ConfirmState.REPROMPT.value == "reprompt"
        assert ConfirmState.ACCEPTED.value == "accepted"
        assert ConfirmState.DECLINED.value == "declined"


class TestConfirmationSteps:
    """Tests for individual transitions."""

    def test_prompt_then_read(self, out):
        confirmation = make_confirmation(out, "y")

        assert confirmation.state is ConfirmState.PROMPT
        assert confirmation.step() is ConfirmState.READ
        assert out.getvalue() == PROMPT

    def test_invalid_char_leads_to_reprompt(self, out):
        confirmation = make_confirmation(out, "?")
        confirmation.state = ConfirmState.READ

        assert confirmation.step() is ConfirmState.REPROMPT

        confirmation.state = ConfirmState.REPROMPT
        assert confirmation.step() is ConfirmState.PROMPT
        assert out.getvalue() == REPROMPT + "\n"

    def test_terminal_states_are_fixed_points(self, out):
        confirmation = make_confirmation(out, "")
        confirmation.state = ConfirmState.ACCEPTED

        assert confirmation.step() is ConfirmState.ACCEPTED
        assert out.getvalue() == ""


class TestConfirmationRun:
    """Tests for complete runs."""

    @pytest.mark.parametrize("answer", ["y", "Y", "y\n", "Yes please\n"])
    def test_accepts(self, out, answer):
        assert make_confirmation(out, answer).run() is True

    @pytest.mark.parametrize("answer", ["n", "N\n", "\r\n", ""])
    def test_declines(self, out, answer):
        assert make_confirmation(out, answer).run() is False

    def test_empty_line_reprompts(self, out):
        confirmation = make_confirmation(out, "\ny\n")

        assert confirmation.run() is True
        assert out.getvalue() == PROMPT + REPROMPT + "\n" + PROMPT

    def test_blank_lines_then_end_of_input_decline(self, out):
        confirmation = make_confirmation(out, "\n\n")

        assert confirmation.run() is False
        assert out.getvalue().count(REPROMPT) == 2

    def test_newline_after_invalid_answer_is_ignored(self, out):
        confirmation = make_confirmation(out, "x\ny\n")

        assert confirmation.run() is True
        assert out.getvalue() == PROMPT + REPROMPT + "\n" + PROMPT

    def test_each_invalid_char_reprompts(self, out):
        confirmation = make_confirmation(out, "abc\nn\n")

        assert confirmation.run() is False
        assert out.getvalue().count(REPROMPT) == 3

    def test_drains_to_end_of_input(self, out):
        stdin = io.StringIO("y\nmore\ninput\n")
        confirmation = Confirmation(make_console(out, color=False), stdin)

        confirmation.run()

        assert stdin.read() == ""

    def test_drains_only_current_line_on_terminal(self, out):
        stdin = TtyInput("y\nnext command\n")
        confirmation = Confirmation(make_console(out, color=False), stdin)

        confirmation.run()

        assert stdin.read() == "next command\n"
