"""
Rich console construction for byte-exact report output.
"""

from typing import IO

from rich.console import Console

_COLOR_SYSTEMS = {None: "auto", True: "standard", False: None}


def make_console(stream: IO[str], color: bool | None = None) -> Console:
    """
    Build a console that writes text to ``stream`` unaltered.

    Markup, emoji and highlighting are off and lines are never wrapped, so
    messages containing brackets or long paths are written as given. With
    ``color=None`` styles are applied only when ``stream`` is a terminal.
    """
    return Console(
        file=stream,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
        force_jupyter=False,
        force_terminal=color,
        color_system=_COLOR_SYSTEMS[color],
    )
