"""Terminal styling through a rich ``Console``."""

from __future__ import annotations

from typing import Optional, TextIO

from rich.console import Console

FAINT = "bright_black"  # gray text
BOLD = "bold"
FAINT_BOLD = "bold bright_black"


def make_console(
    color: bool = True,
    file: Optional[TextIO] = None,
    force_terminal: Optional[bool] = None,
) -> Console:
    """Build the console all output goes through.

    With *color* off no escape codes are written at all. With it on, rich
    decides from the terminal (and ``NO_COLOR``/``FORCE_COLOR``) whether to
    style. Soft wrapping keeps wide rows on one line.
    """
    return Console(
        file=file,
        color_system="auto" if color else None,
        force_terminal=force_terminal,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )
