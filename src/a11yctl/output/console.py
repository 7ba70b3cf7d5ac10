"""Rich theme and an in-memory console for rendering results to text.

Rendering goes to a buffer so renderers can return ``str``. Rich drops
colour codes by itself when the buffer is not a terminal, which keeps
CliRunner output and pipes plain.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from a11yctl.domain.types import Principle

PRINCIPLE_COLOURS: dict[Principle, str] = {
    Principle.PERCEIVABLE: "green",
    Principle.OPERABLE: "blue",
    Principle.UNDERSTANDABLE: "yellow",
    Principle.ROBUST: "cyan",
}

A11Y_THEME = Theme(
    {
        "a11y.ok": "bold green",
        "a11y.error": "bold red",
        "a11y.warning": "bold yellow",
        "a11y.op": "bold cyan",
        "a11y.key": "dim",
        "a11y.path": "dim",
        "a11y.site": "bold blue",
        "a11y.count": "magenta",
        **{f"a11y.principle.{p}": colour for p, colour in PRINCIPLE_COLOURS.items()},
    }
)


class BufferedConsole(Console):
    """Console writing to a StringIO; read the result with :meth:`getvalue`."""

    def __init__(self, *, width: int = 120) -> None:
        super().__init__(file=StringIO(), theme=A11Y_THEME, highlight=False, width=width)

    def getvalue(self) -> str:
        assert isinstance(self.file, StringIO)
        return self.file.getvalue()


def style_for_principle(principle: str) -> str:
    """Theme style for a POUR principle, or "" for anything else."""
    if principle in PRINCIPLE_COLOURS:
        return f"a11y.principle.{principle}"
    return ""
