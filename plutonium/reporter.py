"""Console implementation of the checker's ``log``/``heading`` collaborator."""

from __future__ import annotations

import click

_LEVEL_COLORS: dict[str, str | None] = {
    "info": None,
    "success": "green",
    "warning": "yellow",
    "error": "red",
}


class ConsoleReporter:
    """Print progress lines for a human operator.

    ``err=True`` sends everything to stderr so stdout stays machine-readable.
    """

    def __init__(self, color: bool | None = None, err: bool = False) -> None:
        self._color = color
        self._err = err

    def log(self, message: str, level: str = "info") -> None:
        fg = _LEVEL_COLORS.get(level)
        click.echo(
            click.style(message, fg=fg),
            color=self._color,
            err=self._err or level == "error",
        )

    def heading(self, title: str) -> None:
        click.echo(err=self._err)
        click.echo(click.style(title, bold=True, fg="cyan"), color=self._color, err=self._err)
        click.echo(click.style("─" * len(title), fg="cyan"), color=self._color, err=self._err)
