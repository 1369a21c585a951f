"""
NetWarden Console Interface
============================

Rich-powered console abstraction giving the CLI one consistent
presentation layer: section headers, verdict messages, key/value
panels and tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

_WARDEN_THEME = Theme(
    {
        "warden.section": "bold bright_magenta",
        "warden.success": "bold green",
        "warden.warning": "bold yellow",
        "warden.error": "bold red",
        "warden.key": "bold bright_white",
    }
)


class WardenConsole:
    """Unified console interface for NetWarden output.

    Usage::

        con = WardenConsole()
        con.section("Validation")
        con.success("Configuration accepted")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
        """
        self._console = Console(
            theme=_WARDEN_THEME,
            quiet=quiet,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Section header
    # ------------------------------------------------------------------ #

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="warden.section",
            characters="─",
        )

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[warden.success][✔] PASS:[/warden.success] {message}"
        )

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._console.print(
            f"[warden.warning][⚠] WARNING:[/warden.warning] {message}"
        )

    def error(self, message: str) -> None:
        """Print an error message."""
        self._console.print(
            f"[warden.error][✘] FAIL:[/warden.error] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Structured display
    # ------------------------------------------------------------------ #

    def key_values(self, title: str, pairs: Sequence[tuple[str, Any]]) -> None:
        """Render ``(key, value)`` pairs inside a bordered panel."""
        body = "\n".join(
            f"[warden.key]{key}:[/warden.key] {value}" for key, value in pairs
        )
        self._console.print(
            Panel(body, title=title, border_style="bright_cyan", padding=(0, 1))
        )

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)
