"""Console output for the CLI.

Provides a Console class that wraps rich for consistent output.
All CLI output should go through this module.
"""

from typing import Any

from rich.console import Console as RichConsole
from rich.table import Table

from rolekeeper.domain.acl.event.events import AclEvent


class Console:
    """CLI output manager wrapping rich."""

    def __init__(self, *, force_terminal: bool | None = None) -> None:
        self._console = RichConsole(force_terminal=force_terminal, stderr=False)
        self._err_console = RichConsole(force_terminal=force_terminal, stderr=True)

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]✗[/red] {message}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._console.print(f"[yellow]⚠[/yellow] {message}")

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to console (pass-through to rich)."""
        self._console.print(*args, **kwargs)

    def events(self, records: list[str]) -> None:
        """Print audit records as a table, oldest first."""
        if not records:
            self.warning("No ACL events recorded")
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("#", style="dim", width=4)
        for header in ("Event", "Role", "Account", "Predecessor"):
            table.add_column(header)

        for i, record in enumerate(records, 1):
            event = AclEvent.from_json(record)
            table.add_row(
                str(i),
                event.event,
                event.data.role,
                event.data.account_id,
                event.data.predecessor,
            )
        self._console.print(table)
