"""Rich terminal output formatters."""

from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.host.commands import CommandReply, ReplyStatus

_REPLY_STYLES = {
    ReplyStatus.OK: "green",
    ReplyStatus.CONFLICT: "yellow",
}


def format_success(console: Console, message: str) -> None:
    """Display success message in green."""
    console.print(f"[green]{escape(message)}[/green]")


def format_error(console: Console, message: str, hint: str | None = None) -> None:
    """Display error message in red with optional hint."""
    console.print(f"[red]Error:[/red] {escape(message)}")
    if hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(hint)}")


def format_reply(console: Console, reply: CommandReply) -> None:
    """Display the lines of a command reply, coloured by outcome."""
    style = _REPLY_STYLES.get(reply.status)
    if style is None:
        first, *rest = reply.messages or ("",)
        format_error(console, first)
        for line in rest:
            console.print(escape(line))
        return
    for line in reply.messages:
        console.print(f"[{style}]{escape(line)}[/{style}]")


def format_table(
    console: Console,
    title: str,
    columns: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> None:
    """Display data as a formatted table."""
    table = Table(title=escape(title))
    for col in columns:
        table.add_column(col)
    for row in rows:
        table.add_row(*(escape(cell) for cell in row))
    console.print(table)


def format_key_value(console: Console, data: dict[str, Any]) -> None:
    """Display key-value pairs."""
    max_key_len = max(len(k) for k in data.keys()) if data else 0
    for key, value in data.items():
        console.print(f"[cyan]{key.ljust(max_key_len)}[/cyan]: {escape(str(value))}")
