"""Show one player's shadow mute record."""

import typer
from rich.console import Console

from src.cli.output import format_error, format_key_value, json_output, record_to_dict
from src.cli.utils import open_session, validate_player_name
from src.cli.utils.config import ConfigError
from src.state import StoreError

console = Console()


def show_command(
    target: str = typer.Argument(..., help="Player to look up"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show whether a player is shadow muted, by whom and why."""
    try:
        target = validate_player_name(target)
    except ValueError as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)

    try:
        session = open_session()
    except ConfigError as e:
        format_error(console, str(e), hint="Run 'shadowmute init' to configure the operator")
        raise typer.Exit(code=1)
    except StoreError as e:
        format_error(console, f"Cannot load shadow mute store: {e}")
        raise typer.Exit(code=1)

    record = session.registry.get(target)
    if json_flag:
        json_output(
            console, {"target": target, "muted": record is not None, "record": record_to_dict(record)}
        )
        return

    if record is None:
        console.print(f"[dim]Player '{target}' is not shadow muted[/dim]")
        return
    format_key_value(
        console, {"Player": record.target, "Muted by": record.issued_by, "Reason": record.reason}
    )
