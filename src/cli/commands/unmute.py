"""Remove a player's shadow mute."""

import typer
from rich.console import Console

from src.cli.output import format_error, format_reply, json_output, reply_to_dict
from src.cli.utils import exit_code_for, open_session, validate_player_name
from src.cli.utils.config import ConfigError
from src.host.commands import UNMUTE, UNMUTE_FORCE
from src.state import StoreError

console = Console()


def unmute_command(
    target: str = typer.Argument(..., help="Player to unmute"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Remove a mute issued by someone else (override privilege)"
    ),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Unmute a player you shadow muted yourself."""
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

    reply = session.commands.dispatch(
        UNMUTE_FORCE if force else UNMUTE,
        session.config.operator,
        target,
        session.config.privileges,
    )

    if json_flag:
        data = reply_to_dict(reply)
        data["was_muted"] = reply.record is not None
        json_output(console, data)
    elif reply.ok and reply.record is None:
        console.print(f"[dim]Player '{target}' was not shadow muted[/dim]")
    else:
        format_reply(console, reply)
    code = exit_code_for(reply)
    if code:
        raise typer.Exit(code=code)
