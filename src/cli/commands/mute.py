"""Shadow mute a player."""

import typer
from rich.console import Console

from src.cli.output import format_error, format_reply, json_output, reply_to_dict
from src.cli.utils import exit_code_for, open_session, validate_player_name, validate_reason
from src.cli.utils.config import ConfigError
from src.host.commands import MUTE, MUTE_FORCE
from src.state import StoreError

console = Console()


def mute_command(
    target: str = typer.Argument(..., help="Player to shadow mute"),
    reason: str = typer.Option(None, "--reason", "-r", help="Reason for muting"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing mute (override privilege)"
    ),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Shadow mute a player. Their chat is echoed back to them only."""
    try:
        target = validate_player_name(target)
        if reason is not None:
            reason = validate_reason(reason)
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

    params = f"{target} {reason}" if reason else target
    reply = session.commands.dispatch(
        MUTE_FORCE if force else MUTE,
        session.config.operator,
        params,
        session.config.privileges,
    )

    if json_flag:
        json_output(console, reply_to_dict(reply))
    else:
        format_reply(console, reply)
    code = exit_code_for(reply)
    if code:
        raise typer.Exit(code=code)
