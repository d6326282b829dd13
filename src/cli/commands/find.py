"""Search shadow muted players by name."""

import typer
from rich.console import Console

from src.cli.output import format_error, format_table, json_output
from src.cli.utils import exit_code_for, open_session
from src.cli.utils.config import ConfigError
from src.host.commands import FIND
from src.state import StoreError

console = Console()


def find_command(
    pattern: str = typer.Argument("", help="Regular expression matched against names"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List shadow muted players whose names match PATTERN."""
    try:
        session = open_session()
    except ConfigError as e:
        format_error(console, str(e), hint="Run 'shadowmute init' to configure the operator")
        raise typer.Exit(code=1)
    except StoreError as e:
        format_error(console, f"Cannot load shadow mute store: {e}")
        raise typer.Exit(code=1)

    reply = session.commands.dispatch(
        FIND, session.config.operator, pattern, session.config.privileges
    )
    if not reply.ok:
        if json_flag:
            json_output(console, {"status": reply.status.value, "error": " ".join(reply.messages)})
        else:
            format_error(console, " ".join(reply.messages))
        raise typer.Exit(code=exit_code_for(reply))

    records = [session.registry.get(name) for name in reply.targets]
    if json_flag:
        json_output(
            console,
            {
                "pattern": pattern,
                "count": len(records),
                "targets": [
                    {"target": r.target, "reason": r.reason, "by": r.issued_by} for r in records
                ],
            },
        )
        return

    if not records:
        console.print("[dim]No shadow muted players found[/dim]")
        return
    title = f"Shadow muted players matching '{pattern}'" if pattern else "Shadow muted players"
    format_table(
        console,
        title,
        ["Player", "Muted by", "Reason"],
        [[r.target, r.issued_by, r.reason] for r in records],
    )
    console.print(f"For a total of {len(records)} entries.")
