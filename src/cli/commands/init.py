"""Initialize the operator configuration for a world."""

from pathlib import Path

import typer
from rich.console import Console

from src.cli.output import format_error, format_success, json_output
from src.cli.utils import ConfigManager, validate_player_name, validate_world_path
from src.state import PersistentStore, Privilege, StoreError
from src.state.store import DEFAULT_FILENAME

console = Console()


def init_command(
    operator: str = typer.Option(..., "--operator", "-o", help="Your player name"),
    world_path: str = typer.Option(..., "--world", "-w", help="World directory"),
    override: bool = typer.Option(
        False, "--override", help="Grant the shadowmute_override privilege"
    ),
    users: list[str] = typer.Option(
        None, "--user", "-u", help="Known player name (repeatable)"
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite existing configuration"
    ),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Initialize operator configuration and the world's shadow mute store.

    Creates ~/.shadowmute/config.yaml. If the world has no store file yet an
    empty one is written; an existing store is validated, never replaced.
    """
    try:
        operator = validate_player_name(operator)
        world = Path(validate_world_path(world_path)).expanduser()
        known = [validate_player_name(u) for u in users] if users else None
    except ValueError as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)

    config = ConfigManager()

    if config.exists() and not force:
        format_error(
            console,
            f"Configuration already exists at {config.config_path}",
            hint="Use --force to overwrite existing configuration",
        )
        raise typer.Exit(code=1)

    try:
        snapshot = PersistentStore(world / DEFAULT_FILENAME).load()
    except StoreError as e:
        format_error(console, f"Cannot load shadow mute store: {e}")
        raise typer.Exit(code=1)

    privileges = [Privilege.SHADOWMUTE.value]
    if override:
        privileges.append(Privilege.OVERRIDE.value)
    config.save(operator, world, privileges, known)

    if json_flag:
        json_output(
            console,
            {
                "status": "initialized",
                "operator": operator,
                "privileges": privileges,
                "store_path": str(world / DEFAULT_FILENAME),
                "record_count": len(snapshot.records),
                "config_path": str(config.config_path),
            },
        )
    else:
        format_success(console, "Shadowmute initialized successfully")
        console.print(f"[cyan]Operator:[/cyan]    {operator}")
        console.print(f"[cyan]Privileges:[/cyan]  {', '.join(privileges)}")
        console.print(f"[cyan]Store:[/cyan]       {world / DEFAULT_FILENAME}")
        console.print(f"[cyan]Config:[/cyan]      {config.config_path}")
