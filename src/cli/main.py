"""Main CLI entry point for shadowmute."""

import logging

import typer
from rich.console import Console

from src.cli.commands.find import find_command
from src.cli.commands.init import init_command
from src.cli.commands.mute import mute_command
from src.cli.commands.show import show_command
from src.cli.commands.status import status_command
from src.cli.commands.unmute import unmute_command

app = typer.Typer(
    name="shadowmute",
    help="Shadowmute - manage shadow muted players of a world",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log store activity"),
) -> None:
    """Shadowmute - manage shadow muted players of a world."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )


@app.command("init")
def init(
    operator: str = typer.Option(..., "-o", "--operator", help="Your player name"),
    world_path: str = typer.Option(..., "-w", "--world", help="World directory"),
    override: bool = typer.Option(False, "--override", help="Grant override privilege"),
    users: list[str] = typer.Option(None, "-u", "--user", help="Known player (repeatable)"),
    force: bool = typer.Option(False, "-f", "--force", help="Overwrite config"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Initialize operator configuration for a world."""
    init_command(operator, world_path, override, users, force, json_flag)


@app.command("mute")
def mute(
    target: str = typer.Argument(..., help="Player to shadow mute"),
    reason: str = typer.Option(None, "-r", "--reason", help="Reason for muting"),
    force: bool = typer.Option(False, "-f", "--force", help="Overwrite existing mute"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Shadow mute a player."""
    mute_command(target, reason, force, json_flag)


@app.command("unmute")
def unmute(
    target: str = typer.Argument(..., help="Player to unmute"),
    force: bool = typer.Option(False, "-f", "--force", help="Ignore who issued the mute"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Unmute a shadow muted player."""
    unmute_command(target, force, json_flag)


@app.command("find")
def find(
    pattern: str = typer.Argument("", help="Regular expression to match names"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Find shadow muted players by name."""
    find_command(pattern, json_flag)


@app.command("show")
def show(
    target: str = typer.Argument(..., help="Player to look up"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Show a player's shadow mute record."""
    show_command(target, json_flag)


@app.command("status")
def status(
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Show operator configuration and store status."""
    status_command(json_flag)


def main() -> None:
    """Entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled[/yellow]")
        raise typer.Exit(130)
