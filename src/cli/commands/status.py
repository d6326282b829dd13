"""Show operator configuration and store status."""

import typer
from rich.console import Console

from src.cli.output import format_error, format_key_value, json_output
from src.cli.utils import ConfigManager, open_session
from src.cli.utils.config import ConfigError
from src.state import StoreError

console = Console()


def status_command(
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show operator configuration and shadow mute store status."""
    try:
        session = open_session()
    except ConfigError as e:
        if json_flag:
            json_output(console, {"status": "not_initialized", "error": str(e)})
        else:
            format_error(console, str(e), hint="Run 'shadowmute init' to configure the operator")
        raise typer.Exit(code=1)
    except StoreError as e:
        if json_flag:
            json_output(console, {"status": "store_error", "error": str(e)})
        else:
            format_error(console, f"Cannot load shadow mute store: {e}")
        raise typer.Exit(code=1)

    config = session.config
    status = {
        "operator": config.operator,
        "privileges": list(config.privileges),
        "config_path": str(ConfigManager().config_path),
        "store_path": str(config.store_path),
        "record_count": len(session.registry),
        "issued_by_operator": sum(
            1 for name in session.registry.targets()
            if session.registry.get(name).issued_by == config.operator
        ),
        "known_users": len(config.known_users) if config.known_users is not None else None,
    }

    if json_flag:
        json_output(console, status)
        return

    format_key_value(
        console,
        {
            "Operator": status["operator"],
            "Privileges": ", ".join(status["privileges"]),
            "Config": status["config_path"],
            "Store": status["store_path"],
            "Records": status["record_count"],
            "Issued by you": status["issued_by_operator"],
            "Known users": "any" if status["known_users"] is None else status["known_users"],
        },
    )
