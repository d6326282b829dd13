"""JSON output mode utilities."""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from rich.console import Console

from src.host.commands import CommandReply
from src.state.models import MuteRecord


class CLIJSONEncoder(json.JSONEncoder):
    """JSON encoder that handles CLI types."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, Path):
            return str(obj)
        if isinstance(obj, (set, frozenset)):
            return sorted(obj)
        if hasattr(obj, "__dict__"):
            return obj.__dict__
        return super().default(obj)


def record_to_dict(record: Optional[MuteRecord]) -> Optional[dict[str, str]]:
    if record is None:
        return None
    return {"target": record.target, "reason": record.reason, "by": record.issued_by}


def reply_to_dict(reply: CommandReply) -> dict[str, Any]:
    return {
        "status": reply.status.value,
        "target": reply.target,
        "record": record_to_dict(reply.record),
        "messages": list(reply.messages),
    }


def json_output(console: Console, data: Any) -> None:
    """Output data as formatted JSON."""
    console.print_json(json.dumps(data, cls=CLIJSONEncoder))
