"""Name search over muted targets."""
import re
from typing import Iterable


class InvalidPatternError(ValueError):
    """Search pattern failed to compile."""


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a search pattern. Raises InvalidPatternError if malformed."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(str(e)) from e


def find_targets(targets: Iterable[str], pattern: str) -> list[str]:
    """Return sorted targets containing a match for ``pattern``.

    An empty pattern matches every target.
    """
    compiled = compile_pattern(pattern)
    return sorted(t for t in targets if compiled.search(t))
