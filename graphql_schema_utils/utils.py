"""
Small helpers shared by the diff engine.
"""

import re
from typing import Any, Iterable, List

_PLACEHOLDER = re.compile(r"{(\d+)}")


def format_template(template: str, *args: Any) -> str:
    """
    Interpolate positional ``{N}`` placeholders.

    Placeholders without a matching argument are left untouched.

    Args:
        template: Text containing ``{0}``, ``{1}``... markers
        *args: Values substituted by position

    Returns:
        The interpolated string
    """

    def _replace(match: re.Match) -> str:
        index = int(match.group(1))
        if index < len(args):
            return str(args[index])
        return match.group(0)

    return _PLACEHOLDER.sub(_replace, template)


def dedupe(records: Iterable[Any]) -> List[Any]:
    """Drop records whose (kind, description) was already seen, keeping order."""
    seen = set()
    unique = []
    for record in records:
        key = record.dedupe_key
        if key in seen:
            continue
        seen.add(key)
        unique.append(record)
    return unique
