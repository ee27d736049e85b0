from __future__ import annotations

import re
from typing import Any, Mapping

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def clean_data(data: Mapping[str, Any] | None) -> dict[str, Any]:
    """Drop `None` values but keep empty strings, zeros and `False`."""
    if not data:
        return {}
    return {key: value for key, value in data.items() if value is not None}


def make_replacements(route: str, replace: Mapping[str, Any] | None = None) -> str:
    """Fill `{name}` placeholders in a route template.

    Placeholders without a (non-`None`) entry are left verbatim. Every token is
    resolved in one pass over the original template, so a substituted value
    that itself looks like a placeholder is sent as-is.
    """
    values = clean_data(replace)
    if not values:
        return route

    def _sub(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in values:
            return match.group(0)
        return str(values[key])

    return _PLACEHOLDER.sub(_sub, route)
