"""Display formatting for option default values."""

import json
from typing import Any, Mapping


def _format_nested(value: Any) -> str:
    if isinstance(value, str):
        return json.dumps(value)
    return format_value(value)


def format_value(value: Any) -> str:
    """Format a value for display in help text.

    Strings are shown as-is at the top level and quoted when nested.
    Booleans and None use their JSON spelling, so ``False`` shows as
    ``false`` rather than disappearing.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, Mapping):
        if not value:
            return '{}'
        items = ', '.join(f"{k}: {_format_nested(v)}" for k, v in value.items())
        return '{ ' + items + ' }'
    if isinstance(value, (list, tuple)):
        if not value:
            return '[]'
        return '[ ' + ', '.join(_format_nested(v) for v in value) + ' ]'
    return str(value)
