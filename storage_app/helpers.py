"""Template helpers: byte sizes, debug output and navigation highlighting."""

import json
import math

_SUFFIXES = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB", "RB", "QB")
_UNIT = 1000.0

MISSING = object()
"""Marker for a helper parameter that was not given at all."""


def _format_number(number: float) -> str:
    if number.is_integer():
        return str(int(number))
    return repr(number)


def humanize_bytes(value) -> str:
    """Render a byte count with decimal (SI) units, e.g. ``1.5 kB``.

    Anything that is not an integer counts as zero.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        value = 0
    num_bytes = float(value)
    if num_bytes <= 0:
        return "0 B"
    if num_bytes < _UNIT:
        return f"{_format_number(num_bytes)} B"
    base = int(math.log10(num_bytes)) // 3
    scaled = math.floor(num_bytes / _UNIT ** base * 10.0 + 0.5) / 10.0
    return f"{_format_number(scaled)} {_SUFFIXES[base]}"


def debug_value(value=MISSING) -> str:
    """Render a value for debugging inside a template."""
    if value is MISSING:
        return "undefined"
    if isinstance(value, dict):
        return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)
    if isinstance(value, str):
        return value
    return "[unknown]"


def is_active(current_path, href, exact=False) -> str:
    """Return ``is-active`` when ``current_path`` matches ``href``.

    With ``exact`` the paths must be equal; otherwise ``current_path``
    only has to start with ``href``.
    """
    for index, param in enumerate((current_path, href)):
        if not isinstance(param, str):
            raise TypeError(f"parameter {index} not found or not a string")
    matched = current_path == href if exact else current_path.startswith(href)
    return "is-active" if matched else ""