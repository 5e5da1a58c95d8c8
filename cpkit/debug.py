"""Readable dumps of nested values for debugging output."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping
from typing import Any, Optional, TextIO


def _number(x: float) -> str:
    return format(x, "g")


def format_value(value: Any) -> str:
    """Render a value: strings quoted, booleans as true/false, containers in braces."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _number(value)
    if isinstance(value, complex):
        return "{" + _number(value.real) + "," + _number(value.imag) + "}"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, Mapping):
        return "{" + ",".join(
            "{" + format_value(k) + "," + format_value(v) + "}" for k, v in value.items()
        ) + "}"
    if isinstance(value, Iterable):
        return "{" + ",".join(format_value(item) for item in value) + "}"
    return str(value)


def dbg(label: str, *args: Any, file: Optional[TextIO] = None) -> str:
    """Write ``[label] = [v1, v2, ...]`` and a newline to ``file`` (stderr by default)."""
    line = f"[{label}] = [" + ", ".join(format_value(a) for a in args) + "]\n"
    (file if file is not None else sys.stderr).write(line)
    return line