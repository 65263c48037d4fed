"""Render a ServiceResult as JSON (``--json``) or as indented plain text.

Plain text puts scalars on ``key: value`` lines. Nested objects such as
an item's purchase record are indented under their key, and lists of
items become ``-`` entries, so ``collection show`` stays readable
without ``--json``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from trainshed.services.result import ServiceResult

_INDENT = "  "


def _scalar(value: Any) -> str:
    return "-" if value is None else str(value)


def _render(value: Any, depth: int) -> list[str]:
    pad = _INDENT * depth
    lines: list[str] = []
    if isinstance(value, dict):
        for key, inner in value.items():
            if isinstance(inner, dict | list) and inner:
                lines.append(f"{pad}{key}:")
                lines.extend(_render(inner, depth + 1))
            elif isinstance(inner, dict | list):
                lines.append(f"{pad}{key}: -")
            else:
                lines.append(f"{pad}{key}: {_scalar(inner)}")
    elif isinstance(value, list):
        for entry in value:
            if isinstance(entry, dict):
                nested = _render(entry, depth + 1)
                lines.append(f"{pad}- {nested[0].lstrip()}" if nested else f"{pad}-")
                lines.extend(nested[1:])
            else:
                lines.append(f"{pad}- {_scalar(entry)}")
    return lines


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    if json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {message}"
    return "\n".join([f"OK: {result.op}", *_render(result.data, 1)])
