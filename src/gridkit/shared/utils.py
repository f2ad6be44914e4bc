"""Shared utility functions"""
from typing import Any


def clone_grid(grid: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Structurally clone a grid so the copy never aliases the original rows"""
    return [dict(row) for row in grid]


def is_number(value: Any) -> bool:
    """True for int/float cell values. bool is not a cell number."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_number(value: Any) -> int | float | None:
    """
    Coerce a cell value to a number

    Args:
        value (Any): Cell value (number, numeric-looking string, or anything else)

    Returns:
        int | float | None: The numeric value, or None when the value is not numeric
    """
    if is_number(value):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None
