"""
Data accessors and tick formatting.
Extracts the needle value from a datum and turns tick values into label text.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Sequence, Union

# A datum accessor: identity (None), a function, a sequence index, or a key /
# dotted key path into nested mappings.
DataAccessor = Union[None, Callable[[Any], Any], int, str]

# Tick text: a function of the value, or one string per tick in sweep order.
TickFormat = Union[None, Callable[[float], Any], Sequence[str]]

DEFAULT_DATUM_KEY: str = "y"  # Mapping datums without an accessor read this key.


def _get_path(datum: Any, path: str) -> Any:
    """Walk a dotted key path through nested mappings and sequences."""
    current: Any = datum
    for part in path.split("."):
        if isinstance(current, Mapping):
            current = current[part]
        elif part.lstrip("-").isdigit():
            current = current[int(part)]
        else:
            raise KeyError(f"Cannot read {part!r} from {type(current).__name__}.")
    return current


def resolve_data_value(data: Any, accessor: DataAccessor = None) -> float:
    """Return the numeric needle value for `data` using `accessor`."""
    if callable(accessor):
        value: Any = accessor(data)
    elif isinstance(accessor, bool):
        raise TypeError("A bool is not a valid data accessor.")
    elif isinstance(accessor, int):
        value = data[accessor]
    elif isinstance(accessor, str):
        value = _get_path(data, accessor)
    elif isinstance(data, Mapping):
        value = data[DEFAULT_DATUM_KEY]
    else:
        value = data
    return float(value)


def format_number(value: float) -> str:
    """Render a tick value compactly: 10.0 -> "10", 100 / 3 -> "33.3333"."""
    return f"{float(value):g}"


def format_tick(value: float, index: int, tick_format: TickFormat = None) -> str:
    """Return label text for the tick at `index` holding `value`."""
    if callable(tick_format):
        return str(tick_format(value))
    if tick_format is not None and not isinstance(tick_format, str):
        if index < len(tick_format):
            return str(tick_format[index])
    # Too few labels (or none): fall back to the value itself.
    return format_number(value)
