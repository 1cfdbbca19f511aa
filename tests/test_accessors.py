"""Unit tests for data accessors and tick formatting."""

from __future__ import annotations

import pytest

from gauge_layout.accessors import format_number, format_tick, resolve_data_value


def test_resolve_data_value_plain_number() -> None:
    """Numbers pass straight through."""
    assert resolve_data_value(42) == pytest.approx(42.0)


def test_resolve_data_value_mapping_defaults_to_y() -> None:
    """Mapping datums without an accessor read the "y" key."""
    assert resolve_data_value({"x": "a", "y": 7}) == pytest.approx(7.0)


def test_resolve_data_value_with_accessors() -> None:
    """Callable, index and dotted-path accessors are all supported."""
    datum: dict = {"reading": {"celsius": 21.5, "history": [1.0, 2.0]}}
    assert resolve_data_value(datum, lambda d: d["reading"]["celsius"]) == pytest.approx(21.5)
    assert resolve_data_value(datum, "reading.celsius") == pytest.approx(21.5)
    assert resolve_data_value(datum, "reading.history.1") == pytest.approx(2.0)
    assert resolve_data_value([3.0, 9.0], 1) == pytest.approx(9.0)


def test_resolve_data_value_bad_accessors_raise() -> None:
    """Missing keys and bool accessors are errors, not silent zeros."""
    with pytest.raises(KeyError):
        resolve_data_value({"y": 1}, "missing")
    with pytest.raises(TypeError):
        resolve_data_value([1.0, 2.0], True)


def test_format_number_is_compact() -> None:
    """Integral values drop the decimal point."""
    assert format_number(10.0) == "10"
    assert format_number(0.5) == "0.5"
    assert format_number(100.0 / 3.0) == "33.3333"


def test_format_tick_sources() -> None:
    """Functions, label lists and the value itself can provide the text."""
    assert format_tick(50.0, 0, lambda v: f"{v:.0f}%") == "50%"
    assert format_tick(0.0, 0, ["off", "on"]) == "off"
    assert format_tick(1.0, 1, ["off", "on"]) == "on"
    # Not enough labels: fall back to the value.
    assert format_tick(2.0, 2, ["off", "on"]) == "2"
    assert format_tick(8.0, 4) == "8"
