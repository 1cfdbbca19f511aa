"""
Gauge configuration: the inputs of one gauge, their defaults, validation,
and loading named gauges from TOML.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
import math
from pathlib import Path
import tomllib  # used for the gauge presets file
from typing import Any, Union

from gauge_layout.accessors import DataAccessor, TickFormat
from gauge_layout.colors import DEFAULT_COLOR_SCALE, get_color_scale

PRESETS_TOML_PATH: Path = (  # Bundled example gauges.
    Path(__file__).resolve().parent / "gauge_presets.toml"
)

PADDING_SIDES: tuple[str, ...] = ("top", "bottom", "left", "right")


class GaugeConfigError(ValueError):
    """Raised when a gauge configuration cannot produce valid geometry."""


@dataclass(frozen=True)
class Padding:
    """Space in pixels between the chart edge and the gauge."""

    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    @classmethod
    def from_value(cls, value: PaddingLike) -> Padding:
        """Build padding from a number (all sides) or a per-side mapping."""
        if isinstance(value, Padding):
            return value
        if isinstance(value, Mapping):
            unknown: set[str] = set(value) - set(PADDING_SIDES)
            if unknown:
                raise GaugeConfigError(f"Unknown padding sides: {sorted(unknown)}.")
            # Sides missing from the mapping default to 0.
            return cls(**{side: float(value.get(side, 0.0)) for side in PADDING_SIDES})
        amount: float = float(value)
        return cls(top=amount, bottom=amount, left=amount, right=amount)


PaddingLike = Union[float, Mapping[str, float], Padding]


@dataclass(frozen=True)
class GaugeConfig:
    """Every input of one gauge, with the defaults of a standard half-ring gauge."""

    gauge_id: str = "gauge"
    width: float = 400.0
    height: float = 400.0
    padding: PaddingLike = 30.0
    inner_radius: float = 100.0
    outer_radius: float = 170.0
    start_angle: float = -90.0  # Degrees, 0 points up.
    end_angle: float = 90.0
    pad_angle: float = 0.0  # Degrees between adjacent segments.
    domain: tuple[float, float] | None = None
    segments: tuple[float, ...] = ()
    tick_values: tuple[float, ...] = ()
    tick_count: int | None = None  # When set, replaces tick_values.
    tick_format: TickFormat = None
    data: Any = 0.0
    data_accessor: DataAccessor = None
    color_scale: str | tuple[str, ...] = DEFAULT_COLOR_SCALE
    segment_fill: str | None = None  # Single fill for every segment.
    tick_length: float = 6.0
    label_padding: float = 30.0  # Radial band the tick labels are centred in.

    @property
    def resolved_padding(self) -> Padding:
        """Return the padding as a per-side value."""
        return Padding.from_value(self.padding)


def _require_finite(name: str, value: float, *, non_negative: bool = False) -> None:
    """Reject NaN/inf and, optionally, negative numbers."""
    if not math.isfinite(value):
        raise GaugeConfigError(f"{name} must be finite, got {value!r}.")
    if non_negative and value < 0.0:
        raise GaugeConfigError(f"{name} must be >= 0, got {value!r}.")


def validate_config(config: GaugeConfig) -> GaugeConfig:
    """Fail fast on configurations that cannot produce valid geometry."""
    for name in ("width", "height", "inner_radius", "outer_radius", "pad_angle"):
        _require_finite(name, getattr(config, name), non_negative=True)
    for name in ("tick_length", "label_padding"):
        _require_finite(name, getattr(config, name), non_negative=True)
    _require_finite("start_angle", config.start_angle)
    _require_finite("end_angle", config.end_angle)
    if config.inner_radius > config.outer_radius:
        raise GaugeConfigError(
            f"inner_radius ({config.inner_radius}) must not exceed "
            f"outer_radius ({config.outer_radius})."
        )

    padding: Padding = config.resolved_padding
    for side in PADDING_SIDES:
        _require_finite(f"padding.{side}", getattr(padding, side), non_negative=True)
    if config.width - padding.left - padding.right < 0.0:
        raise GaugeConfigError(
            f"left + right padding ({padding.left + padding.right}) "
            f"exceeds width {config.width}."
        )
    if config.height - padding.top - padding.bottom < 0.0:
        raise GaugeConfigError(
            f"top + bottom padding ({padding.top + padding.bottom}) "
            f"exceeds height {config.height}."
        )

    if config.domain is not None:
        if len(config.domain) != 2:
            raise GaugeConfigError(f"domain must have two values, got {config.domain!r}.")
        low, high = config.domain
        _require_finite("domain minimum", low)
        _require_finite("domain maximum", high)
        if low > high:
            raise GaugeConfigError(f"domain minimum {low} exceeds maximum {high}.")
    for value in config.segments:
        _require_finite("segment value", value)
    for value in config.tick_values:
        _require_finite("tick value", value)

    if config.tick_count is not None:
        if isinstance(config.tick_count, bool) or not isinstance(config.tick_count, int):
            raise GaugeConfigError(f"tick_count must be an int, got {config.tick_count!r}.")
        if config.tick_count < 0:
            raise GaugeConfigError(f"tick_count must be >= 0, got {config.tick_count}.")

    try:
        get_color_scale(config.color_scale)
    except ValueError as exc:
        raise GaugeConfigError(str(exc)) from exc
    return config


def config_from_mapping(gauge_id: str, raw: Mapping[str, Any]) -> GaugeConfig:
    """Build a validated GaugeConfig from one parsed TOML table."""
    known: set[str] = {f.name for f in fields(GaugeConfig)} - {"gauge_id"}
    unknown: set[str] = set(raw) - known
    if unknown:
        raise GaugeConfigError(f"Unknown keys for gauge {gauge_id!r}: {sorted(unknown)}.")

    values: dict[str, Any] = {}
    for key, value in raw.items():
        # TOML arrays come back as lists; the config stores tuples.
        if isinstance(value, list):
            value = tuple(value)
        if key in ("domain", "segments", "tick_values"):
            value = tuple(float(v) for v in value)
        values[key] = value
    return validate_config(GaugeConfig(gauge_id=gauge_id, **values))


def load_gauge_configs(path: Path = PRESETS_TOML_PATH) -> dict[str, GaugeConfig]:
    """Load named gauge configurations from a TOML file, one table per gauge."""
    raw: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    configs: dict[str, GaugeConfig] = {}
    for gauge_id, table in raw.items():
        if not isinstance(table, Mapping):
            raise GaugeConfigError(f"Expected a table for gauge {gauge_id!r}.")
        configs[gauge_id] = config_from_mapping(gauge_id, table)
    return configs
