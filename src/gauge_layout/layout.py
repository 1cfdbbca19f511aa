"""
Gauge layout pipeline: one configuration in, one complete geometry snapshot out.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from gauge_layout.accessors import resolve_data_value
from gauge_layout.colors import segment_fills
from gauge_layout.config import GaugeConfig, validate_config
from gauge_layout.geometry import (
    ArcDescriptor,
    Domain,
    GaugeRange,
    RadiusLayout,
    TickDescriptor,
    chart_divisions,
    gauge_range,
    layout_arcs,
    needle_rotation,
    place_ticks,
    resolve_domain,
    resolve_radius,
    tick_values_for_count,
)

logger = logging.getLogger(__name__)

# Domain used when a gauge has no domain, segments or ticks at all: one
# segment spanning the whole sweep.
DEFAULT_DOMAIN: tuple[float, float] = (0.0, 1.0)


@dataclass(frozen=True)
class GaugeLayout:
    """Everything a renderer needs to draw one gauge."""

    config: GaugeConfig
    domain: Domain
    radius: RadiusLayout
    inner_radius: float
    segment_spans: list[float]
    segments: list[ArcDescriptor]
    segment_fills: list[str]
    gauge_range: GaugeRange
    ticks: list[TickDescriptor]
    tick_length: float
    data_value: float
    needle_rotation: float  # Degrees, applied as the needle transform.
    needle_length: float


def _domain_for(config: GaugeConfig) -> Domain:
    """Resolve the domain from the inputs that exist before ticks are generated."""
    # Count-based ticks are derived from the domain, so they cannot widen it.
    tick_inputs: tuple[float, ...] = config.tick_values if config.tick_count is None else ()
    domain_input = config.domain
    if domain_input is None and not config.segments and not tick_inputs:
        domain_input = DEFAULT_DOMAIN
    return resolve_domain(domain_input, config.segments, tick_inputs)


def compute_gauge_layout(config: GaugeConfig) -> GaugeLayout:
    """Validate `config` and compute the full gauge geometry."""
    validate_config(config)

    radius: RadiusLayout = resolve_radius(
        config.width,
        config.height,
        config.outer_radius,
        config.resolved_padding,
    )
    domain: Domain = _domain_for(config)
    logger.debug(
        "Gauge %s: domain=[%s, %s] radius=%s",
        config.gauge_id,
        domain.minimum,
        domain.maximum,
        radius.radius,
    )

    spans: list[float] = chart_divisions(config.segments, domain, is_ticks=False)
    arcs: list[ArcDescriptor] = layout_arcs(
        spans, config.start_angle, config.end_angle, config.pad_angle
    )
    sweep: GaugeRange = gauge_range(arcs, domain)

    tick_values: list[float] = (
        tick_values_for_count(domain, config.tick_count)
        if config.tick_count is not None
        else list(config.tick_values)
    )
    ticks: list[TickDescriptor] = place_ticks(
        tick_values,
        domain,
        start_angle=config.start_angle,
        end_angle=config.end_angle,
        pad_angle=config.pad_angle,
        radius=radius.radius,
        label_padding=config.label_padding,
        tick_format=config.tick_format,
    )

    data_value: float = resolve_data_value(config.data, config.data_accessor)
    rotation: float = needle_rotation(data_value, domain, sweep)
    if not sweep.minimum.value <= data_value <= sweep.maximum.value:
        logger.debug(
            "Gauge %s: data %s outside domain, needle pinned at %s degrees",
            config.gauge_id,
            data_value,
            rotation,
        )
    logger.debug(
        "Gauge %s: %d segments, %d ticks, needle %.3f degrees",
        config.gauge_id,
        len(arcs),
        len(ticks),
        rotation,
    )

    return GaugeLayout(
        config=config,
        domain=domain,
        radius=radius,
        inner_radius=min(config.inner_radius, radius.radius),
        segment_spans=spans,
        segments=arcs,
        segment_fills=segment_fills(len(arcs), config.color_scale, config.segment_fill),
        gauge_range=sweep,
        ticks=ticks,
        tick_length=config.tick_length,
        data_value=data_value,
        needle_rotation=rotation,
        needle_length=radius.radius,
    )
