"""Gauge geometry public API."""

# Re-export the pipeline stages so imports stay clean.

from .arcs import (  # Angular layout and polar helpers.
    ArcDescriptor,
    GaugeRange,
    RangeEndpoint,
    arc_centroid,
    gauge_range,
    layout_arcs,
    polar_to_cartesian,
)
from .divisions import chart_divisions  # Boundary values to spans.
from .domain import Domain, resolve_domain  # Domain inference.
from .needle import linear_scale, needle_rotation  # Needle angle.
from .radius import RadiusLayout, resolve_radius  # Radius and centring.
from .ticks import (  # Tick angles, anchors and labels.
    TickDescriptor,
    label_angle,
    place_ticks,
    tick_angles,
    tick_values_for_count,
)

__all__ = [  # Define the public symbols for this package.
    "ArcDescriptor",
    "Domain",
    "GaugeRange",
    "RadiusLayout",
    "RangeEndpoint",
    "TickDescriptor",
    "arc_centroid",
    "chart_divisions",
    "gauge_range",
    "label_angle",
    "layout_arcs",
    "linear_scale",
    "needle_rotation",
    "place_ticks",
    "polar_to_cartesian",
    "resolve_domain",
    "resolve_radius",
    "tick_angles",
    "tick_values_for_count",
]
