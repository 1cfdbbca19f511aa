"""Drawing radius and centring offsets from the chart size and padding."""

from __future__ import annotations

from dataclasses import dataclass, replace

from gauge_layout.config import Padding


@dataclass(frozen=True)
class RadiusLayout:
    """Resolved radius plus the padding and offsets that centre the gauge."""

    radius: float
    padding: Padding  # Adjusted copy; the configured padding is left as is.
    x_offset: float  # Gauge centre in chart coordinates.
    y_offset: float


def resolve_radius(
    width: float,
    height: float,
    outer_radius: float,
    padding: Padding,
) -> RadiusLayout:
    """Return the usable radius, growing the left padding for small gauges.

    A gauge configured smaller than the available area is shifted right by
    the unused radius.
    """
    # Padding larger than the chart leaves no room rather than a negative radius.
    max_radius: float = max(
        0.0,
        min(
            width - padding.left - padding.right,
            height - padding.top - padding.bottom,
        )
        / 2.0,
    )
    adjusted: Padding = padding
    if outer_radius < max_radius:
        adjusted = replace(padding, left=padding.left + (max_radius - outer_radius))
    radius: float = min(outer_radius, max_radius)
    return RadiusLayout(
        radius=radius,
        padding=adjusted,
        x_offset=radius + adjusted.left,
        y_offset=radius + adjusted.top,
    )
