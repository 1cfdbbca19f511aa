"""Needle rotation: map a data value onto the rendered sweep of the gauge."""

from __future__ import annotations

from gauge_layout.geometry.arcs import GaugeRange
from gauge_layout.geometry.domain import Domain


def linear_scale(
    value: float,
    domain: tuple[float, float],
    output_range: tuple[float, float],
) -> float:
    """Map `value` linearly from `domain` onto `output_range` without clamping.

    A zero-width domain maps every value to the start of the range.
    """
    d0, d1 = domain
    r0, r1 = output_range
    width: float = d1 - d0
    fraction: float = (value - d0) / width if width else 0.0
    return r0 + fraction * (r1 - r0)


def needle_rotation(data: float, domain: Domain, gauge_range: GaugeRange) -> float:
    """Return the needle rotation in degrees, pinned to the rendered sweep.

    The endpoints of the sweep may be in either order (reversed gauges), so
    the clamp uses the smaller and larger of the two rather than min/max.
    """
    low_deg: float = gauge_range.minimum.degrees
    high_deg: float = gauge_range.maximum.degrees
    rotation: float = linear_scale(
        float(data), (domain.minimum, domain.maximum), (low_deg, high_deg)
    )
    return max(min(low_deg, high_deg), min(rotation, max(low_deg, high_deg)))
