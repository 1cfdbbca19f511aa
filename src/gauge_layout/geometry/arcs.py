"""
Angular layout of spans into arcs, and the polar helpers shared by every stage.

Angles follow the pie-chart convention used by the renderers: 0 radians points
up (12 o'clock) and positive angles turn clockwise in screen coordinates, so
-90 degrees is 9 o'clock and 90 degrees is 3 o'clock.
"""

from __future__ import annotations

from dataclasses import dataclass
import math  # used for the degree/radian conversions and trig
from typing import Sequence

from gauge_layout.geometry.domain import Domain

TAU: float = 2.0 * math.pi  # One full turn; sweeps are clamped to this.


@dataclass(frozen=True)
class ArcDescriptor:
    """One laid-out arc of the gauge, angles in radians."""

    index: int  # Position of the span in the input order.
    data: float  # Span width this arc was built from.
    value: float  # Span width used for the layout (negatives count as 0).
    start_angle: float  # Angle where the arc begins.
    end_angle: float  # Angle where the arc ends (next arc starts here).
    pad_angle: float  # Padding folded into this arc's extent.


@dataclass(frozen=True)
class RangeEndpoint:
    """Value and angle (degrees) at one end of the rendered sweep."""

    value: float
    degrees: float


@dataclass(frozen=True)
class GaugeRange:
    """Actual angular extent of the rendered arcs."""

    minimum: RangeEndpoint
    maximum: RangeEndpoint


def layout_arcs(
    spans: Sequence[float],
    start_angle: float,
    end_angle: float,
    pad_angle: float = 0.0,
) -> list[ArcDescriptor]:
    """Lay out spans as consecutive arcs between two angles given in degrees.

    Each arc's share of the sweep is proportional to its span. Input order is
    kept, and the pad angle is folded into each arc so that consecutive arcs
    stay contiguous. When every span is zero the arcs collapse to zero width.
    """
    count: int = len(spans)
    start_rad: float = math.radians(start_angle)  # Degrees in, radians out.
    sweep: float = min(TAU, max(-TAU, math.radians(end_angle) - start_rad))
    pad: float = math.radians(pad_angle)
    if count:
        pad = min(abs(sweep) / count, pad)  # Never pad more than the sweep allows.
    signed_pad: float = -pad if sweep < 0.0 else pad  # Pad follows the sweep direction.

    total: float = sum(span for span in spans if span > 0.0)
    scale: float = (sweep - count * signed_pad) / total if total else 0.0

    arcs: list[ArcDescriptor] = []
    angle: float = start_rad
    for index, span in enumerate(spans):
        next_angle: float = angle + (span * scale if span > 0.0 else 0.0) + signed_pad
        arcs.append(
            ArcDescriptor(
                index=index,
                data=span,
                value=max(span, 0.0),
                start_angle=angle,
                end_angle=next_angle,
                pad_angle=pad,
            )
        )
        angle = next_angle
    return arcs


def gauge_range(arcs: Sequence[ArcDescriptor], domain: Domain) -> GaugeRange:
    """Return the rendered sweep from the first arc's start to the last arc's end."""
    if not arcs:
        raise ValueError("A gauge range needs at least one laid-out arc.")
    return GaugeRange(
        minimum=RangeEndpoint(
            value=domain.minimum, degrees=math.degrees(arcs[0].start_angle)
        ),
        maximum=RangeEndpoint(
            value=domain.maximum, degrees=math.degrees(arcs[-1].end_angle)
        ),
    )


def polar_to_cartesian(angle: float, radius: float) -> tuple[float, float]:
    """Return the gauge-centred point at `radius` along `angle` (radians)."""
    return radius * math.sin(angle), -radius * math.cos(angle)


def arc_centroid(
    start_angle: float,
    end_angle: float,
    inner_radius: float,
    outer_radius: float,
) -> tuple[float, float]:
    """Return the midpoint of an annular sector, halfway in angle and radius."""
    return polar_to_cartesian(
        (start_angle + end_angle) / 2.0, (inner_radius + outer_radius) / 2.0
    )
