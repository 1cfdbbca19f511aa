"""
Tick placement: tick values to angles, anchor points and upright label angles.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable, Sequence

import numpy as np

from gauge_layout.accessors import TickFormat, format_tick
from gauge_layout.geometry.arcs import arc_centroid, layout_arcs, polar_to_cartesian
from gauge_layout.geometry.divisions import chart_divisions
from gauge_layout.geometry.domain import Domain

# Label angles whose magnitude falls strictly inside this band (degrees) are
# snapped to 0 so the text stays upright; exactly +/-90 is left to the flip.
LABEL_SNAP_MIN_DEG: float = 80.0
LABEL_SNAP_MAX_DEG: float = 110.0
ANGLE_TOLERANCE: float = 1e-9  # Radians/degrees closer than this are the same angle.


@dataclass(frozen=True)
class TickDescriptor:
    """Placed tick: angle, anchor on the ring, label anchor and text."""

    index: int  # Tick order along the sweep.
    value: float  # Domain value the tick marks.
    angle: float  # Tick angle in radians.
    x: float  # Anchor on the gauge radius (gauge-centred coordinates).
    y: float
    label_x: float  # Label anchor outside the ring.
    label_y: float
    label_angle: float  # Text rotation in degrees, normalized to read upright.
    text: str  # Display text after tick formatting.


def tick_values_for_count(domain: Domain, count: int) -> list[float]:
    """Return `count` evenly spaced interior values (domain endpoints excluded)."""
    if count < 0:
        raise ValueError(f"tick count must be >= 0, got {count}.")
    # count + 1 equal subdivisions have count + 2 edges; drop both endpoints.
    edges: np.ndarray = np.linspace(domain.minimum, domain.maximum, count + 2)
    return [float(v) for v in edges[1:-1]]


def _tick_positions(
    values: Sequence[float],
    domain: Domain,
    start_angle: float,
    end_angle: float,
    pad_angle: float,
) -> list[tuple[int, float, float]]:
    """Return (index, value, angle) for sorted `values`, one per ring position.

    `index` is the position of the value in sorted order. A value whose angle
    lands on the previous kept angle is dropped together with its index.
    """
    spans: list[float] = chart_divisions(values, domain, is_ticks=True)
    arcs = layout_arcs(spans, start_angle, end_angle, pad_angle)
    positions: list[tuple[int, float, float]] = []
    for index, (value, arc) in enumerate(zip(values, arcs)):
        previous: float | None = positions[-1][2] if positions else None
        if previous is not None and math.isclose(
            previous, arc.end_angle, abs_tol=ANGLE_TOLERANCE
        ):
            continue
        positions.append((index, value, arc.end_angle))
    return positions


def tick_angles(
    values: Iterable[float],
    domain: Domain,
    *,
    start_angle: float,
    end_angle: float,
    pad_angle: float = 0.0,
) -> list[float]:
    """Return one angle (radians) per distinct tick value, in sweep order.

    Ticks are divided and laid out like segments. Each tick sits where its
    span ends; the span appended to close the sweep at the domain maximum is
    not a tick, so its boundary is dropped.
    """
    ordered: list[float] = sorted(float(v) for v in values)
    positions = _tick_positions(ordered, domain, start_angle, end_angle, pad_angle)
    return [angle for _, _, angle in positions]


def label_angle(angle: float) -> float:
    """Return the label rotation in degrees for a tick at `angle` radians.

    Near-vertical labels are snapped to 0 degrees; labels on the lower half of
    the circle are turned by 180 degrees so the text never reads upside down.
    """
    degrees: float = math.degrees(angle)
    magnitude: float = abs(degrees)
    on_axis: bool = math.isclose(magnitude, 90.0, abs_tol=ANGLE_TOLERANCE)
    if LABEL_SNAP_MIN_DEG < magnitude < LABEL_SNAP_MAX_DEG and not on_axis:
        return 0.0
    if degrees >= 90.0 or (on_axis and degrees > 0.0):
        return degrees + 180.0
    if degrees <= -90.0 or on_axis:
        return degrees - 180.0
    return degrees


def place_ticks(
    values: Sequence[float],
    domain: Domain,
    *,
    start_angle: float,
    end_angle: float,
    radius: float,
    label_padding: float,
    pad_angle: float = 0.0,
    tick_format: TickFormat = None,
) -> list[TickDescriptor]:
    """Place ticks on the ring and compute their labels.

    The anchor sits on `radius`; the label sits at the centroid of the band
    between `radius` and `radius + label_padding` along the same angle.
    """
    distinct: list[float] = sorted(set(float(v) for v in values))
    positions = _tick_positions(distinct, domain, start_angle, end_angle, pad_angle)
    ticks: list[TickDescriptor] = []
    # A list tick_format is indexed by the sorted distinct values.
    for index, (value_index, value, angle) in enumerate(positions):
        x, y = polar_to_cartesian(angle, radius)
        label_x, label_y = arc_centroid(angle, angle, radius, radius + label_padding)
        ticks.append(
            TickDescriptor(
                index=index,
                value=value,
                angle=angle,
                x=x,
                y=y,
                label_x=label_x,
                label_y=label_y,
                label_angle=label_angle(angle),
                text=format_tick(value, value_index, tick_format),
            )
        )
    return ticks
