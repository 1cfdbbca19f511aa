"""
Domain resolution for gauges
i.e. finding the numeric [min, max] range that the angular sweep represents.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Domain:
    """Numeric value range mapped onto the gauge sweep."""

    minimum: float  # Value at the start of the sweep.
    maximum: float  # Value at the end of the sweep.

    @property
    def width(self) -> float:
        """Return the extent of the domain in value units."""
        return self.maximum - self.minimum


def resolve_domain(
    domain: Sequence[float] | None,
    segments: Iterable[float],
    tick_values: Iterable[float],
) -> Domain:
    """Resolve the domain from the union of explicit bounds, segments and ticks.

    When every input collapses to a single value the side closer to zero is
    anchored at zero, so a lone segment value of 15 gives [0, 15] and a lone
    value of -4 gives [-4, 0].
    """
    union: list[float] = [float(v) for v in tick_values]  # Start with the ticks.
    union.extend(float(v) for v in segments)  # Segment boundaries also count.
    if domain is not None:
        union.extend(float(v) for v in domain)  # Explicit bounds widen the union.
    if not union:
        raise ValueError(
            "Cannot resolve a domain without a domain, segments or tick values."
        )  # The caller owns the default for a fully empty gauge.

    minimum: float = min(union)
    maximum: float = max(union)
    if minimum == maximum:  # Degenerate: anchor the side nearest to zero.
        if minimum >= 0.0:
            minimum = 0.0
        else:
            maximum = 0.0
    return Domain(minimum=minimum, maximum=maximum)
