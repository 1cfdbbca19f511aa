"""Convert boundary values into consecutive span widths ("chart divisions")."""

from __future__ import annotations

from typing import Iterable

from gauge_layout.geometry.domain import Domain


def chart_divisions(
    values: Iterable[float],
    domain: Domain,
    *,
    is_ticks: bool = False,
) -> list[float]:
    """Return span widths covering the domain once, in ascending boundary order.

    The first span is measured from the domain minimum and a trailing span is
    appended when the domain maximum lies beyond the last boundary. With no
    boundaries, ticks get no spans while segments get one full-domain span.
    """
    ordered: list[float] = sorted(float(v) for v in values)
    if not ordered:
        return [] if is_ticks else [domain.width]

    spans: list[float] = [ordered[0] - domain.minimum]
    spans.extend(current - previous for previous, current in zip(ordered, ordered[1:]))
    if domain.maximum > ordered[-1]:
        # Close the sweep so the spans always reach the domain maximum.
        spans.append(domain.maximum - ordered[-1])
    return spans
