"""
Renderer capability interfaces.

The geometry pipeline never draws anything. A renderer turns one piece of
computed geometry into drawable primitives in gauge-centred coordinates
(origin at the gauge centre, y pointing down). The defaults reproduce the
standard gauge look; any of them can be swapped through `Renderers`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import math
from typing import Protocol, Union

from gauge_layout.geometry import ArcDescriptor, TickDescriptor
from gauge_layout.layout import GaugeLayout

Point = tuple[float, float]


@dataclass(frozen=True)
class SectorShape:
    """Filled annular sector (angles in radians, pie convention)."""

    start_angle: float
    end_angle: float
    inner_radius: float
    outer_radius: float
    pad_angle: float
    fill: str
    stroke: str = "white"
    stroke_width: float = 1.0


@dataclass(frozen=True)
class LineShape:
    """Straight stroke between two points."""

    start: Point
    end: Point
    stroke: str = "black"
    stroke_width: float = 1.0


@dataclass(frozen=True)
class TextShape:
    """Text anchored at a point, rotated by `angle` degrees."""

    position: Point
    text: str
    angle: float = 0.0
    fill: str = "black"
    font_size: float = 10.0
    text_anchor: str = "middle"


@dataclass(frozen=True)
class PolygonShape:
    """Closed filled outline."""

    points: tuple[Point, ...]
    fill: str = "red"
    stroke: str = "black"
    stroke_width: float = 0.5


Primitive = Union[SectorShape, LineShape, TextShape, PolygonShape]


class SegmentRenderer(Protocol):
    def __call__(self, arc: ArcDescriptor, fill: str, layout: GaugeLayout) -> list[Primitive]: ...


class TickRenderer(Protocol):
    def __call__(self, tick: TickDescriptor, layout: GaugeLayout) -> list[Primitive]: ...


class LabelRenderer(Protocol):
    def __call__(self, tick: TickDescriptor, layout: GaugeLayout) -> list[Primitive]: ...


class NeedleRenderer(Protocol):
    def __call__(self, rotation: float, length: float, layout: GaugeLayout) -> list[Primitive]: ...


def rotate_point(point: Point, degrees: float, origin: Point = (0.0, 0.0)) -> Point:
    """Rotate `point` clockwise (screen coordinates) around `origin`."""
    theta: float = math.radians(degrees)
    dx: float = point[0] - origin[0]
    dy: float = point[1] - origin[1]
    return (
        origin[0] + dx * math.cos(theta) - dy * math.sin(theta),
        origin[1] + dx * math.sin(theta) + dy * math.cos(theta),
    )


def default_segment(arc: ArcDescriptor, fill: str, layout: GaugeLayout) -> list[Primitive]:
    """One sector per arc between the inner radius and the gauge radius."""
    return [
        SectorShape(
            start_angle=arc.start_angle,
            end_angle=arc.end_angle,
            inner_radius=layout.inner_radius,
            outer_radius=layout.radius.radius,
            pad_angle=arc.pad_angle,
            fill=fill,
        )
    ]


def default_tick(tick: TickDescriptor, layout: GaugeLayout) -> list[Primitive]:
    """A radial mark of `tick_length` pointing outwards from the anchor."""
    anchor: Point = (tick.x, tick.y)
    # Drawn upright from the anchor, then turned by the tick angle.
    upright_end: Point = (tick.x, tick.y - layout.tick_length)
    end: Point = rotate_point(upright_end, math.degrees(tick.angle), anchor)
    return [LineShape(start=anchor, end=end)]


def default_label(tick: TickDescriptor, layout: GaugeLayout) -> list[Primitive]:
    """Tick text at the label anchor, kept upright."""
    if not tick.text:
        return []
    return [
        TextShape(
            position=(tick.label_x, tick.label_y),
            text=tick.text,
            angle=tick.label_angle,
        )
    ]


# Pointer outline before rotation: tail at (0, 5), tip straight up at -length.
def needle_outline(length: float) -> tuple[Point, ...]:
    return ((0.0, 5.0), (-6.0, 0.0), (0.0, -length), (6.0, 0.0))


def default_needle(rotation: float, length: float, layout: GaugeLayout) -> list[Primitive]:
    """The pointer outline rotated by the needle rotation."""
    points: tuple[Point, ...] = tuple(
        rotate_point(point, rotation) for point in needle_outline(length)
    )
    return [PolygonShape(points=points)]


@dataclass(frozen=True)
class Renderers:
    """The renderer used for each part of the gauge."""

    segment: SegmentRenderer = field(default=default_segment)
    tick: TickRenderer = field(default=default_tick)
    label: LabelRenderer = field(default=default_label)
    needle: NeedleRenderer = field(default=default_needle)

    def override(self, **renderers: object) -> Renderers:
        """Return a copy with some renderers replaced."""
        return replace(self, **renderers)


def build_primitives(layout: GaugeLayout, renderers: Renderers | None = None) -> list[Primitive]:
    """Return all primitives in paint order: segments, ticks, labels, needle."""
    parts: Renderers = renderers or Renderers()
    primitives: list[Primitive] = []
    for arc, fill in zip(layout.segments, layout.segment_fills):
        primitives.extend(parts.segment(arc, fill, layout))
    for tick in layout.ticks:
        primitives.extend(parts.tick(tick, layout))
    for tick in layout.ticks:
        primitives.extend(parts.label(tick, layout))
    primitives.extend(parts.needle(layout.needle_rotation, layout.needle_length, layout))
    return primitives
