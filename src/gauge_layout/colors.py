"""Segment colour scales."""

from __future__ import annotations

from typing import Sequence

# Built-in colour scales, selectable by name.
COLOR_SCALES: dict[str, tuple[str, ...]] = {
    "grayscale": ("#cccccc", "#969696", "#636363", "#252525"),
    "qualitative": (
        "#334D5C",
        "#45B29D",
        "#EFC94C",
        "#E27A3F",
        "#DF5A49",
        "#4F7DA1",
        "#55DBC1",
        "#EFDA97",
        "#E2A37F",
        "#DF948A",
    ),
    "heatmap": ("#428517", "#77D200", "#D6D305", "#EC8E19", "#C92B05"),
    "warm": ("#940031", "#C43343", "#DC5429", "#FF821D", "#FFAF55"),
    "cool": ("#2746B9", "#0B69D4", "#2794DB", "#31BB76", "#60E83B"),
    "red": ("#FCAE91", "#FB6A4A", "#DE2D26", "#A50F15", "#750B0E"),
    "blue": ("#002C61", "#004B8F", "#006BC9", "#3795E5", "#65B4F4"),
    "green": ("#354722", "#466631", "#649146", "#8AB25C", "#A9C97E"),
}
COLOR_SCALES["greyscale"] = COLOR_SCALES["grayscale"]

DEFAULT_COLOR_SCALE: tuple[str, ...] = (
    "#75C776",
    "#39B6C5",
    "#78CCC4",
    "#62C3A4",
    "#64A8D1",
    "#8C95C8",
    "#3BAF74",
)


def get_color_scale(scale: str | Sequence[str]) -> tuple[str, ...]:
    """Return the colours for a scale name or an explicit list of colours."""
    if isinstance(scale, str):
        try:
            return COLOR_SCALES[scale]
        except KeyError:
            raise ValueError(
                f"Unknown colour scale {scale!r}; expected one of {sorted(COLOR_SCALES)}."
            ) from None
    colors: tuple[str, ...] = tuple(scale)
    if not colors:
        raise ValueError("A colour scale needs at least one colour.")
    return colors


def segment_fills(
    count: int,
    scale: str | Sequence[str],
    override: str | None = None,
) -> list[str]:
    """Assign a fill per segment, cycling through the scale.

    A single `override` fill wins over the scale for every segment.
    """
    if override:
        return [override] * count
    colors: tuple[str, ...] = get_color_scale(scale)
    return [colors[index % len(colors)] for index in range(count)]
