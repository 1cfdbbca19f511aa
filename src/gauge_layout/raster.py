"""Raster preview of gauge primitives with OpenCV.

Draws the primitives produced by `gauge_layout.render` onto a BGR image of
the configured chart size. Text is drawn horizontally; OpenCV has no rotated
text, so label angles are ignored here.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Sequence

import cv2
import numpy as np

from gauge_layout.layout import GaugeLayout
from gauge_layout.render import (
    LineShape,
    PolygonShape,
    Primitive,
    SectorShape,
    TextShape,
)

logger = logging.getLogger(__name__)

NAMED_COLORS: dict[str, tuple[int, int, int]] = {  # BGR
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (0, 0, 255),
    "green": (0, 128, 0),
    "blue": (255, 0, 0),
    "transparent": (255, 255, 255),
}
ARC_STEP_RAD: float = math.radians(1.0)  # Angular resolution of sector outlines.
FONT = cv2.FONT_HERSHEY_SIMPLEX
FONT_PIXELS: float = 22.0  # Pixel height of HERSHEY_SIMPLEX at scale 1.0.


def to_bgr(color: str) -> tuple[int, int, int]:
    """Convert '#RRGGBB', '#RGB' or a basic colour name to a BGR tuple."""
    if color in NAMED_COLORS:
        return NAMED_COLORS[color]
    hex_digits: str = color.lstrip("#")
    if len(hex_digits) == 3:
        hex_digits = "".join(ch * 2 for ch in hex_digits)
    if len(hex_digits) != 6:
        raise ValueError(f"Unsupported colour {color!r}.")
    red, green, blue = (int(hex_digits[i : i + 2], 16) for i in (0, 2, 4))
    return blue, green, red


def sector_outline(shape: SectorShape, center: tuple[float, float]) -> np.ndarray:
    """Return the sector outline as an (N, 2) int32 array in image pixels."""
    start: float = shape.start_angle
    end: float = shape.end_angle
    # Split the pad between both sides of the sector when there is room.
    if abs(end - start) > shape.pad_angle:
        half_pad: float = math.copysign(shape.pad_angle / 2.0, end - start)
        start, end = start + half_pad, end - half_pad
    steps: int = max(2, int(abs(end - start) / ARC_STEP_RAD) + 1)
    angles: np.ndarray = np.linspace(start, end, steps)

    outer: np.ndarray = np.stack(
        [np.sin(angles) * shape.outer_radius, -np.cos(angles) * shape.outer_radius],
        axis=1,
    )
    inner: np.ndarray = np.stack(
        [np.sin(angles) * shape.inner_radius, -np.cos(angles) * shape.inner_radius],
        axis=1,
    )[::-1]
    outline: np.ndarray = np.concatenate([outer, inner]) + np.asarray(center)
    return np.round(outline).astype(np.int32)


def _pixel(point: tuple[float, float], center: tuple[float, float]) -> tuple[int, int]:
    return int(round(point[0] + center[0])), int(round(point[1] + center[1]))


def draw_primitive(
    image: np.ndarray,
    primitive: Primitive,
    center: tuple[float, float],
) -> None:
    """Draw one primitive onto `image` in place."""
    if isinstance(primitive, SectorShape):
        outline: np.ndarray = sector_outline(primitive, center)
        cv2.fillPoly(image, [outline], to_bgr(primitive.fill), lineType=cv2.LINE_AA)
        if primitive.stroke_width > 0:
            thickness: int = max(1, int(round(primitive.stroke_width)))
            cv2.polylines(
                image, [outline], True, to_bgr(primitive.stroke), thickness, cv2.LINE_AA
            )
    elif isinstance(primitive, LineShape):
        cv2.line(
            image,
            _pixel(primitive.start, center),
            _pixel(primitive.end, center),
            to_bgr(primitive.stroke),
            max(1, int(round(primitive.stroke_width))),
            cv2.LINE_AA,
        )
    elif isinstance(primitive, PolygonShape):
        points: np.ndarray = np.round(
            np.asarray(primitive.points) + np.asarray(center)
        ).astype(np.int32)
        cv2.fillPoly(image, [points], to_bgr(primitive.fill), lineType=cv2.LINE_AA)
        cv2.polylines(image, [points], True, to_bgr(primitive.stroke), 1, cv2.LINE_AA)
    elif isinstance(primitive, TextShape):
        scale: float = primitive.font_size / FONT_PIXELS
        (text_w, text_h), _ = cv2.getTextSize(primitive.text, FONT, scale, 1)
        x, y = _pixel(primitive.position, center)
        if primitive.text_anchor == "middle":
            x -= text_w // 2
        elif primitive.text_anchor == "end":
            x -= text_w
        cv2.putText(
            image,
            primitive.text,
            (x, y + text_h // 2),
            FONT,
            scale,
            to_bgr(primitive.fill),
            1,
            cv2.LINE_AA,
        )
    else:
        raise TypeError(f"Cannot rasterize {type(primitive).__name__}.")


def rasterize(
    layout: GaugeLayout,
    primitives: Sequence[Primitive],
    *,
    background: str = "white",
) -> np.ndarray:
    """Draw `primitives` onto a new (height, width, 3) uint8 BGR image."""
    width: int = max(1, int(round(layout.config.width)))
    height: int = max(1, int(round(layout.config.height)))
    image: np.ndarray = np.empty((height, width, 3), dtype=np.uint8)
    image[:] = to_bgr(background)

    # Primitives are gauge-centred; the centre sits at the resolved offsets.
    center: tuple[float, float] = (layout.radius.x_offset, layout.radius.y_offset)
    for primitive in primitives:
        draw_primitive(image, primitive, center)
    return image


def write_png(path: Path, image: np.ndarray) -> Path:
    """Write `image` as PNG, creating parent folders."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if not cv2.imwrite(str(path), image):
        raise OSError(f"OpenCV could not write {path}.")
    logger.info("Wrote gauge preview to %s", path)
    return path
