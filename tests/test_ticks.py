"""Unit tests for tick placement and label angles."""

from __future__ import annotations

import math

import numpy as np
import pytest

from gauge_layout.geometry import (
    Domain,
    TickDescriptor,
    label_angle,
    place_ticks,
    tick_angles,
    tick_values_for_count,
)


def test_tick_values_for_count_excludes_endpoints() -> None:
    """Count mode yields interior values of count + 1 equal subdivisions."""
    values: list[float] = tick_values_for_count(Domain(0.0, 100.0), 4)
    assert values == pytest.approx([20.0, 40.0, 60.0, 80.0])


def test_tick_values_for_count_zero_and_negative() -> None:
    """Zero ticks is empty; a negative count is a programming error."""
    assert tick_values_for_count(Domain(0.0, 1.0), 0) == []
    with pytest.raises(ValueError):
        tick_values_for_count(Domain(0.0, 1.0), -1)


def test_tick_angles_default_values_are_evenly_spread() -> None:
    """Ticks 0..10 step 2 on a 0..10 domain spread across the half ring."""
    angles: list[float] = tick_angles(
        [0.0, 2.0, 4.0, 6.0, 8.0, 10.0],
        Domain(0.0, 10.0),
        start_angle=-90.0,
        end_angle=90.0,
    )
    degrees: list[float] = [math.degrees(a) for a in angles]
    assert degrees == pytest.approx([-90.0, -54.0, -18.0, 18.0, 54.0, 90.0])


def test_tick_angles_drop_the_closing_boundary() -> None:
    """A single mid-domain tick lands at its value, not at the sweep ends."""
    angles: list[float] = tick_angles(
        [50.0], Domain(0.0, 100.0), start_angle=-90.0, end_angle=90.0
    )
    assert len(angles) == 1
    assert angles[0] == pytest.approx(0.0)


def test_tick_angles_collapse_duplicates() -> None:
    """Repeated values share one position."""
    angles: list[float] = tick_angles(
        [5.0, 5.0, 10.0], Domain(0.0, 10.0), start_angle=-90.0, end_angle=90.0
    )
    assert [math.degrees(a) for a in angles] == pytest.approx([0.0, 90.0])


def test_count_ticks_are_evenly_spaced_on_the_ring() -> None:
    """Twenty count-based ticks should be equally far apart along the ring."""
    domain: Domain = Domain(0.0, 100.0)
    ticks: list[TickDescriptor] = place_ticks(
        tick_values_for_count(domain, 20),
        domain,
        start_angle=-90.0,
        end_angle=90.0,
        radius=170.0,
        label_padding=30.0,
    )
    assert len(ticks) == 20

    # Equal chord length between neighbouring anchors means equal spacing.
    anchors: np.ndarray = np.array([(tick.x, tick.y) for tick in ticks])
    chords: np.ndarray = np.linalg.norm(np.diff(anchors, axis=0), axis=1)
    assert np.allclose(chords, chords[0])


def test_place_ticks_anchor_label_and_text() -> None:
    """The top tick sits on the radius with its label further out."""
    ticks: list[TickDescriptor] = place_ticks(
        [50.0],
        Domain(0.0, 100.0),
        start_angle=-90.0,
        end_angle=90.0,
        radius=100.0,
        label_padding=30.0,
    )
    tick: TickDescriptor = ticks[0]
    assert (tick.x, tick.y) == pytest.approx((0.0, -100.0))
    # Label sits mid-way through the band [radius, radius + label_padding].
    assert (tick.label_x, tick.label_y) == pytest.approx((0.0, -115.0))
    assert tick.label_angle == pytest.approx(0.0)
    assert tick.text == "50"


def test_place_ticks_uses_tick_format() -> None:
    """Tick text comes from a list of labels or a formatting function."""
    common: dict = dict(start_angle=180.0, end_angle=0.0, radius=50.0, label_padding=10.0)
    labelled: list[TickDescriptor] = place_ticks(
        [0.0, 100.0], Domain(0.0, 100.0), tick_format=["Empty", "Full"], **common
    )
    assert [tick.text for tick in labelled] == ["Empty", "Full"]

    percent: list[TickDescriptor] = place_ticks(
        [0.0, 100.0], Domain(0.0, 100.0), tick_format=lambda v: f"{v:.0f}%", **common
    )
    assert [tick.text for tick in percent] == ["0%", "100%"]


def test_label_angle_keeps_upper_half_as_is() -> None:
    """Angles away from the vertical band pass through unchanged."""
    assert label_angle(0.0) == pytest.approx(0.0)
    assert label_angle(math.radians(45.0)) == pytest.approx(45.0)
    assert label_angle(math.radians(-60.0)) == pytest.approx(-60.0)


def test_label_angle_snaps_near_vertical_band() -> None:
    """Angles between 80 and 110 degrees (either side) snap to 0."""
    for degrees in (85.0, 100.0, -81.0, -109.0):
        assert label_angle(math.radians(degrees)) == pytest.approx(0.0)


def test_label_angle_exact_quarter_turn_flips() -> None:
    """Exactly +/-90 degrees takes the flip, not the snap."""
    assert label_angle(math.radians(90.0)) == pytest.approx(270.0)
    assert label_angle(math.radians(-90.0)) == pytest.approx(-270.0)


def test_label_angle_flips_lower_half() -> None:
    """Angles beyond the band are turned half a circle."""
    assert label_angle(math.radians(120.0)) == pytest.approx(300.0)
    assert label_angle(math.radians(-150.0)) == pytest.approx(-330.0)


def test_place_ticks_keeps_text_with_its_value_when_angles_collapse() -> None:
    """A tick dropped for sharing an angle takes its label with it."""
    common: dict = dict(start_angle=-90.0, end_angle=90.0, radius=100.0, label_padding=10.0)
    domain: Domain = Domain(0.0, 1e10)
    # 0 and 1 are less than 1e-9 rad apart on this domain; 100 is not.
    ticks: list[TickDescriptor] = place_ticks(
        [0.0, 1.0, 100.0], domain, tick_format=["zero", "one", "hundred"], **common
    )
    assert [tick.value for tick in ticks] == [0.0, 100.0]
    assert [tick.text for tick in ticks] == ["zero", "hundred"]
    assert [tick.index for tick in ticks] == [0, 1]
    angles: list[float] = tick_angles(
        [0.0, 1.0, 100.0], domain, start_angle=-90.0, end_angle=90.0
    )
    assert [tick.angle for tick in ticks] == angles
    assert ticks[1].angle == pytest.approx(-math.pi / 2 + math.pi * 1e-8, abs=1e-12)
