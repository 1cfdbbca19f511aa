"""Unit tests for domain resolution."""

from __future__ import annotations

import pytest

from gauge_layout.geometry import Domain, resolve_domain


def test_resolve_domain_unions_all_inputs() -> None:
    """Domain should cover explicit bounds, segments and ticks together."""
    domain: Domain = resolve_domain((10.0, 66.0), [50.0, 80.0], [5.0])
    assert domain == Domain(minimum=5.0, maximum=80.0)


def test_resolve_domain_explicit_bounds_wider_than_values() -> None:
    """Explicit bounds outside the values should be kept as they are."""
    domain: Domain = resolve_domain((0.0, 100.0), [50.0], [])
    assert domain.minimum == pytest.approx(0.0)
    assert domain.maximum == pytest.approx(100.0)
    assert domain.width == pytest.approx(100.0)


def test_resolve_domain_single_positive_segment_anchors_min_at_zero() -> None:
    """A lone non-negative value should resolve to [0, value]."""
    domain: Domain = resolve_domain(None, [15.0], [])
    assert domain == Domain(minimum=0.0, maximum=15.0)


def test_resolve_domain_single_negative_value_anchors_max_at_zero() -> None:
    """A lone negative value should resolve to [value, 0]."""
    domain: Domain = resolve_domain(None, [], [-4.0, -4.0])
    assert domain == Domain(minimum=-4.0, maximum=0.0)


def test_resolve_domain_collapsed_explicit_domain() -> None:
    """An explicit zero-width domain is degenerate too and gets anchored."""
    domain: Domain = resolve_domain((7.0, 7.0), [], [])
    assert domain == Domain(minimum=0.0, maximum=7.0)


def test_resolve_domain_without_inputs_raises() -> None:
    """With nothing to go on the resolver refuses to guess."""
    with pytest.raises(ValueError):
        resolve_domain(None, [], [])
