import math

import numpy as np
import pytest

from chromagrad.colors import Color
from chromagrad.errors import EmptyStopsError, InvalidDomainError
from chromagrad.gradients.stops import (
    ColorStop,
    StopList,
    evenly_spaced_positions,
    monotonic_positions,
    validate_domain,
)

RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)


def test_empty_stop_list():
    with pytest.raises(EmptyStopsError):
        StopList([])


def test_stops_are_sorted_stably():
    stops = StopList([(1.0, BLUE), (0.5, RED), (0.0, GREEN), (0.5, BLUE)])
    assert list(stops.positions) == [0.0, 0.5, 0.5, 1.0]
    # the two stops at 0.5 keep their input order
    assert stops[1].color == RED
    assert stops[2].color == BLUE


def test_arrays_are_read_only():
    stops = StopList([(0.0, RED), (1.0, BLUE)])
    with pytest.raises(ValueError):
        stops.positions[0] = 0.5
    with pytest.raises(ValueError):
        stops.colors[0, 0] = 0.5


def test_colors_array_shape():
    stops = StopList([(0.0, (1.0, 0.0, 0.0)), (1.0, (0.0, 0.0, 1.0, 0.5))])
    assert stops.colors.shape == (2, 4)
    assert np.array_equal(stops.colors[1], (0.0, 0.0, 1.0, 0.5))


def test_find_segment():
    stops = StopList([(0.0, RED), (0.5, GREEN), (1.0, BLUE)])
    assert stops.find_segment(-1.0) == 0
    assert stops.find_segment(0.0) == 0
    assert stops.find_segment(0.25) == 0
    assert stops.find_segment(0.5) == 1
    assert stops.find_segment(0.75) == 1
    assert stops.find_segment(1.0) == 2
    assert stops.find_segment(3.0) == 2


def test_find_segment_rightmost_duplicate():
    stops = StopList([(0.0, RED), (0.5, GREEN), (0.5, BLUE), (1.0, RED)])
    assert stops.find_segment(0.5) == 2


def test_np_find_segments_matches_scalar():
    stops = StopList([(0.0, RED), (0.3, GREEN), (0.3, BLUE), (1.0, RED)])
    queries = np.array([-0.5, 0.0, 0.2, 0.3, 0.31, 0.99, 1.0, 2.0])
    expected = [stops.find_segment(t) for t in queries]
    assert list(stops.np_find_segments(queries)) == expected


def test_clamped_to_domain():
    stops = StopList([(-1.0, RED), (0.5, GREEN), (2.0, BLUE)])
    clamped = stops.clamped_to((0.0, 1.0))
    assert list(clamped.positions) == [0.0, 0.5, 1.0]
    assert clamped[0].color == RED


def test_clamped_to_returns_self_when_inside():
    stops = StopList([(0.0, RED), (1.0, BLUE)])
    assert stops.clamped_to((0.0, 1.0)) is stops


def test_non_finite_position():
    with pytest.raises(InvalidDomainError):
        ColorStop.coerce((math.nan, RED))
    with pytest.raises(InvalidDomainError):
        StopList([(0.0, RED), (math.inf, BLUE)])


@pytest.mark.parametrize("domain", [(1.0, 1.0), (1.0, 0.0), (0.0, math.inf), (0.0,), "ab"])
def test_invalid_domain(domain):
    with pytest.raises(InvalidDomainError):
        validate_domain(domain)


def test_validate_domain_returns_floats():
    assert validate_domain([0, 2]) == (0.0, 2.0)


def test_evenly_spaced_positions():
    assert evenly_spaced_positions(3, (0.0, 1.0)) == [0.0, 0.5, 1.0]
    assert evenly_spaced_positions(5, (10.0, 20.0)) == [10.0, 12.5, 15.0, 17.5, 20.0]
    assert evenly_spaced_positions(1, (0.0, 1.0)) == [0.0]


def test_monotonic_positions():
    assert monotonic_positions([0.0, 0.5, 0.2, 1.0]) == [0.0, 0.5, 0.5, 1.0]
