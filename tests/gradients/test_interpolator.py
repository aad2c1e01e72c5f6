import numpy as np
import pytest

from chromagrad.gradients.interpolator import (
    KERNELS,
    basis_kernel,
    catmull_rom_kernel,
    control_points,
    interpolate,
    interpolate_linear_channel,
    segment_parameters,
)
from chromagrad.types import InterpolationMode

positions = np.array([0.0, 0.25, 0.75, 1.0])
values = np.array([
    [0.0, 1.0, 0.5],
    [1.0, 0.0, 0.5],
    [0.5, 0.5, 0.0],
    [0.0, 1.0, 1.0],
])


def test_segment_parameters():
    i, f = segment_parameters(positions, np.array([0.0, 0.125, 0.25, 0.5, 1.0, -1.0, 2.0]))
    assert list(i) == [0, 0, 1, 1, 2, 0, 2]
    assert np.allclose(f, [0.0, 0.5, 0.0, 0.5, 1.0, 0.0, 1.0])


def test_zero_length_segment_has_zero_parameter():
    i, f = segment_parameters(np.array([0.0, 0.5, 0.5, 1.0]), np.array([0.5]))
    assert i[0] == 2
    assert f[0] == 0.0

    i, f = segment_parameters(np.array([0.5, 0.5]), np.array([0.5]))
    assert i[0] == 0
    assert f[0] == 0.0


def test_control_points_repeat_end_stops():
    v0, v1, v2, v3 = control_points(values, np.array([0, 2]))
    assert np.array_equal(v0, values[[0, 1]])
    assert np.array_equal(v1, values[[0, 2]])
    assert np.array_equal(v2, values[[1, 3]])
    assert np.array_equal(v3, values[[2, 3]])


def test_control_points_reflect_end_stops():
    v0, v1, v2, v3 = control_points(values, np.array([0, 1, 2]), reflect_ends=True)
    assert np.allclose(v0[0], 2 * values[0] - values[1])
    assert np.array_equal(v0[1:], values[[0, 1]])
    assert np.array_equal(v3[:2], values[[2, 3]])
    assert np.allclose(v3[2], 2 * values[3] - values[2])


def test_basis_reaches_end_stops():
    result = interpolate(values, positions, np.array([0.0, 1.0]), InterpolationMode.BASIS)
    assert np.allclose(result, values[[0, -1]])


def test_basis_joins_segments_continuously():
    eps = 1e-9
    joins = positions[1:-1]
    left = interpolate(values, positions, joins - eps, InterpolationMode.BASIS)
    right = interpolate(values, positions, joins + eps, InterpolationMode.BASIS)
    assert np.allclose(left, right, atol=1e-6)


def test_linear_interpolation():
    result = interpolate(values, positions, np.array([0.125]), InterpolationMode.LINEAR)
    assert np.allclose(result, [[0.5, 0.5, 0.5]])


@pytest.mark.parametrize("mode", [InterpolationMode.LINEAR, InterpolationMode.CATMULL_ROM])
def test_interpolating_splines_pass_through_stops(mode):
    result = interpolate(values, positions, positions, mode)
    assert np.allclose(result, values)


def test_basis_does_not_pass_through_interior_stops():
    result = interpolate(values, positions, positions[1:2], InterpolationMode.BASIS)
    assert not np.allclose(result[0], values[1])


def test_basis_weights_sum_to_one():
    ones = np.ones((1, 1))
    for f in np.linspace(0.0, 1.0, 11):
        assert basis_kernel(ones, ones, ones, ones, np.array([[f]]))[0, 0] == pytest.approx(1.0)
        assert catmull_rom_kernel(ones, ones, ones, ones, np.array([[f]]))[0, 0] == pytest.approx(1.0)


def test_basis_endpoint_weights():
    v = [np.array([[x]]) for x in (0.0, 6.0, 12.0, 18.0)]
    # classical uniform B-spline: (1, 4, 1) / 6 at f=0
    assert basis_kernel(*v, np.array([[0.0]]))[0, 0] == pytest.approx(6.0)
    assert basis_kernel(*v, np.array([[1.0]]))[0, 0] == pytest.approx(12.0)


def test_spline_of_constant_values_is_constant():
    flat = np.full((4, 3), 0.3)
    t = np.linspace(-0.5, 1.5, 21)
    for mode in InterpolationMode:
        assert np.allclose(interpolate(flat, positions, t, mode), 0.3)


@pytest.mark.parametrize("mode", list(InterpolationMode))
def test_single_and_two_stops(mode):
    t = np.linspace(0.0, 1.0, 9)
    single = interpolate(values[:1], positions[:1], t, mode)
    assert single.shape == (9, 3)
    assert np.allclose(single, values[0])

    two = interpolate(values[:2], np.array([0.0, 1.0]), t, mode)
    assert two.shape == (9, 3)
    assert np.all(np.isfinite(two))


def test_mode_keyword_is_accepted():
    result = interpolate(values, positions, np.array([0.5]), "catmull-rom")
    assert result.shape == (1, 3)


def test_linear_channel():
    alpha = interpolate_linear_channel(np.array([1.0, 0.0]), np.array([0.0, 1.0]), np.array([0.25, 0.5]))
    assert np.allclose(alpha, [0.75, 0.5])
    assert np.allclose(interpolate_linear_channel(np.array([0.4]), np.array([0.5]), np.array([0.0, 1.0])), 0.4)


def test_every_mode_has_a_kernel():
    assert set(KERNELS) == set(InterpolationMode)
