import numpy as np
import pytest

from chromagrad.colors import Color
from chromagrad.gradients import Gradient
from chromagrad.gradients.sampler import even_positions, remap, sample_swatch, swatch_positions

RED = Color(1.0, 0.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)


@pytest.fixture
def red_blue():
    return Gradient([(0.0, RED), (1.0, BLUE)], blend_mode="rgb", interpolation="linear")


def test_even_positions():
    assert list(even_positions((0.0, 1.0), 3)) == pytest.approx([0.0, 0.5, 1.0])
    assert list(even_positions((-1.0, 1.0), 5)) == pytest.approx([-1.0, -0.5, 0.0, 0.5, 1.0])


def test_even_positions_small_counts():
    assert even_positions((0.0, 1.0), 0).size == 0
    assert list(even_positions((2.0, 4.0), 1)) == [3.0]
    with pytest.raises(ValueError):
        even_positions((0.0, 1.0), -1)


def test_sample_n_count_and_order(red_blue):
    for n in (0, 1, 2, 7, 64):
        colors = red_blue.sample_n(n)
        assert len(colors) == n
        blues = [c.b for c in colors]
        assert blues == sorted(blues)


def test_sample_n_three(red_blue):
    first, middle, last = red_blue.sample_n(3)
    assert first == RED
    assert middle.to_array() == pytest.approx((0.5, 0.0, 0.5, 1.0))
    assert last == BLUE


def test_sample_n_single_is_midpoint(red_blue):
    (only,) = red_blue.sample_n(1)
    assert only == red_blue.sample(0.5)


def test_sample_many_preserves_order(red_blue):
    positions = [0.9, 0.1, 0.5, 0.1]
    colors = red_blue.sample_many(positions)
    assert colors == [red_blue.sample(t) for t in positions]
    assert red_blue.sample_many([]) == []


def test_remap():
    assert remap(5.0, 0.0, 10.0, 0.0, 1.0) == 0.5
    assert remap(0.0, 0.0, 4.0, 10.0, 20.0) == 10.0
    assert np.allclose(remap(np.arange(4.0), 0.0, 4.0, 0.0, 1.0), [0.0, 0.25, 0.5, 0.75])


def test_swatch_positions():
    assert np.allclose(swatch_positions((0.0, 1.0), 4), [0.0, 0.25, 0.5, 0.75])
    assert swatch_positions((0.0, 1.0), 0).size == 0


def test_sample_swatch(red_blue):
    colors = sample_swatch(red_blue, 4)
    assert len(colors) == 4
    assert colors[0] == RED
    assert colors[2].to_array() == pytest.approx((0.5, 0.0, 0.5, 1.0))
