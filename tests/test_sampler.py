import math
import random

import pytest

from pi_estimation import (
    InvalidArgumentError,
    QuarterCircleSampler,
    estimate_pi,
    is_inside,
)


@pytest.mark.parametrize("n", [1, 2, 17, 1000])
def test_coordinate_lists_have_length_n(n):
    r = estimate_pi(n, seed=1)
    assert r.samples == n
    assert len(r.xs) == n
    assert len(r.ys) == n


def test_coordinates_in_unit_square():
    r = estimate_pi(5000, seed=7)
    assert all(0.0 <= x < 1.0 for x in r.xs)
    assert all(0.0 <= y < 1.0 for y in r.ys)


def test_estimate_is_exactly_four_k_over_n():
    n = 4321
    r = estimate_pi(n, seed=3)
    k = sum(1 for x, y in zip(r.xs, r.ys) if x * x + y * y <= 1.0)
    assert r.inside == k
    assert 0 <= k <= n
    assert r.estimate == 4 * k / n
    assert r.inside_mask().count(True) == k


@pytest.mark.parametrize("seed", range(20))
def test_estimate_bounds(seed):
    r = estimate_pi(3, seed=seed)
    assert 0.0 <= r.estimate <= 4.0


@pytest.mark.parametrize("bad", [0, -1, -1000])
def test_non_positive_samples_rejected(bad):
    with pytest.raises(InvalidArgumentError):
        estimate_pi(bad)


@pytest.mark.parametrize("bad", [1.5, 10.0, "10", None, True])
def test_non_integer_samples_rejected(bad):
    with pytest.raises(InvalidArgumentError):
        estimate_pi(bad)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        estimate_pi(0)


def test_invalid_seed_rejected():
    with pytest.raises(InvalidArgumentError):
        QuarterCircleSampler(seed="abc")


def test_same_seed_is_deterministic():
    a = estimate_pi(2000, seed=42)
    b = estimate_pi(2000, seed=42)
    assert a == b


def test_different_seeds_differ():
    a = estimate_pi(2000, seed=1)
    b = estimate_pi(2000, seed=2)
    assert a.xs != b.xs


def test_draw_order_is_x_then_y():
    r = estimate_pi(3, seed=99)
    rng = random.Random(99)
    expected = [rng.random() for _ in range(6)]
    assert r.xs == expected[0::2]
    assert r.ys == expected[1::2]


def test_explicit_rng_is_consumed():
    rng = random.Random(5)
    first = estimate_pi(10, rng=rng)
    second = estimate_pi(10, rng=rng)
    assert first.xs != second.xs

    ref = QuarterCircleSampler(seed=5)
    assert ref.sample(10) == first
    assert ref.sample(10) == second


def test_count_inside_matches_sample():
    a = QuarterCircleSampler(seed=11).sample(5000)
    b = QuarterCircleSampler(seed=11).count_inside(5000)
    assert a.inside == b


def test_count_inside_rejects_zero():
    with pytest.raises(InvalidArgumentError):
        QuarterCircleSampler(seed=1).count_inside(0)


def test_large_run_close_to_pi():
    r = estimate_pi(1_000_000, seed=12345)
    assert abs(r.estimate - math.pi) < 0.05


def test_abs_error_property():
    r = estimate_pi(100, seed=0)
    assert r.abs_error == abs(r.estimate - math.pi)
    assert list(r.points()) == list(zip(r.xs, r.ys))


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0.0, 0.0, True),
        (1.0, 0.0, True),
        (0.6, 0.7, True),
        (0.8, 0.8, False),
        (0.99, 0.2, False),
    ],
)
def test_is_inside(x, y, expected):
    assert is_inside(x, y) is expected
