import math

import numpy as np
import pytest

from heartcurve.curves import HeartCurve, ParametricCurve, generate_points


@pytest.mark.parametrize("n", [1, 2, 3, 7, 300, 1001])
def test_sample_count_is_n_plus_one(n):
    pts = generate_points(n)

    assert pts.shape == (n + 1, 2)


@pytest.mark.parametrize("n", [4, 300, 997])
def test_curve_is_closed(n):
    pts = generate_points(n)

    np.testing.assert_allclose(pts[0], pts[-1], atol=1e-9)


def test_start_point_is_exact():
    pts = generate_points(300)

    assert pts[0, 0] == 0.0
    assert pts[0, 1] == 5.0


@pytest.mark.parametrize("n", [2, 10, 300])
def test_midpoint_is_bottom_tip(n):
    pts = generate_points(n)

    x, y = pts[n // 2]
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(-17.0)


def test_known_extrema_for_default_count():
    pts = generate_points(300)
    xmin, ymin = pts.min(axis=0)
    xmax, ymax = pts.max(axis=0)

    assert xmin == pytest.approx(-16.0)
    assert xmax == pytest.approx(16.0)
    assert ymin == pytest.approx(-17.0)
    # top of the lobes
    assert 11.5 <= ymax <= 12.5


def test_parameters_end_exactly_on_domain():
    t = HeartCurve().parameters(300)

    assert t[0] == 0.0
    assert t[-1] == 2.0 * math.pi
    assert np.all(np.diff(t) > 0)


def test_generation_is_idempotent():
    first = generate_points(300)
    second = generate_points(300)

    np.testing.assert_array_equal(first, second)


@pytest.mark.parametrize("n", [0, -1, -300])
def test_non_positive_count_is_rejected(n):
    with pytest.raises(ValueError, match="positive"):
        generate_points(n)


@pytest.mark.parametrize("n", [2.5, "300", True, None])
def test_non_integer_count_is_rejected(n):
    with pytest.raises(ValueError, match="integer"):
        generate_points(n)


def test_numpy_integer_count_is_accepted():
    assert generate_points(np.int64(8)).shape == (9, 2)


def test_scalar_evaluation_matches_equation():
    heart = HeartCurve()
    t = 0.7

    assert heart.x(t) == pytest.approx(16.0 * math.sin(t) ** 3)
    assert heart.y(t) == pytest.approx(
        13 * math.cos(t) - 5 * math.cos(2 * t) - 2 * math.cos(3 * t) - math.cos(4 * t)
    )


def test_custom_curve_is_sampled():
    class UnitCircle(ParametricCurve):
        NAME = "Circle"

        def x(self, t):
            return np.cos(t)

        def y(self, t):
            return np.sin(t)

    pts = generate_points(4, curve=UnitCircle())

    np.testing.assert_allclose(
        pts,
        [[1, 0], [0, 1], [-1, 0], [0, -1], [1, 0]],
        atol=1e-12,
    )
