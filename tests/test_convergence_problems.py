import math

import numpy as np
import pytest

from amoeba import Minimizer, Problem, minimize, nelder_mead


def rosenbrock(x: np.ndarray) -> float:
    return (1 - x[0]) ** 2 + 100 * (x[1] - x[0] ** 2) ** 2


def himmelblau(x: np.ndarray) -> float:
    return (x[0] ** 2 + x[1] - 11) ** 2 + (x[0] + x[1] ** 2 - 7) ** 2


def test_square_from_unit_seed():
    out = minimize(lambda x: x[0] ** 2, [1.0])
    assert abs(out.f_min) < 1e-8
    assert np.allclose(out.x_min, [0.0], atol=1e-4)
    assert out.iter < Minimizer().cap(1)


def test_product_of_squares_two_dimensions():
    out = minimize(lambda x: x[0] ** 2 * x[1] ** 2, [1.0, 1.0])
    assert abs(out.f_min) < 1e-8
    assert abs(out.x_min[0] * out.x_min[1]) < 1e-2


def test_sine_from_zero_seed():
    out = minimize(lambda x: math.sin(x[0]), [0.0])
    assert abs(out.f_min + 1.0) < 1e-9
    assert math.cos(out.x_min[0]) == pytest.approx(0.0, abs=1e-3)


def test_cosh_from_unit_seed():
    out = minimize(lambda x: math.cosh(x[0]), [1.0])
    assert abs(out.f_min - 1.0) < 1e-8
    assert np.allclose(out.x_min, [0.0], atol=1e-3)


def test_absolute_value_converges_despite_kink():
    out = minimize(lambda x: abs(x[0]), [1.0])
    assert abs(out.f_min) < 1e-8
    assert abs(out.x_min[0]) < 1e-3


def test_zero_seed_uses_absolute_step():
    out = minimize(lambda x: (x[0] - 0.5) ** 2, [0.0])
    assert abs(out.f_min) < 1e-6
    assert out.x_min[0] == pytest.approx(0.5, abs=1e-3)

    out = minimize(lambda x: x[0] ** 2, [0.0])
    assert abs(out.f_min) < 1e-8


def test_random_quadratic_bowls(rng):
    minimizer = Minimizer(tol_f=1e-10, tol_x=1e-6)
    for _ in range(3):
        center = rng.uniform(-3.0, 3.0, size=2)
        weights = rng.uniform(0.5, 4.0, size=2)

        def bowl(x: np.ndarray) -> float:
            return float(np.sum(weights * (x - center) ** 2))

        out = minimizer.minimize(bowl, [1.0, 1.0])
        assert np.allclose(out.x_min, center, atol=1e-4)


def test_rosenbrock_with_tight_tolerances():
    problem = Problem(fun=rosenbrock, dim=2)
    res = nelder_mead(problem, np.array([-1.2, 1.0]), tol_f=1e-10, tol_x=1e-6, max_iter=1000)
    assert res.success
    assert np.allclose(res.x, np.ones(2), atol=1e-3)
    assert res.fun < 1e-6


def test_himmelblau_local_minimum_found():
    out = Minimizer(tol_f=1e-10, tol_x=1e-6).minimize(himmelblau, [3.0, 1.5])
    assert out.f_min < 1e-6
    assert np.allclose(out.x_min, [3.0, 2.0], atol=1e-3)
