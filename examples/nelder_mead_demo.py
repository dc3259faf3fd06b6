"""
Example: derivative-free minimization with amoeba

Runs the Nelder-Mead minimizer on a few classic test functions, first through
the raising ``Minimizer.minimize`` entry point and then through the
result-object ``nelder_mead`` API, which also reports runs that hit the
iteration cap.
"""

import math

import numpy as np

from amoeba import MaxIterError, Minimizer, Problem, nelder_mead


def rosenbrock(x: np.ndarray) -> float:
    return (1 - x[0]) ** 2 + 100 * (x[1] - x[0] ** 2) ** 2


def example_one_dimensional():
    """Example: smooth and non-smooth objectives in one variable."""
    print("=" * 60)
    print("Example 1: One-dimensional objectives")
    print("=" * 60)

    minimizer = Minimizer()
    for name, fun, seed in [
        ("x^2", lambda x: x[0] ** 2, [1.0]),
        ("sin(x)", lambda x: math.sin(x[0]), [0.0]),
        ("cosh(x)", lambda x: math.cosh(x[0]), [1.0]),
        ("|x|", lambda x: abs(x[0]), [1.0]),
    ]:
        out = minimizer.minimize(fun, seed)
        print(f"{name:>8}: f_min = {out.f_min:+.8f}  x_min = {out.x_min}  iter = {out.iter}")
    print()


def example_rosenbrock():
    """Example: Rosenbrock valley with tighter tolerances."""
    print("=" * 60)
    print("Example 2: Rosenbrock function")
    print("=" * 60)

    problem = Problem(fun=rosenbrock, dim=2)
    res = nelder_mead(problem, np.array([-1.2, 1.0]), tol_f=1e-10, tol_x=1e-6, max_iter=1000)
    print(f"Success: {res.success} ({res.message})")
    print(f"x = {res.x}")
    print(f"fun = {res.fun:.3e}")
    print(f"iterations = {res.nit}, evaluations = {res.nfev}")
    print()


def example_iteration_cap():
    """Example: what happens when the budget is too small."""
    print("=" * 60)
    print("Example 3: Iteration cap")
    print("=" * 60)

    minimizer = Minimizer(max_iter=5)
    try:
        minimizer.minimize(rosenbrock, [-1.2, 1.0])
    except MaxIterError as exc:
        print(f"Minimizer.minimize raised: {exc} (cap = {exc.max_iter})")

    res = nelder_mead(Problem(fun=rosenbrock, dim=2), np.array([-1.2, 1.0]), max_iter=5)
    print(f"nelder_mead: success = {res.success}, message = {res.message!r}")
    print(f"best so far: x = {res.x}, fun = {res.fun:.4f}")
    print()


def main():
    example_one_dimensional()
    example_rosenbrock()
    example_iteration_cap()
    print("Nelder-Mead examples completed successfully")


if __name__ == "__main__":
    main()
