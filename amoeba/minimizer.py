"""Nelder-Mead downhill simplex minimization.

The search keeps ``n + 1`` evaluated vertices and, on every iteration,
replaces the worst one by reflecting, expanding or contracting it through
the centroid of the others, or shrinks the whole simplex toward the best
vertex when none of those trial points improves on the worst. The run stops
once the spread of the simplex is within ``tol_f`` in value and ``tol_x`` in
every coordinate, or after ``n * max_iter`` iterations.

Example
-------
>>> from amoeba import Minimizer
>>> out = Minimizer().minimize(lambda x: (x[0] - 2.0) ** 2, [1.0])
>>> round(out.x_min[0], 2)
2.0
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from .core import (
    Array,
    Callback,
    MaxIterError,
    Objective,
    OptimizeResult,
    Output,
    Problem,
    Vertex,
)
from .logging import get_logger
from .simplex import Simplex, evaluate
from .vector import lincomb, max_abs, validate_seed

logger = get_logger(__name__)

REFLECT = "reflect"
EXPAND = "expand"
CONTRACT_OUTSIDE = "contract_outside"
CONTRACT_INSIDE = "contract_inside"
SHRINK = "shrink"


@dataclass(frozen=True)
class Minimizer:
    """Coefficients and stopping rules of the Nelder-Mead search.

    Attributes:
        a: Reflection coefficient.
        b: Contraction coefficient.
        c: Expansion coefficient.
        d: Shrink coefficient.
        step: Relative perturbation of non-zero seed coordinates when
            building the initial simplex.
        step_zero: Absolute value given to seed coordinates that are exactly
            zero when building the initial simplex.
        tol_f: Tolerance on ``|f(worst) - f(best)|``.
        tol_x: Tolerance on the largest coordinate difference between the
            worst and best points.
        max_iter: Iteration budget per dimension; a run over ``n`` variables
            stops after ``n * max_iter`` iterations.
    """

    a: float = 1.0
    b: float = 0.5
    c: float = 2.0
    d: float = 0.5
    step: float = 0.01
    step_zero: float = 0.00025
    tol_f: float = 1e-4
    tol_x: float = 1e-4
    max_iter: int = 200

    def __post_init__(self) -> None:
        if not self.a > 0:
            raise ValueError(f"Reflection coefficient a must be positive, got {self.a}")
        if not 0 < self.b < 1:
            raise ValueError(f"Contraction coefficient b must lie in (0, 1), got {self.b}")
        if not self.c > 1:
            raise ValueError(f"Expansion coefficient c must exceed 1, got {self.c}")
        if not 0 < self.d < 1:
            raise ValueError(f"Shrink coefficient d must lie in (0, 1), got {self.d}")
        if not self.step > 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if not (self.step_zero != 0 and abs(self.step_zero) < float("inf")):
            raise ValueError(f"step_zero must be finite and non-zero, got {self.step_zero}")
        if not (self.tol_f >= 0 and self.tol_x >= 0):
            raise ValueError("Tolerances tol_f and tol_x must be non-negative")
        # bool is an Integral too, but never a meaningful budget
        if (
            not isinstance(self.max_iter, numbers.Integral)
            or isinstance(self.max_iter, bool)
            or self.max_iter < 1
        ):
            raise ValueError(f"max_iter must be a positive integer, got {self.max_iter}")

    def with_options(self, **changes: float) -> "Minimizer":
        """Return a copy with some coefficients replaced (validated again)."""
        return replace(self, **changes)

    def cap(self, dim: int) -> int:
        """Iteration cap for a search over ``dim`` variables."""
        return dim * int(self.max_iter)

    def convergence_measures(self, simplex: Simplex) -> tuple[float, float]:
        """Return ``(test_f, test_x)`` for a sorted simplex."""
        best = simplex.best()
        worst = simplex.worst()
        test_f = abs(worst.value - best.value)
        test_x = max_abs(worst.point - best.point)
        return test_f, test_x

    def converged(self, simplex: Simplex) -> bool:
        test_f, test_x = self.convergence_measures(simplex)
        return test_f <= self.tol_f and test_x <= self.tol_x

    def iterate(self, simplex: Simplex, objective: Objective) -> str:
        """Perform one Nelder-Mead step on a sorted simplex.

        The simplex is sorted again on return. The name of the transformation
        that was applied is returned: ``"reflect"``, ``"expand"``,
        ``"contract_outside"``, ``"contract_inside"`` or ``"shrink"``.
        """
        centroid = simplex.centroid()
        worst = simplex.worst()
        f_best = simplex.best().value
        f_second = simplex.second_worst().value

        # Xr = C + a (C - W)
        x_r = lincomb(1.0 + self.a, centroid, -self.a, worst.point)
        f_r = evaluate(objective, x_r)

        if f_r < f_second:
            candidate = Vertex(f_r, x_r)
            kind = REFLECT
            if f_r < f_best:
                # Xe = C + c (Xr - C)
                x_e = lincomb(1.0 - self.c, centroid, self.c, x_r)
                f_e = evaluate(objective, x_e)
                if f_e < f_best:
                    candidate = Vertex(f_e, x_e)
                    kind = EXPAND
        else:
            if f_r < worst.value:
                # Xc = C + b (C - W), outside the simplex
                x_c = lincomb(1.0 + self.b, centroid, -self.b, worst.point)
                kind = CONTRACT_OUTSIDE
            else:
                # Xc = C - b (C - W), inside the simplex
                x_c = lincomb(1.0 - self.b, centroid, self.b, worst.point)
                kind = CONTRACT_INSIDE
            f_c = evaluate(objective, x_c)
            f_bound = f_r if f_r < worst.value else worst.value
            if f_c < f_bound:
                candidate = Vertex(f_c, x_c)
            else:
                # Shrink rewrites every non-best vertex, so there is nothing
                # left to replace.
                simplex.shrink(objective, self)
                simplex.sort()
                logger.debug("shrink: f_r=%.6g, f_c=%.6g, f_worst=%.6g", f_r, f_c, worst.value)
                return SHRINK

        simplex.update(candidate)
        simplex.sort()
        logger.debug("%s: f_new=%.6g, f_worst_old=%.6g", kind, candidate.value, worst.value)
        return kind

    def run(
        self,
        objective: Objective,
        seed: Sequence[float] | Array,
        callback: Optional[Callback] = None,
        history: bool = False,
    ) -> OptimizeResult:
        """Run the search and report the outcome without raising on the cap.

        On cap exhaustion ``success`` is False and the result carries the best
        vertex of the final simplex. With ``history`` the first entry is the
        best vertex of the initial simplex, followed by the best point after
        every iteration.
        """
        x0 = validate_seed(seed)
        cap = self.cap(x0.size)
        nfev = 0

        def counted(x: Array) -> float:
            nonlocal nfev
            nfev += 1
            return objective(x)

        # Initial simplex, best vertex first
        simplex = Simplex.from_seed(x0, counted, self)
        simplex.sort()
        logger.info(
            "Nelder-Mead start: dim=%d, cap=%d, f_best=%.6g", simplex.dim, cap, simplex.best().value
        )
        hist: list[Array] = []
        if history:
            hist.append(simplex.best().point.copy())

        for nit in range(cap):
            kind = self.iterate(simplex, counted)
            best = simplex.best()
            # Bookkeeping on the freshly sorted simplex
            if history:
                hist.append(best.point.copy())
            if callback is not None:
                callback(best.point.copy(), best.value)
            # Both spread tests must hold
            if self.converged(simplex):
                logger.info(
                    "Converged after %d iterations (%d evaluations, last step %s): f_min=%.6g",
                    nit + 1,
                    nfev,
                    kind,
                    best.value,
                )
                return OptimizeResult(
                    x=best.point.copy(),
                    fun=best.value,
                    nit=nit + 1,
                    success=True,
                    message="Simplex converged within tol_f and tol_x.",
                    nfev=nfev,
                    history=hist,
                )

        # Cap exhausted: report the best vertex seen so far
        best = simplex.best()
        test_f, test_x = self.convergence_measures(simplex)
        logger.warning(
            "Maximum iterations (%d) reached: f_best=%.6g, test_f=%.3g, test_x=%.3g",
            cap,
            best.value,
            test_f,
            test_x,
        )
        return OptimizeResult(
            x=best.point.copy(),
            fun=best.value,
            nit=cap,
            success=False,
            message="Maximum iterations reached.",
            nfev=nfev,
            history=hist,
        )

    def minimize(
        self,
        objective: Objective,
        seed: Sequence[float] | Array,
        callback: Optional[Callback] = None,
        history: bool = False,
    ) -> Output:
        """Minimize ``objective`` starting from ``seed``.

        ``callback(x_best, f_best)`` is called after every iteration.

        Returns:
            :class:`Output` with ``iter`` set to the zero-based index of the
            iteration at which both convergence tests held.

        Raises:
            ValueError: If the seed is empty, not 1D or not finite.
            MaxIterError: If ``n * max_iter`` iterations pass without
                convergence.
        """
        res = self.run(objective, seed, callback=callback, history=history)
        if not res.success:
            raise MaxIterError(res.nit)
        return Output(
            f_min=res.fun,
            x_min=res.x,
            iter=res.nit - 1,
            nfev=res.nfev,
            history=res.history,
        )


def minimize(
    objective: Objective,
    seed: Sequence[float] | Array,
    minimizer: Optional[Minimizer] = None,
    callback: Optional[Callback] = None,
    history: bool = False,
) -> Output:
    """Minimize ``objective`` from ``seed`` with ``minimizer`` (defaults if None)."""
    if minimizer is None:
        minimizer = Minimizer()
    return minimizer.minimize(objective, seed, callback=callback, history=history)


def nelder_mead(
    problem: Problem,
    x0: Sequence[float] | Array,
    a: float = 1.0,
    b: float = 0.5,
    c: float = 2.0,
    d: float = 0.5,
    step: float = 0.01,
    step_zero: float = 0.00025,
    tol_f: float = 1e-4,
    tol_x: float = 1e-4,
    max_iter: int = 200,
    callback: Optional[Callback] = None,
    history: bool = False,
) -> OptimizeResult:
    """Derivative-free Nelder-Mead returning the best point even without convergence."""
    x = validate_seed(x0)
    if problem.dim is not None and problem.dim != x.size:
        raise ValueError(f"Initial point has dimension {x.size}, problem expects {problem.dim}")
    minimizer = Minimizer(
        a=a,
        b=b,
        c=c,
        d=d,
        step=step,
        step_zero=step_zero,
        tol_f=tol_f,
        tol_x=tol_x,
        max_iter=max_iter,
    )
    return minimizer.run(problem.fun, x, callback=callback, history=history)


__all__ = [
    "CONTRACT_INSIDE",
    "CONTRACT_OUTSIDE",
    "EXPAND",
    "Minimizer",
    "REFLECT",
    "SHRINK",
    "minimize",
    "nelder_mead",
]
