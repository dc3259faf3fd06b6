"""Core types shared by the simplex and the minimizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

Array = np.ndarray
Objective = Callable[[Array], float]
Callback = Callable[[Array, float], None]


@dataclass(frozen=True)
class Vertex:
    """One evaluated candidate: objective ``value`` at ``point``."""

    value: float
    point: Array


@dataclass(frozen=True)
class Problem:
    """Container describing a minimization problem.

    ``dim`` is optional; when given it must match the length of the
    starting point handed to :func:`amoeba.minimizer.nelder_mead`.
    """

    fun: Objective
    dim: Optional[int] = None


@dataclass
class Output:
    """Successful outcome of :meth:`amoeba.minimizer.Minimizer.minimize`.

    Attributes:
        f_min: Cached objective value at ``x_min``.
        x_min: Best point of the converged simplex.
        iter: Iterations consumed before both convergence tests held.
        nfev: Total number of objective evaluations.
        history: Best point of the initial simplex, then after every
            iteration (empty unless requested).
    """

    f_min: float
    x_min: Array
    iter: int
    nfev: int = 0
    history: List[Array] = field(default_factory=list)


@dataclass
class OptimizeResult:
    """Result object returned by :func:`amoeba.minimizer.nelder_mead`.

    Unlike :class:`Output` it is also produced when the iteration cap is
    exhausted, in which case ``success`` is False and ``x``/``fun`` hold the
    best vertex found so far.
    """

    x: Array
    fun: float
    nit: int
    success: bool
    message: str
    nfev: int
    history: List[Array] = field(default_factory=list)


class MaxIterError(RuntimeError):
    """Raised when the iteration cap is exhausted before convergence."""

    def __init__(self, max_iter: int) -> None:
        super().__init__(f"Nelder-Mead did not converge within {max_iter} iterations")
        self.max_iter = max_iter


__all__ = [
    "Array",
    "Callback",
    "MaxIterError",
    "Objective",
    "OptimizeResult",
    "Output",
    "Problem",
    "Vertex",
]
