"""amoeba - derivative-free Nelder-Mead simplex minimization.

Example
-------
>>> import math
>>> from amoeba import minimize
>>> out = minimize(lambda x: math.cosh(x[0]), [1.0])
>>> round(out.f_min, 6)
1.0
"""

__version__ = "0.1.0"

from .core import MaxIterError, OptimizeResult, Output, Problem, Vertex
from .logging import configure_logging, get_logger, set_log_level
from .minimizer import Minimizer, minimize, nelder_mead
from .simplex import Simplex

__all__ = [
    "MaxIterError",
    "Minimizer",
    "OptimizeResult",
    "Output",
    "Problem",
    "Simplex",
    "Vertex",
    "configure_logging",
    "get_logger",
    "minimize",
    "nelder_mead",
    "set_log_level",
]
