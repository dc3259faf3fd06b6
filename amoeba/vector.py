"""Numeric vector helpers used by the simplex routines.

Points are plain 1-D ``float64`` NumPy arrays. Elementwise arithmetic and
indexing come from :class:`numpy.ndarray`; the helpers here cover conversion,
seed validation and the few fused updates the simplex transformations need.
Every helper that returns a vector returns a fresh array, so points stored
in different vertices never alias each other.
"""

from __future__ import annotations

from typing import Iterable, List

import numpy as np

Array = np.ndarray


def zeros(n: int) -> Array:
    """Return the zero vector of length ``n``."""
    return np.zeros(int(n), dtype=float)


def as_vector(values: Iterable[float] | Array) -> Array:
    """Convert a plain sequence (or array) into an independent float vector."""
    return np.array(values, dtype=float, copy=True)


def validate_seed(seed: Iterable[float] | Array) -> Array:
    """Convert ``seed`` to a vector and check it can start a simplex search.

    Raises:
        ValueError: If the seed is not one-dimensional, is empty, or holds a
            non-finite coordinate.
    """
    try:
        x = as_vector(seed)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"seed must be a sequence of real numbers: {exc}") from exc
    if x.ndim != 1:
        raise ValueError(f"seed must be a 1D sequence, got shape {x.shape}")
    if x.size == 0:
        raise ValueError("seed must contain at least one coordinate")
    if not np.all(np.isfinite(x)):
        bad = [int(i) for i in np.flatnonzero(~np.isfinite(x))]
        raise ValueError(f"seed coordinates must be finite, got non-finite values at {bad}")
    return x


def to_list(x: Array) -> List[float]:
    """Convert a vector back into a plain list of Python floats."""
    return [float(v) for v in x]


def scaled_add(x: Array, alpha: float, y: Array) -> Array:
    """Fused in-place update ``x += alpha * y``; returns ``x``."""
    x += alpha * y
    return x


def lincomb(alpha: float, x: Array, beta: float, y: Array) -> Array:
    """Return ``alpha * x + beta * y`` as a new vector."""
    out = alpha * x
    return scaled_add(out, beta, y)


def max_abs(x: Array) -> float:
    """Largest component magnitude of ``x`` (NaN if any component is NaN)."""
    return float(np.max(np.abs(x)))


__all__ = [
    "Array",
    "as_vector",
    "lincomb",
    "max_abs",
    "scaled_add",
    "to_list",
    "validate_seed",
    "zeros",
]
