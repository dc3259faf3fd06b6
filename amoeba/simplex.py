"""The moving simplex of n+1 evaluated vertices.

Read accessors (:meth:`Simplex.best`, :meth:`Simplex.worst`,
:meth:`Simplex.second_worst`, :meth:`Simplex.centroid`) assume the vertices
are sorted. :meth:`Simplex.update` and :meth:`Simplex.shrink` leave the order
undefined, so callers must :meth:`Simplex.sort` before reading again.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING, Iterable, Iterator, List, Sequence

from .core import Array, Objective, Vertex
from .vector import lincomb, validate_seed, zeros

if TYPE_CHECKING:
    from .minimizer import Minimizer


def evaluate(objective: Objective, x: Array) -> float:
    """Evaluate ``objective`` on a private copy of ``x``."""
    return float(objective(x.copy()))


def _compare(lhs: Vertex, rhs: Vertex) -> int:
    # Incomparable values (NaN) compare equal instead of raising.
    if lhs.value < rhs.value:
        return -1
    if lhs.value > rhs.value:
        return 1
    return 0


_SORT_KEY = cmp_to_key(_compare)


class Simplex:
    """Ordered collection of exactly ``dim + 1`` vertices."""

    def __init__(self, vertices: Iterable[Vertex]) -> None:
        vertices = list(vertices)
        if len(vertices) < 2:
            raise ValueError("A simplex needs at least two vertices")
        dim = len(vertices) - 1
        for vertex in vertices:
            if vertex.point.shape != (dim,):
                raise ValueError(
                    f"Every vertex of a {dim}-dimensional simplex needs a point of "
                    f"shape ({dim},), got {vertex.point.shape}"
                )
        self._vertices: List[Vertex] = vertices
        self._dim = dim
        self._inv_dim = 1.0 / dim

    @classmethod
    def from_seed(
        cls, seed: Sequence[float] | Array, objective: Objective, config: "Minimizer"
    ) -> "Simplex":
        """Build the initial simplex around ``seed``.

        Vertex 0 is the seed itself. Vertex ``i + 1`` perturbs coordinate
        ``i``: a coordinate that is exactly zero is set to ``config.step_zero``,
        any other is scaled by ``1 + config.step``. The result is unsorted.
        """
        x0 = validate_seed(seed)
        vertices = [Vertex(evaluate(objective, x0), x0)]
        for i in range(x0.size):
            x = x0.copy()
            x[i] = config.step_zero if x[i] == 0.0 else x[i] * (1.0 + config.step)
            vertices.append(Vertex(evaluate(objective, x), x))
        return cls(vertices)

    @property
    def dim(self) -> int:
        return self._dim

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __getitem__(self, index: int) -> Vertex:
        return self._vertices[index]

    def values(self) -> List[float]:
        return [vertex.value for vertex in self._vertices]

    def points(self) -> List[Array]:
        return [vertex.point.copy() for vertex in self._vertices]

    def sort(self) -> None:
        """Order vertices by ascending value; stable, never raises on NaN."""
        self._vertices.sort(key=_SORT_KEY)

    def centroid(self) -> Array:
        """Mean of every point except the worst one."""
        acc = zeros(self._dim)
        for vertex in self._vertices[:-1]:
            acc += vertex.point
        return acc * self._inv_dim

    def best(self) -> Vertex:
        return self._vertices[0]

    def worst(self) -> Vertex:
        return self._vertices[-1]

    def second_worst(self) -> Vertex:
        return self._vertices[-2]

    def shrink(self, objective: Objective, config: "Minimizer") -> None:
        """Pull every non-best vertex toward the best one.

        Each point ``p`` moves to ``d * p + (1 - d) * best`` and is
        re-evaluated there. The best vertex is left untouched.
        """
        best = self._vertices[0].point
        for i in range(1, len(self._vertices)):
            x = lincomb(config.d, self._vertices[i].point, 1.0 - config.d, best)
            self._vertices[i] = Vertex(evaluate(objective, x), x)

    def update(self, vertex: Vertex) -> None:
        """Replace the current worst vertex with ``vertex`` (no re-sort)."""
        self._vertices[-1] = vertex

    def __repr__(self) -> str:
        return f"Simplex(dim={self._dim}, values={self.values()!r})"


__all__ = ["Simplex", "evaluate"]
