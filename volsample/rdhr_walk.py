"""Random directions hit-and-run walk with uniform target distribution."""

from __future__ import annotations

import numpy as np

from volsample.sphere import get_direction

__all__ = ["RDHRWalk"]


class RDHRWalk:
    """Hit-and-run walk along uniformly random directions.

    The body must provide ``line_intersect(r, v)`` returning the larger and
    the smaller parameter where the line ``r + t * v`` leaves it.
    """

    def __init__(self, body, p, rng: np.random.Generator, parameters=None) -> None:
        start = np.asarray(p, dtype=float)
        self._lambda = 0.0
        self._p = start
        self._p = self._step(body, start, rng)

    def _step(self, body, point: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        v = get_direction(point.shape[0], rng)
        upper, lower = body.line_intersect(point, v)
        self._lambda = rng.random() * (upper - lower) + lower
        return point + self._lambda * v

    @property
    def position(self) -> np.ndarray:
        return self._p.copy()

    def apply(self, body, p, walk_length: int, rng: np.random.Generator) -> np.ndarray:
        """Make ``walk_length`` steps and return the new point.

        The walk continues from its own current position; ``p`` is the point
        it returned last and is replaced by the result.
        """
        for _ in range(walk_length):
            self._p = self._step(body, self._p, rng)
        return self._p.copy()