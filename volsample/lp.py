"""Linear programs for inscribed balls and for points in intersections of V-polytopes."""

from __future__ import annotations

import numpy as np
from scipy.optimize import linprog

__all__ = ["LinearProgramError", "chebyshev_ball", "point_in_intersection"]


class LinearProgramError(RuntimeError):
    """Raised when a linear program has no optimal solution."""


def chebyshev_ball(A, b) -> tuple[np.ndarray, float]:
    """Return the centre and radius of the largest ball inside ``{x | A x <= b}``.

    Raises :class:`LinearProgramError` when the program is infeasible or unbounded.
    """
    A = np.asarray(A, dtype=float)
    b = np.asarray(b, dtype=float)
    if A.ndim != 2:
        raise ValueError("constraint matrix must be two-dimensional")
    m, d = A.shape
    if b.shape != (m,):
        raise ValueError("right-hand side must have one entry per constraint")

    norms = np.linalg.norm(A, axis=1)
    a_ub = np.column_stack([A, norms])
    objective = np.zeros(d + 1)
    objective[d] = -1.0
    bounds = [(None, None)] * d + [(0.0, None)]

    result = linprog(objective, A_ub=a_ub, b_ub=b, bounds=bounds, method="highs")
    if result.status != 0:
        raise LinearProgramError("could not solve the linear program for the Chebyshev centre")
    return np.array(result.x[:d]), float(result.x[d])


def point_in_intersection(V1, V2, direction) -> np.ndarray | None:
    """Find a point in the intersection of the convex hulls of the rows of ``V1`` and ``V2``.

    ``direction`` weights the convex-combination coefficients of ``V1`` followed by
    those of ``V2``; the combination maximising it is chosen. Returns ``None`` when
    the intersection is empty.
    """
    V1 = np.asarray(V1, dtype=float)
    V2 = np.asarray(V2, dtype=float)
    if V1.ndim != 2 or V2.ndim != 2 or V1.shape[1] != V2.shape[1]:
        raise ValueError("vertex matrices must be two-dimensional with the same number of columns")
    k1, k2 = V1.shape[0], V2.shape[0]
    weights = np.asarray(direction, dtype=float)
    if weights.shape != (k1 + k2,):
        raise ValueError("direction must have one entry per vertex of both polytopes")

    a_eq = np.vstack(
        [
            np.hstack([V1.T, -V2.T]),
            np.hstack([np.ones(k1), np.zeros(k2)]),
            np.hstack([np.zeros(k1), np.ones(k2)]),
        ]
    )
    b_eq = np.concatenate([np.zeros(V1.shape[1]), [1.0, 1.0]])

    result = linprog(-weights, A_eq=a_eq, b_eq=b_eq, bounds=(0.0, None), method="highs")
    if result.status != 0:
        return None
    return V1.T @ result.x[:k1]