"""Membership and ray-shooting oracles for V-polytopes and zonotopes, solved as linear programs."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
from scipy.optimize import linprog

from volsample.lp import LinearProgramError

__all__ = [
    "RayIntersection",
    "is_in_vpolytope",
    "intersect_line_vpolytope",
    "intersect_double_line_vpolytope",
    "is_in_zonotope",
    "intersect_line_zonotope",
]

_MEMBERSHIP_TOL = 1e-10


class RayIntersection(NamedTuple):
    """Parameter ``t`` of the point ``p + t * v`` where the ray leaves the body.

    ``coefficients`` are the weights of the vertices (or generators) that
    express that point.
    """

    t: float
    coefficients: np.ndarray


def _vertices(V) -> np.ndarray:
    V = np.asarray(V, dtype=float)
    if V.ndim != 2 or V.shape[0] == 0:
        raise ValueError("vertex matrix must be two-dimensional and non-empty")
    return V


def _vector(x, dim: int, name: str) -> np.ndarray:
    x = np.asarray(x, dtype=float)
    if x.shape != (dim,):
        raise ValueError(f"{name} must have the dimension of the polytope")
    return x


def _solve_ray(V: np.ndarray, p, v, maximize: bool, zonotope: bool):
    """Optimise ``t`` subject to ``sum_j c_j V_j + t v = p`` with bounded weights ``c``."""
    m, d = V.shape
    p = _vector(p, d, "point")
    v = _vector(v, d, "direction")

    a_eq = np.column_stack([V.T, v])
    b_eq = p
    if not zonotope:
        a_eq = np.vstack([a_eq, np.append(np.ones(m), 0.0)])
        b_eq = np.append(p, 1.0)
    weight_bounds = (-1.0, 1.0) if zonotope else (0.0, 1.0)
    bounds = [weight_bounds] * m + [(None, None)]

    objective = np.zeros(m + 1)
    objective[m] = -1.0 if maximize else 1.0
    result = linprog(objective, A_eq=a_eq, b_eq=b_eq, bounds=bounds, method="highs")
    if result.status != 0:
        raise LinearProgramError("could not solve the linear program for ray-shooting")
    return float(result.x[m]), np.array(result.x[:m])


def is_in_vpolytope(V, q) -> bool:
    """Whether ``q`` lies in the convex hull of the rows of ``V``.

    Looks for a hyperplane separating ``q`` from every vertex; ``q`` is inside
    when none exists.
    """
    V = _vertices(V)
    m, d = V.shape
    q = _vector(q, d, "point")

    a_ub = np.vstack([np.column_stack([V, -np.ones(m)]), np.append(q, -1.0)])
    b_ub = np.append(np.zeros(m), 1.0)
    objective = -np.append(q, -1.0)
    result = linprog(
        objective, A_ub=a_ub, b_ub=b_ub, bounds=[(None, None)] * (d + 1), method="highs"
    )
    if result.status != 0:
        return False
    return -result.fun <= _MEMBERSHIP_TOL


def intersect_line_vpolytope(V, p, v, maximize: bool = False, zonotope: bool = False) -> RayIntersection:
    """Intersect the line ``p + t * v`` with the polytope.

    Without ``maximize`` the positive end of the chord is returned, with it the
    negative end. With ``zonotope`` the rows of ``V`` are generators with
    weights in ``[-1, 1]`` instead of vertices of a convex combination.
    Raises :class:`LinearProgramError` when the line misses the body.
    """
    V = _vertices(V)
    t, weights = _solve_ray(V, p, v, maximize, zonotope)
    return RayIntersection(-t, weights)


def intersect_double_line_vpolytope(V, p, v) -> tuple[float, float]:
    """Both ends of the chord of the V-polytope along ``p + t * v``, positive end first."""
    V = _vertices(V)
    t_max, _ = _solve_ray(V, p, v, True, False)
    t_min, _ = _solve_ray(V, p, v, False, False)
    return -t_min, -t_max


def is_in_zonotope(V, q) -> bool:
    """Whether ``q`` is a combination of the generator rows of ``V`` with weights in ``[-1, 1]``."""
    V = _vertices(V)
    m, d = V.shape
    q = _vector(q, d, "point")
    result = linprog(
        np.zeros(m), A_eq=V.T, b_eq=q, bounds=[(-1.0, 1.0)] * m, method="highs"
    )
    return result.status == 0


def intersect_line_zonotope(V, p, v) -> tuple[float, float]:
    """Both ends of the chord of the zonotope along ``p + t * v``, positive end first."""
    V = _vertices(V)
    t_max, _ = _solve_ray(V, p, v, True, True)
    t_min, _ = _solve_ray(V, p, v, False, True)
    return -t_min, -t_max