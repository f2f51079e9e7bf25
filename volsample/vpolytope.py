"""Convex polytopes given by their vertices (V-representation)."""

from __future__ import annotations

import math

import numpy as np

from volsample.oracles import (
    intersect_double_line_vpolytope,
    intersect_line_vpolytope,
    is_in_vpolytope,
)

__all__ = ["VPolytope"]

_KHACHIYAN_TOL = 0.01
_KHACHIYAN_MAX_ITER = 1000
_ROUNDING_FACTOR = 20
_WEIGHT_TOL = 1e-12


def _khachiyan_center(points: np.ndarray, tol: float, max_iter: int) -> np.ndarray:
    """Centre of the minimum-volume ellipsoid enclosing the columns of ``points``."""
    d, n = points.shape
    lifted = np.vstack([points, np.ones(n)])
    u = np.full(n, 1.0 / n)
    err = 1.0
    count = 0
    while err > tol and count < max_iter:
        X = (lifted * u) @ lifted.T
        M = np.einsum("ij,ij->j", lifted, np.linalg.solve(X, lifted))
        j = int(np.argmax(M))
        maximum = M[j]
        step = (maximum - d - 1.0) / ((d + 1.0) * (maximum - 1.0))
        new_u = (1.0 - step) * u
        new_u[j] += step
        err = float(np.linalg.norm(new_u - u))
        u = new_u
        count += 1
    return points @ u


class VPolytope:
    """Convex hull of the rows of a vertex matrix ``V``."""

    def __init__(self, V, b=None) -> None:
        vertices = np.array(V, dtype=float)
        if vertices.ndim != 2 or vertices.shape[0] == 0 or vertices.shape[1] == 0:
            raise ValueError("vertex matrix must be two-dimensional and non-empty")
        self.V = vertices
        self.b = np.ones(vertices.shape[0]) if b is None else np.array(b, dtype=float)
        if self.b.shape != (vertices.shape[0],):
            raise ValueError("vector b must have one entry per vertex")
        self._inner_ball: tuple[np.ndarray, float] | None = None
        self._conv_comb: np.ndarray | None = None

    def _vector(self, x, name: str) -> np.ndarray:
        x = np.asarray(x, dtype=float)
        if x.shape != (self.dimension(),):
            raise ValueError(f"{name} must have the dimension of the polytope")
        return x

    def dimension(self) -> int:
        return self.V.shape[1]

    def num_of_vertices(self) -> int:
        return self.V.shape[0]

    def num_of_hyperplanes(self) -> int:
        return 0

    def upper_bound_of_hyperplanes(self) -> int:
        return 2 * self.dimension()

    def inner_ball(self) -> tuple[np.ndarray, float] | None:
        """The ball found by the last call of :meth:`compute_inner_ball`, if any."""
        return self._inner_ball

    def mean_of_vertices(self) -> np.ndarray:
        return self.V.mean(axis=0)

    def max_vertex_norm(self) -> float:
        return float(np.linalg.norm(self.V, axis=1).max())

    def inscribed_simplex_ball(self, points) -> tuple[np.ndarray, float]:
        """Chebyshev ball of the simplex spanned by ``d + 1`` points."""
        pts = np.asarray(points, dtype=float)
        d = self.dimension()
        if pts.shape != (d + 1, d):
            raise ValueError("a simplex needs dimension + 1 points of the polytope's dimension")
        p0 = pts[0]
        B = (pts[1:] - p0).T
        B_inv = np.linalg.inv(B)
        g = np.linalg.norm(B_inv, axis=1)
        radius = 1.0 / (g.sum() + float(np.linalg.norm(B_inv.sum(axis=0))))
        center = p0 + radius * (B @ g)
        return center, radius

    def points_for_rounding(self) -> np.ndarray | None:
        """The vertices, when there are at most ``20 * d`` of them; otherwise ``None``."""
        if self.num_of_vertices() > _ROUNDING_FACTOR * self.dimension():
            return None
        return self.V.copy()

    def compute_inner_ball(self) -> tuple[np.ndarray, float]:
        """Find a ball inside the polytope and remember it.

        The centre is the centre of the enclosing ellipsoid of the vertices, or
        their mean when there are too many; the radius is the smallest distance
        to the boundary along the coordinate axes divided by ``sqrt(d)``.
        """
        d = self.dimension()
        points = self.points_for_rounding()
        if points is None:
            center = self.mean_of_vertices()
        else:
            center = _khachiyan_center(points.T, _KHACHIYAN_TOL, _KHACHIYAN_MAX_ITER)
        radius = math.inf
        for axis in np.eye(d):
            upper, lower = intersect_double_line_vpolytope(self.V, center, axis)
            radius = min(radius, upper, -lower)
        radius /= math.sqrt(d)
        self._inner_ball = (center, radius)
        return center.copy(), radius

    def is_in(self, p) -> bool:
        return is_in_vpolytope(self.V, self._vector(p, "point"))

    def line_intersect(self, r, v) -> tuple[float, float]:
        """Both ends of the chord along ``r + t * v``, positive end first."""
        return intersect_double_line_vpolytope(
            self.V, self._vector(r, "point"), self._vector(v, "direction")
        )

    def line_positive_intersect(self, r, v) -> tuple[float, int]:
        """Positive parameter of the ray ``r + t * v`` on the boundary, with facet index 1.

        The vertex weights of the hit point are kept for :meth:`compute_reflection`.
        """
        hit = intersect_line_vpolytope(
            self.V, self._vector(r, "point"), self._vector(v, "direction"), False, False
        )
        self._conv_comb = hit.coefficients
        return hit.t, 1

    def line_intersect_coord(self, r, rand_coord: int) -> tuple[float, float]:
        """Both ends of the chord through ``r`` along coordinate ``rand_coord``."""
        d = self.dimension()
        if not 0 <= rand_coord < d:
            raise IndexError("coordinate out of range")
        direction = np.zeros(d)
        direction[rand_coord] = 1.0
        return self.line_intersect(r, direction)

    def shift(self, c) -> None:
        """Translate the polytope by ``-c``."""
        self.V = self.V - self._vector(c, "shift vector")

    def linear_transform(self, T) -> None:
        """Map every vertex ``x`` to ``T^{-1} x``."""
        T = np.asarray(T, dtype=float)
        d = self.dimension()
        if T.shape != (d, d):
            raise ValueError("transformation must be a square matrix of the polytope's dimension")
        self.V = (np.linalg.inv(T) @ self.V.T).T

    def get_dists(self, radius: float) -> list[float]:
        """Lower bounds of facet distances: ``radius`` for each of ``2 * d`` facets."""
        return [radius] * self.upper_bound_of_hyperplanes()

    def compute_reflection(self, v, p) -> np.ndarray:
        """Reflect direction ``v`` on the facet hit by the last :meth:`line_positive_intersect`."""
        if self._conv_comb is None:
            raise RuntimeError("no boundary point to reflect on; shoot a ray first")
        v = self._vector(v, "direction")
        self._vector(p, "point")
        on_facet = self._conv_comb > _WEIGHT_TOL
        facet = self.V[on_facet]
        outside = self.V[~on_facet]
        a = np.linalg.lstsq(facet, np.ones(facet.shape[0]), rcond=None)[0]
        if outside.shape[0] and float(a @ outside[-1]) > 1.0:
            a = -a
        a = a / np.linalg.norm(a)
        return v - 2.0 * float(v @ a) * a