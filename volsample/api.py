"""Entry points: exact sampling from standard bodies, exact volumes and inscribed balls."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from itertools import combinations

import numpy as np

from volsample.lp import chebyshev_ball, point_in_intersection
from volsample.oracles import intersect_double_line_vpolytope, intersect_line_zonotope
from volsample.simplex import sample_canonical_simplex, sample_unit_simplex
from volsample.sphere import point_in_sphere, point_on_sphere
from volsample.vpolytope import VPolytope

__all__ = ["PolytopeSpec", "direct_sampling", "exact_vol", "inner_ball"]

_KINDS = ("Hpolytope", "Vpolytope", "Zonotope", "VpolytopeIntersection")
_DIM_SLOT = {"Hpolytope": "A", "Vpolytope": "V", "Zonotope": "G", "VpolytopeIntersection": "V1"}


@dataclass
class PolytopeSpec:
    """A convex polytope described by its representation and matrices.

    ``type`` is one of ``"Hpolytope"`` (``A x <= b``), ``"Vpolytope"`` (rows of
    ``V`` are vertices), ``"Zonotope"`` (rows of ``G`` are generators of segments
    ``[-g, g]``) or ``"VpolytopeIntersection"`` (intersection of the hulls of
    ``V1`` and ``V2``). A positive ``volume`` declares the exact volume.
    """

    type: str
    A: np.ndarray | None = None
    b: np.ndarray | None = None
    V: np.ndarray | None = None
    G: np.ndarray | None = None
    V1: np.ndarray | None = None
    V2: np.ndarray | None = None
    volume: float | None = None

    def matrix(self, name: str) -> np.ndarray:
        value = getattr(self, name)
        if value is None:
            raise ValueError(f"{self.type} needs the matrix {name}")
        mat = np.asarray(value, dtype=float)
        if mat.ndim != 2:
            raise ValueError(f"{name} must be a two-dimensional matrix")
        return mat

    def dimension(self) -> int:
        if self.type not in _KINDS:
            raise ValueError("Unknown polytope representation!")
        return self.matrix(_DIM_SLOT[self.type]).shape[1]


def direct_sampling(body: Mapping, n: int) -> np.ndarray:
    """Sample ``n`` exact uniform points from a standard body.

    ``body`` holds ``type`` (``"hypersphere"``, ``"ball"``, ``"unit_simplex"`` or
    ``"canonical_simplex"``), ``dimension``, and optionally ``radius`` (default 1)
    and ``seed``. Returns a ``dimension x n`` array with one point per column.
    """
    if "dimension" not in body:
        raise ValueError("Dimension has to be given as input!")
    dim = int(body["dimension"])
    if dim <= 1:
        raise ValueError("Dimension has to be larger than 1!")

    seed = body.get("seed")
    seed_value = None if seed is None else int(seed)
    rng = np.random.default_rng(seed_value)

    if n <= 0:
        raise ValueError("The number of samples has to be a positive integer!")

    radius = 1.0
    if "radius" in body:
        radius = float(body["radius"])
        if radius <= 0:
            raise ValueError("Radius has to be a positive number!")

    if "type" not in body:
        raise ValueError("The kind of body has to be given as input!")
    kind = body["type"]

    if kind == "hypersphere":
        points = np.array([point_on_sphere(dim, radius, rng) for _ in range(n)])
    elif kind == "ball":
        points = np.array([point_in_sphere(dim, radius, rng) for _ in range(n)])
    elif kind == "unit_simplex":
        points = sample_unit_simplex(dim, n, seed_value)
    elif kind == "canonical_simplex":
        points = sample_canonical_simplex(dim, n, seed_value)
    else:
        raise ValueError("Wrong input!")
    return points.T


def _zonotope_volume(G: np.ndarray) -> float:
    m, d = G.shape
    total = sum(abs(np.linalg.det(G[list(rows)])) for rows in combinations(range(m), d))
    return float(total) * 2.0**d


def exact_vol(P: PolytopeSpec) -> float:
    """Exact volume of a zonotope, of a simplex in V-representation, or the declared volume."""
    if P.volume is not None and P.volume > 0:
        return float(P.volume)
    dim = P.dimension()

    if P.type == "Vpolytope":
        V = P.matrix("V")
        if V.shape[0] != dim + 1:
            raise ValueError("Volume unknown!")
        edges = V[:dim] - V[dim]
        return abs(float(np.linalg.det(edges))) / math.factorial(dim)
    if P.type == "Zonotope":
        return _zonotope_volume(P.matrix("G"))
    raise ValueError("Volume unknown!")


def _axis_radius(chord, center: np.ndarray) -> float:
    dim = center.shape[0]
    radius = math.inf
    for axis in np.eye(dim):
        upper, lower = chord(center, axis)
        radius = min(radius, upper, -lower)
    return radius / math.sqrt(dim)


def _intersection_ball(V1: np.ndarray, V2: np.ndarray) -> tuple[np.ndarray, float]:
    if V1.shape[1] != V2.shape[1]:
        raise ValueError("V1 and V2 must have the same number of columns")
    count = V1.shape[0] + V2.shape[0]
    found = [point_in_intersection(V1, V2, weights) for weights in np.eye(count)]
    if any(point is None for point in found):
        raise ValueError("Empty set!")
    center = np.mean(found, axis=0)

    def chord(point, axis):
        up1, low1 = intersect_double_line_vpolytope(V1, point, axis)
        up2, low2 = intersect_double_line_vpolytope(V2, point, axis)
        return min(up1, up2), max(low1, low2)

    return center, _axis_radius(chord, center)


def inner_ball(P: PolytopeSpec) -> np.ndarray:
    """A ball inside the polytope, as ``d + 1`` numbers: the centre, then the radius.

    For H-polytopes this is the Chebyshev ball. For zonotopes the ball is
    centred at the origin with radius ``r / sqrt(d)``, ``r`` being the smallest
    distance to the boundary along the coordinate axes.
    """
    dim = P.dimension()
    if P.type == "Hpolytope":
        b = P.b
        if b is None:
            raise ValueError("Hpolytope needs the vector b")
        center, radius = chebyshev_ball(P.matrix("A"), b)
    elif P.type == "Vpolytope":
        center, radius = VPolytope(P.matrix("V")).compute_inner_ball()
    elif P.type == "Zonotope":
        G = P.matrix("G")
        center = np.zeros(dim)
        radius = _axis_radius(lambda p, v: intersect_line_zonotope(G, p, v), center)
    else:
        center, radius = _intersection_ball(P.matrix("V1"), P.matrix("V2"))
    return np.append(center, radius)