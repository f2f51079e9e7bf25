"""Euclidean ball used as a convex body by the samplers."""

from __future__ import annotations

import math

import numpy as np

__all__ = ["Ball"]


class Ball:
    """Ball with a given centre and *squared* radius.

    The membership and intersection oracles treat the ball as centred at the
    origin, as the walks that use it always do.
    """

    def __init__(self, center, squared_radius: float) -> None:
        self.center = np.array(center, dtype=float)
        if self.center.ndim != 1:
            raise ValueError("ball centre must be a vector")
        if squared_radius < 0:
            raise ValueError("squared radius cannot be negative")
        self.squared_radius = float(squared_radius)

    @property
    def radius(self) -> float:
        return math.sqrt(self.squared_radius)

    def inner_ball(self) -> tuple[np.ndarray, float]:
        """Return the centre and the squared radius."""
        return self.center.copy(), self.squared_radius

    def dimension(self) -> int:
        return self.center.shape[0]

    def num_of_hyperplanes(self) -> int:
        return 0

    def is_in(self, p) -> bool:
        """Whether ``p`` lies in the ball centred at the origin."""
        x = np.asarray(p, dtype=float)
        return bool(x @ x <= self.squared_radius)

    def line_intersect(self, r, v) -> tuple[float, float]:
        """Parameters ``t`` where ``r + t * v`` meets the sphere, larger first."""
        r = np.asarray(r, dtype=float)
        v = np.asarray(v, dtype=float)
        vrc = float(v @ r)
        v2 = float(v @ v)
        rc2 = float(r @ r)
        disc_sqrt = math.sqrt(vrc * vrc - v2 * (rc2 - self.squared_radius))
        return (-vrc + disc_sqrt) / v2, (-vrc - disc_sqrt) / v2

    def line_positive_intersect(self, r, v) -> tuple[float, int]:
        """Positive parameter of the ray ``r + t * v`` on the sphere, with facet index 0."""
        return self.line_intersect(r, v)[0], 0

    def line_intersect_coord(self, r, rand_coord: int) -> tuple[float, float]:
        """Intersection parameters of the line through ``r`` along coordinate ``rand_coord``."""
        r = np.asarray(r, dtype=float)
        if not 0 <= rand_coord < r.shape[0]:
            raise IndexError("coordinate out of range")
        vrc = float(r[rand_coord])
        rc2 = self.squared_radius - float(r @ r)
        disc_sqrt = math.sqrt(vrc * vrc + rc2)
        return -vrc + disc_sqrt, -vrc - disc_sqrt

    def compute_reflection(self, v, p) -> np.ndarray:
        """Reflect direction ``v`` on the sphere at boundary point ``p``."""
        v = np.asarray(v, dtype=float)
        p = np.asarray(p, dtype=float)
        normal = p / math.sqrt(float(p @ p))
        return v - 2.0 * float(v @ normal) * normal