"""Ellipsoid described by a symmetric matrix, as used for copula construction."""

from __future__ import annotations

import numpy as np

__all__ = ["CopulaEllipsoid"]


class CopulaEllipsoid:
    """Family of concentric ellipsoids ``x^T G x = c`` centred at the origin."""

    def __init__(self, G) -> None:
        matrix = np.array(G, dtype=float)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError("ellipsoid matrix must be square")
        self.G = matrix

    @property
    def dim(self) -> int:
        return self.G.shape[0]

    def mat_mult(self, p) -> float:
        """Return the quadratic form ``p^T G p``."""
        x = np.asarray(p, dtype=float)
        if x.shape != (self.dim,):
            raise ValueError("point dimension does not match the ellipsoid")
        return float(x @ self.G @ x)