"""Linear matrix inequalities and the spectrahedra they describe."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

__all__ = ["LMI", "Spectrahedron"]


class LMI:
    """Linear matrix inequality ``A_0 + sum_i x_i A_i``.

    Only the upper triangle of each ``A_i`` (``i >= 1``) is used when
    evaluating, so results are always symmetric.
    """

    def __init__(self, matrices: Sequence) -> None:
        mats = [np.array(a, dtype=float) for a in matrices]
        if not mats:
            raise ValueError("an LMI needs at least the matrix A_0")
        m = mats[0].shape[0] if mats[0].ndim == 2 else -1
        if any(a.shape != (m, m) for a in mats):
            raise ValueError("all LMI matrices must be square and of the same size")
        self.matrices = mats
        self.d = len(mats) - 1
        self.m = m
        self._upper = np.triu_indices(m)
        self.vector_matrix = (
            np.column_stack([a[self._upper] for a in mats[1:]])
            if self.d
            else np.zeros((m * (m + 1) // 2, 0))
        )

    def dimension(self) -> int:
        return self.d

    def size_of_matrices(self) -> int:
        return self.m

    def _vector(self, x) -> np.ndarray:
        x = np.asarray(x, dtype=float)
        if x.shape != (self.d,):
            raise ValueError("vector dimension does not match the LMI")
        return x

    def evaluate_without_a0(self, x) -> np.ndarray:
        """Return ``sum_i x_i A_i`` built from the upper triangles."""
        values = self.vector_matrix @ self._vector(x)
        result = np.empty((self.m, self.m))
        rows, cols = self._upper
        result[rows, cols] = values
        result[cols, rows] = values
        return result

    def evaluate(self, x) -> np.ndarray:
        """Return ``A_0 + sum_i x_i A_i``."""
        return self.evaluate_without_a0(x) + self.matrices[0]

    def normalized_determinant_gradient(self, p, e) -> np.ndarray:
        """Normalized gradient of the determinant at ``p``, given ``lmi(p) e = 0``.

        A zero gradient is returned unchanged.
        """
        self._vector(p)
        e = np.asarray(e, dtype=float)
        if e.shape != (self.m,):
            raise ValueError("kernel vector size does not match the matrices")
        grad = np.array([e @ (a @ e) for a in self.matrices[1:]], dtype=float)
        norm = np.linalg.norm(grad)
        return grad / norm if norm > 0 else grad

    def __str__(self) -> str:
        return "\n\n".join(f"A{i}\n{a}" for i, a in enumerate(self.matrices))


class Spectrahedron:
    """Set of points where an LMI is negative semidefinite."""

    def __init__(self, lmi: LMI) -> None:
        self.lmi = lmi

    def dimension(self) -> int:
        return self.lmi.dimension()