"""Exact uniform sampling from the unit, canonical and arbitrary simplices."""

from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np

__all__ = ["sample_unit_simplex", "sample_canonical_simplex", "sample_arbitrary_simplex"]

_M = 2147483647
_SMALL_DIM = 60
_MEDIUM_DIM = 80


def _make_rng(seed: float | int | None) -> np.random.Generator:
    if seed is None or (isinstance(seed, float) and math.isnan(seed)):
        return np.random.default_rng()
    return np.random.default_rng(int(seed))


def _draw(rng: np.random.Generator) -> int:
    return int(rng.integers(1, _M, endpoint=True))


def _filter_prime(dim: int) -> int:
    """Smallest odd prime at least ``3 * dim + 1``."""
    pr = 3 * dim + 1
    if pr % 2 == 0:
        pr += 1
    while True:
        limit = math.isqrt(pr) + 1
        if all(pr % i for i in range(3, limit + 1, 2)):
            return pr
        pr += 2


def _distinct_draws(rng: np.random.Generator, count: int, key: Callable[[int], int]) -> list[int]:
    seen: set[int] = set()
    draws: list[int] = []
    while len(draws) < count:
        x = _draw(rng)
        k = key(x)
        if k not in seen:
            seen.add(k)
            draws.append(x)
    return draws


def _spacings(rng: np.random.Generator, dim: int, closed: bool) -> np.ndarray:
    """Gaps between ``dim`` sorted distinct integers in ``[1, M]``, scaled by ``M``.

    With ``closed`` the gap up to ``M`` is included, giving ``dim + 1`` weights summing to one.
    """
    if dim <= _SMALL_DIM:
        draws = _distinct_draws(rng, dim, lambda x: x)
    else:
        pr = _filter_prime(dim)
        draws = _distinct_draws(rng, dim, lambda x: x % pr)
    cuts = [0, *sorted(draws)]
    if closed:
        cuts.append(_M)
    return np.diff(np.array(cuts, dtype=float)) / _M


def _exponential_weights(rng: np.random.Generator, count: int) -> np.ndarray:
    draws = np.array([_draw(rng) for _ in range(count)], dtype=float)
    weights = -np.log(draws / _M)
    return weights / weights.sum()


def _check(dim: int, num: int) -> None:
    if dim < 1:
        raise ValueError("dimension has to be a positive integer")
    if num < 0:
        raise ValueError("number of points cannot be negative")


def sample_unit_simplex(dim: int, num: int, seed: float | int | None = None) -> np.ndarray:
    """Sample ``num`` uniform points from ``{x >= 0, sum(x) <= 1}`` in ``dim`` dimensions.

    Returns an array of shape ``(num, dim)``.
    """
    _check(dim, num)
    rng = _make_rng(seed)
    points = np.empty((num, dim))
    for row in points:
        if dim <= _MEDIUM_DIM:
            row[:] = _spacings(rng, dim, closed=False)
        else:
            row[:] = _exponential_weights(rng, dim + 1)[:dim]
    return points


def sample_canonical_simplex(dim: int, num: int, seed: float | int | None = None) -> np.ndarray:
    """Sample ``num`` uniform points from ``{x >= 0, sum(x) = 1}`` in ``dim`` coordinates.

    Returns an array of shape ``(num, dim)``.
    """
    _check(dim, num)
    rng = _make_rng(seed)
    points = np.empty((num, dim))
    for row in points:
        row[:] = _exponential_weights(rng, dim)
    return points


def sample_arbitrary_simplex(vertices, num: int, seed: float | int | None = None) -> np.ndarray:
    """Sample ``num`` uniform points from the simplex spanned by the rows of ``vertices``.

    ``vertices`` holds at least ``d + 1`` points of dimension ``d``; the first ``d + 1`` are used.
    """
    V = np.asarray(vertices, dtype=float)
    if V.ndim != 2:
        raise ValueError("vertices must be a two-dimensional array")
    dim = V.shape[1]
    _check(dim, num)
    if V.shape[0] < dim + 1:
        raise ValueError("a simplex needs dimension + 1 vertices")
    corners = V[: dim + 1]
    rng = _make_rng(seed)
    points = np.empty((num, dim))
    for row in points:
        if dim <= _MEDIUM_DIM:
            weights = _spacings(rng, dim, closed=True)
        else:
            weights = _exponential_weights(rng, dim + 1)
        row[:] = weights @ corners
    return points