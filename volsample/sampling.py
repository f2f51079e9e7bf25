"""Drive random walks to produce uniform, Gaussian and boundary samples from a body.

A walk type is called as ``walk_type(body, p, rng)`` (``walk_type(body, p, a, rng)``
for Gaussian walks) and its ``apply`` method returns the walk's next point, or the
pair of boundary points for boundary walks. Walk parameters can be bound in
advance, for instance with :func:`functools.partial`.
"""

from __future__ import annotations

import numpy as np

__all__ = [
    "random_points",
    "gaussian_random_points",
    "boundary_random_points",
    "uniform_sampling",
    "uniform_sampling_boundary",
    "gaussian_sampling",
]


def _check_counts(*counts: int) -> None:
    if any(c < 0 for c in counts):
        raise ValueError("numbers of points and steps cannot be negative")


def random_points(walk_type, body, p, rnum: int, walk_length: int, rng) -> list[np.ndarray]:
    """Run a new walk from ``p`` and collect ``rnum`` points, ``walk_length`` steps apart."""
    _check_counts(rnum, walk_length)
    point = np.asarray(p, dtype=float)
    walk = walk_type(body, point, rng)
    points = []
    for _ in range(rnum):
        point = walk.apply(body, point, walk_length, rng)
        points.append(point)
    return points


def gaussian_random_points(walk_type, body, p, a: float, rnum: int, walk_length: int, rng) -> list[np.ndarray]:
    """Like :func:`random_points` for a walk targeting the Gaussian ``exp(-a |x|^2)``."""
    _check_counts(rnum, walk_length)
    point = np.asarray(p, dtype=float)
    walk = walk_type(body, point, a, rng)
    points = []
    for _ in range(rnum):
        point = walk.apply(body, point, a, walk_length, rng)
        points.append(point)
    return points


def boundary_random_points(walk_type, body, p, rnum: int, walk_length: int, rng) -> list[np.ndarray]:
    """Run a boundary walk from ``p``; each of ``rnum`` iterations yields two points."""
    _check_counts(rnum, walk_length)
    walk = walk_type(body, np.asarray(p, dtype=float), rng)
    p1 = np.zeros(body.dimension())
    p2 = np.zeros(body.dimension())
    points = []
    for _ in range(rnum):
        p1, p2 = walk.apply(body, p1, p2, walk_length, rng)
        points.extend((p1, p2))
    return points


def _as_array(points: list[np.ndarray], dim: int) -> np.ndarray:
    return np.array(points) if points else np.empty((0, dim))


def uniform_sampling(walk_type, body, rng, walk_len: int, rnum: int, starting_point, nburns: int) -> np.ndarray:
    """Discard ``nburns`` points, then return ``rnum`` points as rows of an array."""
    start = np.asarray(starting_point, dtype=float)
    burned = random_points(walk_type, body, start, nburns, walk_len, rng)
    point = burned[-1] if burned else start
    samples = random_points(walk_type, body, point, rnum, walk_len, rng)
    return _as_array(samples, start.shape[0])


def uniform_sampling_boundary(
    walk_type, body, rng, walk_len: int, rnum: int, starting_point, nburns: int
) -> np.ndarray:
    """Burn in, then return ``2 * (rnum // 2)`` boundary points as rows of an array."""
    start = np.asarray(starting_point, dtype=float)
    boundary_random_points(walk_type, body, start, nburns, walk_len, rng)
    samples = boundary_random_points(walk_type, body, start, rnum // 2, walk_len, rng)
    return _as_array(samples, body.dimension())


def gaussian_sampling(
    walk_type, body, rng, walk_len: int, rnum: int, a: float, starting_point, nburns: int
) -> np.ndarray:
    """Discard ``nburns`` Gaussian-walk points, then return ``rnum`` points as rows."""
    start = np.asarray(starting_point, dtype=float)
    burned = gaussian_random_points(walk_type, body, start, a, nburns, walk_len, rng)
    point = burned[-1] if burned else start
    samples = gaussian_random_points(walk_type, body, point, a, rnum, walk_len, rng)
    return _as_array(samples, start.shape[0])