"""Uniform random points on and inside a hypersphere centred at the origin."""

from __future__ import annotations

import numpy as np

__all__ = ["get_direction", "point_in_sphere", "point_on_sphere"]


def _check_dim(dim: int) -> None:
    if dim < 1:
        raise ValueError("dimension has to be a positive integer")


def get_direction(dim: int, rng: np.random.Generator) -> np.ndarray:
    """Return a uniformly distributed unit vector in ``dim`` dimensions."""
    _check_dim(dim)
    direction = rng.standard_normal(dim)
    return direction / np.sqrt(direction @ direction)


def point_in_sphere(dim: int, radius: float, rng: np.random.Generator) -> np.ndarray:
    """Return a uniform point from the ball of the given radius."""
    direction = get_direction(dim, rng)
    scale = rng.random() ** (1.0 / dim)
    return direction * (radius * scale)


def point_on_sphere(dim: int, radius: float, rng: np.random.Generator) -> np.ndarray:
    """Return a uniform point from the boundary of the ball of the given radius.

    A radius of zero leaves the unit direction unscaled.
    """
    direction = get_direction(dim, rng)
    if radius != 0:
        direction = direction * radius
    return direction