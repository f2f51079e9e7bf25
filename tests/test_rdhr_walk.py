import numpy as np

from volsample.ball import Ball
from volsample.rdhr_walk import RDHRWalk


def _run(seed, steps=50):
    ball = Ball(np.zeros(3), 4.0)
    rng = np.random.default_rng(seed)
    start = np.zeros(3)
    walk = RDHRWalk(ball, start, rng)
    p = start
    points = []
    for _ in range(steps):
        p = walk.apply(ball, p, 3, rng)
        points.append(p)
    return ball, np.array(points)


def test_points_stay_inside_ball():
    ball, points = _run(5)
    assert points.shape == (50, 3)
    assert all(ball.is_in(q) for q in points)


def test_reproducible_with_same_seed():
    _, a = _run(11)
    _, b = _run(11)
    assert np.allclose(a, b)


def test_walk_moves():
    _, points = _run(3)
    assert np.ptp(points, axis=0).min() > 0.0


def test_zero_length_returns_current_position():
    ball = Ball(np.zeros(2), 1.0)
    rng = np.random.default_rng(0)
    walk = RDHRWalk(ball, np.zeros(2), rng)
    current = walk.position
    assert ball.is_in(current)
    assert np.allclose(walk.apply(ball, current, 0, rng), current)


def test_returned_point_is_a_copy():
    ball = Ball(np.zeros(2), 1.0)
    rng = np.random.default_rng(4)
    walk = RDHRWalk(ball, np.zeros(2), rng)
    q = walk.apply(ball, np.zeros(2), 2, rng)
    q[:] = 100.0
    assert ball.is_in(walk.position)