import numpy as np
import pytest

from volsample.lp import LinearProgramError, chebyshev_ball, point_in_intersection

SQUARE_A = np.array([[1.0, 0.0], [-1.0, 0.0], [0.0, 1.0], [0.0, -1.0]])
SQUARE_B = np.array([1.0, 0.0, 1.0, 0.0])


def test_chebyshev_ball_of_unit_square():
    center, radius = chebyshev_ball(SQUARE_A, SQUARE_B)
    assert radius == pytest.approx(0.5)
    np.testing.assert_allclose(center, [0.5, 0.5], atol=1e-9)


def test_chebyshev_ball_fits_inside_simplex():
    A = np.array([[-1.0, 0.0, 0.0], [0.0, -1.0, 0.0], [0.0, 0.0, -1.0], [1.0, 1.0, 1.0]])
    b = np.array([0.0, 0.0, 0.0, 1.0])
    center, radius = chebyshev_ball(A, b)
    assert radius > 0
    slack = b - A @ center - np.linalg.norm(A, axis=1) * radius
    assert np.all(slack >= -1e-9)
    # Tight against at least one facet.
    assert np.min(slack) == pytest.approx(0.0, abs=1e-9)


def test_chebyshev_ball_infeasible_raises():
    A = np.array([[1.0], [-1.0]])
    b = np.array([-1.0, -1.0])
    with pytest.raises(LinearProgramError):
        chebyshev_ball(A, b)


def test_chebyshev_ball_unbounded_raises():
    with pytest.raises(LinearProgramError):
        chebyshev_ball(np.array([[1.0, 0.0]]), np.array([1.0]))


def test_chebyshev_ball_shape_mismatch():
    with pytest.raises(ValueError):
        chebyshev_ball(SQUARE_A, SQUARE_B[:3])


def test_point_in_intersection_lies_in_both():
    V1 = np.array([[0.0, 0.0], [2.0, 0.0], [0.0, 2.0]])
    V2 = np.array([[1.0, 1.0], [3.0, 1.0], [3.0, 3.0], [1.0, 3.0]])
    point = point_in_intersection(V1, V2, np.ones(7))
    assert point.shape == (2,)
    # In the triangle and in the square.
    assert point[0] >= -1e-9 and point[1] >= -1e-9 and point.sum() <= 2.0 + 1e-9
    assert np.all(point >= 1.0 - 1e-9) and np.all(point <= 3.0 + 1e-9)


def test_point_in_intersection_single_common_point():
    V1 = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
    V2 = np.array([[1.0, 0.0], [2.0, 0.0], [1.0, 1.0]])
    point = point_in_intersection(V1, V2, np.zeros(6))
    np.testing.assert_allclose(point, V1[1], atol=1e-9)


def test_point_in_intersection_disjoint_is_none():
    V1 = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
    V2 = V1 + 5.0
    assert point_in_intersection(V1, V2, np.zeros(6)) is None


def test_point_in_intersection_direction_length_checked():
    V1 = np.eye(2)
    with pytest.raises(ValueError):
        point_in_intersection(V1, V1, np.zeros(2))