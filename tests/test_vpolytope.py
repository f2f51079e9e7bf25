import math

import numpy as np
import pytest

from volsample.vpolytope import VPolytope

SQUARE = [[1.0, 1.0], [1.0, -1.0], [-1.0, 1.0], [-1.0, -1.0]]


@pytest.fixture
def square():
    return VPolytope(SQUARE)


def test_dimensions(square):
    assert square.dimension() == 2
    assert square.num_of_vertices() == 4
    assert square.upper_bound_of_hyperplanes() == 4


def test_rejects_bad_matrix():
    with pytest.raises(ValueError):
        VPolytope([1.0, 2.0])


def test_mean_and_max_norm(square):
    assert np.allclose(square.mean_of_vertices(), [0.0, 0.0])
    assert square.max_vertex_norm() == pytest.approx(math.sqrt(2.0))


def test_membership(square):
    assert square.is_in([0.0, 0.0])
    assert square.is_in([0.5, -0.5])
    assert not square.is_in([2.0, 0.0])


def test_line_intersect(square):
    upper, lower = square.line_intersect([0.0, 0.0], [1.0, 0.0])
    assert upper == pytest.approx(1.0)
    assert lower == pytest.approx(-1.0)


def test_line_intersect_coord_matches_line_intersect(square):
    r = [0.2, -0.3]
    assert np.allclose(square.line_intersect_coord(r, 1), square.line_intersect(r, [0.0, 1.0]))
    with pytest.raises(IndexError):
        square.line_intersect_coord(r, 2)


def test_line_positive_intersect_lands_on_boundary(square):
    r = np.array([0.1, 0.2])
    v = np.array([1.0, 0.5])
    t, facet = square.line_positive_intersect(r, v)
    assert facet == 1
    assert t > 0
    hit = r + t * v
    assert np.max(np.abs(hit)) == pytest.approx(1.0)


def test_compute_reflection(square):
    v = np.array([1.0, 0.5])
    square.line_positive_intersect([0.0, 0.0], v)
    reflected = square.compute_reflection(v, [1.0, 0.5])
    assert np.allclose(reflected, [-1.0, 0.5])
    assert np.linalg.norm(reflected) == pytest.approx(np.linalg.norm(v))


def test_compute_reflection_needs_ray(square):
    with pytest.raises(RuntimeError):
        square.compute_reflection([1.0, 0.0], [1.0, 0.0])


def test_compute_inner_ball_square(square):
    center, radius = square.compute_inner_ball()
    assert np.allclose(center, [0.0, 0.0], atol=1e-6)
    assert radius == pytest.approx(1.0 / math.sqrt(2.0), rel=1e-4)
    stored_center, stored_radius = square.inner_ball()
    assert stored_radius == radius
    assert np.allclose(stored_center, center)


def test_inner_ball_lies_inside():
    poly = VPolytope([[0.0, 0.0], [3.0, 0.0], [0.0, 2.0], [2.0, 2.0]])
    center, radius = poly.compute_inner_ball()
    assert radius > 0
    for direction in np.eye(2):
        assert poly.is_in(center + radius * direction)
        assert poly.is_in(center - radius * direction)


def test_many_vertices_uses_mean():
    angles = np.linspace(0.0, 2 * np.pi, 41, endpoint=False)
    circle = np.column_stack([np.cos(angles), np.sin(angles)]) + [3.0, -1.0]
    poly = VPolytope(circle)
    assert poly.points_for_rounding() is None
    center, radius = poly.compute_inner_ball()
    assert np.allclose(center, circle.mean(axis=0))
    assert radius > 0


def test_points_for_rounding_returns_vertices(square):
    assert np.array_equal(square.points_for_rounding(), np.array(SQUARE))


def test_inscribed_simplex_ball_unit_triangle(square):
    center, radius = square.inscribed_simplex_ball([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
    assert np.allclose(center, [radius, radius])
    # distance from the centre to the hypotenuse x + y = 1 equals the radius
    assert (1.0 - center.sum()) / math.sqrt(2.0) == pytest.approx(radius)


def test_inscribed_simplex_ball_wrong_count(square):
    with pytest.raises(ValueError):
        square.inscribed_simplex_ball([[0.0, 0.0], [1.0, 0.0]])


def test_shift(square):
    square.shift([1.0, 2.0])
    assert np.allclose(square.V, np.array(SQUARE) - [1.0, 2.0])
    assert square.is_in([-1.0, -2.0])
    with pytest.raises(ValueError):
        square.shift([1.0])


def test_linear_transform_round_trip(square):
    T = np.array([[2.0, 1.0], [0.0, 3.0]])
    square.linear_transform(T)
    assert np.allclose(square.V @ T.T, np.array(SQUARE))
    square.linear_transform(np.linalg.inv(T))
    assert np.allclose(square.V, np.array(SQUARE))


def test_get_dists(square):
    assert square.get_dists(0.5) == [0.5] * 4