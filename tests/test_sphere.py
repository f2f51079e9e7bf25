import numpy as np
import pytest

from volsample.sphere import get_direction, point_in_sphere, point_on_sphere


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.mark.parametrize("dim", [1, 2, 5, 40])
def test_direction_is_unit_vector(rng, dim):
    v = get_direction(dim, rng)
    assert v.shape == (dim,)
    assert np.linalg.norm(v) == pytest.approx(1.0)


def test_direction_rejects_zero_dimension(rng):
    with pytest.raises(ValueError):
        get_direction(0, rng)


@pytest.mark.parametrize("radius", [0.5, 1.0, 7.0])
def test_point_on_sphere_has_radius_norm(rng, radius):
    for _ in range(20):
        p = point_on_sphere(4, radius, rng)
        assert np.linalg.norm(p) == pytest.approx(radius)


def test_point_on_sphere_zero_radius_keeps_unit_direction(rng):
    p = point_on_sphere(3, 0.0, rng)
    assert np.linalg.norm(p) == pytest.approx(1.0)


def test_point_in_sphere_stays_inside(rng):
    norms = [np.linalg.norm(point_in_sphere(3, 2.0, rng)) for _ in range(200)]
    assert max(norms) <= 2.0 + 1e-12
    assert min(norms) >= 0.0


def test_point_in_sphere_radial_distribution(rng):
    # In 2-d, the fraction within half the radius should be about a quarter.
    norms = np.array([np.linalg.norm(point_in_sphere(2, 1.0, rng)) for _ in range(4000)])
    assert abs(np.mean(norms <= 0.5) - 0.25) < 0.04


def test_same_seed_same_points():
    a = point_in_sphere(5, 1.0, np.random.default_rng(7))
    b = point_in_sphere(5, 1.0, np.random.default_rng(7))
    assert np.array_equal(a, b)