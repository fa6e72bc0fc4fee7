import numpy as np
import pytest

from math_utils import cross, dot, norm, normalized, reflect, refract, vec3


def test_reflect_is_an_involution():
    rng = np.random.default_rng(7)
    for _ in range(20):
        d = normalized(rng.normal(size=3))
        n = normalized(rng.normal(size=3))
        assert np.allclose(reflect(reflect(d, n), n), d, atol=1e-12)


def test_reflect_flips_normal_component():
    r = reflect(vec3(1.0, -1.0, 0.0), vec3(0.0, 1.0, 0.0))
    assert np.allclose(r, (1.0, 1.0, 0.0))


def test_refract_unit_index_passes_straight_through():
    d = normalized(vec3(0.3, -1.0, -0.2))
    assert np.allclose(refract(d, vec3(0.0, 1.0, 0.0), 1.0), d)


def test_refract_bends_towards_normal_when_entering():
    d = normalized(vec3(1.0, -1.0, 0.0))
    n = vec3(0.0, 1.0, 0.0)
    t = normalized(refract(d, n, 1.3))
    # sin(theta_t) = sin(theta_i) / 1.3
    assert t[1] < 0.0
    assert t[0] == pytest.approx(np.sqrt(0.5) / 1.3)


def test_refract_exiting_ray_uses_flipped_normal():
    # leaving the denser medium along the outward normal bends away from it
    d = normalized(vec3(0.3, 1.0, 0.0))
    n = vec3(0.0, 1.0, 0.0)
    t = normalized(refract(d, n, 1.3))
    assert t[1] > 0.0
    assert t[0] > d[0]


def test_refract_total_internal_reflection_sentinel():
    d = normalized(vec3(1.0, 0.2, 0.0))  # grazing exit from inside
    n = vec3(0.0, 1.0, 0.0)
    assert np.array_equal(refract(d, n, 1.5), vec3(1.0, 0.0, 0.0))


def test_basic_algebra():
    a, b = vec3(1.0, 0.0, 0.0), vec3(0.0, 1.0, 0.0)
    assert np.array_equal(cross(a, b), vec3(0.0, 0.0, 1.0))
    assert dot(a, b) == 0.0
    assert norm(vec3(3.0, 4.0, 0.0)) == 5.0
    assert np.allclose(normalized(vec3(0.0, 0.0, -4.0)), (0.0, 0.0, -1.0))


def test_normalized_zero_vector_is_nan():
    assert np.all(np.isnan(normalized(np.zeros(3))))
