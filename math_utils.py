#!/usr/bin/env python3
"""
Vector algebra for the ray tracer.
3-vectors are float64 numpy arrays of shape (3,). Includes reflection and
Snell refraction used by the shading model.
"""

import numpy as np
import numba as nb

# Self-intersection guard shared by every intersection routine
EPS = 1e-3

Vector3 = np.ndarray

# =========================
# Numba-accelerated functions
# =========================

@nb.njit(cache=True)
def _dot3(a, b):
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2]

@nb.njit(cache=True)
def _norm3(v):
    return np.sqrt(v[0]*v[0] + v[1]*v[1] + v[2]*v[2])

@nb.njit(cache=True)
def reflect_nb(I, N):
    """Mirror I about N: I - 2(I.N)N. N is expected to be unit length."""
    d = 2.0 * _dot3(I, N)
    return np.array((I[0] - d*N[0], I[1] - d*N[1], I[2] - d*N[2]))

@nb.njit(cache=True)
def refract_nb(I, N, eta_t, eta_i):
    """
    Snell's law refraction of I through a surface with normal N.
    A ray leaving the material (I.N > 0) is handled by flipping N and
    swapping the two indices. Total internal reflection yields (1, 0, 0).
    """
    cosi = -max(-1.0, min(1.0, _dot3(I, N)))
    sign = 1.0
    if cosi < 0.0:
        cosi = -cosi
        sign = -1.0
        eta_i, eta_t = eta_t, eta_i
    eta = eta_i / eta_t
    k = 1.0 - eta*eta*(1.0 - cosi*cosi)
    if k < 0.0:
        return np.array((1.0, 0.0, 0.0))
    c = sign * (eta*cosi - np.sqrt(k))
    return np.array((I[0]*eta + N[0]*c,
                     I[1]*eta + N[1]*c,
                     I[2]*eta + N[2]*c))

# =========================
# Standard Python functions
# =========================

def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Vector3:
    """Build a float64 3-vector."""
    return np.array((x, y, z), dtype=np.float64)

def as_vec3(v) -> Vector3:
    """Coerce any 3-sequence to a contiguous float64 array."""
    return np.ascontiguousarray(v, dtype=np.float64).reshape(3)

def dot(a: Vector3, b: Vector3) -> float:
    return float(_dot3(a, b))

def cross(a: Vector3, b: Vector3) -> Vector3:
    return np.array((a[1]*b[2] - a[2]*b[1],
                     a[2]*b[0] - a[0]*b[2],
                     a[0]*b[1] - a[1]*b[0]), dtype=np.float64)

def norm(v: Vector3) -> float:
    return float(_norm3(v))

def normalized(v: Vector3) -> Vector3:
    """
    Scale v to unit length.
    A zero vector gives NaN components; callers only pass non-zero directions.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.asarray(v, dtype=np.float64) / np.float64(norm(v))

def reflect(I: Vector3, N: Vector3) -> Vector3:
    """Reflect incident direction I off a surface with unit normal N."""
    return reflect_nb(as_vec3(I), as_vec3(N))

def refract(I: Vector3, N: Vector3, eta_t: float, eta_i: float = 1.0) -> Vector3:
    """
    Refract I through a boundary between media eta_i (outside) and eta_t
    (inside). Not normalized.
    """
    return refract_nb(as_vec3(I), as_vec3(N), float(eta_t), float(eta_i))
