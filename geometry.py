#!/usr/bin/env python3
"""
Materials and geometric primitives of the scene: a checkerboard floor tile,
spheres and an axis-aligned box, plus point lights.
Each primitive reports the nearest parametric distance beyond EPS.
"""

import numpy as np
import numba as nb
from dataclasses import dataclass, field
from typing import Optional, Tuple
from math_utils import EPS, Vector3, as_vec3

def _frozen_vec3(v) -> Vector3:
    a = np.array(v, dtype=np.float64).reshape(3)
    a.setflags(write=False)
    return a

@dataclass(frozen=True, eq=False)
class Material:
    """
    Surface response. albedo weights (diffuse, specular, reflect, refract)
    are blend factors, not an energy budget.
    """
    refractive_index: float = 1.0
    albedo: Tuple[float, float, float, float] = (2.0, 0.0, 0.0, 0.0)
    diffuse_color: Vector3 = field(default_factory=lambda: np.zeros(3))
    specular_exponent: float = 0.0

    def __post_init__(self):
        if self.refractive_index < 1.0:
            raise ValueError(f"refractive_index must be >= 1, got {self.refractive_index}")
        if len(self.albedo) != 4:
            raise ValueError("albedo needs exactly 4 weights (diffuse, specular, reflect, refract)")
        if self.specular_exponent < 0.0:
            raise ValueError(f"specular_exponent must be >= 0, got {self.specular_exponent}")
        object.__setattr__(self, 'albedo', tuple(float(a) for a in self.albedo))
        object.__setattr__(self, 'diffuse_color', _frozen_vec3(self.diffuse_color))

# =========================
# Numba-accelerated intersection kernels
# =========================

@nb.njit(cache=True)
def ray_sphere_intersect_nb(o, d, center, radius, eps):
    """Returns (hit, t) with t the nearest root beyond eps."""
    L0 = center[0] - o[0]
    L1 = center[1] - o[1]
    L2 = center[2] - o[2]
    tca = L0*d[0] + L1*d[1] + L2*d[2]
    d2 = L0*L0 + L1*L1 + L2*L2 - tca*tca
    r2 = radius*radius
    if d2 > r2:
        return False, 0.0
    thc = np.sqrt(r2 - d2)
    t0 = tca - thc
    t1 = tca + thc
    if t0 > eps:
        return True, t0
    if t1 > eps:
        return True, t1
    return False, 0.0

@nb.njit(cache=True)
def ray_box_intersect_nb(o, d, center, size, eps):
    """
    Slab test against an axis-aligned cube.
    Returns (hit, tmin, outward normal of the entry face). The entry axis is
    recorded while the intervals are clipped.
    """
    half = 0.5 * size
    tmin = -np.inf
    tmax = np.inf
    axis = -1
    normal = np.zeros(3)
    for i in range(3):
        lo = center[i] - half - o[i]
        hi = center[i] + half - o[i]
        if d[i] == 0.0:
            # parallel to this slab
            if lo > 0.0 or hi < 0.0:
                return False, 0.0, normal
            continue
        t0 = lo / d[i]
        t1 = hi / d[i]
        if t0 > t1:
            t0, t1 = t1, t0
        if tmin > t1 or t0 > tmax:
            return False, 0.0, normal
        if t0 > tmin:
            tmin = t0
            axis = i
        if t1 < tmax:
            tmax = t1
    if axis < 0 or tmin <= eps:
        return False, 0.0, normal
    normal[axis] = -1.0 if d[axis] > 0.0 else 1.0
    return True, tmin, normal

# =========================
# Primitives
# =========================

@dataclass(frozen=True, eq=False)
class Sphere:
    center: Vector3
    radius: float
    material: Material

    def __post_init__(self):
        if self.radius <= 0:
            raise ValueError(f"Sphere radius must be > 0, got {self.radius}")
        object.__setattr__(self, 'center', _frozen_vec3(self.center))

    def intersect(self, orig: Vector3, dir: Vector3) -> Optional[float]:
        """Nearest distance along the ray beyond EPS, or None."""
        hit, t = ray_sphere_intersect_nb(as_vec3(orig), as_vec3(dir), self.center,
                                         float(self.radius), EPS)
        return t if hit else None

    def normal_at(self, point: Vector3) -> Vector3:
        n = point - self.center
        return n / np.sqrt(np.dot(n, n))

@dataclass(frozen=True, eq=False)
class Box:
    """Axis-aligned cube of edge `size` centred at `center`."""
    center: Vector3
    size: float
    material: Material

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError(f"Box size must be > 0, got {self.size}")
        object.__setattr__(self, 'center', _frozen_vec3(self.center))

    def intersect(self, orig: Vector3, dir: Vector3) -> Optional[Tuple[float, Vector3]]:
        """Returns (t, outward face normal) or None."""
        hit, t, n = ray_box_intersect_nb(as_vec3(orig), as_vec3(dir), self.center,
                                         float(self.size), EPS)
        return (t, n) if hit else None

EVEN_TONE = (0.4, 0.4, 0.4)
ODD_TONE = (0.4, 0.3, 0.2)

@dataclass(frozen=True, eq=False)
class FloorTile:
    """
    Finite horizontal plane y = height with a two-tone checkerboard.
    The tile covers |x| < half_width and z_far < z < z_near.
    """
    height: float = -3.0
    half_width: float = 12.0
    z_near: float = -12.0
    z_far: float = -28.0
    cell_size: float = 2.0
    even_material: Material = field(default_factory=lambda: Material(diffuse_color=EVEN_TONE))
    odd_material: Material = field(default_factory=lambda: Material(diffuse_color=ODD_TONE))

    def __post_init__(self):
        if self.z_far >= self.z_near:
            raise ValueError("z_far must lie beyond z_near (more negative)")
        if self.half_width <= 0 or self.cell_size <= 0:
            raise ValueError("half_width and cell_size must be > 0")

    def contains(self, p: Vector3) -> bool:
        return abs(p[0]) < self.half_width and self.z_far < p[2] < self.z_near

    def intersect(self, orig: Vector3, dir: Vector3) -> Optional[float]:
        # skip rays nearly parallel to the floor
        if abs(dir[1]) <= EPS:
            return None
        t = -(orig[1] - self.height) / dir[1]
        if t <= EPS:
            return None
        if not self.contains(orig + dir * t):
            return None
        return float(t)

    def parity(self, p: Vector3) -> int:
        """0 for even checker cells, 1 for odd ones."""
        ix = int(np.floor(p[0] / self.cell_size))
        iz = int(np.floor(p[2] / self.cell_size))
        return (ix + iz) & 1

    def material_at(self, p: Vector3) -> Material:
        return self.odd_material if self.parity(p) else self.even_material

@dataclass(frozen=True, eq=False)
class Light:
    """White point light of unit intensity."""
    position: Vector3

    def __post_init__(self):
        object.__setattr__(self, 'position', _frozen_vec3(self.position))
