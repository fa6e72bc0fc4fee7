#!/usr/bin/env python3
"""
Whitted-style ray tracing core.
Nearest-hit scene query plus the depth-bounded recursive caster that mixes
diffuse, specular, reflected and refracted light by material weights.
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional, Tuple

from geometry import Material
from math_utils import Vector3, as_vec3, dot, norm, normalized, reflect, refract
from scene import Scene, default_scene

# Starting value for the nearest distance; any real hit is closer
FAR_SENTINEL = 1e10

WHITE = np.ones(3)

@dataclass
class Hit:
    """Ray-surface intersection result."""
    t: float
    point: np.ndarray
    normal: np.ndarray
    material: Material

def closest_intersection(scene: Scene, orig: Vector3, dir: Vector3) -> Optional[Hit]:
    """
    Find the nearest surface along the ray among floor, spheres and box.
    Candidates replace the current best only when strictly nearer. Returns
    None when nothing lies within scene.max_distance.
    """
    orig = as_vec3(orig)
    dir = as_vec3(dir)
    best_t = FAR_SENTINEL
    best = None

    if scene.floor is not None:
        t = scene.floor.intersect(orig, dir)
        if t is not None and t < best_t:
            p = orig + dir * t
            best_t = t
            best = Hit(t=t, point=p, normal=np.array((0.0, 1.0, 0.0)),
                       material=scene.floor.material_at(p))

    for s in scene.spheres:
        t = s.intersect(orig, dir)
        if t is None or t >= best_t:
            continue
        p = orig + dir * t
        best_t = t
        best = Hit(t=t, point=p, normal=s.normal_at(p), material=s.material)

    if scene.box is not None:
        res = scene.box.intersect(orig, dir)
        if res is not None and res[0] < best_t:
            t, n = res
            best_t = t
            best = Hit(t=t, point=orig + dir * t, normal=n, material=scene.box.material)

    if best is None or best_t >= scene.max_distance:
        return None
    return best

def direct_lighting(scene: Scene, point: Vector3, N: Vector3, dir: Vector3,
                    material: Material) -> Tuple[float, float]:
    """
    Accumulated (diffuse, specular) intensity from every unshadowed light.
    A light is blocked when the shadow probe hits anything closer than it.
    """
    diffuse = 0.0
    specular = 0.0
    for light in scene.lights:
        to_light = light.position - point
        light_dist = norm(to_light)
        light_dir = normalized(to_light)
        blocker = closest_intersection(scene, point, light_dir)
        if blocker is not None and norm(blocker.point - point) < light_dist:
            continue
        diffuse += max(0.0, dot(light_dir, N))
        specular += max(0.0, -dot(reflect(-light_dir, N), dir)) ** material.specular_exponent
    return diffuse, specular

def cast_ray(orig: Vector3, dir: Vector3, depth: int = 0,
             scene: Optional[Scene] = None) -> Vector3:
    """
    Color seen along the ray (orig, dir). dir must be unit length.
    Recursion stops past scene.max_depth or when the ray leaves the scene;
    both return the background color.
    """
    if scene is None:
        scene = default_scene()
    if depth > scene.max_depth:
        return scene.background.copy()
    orig = as_vec3(orig)
    dir = as_vec3(dir)
    hit = closest_intersection(scene, orig, dir)
    if hit is None:
        return scene.background.copy()

    P, N, m = hit.point, hit.normal, hit.material
    reflect_dir = normalized(reflect(dir, N))
    refract_dir = normalized(refract(dir, N, m.refractive_index))
    reflect_color = cast_ray(P, reflect_dir, depth + 1, scene)
    refract_color = cast_ray(P, refract_dir, depth + 1, scene)

    diffuse, specular = direct_lighting(scene, P, N, dir, m)
    a = m.albedo
    return (m.diffuse_color * diffuse * a[0]
            + WHITE * specular * a[1]
            + reflect_color * a[2]
            + refract_color * a[3])
