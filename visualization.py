#!/usr/bin/env python3
"""
3D preview of the scene layout using PyVista.
Shows the floor tile, spheres, box and light positions along with the camera.
"""

import numpy as np
import pyvista as pv
from typing import List, Tuple

from geometry import Material
from scene import Scene

def _material_color(material: Material) -> Tuple[float, float, float]:
    c = np.clip(material.diffuse_color, 0.0, 1.0)
    return (float(c[0]), float(c[1]), float(c[2]))

def _material_opacity(material: Material) -> float:
    # refractive surfaces drawn translucent
    return 0.5 if material.albedo[3] > 0.2 else 1.0

def scene_to_meshes(scene: Scene, light_radius: float = 0.5) -> List[Tuple[pv.PolyData, tuple, float]]:
    """
    Convert the scene to PyVista meshes.

    Returns a list of (mesh, rgb color, opacity) tuples, floor first, then
    spheres, box and one small marker per light.
    """
    items = []

    floor = scene.floor
    if floor is not None:
        z_mid = 0.5 * (floor.z_near + floor.z_far)
        nx = int(round(2 * floor.half_width / floor.cell_size))
        nz = int(round((floor.z_near - floor.z_far) / floor.cell_size))
        plane = pv.Plane(center=(0.0, floor.height, z_mid), direction=(0.0, 1.0, 0.0),
                         i_size=floor.z_near - floor.z_far, j_size=2 * floor.half_width,
                         i_resolution=nz, j_resolution=nx)
        items.append((plane, _material_color(floor.even_material), 1.0))

    for s in scene.spheres:
        mesh = pv.Sphere(radius=s.radius, center=tuple(s.center))
        items.append((mesh, _material_color(s.material), _material_opacity(s.material)))

    if scene.box is not None:
        b = scene.box
        cube = pv.Cube(center=tuple(b.center), x_length=b.size, y_length=b.size, z_length=b.size)
        items.append((cube, _material_color(b.material), _material_opacity(b.material)))

    for light in scene.lights:
        marker = pv.Sphere(radius=light_radius, center=tuple(light.position))
        items.append((marker, (1.0, 1.0, 0.6), 1.0))

    return items

def create_scene_preview(scene: Scene,
                         title: str = "Scene layout",
                         window_size: Tuple[int, int] = (900, 700),
                         off_screen: bool = False) -> pv.Plotter:
    """
    Create a plotter showing the scene geometry, lights and the camera origin.

    Returns configured PyVista plotter.
    """
    p = pv.Plotter(window_size=window_size, off_screen=off_screen)
    p.add_title(title, font_size=12)

    for mesh, color, opacity in scene_to_meshes(scene):
        p.add_mesh(mesh, color=color, opacity=opacity, smooth_shading=True)

    # Camera at the origin looking down -z
    p.add_mesh(pv.Sphere(radius=0.3, center=(0.0, 0.0, 0.0)), color="crimson")
    p.add_mesh(pv.Arrow(start=(0.0, 0.0, 0.0), direction=(0.0, 0.0, -1.0), scale=3.0),
               color="crimson")

    p.set_background(tuple(float(c) for c in scene.background))
    p.add_axes(interactive=True)
    p.show_grid()
    return p
