#!/usr/bin/env python3
"""
Scene catalog: the fixed materials, primitives and lights of the rendered
scene. A Scene is read-only and is passed by reference to the tracer.
"""

import numpy as np
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional, Tuple

from geometry import Box, FloorTile, Light, Material, Sphere
from math_utils import Vector3

MARBLE = Material(1.0, (0.8, 0.2, 0.0, 0.0), (0.5, 0.5, 0.5), 30.0)
WATER = Material(1.3, (0.1, 0.4, 0.7, 0.5), (0.2, 0.5, 0.8), 100.0)
SHINY_RED = Material(1.0, (1.2, 0.3, 0.0, 0.1), (0.7, 0.1, 0.1), 200.0)
BRONZE = Material(1.0, (0.4, 0.3, 0.2, 0.1), (0.8, 0.7, 0.5), 500.0)

BACKGROUND = (0.2, 0.7, 0.8)
MAX_DEPTH = 4
MAX_DISTANCE = 1000.0

@dataclass(frozen=True, eq=False)
class Scene:
    """
    Everything the tracer reads: geometry, lights and the fixed render
    constants (background color, recursion cap, visibility range).
    """
    spheres: Tuple[Sphere, ...] = ()
    box: Optional[Box] = None
    floor: Optional[FloorTile] = None
    lights: Tuple[Light, ...] = ()
    background: Vector3 = field(default_factory=lambda: np.array(BACKGROUND))
    max_depth: int = MAX_DEPTH
    max_distance: float = MAX_DISTANCE

    def __post_init__(self):
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.max_distance <= 0:
            raise ValueError(f"max_distance must be > 0, got {self.max_distance}")
        object.__setattr__(self, 'spheres', tuple(self.spheres))
        object.__setattr__(self, 'lights', tuple(self.lights))
        bg = np.array(self.background, dtype=np.float64).reshape(3)
        bg.setflags(write=False)
        object.__setattr__(self, 'background', bg)

@lru_cache(maxsize=None)
def default_scene() -> Scene:
    """Four spheres, a water cube and a checkered floor under three lights."""
    spheres = (
        Sphere((-2.0, 1.0, -15.0), 1.5, MARBLE),
        Sphere((0.0, 4.0, -12.0), 2.0, WATER),
        Sphere((2.0, 0.0, -18.0), 2.5, SHINY_RED),
        Sphere((5.0, 3.0, -20.0), 3.5, BRONZE),
    )
    lights = (
        Light((-15.0, 10.0, 25.0)),
        Light((20.0, 30.0, -30.0)),
        Light((10.0, 10.0, 15.0)),
    )
    return Scene(
        spheres=spheres,
        box=Box((0.0, -1.0, -10.0), 2.0, WATER),
        floor=FloorTile(),
        lights=lights,
    )
