#!/usr/bin/env python3
"""
Pinhole camera at the origin looking down -z.
Generates the normalized primary ray direction for each pixel.
"""

import numpy as np
from dataclasses import dataclass
from math_utils import Vector3, normalized

@dataclass(frozen=True)
class Camera:
    """Image size in pixels and vertical field of view in radians."""
    width: int = 1024
    height: int = 768
    fov: float = 1.05

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if not 0.0 < self.fov < np.pi:
            raise ValueError(f"fov must be in (0, pi) radians, got {self.fov}")

    @property
    def origin(self) -> Vector3:
        return np.zeros(3)

    @property
    def focal_depth(self) -> float:
        return -self.height / (2.0 * np.tan(self.fov / 2.0))

    def ray_direction(self, i: int, j: int) -> Vector3:
        """Unit direction through the centre of pixel column i, row j (row 0 on top)."""
        x = (i + 0.5) - self.width / 2.0
        y = -(j + 0.5) + self.height / 2.0
        return normalized(np.array((x, y, self.focal_depth)))

    def row_directions(self, j: int) -> np.ndarray:
        """
        Directions for every pixel of row j as a (width, 3) array.
        Matches ray_direction(i, j) for each column i.
        """
        xs = (np.arange(self.width) + 0.5) - self.width / 2.0
        d = np.empty((self.width, 3))
        d[:, 0] = xs
        d[:, 1] = -(j + 0.5) + self.height / 2.0
        d[:, 2] = self.focal_depth
        return d / np.linalg.norm(d, axis=1)[:, None]
