"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from geometry import FloorTile, Light, Material, Sphere  # noqa: E402
from scene import Scene, default_scene  # noqa: E402


@pytest.fixture
def scene():
    """The built-in scene."""
    return default_scene()


@pytest.fixture
def origin():
    return np.zeros(3)


@pytest.fixture
def red_matte():
    return Material(1.0, (1.0, 0.0, 0.0, 0.0), (1.0, 0.0, 0.0), 0.0)


@pytest.fixture
def shadow_scene():
    """Floor with an opaque sphere hovering over (0, -3, -20) and a light above it."""
    blocker = Sphere((0.0, 0.0, -20.0), 1.0, Material(diffuse_color=(0.3, 0.3, 0.3)))
    return Scene(spheres=(blocker,), floor=FloorTile(),
                 lights=(Light((0.0, 10.0, -20.0)),))
