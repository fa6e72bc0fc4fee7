
import pyvista as pv

from visualization import scene_to_meshes


def test_scene_to_meshes(scene):
    items = scene_to_meshes(scene)
    assert len(items) == 1 + len(scene.spheres) + 1 + len(scene.lights)
    for mesh, color, opacity in items:
        assert isinstance(mesh, pv.PolyData)
        assert mesh.n_points > 0
        assert len(color) == 3
        assert 0.0 < opacity <= 1.0


def test_refractive_objects_are_translucent(scene):
    items = scene_to_meshes(scene)
    box_opacity = items[1 + len(scene.spheres)][2]
    assert box_opacity < 1.0
