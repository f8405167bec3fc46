"""
Tests for the scene assembler.
"""

import pytest

from panda3d.core import GeomVertexReader

from seascape.app.scene import SceneAssembler
from seascape.app.scene_config import GridConfig, SceneConfig
from seascape.clouds.cloud_builder import CloudFieldConfig
from seascape.util.errors import ConfigurationError, InvalidParameterError


def test_scene_builds_everything(small_config):
    scene = SceneAssembler(small_config)

    assert scene.ocean.mesh.num_vertices() == 64
    assert scene.ocean.mesh.num_triangles() == 7 * 7 * 2
    assert len(scene.clouds) == 3
    assert len(scene.wave_field.components) == 5


def test_scene_height_uses_current_time(small_config):
    scene = SceneAssembler(small_config)
    scene.step(0.5)

    assert scene.time == pytest.approx(0.5)
    assert scene.height(3.0, 4.0) == scene.wave_field.height(3.0, 4.0, scene.time)
    assert scene.height(3.0, 4.0, 2.0) == scene.wave_field.height(3.0, 4.0, 2.0)


def test_step_respects_animation_and_time_scale(small_config):
    scene = SceneAssembler(small_config)

    scene.set_time_scale(2.0)
    scene.step(0.25)
    assert scene.time == pytest.approx(0.5)

    scene.toggle_animation()
    assert not scene.animate
    scene.step(1.0)
    assert scene.time == pytest.approx(0.5)

    scene.toggle_animation()
    scene.adjust_time_scale(-5.0)
    assert scene.time_scale == 0.0
    scene.step(1.0)
    assert scene.time == pytest.approx(0.5)


def test_clouds_can_be_disabled(small_config):
    small_config.clouds_enabled = False
    small_config.clouds = CloudFieldConfig(count=0)
    scene = SceneAssembler(small_config)
    assert scene.clouds == ()


def test_same_seed_gives_same_scene(small_config):
    first = SceneAssembler(small_config)
    second = SceneAssembler(small_config)

    assert first.ocean.mesh.vertices == second.ocean.mesh.vertices
    assert [c.position for c in first.clouds] == [c.position for c in second.clouds]
    assert [c.mesh.num_vertices() for c in first.clouds] == \
        [c.mesh.num_vertices() for c in second.clouds]


def test_failed_rebuild_keeps_previous_scene(small_config):
    scene = SceneAssembler(small_config)
    ocean, clouds = scene.ocean, scene.clouds

    with pytest.raises(InvalidParameterError):
        scene.rebuild(SceneConfig(grid=GridConfig(resolution=1)))

    assert scene.ocean is ocean
    assert scene.clouds is clouds
    assert scene.config is small_config


def test_rebuild_replaces_scene(small_config):
    scene = SceneAssembler(small_config)
    scene.rebuild(SceneConfig(grid=GridConfig(resolution=3, size=10.0), clouds_enabled=False))

    assert scene.ocean.mesh.num_vertices() == 9
    assert scene.clouds == ()


def test_empty_wave_table_is_rejected(small_config):
    small_config.waves = ()
    with pytest.raises(ConfigurationError):
        SceneAssembler(small_config)


def test_wave_parameters(small_config):
    scene = SceneAssembler(small_config)
    assert scene.wave_parameters()["amplitudes"] == (10.0, 5.0, 3.5, 1.5, 0.8)


def test_resample_ocean(small_config):
    scene = SceneAssembler(small_config)
    scene.step(2.0)
    scene.resample_ocean()

    x, y, z = scene.ocean.mesh.vertices[10]
    assert y == scene.wave_field.height(x, z, 2.0)


def test_scene_parameters(small_config):
    params = SceneAssembler(small_config).get_scene_parameters()
    assert params["grid_resolution"] == 8
    assert params["ocean_vertices"] == 64
    assert params["ocean_indices"] == 7 * 7 * 6
    assert params["cloud_count"] == 3


def test_scene_graph(small_config):
    scene = SceneAssembler(small_config)
    root = scene.build_scene_graph()

    assert root.find("ocean").is_empty() is False
    clouds = root.find("clouds")
    assert clouds.get_num_children() == 3

    first = scene.clouds[0]
    cloud_np = clouds.get_child(0)
    x, y, z = first.position
    assert tuple(cloud_np.get_pos()) == pytest.approx((x, -z, y), rel=1e-5)
    assert cloud_np.get_scale()[0] == pytest.approx(first.scale, rel=1e-5)


def test_ocean_node_is_two_sided_for_its_winding(small_config):
    ocean_np = SceneAssembler(small_config).ocean_node_path()
    geom = ocean_np.node().get_geom(0)
    prim = geom.get_primitive(0)
    vdata = geom.get_vertex_data()

    vertex = GeomVertexReader(vdata, "vertex")
    corners = []
    for k in range(3):
        vertex.set_row(prim.get_vertex(k))
        corners.append(vertex.get_data3())
    a, b, c = corners
    face_z = (b - a).cross(c - a).z

    normal = GeomVertexReader(vdata, "normal")
    normal.set_row(prim.get_vertex(0))

    # the grid winding faces down in z-up space while the normals point up
    assert face_z < 0.0
    assert normal.get_data3().z > 0.0
    assert ocean_np.get_two_sided()
