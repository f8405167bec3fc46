"""
Tests for the mesh buffers and their Panda3D conversion.
"""

import pytest

from panda3d.core import GeomVertexReader

from seascape.mesh.mesh_data import MeshData
from seascape.util.errors import ResourceError


def _triangle(name="tri"):
    mesh = MeshData(name)
    mesh.add_vertex((0.0, 0.0, 0.0))
    mesh.add_vertex((1.0, 0.0, 0.0))
    mesh.add_vertex((0.0, 0.0, 1.0))
    mesh.add_triangle(0, 1, 2)
    return mesh


def test_counts():
    mesh = _triangle()
    assert mesh.num_vertices() == 3
    assert mesh.num_indices() == 3
    assert mesh.num_triangles() == 1
    assert not mesh.has_normals()
    assert not mesh.has_texcoords()


def test_append_offsets_indices_and_positions():
    mesh = _triangle()
    mesh.append(_triangle(), offset=(10.0, 5.0, -1.0))

    assert mesh.num_vertices() == 6
    assert list(mesh.indices) == [0, 1, 2, 3, 4, 5]
    assert mesh.vertices[4] == (11.0, 5.0, -1.0)


def test_append_does_not_weld_duplicates():
    mesh = _triangle()
    mesh.append(_triangle())
    assert mesh.num_vertices() == 6
    assert mesh.vertices[0] == mesh.vertices[3]


def test_frozen_mesh_rejects_mutation():
    mesh = _triangle().freeze()
    assert mesh.frozen
    with pytest.raises(ResourceError):
        mesh.add_vertex((1.0, 1.0, 1.0))
    with pytest.raises(ResourceError):
        mesh.set_vertex(0, (1.0, 1.0, 1.0))
    with pytest.raises(ResourceError):
        mesh.append(_triangle())
    assert mesh.num_vertices() == 3


def test_to_node_path_keeps_counts():
    mesh = _triangle()
    mesh.append(_triangle(), offset=(0.0, 2.0, 0.0))
    node = mesh.to_node_path()

    geom = node.node().get_geom(0)
    assert geom.get_vertex_data().get_num_rows() == 6
    assert geom.get_primitive(0).get_num_vertices() == 6


def test_to_node_path_converts_to_z_up():
    mesh = MeshData("point")
    mesh.add_vertex((1.0, 2.0, 3.0))
    mesh.add_vertex((0.0, 0.0, 0.0))
    mesh.add_vertex((0.0, 0.0, 0.0))
    mesh.add_triangle(0, 1, 2)

    vdata = mesh.to_node_path().node().get_geom(0).get_vertex_data()
    reader = GeomVertexReader(vdata, "vertex")
    x, y, z = reader.get_data3()
    assert (x, y, z) == pytest.approx((1.0, -3.0, 2.0))

    vdata = mesh.to_node_path(z_up=False).node().get_geom(0).get_vertex_data()
    reader = GeomVertexReader(vdata, "vertex")
    assert tuple(reader.get_data3()) == pytest.approx((1.0, 2.0, 3.0))


def test_empty_mesh_cannot_be_converted():
    with pytest.raises(ResourceError):
        MeshData("empty").to_node_path()


def test_frozen_buffers_are_read_only():
    mesh = _triangle()
    mesh.normals = [(0.0, 1.0, 0.0)] * 3
    mesh.freeze()

    with pytest.raises(AttributeError):
        mesh.vertices.append((1.0, 1.0, 1.0))
    with pytest.raises(AttributeError):
        mesh.indices.extend((0, 1, 2))
    with pytest.raises(AttributeError):
        mesh.normals.append((0.0, 1.0, 0.0))
    with pytest.raises(ResourceError):
        mesh.vertices = []
    with pytest.raises(ResourceError):
        mesh.set_normals([(0.0, 1.0, 0.0)] * 3)

    assert mesh.num_vertices() == 3
    assert mesh.num_indices() == 3
    assert mesh.to_node_path().node().get_geom(0).get_vertex_data().get_num_rows() == 3


def test_add_vertex_with_attributes():
    mesh = MeshData("quad")
    index = mesh.add_vertex((1.0, 2.0, 3.0), texcoord=(0.5, 0.25), normal=(0.0, 1.0, 0.0))

    assert index == 0
    assert mesh.texcoords == [(0.5, 0.25)]
    assert mesh.normals == [(0.0, 1.0, 0.0)]
    assert mesh.has_texcoords() and mesh.has_normals()


def test_set_normals_must_match_vertex_count():
    mesh = _triangle()
    with pytest.raises(ResourceError):
        mesh.set_normals([(0.0, 1.0, 0.0)])


def test_partial_triangle_is_rejected():
    mesh = _triangle()
    mesh.indices.append(0)
    with pytest.raises(ResourceError):
        mesh.to_node_path()
