# -*- coding: utf-8 -*-

"""
Filename: mesh_data.py
Author: storro
Date: 2026-02-11
Description: CPU-side mesh buffers and their conversion to Panda3D geometry
             Buffers are kept y-up, the Panda3D node is built z-up
"""

from array import array
from typing import Sequence

from panda3d.core import (
    Geom,
    GeomNode,
    GeomTriangles,
    GeomVertexData,
    GeomVertexFormat,
    GeomVertexWriter,
    NodePath,
)

from seascape.util.errors import ResourceError

Vec3 = tuple[float, float, float]
Vec2 = tuple[float, float]


class MeshData:
    """Positions, optional normals/texcoords and a flat triangle index list."""

    _BUFFERS = ("vertices", "normals", "texcoords", "indices")

    def __init__(self, name: str = "mesh") -> None:
        self._frozen = False
        self.name = name
        self.vertices: list[Vec3] = []
        self.normals: list[Vec3] = []
        self.texcoords: list[Vec2] = []
        self.indices = array("I")

    def __setattr__(self, attr: str, value) -> None:
        if attr in self._BUFFERS and getattr(self, "_frozen", False):
            raise ResourceError(f"mesh '{self.name}' is frozen")
        super().__setattr__(attr, value)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "MeshData":
        """Swap every buffer for a tuple; later writes raise ResourceError."""
        for attr in self._BUFFERS:
            super().__setattr__(attr, tuple(getattr(self, attr)))
        self._frozen = True
        return self

    def _check_mutable(self) -> None:
        if self._frozen:
            raise ResourceError(f"mesh '{self.name}' is frozen")

    def num_vertices(self) -> int:
        return len(self.vertices)

    def num_indices(self) -> int:
        return len(self.indices)

    def num_triangles(self) -> int:
        return len(self.indices) // 3

    def has_normals(self) -> bool:
        return len(self.normals) == len(self.vertices) and bool(self.vertices)

    def has_texcoords(self) -> bool:
        return len(self.texcoords) == len(self.vertices) and bool(self.vertices)

    def add_vertex(self,
                   position: Vec3,
                   texcoord: Vec2 | None = None,
                   normal: Vec3 | None = None) -> int:
        self._check_mutable()
        self.vertices.append(position)
        if texcoord is not None:
            self.texcoords.append(texcoord)
        if normal is not None:
            self.normals.append(normal)
        return len(self.vertices) - 1

    def set_normals(self, normals: list[Vec3]) -> None:
        self._check_mutable()
        if normals and len(normals) != len(self.vertices):
            raise ResourceError(
                f"mesh '{self.name}' has {len(self.vertices)} vertices, got {len(normals)} normals"
            )
        self.normals = list(normals)

    def set_vertex(self, index: int, position: Vec3) -> None:
        self._check_mutable()
        self.vertices[index] = position

    def add_triangle(self, a: int, b: int, c: int) -> None:
        self._check_mutable()
        self.indices.extend((a, b, c))

    def append(self, other: "MeshData", offset: Vec3 = (0.0, 0.0, 0.0)) -> None:
        """
        Append another mesh's buffers, translating its positions by offset.
        Vertices are not welded, the incoming indices are shifted by the
        current vertex count.
        """
        self._check_mutable()

        base = len(self.vertices)
        ox, oy, oz = offset
        self.vertices.extend((x + ox, y + oy, z + oz) for x, y, z in other.vertices)
        self.normals.extend(other.normals)
        self.texcoords.extend(other.texcoords)
        self.indices.extend(i + base for i in other.indices)

    def to_node_path(self, z_up: bool = True) -> NodePath:
        """
        Build a static Panda3D GeomNode from the buffers.
        With z_up, model-space (x, y, z) becomes Panda3D (x, -z, y); this is a
        rotation so the triangle winding is preserved.
        """

        if not self.vertices:
            raise ResourceError(f"mesh '{self.name}' has no vertices")
        if len(self.indices) % 3 != 0:
            raise ResourceError(
                f"mesh '{self.name}' has {len(self.indices)} indices, not a whole number of triangles"
            )

        with_normals = self.has_normals()
        with_uvs = self.has_texcoords()

        if with_normals and with_uvs:
            fmt = GeomVertexFormat.get_v3n3t2()
        elif with_normals:
            fmt = GeomVertexFormat.get_v3n3()
        elif with_uvs:
            fmt = GeomVertexFormat.get_v3t2()
        else:
            fmt = GeomVertexFormat.get_v3()

        vdata = GeomVertexData(self.name, fmt, Geom.UH_static)
        vdata.set_num_rows(len(self.vertices))

        vw_pos = GeomVertexWriter(vdata, "vertex")
        for x, y, z in self.vertices:
            vw_pos.add_data3f(*_to_panda(x, y, z, z_up))

        if with_normals:
            vw_nrm = GeomVertexWriter(vdata, "normal")
            for x, y, z in self.normals:
                vw_nrm.add_data3f(*_to_panda(x, y, z, z_up))

        if with_uvs:
            vw_uv = GeomVertexWriter(vdata, "texcoord")
            for u, v in self.texcoords:
                vw_uv.add_data2f(u, v)

        tris = GeomTriangles(Geom.UH_static)
        # 16-bit indices overflow past 65535 vertices
        tris.set_index_type(Geom.NT_uint32)
        indices = self.indices
        for n in range(0, len(indices), 3):
            tris.add_vertices(indices[n], indices[n + 1], indices[n + 2])
            tris.close_primitive()

        geom = Geom(vdata)
        geom.add_primitive(tris)

        node = GeomNode(self.name)
        node.add_geom(geom)

        return NodePath(node)


def _to_panda(x: float, y: float, z: float, z_up: bool) -> Sequence[float]:
    if z_up:
        return (x, -z, y)
    return (x, y, z)
