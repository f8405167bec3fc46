# -*- coding: utf-8 -*-

"""
Filename: sphere_primitive.py
Author: storro
Date: 2026-02-11
Description: UV sphere mesh used as the building block of a cloud
"""

import math

from seascape.mesh.mesh_data import MeshData
from seascape.util.errors import ResourceError


def sphere_vertex_count(resolution: int) -> int:
    return (resolution + 1) * (2 * resolution + 1)


def make_sphere(radius: float, resolution: int = 12, name: str = "sphere") -> MeshData:
    """
    UV sphere centered at the origin: `resolution` rings from pole to pole and
    twice as many segments around. The seam column is duplicated so texture
    coordinates wrap cleanly.
    """

    if not radius > 0.0:
        raise ResourceError(f"sphere radius must be > 0, got {radius!r}")
    if resolution < 3:
        raise ResourceError(f"sphere resolution must be >= 3, got {resolution!r}")

    rings = resolution
    segments = 2 * resolution
    mesh = MeshData(name)

    for r in range(rings + 1):
        theta = math.pi * r / rings
        sin_t = math.sin(theta)
        cos_t = math.cos(theta)
        for s in range(segments + 1):
            phi = 2.0 * math.pi * s / segments
            nx = sin_t * math.cos(phi)
            ny = cos_t
            nz = sin_t * math.sin(phi)

            mesh.add_vertex((nx * radius, ny * radius, nz * radius),
                            texcoord=(s / segments, 1.0 - r / rings),
                            normal=(nx, ny, nz))

    row = segments + 1
    for r in range(rings):
        for s in range(segments):
            i0 = r * row + s
            i1 = i0 + 1
            i2 = i0 + row
            i3 = i2 + 1

            # Outward facing when seen from outside the sphere
            if r != 0:
                mesh.add_triangle(i0, i1, i2)
            if r != rings - 1:
                mesh.add_triangle(i1, i3, i2)

    return mesh
