# -*- coding: utf-8 -*-

"""
Filename: ocean_geometry.py
Author: storro
Date: 2026-02-11
Description: Procedurally generate the ocean grid mesh and bake wave heights into it
             The grid is centered at the origin, y is up
"""

import logging
import math

from dataclasses import dataclass

from seascape.mesh.mesh_data import MeshData, Vec3
from seascape.ocean.wave_field import WaveField
from seascape.util.errors import InvalidParameterError


@dataclass
class OceanGrid:
    mesh: MeshData
    resolution: int
    size: float
    # Vertex list as it was right after the initial bake
    baseline: tuple[Vec3, ...] = ()

    @property
    def step(self) -> float:
        return self.size / self.resolution

    def resample(self, wave_field: WaveField, t: float) -> None:
        """Recompute heights (and normals, when present) at time t. x and z stay put."""
        with_normals = self.mesh.has_normals()
        _bake_heights(self.mesh, wave_field, t)
        if with_normals:
            self.mesh.set_normals(_height_normals(self.mesh.vertices, self.resolution, self.step))


def build_ocean_grid(
    resolution: int,
    size: float,
    wave_field: WaveField,
    t0: float = 0.0,
    with_normals: bool = True,
) -> OceanGrid:
    """
    Generate an N x N lattice over a square of side `size`, two triangles per
    cell, heights sampled from `wave_field` at t0.
    """

    if isinstance(resolution, bool) or not isinstance(resolution, int) or resolution < 2:
        raise InvalidParameterError(f"grid resolution must be an int >= 2, got {resolution!r}")
    if not size > 0.0:
        raise InvalidParameterError(f"grid size must be > 0, got {size!r}")

    n = resolution
    mesh = MeshData("ocean")

    for z in range(n):
        wz = (z - n / 2.0) * size / n
        v = z / (n - 1)
        for x in range(n):
            wx = (x - n / 2.0) * size / n
            mesh.add_vertex((wx, 0.0, wz), texcoord=(x / (n - 1), v))

    for z in range(n - 1):
        for x in range(n - 1):
            i = z * n + x

            # Two triangles per quad; this winding faces -y, so the ocean node is drawn two-sided
            mesh.add_triangle(i, i + 1, i + n)
            mesh.add_triangle(i + 1, i + n + 1, i + n)

    _bake_heights(mesh, wave_field, t0)

    grid = OceanGrid(mesh, n, float(size), tuple(mesh.vertices))
    if with_normals:
        mesh.set_normals(_height_normals(mesh.vertices, n, grid.step))

    logging.info("Ocean grid built: %d vertices, %d triangles",
                 mesh.num_vertices(), mesh.num_triangles())
    return grid


def _bake_heights(mesh: MeshData, wave_field: WaveField, t: float) -> None:
    for i, (x, _, z) in enumerate(mesh.vertices):
        mesh.set_vertex(i, (x, wave_field.height(x, z, t), z))


def _height_normals(vertices: list[Vec3], n: int, step: float) -> list[Vec3]:
    # Central differences, one-sided on the border
    normals: list[Vec3] = []
    for z in range(n):
        z0 = max(z - 1, 0)
        z1 = min(z + 1, n - 1)
        for x in range(n):
            x0 = max(x - 1, 0)
            x1 = min(x + 1, n - 1)

            dydx = (vertices[z * n + x1][1] - vertices[z * n + x0][1]) / ((x1 - x0) * step)
            dydz = (vertices[z1 * n + x][1] - vertices[z0 * n + x][1]) / ((z1 - z0) * step)

            nx, ny, nz = -dydx, 1.0, -dydz
            length = math.sqrt(nx * nx + ny * ny + nz * nz)
            normals.append((nx / length, ny / length, nz / length))
    return normals
