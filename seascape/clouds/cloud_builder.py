# -*- coding: utf-8 -*-

"""
Filename: cloud_builder.py
Author: storro
Date: 2026-02-11
Description: Builds blobby cloud meshes out of overlapping spheres and scatters
             them over the ocean
"""

import logging
import math
import random

from dataclasses import dataclass

from seascape.clouds.sphere_primitive import make_sphere
from seascape.mesh.mesh_data import MeshData, Vec3
from seascape.util.errors import ConfigurationError


@dataclass(frozen=True)
class CloudLayer:
    offset: Vec3
    radius: float


@dataclass(frozen=True)
class Cloud:
    # Frozen; position and scale are applied as the node transform at draw time
    mesh: MeshData
    position: Vec3
    scale: float
    layer_count: int


@dataclass
class CloudFieldConfig:
    count: int = 100
    # Clouds are scattered over [-half_extent, half_extent] on x and z
    half_extent: float = 1000.0
    min_height: float = 250.0
    max_height: float = 450.0
    min_scale: float = 0.8
    max_scale: float = 1.6
    sphere_resolution: int = 12

    def validate(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count <= 0:
            raise ConfigurationError(f"cloud count must be a positive int, got {self.count!r}")
        if not self.half_extent > 0.0:
            raise ConfigurationError(f"cloud half extent must be > 0, got {self.half_extent!r}")
        if not self.min_height <= self.max_height:
            raise ConfigurationError(
                f"cloud height band is empty: [{self.min_height}, {self.max_height}]"
            )
        if not 0.0 < self.min_scale <= self.max_scale:
            raise ConfigurationError(
                f"cloud scale range must be positive and ordered: [{self.min_scale}, {self.max_scale}]"
            )
        if self.sphere_resolution < 3:
            raise ConfigurationError(
                f"sphere resolution must be >= 3, got {self.sphere_resolution!r}"
            )


class CloudBuilder:
    """Assembles clouds from randomly placed sphere layers."""

    CENTER_RADIUS = (60.0, 80.0)
    LAYER_COUNT = (12, 20)
    LAYER_DISTANCE = (25.0, 75.0)
    LAYER_Y_OFFSET = (-25.0, 25.0)
    LAYER_RADIUS = (25.0, 50.0)

    def __init__(self, rng: random.Random | None = None, sphere_resolution: int = 12) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.sphere_resolution = sphere_resolution

    def plan_layers(self) -> list[CloudLayer]:
        """
        Draw the layer layout of one cloud. The draw order (center radius,
        layer count, then rotation/distance/height/radius per layer) is fixed
        so a seeded RNG always yields the same cloud.
        """
        rng = self.rng
        layers = [CloudLayer((0.0, 0.0, 0.0), rng.uniform(*self.CENTER_RADIUS))]

        count = rng.randint(*self.LAYER_COUNT)
        for _ in range(count):
            rotation = rng.uniform(0.0, 2.0 * math.pi)
            distance = rng.uniform(*self.LAYER_DISTANCE)
            y_offset = rng.uniform(*self.LAYER_Y_OFFSET)
            radius = rng.uniform(*self.LAYER_RADIUS)

            offset = (math.cos(rotation) * distance, y_offset, math.sin(rotation) * distance)
            layers.append(CloudLayer(offset, radius))

        return layers

    def build_cloud(self, center: Vec3, scale: float) -> Cloud:
        layers = self.plan_layers()

        mesh = MeshData("cloud")
        for layer in layers:
            sphere = make_sphere(layer.radius, self.sphere_resolution)
            # Overlapping layers are kept as-is, no welding
            mesh.append(sphere, layer.offset)
        mesh.freeze()

        logging.debug("Cloud at %s: %d layers, %d vertices",
                      center, len(layers), mesh.num_vertices())
        return Cloud(mesh, tuple(center), float(scale), len(layers))


def build_cloud_field(builder: CloudBuilder, config: CloudFieldConfig) -> tuple[Cloud, ...]:
    """Scatter `config.count` clouds over the ocean at an elevated band."""
    config.validate()

    rng = builder.rng
    clouds = []
    for _ in range(config.count):
        center = (
            rng.uniform(-config.half_extent, config.half_extent),
            rng.uniform(config.min_height, config.max_height),
            rng.uniform(-config.half_extent, config.half_extent),
        )
        scale = rng.uniform(config.min_scale, config.max_scale)
        clouds.append(builder.build_cloud(center, scale))

    logging.info("Cloud field built: %d clouds, %d vertices total",
                 len(clouds), sum(c.mesh.num_vertices() for c in clouds))
    return tuple(clouds)
