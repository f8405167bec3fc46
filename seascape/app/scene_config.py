# -*- coding: utf-8 -*-

"""
Filename: scene_config.py
Author: storro
Date: 2026-02-11
Description: Scene configuration dataclasses and their prc-backed defaults
"""

from dataclasses import dataclass, field

from panda3d.core import ConfigVariableBool, ConfigVariableDouble, ConfigVariableInt

from seascape.clouds.cloud_builder import CloudFieldConfig
from seascape.ocean.wave_field import DEFAULT_WAVE_COMPONENTS, WaveComponent
from seascape.util.errors import ConfigurationError, InvalidParameterError


@dataclass
class GridConfig:
    # Vertices per side: the mesh has resolution x resolution vertices
    resolution: int = 256
    # World-space side length of the ocean square
    size: float = 2000.0
    # Time the initial heights are sampled at
    t0: float = 0.0
    with_normals: bool = True

    def validate(self) -> None:
        if isinstance(self.resolution, bool) or not isinstance(self.resolution, int) \
                or self.resolution < 2:
            raise InvalidParameterError(
                f"grid resolution must be an int >= 2, got {self.resolution!r}"
            )
        if not self.size > 0.0:
            raise InvalidParameterError(f"grid size must be > 0, got {self.size!r}")


@dataclass
class SceneConfig:
    grid: GridConfig = field(default_factory=GridConfig)
    waves: tuple[WaveComponent, ...] = DEFAULT_WAVE_COMPONENTS
    clouds: CloudFieldConfig = field(default_factory=CloudFieldConfig)
    clouds_enabled: bool = True
    # None seeds the cloud RNG from system entropy
    seed: int | None = None
    noise_seed: int = 1
    animate: bool = True
    time_scale: float = 1.0

    def validate(self) -> None:
        self.grid.validate()
        if not self.waves:
            raise ConfigurationError("the wave table needs at least one component")
        if self.noise_seed <= 0:
            raise ConfigurationError(f"noise seed must be > 0, got {self.noise_seed!r}")
        if self.time_scale < 0.0:
            raise ConfigurationError(f"time scale must be >= 0, got {self.time_scale!r}")
        if self.clouds_enabled:
            self.clouds.validate()


def prc_cloud_half_extent() -> float:
    """Half extent set through prc, 0 when the cloud field should cover the ocean."""
    return ConfigVariableDouble(
        "seascape-cloud-half-extent", 0.0,
        "Half width of the square the clouds are scattered over").get_value()


def load_scene_config() -> SceneConfig:
    """
    Build a SceneConfig from prc variables, falling back to the dataclass
    defaults. Any loaded prc page (Config.prc, load_prc_file_data) can override:

        seascape-grid-resolution 512
        seascape-grid-size 2000
        seascape-cloud-count 40
        seascape-seed 7
    """
    grid = GridConfig()
    clouds = CloudFieldConfig()
    defaults = SceneConfig(grid=grid, clouds=clouds)

    grid.resolution = ConfigVariableInt(
        "seascape-grid-resolution", grid.resolution,
        "Vertices per side of the ocean grid").get_value()
    grid.size = ConfigVariableDouble(
        "seascape-grid-size", grid.size,
        "World-space side length of the ocean grid").get_value()
    grid.t0 = ConfigVariableDouble(
        "seascape-initial-time", grid.t0,
        "Time at which the initial ocean heights are sampled").get_value()

    half_extent = prc_cloud_half_extent()
    clouds.half_extent = half_extent if half_extent > 0.0 else grid.size * 0.5
    clouds.count = ConfigVariableInt(
        "seascape-cloud-count", clouds.count,
        "Number of clouds generated at startup").get_value()
    clouds.min_height = ConfigVariableDouble(
        "seascape-cloud-min-height", clouds.min_height, "").get_value()
    clouds.max_height = ConfigVariableDouble(
        "seascape-cloud-max-height", clouds.max_height, "").get_value()

    defaults.clouds_enabled = ConfigVariableBool(
        "seascape-clouds", defaults.clouds_enabled,
        "Generate the cloud field").get_value()

    # 0 means "seed from system entropy"
    seed = ConfigVariableInt("seascape-seed", 0, "Cloud RNG seed").get_value()
    defaults.seed = seed if seed != 0 else None
    defaults.noise_seed = ConfigVariableInt(
        "seascape-noise-seed", defaults.noise_seed, "Perlin table seed").get_value()
    defaults.time_scale = ConfigVariableDouble(
        "seascape-time-scale", defaults.time_scale, "").get_value()

    return defaults
