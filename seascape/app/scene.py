# -*- coding: utf-8 -*-

"""
Filename: scene.py
Author: storro
Date: 2026-02-11
Description: Owns the wave field, the ocean grid and the cloud field, advances time
             and hands render-ready nodes to the caller
"""

import logging
import random

from dataclasses import dataclass

from panda3d.core import NodePath

from seascape.app.ocean_geometry import OceanGrid, build_ocean_grid
from seascape.app.scene_config import SceneConfig
from seascape.clouds.cloud_builder import Cloud, CloudBuilder, build_cloud_field
from seascape.ocean.noise_source import NoiseSource
from seascape.ocean.wave_field import WaveField


@dataclass(frozen=True)
class _SceneState:
    config: SceneConfig
    wave_field: WaveField
    ocean: OceanGrid
    clouds: tuple[Cloud, ...]


class SceneAssembler:
    def __init__(self, config: SceneConfig | None = None) -> None:
        self._state = self._build(config if config is not None else SceneConfig())
        self._time = self._state.config.grid.t0
        self._animate = self._state.config.animate
        self._time_scale = float(self._state.config.time_scale)

    @staticmethod
    def _build(config: SceneConfig) -> _SceneState:
        config.validate()

        wave_field = WaveField(tuple(config.waves), NoiseSource(config.noise_seed))
        logging.info("Wave field ready with %d components", len(wave_field.components))

        logging.info("Creating ocean mesh...")
        ocean = build_ocean_grid(config.grid.resolution,
                                 config.grid.size,
                                 wave_field,
                                 t0=config.grid.t0,
                                 with_normals=config.grid.with_normals)

        clouds: tuple[Cloud, ...] = ()
        if config.clouds_enabled:
            logging.info("Creating %d clouds...", config.clouds.count)
            builder = CloudBuilder(random.Random(config.seed),
                                   sphere_resolution=config.clouds.sphere_resolution)
            clouds = build_cloud_field(builder, config.clouds)

        return _SceneState(config, wave_field, ocean, clouds)

    def rebuild(self, config: SceneConfig) -> None:
        """Replace the whole scene. On failure the current scene is left as it was."""
        state = self._build(config)
        self._state = state
        self._time = state.config.grid.t0
        logging.info("Scene rebuilt")

    @property
    def config(self) -> SceneConfig:
        return self._state.config

    @property
    def wave_field(self) -> WaveField:
        return self._state.wave_field

    @property
    def ocean(self) -> OceanGrid:
        return self._state.ocean

    @property
    def clouds(self) -> tuple[Cloud, ...]:
        return self._state.clouds

    @property
    def time(self) -> float:
        return self._time

    @property
    def animate(self) -> bool:
        return self._animate

    @property
    def time_scale(self) -> float:
        return self._time_scale

    def step(self, delta_time: float) -> float:
        """Call once per frame. Returns the scene time the renderer should use."""
        if self._animate:
            self._time += delta_time * self._time_scale
        return self._time

    def toggle_animation(self) -> None:
        self._animate = not self._animate

    def set_time_scale(self, value: float) -> None:
        self._time_scale = max(0.0, float(value))

    def adjust_time_scale(self, delta: float) -> None:
        self.set_time_scale(self._time_scale + delta)

    def height(self, x: float, z: float, t: float | None = None) -> float:
        return self.wave_field.height(x, z, self._time if t is None else t)

    def wave_parameters(self) -> dict:
        return self.wave_field.wave_parameters()

    def resample_ocean(self, t: float | None = None) -> None:
        """Re-bake the CPU-side ocean heights, for callers animating on the CPU."""
        self.ocean.resample(self.wave_field, self._time if t is None else t)

    def get_scene_parameters(self) -> dict:
        return {
            "grid_resolution": int(self.config.grid.resolution),
            "grid_size": float(self.config.grid.size),
            "wave_count": len(self.wave_field.components),
            "cloud_count": len(self.clouds),
            "ocean_vertices": self.ocean.mesh.num_vertices(),
            "ocean_indices": self.ocean.mesh.num_indices(),
            "time": float(self._time),
            "animate": bool(self._animate),
            "time_scale": float(self._time_scale),
        }

    def ocean_node_path(self, with_shader_inputs: bool = True) -> NodePath:
        ocean_np = self.ocean.mesh.to_node_path()
        # Grid triangles face down while the baked normals point up
        ocean_np.set_two_sided(True)
        if with_shader_inputs:
            self.wave_field.apply_shader_inputs(ocean_np, self._time)
        return ocean_np

    def cloud_node_paths(self) -> list[NodePath]:
        nodes = []
        for cloud in self.clouds:
            cloud_np = cloud.mesh.to_node_path()
            x, y, z = cloud.position
            # Same y-up to z-up mapping as the mesh buffers
            cloud_np.set_pos(x, -z, y)
            cloud_np.set_scale(cloud.scale)
            nodes.append(cloud_np)
        return nodes

    def build_scene_graph(self, name: str = "seascape", with_shader_inputs: bool = True) -> NodePath:
        root = NodePath(name)
        self.ocean_node_path(with_shader_inputs).reparent_to(root)

        clouds_np = root.attach_new_node("clouds")
        for cloud_np in self.cloud_node_paths():
            cloud_np.reparent_to(clouds_np)
        return root
