# -*- coding: utf-8 -*-

"""
Filename: noise_source.py
Author: storro
Date: 2026-02-11
Description: Smooth pseudo-random field used to jitter the wave parameters
"""

from typing import Protocol

from panda3d.core import PerlinNoise2, PerlinNoise3

from seascape.util.errors import ConfigurationError


class NoiseFunction(Protocol):
    def __call__(self, *coords: float) -> float: ...


class NoiseSource:
    """
    Coherent noise in [0, 1] for one, two or three coordinates.

    Backed by Panda3D's Perlin tables. The raw noise lies in [-1, 1] and is
    remapped (and clamped) to [0, 1]. A one-coordinate call samples the 2D
    field along b = 0.
    """

    def __init__(self, seed: int = 1, table_size: int = 256) -> None:
        # Panda3D draws a process-wide seed for 0, which breaks reproducibility
        if seed <= 0:
            raise ConfigurationError(f"noise seed must be a positive integer, got {seed}")

        self.seed = int(seed)
        self._noise2 = PerlinNoise2(1.0, 1.0, table_size, self.seed)
        self._noise3 = PerlinNoise3(1.0, 1.0, 1.0, table_size, self.seed)

    def __call__(self, *coords: float) -> float:
        if len(coords) == 1:
            raw = self._noise2.noise(float(coords[0]), 0.0)
        elif len(coords) == 2:
            raw = self._noise2.noise(float(coords[0]), float(coords[1]))
        elif len(coords) == 3:
            raw = self._noise3.noise(float(coords[0]), float(coords[1]), float(coords[2]))
        else:
            raise TypeError(f"noise takes 1 to 3 coordinates, got {len(coords)}")

        return min(1.0, max(0.0, 0.5 + 0.5 * raw))
