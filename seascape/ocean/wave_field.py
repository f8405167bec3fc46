# -*- coding: utf-8 -*-

"""
Filename: wave_field.py
Author: storro
Date: 2026-02-11
Description: Sum-of-sines Gerstner height field with per-vertex noise jitter
"""

import math

from dataclasses import dataclass, field
from typing import Sequence

from panda3d.core import LVecBase2f, NodePath, PTA_LVecBase2f, PTA_float

from seascape.ocean.noise_source import NoiseFunction, NoiseSource
from seascape.util.errors import ConfigurationError

TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class WaveComponent:
    amplitude: float
    wavelength: float
    speed: float
    # Used as given, a non-unit vector scales the effective wavenumber
    direction: tuple[float, float]

    def __post_init__(self) -> None:
        if self.wavelength <= 0.0:
            raise ConfigurationError(f"wavelength must be > 0, got {self.wavelength}")
        if self.amplitude < 0.0:
            raise ConfigurationError(f"amplitude must be >= 0, got {self.amplitude}")
        if len(self.direction) != 2:
            raise ConfigurationError(f"direction must be a 2D vector, got {self.direction}")


# Wind-driven swell, the largest component first
DEFAULT_WAVE_COMPONENTS: tuple[WaveComponent, ...] = (
    WaveComponent(10.0, 200.0, 10.5, (0.85, 0.52)),
    WaveComponent(5.0, 100.0, 7.5, (0.92, 0.38)),
    WaveComponent(3.5, 55.0, 5.5, (0.78, 0.62)),
    WaveComponent(1.5, 30.0, 4.2, (1.0, 0.1)),
    WaveComponent(0.8, 16.0, 3.0, (0.88, 0.47)),
)


@dataclass(frozen=True)
class WaveField:
    """
    Immutable set of wave components evaluated as a height function of (x, z, t).

    The multipliers applied to the noise samples below (0.9/0.6, 0.8/0.4,
    0.2 rad, the chop and modulation terms) shape the look of the surface and
    must stay exactly as written, as must the summation order.
    """

    components: tuple[WaveComponent, ...] = DEFAULT_WAVE_COMPONENTS
    noise: NoiseFunction = field(default_factory=NoiseSource, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", tuple(self.components))

    def evaluate(self, position: Sequence[float], t: float) -> float:
        """Height at an (x, y, z) position, the y coordinate is ignored."""
        return self.height(position[0], position[2], t)

    def height(self, x: float, z: float, t: float) -> float:
        noise = self.noise
        y = 0.0

        for i, wave in enumerate(self.components):
            # Slightly randomize wavelength per vertex
            wavelength_var = wave.wavelength * (0.9 + 0.6 * noise(x * 0.01, z * 0.01))
            k = TWO_PI / wavelength_var

            # Per-component phase, independent of position
            phase = noise(i * 0.1) * TWO_PI

            # Slightly rotate the direction per vertex (radians)
            angle_offset = noise(x * 0.02, z * 0.02) * 0.2
            cos_a = math.cos(angle_offset)
            sin_a = math.sin(angle_offset)
            dx, dz = wave.direction
            dir_x = dx * cos_a - dz * sin_a
            dir_z = dx * sin_a + dz * cos_a

            dot_val = dir_x * x + dir_z * z

            amp_var = wave.amplitude * (0.8 + 0.4 * noise(x * 0.01, z * 0.01))

            y += amp_var * math.sin(k * dot_val - wave.speed * t + phase)

        # High-frequency chop for surface roughness
        chop_amp = 1.0 + 2.0 * noise(x * 0.1, z * 0.1, t * 0.5)
        chop_wavelength = 10.0 + 5.0 * noise(x * 0.05, z * 0.05)
        chop_k = TWO_PI / chop_wavelength
        y += chop_amp * math.sin(chop_k * (x + z) - 10.0 * t)

        # Large-scale low-frequency envelope
        height_mod = 0.8 + 0.4 * noise(x * 0.005, z * 0.005)
        y *= height_mod

        return y

    def wave_parameters(self) -> dict:
        return {
            "amplitudes": tuple(w.amplitude for w in self.components),
            "wavelengths": tuple(w.wavelength for w in self.components),
            "speeds": tuple(w.speed for w in self.components),
            "directions": tuple(tuple(w.direction) for w in self.components),
        }

    def shader_inputs(self, t: float) -> dict:
        params = self.wave_parameters()
        return {
            "u_time": float(t),
            "u_wave_count": len(self.components),
            "u_amplitudes": params["amplitudes"],
            "u_wavelengths": params["wavelengths"],
            "u_speeds": params["speeds"],
            "u_directions": params["directions"],
        }

    def apply_shader_inputs(self, node_path: NodePath, t: float) -> None:
        """Upload the wave table and time to a node rendered with the ocean shader."""
        inputs = self.shader_inputs(t)

        node_path.set_shader_input("u_time", inputs["u_time"])
        node_path.set_shader_input("u_wave_count", int(inputs["u_wave_count"]))

        for name in ("u_amplitudes", "u_wavelengths", "u_speeds"):
            node_path.set_shader_input(name, _float_array(inputs[name]))

        directions = PTA_LVecBase2f.empty_array(len(inputs["u_directions"]))
        for i, (dx, dz) in enumerate(inputs["u_directions"]):
            directions[i] = LVecBase2f(dx, dz)
        node_path.set_shader_input("u_directions", directions)


def _float_array(values: Sequence[float]) -> PTA_float:
    arr = PTA_float.empty_array(len(values))
    for i, v in enumerate(values):
        arr[i] = float(v)
    return arr
