from seascape.ocean.noise_source import NoiseSource
from seascape.ocean.wave_field import DEFAULT_WAVE_COMPONENTS, WaveComponent, WaveField

"""Ocean package public API."""

__all__ = [
    "DEFAULT_WAVE_COMPONENTS",
    "NoiseSource",
    "WaveComponent",
    "WaveField",
]
