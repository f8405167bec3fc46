"""
Shared pytest fixtures.
"""

import random

import pytest

from seascape.app.scene_config import GridConfig, SceneConfig
from seascape.clouds.cloud_builder import CloudFieldConfig


def constant_noise(value):
    def noise(*coords):
        return value
    return noise


@pytest.fixture
def make_noise():
    return constant_noise


@pytest.fixture
def half_noise():
    return constant_noise(0.5)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def small_config():
    """A scene small enough to build in a few milliseconds."""
    return SceneConfig(
        grid=GridConfig(resolution=8, size=100.0),
        clouds=CloudFieldConfig(count=3, half_extent=50.0, sphere_resolution=4),
        seed=7,
    )
