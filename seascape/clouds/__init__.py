from seascape.clouds.cloud_builder import (
    Cloud,
    CloudBuilder,
    CloudFieldConfig,
    CloudLayer,
    build_cloud_field,
)
from seascape.clouds.sphere_primitive import make_sphere, sphere_vertex_count

"""Cloud package public API."""

__all__ = [
    "Cloud",
    "CloudBuilder",
    "CloudFieldConfig",
    "CloudLayer",
    "build_cloud_field",
    "make_sphere",
    "sphere_vertex_count",
]
