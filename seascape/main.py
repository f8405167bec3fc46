# -*- coding: utf-8 -*-

"""
Filename: main.py
Author: storro
Date: 2026-02-11
Description: Command-line entry point: builds the scene and optionally exports it
"""

import argparse
import logging

from panda3d.core import Filename

from seascape.app.scene import SceneAssembler
from seascape.app.scene_config import load_scene_config, prc_cloud_half_extent
from seascape.util.errors import ResourceError
from seascape.util.logging_config import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate the ocean grid and cloud field")
    parser.add_argument("--seed", type=int, default=None, help="cloud RNG seed")
    parser.add_argument("--noise-seed", type=int, default=None, help="Perlin table seed")
    parser.add_argument("--grid-resolution", type=int, default=None,
                        help="vertices per side of the ocean grid")
    parser.add_argument("--grid-size", type=float, default=None,
                        help="world-space side length of the ocean grid")
    parser.add_argument("--clouds", type=int, default=None,
                        help="number of clouds, 0 disables the cloud field")
    parser.add_argument("--export", default=None, metavar="PATH.bam",
                        help="write the assembled scene graph to a bam file")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-to-file", action="store_true")
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> SceneAssembler:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_to_file)

    config = load_scene_config()
    if args.seed is not None:
        config.seed = args.seed
    if args.noise_seed is not None:
        config.noise_seed = args.noise_seed
    if args.grid_resolution is not None:
        config.grid.resolution = args.grid_resolution
    if args.grid_size is not None:
        config.grid.size = args.grid_size
        if prc_cloud_half_extent() <= 0.0:
            config.clouds.half_extent = args.grid_size * 0.5
    if args.clouds == 0:
        config.clouds_enabled = False
    elif args.clouds is not None:
        # Negative counts are left for SceneConfig.validate to reject
        config.clouds_enabled = True
        config.clouds.count = args.clouds

    scene = SceneAssembler(config)
    params = scene.get_scene_parameters()
    logging.info("Vertices: %d, Indices: %d, Clouds: %d",
                 params["ocean_vertices"], params["ocean_indices"], params["cloud_count"])

    if args.export:
        # Shader inputs belong to the renderer, only the geometry is written
        root = scene.build_scene_graph(with_shader_inputs=False)
        if not root.write_bam_file(Filename.from_os_specific(args.export)):
            raise ResourceError(f"could not write {args.export}")
        logging.info("Scene written to %s", args.export)

    return scene


def main(argv: list[str] | None = None) -> None:
    run(argv)


if __name__ == "__main__":
    main()
