# -*- coding: utf-8 -*-

"""
Filename: errors.py
Author: storro
Date: 2026-02-11
Description: Exception types raised while building the ocean and cloud geometry
"""


class SeascapeError(Exception):
    """Base class for every error raised by the package."""


class ConfigurationError(SeascapeError, ValueError):
    """A construction call received parameters it cannot work with."""


class InvalidParameterError(ConfigurationError):
    """Grid resolution or domain size outside their valid range."""


class ResourceError(SeascapeError, RuntimeError):
    """A geometry resource could not be produced or modified."""
