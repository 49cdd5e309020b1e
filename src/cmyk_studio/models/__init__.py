"""
CMYK Portrait Studio - Data Models

This module contains the data model classes for the studio canvas.
This is the MODEL in MVC architecture: no Qt imports.

Public API: Import Scene, PlacedLayer and the value types from models
"""

from .transform import Vec2, LayerTransform
from .part import Role, Channel, PartDefinition
from .raster import SourceRaster, SeparationLayerSet
from .tracking import Handedness, Hand, TrackingObservation
from .scene import Scene, PlacedLayer

__all__ = [
    'Vec2', 'LayerTransform',
    'Role', 'Channel', 'PartDefinition',
    'SourceRaster', 'SeparationLayerSet',
    'Handedness', 'Hand', 'TrackingObservation',
    'Scene', 'PlacedLayer',
]
