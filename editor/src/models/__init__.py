"""
Post Composer - Data Models

This module contains the immutable value types the editor works with.
This is the MODEL in MVC architecture.
"""

from .composition import (
    CompositionState, PostContent, OverlayPlacement, LogoPlacement,
    ColorTheme, Typography, TemplateType, TextAlign, default_composition,
)
from .raster import RasterImage
from .transform import Vec2

__all__ = [
    'CompositionState', 'PostContent', 'OverlayPlacement', 'LogoPlacement',
    'ColorTheme', 'Typography', 'TemplateType', 'TextAlign', 'default_composition',
    'RasterImage', 'Vec2',
]
