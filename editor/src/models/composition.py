"""
Post Composer - Composition Domain Model

A CompositionState is one complete, displayable version of the design and
the unit stored in undo/redo history. Every value here is immutable: edits
go through ``with_changes`` which returns a new value and leaves the
original (possibly already recorded in history) untouched.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from constants import (
    SERVICES, DEFAULT_HEADLINE, DEFAULT_BODY, DEFAULT_CTA,
    DEFAULT_LAYER_SCALE, DEFAULT_LAYER_X, DEFAULT_LAYER_Y,
    DEFAULT_LOGO_RADIUS, DEFAULT_LOGO_BORDER_WIDTH, DEFAULT_LOGO_BORDER_COLOR,
    ASSET_BACKGROUND, ASSET_OVERLAY, ASSET_LOGO,
)
from models.raster import RasterImage


class TemplateType(Enum):
    """Visual skins understood by the template renderer."""
    MODERN_BLUE = 'Modern Blue'
    DARK_CYBER = 'Dark Cyber'
    CLEAN_CORPORATE = 'Clean Corporate'
    VIBRANT_GRADIENT = 'Vibrant Gradient'
    DARK_CORPORATE = 'Dark Corporate'
    MINIMALIST_LIGHT = 'Minimalist Light'
    TECH_NEON = 'Tech Neon'
    GLASS_MORPHISM = 'Glass Morphism'
    LUXURY_GOLD = 'Luxury Gold'
    NEO_BRUTALISM = 'Neo Brutalism'
    SOFT_PASTEL = 'Soft Pastel'
    RETRO_POP = 'Retro Pop'
    NATURE_ORGANIC = 'Nature Organic'
    BOLD_TYPOGRAPHY = 'Bold Typography'
    MINIMAL_DARK = 'Minimal Dark'
    ARTISTIC_BRUSH = 'Artistic Brush'

    @classmethod
    def from_name(cls, name, default=None):
        """Look up a template by display name ('Dark Cyber') or member name ('DARK_CYBER')."""
        for template in cls:
            if name in (template.value, template.name):
                return template
        if default is not None:
            return default
        raise ValueError(f"Unknown template: {name!r}")


class TextAlign(Enum):
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'


@dataclass(frozen=True)
class PostContent:
    headline: str = DEFAULT_HEADLINE
    body: str = DEFAULT_BODY
    cta: str = DEFAULT_CTA

    def with_changes(self, **changes) -> 'PostContent':
        return replace(self, **changes)


@dataclass(frozen=True)
class OverlayPlacement:
    """Placement of the decorative overlay in logical units."""
    scale: float = DEFAULT_LAYER_SCALE
    x: float = DEFAULT_LAYER_X
    y: float = DEFAULT_LAYER_Y

    def __post_init__(self):
        if not self.scale > 0:
            raise ValueError(f"Overlay scale must be positive, got {self.scale}")

    def with_changes(self, **changes) -> 'OverlayPlacement':
        return replace(self, **changes)


@dataclass(frozen=True)
class LogoPlacement:
    """Placement and frame styling of the logo in logical units."""
    scale: float = DEFAULT_LAYER_SCALE
    x: float = DEFAULT_LAYER_X
    y: float = DEFAULT_LAYER_Y
    corner_radius: float = DEFAULT_LOGO_RADIUS
    border_width: float = DEFAULT_LOGO_BORDER_WIDTH
    border_color: str = DEFAULT_LOGO_BORDER_COLOR

    def __post_init__(self):
        if not self.scale > 0:
            raise ValueError(f"Logo scale must be positive, got {self.scale}")
        if self.corner_radius < 0:
            raise ValueError(f"Logo corner radius must be >= 0, got {self.corner_radius}")
        if self.border_width < 0:
            raise ValueError(f"Logo border width must be >= 0, got {self.border_width}")

    def with_changes(self, **changes) -> 'LogoPlacement':
        return replace(self, **changes)


@dataclass(frozen=True)
class ColorTheme:
    """Color overrides applied on top of the template defaults."""
    primary: str
    secondary: str
    accent: str
    background: str
    text: str

    @classmethod
    def from_dict(cls, data: dict) -> 'ColorTheme':
        return cls(
            primary=data['primary'],
            secondary=data['secondary'],
            accent=data['accent'],
            background=data['background'],
            text=data['text'],
        )


@dataclass(frozen=True)
class Typography:
    # Empty font / color strings mean "use the template default"
    headline_font: str = ''
    body_font: str = ''
    text_color: str = ''
    text_align: TextAlign = TextAlign.LEFT

    def with_changes(self, **changes) -> 'Typography':
        return replace(self, **changes)


_ASSET_FIELDS = {
    ASSET_BACKGROUND: 'background_asset',
    ASSET_OVERLAY: 'overlay_asset',
    ASSET_LOGO: 'logo_asset',
}


@dataclass(frozen=True)
class CompositionState:
    """One complete version of the design."""
    service_label: str = SERVICES[0]
    template: TemplateType = TemplateType.MODERN_BLUE
    content: PostContent = field(default_factory=PostContent)
    background_asset: Optional[RasterImage] = None
    overlay_asset: Optional[RasterImage] = None
    logo_asset: Optional[RasterImage] = None
    overlay_placement: OverlayPlacement = field(default_factory=OverlayPlacement)
    logo_placement: LogoPlacement = field(default_factory=LogoPlacement)
    color_theme: Optional[ColorTheme] = None
    typography: Typography = field(default_factory=Typography)

    def with_changes(self, **changes) -> 'CompositionState':
        """Return a copy with the given top-level fields replaced."""
        return replace(self, **changes)

    def get_asset(self, slot: str) -> Optional[RasterImage]:
        return getattr(self, _asset_field(slot))

    def with_asset(self, slot: str, image: Optional[RasterImage]) -> 'CompositionState':
        return replace(self, **{_asset_field(slot): image})


def _asset_field(slot):
    try:
        return _ASSET_FIELDS[slot]
    except KeyError:
        raise ValueError(f"Unknown asset slot: {slot!r}") from None


def default_composition(service_label: str = SERVICES[0], content: Optional[PostContent] = None) -> CompositionState:
    """Seed state for a new editing session."""
    return CompositionState(
        service_label=service_label,
        content=content if content is not None else PostContent(),
    )
