"""Overlay and logo placement for CompositionEditor

Live edits (drag moves, slider changes) only replace the live state.
History is written once per interaction, by the commit_* methods or the
drag end handler.
"""

from constants import (
    LAYER_OVERLAY, LAYER_LOGO,
    SLIDER_OVERLAY_SCALE_MIN, SLIDER_OVERLAY_SCALE_MAX,
    SLIDER_LOGO_SCALE_MIN, SLIDER_LOGO_SCALE_MAX,
    SLIDER_LOGO_RADIUS_MIN, SLIDER_LOGO_RADIUS_MAX,
    SLIDER_LOGO_BORDER_MIN, SLIDER_LOGO_BORDER_MAX,
)
from models.transform import Vec2, round_half_up


def _clamp(value, low, high):
    return max(low, min(high, value))


class PlacementMixin:
    """Draggable layer positions, scale sliders and logo frame styling"""

    def _register_drag_layers(self):
        """Wire overlay and logo into the drag controller"""
        self.drag_controller.register_layer(
            LAYER_OVERLAY,
            get_position=self.overlay_position,
            on_move=self._on_layer_drag_move,
            on_end=self._on_layer_drag_end,
        )
        self.drag_controller.register_layer(
            LAYER_LOGO,
            get_position=self.logo_position,
            on_move=self._on_layer_drag_move,
            on_end=self._on_layer_drag_end,
        )

    # ========================================
    # Positions
    # ========================================

    def overlay_position(self):
        placement = self.state.overlay_placement
        return Vec2(placement.x, placement.y)

    def logo_position(self):
        placement = self.state.logo_placement
        return Vec2(placement.x, placement.y)

    def move_overlay(self, x, y):
        """Live overlay move in logical units, rounded to whole units"""
        placement = self.state.overlay_placement.with_changes(x=round_half_up(x), y=round_half_up(y))
        self._set_live_state(self.state.with_changes(overlay_placement=placement))

    def move_logo(self, x, y):
        """Live logo move in logical units, rounded to whole units"""
        placement = self.state.logo_placement.with_changes(x=round_half_up(x), y=round_half_up(y))
        self._set_live_state(self.state.with_changes(logo_placement=placement))

    def _on_layer_drag_move(self, layer_id, position):
        if layer_id == LAYER_OVERLAY:
            self.move_overlay(position.x, position.y)
        elif layer_id == LAYER_LOGO:
            self.move_logo(position.x, position.y)

    def _on_layer_drag_end(self, layer_id, position):
        if layer_id == LAYER_OVERLAY:
            self.commit_overlay_placement("Move overlay")
        elif layer_id == LAYER_LOGO:
            self.commit_logo_placement("Move logo")

    # ========================================
    # Sliders (live)
    # ========================================

    def set_overlay_scale(self, scale):
        scale = _clamp(scale, SLIDER_OVERLAY_SCALE_MIN, SLIDER_OVERLAY_SCALE_MAX)
        placement = self.state.overlay_placement.with_changes(scale=scale)
        self._set_live_state(self.state.with_changes(overlay_placement=placement))

    def set_logo_scale(self, scale):
        scale = _clamp(scale, SLIDER_LOGO_SCALE_MIN, SLIDER_LOGO_SCALE_MAX)
        self._update_logo_placement(scale=scale)

    def set_logo_corner_radius(self, radius):
        self._update_logo_placement(corner_radius=_clamp(radius, SLIDER_LOGO_RADIUS_MIN, SLIDER_LOGO_RADIUS_MAX))

    def set_logo_border_width(self, width):
        self._update_logo_placement(border_width=_clamp(width, SLIDER_LOGO_BORDER_MIN, SLIDER_LOGO_BORDER_MAX))

    def set_logo_border_color(self, color):
        self._update_logo_placement(border_color=color)

    def _update_logo_placement(self, **changes):
        placement = self.state.logo_placement.with_changes(**changes)
        self._set_live_state(self.state.with_changes(logo_placement=placement))

    # ========================================
    # Commits (interaction end)
    # ========================================

    def commit_overlay_placement(self, description="Adjust overlay"):
        self._save_state(description)

    def commit_logo_placement(self, description="Adjust logo"):
        self._save_state(description)
