"""
Post Composer - Editing Session

CompositionEditor owns the single live CompositionState of a session, the
undo/redo history seeded with it and the drag controller for the overlay
and logo layers. It has no widget dependencies; the Qt window and canvas
drive it and listen to it.
"""

import logging

from constants import MAX_HISTORY_ENTRIES
from models.composition import default_composition
from utils.history_manager import HistoryManager
from components.transform_widgets import DragController

from main.history_mixin import HistoryMixin
from main.placement_mixin import PlacementMixin
from main.content_mixin import ContentMixin
from main.asset_mixin import AssetMixin
from main.generator_mixin import GeneratorMixin
from main.config_mixin import ConfigMixin


class CompositionEditor(HistoryMixin, PlacementMixin, ContentMixin, AssetMixin, GeneratorMixin, ConfigMixin):
    """Interactive composition editing session"""

    def __init__(self, initial_state=None, config_dir=None, max_history=MAX_HISTORY_ENTRIES, container_width=None):
        """
        Args:
            initial_state: Seed CompositionState (default: default_composition())
            config_dir: Directory for the settings file (default: ~/.post_composer)
            max_history: History cap
            container_width: Callable returning the preview's rendered width in pixels
        """
        self._logger = logging.getLogger('CompositionEditor')

        self.state = initial_state if initial_state is not None else default_composition()
        self.history_manager = HistoryManager(self.state, max_history, "New composition")
        self._is_applying_history = False
        self._state_listeners = []
        self.last_error = None

        self.drag_controller = DragController(container_width)
        self._register_drag_layers()

        self._init_config(config_dir)

        self._logger.debug("Created new editing session")

    def reset(self, state=None):
        """Start over from a new seed state; history is discarded"""
        if self.drag_controller.is_dragging:
            self.drag_controller.cancel_drag()
        self.state = state if state is not None else default_composition()
        self.history_manager.reset(self.state, "New composition")
        self.last_error = None
        self._notify_state_listeners()
