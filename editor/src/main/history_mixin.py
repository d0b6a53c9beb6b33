"""History management and undo/redo for CompositionEditor"""

from utils.logger import loggerRaise


class HistoryMixin:
    """Undo/redo system, live state replacement and change notification"""

    # Expected state variables (initialized in CompositionEditor):
    # - state: CompositionState (the live state)
    # - history_manager: HistoryManager seeded with the initial state
    # - drag_controller: DragController
    # - last_error: str or None
    # - _is_applying_history: bool
    # - _state_listeners: list of callables receiving the live state

    def _capture_current_state(self):
        """Capture the current state for history"""
        # States are immutable, the live value itself is the snapshot
        return self.state

    def _set_live_state(self, state):
        """Replace the live state without touching history (visual feedback only)"""
        if state is self.state:
            return
        self.state = state
        self._notify_state_listeners()

    def _restore_state(self, state):
        """Restore a state from history"""
        if state is None:
            return

        self._is_applying_history = True
        try:
            # A drag anchored on the old state would snap back onto the restored one
            if self.drag_controller.is_dragging:
                self.drag_controller.cancel_drag()
            self.state = state
            self._notify_state_listeners()
        except Exception as e:
            loggerRaise(e, "Error restoring history state")
        finally:
            self._is_applying_history = False

    def _save_state(self, description):
        """Save current state to history"""
        if self._is_applying_history:
            return  # Don't save state during undo/redo

        self.history_manager.push(self._capture_current_state(), description)
        self.last_error = None

    def _apply_edit(self, state, description):
        """Make a new live state and checkpoint it in one step"""
        self._set_live_state(state)
        self._save_state(description)

    def commit(self, description="Edit"):
        """Checkpoint the live state, e.g. when a slider is released"""
        self._save_state(description)

    def undo(self):
        """Undo the last action

        Returns:
            bool: True if the live state changed, False at the start of history
        """
        state = self.history_manager.undo()
        if state is None:
            return False
        self._restore_state(state)
        return True

    def redo(self):
        """Redo the last undone action

        Returns:
            bool: True if the live state changed, False at the end of history
        """
        state = self.history_manager.redo()
        if state is None:
            return False
        self._restore_state(state)
        return True

    def can_undo(self):
        return self.history_manager.can_undo()

    def can_redo(self):
        return self.history_manager.can_redo()

    def add_history_listener(self, callback):
        """callback(can_undo, can_redo) on every history change"""
        self.history_manager.add_listener(callback)

    def add_state_listener(self, callback):
        """callback(state) whenever the live state changes"""
        self._state_listeners.append(callback)

    def remove_state_listener(self, callback):
        if callback in self._state_listeners:
            self._state_listeners.remove(callback)

    def _notify_state_listeners(self):
        for callback in list(self._state_listeners):
            callback(self.state)
