"""
Undo/Redo History Manager for Post Composer

Manages a bounded, linear history of composition snapshots.
Pushing after an undo discards the redo branch; pushing past the cap
evicts the oldest snapshot.
"""

import logging

from constants import MAX_HISTORY_ENTRIES


class HistoryManager:
	"""Manages undo/redo history with state snapshots.

	Snapshots are expected to be immutable values (CompositionState), so
	they are stored and handed back as-is rather than deep-copied.
	"""

	def __init__(self, initial_state=None, max_history=MAX_HISTORY_ENTRIES, description="Initial state"):
		"""
		Initialize the history manager

		Args:
			initial_state: Optional seed snapshot; cursor starts at 0 when given
			max_history: Maximum number of states to keep in history
			description: Description of the seed snapshot
		"""
		if max_history < 1:
			raise ValueError(f"max_history must be at least 1, got {max_history}")
		self.max_history = max_history
		self.history = []  # {'data': snapshot, 'description': str} entries
		self.current_index = -1  # Current position in history (-1 means no states)
		self._listeners = []  # Callbacks to notify on state changes
		self._logger = logging.getLogger('History')

		if initial_state is not None:
			self.reset(initial_state, description)

	def __len__(self):
		return len(self.history)

	def reset(self, state, description="Initial state"):
		"""Drop all history and seed it with a single snapshot"""
		self.history = [{'data': state, 'description': description}]
		self.current_index = 0
		self._notify_listeners()
		self._logger.debug("History reset: %s", description)

	def push(self, state, description=""):
		"""
		Save a new state to history

		Args:
			state: The full composition snapshot to record
			description: Optional description of the change
		"""
		# If we're not at the end of history, remove everything after current position
		if self.current_index < len(self.history) - 1:
			self.history = self.history[:self.current_index + 1]

		self.history.append({'data': state, 'description': description})
		self.current_index = len(self.history) - 1

		# Trim history if it exceeds max_history
		if len(self.history) > self.max_history:
			self.history.pop(0)
			self.current_index -= 1

		self._notify_listeners()

		self._logger.debug("State saved: %s (index: %d, total: %d)", description, self.current_index, len(self.history))

	def undo(self):
		"""
		Move back one state in history

		Returns:
			The previous snapshot, or None if at beginning
		"""
		if not self.can_undo():
			self._logger.debug("Cannot undo - at beginning of history")
			return None

		self.current_index -= 1
		entry = self.history[self.current_index]

		self._notify_listeners()

		self._logger.debug("Undo to: %s (index: %d)", entry['description'], self.current_index)
		return entry['data']

	def redo(self):
		"""
		Move forward one state in history

		Returns:
			The next snapshot, or None if at end
		"""
		if not self.can_redo():
			self._logger.debug("Cannot redo - at end of history")
			return None

		self.current_index += 1
		entry = self.history[self.current_index]

		self._notify_listeners()

		self._logger.debug("Redo to: %s (index: %d)", entry['description'], self.current_index)
		return entry['data']

	def can_undo(self):
		"""Check if undo is available"""
		return self.current_index > 0

	def can_redo(self):
		"""Check if redo is available"""
		return self.current_index < len(self.history) - 1

	def current(self):
		"""Snapshot at the cursor, or None before initialization"""
		if 0 <= self.current_index < len(self.history):
			return self.history[self.current_index]['data']
		return None

	def clear(self):
		"""Clear all history"""
		self.history = []
		self.current_index = -1
		self._notify_listeners()
		self._logger.debug("History cleared")

	def add_listener(self, callback):
		"""
		Add a listener to be notified when history state changes

		Args:
			callback: Function to call when history changes (receives can_undo, can_redo)
		"""
		self._listeners.append(callback)

	def remove_listener(self, callback):
		"""Remove a listener"""
		if callback in self._listeners:
			self._listeners.remove(callback)

	def _notify_listeners(self):
		"""Notify all listeners of history state change"""
		for callback in list(self._listeners):
			try:
				callback(self.can_undo(), self.can_redo())
			except Exception:
				self._logger.exception("Error notifying listener")

	def get_current_description(self):
		"""Get the description of the current state"""
		if 0 <= self.current_index < len(self.history):
			return self.history[self.current_index]['description']
		return ""

	def get_undo_description(self):
		"""Get the description of the change that would be reverted by undo"""
		if self.can_undo():
			return self.history[self.current_index]['description']
		return ""

	def get_redo_description(self):
		"""Get the description of the state that would be restored by redo"""
		if self.can_redo():
			return self.history[self.current_index + 1]['description']
		return ""
