"""Drag session controller for draggable composition layers.

Turns discrete pointer events into continuous layer repositioning:
- begin: capture pointer and layer anchors
- move: live, visual-only position updates (never touches history)
- end: one commit of the final position

Toolkit-agnostic; Qt widgets feed it through DraggableLayerWidget and
other front ends can call handle_gesture() directly.
"""

import logging

from models.transform import Vec2
from utils.coordinate_transforms import screen_delta_to_logical
from components.transform_widgets.drag_context import DragSession, GESTURE_BEGIN, GESTURE_MOVE, GESTURE_END


class _LayerBinding:
	"""Callbacks registered for one draggable layer."""

	def __init__(self, get_position=None, on_move=None, on_end=None):
		self.get_position = get_position
		self.on_move = on_move
		self.on_end = on_end


class DragController:
	"""Owns at most one open DragSession at a time.

	Args:
		container_width: Callable returning the current rendered width of the
			composition container in pixels (or None when unknown). Queried
			on every move because the container can resize mid-drag.
	"""

	def __init__(self, container_width=None):
		self._layers = {}
		self._container_width = container_width
		self.session = None
		self._logger = logging.getLogger('DragController')

	# ========================================
	# Layer registration
	# ========================================

	def register_layer(self, layer_id, get_position=None, on_move=None, on_end=None):
		"""Register a layer.

		Args:
			layer_id: Identifier used by gesture events
			get_position: Callable returning the layer's current logical Vec2
			on_move: Called with (layer_id, Vec2) for every live update.
				A layer without a move handler is not draggable.
			on_end: Called with (layer_id, Vec2) once when the drag ends
		"""
		self._layers[layer_id] = _LayerBinding(get_position, on_move, on_end)

	def unregister_layer(self, layer_id):
		if self.session and self.session.layer_id == layer_id:
			self.session = None
		self._layers.pop(layer_id, None)

	def set_container_width_provider(self, provider):
		self._container_width = provider

	def is_drag_enabled(self, layer_id):
		binding = self._layers.get(layer_id)
		return binding is not None and binding.on_move is not None

	@property
	def is_dragging(self):
		return self.session is not None

	def _current_container_width(self):
		if self._container_width is None:
			return None
		return self._container_width()

	# ========================================
	# Session transitions
	# ========================================

	def begin_drag(self, layer_id, pointer, layer_position=None):
		"""Open a drag session on a layer.

		No-op (returns False) when the layer is not drag-enabled or another
		session is still open.

		Args:
			layer_id: Layer being grabbed
			pointer: Pointer position in screen pixels (Vec2 or (x, y))
			layer_position: Layer position in logical units; read from the
				layer's get_position callback when omitted
		"""
		if not self.is_drag_enabled(layer_id):
			return False
		if self.session is not None:
			self._logger.debug("Ignoring begin on %s: session on %s still open", layer_id, self.session.layer_id)
			return False

		if layer_position is None:
			getter = self._layers[layer_id].get_position
			layer_position = getter() if getter else Vec2(0, 0)

		self.session = DragSession(
			layer_id=layer_id,
			anchor_pointer=Vec2(*pointer),
			anchor_layer=Vec2(*layer_position),
		)
		return True

	def on_pointer_move(self, pointer):
		"""Apply a pointer move to the open session.

		Returns:
			Vec2: new live layer position (integer logical units), or None
			when no session is open
		"""
		if self.session is None:
			return None

		pointer = Vec2(*pointer)
		delta = pointer - self.session.anchor_pointer
		logical = screen_delta_to_logical(delta.x, delta.y, self._current_container_width())
		position = (self.session.anchor_layer + logical).rounded()

		self.session.current_layer = position
		self.session.moved = True

		binding = self._layers.get(self.session.layer_id)
		if binding and binding.on_move:
			binding.on_move(self.session.layer_id, position)
		return position

	def end_drag(self):
		"""Close the session and hand the final position to the layer's end handler.

		The end handler is called even when the pointer never moved: every
		completed gesture is a checkpoint.

		Returns:
			Vec2: final position, or None when no session was open
		"""
		session = self.session
		if session is None:
			return None
		self.session = None

		binding = self._layers.get(session.layer_id)
		if binding and binding.on_end:
			binding.on_end(session.layer_id, session.current_layer)
		return session.current_layer

	def cancel_drag(self):
		"""Abandon the open session without committing; restores the anchor position."""
		session = self.session
		if session is None:
			return
		self.session = None
		binding = self._layers.get(session.layer_id)
		if binding and binding.on_move and session.moved:
			binding.on_move(session.layer_id, session.anchor_layer)

	# ========================================
	# Gesture dispatch
	# ========================================

	def handle_gesture(self, event):
		"""Dispatch a GestureEvent.

		Move/end events for a layer other than the one being dragged are ignored.
		"""
		if event.kind == GESTURE_BEGIN:
			return self.begin_drag(event.layer_id, event.pointer)

		if self.session is None or self.session.layer_id != event.layer_id:
			return None

		if event.kind == GESTURE_MOVE:
			return self.on_pointer_move(event.pointer)
		if event.kind == GESTURE_END:
			return self.end_drag()
		return None
