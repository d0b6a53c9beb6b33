"""
Composition Canvas - preview surface for the live composition

The canvas is LOGICAL_CANVAS_SIZE * zoom pixels square. It paints the
background asset and hosts the draggable overlay and logo widgets, placing
them from the live state through the logical->screen transform. Template
skins are rendered by the template collaborator, not here.
"""

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, QRect
from PyQt5.QtGui import QPainter, QPixmap, QColor, QPen

from constants import LOGICAL_CANVAS_SIZE, LAYER_OVERLAY, LAYER_LOGO
from components.layer_widget import DraggableLayerWidget
from utils.coordinate_transforms import logical_to_screen, render_scale_factor

# Layer anchors and natural widths in logical units; placement x/y offset from the anchor
OVERLAY_ANCHOR = (150, 150)
OVERLAY_BASE_WIDTH = 300
LOGO_ANCHOR = (24, 24)
LOGO_BASE_HEIGHT = 48


class CompositionCanvas(QWidget):
	"""Preview of a CompositionEditor's live state"""

	def __init__(self, editor, parent=None):
		super().__init__(parent)
		self.editor = editor
		self._background_image = None
		self._background_pixmap = QPixmap()

		self.overlay_widget = DraggableLayerWidget(LAYER_OVERLAY, editor.drag_controller, self)
		self.logo_widget = DraggableLayerWidget(LAYER_LOGO, editor.drag_controller, self)
		self.overlay_widget.setVisible(False)
		self.logo_widget.setVisible(False)

		# Drag math reads the rendered width on every move
		editor.drag_controller.set_container_width_provider(self.rendered_width)
		editor.add_state_listener(self.refresh)

		self.apply_zoom(editor.zoom_level)

	def rendered_width(self):
		return self.width()

	def apply_zoom(self, zoom_level):
		size = int(round(LOGICAL_CANVAS_SIZE * zoom_level))
		self.setFixedSize(size, size)
		self.refresh(self.editor.state)

	def resizeEvent(self, event):
		super().resizeEvent(event)
		self.refresh(self.editor.state)

	def refresh(self, state):
		"""Sync widgets with a CompositionState"""
		if state.background_asset is not self._background_image:
			self._background_image = state.background_asset
			self._background_pixmap = QPixmap()
			if state.background_asset is not None:
				self._background_pixmap.loadFromData(state.background_asset.data)

		self.overlay_widget.set_image(state.overlay_asset)
		self.logo_widget.set_image(state.logo_asset)

		placement = state.overlay_placement
		self._place_layer(self.overlay_widget, OVERLAY_ANCHOR, placement.x, placement.y,
			width=OVERLAY_BASE_WIDTH * placement.scale)

		placement = state.logo_placement
		self._place_layer(self.logo_widget, LOGO_ANCHOR, placement.x, placement.y,
			height=LOGO_BASE_HEIGHT * placement.scale)
		self.logo_widget.setStyleSheet(
			f"border: {placement.border_width}px solid {placement.border_color}; "
			f"border-radius: {placement.corner_radius}px;"
			if placement.border_width > 0 else
			f"border-radius: {placement.corner_radius}px;"
		)

		self.update()

	def _place_layer(self, widget, anchor, x, y, width=None, height=None):
		"""Position and size a layer widget from logical placement values"""
		base_w, base_h = widget.base_size()
		if base_w <= 0 or base_h <= 0:
			return
		if width is not None:
			height = width * base_h / base_w
		else:
			width = height * base_w / base_h

		top_left = logical_to_screen(anchor[0] + x, anchor[1] + y, self.rendered_width())
		scale = render_scale_factor(self.rendered_width())
		widget.setGeometry(QRect(
			int(round(top_left.x)), int(round(top_left.y)),
			max(1, int(round(width * scale))), max(1, int(round(height * scale))),
		))

	def paintEvent(self, event):
		painter = QPainter(self)
		theme = self.editor.state.color_theme
		painter.fillRect(self.rect(), QColor(theme.background) if theme else QColor('#ffffff'))
		if not self._background_pixmap.isNull():
			painter.drawPixmap(self.rect(), self._background_pixmap)
		painter.setPen(QPen(QColor('#cccccc'), 1))
		painter.drawRect(self.rect().adjusted(0, 0, -1, -1))
		painter.end()
