"""
Draggable Layer Widget - Qt front end for overlay and logo layers

Shows a layer's raster and forwards mouse press/move/release to the
DragController as begin/move/end. Pointer positions are taken in global
screen coordinates so moving the widget mid-drag doesn't shift the anchor.
"""

from PyQt5.QtWidgets import QLabel
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QPixmap

from models.transform import Vec2


class DraggableLayerWidget(QLabel):
	"""Pixmap label that drags a composition layer"""

	# Signals
	dragStarted = pyqtSignal(str)  # layer_id
	dragEnded = pyqtSignal(str)    # layer_id

	def __init__(self, layer_id, drag_controller, parent=None):
		super().__init__(parent)
		self.layer_id = layer_id
		self.drag_controller = drag_controller
		self._image = None
		self._base_pixmap = QPixmap()
		self.setScaledContents(True)
		self.setAttribute(Qt.WA_TranslucentBackground)
		self._update_cursor()

	def set_image(self, image):
		"""Show a RasterImage (or nothing for None)"""
		if image is self._image:
			return
		self._image = image
		pixmap = QPixmap()
		if image is not None:
			pixmap.loadFromData(image.data)
		self._base_pixmap = pixmap
		self.setPixmap(pixmap)
		self.setVisible(image is not None)

	def base_size(self):
		"""Natural (width, height) of the current pixmap"""
		return self._base_pixmap.width(), self._base_pixmap.height()

	def _update_cursor(self, dragging=False):
		if not self.drag_controller.is_drag_enabled(self.layer_id):
			self.setCursor(Qt.ArrowCursor)
		elif dragging:
			self.setCursor(Qt.ClosedHandCursor)
		else:
			self.setCursor(Qt.OpenHandCursor)

	@staticmethod
	def _pointer(event):
		pos = event.globalPos()
		return Vec2(pos.x(), pos.y())

	def _owns_session(self):
		session = self.drag_controller.session
		return session is not None and session.layer_id == self.layer_id

	def mousePressEvent(self, event):
		"""Handle mouse press"""
		if event.button() == Qt.LeftButton and self.drag_controller.begin_drag(self.layer_id, self._pointer(event)):
			self._update_cursor(dragging=True)
			self.dragStarted.emit(self.layer_id)
			event.accept()
			return
		super().mousePressEvent(event)

	def mouseMoveEvent(self, event):
		"""Handle mouse move"""
		if self._owns_session():
			self.drag_controller.on_pointer_move(self._pointer(event))
			event.accept()
			return
		super().mouseMoveEvent(event)

	def mouseReleaseEvent(self, event):
		"""Handle mouse release"""
		if event.button() == Qt.LeftButton and self._owns_session():
			self.drag_controller.end_drag()
			self._update_cursor()
			self.dragEnded.emit(self.layer_id)
			event.accept()
			return
		super().mouseReleaseEvent(event)
