"""
Background removal worker thread.

QThread-based worker that runs background removal off the UI thread so
large overlays don't stall pointer handling.
"""

import logging

from PyQt5.QtCore import QThread, pyqtSignal

from constants import DEFAULT_REMOVAL_TOLERANCE
from utils.errors import InputError
from services.background_removal import remove_background

logger = logging.getLogger(__name__)


class BackgroundRemovalWorker(QThread):
    """Worker thread for background removal to keep GUI responsive."""

    finished_image = pyqtSignal(object)  # RasterImage
    failed = pyqtSignal(str)             # user-facing message

    def __init__(self, image, tolerance=DEFAULT_REMOVAL_TOLERANCE, parent=None):
        super().__init__(parent)
        self.image = image
        self.tolerance = tolerance
        self.result = None
        self.error = None

    def run(self):
        """Process the image and report through signals."""
        try:
            self.result = remove_background(self.image, self.tolerance)
        except InputError as e:
            self.error = e
            self.failed.emit(f"Failed to remove background: {e}")
            return
        except Exception as e:
            # Nothing may escape QThread.run; PyQt5 aborts the process on it
            logger.exception("Background removal crashed")
            self.error = e
            self.failed.emit(f"Failed to remove background: {e}")
            return
        self.finished_image.emit(self.result)
