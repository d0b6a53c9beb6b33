import sys
import os
import logging

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Only show warnings and errors
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)  # Output to console
    ]
)

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5.QtWidgets import QMainWindow, QApplication, QScrollArea, QLabel, QStatusBar
from PyQt5.QtCore import Qt

from constants import ASSET_OVERLAY
from editor_session import CompositionEditor
from components.canvas_area import CompositionCanvas
from utils.logger import set_main_window


class PostComposerWindow(QMainWindow):
    """Main window: preview canvas, undo/redo and zoom"""

    def __init__(self, editor=None):
        super().__init__()
        self.setWindowTitle("Post Composer")
        self.resize(960, 780)

        self.editor = editor if editor is not None else CompositionEditor()
        self._removal_worker = None

        set_main_window(self)
        self.setup_ui()

        self.editor.add_history_listener(self._on_history_changed)
        self._on_history_changed(self.editor.can_undo(), self.editor.can_redo())

    # ============= UI Setup =============

    def setup_ui(self):
        self._create_menu_bar()

        self.canvas = CompositionCanvas(self.editor)
        scroll = QScrollArea()
        scroll.setAlignment(Qt.AlignCenter)
        scroll.setWidget(self.canvas)
        self.setCentralWidget(scroll)

        status_bar = QStatusBar()
        self.status_left = QLabel("Ready")
        self.status_right = QLabel("")
        status_bar.addWidget(self.status_left, 1)
        status_bar.addPermanentWidget(self.status_right)
        self.setStatusBar(status_bar)

    def _create_menu_bar(self):
        """Create the menu bar with Edit and View menus"""
        menubar = self.menuBar()

        # Edit Menu
        self.edit_menu = menubar.addMenu("&Edit")

        self.undo_action = self.edit_menu.addAction("&Undo")
        self.undo_action.setShortcut("Ctrl+Z")
        self.undo_action.triggered.connect(self.editor.undo)

        self.redo_action = self.edit_menu.addAction("&Redo")
        self.redo_action.setShortcuts(["Ctrl+Y", "Ctrl+Shift+Z"])
        self.redo_action.triggered.connect(self.editor.redo)

        self.edit_menu.addSeparator()

        self.remove_bg_action = self.edit_menu.addAction("Remove Overlay &Background")
        self.remove_bg_action.triggered.connect(self._start_overlay_background_removal)

        # View Menu
        view_menu = menubar.addMenu("&View")

        zoom_in_action = view_menu.addAction("Zoom &In")
        zoom_in_action.setShortcut("Ctrl+=")
        zoom_in_action.triggered.connect(self._zoom_in)

        zoom_out_action = view_menu.addAction("Zoom &Out")
        zoom_out_action.setShortcut("Ctrl+-")
        zoom_out_action.triggered.connect(self._zoom_out)

    # ============= Handlers =============

    def _on_history_changed(self, can_undo, can_redo):
        """Called when history state changes to update UI"""
        self.undo_action.setEnabled(can_undo)
        self.redo_action.setEnabled(can_redo)
        self._update_status_bar()

    def _update_status_bar(self):
        """Update status bar with current action and zoom"""
        current_desc = self.editor.history_manager.get_current_description()
        self.status_left.setText(f"Last action: {current_desc}" if current_desc else "Ready")
        self.status_right.setText(f"Zoom: {round(self.editor.zoom_level * 100)}%")

    def _zoom_in(self):
        self.canvas.apply_zoom(self.editor.zoom_in())
        self._update_status_bar()

    def _zoom_out(self):
        self.canvas.apply_zoom(self.editor.zoom_out())
        self._update_status_bar()

    def _start_overlay_background_removal(self):
        if self._removal_worker is not None and self._removal_worker.isRunning():
            return
        worker = self.editor.start_background_removal(ASSET_OVERLAY)
        if worker is None:
            return
        self.remove_bg_action.setEnabled(False)
        worker.finished.connect(lambda: self.remove_bg_action.setEnabled(True))
        self._removal_worker = worker
        worker.start()


def main():
    app = QApplication(sys.argv)
    window = PostComposerWindow()
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
