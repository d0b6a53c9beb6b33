"""
Widget-level tests: layer drag through Qt mouse events, canvas layout,
main window actions.

Mouse events are built by hand and passed to the handlers directly so the
pointer positions are exact regardless of window placement.
"""
import pytest
from PyQt5.QtCore import Qt, QEvent, QPointF

from constants import LAYER_OVERLAY, LAYER_LOGO
from components.canvas_area import CompositionCanvas, OVERLAY_ANCHOR, OVERLAY_BASE_WIDTH
from components.layer_widget import DraggableLayerWidget
from components.transform_widgets import DragController


def mouse_event(kind, x, y, button=Qt.LeftButton):
    from PyQt5.QtGui import QMouseEvent
    buttons = Qt.NoButton if kind == QEvent.MouseButtonRelease else button
    point = QPointF(x, y)
    return QMouseEvent(kind, point, point, button, buttons, Qt.NoModifier)


def drag(widget, start, end, steps=3):
    widget.mousePressEvent(mouse_event(QEvent.MouseButtonPress, *start))
    for i in range(1, steps + 1):
        x = start[0] + (end[0] - start[0]) * i / steps
        y = start[1] + (end[1] - start[1]) * i / steps
        widget.mouseMoveEvent(mouse_event(QEvent.MouseMove, x, y, Qt.NoButton))
    widget.mouseReleaseEvent(mouse_event(QEvent.MouseButtonRelease, *end))


@pytest.fixture
def canvas(qtbot, editor, white_png):
    editor.set_overlay(white_png)
    editor.set_logo(white_png)
    canvas = CompositionCanvas(editor)
    qtbot.addWidget(canvas)
    return canvas


class TestDraggableLayerWidget:

    def test_drag_reports_session_to_controller(self, qtbot):
        moves, ends = [], []
        controller = DragController(container_width=lambda: 600)
        controller.register_layer('layer', get_position=lambda: (0, 0),
                                  on_move=lambda lid, p: moves.append(p),
                                  on_end=lambda lid, p: ends.append(p))
        widget = DraggableLayerWidget('layer', controller)
        qtbot.addWidget(widget)

        with qtbot.waitSignal(widget.dragEnded):
            drag(widget, (10, 10), (40, 25))
        assert len(moves) == 3
        assert ends == [moves[-1]]
        assert (ends[0].x, ends[0].y) == (30, 15)
        assert not controller.is_dragging

    def test_right_button_does_not_drag(self, qtbot):
        controller = DragController()
        controller.register_layer('layer', on_move=lambda *a: None)
        widget = DraggableLayerWidget('layer', controller)
        qtbot.addWidget(widget)
        widget.mousePressEvent(mouse_event(QEvent.MouseButtonPress, 0, 0, Qt.RightButton))
        assert not controller.is_dragging

    def test_non_draggable_layer_ignores_press(self, qtbot):
        controller = DragController()
        controller.register_layer('static')
        widget = DraggableLayerWidget('static', controller)
        qtbot.addWidget(widget)
        widget.mousePressEvent(mouse_event(QEvent.MouseButtonPress, 0, 0))
        assert not controller.is_dragging
        assert widget.cursor().shape() == Qt.ArrowCursor

    def test_set_image(self, qtbot, white_png):
        widget = DraggableLayerWidget('layer', DragController())
        qtbot.addWidget(widget)
        widget.set_image(white_png)
        assert widget.base_size() == (8, 8)
        widget.set_image(None)
        assert widget.base_size() == (0, 0)
        assert widget.isHidden()


class TestCompositionCanvas:

    def test_size_follows_zoom(self, canvas, editor):
        assert canvas.width() == round(600 * editor.zoom_level)
        canvas.apply_zoom(1.0)
        assert canvas.width() == 600

    def test_overlay_layout(self, canvas):
        canvas.apply_zoom(0.5)
        geometry = canvas.overlay_widget.geometry()
        assert (geometry.x(), geometry.y()) == (OVERLAY_ANCHOR[0] // 2, OVERLAY_ANCHOR[1] // 2)
        assert geometry.width() == OVERLAY_BASE_WIDTH // 2

    def test_drag_on_zoomed_canvas_commits_once(self, canvas, editor):
        canvas.apply_zoom(0.5)
        history = len(editor.history_manager)
        drag(canvas.overlay_widget, (100, 100), (150, 80))
        assert len(editor.history_manager) == history + 1
        assert (editor.state.overlay_placement.x, editor.state.overlay_placement.y) == (100, -40)
        assert editor.history_manager.get_current_description() == "Move overlay"

    def test_layer_follows_undo(self, canvas, editor):
        canvas.apply_zoom(1.0)
        drag(canvas.logo_widget, (0, 0), (20, 10))
        moved = canvas.logo_widget.geometry().topLeft()
        editor.undo()
        restored = canvas.logo_widget.geometry().topLeft()
        assert (moved.x() - restored.x(), moved.y() - restored.y()) == (20, 10)

    def test_logo_border_style(self, canvas, editor):
        editor.set_logo_border_width(2)
        editor.set_logo_border_color('#ff0000')
        assert 'solid #ff0000' in canvas.logo_widget.styleSheet()

    def test_empty_layers_hidden(self, qtbot, editor):
        canvas = CompositionCanvas(editor)
        qtbot.addWidget(canvas)
        assert canvas.overlay_widget.isHidden()
        assert canvas.logo_widget.isHidden()


class TestMainWindow:

    @pytest.fixture
    def window(self, qtbot, editor):
        from app import PostComposerWindow
        window = PostComposerWindow(editor)
        qtbot.addWidget(window)
        return window

    def test_undo_redo_actions_track_history(self, window, editor):
        assert not window.undo_action.isEnabled()
        assert not window.redo_action.isEnabled()
        editor.set_service("Game Development")
        assert window.undo_action.isEnabled()
        window.undo_action.trigger()
        assert editor.state.service_label != "Game Development"
        assert window.redo_action.isEnabled()
        assert not window.undo_action.isEnabled()

    def test_status_bar_shows_last_action(self, window, editor):
        editor.set_text_align('right')
        assert window.status_left.text() == "Last action: Align right"

    def test_zoom_actions(self, window, editor):
        window._zoom_in()
        assert editor.zoom_level == 0.9
        assert window.canvas.width() == 540
        assert window.status_right.text() == "Zoom: 90%"

    def test_remove_background_without_overlay(self, window):
        window._start_overlay_background_removal()
        assert window._removal_worker is None
        assert window.remove_bg_action.isEnabled()

    def test_remove_background_runs_worker(self, qtbot, window, editor, keyable_png):
        editor.set_overlay(keyable_png)
        window._start_overlay_background_removal()
        worker = window._removal_worker
        qtbot.waitUntil(lambda: worker.isFinished(), timeout=5000)
        qtbot.waitUntil(lambda: editor.state.overlay_asset is not keyable_png, timeout=5000)
        assert editor.history_manager.get_current_description() == "Remove background"
        qtbot.waitUntil(window.remove_bg_action.isEnabled, timeout=5000)
