"""
Post Composer - Transform Widget Components

This package contains the drag architecture shared by draggable layers:
- drag_context.py: DragSession and GestureEvent state
- drag_controller.py: begin/move/end state machine
"""

from .drag_context import DragSession, GestureEvent, GESTURE_BEGIN, GESTURE_MOVE, GESTURE_END
from .drag_controller import DragController

__all__ = [
    'DragSession', 'GestureEvent', 'GESTURE_BEGIN', 'GESTURE_MOVE', 'GESTURE_END',
    'DragController',
]
