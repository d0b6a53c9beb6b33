"""Drag session and gesture event dataclasses for draggable layers.

Unified drag state management to replace per-widget boolean flags.
"""

from dataclasses import dataclass

from models.transform import Vec2


GESTURE_BEGIN = 'begin'
GESTURE_MOVE = 'move'
GESTURE_END = 'end'
GESTURE_KINDS = (GESTURE_BEGIN, GESTURE_MOVE, GESTURE_END)


@dataclass
class DragSession:
    """State of one pointer drag on a layer, alive while the button is held.

    Positions are anchored at pointer-down; every move is measured from the
    anchor, not from the previous event, so rounding never accumulates.
    """
    layer_id: str
    anchor_pointer: Vec2  # screen pixels
    anchor_layer: Vec2  # logical units
    current_layer: Vec2 = None  # last live position produced by a move
    moved: bool = False

    def __post_init__(self):
        if self.current_layer is None:
            self.current_layer = self.anchor_layer


@dataclass(frozen=True)
class GestureEvent:
    """Inbound pointer gesture, independent of the windowing toolkit."""
    kind: str  # 'begin', 'move', 'end'
    layer_id: str
    pointer_x: float
    pointer_y: float

    def __post_init__(self):
        if self.kind not in GESTURE_KINDS:
            raise ValueError(f"Unknown gesture kind: {self.kind!r}")

    @property
    def pointer(self):
        return Vec2(self.pointer_x, self.pointer_y)
