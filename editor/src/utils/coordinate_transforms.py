"""Coordinate transformation utilities for the composition preview.

Provides conversion between the two coordinate systems in play:
- Logical space (fixed LOGICAL_CANVAS_SIZE square, where placements live)
- Screen pixels (the preview container as currently rendered)

The render scale changes with zoom and window layout, so callers must
recompute it from the container's current width on every pointer event.
"""

from constants import LOGICAL_CANVAS_SIZE, ZOOM_MIN, ZOOM_MAX, ZOOM_STEP
from models.transform import Vec2


def render_scale_factor(container_width, logical_size=LOGICAL_CANVAS_SIZE):
	"""Screen pixels per logical unit for a container of the given width.

	A missing or zero width (widget not laid out yet, hidden, collapsed)
	falls back to 1.0 so callers never divide by zero.

	Args:
		container_width: Rendered width of the composition container in pixels
		logical_size: Width of the logical frame (default 600)

	Returns:
		float: scale factor, never zero
	"""
	if not container_width or not logical_size:
		return 1.0
	scale = container_width / logical_size
	if scale == 0:
		return 1.0
	return scale


def screen_delta_to_logical(dx_screen, dy_screen, container_width, logical_size=LOGICAL_CANVAS_SIZE):
	"""Convert a pointer displacement in screen pixels to logical units.

	Args:
		dx_screen, dy_screen: Pointer delta in pixels
		container_width: Current rendered width of the container in pixels

	Returns:
		Vec2: delta in logical composition units
	"""
	scale = render_scale_factor(container_width, logical_size)
	return Vec2(dx_screen / scale, dy_screen / scale)


def logical_to_screen(x, y, container_width, logical_size=LOGICAL_CANVAS_SIZE):
	"""Convert a logical position to screen pixels inside the container.

	Inverse of screen_delta_to_logical; used to place layer widgets.
	"""
	scale = render_scale_factor(container_width, logical_size)
	return Vec2(x * scale, y * scale)


def clamp_zoom(zoom_level):
	"""Clamp a preview zoom level into [ZOOM_MIN, ZOOM_MAX]."""
	return max(ZOOM_MIN, min(ZOOM_MAX, zoom_level))


def step_zoom(zoom_level, steps):
	"""Move the zoom level by a number of ZOOM_STEP increments, clamped.

	Rounded to one decimal place so repeated steps don't accumulate drift.
	"""
	return round(clamp_zoom(zoom_level + steps * ZOOM_STEP), 2)
