"""Grab handle controller - direct manipulation of one rect.

The controller has no glyph knowledge. Each frame the owning view passes the
selected glyph's screen rect and the frame's pointer event; the controller
draws the handles, tracks the drag and returns the candidate rect. The view
converts that rect back to its native space and writes it to the store.
"""

import logging
from enum import Enum

from components.grab_handles.handles import Edge, adjust_for_inversion, create_handles
from components.grab_handles.drag_context import DragContext
from utils.coordinate_transforms import normalize_rect
from constants import GRAB_BORDER, HANDLE_COLOR


class DragState(Enum):
    IDLE = 'idle'
    DRAGGING = 'dragging'


class DragHandleController:
    """Nine-handle resize/move controller (4 corners, 4 edges, center).

    Usage:
        rect = controller.process(surface, rect, event)
    """

    def __init__(self, border=GRAB_BORDER, on_drag_started=None):
        """
        Args:
            border: Handle strip thickness in pixels
            on_drag_started: Called with no arguments when a drag begins
                (the session records an undo snapshot there)
        """
        self._logger = logging.getLogger('DragHandleController')
        self.handles = create_handles(border)
        self.on_drag_started = on_drag_started
        self.drag_context = None

    # ========================================
    # State
    # ========================================

    @property
    def state(self) -> DragState:
        return DragState.IDLE if self.drag_context is None else DragState.DRAGGING

    def is_dragging(self) -> bool:
        return self.drag_context is not None

    @property
    def active_edges(self) -> Edge:
        return self.drag_context.active_edges if self.drag_context else Edge.NONE

    # ========================================
    # Hit testing
    # ========================================

    def get_handle_at_pos(self, point, rect):
        """Handle under point for rect, or None.

        Hit areas are laid out on the normalized rect. Where they overlap the
        later handle in hit-test order wins.
        """
        normalized = normalize_rect(rect)
        hit = None
        for handle in self.handles:
            if handle.hit_test(point, normalized):
                hit = handle
        return hit

    # ========================================
    # Transitions
    # ========================================

    def begin_drag(self, point, rect) -> bool:
        """IDLE -> DRAGGING if point is over a handle of rect.

        Returns:
            True if a drag started
        """
        handle = self.get_handle_at_pos(point, rect)
        if handle is None:
            return False
        edges = adjust_for_inversion(handle.edges, rect)
        self.drag_context = DragContext(handle=handle, active_edges=edges, start_rect=rect.copy())
        self._logger.debug(f"Drag started on {handle.name} ({edges})")
        if self.on_drag_started is not None:
            self.on_drag_started()
        return True

    def drag(self, rect, delta):
        """Move the active edges of rect by delta.

        Edges may pass their opposite edge; the result is then inverted.

        Returns:
            New Rect (rect itself is not modified)
        """
        result = rect.copy()
        edges = self.active_edges
        if Edge.LEFT in edges:
            result.x_min += delta.x
        if Edge.RIGHT in edges:
            result.x_max += delta.x
        if Edge.TOP in edges:
            result.y_min += delta.y
        if Edge.BOTTOM in edges:
            result.y_max += delta.y
        return result

    def end_drag(self):
        """Any state -> IDLE."""
        if self.drag_context is not None:
            self._logger.debug("Drag ended")
        self.drag_context = None

    # ========================================
    # Frame
    # ========================================

    def process(self, surface, rect, event):
        """Run one frame for rect.

        Draws the handle markers and registers their cursor rects, then reacts
        to the pointer event.

        Args:
            surface: DrawSurface for this frame
            rect: Current screen rect (may be inverted)
            event: PointerEvent of this frame

        Returns:
            Candidate Rect after this frame's input
        """
        normalized = normalize_rect(rect)
        for handle in self.handles:
            hit_rect = handle.hit_rect(normalized)
            if handle.draws_marker:
                surface.fill_rect(hit_rect, HANDLE_COLOR)
            surface.add_cursor_rect(hit_rect, handle.cursor)

        if event.is_down and not self.is_dragging():
            self.begin_drag(event.position, rect)
        elif event.is_drag and self.is_dragging():
            return self.drag(rect, event.delta)
        elif event.is_up:
            self.end_drag()
        return rect.copy()
