"""Grab handle system - ABC-based handle architecture.

Each handle type is a class that knows:
- Where its hit area lies on a (normalized) rect
- Which rect edges it moves when dragged
- Which cursor to show and whether it draws a marker

Handles work in screen space (Y-down), so TOP is the rect's y_min edge.
"""

from abc import ABC, abstractmethod
from enum import Flag

from models.geometry import Rect
from components.canvas_widgets.draw_surface import CursorShape
from constants import GRAB_BORDER


class Edge(Flag):
    """Rect edges a handle moves."""
    NONE = 0
    LEFT = 1      # x_min
    RIGHT = 2     # x_max
    TOP = 4       # y_min
    BOTTOM = 8    # y_max
    ALL = LEFT | RIGHT | TOP | BOTTOM


def adjust_for_inversion(edges, rect):
    """Map a handle's edges onto an inverted rect.

    Handles are laid out on the normalized rect, so on a rect with negative
    width the handle drawn on the left actually sits on the x_max edge. A lone
    LEFT/RIGHT is swapped in that case (TOP/BOTTOM for negative height), which
    keeps the grabbed visible edge under the pointer. Sets containing both
    edges of an axis (the center handle) are unaffected.

    Args:
        edges: Edge flags of the handle
        rect: The working rect, possibly inverted
    """
    if rect.width < 0.0:
        if Edge.LEFT in edges and Edge.RIGHT not in edges:
            edges = (edges | Edge.RIGHT) & ~Edge.LEFT
        elif Edge.RIGHT in edges and Edge.LEFT not in edges:
            edges = (edges | Edge.LEFT) & ~Edge.RIGHT
    if rect.height < 0.0:
        if Edge.TOP in edges and Edge.BOTTOM not in edges:
            edges = (edges | Edge.BOTTOM) & ~Edge.TOP
        elif Edge.BOTTOM in edges and Edge.TOP not in edges:
            edges = (edges | Edge.TOP) & ~Edge.BOTTOM
    return edges


class Handle(ABC):
    """Abstract base class for grab handles."""

    edges = Edge.NONE
    cursor = CursorShape.MOVE_ARROW
    draws_marker = True

    def __init__(self, border=GRAB_BORDER):
        """
        Args:
            border: Thickness of the handle strips in pixels
        """
        self.border = border

    @abstractmethod
    def hit_rect(self, rect) -> Rect:
        """Hit area of this handle on a normalized rect.

        Args:
            rect: Rect with non-negative width and height

        Returns:
            Rect in the same space (may be empty or inverted for tiny rects,
            in which case nothing hits it)
        """
        pass

    def hit_test(self, point, rect) -> bool:
        return self.hit_rect(rect).contains(point)

    def __repr__(self):
        return f"{type(self).__name__}({self.name})"

    @property
    def name(self):
        return type(self).__name__


class CornerHandle(Handle):
    """Corner handle - resizes two edges at once."""

    _CORNERS = {
        'tl': (Edge.LEFT | Edge.TOP, CursorShape.RESIZE_UP_LEFT),
        'tr': (Edge.RIGHT | Edge.TOP, CursorShape.RESIZE_UP_RIGHT),
        'bl': (Edge.LEFT | Edge.BOTTOM, CursorShape.RESIZE_UP_RIGHT),
        'br': (Edge.RIGHT | Edge.BOTTOM, CursorShape.RESIZE_UP_LEFT),
    }

    def __init__(self, corner_type, border=GRAB_BORDER):
        """
        Args:
            corner_type: 'tl', 'tr', 'bl', 'br'
            border: Corner square size in pixels
        """
        super().__init__(border)
        self.corner_type = corner_type
        self.edges, self.cursor = self._CORNERS[corner_type]

    @property
    def name(self):
        return self.corner_type

    def hit_rect(self, rect):
        b = self.border
        x = rect.x_max - b if Edge.RIGHT in self.edges else rect.x
        y = rect.y_max - b if Edge.BOTTOM in self.edges else rect.y
        return Rect(x, y, b, b)


class EdgeHandle(Handle):
    """Edge handle - resizes a single edge; the strip between two corners."""

    _EDGES = {
        't': (Edge.TOP, CursorShape.RESIZE_VERTICAL),
        'b': (Edge.BOTTOM, CursorShape.RESIZE_VERTICAL),
        'l': (Edge.LEFT, CursorShape.RESIZE_HORIZONTAL),
        'r': (Edge.RIGHT, CursorShape.RESIZE_HORIZONTAL),
    }

    def __init__(self, edge_type, border=GRAB_BORDER):
        """
        Args:
            edge_type: 't', 'r', 'b', 'l'
            border: Strip thickness in pixels
        """
        super().__init__(border)
        self.edge_type = edge_type
        self.edges, self.cursor = self._EDGES[edge_type]

    @property
    def name(self):
        return self.edge_type

    def hit_rect(self, rect):
        b = self.border
        if self.edge_type == 't':
            return Rect(rect.x + b, rect.y, rect.width - b * 2.0, b)
        if self.edge_type == 'b':
            return Rect(rect.x + b, rect.y_max - b, rect.width - b * 2.0, b)
        if self.edge_type == 'l':
            return Rect(rect.x, rect.y + b, b, rect.height - b * 2.0)
        return Rect(rect.x_max - b, rect.y + b, b, rect.height - b * 2.0)


class CenterHandle(Handle):
    """Center handle - the rect interior; moves all four edges (translation)."""

    edges = Edge.ALL
    cursor = CursorShape.MOVE_ARROW
    draws_marker = False

    @property
    def name(self):
        return 'center'

    def hit_rect(self, rect):
        b = self.border
        return Rect(rect.x + b, rect.y + b, rect.width - b * 2.0, rect.height - b * 2.0)


def create_handles(border=GRAB_BORDER):
    """The nine handles in hit-test order.

    When hit areas overlap (rects smaller than two borders) the later handle
    in this order wins.
    """
    return [
        CornerHandle('tl', border),
        EdgeHandle('t', border),
        CornerHandle('tr', border),
        EdgeHandle('l', border),
        CornerHandle('bl', border),
        EdgeHandle('b', border),
        CornerHandle('br', border),
        EdgeHandle('r', border),
        CenterHandle(border),
    ]
