"""Drag context dataclass for the grab handle controller.

Single object describing an in-progress drag instead of loose flags.
"""

from dataclasses import dataclass, field

from models.geometry import Rect


@dataclass
class DragContext:
    """State captured when a drag starts.

    Attributes:
        handle: Handle that was grabbed
        active_edges: Edges moved by pointer deltas (already adjusted for an
            inverted rect at grab time)
        start_rect: Working rect at pointer-down
        metadata: Free-form extras for the owner (e.g. which glyph)
    """
    handle: object
    active_edges: object
    start_rect: Rect
    metadata: dict = field(default_factory=dict)
