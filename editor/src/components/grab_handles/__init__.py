"""Grab handles for resizing and moving glyph rects.

- handles.py: Handle classes, Edge flags, inversion adjustment
- drag_context.py: State of an in-progress drag
- controller.py: DragHandleController state machine
- origin_handle.py: Draggable origin marker used by the preview
"""

from .handles import (
    Edge, Handle, CornerHandle, EdgeHandle, CenterHandle,
    adjust_for_inversion, create_handles,
)
from .drag_context import DragContext
from .controller import DragHandleController, DragState
from .origin_handle import OriginHandle

__all__ = [
    'Edge', 'Handle', 'CornerHandle', 'EdgeHandle', 'CenterHandle',
    'adjust_for_inversion', 'create_handles',
    'DragContext', 'DragHandleController', 'DragState', 'OriginHandle',
]
