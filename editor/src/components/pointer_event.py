"""Pointer events fed to the editor views, one per frame."""
from dataclasses import dataclass, field
from enum import Enum

from models.geometry import Vec2


class PointerEventType(Enum):
    DOWN = 'down'
    DRAG = 'drag'          # Move with the button held
    UP = 'up'
    MOVE = 'move'          # Hover move, no button
    REPAINT = 'repaint'    # Paint-only frame; position is the last known pointer position


@dataclass
class PointerEvent:
    """A single input event in screen pixels (Y-down).

    Attributes:
        type: What happened
        position: Pointer position
        delta: Movement since the previous pointer event (DRAG/MOVE)
    """
    type: PointerEventType
    position: Vec2 = field(default_factory=Vec2)
    delta: Vec2 = field(default_factory=Vec2)

    @classmethod
    def repaint(cls, position=None) -> 'PointerEvent':
        return cls(PointerEventType.REPAINT, position.copy() if position else Vec2())

    @property
    def is_down(self) -> bool:
        return self.type == PointerEventType.DOWN

    @property
    def is_drag(self) -> bool:
        return self.type == PointerEventType.DRAG

    @property
    def is_up(self) -> bool:
        return self.type == PointerEventType.UP
