from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class BoardItem:
    """A photo placed on the board. Coordinates are board-local, top-left origin."""

    photo_id: int
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class BoardBounds:
    width: float
    height: float


@dataclass(frozen=True)
class DragSession:
    """Reference frame of one drag gesture, captured on pointer down."""

    pointer_id: int
    origin_x: float
    origin_y: float
    start_pointer_x: float
    start_pointer_y: float


@dataclass
class Viewport:
    """Visible window onto the board, in board coordinates."""

    width: float
    height: float
    scroll_x: float = 0.0
    scroll_y: float = 0.0

    def scroll_into_view(self, item: BoardItem) -> bool:
        """
        Scroll the least distance that shows ``item`` (nearest block/inline).

        Items larger than the viewport are aligned to their top-left edge.
        Returns True if the scroll position changed.
        """
        new_x = _nearest(self.scroll_x, self.width, item.x, item.right)
        new_y = _nearest(self.scroll_y, self.height, item.y, item.bottom)
        changed = (new_x, new_y) != (self.scroll_x, self.scroll_y)
        self.scroll_x, self.scroll_y = new_x, new_y
        return changed


def _nearest(scroll: float, extent: float, start: float, end: float) -> float:
    if start >= scroll and end <= scroll + extent:
        return scroll
    if start < scroll or end - start > extent:
        return max(start, 0.0)
    return max(end - extent, 0.0)


@dataclass(frozen=True)
class Adjustment:
    """What a bounds-adjustment pass changed."""

    grew_width: bool = False
    grew_height: bool = False
    shift_x: float = 0.0
    shift_y: float = 0.0
    scrolled: bool = False

    @property
    def changed(self) -> bool:
        return self.grew_width or self.grew_height or bool(self.shift_x) or bool(self.shift_y)


@dataclass
class BoardState:
    bounds: BoardBounds
    items: List[BoardItem] = field(default_factory=list)
    sessions: Dict[int, DragSession] = field(default_factory=dict)  # keyed by photo_id
    viewport: Optional[Viewport] = None
