import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from photoboard.board.intents import BeginDrag, DragIntent, EndDrag, Move
from photoboard.board.models import (
    Adjustment,
    BoardBounds,
    BoardItem,
    BoardState,
    DragSession,
    Viewport,
)
from photoboard.common.models import PhotoRecord
from photoboard.config import BoardConfig
from photoboard.exceptions import ItemNotFoundError

logger = logging.getLogger(__name__)


class BoardLayoutEngine:
    """
    Owns the board state: item placement, drag gestures and bounds adjustment.

    All mutation of ``BoardState`` goes through this class. Every method runs
    to completion on the caller's thread; there is no locking.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        viewport: Optional[Viewport] = None,
    ):
        self.config = config or BoardConfig()
        bounds = BoardBounds(
            width=self.config.bounds.initial_width,
            height=self.config.bounds.initial_height,
        )
        self._state = BoardState(bounds=bounds, viewport=viewport)

    @property
    def state(self) -> BoardState:
        return self._state

    @property
    def items(self) -> List[BoardItem]:
        return list(self._state.items)

    @property
    def bounds(self) -> BoardBounds:
        return self._state.bounds

    def get_item(self, photo_id: int) -> BoardItem:
        for item in self._state.items:
            if item.photo_id == photo_id:
                return item
        raise ItemNotFoundError(photo_id)

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def place(self, record: PhotoRecord, x: Optional[float] = None, y: Optional[float] = None) -> BoardItem:
        """Put ``record`` on the board. Items may overlap."""
        grid = self.config.grid
        width = self.config.item_width
        ratio = record.aspect_ratio
        item = BoardItem(
            photo_id=record.id,
            x=grid.origin_x if x is None else x,
            y=grid.origin_y if y is None else y,
            width=width,
            height=width * ratio if ratio else width,
        )
        # One projection per photo; re-placing moves it to the new spot.
        self._remove(record.id)
        self._state.items.append(item)
        return item

    def seed(self, records: Iterable[PhotoRecord]) -> List[BoardItem]:
        """Clear the board, then lay ``records`` out left-to-right in rows."""
        self.clear()
        grid = self.config.grid
        x, y = grid.origin_x, grid.origin_y
        placed = []
        for record in records:
            placed.append(self.place(record, x, y))
            x += grid.step_x
            if x > grid.wrap_x:
                x = grid.origin_x
                y += grid.step_y
        if placed:
            # Rows past the initial height would otherwise sit outside the board.
            self._grow_to_cover(max(it.right for it in placed), max(it.bottom for it in placed))
        logger.debug(f"Seeded {len(placed)} items. Bounds: {self.bounds.width}x{self.bounds.height}")
        return placed

    def clear(self):
        """Drop every item and any drag in progress. Bounds are kept."""
        self._state.items.clear()
        self._state.sessions.clear()

    def _remove(self, photo_id: int):
        self._state.items[:] = [it for it in self._state.items if it.photo_id != photo_id]
        self._state.sessions.pop(photo_id, None)

    # ------------------------------------------------------------------
    # Drag gesture
    # ------------------------------------------------------------------
    def begin_drag(self, photo_id: int, pointer_id: int, pointer_x: float, pointer_y: float) -> DragSession:
        """Capture ``pointer_id`` for the item and record the gesture's reference frame."""
        item = self.get_item(photo_id)

        # A pointer captures at most one item at a time.
        self._release_pointer(pointer_id)

        session = DragSession(
            pointer_id=pointer_id,
            origin_x=item.x,
            origin_y=item.y,
            start_pointer_x=pointer_x,
            start_pointer_y=pointer_y,
        )
        self._state.sessions[photo_id] = session
        logger.debug(f"Drag started: photo={photo_id} pointer={pointer_id}")
        return session

    def move(self, pointer_id: int, pointer_x: float, pointer_y: float) -> List[Adjustment]:
        """
        Move the item captured by ``pointer_id``.

        Events from a pointer that captured nothing are ignored (empty list).
        """
        adjustments = []
        for photo_id, session in list(self._state.sessions.items()):
            if session.pointer_id != pointer_id:
                continue
            item = self.get_item(photo_id)
            item.x = session.origin_x + (pointer_x - session.start_pointer_x)
            item.y = session.origin_y + (pointer_y - session.start_pointer_y)
            adjustments.append(self.adjust_bounds(item))
        return adjustments

    def end_drag(self, pointer_id: int) -> bool:
        """Release the capture held by ``pointer_id``. Returns False if it held none."""
        released = self._release_pointer(pointer_id)
        if released:
            logger.debug(f"Drag ended: pointer={pointer_id}")
        return released

    def _release_pointer(self, pointer_id: int) -> bool:
        owned = [pid for pid, s in self._state.sessions.items() if s.pointer_id == pointer_id]
        for photo_id in owned:
            del self._state.sessions[photo_id]
        return bool(owned)

    def dragging(self, photo_id: int) -> bool:
        return photo_id in self._state.sessions

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------
    def adjust_bounds(self, item: BoardItem) -> Adjustment:
        """
        Grow the board or shift every item so ``item`` stays reachable.

        Right/bottom growth is computed from the item's position before any
        shift applied in the same pass.
        """
        cfg = self.config.bounds
        bounds = self._state.bounds
        grew_width, grew_height = self._grow_to_cover(item.right, item.bottom)
        shift_x = shift_y = 0.0

        if item.x < 0:
            shift_x = abs(item.x) + cfg.shift_padding
            self.shift_all(shift_x, 0)
        if item.y < 0:
            shift_y = abs(item.y) + cfg.shift_padding
            self.shift_all(0, shift_y)

        adjustment = Adjustment(
            grew_width=grew_width,
            grew_height=grew_height,
            shift_x=shift_x,
            shift_y=shift_y,
        )
        if adjustment.changed:
            logger.debug(
                f"Adjusted board for photo {item.photo_id}: "
                f"bounds={bounds.width}x{bounds.height} shift=({shift_x}, {shift_y})"
            )
            viewport = self._state.viewport
            if viewport is not None and viewport.scroll_into_view(item):
                adjustment = replace(adjustment, scrolled=True)
        return adjustment

    def _grow_to_cover(self, right: float, bottom: float) -> Tuple[bool, bool]:
        """Grow width/height when an edge comes within the margin. Never shrinks."""
        cfg = self.config.bounds
        bounds = self._state.bounds
        grew_width = grew_height = False
        if right > bounds.width - cfg.edge_margin:
            bounds.width = right + cfg.growth_padding
            grew_width = True
        if bottom > bounds.height - cfg.edge_margin:
            bounds.height = bottom + cfg.growth_padding
            grew_height = True
        return grew_width, grew_height

    def shift_all(self, dx: float, dy: float):
        """Translate every item by (dx, dy). Positive shifts grow the board; it never shrinks."""
        for item in self._state.items:
            item.x += dx
            item.y += dy
        # Gestures in progress follow the items they drag.
        for photo_id, session in list(self._state.sessions.items()):
            self._state.sessions[photo_id] = replace(
                session, origin_x=session.origin_x + dx, origin_y=session.origin_y + dy
            )

        bounds = self._state.bounds
        if dx > 0:
            bounds.width = max(bounds.width + dx, bounds.width)
        if dy > 0:
            bounds.height = max(bounds.height + dy, bounds.height)

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------
    def apply(self, intent: DragIntent):
        """Consume one drag intent produced by the host UI."""
        if isinstance(intent, BeginDrag):
            return self.begin_drag(intent.photo_id, intent.pointer_id, intent.x, intent.y)
        if isinstance(intent, Move):
            return self.move(intent.pointer_id, intent.x, intent.y)
        if isinstance(intent, EndDrag):
            return self.end_drag(intent.pointer_id)
        raise TypeError(f"Unsupported board intent: {intent!r}")
