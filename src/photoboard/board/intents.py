"""Host UI events, expressed as plain values the board consumes."""

from dataclasses import dataclass
from typing import Optional, Union

from photoboard.filters import FilterSelection


@dataclass(frozen=True)
class BeginDrag:
    photo_id: int
    pointer_id: int
    x: float
    y: float


@dataclass(frozen=True)
class Move:
    pointer_id: int
    x: float
    y: float


@dataclass(frozen=True)
class EndDrag:
    pointer_id: int


@dataclass(frozen=True)
class Reload:
    selection: Optional[FilterSelection] = None


DragIntent = Union[BeginDrag, Move, EndDrag]
Intent = Union[BeginDrag, Move, EndDrag, Reload]
