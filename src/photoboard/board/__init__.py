from .catalog import PhotoCatalogClient
from .intents import BeginDrag, EndDrag, Move, Reload
from .layout import BoardLayoutEngine
from .models import Adjustment, BoardBounds, BoardItem, BoardState, DragSession, Viewport
from .sources import HttpPhotoSource, PhotoSource, ServicePhotoSource

__all__ = [
    "Adjustment",
    "BeginDrag",
    "BoardBounds",
    "BoardItem",
    "BoardLayoutEngine",
    "BoardState",
    "DragSession",
    "EndDrag",
    "HttpPhotoSource",
    "Move",
    "PhotoCatalogClient",
    "PhotoSource",
    "Reload",
    "ServicePhotoSource",
    "Viewport",
]
