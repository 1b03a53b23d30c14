class PhotoBoardError(Exception):
    """Base class for photo board errors."""


class ItemNotFoundError(PhotoBoardError, KeyError):
    """No board item is placed for the given photo id."""

    def __init__(self, item_id):
        super().__init__(item_id)
        self.item_id = item_id

    def __str__(self) -> str:
        return f"No board item for photo {self.item_id}"


class InvalidFilterError(PhotoBoardError, ValueError):
    """Filter names a field that is not one of the fixed metadata fields."""


class PhotoNotFoundError(PhotoBoardError, LookupError):
    """The store has no photo with the given id."""

    def __init__(self, photo_id: int):
        super().__init__(f"Photo not found: {photo_id}")
        self.photo_id = photo_id
