from abc import ABC, abstractmethod
from typing import BinaryIO


class StorageService(ABC):
    """Abstract base class for image storage backends."""

    @abstractmethod
    async def save_file(self, file: BinaryIO, path: str, content_type: str = None) -> str:
        """
        Save an uploaded image under a key nothing else holds yet.

        Args:
            file: Async file-like object (``await file.read()`` returns bytes).
            path: Destination key relative to the storage root.
            content_type: The MIME type of the file.

        Returns:
            The key the file was saved under.

        Raises:
            FileExistsError: Something is already stored under ``path``.
        """
        pass

    @abstractmethod
    async def delete_file(self, path: str) -> bool:
        """
        Delete a stored image.

        Returns:
            True if a file was removed, False if nothing was stored under ``path``.
        """
        pass

    @abstractmethod
    def get_url(self, path: str) -> str:
        """Public URL the board uses to display the image stored under ``path``."""
        pass
