import asyncio
import logging
import re
import time
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from core.storage.base import StorageService
from photoboard.exceptions import PhotoNotFoundError
from photoboard.filters import FilterSelection
from photoboard.models.photo import Photo
from photoboard.photos.repository import PhotoRepository
from photoboard.schemas.photo import PhotoFeatures, PhotoResponse, StatsResponse
from photoboard.utils.fileIO import AsyncBytesIO
from photoboard.utils.image import read_dimensions
from photoboard.utils.performance import track_duration

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.\-_]")


def safe_filename(original: str, now_ms: Optional[int] = None) -> str:
    """``<epoch-ms>-<name>`` with every character outside [A-Za-z0-9.-_] replaced by ``_``."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{now_ms}-{_UNSAFE_CHARS.sub('_', original or 'photo')}"


class PhotoService:
    def __init__(self, session: AsyncSession, storage: StorageService):
        self.repository = PhotoRepository(session)
        self.storage = storage

    def to_response(self, photo: Photo) -> PhotoResponse:
        response = PhotoResponse.model_validate(photo)
        response.url = self.storage.get_url(photo.filename)
        return response

    async def upload(
        self,
        original_filename: str,
        content: bytes,
        features: PhotoFeatures,
        content_type: str = None,
    ) -> PhotoResponse:
        dimensions = await asyncio.to_thread(read_dimensions, content)
        width, height = dimensions or (None, None)

        with track_duration("upload"):
            filename = await self._claim_filename(original_filename, content, content_type)
            if dimensions is None:
                logger.warning(f"Stored {filename} without dimensions; board will display it square.")
            try:
                photo = await self.repository.insert(filename, features, width, height)
            except Exception:
                # Do not leave an orphaned image behind a failed insert.
                await self.storage.delete_file(filename)
                raise

        logger.info(f"📥 Photo uploaded: ID={photo.id}, Grade={photo.grade}, Student={photo.student}")
        return self.to_response(photo)

    async def _claim_filename(self, original_filename: str, content: bytes, content_type: str = None) -> str:
        """Save under the first free ``<epoch-ms>-<name>``, moving to the next millisecond on a clash."""
        now_ms = int(time.time() * 1000)
        while True:
            filename = safe_filename(original_filename, now_ms)
            try:
                return await self.storage.save_file(AsyncBytesIO(content), filename, content_type)
            except FileExistsError:
                logger.debug(f"{filename} already stored, trying the next millisecond")
                now_ms += 1

    async def list_photos(self, selection: Optional[FilterSelection] = None) -> List[PhotoResponse]:
        with track_duration("list"):
            if selection is not None and selection.is_active:
                params = selection.as_params()
                photos = await self.repository.query_by_field(params["field"], params["value"])
                logger.info(f"[QUERY] Filter by {params['field']}={params['value']}, found {len(photos)} photos")
            else:
                photos = await self.repository.list_all()
                logger.info(f"[QUERY] Retrieved all photos: {len(photos)} total")
        return [self.to_response(p) for p in photos]

    async def get_photo(self, photo_id: int) -> PhotoResponse:
        photo = await self.repository.get_by_id(photo_id)
        if photo is None:
            raise PhotoNotFoundError(photo_id)
        return self.to_response(photo)

    async def delete_photo(self, photo_id: int) -> None:
        with track_duration("delete"):
            photo = await self.repository.get_by_id(photo_id)
            if photo is None:
                raise PhotoNotFoundError(photo_id)
            filename = photo.filename
            await self.repository.delete(photo_id)
            await self.storage.delete_file(filename)
        logger.info(f"[DELETE] Deleted photo ID={photo_id}, filename={filename}")

    async def stats(self) -> StatsResponse:
        return StatsResponse(**await self.repository.stats())
