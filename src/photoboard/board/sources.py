import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

import httpx

from core.storage.base import StorageService
from photoboard.common.models import PhotoRecord
from photoboard.filters import FilterSelection
from photoboard.photos.service import PhotoService

logger = logging.getLogger(__name__)


class PhotoSource(ABC):
    """Where the catalog gets photo records from."""

    @abstractmethod
    async def list_photos(self, selection: Optional[FilterSelection] = None) -> List[PhotoRecord]:
        """
        All records, newest first, or only those matching ``selection``.

        Failures propagate to the caller unchanged.
        """
        raise NotImplementedError()


class HttpPhotoSource(PhotoSource):
    """Reads the store's ``GET /api/photos`` endpoint."""

    def __init__(self, base_url: str, client: Optional[httpx.AsyncClient] = None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.client = client
        self.timeout = timeout

    async def list_photos(self, selection: Optional[FilterSelection] = None) -> List[PhotoRecord]:
        params = selection.as_params() if selection else {}
        url = f"{self.base_url}/api/photos"
        logger.debug(f"GET {url} params={params}")

        if self.client is not None:
            response = await self.client.get(url, params=params, timeout=self.timeout)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return [PhotoRecord.from_payload(item) for item in response.json()]


class ServicePhotoSource(PhotoSource):
    """Reads the store in-process, one database session per call."""

    def __init__(self, session_factory: Callable, storage: StorageService):
        self.session_factory = session_factory
        self.storage = storage

    async def list_photos(self, selection: Optional[FilterSelection] = None) -> List[PhotoRecord]:
        async with self.session_factory() as session:
            service = PhotoService(session, self.storage)
            photos = await service.list_photos(selection)
        return [PhotoRecord.from_payload(p.model_dump()) for p in photos]
