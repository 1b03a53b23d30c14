from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from core.storage import StorageService, get_storage_client
from photoboard.db.database import get_db
from photoboard.photos.service import PhotoService


def get_storage() -> StorageService:
    return get_storage_client()


def get_photo_service(
    db: AsyncSession = Depends(get_db),
    storage: StorageService = Depends(get_storage),
) -> PhotoService:
    return PhotoService(db, storage)
