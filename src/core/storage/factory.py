import logging
from functools import lru_cache

from core.config import configs

from .base import StorageService
from .local import LocalStorageService

logger = logging.getLogger(__name__)


class StorageFactory:
    @staticmethod
    def get_storage_service(service_type: str = "local") -> StorageService:
        logger.info(f"Creating storage service of type: {service_type}")
        if service_type == "local":
            return LocalStorageService(media_root=configs.MEDIA_ROOT, media_url=configs.MEDIA_URL)
        raise ValueError(f"Unknown storage type: {service_type}")


@lru_cache()
def get_storage_client() -> StorageService:
    storage_type = getattr(configs, "STORAGE_TYPE", "local")
    logger.debug(f"Getting storage client (cached). Type: {storage_type}")
    return StorageFactory.get_storage_service(storage_type)
