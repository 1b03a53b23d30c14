import asyncio
import logging
import os
from pathlib import Path
from typing import BinaryIO

import aiofiles

from core.config import configs

from .base import StorageService

logger = logging.getLogger(__name__)


class LocalStorageService(StorageService):
    """Implementation of StorageService for the local filesystem."""

    def __init__(self, media_root: str = None, media_url: str = None, base_url: str = None):
        self.media_root = Path(media_root or configs.MEDIA_ROOT)
        self.media_url = media_url or configs.MEDIA_URL
        self.base_url = (base_url or configs.PUBLIC_BASE_URL).rstrip("/")
        self.media_root.mkdir(parents=True, exist_ok=True)
        logger.debug(f"LocalStorageService initialized with base path {self.media_root}")

    def path_for(self, path: str) -> Path:
        return self.media_root / path

    async def save_file(self, file: BinaryIO, path: str, content_type: str = None) -> str:
        full_path = self.path_for(path)
        full_path.parent.mkdir(parents=True, exist_ok=True)

        logger.debug(f"Saving file to local storage: {full_path}")
        # "x" fails with FileExistsError instead of overwriting another upload.
        async with aiofiles.open(full_path, "xb") as out_file:
            content = await file.read()
            await out_file.write(content)

        logger.info(f"Successfully saved file: {full_path}")
        return path

    async def delete_file(self, path: str) -> bool:
        full_path = self.path_for(path)
        logger.debug(f"Deleting file from local storage: {full_path}")
        if full_path.exists():
            await asyncio.to_thread(os.remove, full_path)
            logger.info(f"Successfully deleted file: {full_path}")
            return True
        logger.warning(f"File not found for deletion: {full_path}")
        return False

    def get_url(self, path: str) -> str:
        return self.base_url + f"/{self.media_url}/{path}".replace("//", "/")
