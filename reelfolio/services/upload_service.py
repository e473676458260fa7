import logging
import re
import time

from reelfolio.repositories.base import AbstractBlobStore

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "image/jpeg"
DEFAULT_EXTENSION = "jpg"


class EmptyUpload(Exception):
    pass


class UploadService:
    def __init__(self, store: AbstractBlobStore) -> None:
        self._store = store

    def store_about_photo(self, filename: str | None, content: bytes, content_type: str | None = None) -> str:
        """Store the about-section photo under a timestamped key. Returns its public URL."""
        if not content:
            raise EmptyUpload("No file uploaded")
        extension = DEFAULT_EXTENSION
        if filename and "." in filename:
            extension = re.sub(r"[^a-z0-9]", "", filename.rsplit(".", 1)[1].lower()) or DEFAULT_EXTENSION
        key = f"about-photo-{int(time.time() * 1000)}.{extension}"
        url = self._store.put_bytes(key, content, content_type or DEFAULT_CONTENT_TYPE)
        logger.info("[upload] about photo stored | key=%s | filename=%s", key, filename)
        return url
