import logging

from reelfolio.repositories.base import AbstractBlobStore

logger = logging.getLogger(__name__)

SITE_CONTENT_BLOB_KEY = "site-content.json"


class SiteContentRepository:
    def __init__(self, store: AbstractBlobStore) -> None:
        self._store = store

    def read(self) -> dict:
        try:
            record = self._store.read_json(SITE_CONTENT_BLOB_KEY)
        except Exception as exc:
            logger.warning("[site-content] read failed, using defaults | error=%s", exc)
            return {}
        return record if isinstance(record, dict) else {}

    def write(self, content: dict) -> None:
        self._store.write_json(SITE_CONTENT_BLOB_KEY, content)
