from abc import ABC, abstractmethod
from typing import Any


class BlobStoreError(Exception):
    pass


class AbstractBlobStore(ABC):
    @abstractmethod
    def read_json(self, key: str) -> Any | None:
        """Return the decoded JSON document stored under key, or None if the key is absent."""

    @abstractmethod
    def write_json(self, key: str, data: Any) -> None:
        """Replace the document stored under key. Raises BlobStoreError on failure."""

    @abstractmethod
    def put_bytes(self, key: str, data: bytes, content_type: str) -> str:
        """Store raw bytes under key and return their public URL. Raises BlobStoreError on failure."""
