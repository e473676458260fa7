import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from reelfolio.repositories.base import AbstractBlobStore, BlobStoreError

logger = logging.getLogger(__name__)


class FileBlobStore(AbstractBlobStore):
    """
    Blob store backed by a local directory. Each key is one file; public URLs are
    public_base_url + "/" + key, served by the app's /blobs mount.
    """

    def __init__(self, root: str, public_base_url: str = "/blobs") -> None:
        self._root = Path(root)
        self._public_base_url = public_base_url.rstrip("/")
        self._root.mkdir(parents=True, exist_ok=True)

    @property
    def root(self) -> Path:
        return self._root

    def _path_for(self, key: str) -> Path:
        name = Path(key).name
        if not name or name != key:
            raise BlobStoreError(f"Invalid blob key: {key!r}")
        return self._root / name

    def _write_atomic(self, path: Path, data: bytes) -> None:
        fd, tmp_path = tempfile.mkstemp(dir=self._root, prefix=".tmp-")
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.replace(tmp_path, path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def read_json(self, key: str) -> Any | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        return json.loads(path.read_text(encoding="utf-8"))

    def write_json(self, key: str, data: Any) -> None:
        path = self._path_for(key)
        try:
            self._write_atomic(path, json.dumps(data).encode("utf-8"))
        except (OSError, TypeError, ValueError) as exc:
            logger.error("[blob] write failed | key=%s | error=%s", key, exc)
            raise BlobStoreError(f"Failed to write to blob storage: {exc}") from exc
        logger.debug("[blob] wrote json | key=%s", key)

    def put_bytes(self, key: str, data: bytes, content_type: str) -> str:
        path = self._path_for(key)
        try:
            self._write_atomic(path, data)
        except OSError as exc:
            logger.error("[blob] put failed | key=%s | error=%s", key, exc)
            raise BlobStoreError(f"Failed to write to blob storage: {exc}") from exc
        logger.info("[blob] stored | key=%s | bytes=%d | content_type=%s", key, len(data), content_type)
        return f"{self._public_base_url}/{key}"
