import pytest

from reelfolio.repositories.base import BlobStoreError
from reelfolio.repositories.file_blob_store import FileBlobStore
from reelfolio.services.upload_service import EmptyUpload, UploadService


@pytest.fixture
def store(tmp_path):
    return FileBlobStore(str(tmp_path / "blobs"), public_base_url="https://cdn.example/blobs/")


def test_missing_key_reads_none(store):
    assert store.read_json("nothing.json") is None


def test_write_then_read(store):
    store.write_json("doc.json", {"a": [1, 2]})
    assert store.read_json("doc.json") == {"a": [1, 2]}
    assert not [p for p in store.root.iterdir() if p.name.startswith(".tmp-")]


def test_put_bytes_returns_public_url(store):
    url = store.put_bytes("img.png", b"\x89PNG", "image/png")
    assert url == "https://cdn.example/blobs/img.png"
    assert (store.root / "img.png").read_bytes() == b"\x89PNG"


@pytest.mark.parametrize("key", ["../escape.json", "nested/doc.json", ""])
def test_keys_must_be_flat(store, key):
    with pytest.raises(BlobStoreError):
        store.write_json(key, {})


def test_unserialisable_data_raises_blob_error(store):
    with pytest.raises(BlobStoreError):
        store.write_json("doc.json", {"bad": object()})


def test_upload_stores_about_photo(store):
    svc = UploadService(store)
    url = svc.store_about_photo("portrait.PNG", b"data", "image/png")
    assert url.startswith("https://cdn.example/blobs/about-photo-")
    assert url.endswith(".png")
    key = url.rsplit("/", 1)[1]
    assert (store.root / key).read_bytes() == b"data"


def test_upload_without_extension_defaults_to_jpg(store):
    url = UploadService(store).store_about_photo("portrait", b"data", None)
    assert url.endswith(".jpg")


def test_upload_sanitises_extension(store):
    url = UploadService(store).store_about_photo("x.p/n../g", b"data")
    assert url.rsplit("/", 1)[1].startswith("about-photo-")


def test_empty_upload_rejected(store):
    with pytest.raises(EmptyUpload):
        UploadService(store).store_about_photo("a.jpg", b"")
