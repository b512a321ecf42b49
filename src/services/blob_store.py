"""Key-addressed image storage: local images directory or Supabase Storage."""
import logging
from pathlib import Path
from urllib.parse import unquote, urlsplit

import requests

from config import (
    BLOB_BACKEND, BLOB_FOLDER, HTTP_TIMEOUT, IMAGES_DIR,
    SUPABASE_BUCKET, SUPABASE_SERVICE_KEY, SUPABASE_URL,
)

logger = logging.getLogger(__name__)


class BlobStoreError(Exception):
    """Raised when a stored image cannot be deleted."""


def blob_key_for(image_url: str | None, folder: str = BLOB_FOLDER) -> str | None:
    """Derive the storage key for an image URL from its final path segment.

    ``https://x.supabase.co/storage/v1/object/public/product-images/products/a.png``
    becomes ``products/a.png``. Returns None when there is nothing to delete.
    """
    if not image_url:
        return None
    tail = unquote(urlsplit(image_url).path.rsplit("/", 1)[-1])
    # An encoded separator or dot segment is not a file name
    if not tail or tail in (".", "..") or "/" in tail or "\\" in tail:
        return None
    folder = folder.strip("/")
    return f"{folder}/{tail}" if folder else tail


class LocalBlobStore:
    """Images stored as files below a root directory (served at /images)."""

    def __init__(self, root: Path = IMAGES_DIR):
        self.root = Path(root).resolve()

    def path_for(self, key: str) -> Path:
        path = (self.root / key).resolve()
        if self.root not in path.parents:
            raise BlobStoreError(f"Blob key escapes the image store: {key!r}")
        return path

    def delete(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink()
        except FileNotFoundError as exc:
            raise BlobStoreError(f"Image {key} not found") from exc
        except OSError as exc:
            raise BlobStoreError(f"Failed to delete image {key}: {exc}") from exc
        logger.info("Deleted image %s", key)


class SupabaseBlobStore:
    """Supabase Storage bucket accessed over its REST API."""

    def __init__(
        self,
        base_url: str,
        service_key: str,
        bucket: str = SUPABASE_BUCKET,
        timeout: float = HTTP_TIMEOUT,
        http=None,
    ):
        self.base_url = base_url.rstrip("/")
        self.service_key = service_key
        self.bucket = bucket
        self.timeout = timeout
        self._http = http or requests

    def delete(self, key: str) -> None:
        url = f"{self.base_url}/storage/v1/object/{self.bucket}"
        headers = {
            "Authorization": f"Bearer {self.service_key}",
            "apikey": self.service_key,
        }
        try:
            resp = self._http.delete(
                url, json={"prefixes": [key]}, headers=headers, timeout=self.timeout,
            )
            resp.raise_for_status()
            removed = resp.json()
        except requests.RequestException as exc:
            raise BlobStoreError(f"Failed to delete image {key}: {exc}") from exc
        except ValueError as exc:
            raise BlobStoreError(f"Unexpected storage response for {key}") from exc

        if not removed:
            raise BlobStoreError(f"Image {key} not found in bucket {self.bucket}")
        logger.info("Deleted image %s from bucket %s", key, self.bucket)


def make_blob_store(backend: str = BLOB_BACKEND):
    """Build the blob store selected by configuration."""
    if backend == "supabase":
        if not SUPABASE_URL or not SUPABASE_SERVICE_KEY:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_KEY are required for the supabase backend")
        return SupabaseBlobStore(SUPABASE_URL, SUPABASE_SERVICE_KEY)
    if backend == "local":
        return LocalBlobStore()
    raise ValueError(f"Unknown blob backend: {backend!r}")
