"""Tests for the SQL record store and the blob stores."""

import pytest
import requests
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from conftest import BASE_TIME, make_row
from src.models.database import init_db, with_db
from src.models.product import Product
from src.services.blob_store import (
    BlobStoreError,
    LocalBlobStore,
    SupabaseBlobStore,
    blob_key_for,
    make_blob_store,
)
from src.services.record_store import RecordStoreError, SqlRecordStore


class TestSqlRecordStore:
    @pytest.fixture
    def session_factory(self, tmp_path):
        """Session factory bound to a temporary SQLite file."""
        engine = create_engine(f"sqlite:///{tmp_path / 'catalog.db'}")
        init_db(bind=engine)
        yield sessionmaker(bind=engine)
        engine.dispose()

    @pytest.fixture
    def store(self, session_factory):
        with with_db(session_factory) as db:
            for minutes, name in [(0, "Old"), (20, "Newest"), (10, "Middle")]:
                row = make_row(f"id-{name.lower()}", name, name[:2].upper(), minutes=minutes)
                db.add(Product(**row))
            db.commit()
        return SqlRecordStore(session_factory)

    def test_list_is_newest_first(self, store):
        rows = store.list_products()

        assert [r["name"] for r in rows] == ["Newest", "Middle", "Old"]
        assert rows[0]["created_at"] == BASE_TIME.replace(minute=20)
        assert rows[0]["unit_sale"] == "pcs"

    def test_delete_removes_row(self, store):
        store.delete_product("id-middle")

        assert [r["id"] for r in store.list_products()] == ["id-newest", "id-old"]

    def test_delete_missing_row_raises(self, store):
        with pytest.raises(RecordStoreError):
            store.delete_product("nope")

    def test_database_errors_are_wrapped(self, tmp_path):
        # No tables created
        engine = create_engine(f"sqlite:///{tmp_path / 'empty.db'}")
        store = SqlRecordStore(sessionmaker(bind=engine))

        with pytest.raises(RecordStoreError):
            store.list_products()


class TestBlobKey:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://x.supabase.co/storage/v1/object/public/product-images/products/a.png", "products/a.png"),
            ("https://cdn.example.com/img/b.jpg?width=200#top", "products/b.jpg"),
            ("https://cdn.example.com/img/my%20photo.jpg", "products/my photo.jpg"),
            ("c.webp", "products/c.webp"),
        ],
    )
    def test_key_is_folder_plus_tail(self, url, expected):
        assert blob_key_for(url) == expected

    @pytest.mark.parametrize(
        "url",
        [
            None,
            "",
            "https://cdn.example.com/img/",
            "https://cdn.example.com/img/..%2Fother.png",
            "https://cdn.example.com/img/sub%2Fother.png",
            "https://cdn.example.com/img/..%5Cother.png",
            "https://cdn.example.com/img/%2E%2E",
        ],
    )
    def test_nothing_to_delete(self, url):
        assert blob_key_for(url) is None

    def test_without_folder(self):
        assert blob_key_for("https://h/x/y.png", folder="") == "y.png"


class TestLocalBlobStore:
    def test_delete_removes_file(self, tmp_path):
        (tmp_path / "products").mkdir()
        image = tmp_path / "products" / "a.png"
        image.write_bytes(b"png")

        LocalBlobStore(tmp_path).delete("products/a.png")

        assert not image.exists()

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(BlobStoreError):
            LocalBlobStore(tmp_path).delete("products/missing.png")

    def test_key_cannot_escape_root(self, tmp_path):
        outside = tmp_path / "secret.txt"
        outside.write_text("keep")
        root = tmp_path / "images"
        root.mkdir()

        with pytest.raises(BlobStoreError):
            LocalBlobStore(root).delete("../secret.txt")
        assert outside.exists()


class _FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")

    def json(self):
        return self._payload


class _FakeHttp:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def delete(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error:
            raise self.error
        return self.response


class TestSupabaseBlobStore:
    def test_delete_sends_prefixes(self):
        http = _FakeHttp(_FakeResponse(payload=[{"name": "products/a.png"}]))
        store = SupabaseBlobStore("https://x.supabase.co/", "service-key", bucket="product-images", http=http)

        store.delete("products/a.png")

        url, kwargs = http.calls[0]
        assert url == "https://x.supabase.co/storage/v1/object/product-images"
        assert kwargs["json"] == {"prefixes": ["products/a.png"]}
        assert kwargs["headers"]["Authorization"] == "Bearer service-key"
        assert kwargs["timeout"] == store.timeout

    def test_nothing_removed_raises(self):
        store = SupabaseBlobStore("https://x", "k", http=_FakeHttp(_FakeResponse(payload=[])))
        with pytest.raises(BlobStoreError):
            store.delete("products/a.png")

    def test_http_error_raises(self):
        store = SupabaseBlobStore("https://x", "k", http=_FakeHttp(_FakeResponse(status_code=500)))
        with pytest.raises(BlobStoreError):
            store.delete("products/a.png")

    def test_connection_error_raises(self):
        http = _FakeHttp(error=requests.ConnectionError("down"))
        store = SupabaseBlobStore("https://x", "k", http=http)
        with pytest.raises(BlobStoreError):
            store.delete("products/a.png")


class TestMakeBlobStore:
    def test_local_backend(self):
        assert isinstance(make_blob_store("local"), LocalBlobStore)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            make_blob_store("ftp")
