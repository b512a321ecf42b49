"""Shared fixtures: in-memory stores, a recording notifier and product factories."""

import os
import tempfile
from datetime import datetime, timedelta

# Keep config.py from creating data/ inside the repository during tests
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="catalog-admin-tests-"))

import pytest

from src.models.product_record import ProductRecord
from src.services.blob_store import BlobStoreError
from src.services.record_store import RecordStoreError

BASE_TIME = datetime(2024, 5, 1, 12, 0, 0)


def make_row(id, name, code, category="General", minutes=0, **extra) -> dict:
    """Raw store row; *minutes* offsets created_at from BASE_TIME."""
    row = {
        "id": id,
        "name": name,
        "code": code,
        "category": category,
        "brand": None,
        "type": "standard",
        "cost": 10.0,
        "price": 15.5,
        "current_stock": 7,
        "minimum_quantity": 1,
        "stock_alert": 2,
        "unit_sale": "pcs",
        "unit_product": "pcs",
        "unit_purchase": "box",
        "order_tax": 5,
        "tax_method": "Exclusive",
        "has_imei": False,
        "image_url": None,
        "details": None,
        "created_at": BASE_TIME + timedelta(minutes=minutes),
    }
    row.update(extra)
    return row


def make_record(*args, **kwargs) -> ProductRecord:
    return ProductRecord.model_validate(make_row(*args, **kwargs))


class FakeRecordStore:
    """Record store double returning rows newest first."""

    def __init__(self, rows=None, list_error=None, delete_error=None):
        self.rows = list(rows or [])
        self.list_error = list_error
        self.delete_error = delete_error
        self.list_calls = 0
        self.deleted: list[str] = []

    def list_products(self):
        self.list_calls += 1
        if self.list_error:
            raise self.list_error
        return sorted(self.rows, key=lambda r: r["created_at"], reverse=True)

    def delete_product(self, product_id):
        if self.delete_error:
            raise self.delete_error
        self.deleted.append(product_id)
        self.rows = [r for r in self.rows if str(r["id"]) != product_id]


class FakeBlobStore:
    def __init__(self, error=None):
        self.error = error
        self.deleted: list[str] = []

    def delete(self, key):
        self.deleted.append(key)
        if self.error:
            raise self.error


class RecordingNotifier:
    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def __call__(self, kind, message):
        self.messages.append((kind, message))

    def kinds(self):
        return [kind for kind, _ in self.messages]


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def widget_rows():
    """Two rows from the listing scenarios: Widget is newer than Gadget."""
    return [
        make_row(2, "Gadget", "G1", category="Tools", minutes=0),
        make_row(
            1, "Widget", "W1", category="Hardware", minutes=5,
            image_url="https://cdn.example.com/storage/v1/object/public/product-images/products/widget.png",
        ),
    ]


@pytest.fixture
def record_store_error():
    return RecordStoreError("connection refused")


@pytest.fixture
def blob_store_error():
    return BlobStoreError("object not found")
