"""Services package."""
from src.services.blob_store import (
    BlobStoreError, LocalBlobStore, SupabaseBlobStore, blob_key_for, make_blob_store,
)
from src.services.catalog_controller import CatalogController
from src.services.catalog_filter import CatalogView, build_view, filter_products, matches
from src.services.delete_workflow import DeleteState, DeleteWorkflow
from src.services.product_display import detail_fields, table_row
from src.services.record_store import RecordStoreError, SqlRecordStore

__all__ = [
    "BlobStoreError",
    "LocalBlobStore",
    "SupabaseBlobStore",
    "blob_key_for",
    "make_blob_store",
    "CatalogController",
    "CatalogView",
    "build_view",
    "filter_products",
    "matches",
    "DeleteState",
    "DeleteWorkflow",
    "detail_fields",
    "table_row",
    "RecordStoreError",
    "SqlRecordStore",
]
