"""Confirm-then-delete flow for a single product and its stored image."""
import asyncio
import logging
from enum import Enum
from typing import Callable

from config import BLOB_FOLDER
from src.models.product_record import ProductRecord
from src.services.blob_store import blob_key_for

logger = logging.getLogger(__name__)

# notify(kind, message) with kind "success" or "error"
Notifier = Callable[[str, str], None]

SUCCESS = "success"
ERROR = "error"

DELETED_MESSAGE = "Product deleted successfully!"
DELETE_FAILED_MESSAGE = "Failed to delete product"


class DeleteState(str, Enum):
    IDLE = "idle"
    CONFIRM_PENDING = "confirm_pending"
    DELETING = "deleting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class DeleteWorkflow:
    """Tracks one delete attempt from the confirmation dialog to its outcome.

    The image is removed first and its failure is tolerated; the record
    deletion decides whether the attempt succeeded. ``on_deleted`` receives
    the product id once the record store acknowledged the delete.
    """

    def __init__(
        self,
        record_store,
        blob_store,
        notify: Notifier,
        on_deleted: Callable[[str], None],
        blob_folder: str = BLOB_FOLDER,
    ):
        self._records = record_store
        self._blobs = blob_store
        self._notify = notify
        self._on_deleted = on_deleted
        self._blob_folder = blob_folder

        self.state = DeleteState.IDLE
        self.target: ProductRecord | None = None
        self.dialog_open = False
        self.deleting = False

    def request(self, product: ProductRecord) -> bool:
        """Open the confirmation dialog for *product*."""
        if self.deleting:
            logger.debug("Ignoring delete request for %s: a delete is in flight", product.id)
            return False
        self.target = product
        self.dialog_open = True
        self.state = DeleteState.CONFIRM_PENDING
        return True

    def cancel(self) -> bool:
        """Close the dialog without touching any store."""
        if self.deleting:
            return False
        self.target = None
        self.dialog_open = False
        self.state = DeleteState.IDLE
        return True

    async def confirm(self) -> DeleteState:
        """Run the delete for the current target and return the resulting state."""
        if self.deleting:
            return self.state
        if self.state not in (DeleteState.CONFIRM_PENDING, DeleteState.FAILED) or self.target is None:
            logger.debug("Confirm ignored in state %s", self.state.value)
            return self.state

        product = self.target
        self.deleting = True
        self.state = DeleteState.DELETING
        loop = asyncio.get_event_loop()
        try:
            await self._delete_image(product, loop)
            try:
                await loop.run_in_executor(None, self._records.delete_product, product.id)
            except Exception:
                logger.exception("Error deleting product %s", product.id)
                self.state = DeleteState.FAILED
                self._notify(ERROR, DELETE_FAILED_MESSAGE)
                return self.state

            self._on_deleted(product.id)
            self.dialog_open = False
            self.target = None
            self.state = DeleteState.SUCCEEDED
            self._notify(SUCCESS, DELETED_MESSAGE)
            return self.state
        finally:
            self.deleting = False

    async def _delete_image(self, product: ProductRecord, loop) -> None:
        key = blob_key_for(product.image_url, self._blob_folder)
        if key is None:
            return
        try:
            await loop.run_in_executor(None, self._blobs.delete, key)
        except Exception as exc:
            # The record is still deleted; the image may be left orphaned.
            logger.warning("Could not delete image %s for product %s: %s", key, product.id, exc)
