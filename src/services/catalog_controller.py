"""State for the All Products screen: the fetched catalog and what is shown of it."""
import asyncio
import logging

from config import DEFAULT_PAGE_SIZE
from src.models.product_record import ProductRecord, parse_records
from src.services.catalog_filter import CatalogView, build_view, validate_page_size
from src.services.delete_workflow import ERROR, DeleteState, DeleteWorkflow, Notifier

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch products"


class CatalogController:
    """Owns the in-memory catalog, the listing parameters and both dialog targets.

    The catalog is fetched once by :meth:`load`. After that it only changes
    when a delete succeeds, in which case the record is dropped locally.
    """

    def __init__(self, record_store, blob_store, notify: Notifier, page_size: int = DEFAULT_PAGE_SIZE):
        self._records = record_store
        self._notify = notify

        self.products: list[ProductRecord] = []
        self.loading = True
        self.search_term = ""
        self.page_size = validate_page_size(page_size)
        self.view_target: ProductRecord | None = None
        self.view_open = False
        self._fetch_started = False

        self.deletion = DeleteWorkflow(
            record_store, blob_store, notify, on_deleted=self._remove,
        )

    # --- Fetch --------------------------------------------------------------

    async def load(self) -> None:
        """Fetch the whole catalog, newest first."""
        if self._fetch_started:
            logger.warning("Catalog already fetched; ignoring reload")
            return
        self._fetch_started = True
        self.loading = True
        try:
            rows = await asyncio.get_event_loop().run_in_executor(
                None, self._records.list_products,
            )
            records = parse_records(rows or [])
            records.sort(key=lambda p: p.created_at, reverse=True)
            self.products = records
            logger.info("Loaded %d product(s)", len(records))
        except Exception:
            logger.exception("Error fetching products")
            self.products = []
            self._notify(ERROR, FETCH_FAILED_MESSAGE)
        finally:
            self.loading = False

    # --- Listing ------------------------------------------------------------

    def set_search(self, term: str | None) -> None:
        self.search_term = term or ""

    def set_page_size(self, page_size: int) -> None:
        self.page_size = validate_page_size(page_size)

    @property
    def view(self) -> CatalogView:
        return build_view(self.products, self.search_term, self.page_size)

    # --- Details dialog -----------------------------------------------------

    def open_view(self, product: ProductRecord) -> None:
        self.view_target = product
        self.view_open = True

    def close_view(self) -> None:
        self.view_open = False
        self.view_target = None

    # --- Delete dialog ------------------------------------------------------

    def request_delete(self, product: ProductRecord) -> bool:
        return self.deletion.request(product)

    def cancel_delete(self) -> bool:
        return self.deletion.cancel()

    async def confirm_delete(self) -> DeleteState:
        return await self.deletion.confirm()

    def _remove(self, product_id: str) -> None:
        self.products = [p for p in self.products if p.id != product_id]
        if self.view_target is not None and self.view_target.id == product_id:
            self.close_view()
