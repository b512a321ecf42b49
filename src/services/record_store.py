"""SQL-backed record store for product rows."""
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from src.models.database import SessionLocal, with_db
from src.models.product import Product
from src.models.product_record import ProductRecord

logger = logging.getLogger(__name__)


class RecordStoreError(Exception):
    """Raised when the record store cannot list or delete products."""


class SqlRecordStore:
    """Reads and deletes ``Product`` rows through a SQLAlchemy session factory."""

    def __init__(self, session_factory=None):
        self._session_factory = session_factory or SessionLocal

    def list_products(self) -> list[dict]:
        """Return every product row as a dict, newest first."""
        try:
            with with_db(self._session_factory) as db:
                rows = db.scalars(
                    select(Product).order_by(Product.created_at.desc())
                ).all()
                fields = ProductRecord.model_fields
                return [{name: getattr(row, name) for name in fields} for row in rows]
        except SQLAlchemyError as exc:
            raise RecordStoreError(f"Failed to list products: {exc}") from exc

    def delete_product(self, product_id: str) -> None:
        """Delete one product row by id.

        A missing row is reported as an error so callers keep their local copy.
        """
        try:
            with with_db(self._session_factory) as db:
                product = db.get(Product, product_id)
                if product is None:
                    raise RecordStoreError(f"Product {product_id} not found")
                db.delete(product)
                db.commit()
        except SQLAlchemyError as exc:
            raise RecordStoreError(f"Failed to delete product {product_id}: {exc}") from exc
        logger.info("Deleted product %s", product_id)
