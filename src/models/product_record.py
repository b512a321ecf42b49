"""Validated product record shape used by the listing screen."""
import logging
from datetime import datetime, timezone
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class ProductRecord(BaseModel):
    """One product row as the listing sees it.

    Built from ORM ``Product`` objects or plain mappings (e.g. REST payloads).
    Optional text fields are ``None`` when absent, never an empty string.
    """

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    name: str
    code: str
    category: str
    brand: str | None = None
    type: str = ""
    cost: float = Field(0.0, ge=0)
    price: float = Field(0.0, ge=0)
    current_stock: int = 0
    minimum_quantity: int = 0
    stock_alert: int = 0
    unit_sale: str = ""
    unit_product: str = ""
    unit_purchase: str = ""
    order_tax: float = 0.0
    tax_method: str = ""
    has_imei: bool = False
    image_url: str | None = None
    details: str | None = None
    created_at: datetime

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("brand", "image_url", "details", mode="before")
    @classmethod
    def _blank_is_absent(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("type", "unit_sale", "unit_product", "unit_purchase", "tax_method", mode="before")
    @classmethod
    def _null_label_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("created_at")
    @classmethod
    def _naive_utc(cls, v: datetime) -> datetime:
        """Store timestamps as naive UTC so mixed rows stay comparable."""
        if v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v

    @property
    def has_image(self) -> bool:
        return self.image_url is not None


def parse_records(rows: Iterable[Any]) -> list[ProductRecord]:
    """Validate raw store rows, skipping malformed ones and duplicate ids.

    Order is preserved; on duplicate ids the first occurrence wins.
    """
    records: list[ProductRecord] = []
    seen: set[str] = set()
    for row in rows:
        try:
            record = ProductRecord.model_validate(row)
        except ValidationError as exc:
            row_id = row.get("id") if isinstance(row, dict) else getattr(row, "id", None)
            logger.warning("Skipping malformed product row %r: %s", row_id, exc)
            continue
        if record.id in seen:
            logger.warning("Skipping duplicate product id %s", record.id)
            continue
        seen.add(record.id)
        records.append(record)
    return records
