"""Product model."""
import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.models.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Product(Base):
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(Text, primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    code: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    brand: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[str] = mapped_column(Text, default="standard")
    cost: Mapped[float] = mapped_column(Float, default=0.0)
    price: Mapped[float] = mapped_column(Float, default=0.0)
    current_stock: Mapped[int] = mapped_column(Integer, default=0)
    minimum_quantity: Mapped[int] = mapped_column(Integer, default=0)
    stock_alert: Mapped[int] = mapped_column(Integer, default=0)
    unit_sale: Mapped[str] = mapped_column(Text, default="")
    unit_product: Mapped[str] = mapped_column(Text, default="")
    unit_purchase: Mapped[str] = mapped_column(Text, default="")
    order_tax: Mapped[float] = mapped_column(Float, default=0.0)
    tax_method: Mapped[str] = mapped_column(Text, default="Exclusive")
    has_imei: Mapped[bool] = mapped_column(Boolean, default=False)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    details: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"
