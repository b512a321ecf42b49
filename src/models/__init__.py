"""Database models package."""
from src.models.database import Base, engine, SessionLocal, with_db, init_db
from src.models.product import Product
from src.models.product_record import ProductRecord, parse_records

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "with_db",
    "init_db",
    "Product",
    "ProductRecord",
    "parse_records",
]
