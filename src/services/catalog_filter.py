"""Client-side search and page-size truncation for the product listing."""
from dataclasses import dataclass, field
from typing import Sequence

from config import PAGE_SIZE_OPTIONS
from src.models.product_record import ProductRecord

EMPTY_STATE_MESSAGE = "No products found"


@dataclass(frozen=True)
class CatalogView:
    """What the listing table renders for the current search and page size."""

    rows: list[ProductRecord] = field(default_factory=list)
    filtered_count: int = 0
    total_count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def empty_message(self) -> str | None:
        return EMPTY_STATE_MESSAGE if self.is_empty else None

    @property
    def summary(self) -> str:
        first = 1 if self.rows else 0
        return f"Showing {first} to {len(self.rows)} of {self.filtered_count} entries"


def matches(product: ProductRecord, term: str) -> bool:
    """True if *term* occurs in the product's name, code or category (any case)."""
    needle = term.casefold()
    if not needle:
        return True
    return (
        needle in product.name.casefold()
        or needle in product.code.casefold()
        or needle in product.category.casefold()
    )


def filter_products(products: Sequence[ProductRecord], term: str) -> list[ProductRecord]:
    return [p for p in products if matches(p, term)]


def validate_page_size(page_size: int) -> int:
    if page_size not in PAGE_SIZE_OPTIONS:
        raise ValueError(
            f"Page size must be one of {PAGE_SIZE_OPTIONS}, got {page_size!r}"
        )
    return page_size


def build_view(products: Sequence[ProductRecord], term: str, page_size: int) -> CatalogView:
    """Filter *products* by *term* and keep the first *page_size* matches."""
    validate_page_size(page_size)
    filtered = filter_products(products, term)
    return CatalogView(
        rows=filtered[:page_size],
        filtered_count=len(filtered),
        total_count=len(products),
    )
