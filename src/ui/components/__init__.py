"""Reusable UI components."""
from src.ui.components.helpers import avatar_color, notify, page_header, product_thumbnail

__all__ = ["avatar_color", "notify", "page_header", "product_thumbnail"]
