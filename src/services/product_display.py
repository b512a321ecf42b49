"""Text projections of a product for the listing table and the details dialog."""
from src.models.product_record import ProductRecord

NOT_AVAILABLE = "N/A"
# The listing table uses its own short marker for a missing brand
TABLE_BRAND_FALLBACK = "N/D"


def format_money(value: float) -> str:
    return f"${value:.2f}"


def format_stock(product: ProductRecord) -> str:
    return f"{product.current_stock} {product.unit_sale}".strip()


def format_tax(product: ProductRecord) -> str:
    tax = f"{product.order_tax:g}%"
    return f"{tax} ({product.tax_method})" if product.tax_method else tax


def detail_fields(product: ProductRecord) -> list[tuple[str, str]]:
    """Return (label, value) pairs for every product attribute, in display order.

    Absent optional fields render as ``N/A`` instead of a blank.
    """
    return [
        ("ID", product.id),
        ("Name", product.name),
        ("Code", product.code),
        ("Type", product.type),
        ("Category", product.category),
        ("Brand", product.brand or NOT_AVAILABLE),
        ("Cost", format_money(product.cost)),
        ("Price", format_money(product.price)),
        ("Stock", format_stock(product)),
        ("Sale Unit", product.unit_sale),
        ("Product Unit", product.unit_product),
        ("Purchase Unit", product.unit_purchase),
        ("Tax", format_tax(product)),
        ("Tax Method", product.tax_method),
        ("Minimum Quantity", str(product.minimum_quantity)),
        ("Stock Alert", str(product.stock_alert)),
        ("Has IMEI", "Yes" if product.has_imei else "No"),
        ("Image", product.image_url or NOT_AVAILABLE),
        ("Details", product.details or NOT_AVAILABLE),
        ("Created", product.created_at.strftime("%Y-%m-%d %H:%M")),
    ]


def table_row(product: ProductRecord) -> dict:
    """Row dict for the listing table."""
    return {
        "id": product.id,
        "image_url": product.image_url,
        "type": product.type,
        "name": product.name,
        "code": product.code,
        "category": product.category,
        "brand": product.brand or TABLE_BRAND_FALLBACK,
        "cost": format_money(product.cost),
        "price": format_money(product.price),
        "stock": format_stock(product),
    }
