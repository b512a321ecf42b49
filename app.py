"""Catalog Admin - Main entry point."""
import logging

from nicegui import app, ui

from config import APP_TITLE, APP_PORT, APP_HOST, IMAGES_DIR, LOG_LEVEL
from src.models import init_db
from src.ui.pages.all_products import all_products_page

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)

# Initialize database tables on startup
init_db()

# Serve locally-stored product images
app.add_static_files("/images", str(IMAGES_DIR))


@ui.page("/")
def index():
    ui.navigate.to("/products/all-products")


@ui.page("/products")
def products_redirect():
    ui.navigate.to("/products/all-products")


@ui.page("/products/all-products")
def all_products_view():
    all_products_page()


@app.get("/_health")
async def health_check():
    return {"status": "ok", "app": "catalog-admin"}


ui.run(
    title=APP_TITLE,
    host=APP_HOST,
    port=APP_PORT,
    reload=False,
    dark=False,
)
