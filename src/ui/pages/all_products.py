"""All Products page -- search, inspect and delete catalog products."""
import logging

from nicegui import ui

from config import PAGE_SIZE_OPTIONS
from src.services import (
    CatalogController, SqlRecordStore, detail_fields, make_blob_store, table_row,
)
from src.ui.components.helpers import (
    CARD_CLASSES, INPUT_PROPS, notify, page_header, product_thumbnail,
)
from src.ui.layout import build_layout

logger = logging.getLogger(__name__)

# Export entries are placeholders; no export is wired up yet.
_EXPORT_ENTRIES = ("Export as CSV", "Export as Excel", "Export as PDF")

_COLUMNS = [
    ("Image", "w-14"),
    ("Type", "w-24"),
    ("Name", "flex-1"),
    ("Code", "w-24"),
    ("Category", "w-32"),
    ("Brand", "w-28"),
    ("Product Cost", "w-28 text-right"),
    ("Product Price", "w-28 text-right"),
    ("Current Stock", "w-28 text-right"),
    ("", "w-12"),
]


def all_products_page(controller: CatalogController | None = None):
    """Render the All Products listing.

    Args:
        controller: Optional pre-built controller (defaults to the configured stores).
    """
    if controller is None:
        controller = CatalogController(SqlRecordStore(), make_blob_store(), notify)

    content = build_layout("All Products")

    with content:
        page_header("All Products", icon="inventory_2")

        loading_label = ui.label("Loading products...").classes("text-h6 text-secondary self-center mt-16")
        loading_label.set_visibility(controller.loading)
        body = ui.column().classes("w-full gap-4")
        body.set_visibility(not controller.loading)

        # ===================================================================
        # Details dialog (read-only)
        # ===================================================================
        with ui.dialog() as view_dialog, ui.card().classes("w-full").style("max-width: 560px"):
            ui.label("Product Details").classes("text-subtitle1 font-bold")
            ui.label("Complete product info").classes("text-caption text-secondary")

            @ui.refreshable
            def _view_content():
                product = controller.view_target
                if product is None:
                    return
                with ui.row().classes("items-center gap-4 w-full"):
                    product_thumbnail(product.name, product.image_url, size=96)
                    with ui.column().classes("gap-0"):
                        ui.label(product.name).classes("text-h6 font-bold")
                        ui.label(f"Code: {product.code}").classes("text-body2 text-secondary")
                ui.separator()
                with ui.grid(columns=2).classes("w-full gap-x-6 gap-y-1 text-sm"):
                    for label, value in detail_fields(product):
                        ui.label(label).classes("font-medium text-secondary")
                        ui.label(value).classes("break-all")

            _view_content()

            def _close_view():
                controller.close_view()
                view_dialog.close()

            with ui.row().classes("w-full justify-end"):
                ui.button("Close", on_click=_close_view).props("outline")

        view_dialog.on("hide", lambda _: controller.close_view())

        def _open_view(product):
            controller.open_view(product)
            _view_content.refresh()
            view_dialog.open()

        # ===================================================================
        # Delete confirmation dialog
        # ===================================================================
        with ui.dialog().props("persistent") as delete_dialog, ui.card():
            ui.label("Are you sure?").classes("text-subtitle1 font-bold")
            delete_message = ui.label("").classes("text-body2 text-secondary")
            with ui.row().classes("justify-end gap-2 mt-4 w-full"):
                cancel_btn = ui.button("Cancel").props("flat")
                confirm_btn = ui.button("Delete").props("color=negative")

        def _open_delete(product):
            if not controller.request_delete(product):
                return
            delete_message.text = f'This will permanently delete the product "{product.name}".'
            delete_dialog.open()

        def _cancel_delete():
            if controller.cancel_delete():
                delete_dialog.close()

        async def _confirm_delete():
            confirm_btn.disable()
            cancel_btn.disable()
            confirm_btn.text = "Deleting..."
            try:
                await controller.confirm_delete()
            finally:
                confirm_btn.text = "Delete"
                confirm_btn.enable()
                cancel_btn.enable()
            if not controller.deletion.dialog_open:
                delete_dialog.close()
                product_table.refresh()

        cancel_btn.on_click(_cancel_delete)
        confirm_btn.on_click(_confirm_delete)

        # ===================================================================
        # Listing
        # ===================================================================
        with body:
            with ui.card().classes(CARD_CLASSES):
                with ui.row().classes("w-full justify-end gap-2"):
                    ui.button(
                        "Create", icon="add",
                        on_click=lambda: ui.navigate.to("/products/create-product"),
                    ).props("outline color=primary")
                    ui.button("Filters", icon="filter_list").props("outline color=accent")

                with ui.row().classes("w-full items-center gap-2"):
                    page_size_select = ui.select(
                        {size: str(size) for size in PAGE_SIZE_OPTIONS},
                        value=controller.page_size,
                    ).props(INPUT_PROPS).classes("w-24")
                    with ui.dropdown_button("Export", icon="file_download", auto_close=True).props(
                        "outline dense"
                    ):
                        for entry in _EXPORT_ENTRIES:
                            ui.item(entry)
                    ui.space()
                    search_input = ui.input(placeholder="Search...").props(
                        f"{INPUT_PROPS} clearable"
                    ).classes("w-64")
                    with search_input.add_slot("prepend"):
                        ui.icon("search")

                @ui.refreshable
                def product_table():
                    view = controller.view
                    with ui.column().classes("w-full gap-0 border rounded-lg"):
                        with ui.row().classes("w-full items-center gap-2 px-3 py-2 bg-grey-2 no-wrap"):
                            for title, width in _COLUMNS:
                                ui.label(title).classes(f"{width} text-caption font-bold text-secondary")

                        if view.is_empty:
                            ui.label(view.empty_message).classes(
                                "w-full text-center text-body2 text-secondary py-8"
                            )
                        for product in view.rows:
                            _product_row(product, _open_view, _open_delete)

                    with ui.row().classes("w-full items-center justify-between mt-3"):
                        with ui.column().classes("gap-0"):
                            ui.label(view.summary).classes("text-body2 text-secondary")
                            ui.label(f"{view.total_count} products in catalog").classes(
                                "text-caption text-grey-6"
                            )
                        with ui.row().classes("gap-1"):
                            ui.button("Previous").props("flat dense disable")
                            ui.button("1").props("unelevated dense color=primary")
                            ui.button("Next").props("flat dense disable")

                product_table()

        # --- Filter controls -------------------------------------------------

        def _on_page_size_change(_):
            controller.set_page_size(page_size_select.value)
            product_table.refresh()

        _search_timer = {"ref": None}

        def _apply_search():
            controller.set_search(search_input.value)
            product_table.refresh()

        def _debounced_search(_):
            if _search_timer["ref"] is not None:
                _search_timer["ref"].cancel()
            _search_timer["ref"] = ui.timer(0.3, _apply_search, once=True)

        page_size_select.on_value_change(_on_page_size_change)
        search_input.on_value_change(_debounced_search)

        # --- Initial fetch -----------------------------------------------------

        async def _load():
            await controller.load()
            loading_label.set_visibility(controller.loading)
            body.set_visibility(not controller.loading)
            product_table.refresh()

        ui.timer(0.1, _load, once=True)


def _product_row(product, on_view, on_delete):
    """Render a single product as a row of the listing."""
    row = table_row(product)
    with ui.row().classes("w-full items-center gap-2 px-3 py-2 border-t no-wrap"):
        with ui.element("div").classes("w-14"):
            product_thumbnail(product.name, product.image_url)
        ui.label(row["type"]).classes("w-24 text-body2")
        ui.label(row["name"]).classes("flex-1 text-body2 font-medium")
        ui.label(row["code"]).classes("w-24 text-body2")
        ui.label(row["category"]).classes("w-32 text-body2")
        ui.label(row["brand"]).classes("w-28 text-body2")
        ui.label(row["cost"]).classes("w-28 text-body2 text-right")
        ui.label(row["price"]).classes("w-28 text-body2 text-right")
        ui.label(row["stock"]).classes("w-28 text-body2 text-right")

        with ui.element("div").classes("w-12"):
            with ui.button(icon="more_horiz").props("flat round dense"):
                with ui.menu():
                    ui.menu_item("View", on_click=lambda p=product: on_view(p))
                    ui.menu_item(
                        "Edit",
                        on_click=lambda pid=product.id: ui.navigate.to(
                            f"/products/all-products/{pid}/edit"
                        ),
                    )
                    ui.menu_item("Delete", on_click=lambda p=product: on_delete(p))
