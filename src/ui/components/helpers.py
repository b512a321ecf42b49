"""Shared UI helper functions and design tokens for product display."""

from nicegui import ui

from src.services.delete_workflow import SUCCESS


# ─── Design Tokens ────────────────────────────────────────────────────────────

CARD_CLASSES = "w-full p-5"
INPUT_PROPS = "outlined dense"
HOVER_BG = "hover:bg-[#F1F5F9]"

# Nav active-state tokens (used in layout.py JS)
NAV_ACTIVE_BG = "#E2E8F0"
NAV_ACTIVE_BORDER = "#1d4ed8"
NAV_ACTIVE_TEXT = "#1e293b"


def page_header(title: str, subtitle: str | None = None, icon: str | None = None):
    """Render a consistent page title with optional icon + subtitle."""
    with ui.row().classes("items-center gap-3"):
        if icon:
            ui.icon(icon, size="sm").classes("text-accent")
        ui.label(title).classes("text-h5 font-bold")
    if subtitle:
        ui.label(subtitle).classes("text-body2 text-secondary")
    ui.separator()


# Predefined palette for letter-avatar backgrounds
AVATAR_COLORS = [
    "#E57373", "#F06292", "#BA68C8", "#9575CD", "#7986CB",
    "#64B5F6", "#4FC3F7", "#4DD0E1", "#4DB6AC", "#81C784",
    "#AED581", "#DCE775", "#FFD54F", "#FFB74D", "#FF8A65",
    "#A1887F", "#90A4AE",
]


def avatar_color(name: str) -> str:
    """Return a deterministic color based on the first letter of *name*."""
    idx = ord(name[0].upper()) % len(AVATAR_COLORS) if name else 0
    return AVATAR_COLORS[idx]


def product_thumbnail(name: str, image_url: str | None, size: int = 40) -> None:
    """Render the product image, or a letter avatar when it has none."""
    if image_url:
        ui.image(image_url).classes("rounded object-cover").style(
            f"width: {size}px; height: {size}px; flex-shrink: 0"
        )
        return
    letter = name[0].upper() if name else "?"
    ui.avatar(
        letter, color=avatar_color(name or "?"), text_color="white",
        size=f"{size}px", font_size=f"{size // 3}px",
    ).classes("rounded")


def notify(kind: str, message: str) -> None:
    """Show a toast; *kind* is "success" or "error"."""
    ui.notify(message, type="positive" if kind == SUCCESS else "negative")
