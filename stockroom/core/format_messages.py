"""Item Message Formatting: pure functions that turn items and reports into display lines.

Invariants:
    - All functions are pure (no IO, no logging)
    - Every item line starts with its category tag, e.g. "[Electronic]"
    - Unknown item types fall back to the capability fields only (id, name, quantity)

Design Decisions:
    - Per-kind formatters in an explicit dict: adding a variant requires editing _FORMATTERS
    - Dates rendered ISO (YYYY-MM-DD) so output does not depend on the process locale
"""

from collections.abc import Callable

from stockroom.core.domain_types import ItemKind, ReportStatus
from stockroom.core.item_protocols import InventoryItem


def _format_electronic(item) -> str:
    return (
        f"[Electronic] ID: {item.id}, Name: {item.name}, Brand: {item.brand}, "
        f"Quantity: {item.quantity}, Warranty: {item.warranty_months} months"
    )


def _format_grocery(item) -> str:
    return (
        f"[Grocery] ID: {item.id}, Name: {item.name}, "
        f"Quantity: {item.quantity}, Expiry: {item.expiry_date.isoformat()}"
    )


_FORMATTERS: dict[ItemKind, Callable[..., str]] = {
    ItemKind.ELECTRONIC: _format_electronic,
    ItemKind.GROCERY: _format_grocery,
}


def format_item(item: InventoryItem) -> str:
    """Render one item as a single human-readable line."""
    formatter = _FORMATTERS.get(getattr(item, "kind", None))
    if formatter is None:
        return f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}"
    return formatter(item)


def format_report(report: dict) -> str:
    """Render a manager report as a diagnostic line."""
    if report.get("status") == ReportStatus.ERROR:
        return f"Error: {report['message']}"
    return report["message"]
