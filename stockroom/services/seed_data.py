"""Seed Data: the fixed illustrative dataset for the demo warehouse.

Invariants:
    - Records are validated through parse_item, so a bad record fails loudly at seed time
    - Grocery expiry dates are relative to `today` (7 and 3 days out)
"""

from datetime import date, timedelta

from stockroom.core.items import ElectronicItem, GroceryItem, parse_item


def electronic_records() -> list[dict]:
    return [
        {"kind": "electronic", "id": 1, "name": "Laptop", "quantity": 10,
         "brand": "Dell", "warranty_months": 24},
        {"kind": "electronic", "id": 2, "name": "Smartphone", "quantity": 15,
         "brand": "Samsung", "warranty_months": 12},
    ]


def grocery_records(today: date) -> list[dict]:
    return [
        {"kind": "grocery", "id": 1, "name": "Milk", "quantity": 20,
         "expiry_date": today + timedelta(days=7)},
        {"kind": "grocery", "id": 2, "name": "Bread", "quantity": 30,
         "expiry_date": today + timedelta(days=3)},
    ]


def build_seed_items(
    today: date | None = None,
) -> tuple[list[ElectronicItem], list[GroceryItem]]:
    """Validate the seed records into (electronics, groceries)."""
    today = today or date.today()
    electronics = [parse_item(r) for r in electronic_records()]
    groceries = [parse_item(r) for r in grocery_records(today)]
    return electronics, groceries
