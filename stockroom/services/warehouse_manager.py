"""Warehouse Manager: compound inventory operations with reported, non-fatal failures.

Invariants:
    - No StockroomError escapes a manager operation; every Failure becomes an error report
    - Every report is logged; every failure and every non-seed success is
      written to the output sink as one diagnostic line
    - increase_stock reads and writes under one repo.locked() critical section
    - Repositories are independent: the same id may exist in electronics and groceries

Design Decisions:
    - Reports are plain dicts ({"status", "message", ...}) so callers and tests
      can inspect outcomes without parsing console text
    - Output sink injected (default print) so the shell decides where lines go
"""

import logging
from collections.abc import Callable
from datetime import date
from typing import TypeVar

from stockroom.core.domain_types import ItemId, Quantity, ReportStatus
from stockroom.core.format_messages import format_item, format_report
from stockroom.core.item_protocols import InventoryItem
from stockroom.core.items import ElectronicItem, GroceryItem
from stockroom.core.repository import InventoryRepository
from stockroom.core.result import Result
from stockroom.services.seed_data import build_seed_items

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=InventoryItem)


class WarehouseManager:
    """Owns one repository per item category and reports on every operation."""

    def __init__(self, out: Callable[[str], None] | None = None):
        self.electronics: InventoryRepository[ElectronicItem] = (
            InventoryRepository("electronics")
        )
        self.groceries: InventoryRepository[GroceryItem] = (
            InventoryRepository("groceries")
        )
        self._out = out or print

    def seed_data(self, today: date | None = None) -> list[dict]:
        """Populate both repositories with the demo dataset.

        Successful adds are logged only; failures are still echoed.
        """
        electronics, groceries = build_seed_items(today)
        reports = [
            self.add_item(self.electronics, item, quiet=True) for item in electronics
        ]
        reports += [
            self.add_item(self.groceries, item, quiet=True) for item in groceries
        ]
        return reports

    def print_all_items(self, repo: InventoryRepository[T]) -> list[str]:
        """Write one line per stored item to the sink. Returns the lines."""
        lines = [format_item(item) for item in repo.get_all()]
        for line in lines:
            self._out(line)
        return lines

    def add_item(
        self, repo: InventoryRepository[T], item: T, quiet: bool = False,
    ) -> dict:
        result = repo.add(item)
        return self._report(
            result, f"Item {item.id} added to {repo.name}.",
            echo_success=not quiet, item_id=item.id,
        )

    def increase_stock(
        self, repo: InventoryRepository[T], item_id: ItemId, delta: int,
    ) -> dict:
        """Add delta (possibly negative) to an item's quantity.

        A missing id or a resulting quantity below zero is reported, and the
        stored quantity is left as it was.
        """
        with repo.locked():
            found = repo.get_by_id(item_id)
            if found.is_failure:
                return self._report(found, "", item_id=item_id)
            item = found.value
            result = repo.update_quantity(item_id, Quantity(item.quantity + delta))
        return self._report(
            result, f"Stock updated for {item.name}",
            item_id=item_id, quantity=item.quantity,
        )

    def remove_item_by_id(
        self, repo: InventoryRepository[T], item_id: ItemId,
    ) -> dict:
        result = repo.remove(item_id)
        return self._report(result, f"Item {item_id} removed.", item_id=item_id)

    def run(self, today: date | None = None, seed: bool = True) -> list[dict]:
        """Scripted demo session: seed, list, then exercise each failure kind."""
        reports = self.seed_data(today) if seed else []
        self._out("Grocery Items:")
        self.print_all_items(self.groceries)
        self._out("\nElectronic Items:")
        self.print_all_items(self.electronics)

        reports.append(self.add_item(self.electronics, ElectronicItem(
            id=1, name="Tablet", quantity=5, brand="Apple", warranty_months=18,
        )))
        reports.append(self.remove_item_by_id(self.groceries, 99))
        reports.append(self.increase_stock(self.electronics, 2, -999))
        return reports

    def _report(
        self, result: Result, message: str,
        echo_success: bool = True, **fields: object,
    ) -> dict:
        if result.is_failure:
            report = result.error.to_report()
            logger.info(
                f"Reported failure: {report['message']}",
                extra={
                    "repository": report["repository"],
                    "item_id": report["item_id"],
                    "error_code": report["error_code"],
                },
            )
        else:
            report = {"status": ReportStatus.OK.value, "message": message, **fields}
            logger.info(message, extra={"item_id": fields.get("item_id")})
            if not echo_success:
                return report
        self._out(format_report(report))
        return report
