"""Warehouse Manager tests: compound operations report failures instead of raising.

Tests cover:
    - increase_stock success, NOT_FOUND, and INVALID_QUANTITY (quantity unchanged)
    - remove_item_by_id success and NOT_FOUND on an empty store
    - add_item reports duplicates
    - print_all_items renders one line per item
    - seed_data logs successes without echoing them; run produces the scripted session
"""

import pytest

from stockroom.services.warehouse_manager import WarehouseManager
from tests.factories import TODAY, make_electronic, make_grocery


@pytest.fixture
def lines() -> list[str]:
    return []


@pytest.fixture
def manager(lines) -> WarehouseManager:
    return WarehouseManager(out=lines.append)


# ─── increase_stock ──────────────────────────────────────────────

def test_increase_stock_adds_delta(manager, lines):
    manager.electronics.add(make_electronic(1, quantity=20))
    report = manager.increase_stock(manager.electronics, 1, 5)
    assert report["status"] == "ok"
    assert report["quantity"] == 25
    assert manager.electronics.get_by_id(1).value.quantity == 25
    assert lines == ["Stock updated for Laptop"]


def test_increase_stock_large_negative_delta_reported(manager, lines):
    manager.electronics.add(make_electronic(2, quantity=15, name="Smartphone"))
    report = manager.increase_stock(manager.electronics, 2, -999)
    assert report["status"] == "error"
    assert report["error_code"] == "INVALID_QUANTITY"
    assert manager.electronics.get_by_id(2).value.quantity == 15
    assert lines == ["Error: Quantity cannot be negative."]


def test_increase_stock_to_exactly_zero_succeeds(manager):
    manager.groceries.add(make_grocery(1, quantity=20))
    report = manager.increase_stock(manager.groceries, 1, -20)
    assert report["status"] == "ok"
    assert manager.groceries.get_by_id(1).value.quantity == 0


def test_increase_stock_missing_id_reported(manager, lines):
    report = manager.increase_stock(manager.groceries, 7, 1)
    assert report["error_code"] == "NOT_FOUND"
    assert report["repository"] == "groceries"
    assert lines == ["Error: Item with ID 7 not found."]


# ─── remove_item_by_id ───────────────────────────────────────────

def test_remove_item_by_id_on_empty_store_reported(manager, lines):
    report = manager.remove_item_by_id(manager.groceries, 99)
    assert report["status"] == "error"
    assert report["error_code"] == "NOT_FOUND"
    assert len(manager.groceries) == 0
    assert lines == ["Error: Item with ID 99 not found."]


def test_remove_item_by_id_success(manager, lines):
    manager.groceries.add(make_grocery(3))
    report = manager.remove_item_by_id(manager.groceries, 3)
    assert report["status"] == "ok"
    assert 3 not in manager.groceries
    assert lines == ["Item 3 removed."]


# ─── add_item ────────────────────────────────────────────────────

def test_add_item_duplicate_reported_and_first_kept(manager):
    assert manager.add_item(manager.electronics, make_electronic(1))["status"] == "ok"
    report = manager.add_item(
        manager.electronics, make_electronic(1, name="Tablet", brand="Apple"),
    )
    assert report["error_code"] == "DUPLICATE_KEY"
    assert manager.electronics.get_by_id(1).value.name == "Laptop"


# ─── print_all_items ─────────────────────────────────────────────

def test_print_all_items_writes_one_line_per_item(manager, lines):
    manager.groceries.add(make_grocery(1))
    manager.groceries.add(make_grocery(2, name="Bread"))
    rendered = manager.print_all_items(manager.groceries)
    assert len(rendered) == 2
    assert lines == rendered
    assert rendered[1].startswith("[Grocery] ID: 2, Name: Bread")


def test_print_all_items_empty_repository(manager, lines):
    assert manager.print_all_items(manager.electronics) == []
    assert lines == []


# ─── seed_data / run ─────────────────────────────────────────────

def test_seed_data_populates_both_repositories(manager):
    reports = manager.seed_data(TODAY)
    assert all(r["status"] == "ok" for r in reports)
    assert len(manager.electronics) == 2
    assert len(manager.groceries) == 2
    assert manager.groceries.get_by_id(1).value.expiry_date.isoformat() == "2026-01-22"


def test_seed_data_twice_reports_duplicates_without_raising(manager):
    manager.seed_data(TODAY)
    reports = manager.seed_data(TODAY)
    assert {r["error_code"] for r in reports} == {"DUPLICATE_KEY"}


def test_run_reports_each_failure_kind_and_continues(manager, lines):
    reports = manager.run(TODAY)
    codes = [r.get("error_code") for r in reports if r["status"] == "error"]
    assert codes == ["DUPLICATE_KEY", "NOT_FOUND", "INVALID_QUANTITY"]
    assert manager.electronics.get_by_id(2).value.quantity == 15
    assert "Grocery Items:" in lines
    assert "\nElectronic Items:" in lines
    assert lines[-1] == "Error: Quantity cannot be negative."


def test_run_without_seed_reports_not_found_for_stock_change(manager):
    reports = manager.run(TODAY, seed=False)
    assert [r["status"] for r in reports] == ["ok", "error", "error"]
    assert reports[-1]["error_code"] == "NOT_FOUND"


def test_default_sink_is_print(capsys):
    WarehouseManager().remove_item_by_id(WarehouseManager().groceries, 1)
    assert capsys.readouterr().out == "Error: Item with ID 1 not found.\n"


def test_seed_data_logs_successes_without_echoing(manager, lines, caplog):
    caplog.set_level("INFO", logger="stockroom.services.warehouse_manager")
    manager.seed_data(TODAY)
    assert lines == []
    assert "Item 1 added to electronics." in caplog.messages
    assert "Item 2 added to groceries." in caplog.messages


def test_seed_data_still_echoes_failures(manager, lines):
    manager.seed_data(TODAY)
    manager.seed_data(TODAY)
    assert lines == [
        "Error: Item with ID 1 already exists.",
        "Error: Item with ID 2 already exists.",
    ] * 2


def test_run_output_starts_with_grocery_listing(manager, lines):
    manager.run(TODAY)
    assert lines[0] == "Grocery Items:"
    assert lines[1].startswith("[Grocery] ID: 1, Name: Milk")
