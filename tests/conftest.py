"""Root conftest: shared test configuration and repository fixtures."""

import os

import pytest

from stockroom.config import get_settings
from stockroom.core.items import ElectronicItem, GroceryItem
from stockroom.core.repository import InventoryRepository

# Keep a developer's shell environment out of settings-dependent tests
for _key in list(os.environ):
    if _key.startswith("STOCKROOM_"):
        del os.environ[_key]


@pytest.fixture
def electronics() -> InventoryRepository[ElectronicItem]:
    return InventoryRepository("electronics")


@pytest.fixture
def groceries() -> InventoryRepository[GroceryItem]:
    return InventoryRepository("groceries")


@pytest.fixture(autouse=True)
def _clear_settings_cache(tmp_path, monkeypatch):
    # Settings read .env from the working directory; a developer's file must not leak in
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
