"""Inventory Repository: identity-keyed in-memory store for one item type.

Invariants:
    - At most one item per id at any time
    - Every operation returns Success or Failure; taxonomy errors are never raised
    - A Failure leaves the store exactly as it was (no partial mutation)
    - update_quantity rejects negative quantities BEFORE looking up the id
    - get_all() returns a fresh list; mutating it never touches the store

Design Decisions:
    - One Generic[T] class for every item variant, T bound to the InventoryItem protocol
    - dict keyed by id: insertion order is kept but carries no meaning
    - One RLock per repository: every operation holds it, and locked() lets a
      caller run a read-then-write sequence as one critical section
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

from stockroom.core.domain_types import MIN_QUANTITY, ItemId, Quantity
from stockroom.core.errors import (
    DuplicateKeyError,
    ErrorContext,
    InvalidQuantityError,
    NotFoundError,
    StockroomError,
)
from stockroom.core.item_protocols import InventoryItem
from stockroom.core.result import Failure, Result, Success

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=InventoryItem)


class InventoryRepository(Generic[T]):
    """CRUD over items of one type, keyed by item.id."""

    def __init__(self, name: str = "inventory"):
        self.name = name
        self._items: dict[ItemId, T] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __repr__(self) -> str:
        return f"InventoryRepository(name={self.name!r}, items={len(self._items)})"

    @contextmanager
    def locked(self) -> Iterator["InventoryRepository[T]"]:
        """Hold the repository lock across several operations."""
        with self._lock:
            yield self

    def add(self, item: T) -> Result[T]:
        """Insert item under item.id. Fails with DuplicateKeyError if taken."""
        with self._lock:
            if item.id in self._items:
                return self._fail(DuplicateKeyError(item.id, self._context(item.id)))
            self._items[item.id] = item
        logger.debug(
            f"Added item {item.id} to {self.name}",
            extra={"repository": self.name, "item_id": item.id},
        )
        return Success(item)

    def get_by_id(self, item_id: ItemId) -> Result[T]:
        """Return the stored item. Fails with NotFoundError if absent."""
        with self._lock:
            item = self._items.get(item_id)
        if item is None:
            return self._fail(NotFoundError(item_id, self._context(item_id)))
        return Success(item)

    def remove(self, item_id: ItemId) -> Result[T]:
        """Delete and return the stored item. Fails with NotFoundError if absent."""
        with self._lock:
            item = self._items.pop(item_id, None)
        if item is None:
            return self._fail(NotFoundError(item_id, self._context(item_id)))
        logger.debug(
            f"Removed item {item_id} from {self.name}",
            extra={"repository": self.name, "item_id": item_id},
        )
        return Success(item)

    def update_quantity(self, item_id: ItemId, new_quantity: Quantity) -> Result[T]:
        """Set quantity in place.

        Negative quantities fail with InvalidQuantityError whether or not the
        id exists; an absent id then fails with NotFoundError.
        """
        if new_quantity < MIN_QUANTITY:
            return self._fail(InvalidQuantityError(
                new_quantity, self._context(item_id, requested=new_quantity),
            ))
        with self._lock:
            found = self.get_by_id(item_id)
            if found.is_failure:
                return found
            item = found.value
            item.quantity = new_quantity
        logger.debug(
            f"Set quantity of item {item_id} in {self.name}",
            extra={
                "repository": self.name, "item_id": item_id,
                "quantity": new_quantity,
            },
        )
        return Success(item)

    def get_all(self) -> list[T]:
        """Snapshot of every stored item, in insertion order."""
        with self._lock:
            return list(self._items.values())

    def _context(self, item_id: ItemId, **debug: object) -> ErrorContext:
        return ErrorContext(
            repository=self.name, item_id=item_id, debug_info=debug or None,
        )

    def _fail(self, error: StockroomError) -> Failure:
        logger.warning(
            f"{self.name}: {error.message}",
            extra={
                "repository": self.name,
                "item_id": error.context.item_id,
                "error_code": error.code,
            },
        )
        return Failure(error)
