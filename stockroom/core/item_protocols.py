"""Item Protocols: the capability every stored item must provide.

Invariants:
    - id is immutable and unique within one repository
    - quantity is mutable and never below zero once stored
    - Repositories and the manager read only id, name, quantity; they never downcast

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy between variants
    - runtime_checkable so tests can assert conformance of each variant
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class InventoryItem(Protocol):
    """Structural contract for anything an InventoryRepository can hold."""
    id: int
    name: str
    quantity: int
