"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ItemId wraps int; ids are caller-assigned, never generated by a repository
    - Quantity is bounded below by MIN_QUANTITY (0)
    - Item categories encoded as a str Enum, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for ItemKind: the value doubles as the discriminator tag of the item models
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ItemId = NewType("ItemId", int)


# ─── Value Types ─────────────────────────────────────────────────

Quantity = NewType("Quantity", int)    # >= MIN_QUANTITY

MIN_QUANTITY: int = 0


# ─── Enums ───────────────────────────────────────────────────────

class ItemKind(str, Enum):
    """Closed set of item categories a warehouse stocks."""
    ELECTRONIC = "electronic"
    GROCERY = "grocery"


class ReportStatus(str, Enum):
    """Outcome of a manager-level operation."""
    OK = "ok"
    ERROR = "error"
