"""Item Variants: the closed set of things a warehouse stocks.

Invariants:
    - id, name, kind and category attributes are frozen after construction
    - quantity is validated on construction AND on assignment (>= 0)
    - kind is the discriminator: parse_item picks the variant from it alone
    - kind values come from ItemKind; records may carry the plain string value

Design Decisions:
    - Tagged pydantic models, no shared base class: each variant satisfies
      InventoryItem structurally
    - validate_assignment=True: the zero floor holds even for callers that
      bypass the repository and assign quantity directly
"""

from datetime import date
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from stockroom.core.domain_types import MIN_QUANTITY, ItemId, ItemKind, Quantity


class ElectronicItem(BaseModel):
    """Electronic stock: carries brand and warranty."""

    model_config = ConfigDict(validate_assignment=True)

    kind: Literal[ItemKind.ELECTRONIC] = Field(
        default=ItemKind.ELECTRONIC, frozen=True,
    )
    id: ItemId = Field(frozen=True)
    name: str = Field(frozen=True)
    quantity: Quantity = Field(ge=MIN_QUANTITY)
    brand: str = Field(frozen=True)
    warranty_months: int = Field(ge=0, frozen=True)


class GroceryItem(BaseModel):
    """Perishable stock: carries an expiry date."""

    model_config = ConfigDict(validate_assignment=True)

    kind: Literal[ItemKind.GROCERY] = Field(default=ItemKind.GROCERY, frozen=True)
    id: ItemId = Field(frozen=True)
    name: str = Field(frozen=True)
    quantity: Quantity = Field(ge=MIN_QUANTITY)
    expiry_date: date = Field(frozen=True)


AnyItem = Annotated[
    Union[ElectronicItem, GroceryItem], Field(discriminator="kind"),
]

_ITEM_ADAPTER: TypeAdapter = TypeAdapter(AnyItem)


def parse_item(data: dict) -> ElectronicItem | GroceryItem:
    """Validate a raw record into its variant. Raises pydantic.ValidationError."""
    return _ITEM_ADAPTER.validate_python(data)
