"""Customer and product entities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CustomerSummary:
    id: str
    name: str
    email: str | None = None
    phone: str | None = None

    @classmethod
    def from_node(cls, node: dict[str, Any]) -> "CustomerSummary":
        return cls(id=node["id"], name=node["name"], email=node.get("email"), phone=node.get("phone"))


@dataclass(frozen=True)
class ProductSummary:
    id: str
    name: str
    unit_price: float | None = None

    @classmethod
    def from_node(cls, node: dict[str, Any]) -> "ProductSummary":
        unit_price = node.get("unitPrice")
        return cls(
            id=node["id"],
            name=node["name"],
            unit_price=float(unit_price) if unit_price is not None else None,
        )
