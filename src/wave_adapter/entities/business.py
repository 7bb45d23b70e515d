"""Business domain entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BusinessSummary:
    """Minimal projection of a remote business record.

    Attributes:
        id: Accounting Service business identifier
        name: Display name of the business
        is_active: Whether the business is active in the Accounting Service
    """

    id: str
    name: str
    is_active: bool = True

    @classmethod
    def from_node(cls, node: dict[str, Any]) -> "BusinessSummary":
        return cls(id=node["id"], name=node["name"], is_active=bool(node.get("isActive")))
