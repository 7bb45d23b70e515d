"""Ledger account domain entity."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class AccountType(str, Enum):
    """Ledger account categories known to the adapter.

    The Accounting Service may report other categories; those are carried
    through as plain strings on ``AccountSummary.type``.
    """

    ASSET = "ASSET"
    LIABILITY = "LIABILITY"
    EQUITY = "EQUITY"
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


ANCHOR_TYPES = (AccountType.ASSET, AccountType.LIABILITY)


@dataclass(frozen=True)
class AccountSummary:
    """Snapshot of a ledger account as fetched from the Accounting Service.

    Attributes:
        id: Account identifier
        name: Account display name (e.g. "Office Supplies")
        type: Account category, normally one of ``AccountType``
        subtype: Optional finer-grained category reported by the service
    """

    id: str
    name: str
    type: str
    subtype: str | None = None

    @classmethod
    def from_node(cls, node: dict[str, Any]) -> "AccountSummary":
        account_type = node.get("type")
        # Wave reports type either as a bare enum value or as {value: ...}
        if isinstance(account_type, dict):
            account_type = account_type.get("value")
        subtype = node.get("subtype")
        if isinstance(subtype, dict):
            subtype = subtype.get("value") or subtype.get("name")
        return cls(id=node["id"], name=node["name"], type=str(account_type) if account_type is not None else "", subtype=subtype)
