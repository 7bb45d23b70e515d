"""Service layer for business logic.

This layer contains the resolution-and-suggestion engine. Services depend
on protocols (interfaces), not concrete implementations, making them
testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from wave_adapter.cache import ExpiringCache
    from wave_adapter.repositories import WaveClient
    from wave_adapter.services import BusinessResolver, ExpenseService, LedgerDirectory

    cache = ExpiringCache(max_entries=200)
    client = WaveClient.create()
    resolver = BusinessResolver(accounting=client, cache=cache)
    directory = LedgerDirectory(accounting=client, cache=cache)
    expenses = ExpenseService(accounting=client, resolver=resolver, directory=directory)
    ```
"""

from .account_ranker import normalize, rank_expense_accounts, suggest_anchor
from .business_resolver import BusinessResolver
from .expense_service import ExpenseService
from .ledger_directory import LedgerDirectory

__all__ = [
    "BusinessResolver",
    "ExpenseService",
    "LedgerDirectory",
    "normalize",
    "rank_expense_accounts",
    "suggest_anchor",
]
