"""Shared fixtures: an in-memory Accounting Service and a controllable clock."""

from typing import Any

import pytest

from wave_adapter.cache import ExpiringCache
from wave_adapter.entities import AccountSummary, BusinessSummary, CustomerSummary, ProductSummary
from wave_adapter.errors import NotFoundError
from wave_adapter.services import BusinessResolver, ExpenseService, LedgerDirectory


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeAccountingService:
    """In-memory AccountingService that records every call."""

    def __init__(
        self,
        businesses: list[BusinessSummary] | None = None,
        accounts: dict[str, list[AccountSummary]] | None = None,
        customers: list[CustomerSummary] | None = None,
        products: list[ProductSummary] | None = None,
    ) -> None:
        self.businesses = businesses or []
        self.accounts = accounts or {}
        self.customers = customers or []
        self.products = products or []
        self.calls: list[tuple[str, Any]] = []
        self.created_transactions: list[dict[str, Any]] = []

    def count(self, name: str) -> int:
        return sum(1 for call, _ in self.calls if call == name)

    async def list_businesses(self, request_id=None):
        self.calls.append(("list_businesses", request_id))
        return list(self.businesses)

    async def fetch_accounts(self, business_id, types=None, query_text=None, request_id=None):
        self.calls.append(("fetch_accounts", (business_id, types)))
        if business_id not in self.accounts:
            raise NotFoundError("Business not found or accounts unavailable")
        accounts = self.accounts[business_id]
        if types:
            accounts = [a for a in accounts if a.type in types]
        return list(accounts)

    async def create_expense_transaction(self, payload, request_id=None):
        self.calls.append(("create_expense_transaction", payload))
        self.created_transactions.append(payload)
        return {"transactionId": f"txn-{len(self.created_transactions)}", "externalId": payload["externalId"]}

    async def find_customers(self, business_id, query_text, request_id=None):
        self.calls.append(("find_customers", (business_id, query_text)))
        return list(self.customers)

    async def create_customer(self, business_id, customer, request_id=None):
        self.calls.append(("create_customer", (business_id, customer)))
        return CustomerSummary(id="cust-new", name=customer["name"], email=customer.get("email"))

    async def find_products(self, business_id, query_text, request_id=None):
        self.calls.append(("find_products", (business_id, query_text)))
        return list(self.products)

    async def create_product(self, business_id, product, request_id=None):
        self.calls.append(("create_product", (business_id, product)))
        return ProductSummary(id="prod-new", name=product["name"], unit_price=product.get("unitPrice"))

    async def fetch_schema(self, request_id=None):
        self.calls.append(("fetch_schema", request_id))
        return {"queryType": {"name": "Query"}, "types": []}


ACME = BusinessSummary(id="biz-1", name="Acme", is_active=True)

LEDGER = [
    AccountSummary(id="acc-bank", name="Business Checking", type="ASSET", subtype="CASH_AND_BANK"),
    AccountSummary(id="acc-ap", name="Accounts Payable", type="LIABILITY"),
    AccountSummary(id="acc-office", name="Office Supplies", type="EXPENSE", subtype="OPERATING_EXPENSE"),
    AccountSummary(id="acc-travel", name="Travel Expenses", type="EXPENSE", subtype="OPERATING_EXPENSE"),
    AccountSummary(id="acc-sales", name="Sales", type="INCOME"),
]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return ExpiringCache(max_entries=50, clock=clock)


@pytest.fixture
def accounting():
    return FakeAccountingService(businesses=[ACME], accounts={ACME.id: list(LEDGER)})


@pytest.fixture
def resolver(accounting, cache):
    return BusinessResolver(accounting=accounting, cache=cache, ttl=900)


@pytest.fixture
def directory(accounting, cache):
    return LedgerDirectory(accounting=accounting, cache=cache, accounts_ttl=900, customers_ttl=300, products_ttl=900)


@pytest.fixture
def expenses(accounting, resolver, directory):
    return ExpenseService(accounting=accounting, resolver=resolver, directory=directory)
