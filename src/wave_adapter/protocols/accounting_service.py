"""Accounting Service protocol.

Defines the operations the adapter needs from the remote double-entry
accounting service. The wire format (GraphQL query text, pagination) belongs
to the implementation, not to callers.

Implementations can include:
- Wave GraphQL public API (default)
- In-memory fakes for tests
"""

from typing import Any, Protocol, runtime_checkable

from wave_adapter.entities import AccountSummary, BusinessSummary, CustomerSummary, ProductSummary


@runtime_checkable
class AccountingService(Protocol):
    """Protocol for Accounting Service clients.

    Every operation accepts an optional ``request_id`` that is forwarded to
    the remote service for correlation.
    """

    async def list_businesses(self, request_id: str | None = None) -> list[BusinessSummary]:
        """Return every business visible to the configured credential."""
        ...

    async def fetch_accounts(
        self,
        business_id: str,
        types: list[str] | None = None,
        query_text: str | None = None,
        request_id: str | None = None,
    ) -> list[AccountSummary]:
        """Return the ledger accounts of a business.

        Args:
            business_id: Business to list accounts for
            types: Restrict to these account categories (all when None)
            query_text: Optional free-text filter applied by the remote service
            request_id: Correlation id

        Raises:
            NotFoundError: If the business or its accounts are unavailable
        """
        ...

    async def create_expense_transaction(
        self,
        payload: dict[str, Any],
        request_id: str | None = None,
    ) -> dict[str, str]:
        """Create an expense money transaction.

        Args:
            payload: businessId, date, amount, description, notes,
                anchorAccountId, expenseAccountId, vendor, externalId
            request_id: Correlation id

        Returns:
            ``{"transactionId": ..., "externalId": ...}``

        Raises:
            UpstreamInputRejected: If the remote service rejects the payload
        """
        ...

    async def find_customers(
        self, business_id: str, query_text: str, request_id: str | None = None
    ) -> list[CustomerSummary]:
        ...

    async def create_customer(
        self, business_id: str, customer: dict[str, Any], request_id: str | None = None
    ) -> CustomerSummary:
        ...

    async def find_products(
        self, business_id: str, query_text: str, request_id: str | None = None
    ) -> list[ProductSummary]:
        ...

    async def create_product(
        self, business_id: str, product: dict[str, Any], request_id: str | None = None
    ) -> ProductSummary:
        ...

    async def fetch_schema(self, request_id: str | None = None) -> dict[str, Any]:
        """Return the remote GraphQL schema via introspection."""
        ...
