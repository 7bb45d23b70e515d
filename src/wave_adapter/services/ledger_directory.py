"""Cache-through lookups of accounts, customers and products."""

from typing import Any

import structlog

from wave_adapter.config import settings
from wave_adapter.entities import AccountSummary, CustomerSummary, ProductSummary
from wave_adapter.protocols import AccountingService, ResponseCache

logger = structlog.get_logger()


class LedgerDirectory:
    """Reads (and, for customers and products, creates) per-business records.

    Search results are cached in the shared response cache. A created record
    is not written back into the cached search result, so a repeat
    find-or-create inside the TTL searches the stale list.
    """

    def __init__(
        self,
        accounting: AccountingService,
        cache: ResponseCache,
        accounts_ttl: int | None = None,
        customers_ttl: int | None = None,
        products_ttl: int | None = None,
    ) -> None:
        self._accounting = accounting
        self._cache = cache
        self._accounts_ttl = settings.accounts_ttl if accounts_ttl is None else accounts_ttl
        self._customers_ttl = settings.customers_ttl if customers_ttl is None else customers_ttl
        self._products_ttl = settings.products_ttl if products_ttl is None else products_ttl

    async def list_accounts(
        self,
        business_id: str,
        types: list[str] | None = None,
        request_id: str | None = None,
    ) -> list[AccountSummary]:
        """Return a business's accounts, optionally restricted to ``types``."""
        key = f"accounts:{business_id}:{','.join(types) if types else 'all'}"
        accounts = self._cache.get(key)
        if accounts is None:
            logger.info("accounts_cache_miss", business_id=business_id, types=types)
            accounts = await self._accounting.fetch_accounts(business_id, types=types, request_id=request_id)
            self._cache.set(key, accounts, self._accounts_ttl)
        return accounts

    async def find_or_create_customer(
        self,
        business_id: str,
        name: str,
        email: str | None = None,
        phone: str | None = None,
        currency: str | None = None,
        request_id: str | None = None,
    ) -> tuple[CustomerSummary, bool]:
        """Return an existing customer matching email or name, else create one.

        Returns:
            (customer, created)
        """
        search = email or name
        key = f"customers:{business_id}:{search.lower()}"
        existing = self._cache.get(key)
        if existing is None:
            existing = await self._accounting.find_customers(business_id, search, request_id=request_id)
            self._cache.set(key, existing, self._customers_ttl)

        for customer in existing:
            if email and customer.email and customer.email.lower() == email.lower():
                return customer, False
            if customer.name == name:
                return customer, False

        payload: dict[str, Any] = {"name": name, "email": email, "phone": phone, "currency": currency}
        customer = await self._accounting.create_customer(business_id, payload, request_id=request_id)
        logger.info("customer_created", business_id=business_id, customer_id=customer.id)
        return customer, True

    async def find_or_create_product(
        self,
        business_id: str,
        name: str,
        unit_price: float | None = None,
        description: str | None = None,
        income_account_id: str | None = None,
        request_id: str | None = None,
    ) -> tuple[ProductSummary, bool]:
        """Return an existing product with the same name (any case), else create one.

        Returns:
            (product, created)
        """
        key = f"products:{business_id}:{name.lower()}"
        existing = self._cache.get(key)
        if existing is None:
            existing = await self._accounting.find_products(business_id, name, request_id=request_id)
            self._cache.set(key, existing, self._products_ttl)

        for product in existing:
            if product.name.lower() == name.lower():
                return product, False

        payload: dict[str, Any] = {
            "name": name,
            "unitPrice": unit_price,
            "description": description,
            "incomeAccountId": income_account_id,
        }
        product = await self._accounting.create_product(business_id, payload, request_id=request_id)
        logger.info("product_created", business_id=business_id, product_id=product.id)
        return product, True
