"""Wave GraphQL implementation of AccountingService.

Talks to Wave's public GraphQL endpoint over HTTPS with a bearer token.
Every failure is mapped onto the adapter's error taxonomy; nothing is retried.

Requirements:
    - A Wave access token in ``WAVE_ACCESS_TOKEN``
"""

import uuid
from typing import Any

import httpx
import structlog

from wave_adapter.config import settings
from wave_adapter.entities import AccountSummary, BusinessSummary, CustomerSummary, ProductSummary
from wave_adapter.errors import ConfigError, NotFoundError, UpstreamError, UpstreamInputRejected

logger = structlog.get_logger()

LIST_BUSINESSES_QUERY = """
query ListBusinesses {
  businesses(page: 1, pageSize: 100) {
    edges {
      node { id name isActive }
    }
  }
}
"""

ACCOUNTS_QUERY = """
query Accounts($businessId: ID!, $types: [AccountTypeValue!], $query: String) {
  business(id: $businessId) {
    id
    accounts(page: 1, pageSize: 200, types: $types, query: $query) {
      edges {
        node {
          id
          name
          type { value }
          subtype { value }
        }
      }
    }
  }
}
"""

CUSTOMERS_QUERY = """
query Customers($businessId: ID!, $query: String) {
  business(id: $businessId) {
    id
    customers(page: 1, pageSize: 50, query: $query) {
      edges {
        node { id name email phone }
      }
    }
  }
}
"""

CUSTOMER_CREATE_MUTATION = """
mutation CreateCustomer($input: CustomerCreateInput!) {
  customerCreate(input: $input) {
    didSucceed
    inputErrors { message code path }
    customer { id name email phone }
  }
}
"""

PRODUCTS_QUERY = """
query Products($businessId: ID!, $query: String) {
  business(id: $businessId) {
    id
    products(page: 1, pageSize: 50, query: $query) {
      edges {
        node { id name unitPrice }
      }
    }
  }
}
"""

PRODUCT_CREATE_MUTATION = """
mutation CreateProduct($input: ProductCreateInput!) {
  productCreate(input: $input) {
    didSucceed
    inputErrors { message code path }
    product { id name unitPrice }
  }
}
"""

MONEY_TRANSACTION_CREATE_MUTATION = """
mutation MoneyTransactionCreate($input: MoneyTransactionCreateInput!) {
  moneyTransactionCreate(input: $input) {
    didSucceed
    inputErrors { message code path }
    transaction { id }
  }
}
"""

SCHEMA_QUERY = """
query IntrospectionQuery {
  __schema {
    queryType { name }
    mutationType { name }
    types { name kind description }
  }
}
"""


def _nodes(connection: dict[str, Any] | None) -> list[dict[str, Any]]:
    """Unwrap a Relay-style connection (``edges[].node``) or a ``nodes`` list."""
    if not connection:
        return []
    if "edges" in connection:
        return [edge["node"] for edge in connection["edges"] or []]
    return list(connection.get("nodes") or [])


class WaveClient:
    """Wave implementation of the AccountingService protocol.

    This class satisfies the AccountingService protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = WaveClient.create()
        businesses = await client.list_businesses()
        await client.close()
        ```
    """

    def __init__(
        self,
        access_token: str | None = None,
        endpoint: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Wave client.

        Args:
            access_token: Wave bearer token. Defaults to settings.wave_access_token.
            endpoint: GraphQL endpoint URL. Defaults to settings.wave_graphql_url.
            timeout: Request timeout in seconds. Defaults to settings.wave_timeout.
            transport: Optional httpx transport (used by tests).
        """
        self._access_token = access_token if access_token is not None else settings.wave_access_token
        self._endpoint = endpoint or settings.wave_graphql_url
        self._timeout = timeout or settings.wave_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def create(
        cls,
        access_token: str | None = None,
        endpoint: str | None = None,
    ) -> "WaveClient":
        """Factory method to create WaveClient with defaults from settings."""
        return cls(access_token=access_token, endpoint=endpoint)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        request_id: str | None = None,
    ) -> dict[str, Any]:
        """Run a GraphQL document and return its ``data`` member.

        Raises:
            ConfigError: If no access token is configured
            UpstreamError: On transport failure, non-2xx status, GraphQL errors
                or a response without data
        """
        if not self._access_token:
            raise ConfigError("Missing WAVE_ACCESS_TOKEN")

        headers = {
            "Authorization": f"Bearer {self._access_token}",
            "Content-Type": "application/json",
            "X-Request-ID": request_id or str(uuid.uuid4()),
        }

        try:
            response = await self.client.post(
                self._endpoint,
                json={"query": query, "variables": variables or {}},
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.error("wave_request_failed", error=str(e), request_id=headers["X-Request-ID"])
            raise UpstreamError(f"Wave request failed: {e}") from e

        if response.is_error:
            logger.error(
                "wave_request_failed",
                status=response.status_code,
                request_id=headers["X-Request-ID"],
            )
            raise UpstreamError(
                f"Wave request failed: {response.status_code} {response.reason_phrase}",
                {"details": response.text[:2000]},
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError("Wave returned invalid JSON", {"details": response.text[:2000]}) from e

        if not isinstance(payload, dict):
            raise UpstreamError("Wave response missing data")

        errors = payload.get("errors")
        if errors:
            logger.error("wave_graphql_error", errors=errors, request_id=headers["X-Request-ID"])
            raise UpstreamError("Wave GraphQL error", {"errors": errors})

        data = payload.get("data")
        if not isinstance(data, dict) or not data:
            raise UpstreamError("Wave response missing data")
        return data

    @staticmethod
    def _mutation_result(data: dict[str, Any], field: str) -> dict[str, Any]:
        result = data.get(field) or {}
        if not result.get("didSucceed"):
            logger.warning("wave_input_errors", mutation=field, input_errors=result.get("inputErrors"))
            raise UpstreamInputRejected("Wave input errors", {"inputErrors": result.get("inputErrors") or []})
        return result

    @staticmethod
    def _created(result: dict[str, Any], field: str) -> dict[str, Any]:
        record = result.get(field)
        if not isinstance(record, dict) or not record.get("id"):
            raise UpstreamError(f"Wave response missing {field}")
        return record

    async def list_businesses(self, request_id: str | None = None) -> list[BusinessSummary]:
        data = await self.execute(LIST_BUSINESSES_QUERY, request_id=request_id)
        return [BusinessSummary.from_node(node) for node in _nodes(data.get("businesses"))]

    async def fetch_accounts(
        self,
        business_id: str,
        types: list[str] | None = None,
        query_text: str | None = None,
        request_id: str | None = None,
    ) -> list[AccountSummary]:
        data = await self.execute(
            ACCOUNTS_QUERY,
            {"businessId": business_id, "types": types, "query": query_text},
            request_id=request_id,
        )
        business = data.get("business")
        if not business or not business.get("accounts"):
            raise NotFoundError("Business not found or accounts unavailable")
        return [AccountSummary.from_node(node) for node in _nodes(business["accounts"])]

    async def create_expense_transaction(
        self,
        payload: dict[str, Any],
        request_id: str | None = None,
    ) -> dict[str, str]:
        """Book a single-line expense as a Wave money transaction.

        The anchor account is debited (WITHDRAWAL) and one expense line item
        is increased by the same amount. A vendor, when given, is attached as
        a VENDOR contact.
        """
        external_id = payload.get("externalId") or str(uuid.uuid4())
        amount = payload["amount"]

        transaction_input: dict[str, Any] = {
            "businessId": payload["businessId"],
            "externalId": external_id,
            "date": payload["date"],
            "description": payload["description"],
            "anchor": {
                "accountId": payload["anchorAccountId"],
                "amount": amount,
                "direction": "WITHDRAWAL",
            },
            "lineItems": [
                {
                    "accountId": payload["expenseAccountId"],
                    "amount": amount,
                    "balance": "INCREASE",
                }
            ],
        }
        if payload.get("notes"):
            transaction_input["notes"] = payload["notes"]
        if payload.get("vendor"):
            transaction_input["contacts"] = [{"type": "VENDOR", "name": payload["vendor"]}]

        data = await self.execute(
            MONEY_TRANSACTION_CREATE_MUTATION,
            {"input": transaction_input},
            request_id=request_id,
        )
        result = self._mutation_result(data, "moneyTransactionCreate")
        return {"transactionId": self._created(result, "transaction")["id"], "externalId": external_id}

    async def find_customers(
        self, business_id: str, query_text: str, request_id: str | None = None
    ) -> list[CustomerSummary]:
        data = await self.execute(
            CUSTOMERS_QUERY,
            {"businessId": business_id, "query": query_text},
            request_id=request_id,
        )
        business = data.get("business") or {}
        return [CustomerSummary.from_node(node) for node in _nodes(business.get("customers"))]

    async def create_customer(
        self, business_id: str, customer: dict[str, Any], request_id: str | None = None
    ) -> CustomerSummary:
        customer_input = {k: v for k, v in customer.items() if v is not None}
        customer_input["businessId"] = business_id
        data = await self.execute(CUSTOMER_CREATE_MUTATION, {"input": customer_input}, request_id=request_id)
        result = self._mutation_result(data, "customerCreate")
        return CustomerSummary.from_node(self._created(result, "customer"))

    async def find_products(
        self, business_id: str, query_text: str, request_id: str | None = None
    ) -> list[ProductSummary]:
        data = await self.execute(
            PRODUCTS_QUERY,
            {"businessId": business_id, "query": query_text},
            request_id=request_id,
        )
        business = data.get("business") or {}
        return [ProductSummary.from_node(node) for node in _nodes(business.get("products"))]

    async def create_product(
        self, business_id: str, product: dict[str, Any], request_id: str | None = None
    ) -> ProductSummary:
        product_input = {k: v for k, v in product.items() if v is not None}
        product_input["businessId"] = business_id
        data = await self.execute(PRODUCT_CREATE_MUTATION, {"input": product_input}, request_id=request_id)
        result = self._mutation_result(data, "productCreate")
        return ProductSummary.from_node(self._created(result, "product"))

    async def fetch_schema(self, request_id: str | None = None) -> dict[str, Any]:
        data = await self.execute(SCHEMA_QUERY, request_id=request_id)
        return data["__schema"]

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
