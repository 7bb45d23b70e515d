"""
Tests for the Wave GraphQL client, using httpx.MockTransport.
"""

import json

import httpx
import pytest

from wave_adapter.entities import AccountSummary, BusinessSummary
from wave_adapter.errors import ConfigError, NotFoundError, UpstreamError, UpstreamInputRejected
from wave_adapter.repositories import WaveClient

ENDPOINT = "https://wave.test/graphql"


def make_client(handler, token="token-123"):
    return WaveClient(access_token=token, endpoint=ENDPOINT, timeout=5, transport=httpx.MockTransport(handler))


def graphql(data=None, errors=None, status_code=200):
    body = {}
    if data is not None:
        body["data"] = data
    if errors is not None:
        body["errors"] = errors
    return httpx.Response(status_code, json=body)


@pytest.mark.asyncio
class TestWaveClient:
    """Tests for WaveClient"""

    async def test_sends_auth_and_request_id(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers["Authorization"]
            seen["request_id"] = request.headers["X-Request-ID"]
            seen["body"] = json.loads(request.content)
            return graphql({"businesses": {"edges": [{"node": {"id": "b1", "name": "Acme", "isActive": True}}]}})

        client = make_client(handler)
        businesses = await client.list_businesses(request_id="req-7")
        await client.close()

        assert businesses == [BusinessSummary(id="b1", name="Acme", is_active=True)]
        assert seen["auth"] == "Bearer token-123"
        assert seen["request_id"] == "req-7"
        assert "businesses" in seen["body"]["query"]

    async def test_generates_request_id(self):
        seen = {}

        def handler(request):
            seen["request_id"] = request.headers["X-Request-ID"]
            return graphql({"businesses": {"edges": []}})

        client = make_client(handler)
        await client.list_businesses()

        assert seen["request_id"]

    async def test_missing_token_is_config_error(self):
        client = make_client(lambda request: graphql({}), token="")

        with pytest.raises(ConfigError) as exc_info:
            await client.list_businesses()
        assert exc_info.value.status_code == 500
        assert exc_info.value.code == "CONFIG_ERROR"

    async def test_http_error_status(self):
        client = make_client(lambda request: httpx.Response(503, text="x" * 5000))

        with pytest.raises(UpstreamError) as exc_info:
            await client.list_businesses()
        assert exc_info.value.status_code == 502
        assert exc_info.value.code == "WAVE_ERROR"
        assert len(exc_info.value.details["details"]) == 2000

    async def test_transport_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)

        with pytest.raises(UpstreamError):
            await client.list_businesses()

    async def test_graphql_errors(self):
        errors = [{"message": "Not authorized", "path": ["businesses"]}]
        client = make_client(lambda request: graphql(errors=errors))

        with pytest.raises(UpstreamError) as exc_info:
            await client.list_businesses()
        assert exc_info.value.details == {"errors": errors}

    async def test_missing_data(self):
        client = make_client(lambda request: graphql())

        with pytest.raises(UpstreamError, match="missing data"):
            await client.list_businesses()

    @pytest.mark.parametrize("body", [b"null", b"[]", b'["data"]', b'"ok"'])
    async def test_non_object_body(self, body):
        client = make_client(lambda request: httpx.Response(200, content=body))

        with pytest.raises(UpstreamError, match="missing data"):
            await client.list_businesses()

    async def test_non_object_data(self):
        client = make_client(lambda request: httpx.Response(200, json={"data": ["businesses"]}))

        with pytest.raises(UpstreamError, match="missing data"):
            await client.list_businesses()

    async def test_fetch_accounts(self):
        seen = {}

        def handler(request):
            seen["variables"] = json.loads(request.content)["variables"]
            return graphql(
                {
                    "business": {
                        "id": "b1",
                        "accounts": {
                            "edges": [
                                {"node": {"id": "a1", "name": "Office Supplies",
                                          "type": {"value": "EXPENSE"}, "subtype": {"value": "OPERATING_EXPENSE"}}},
                                {"node": {"id": "a2", "name": "Checking", "type": "ASSET", "subtype": None}},
                            ]
                        },
                    }
                }
            )

        client = make_client(handler)
        accounts = await client.fetch_accounts("b1", types=["EXPENSE", "ASSET"])

        assert seen["variables"] == {"businessId": "b1", "types": ["EXPENSE", "ASSET"], "query": None}
        assert accounts == [
            AccountSummary(id="a1", name="Office Supplies", type="EXPENSE", subtype="OPERATING_EXPENSE"),
            AccountSummary(id="a2", name="Checking", type="ASSET"),
        ]

    async def test_account_without_type(self):
        client = make_client(
            lambda request: graphql(
                {"business": {"id": "b1", "accounts": {"edges": [
                    {"node": {"id": "a1", "name": "Misc"}},
                    {"node": {"id": "a2", "name": "Other", "type": None}},
                    {"node": {"id": "a3", "name": "Odd", "type": {"value": None}}},
                ]}}}
            )
        )

        accounts = await client.fetch_accounts("b1")

        assert [account.type for account in accounts] == ["", "", ""]

    async def test_fetch_accounts_unknown_business(self):
        client = make_client(lambda request: graphql({"business": None}))

        with pytest.raises(NotFoundError):
            await client.fetch_accounts("missing")

    async def test_create_expense_transaction_payload(self):
        seen = {}

        def handler(request):
            seen["input"] = json.loads(request.content)["variables"]["input"]
            return graphql({"moneyTransactionCreate": {"didSucceed": True, "inputErrors": [], "transaction": {"id": "t1"}}})

        client = make_client(handler)
        result = await client.create_expense_transaction(
            {
                "businessId": "b1",
                "date": "2024-05-01",
                "amount": 12.0,
                "description": "Paper",
                "notes": None,
                "anchorAccountId": "bank",
                "expenseAccountId": "office",
                "vendor": "Office Depot",
                "externalId": "ext-1",
            }
        )

        assert result == {"transactionId": "t1", "externalId": "ext-1"}
        assert seen["input"] == {
            "businessId": "b1",
            "externalId": "ext-1",
            "date": "2024-05-01",
            "description": "Paper",
            "anchor": {"accountId": "bank", "amount": 12.0, "direction": "WITHDRAWAL"},
            "lineItems": [{"accountId": "office", "amount": 12.0, "balance": "INCREASE"}],
            "contacts": [{"type": "VENDOR", "name": "Office Depot"}],
        }

    async def test_create_expense_transaction_input_errors(self):
        input_errors = [{"message": "Invalid date", "code": "INVALID", "path": ["date"]}]

        def handler(request):
            return graphql({"moneyTransactionCreate": {"didSucceed": False, "inputErrors": input_errors, "transaction": None}})

        client = make_client(handler)

        with pytest.raises(UpstreamInputRejected) as exc_info:
            await client.create_expense_transaction(
                {"businessId": "b1", "date": "bad", "amount": 1, "description": "x",
                 "anchorAccountId": "a", "expenseAccountId": "e", "externalId": "ext"}
            )
        assert exc_info.value.status_code == 400
        assert exc_info.value.details == {"inputErrors": input_errors}

    async def test_create_customer_drops_empty_fields(self):
        seen = {}

        def handler(request):
            seen["input"] = json.loads(request.content)["variables"]["input"]
            return graphql({"customerCreate": {"didSucceed": True, "inputErrors": [],
                                               "customer": {"id": "c1", "name": "Jane", "email": None}}})

        client = make_client(handler)
        customer = await client.create_customer("b1", {"name": "Jane", "email": None, "phone": None})

        assert customer.id == "c1"
        assert seen["input"] == {"name": "Jane", "businessId": "b1"}

    @pytest.mark.parametrize("transaction", [None, {}, {"id": None}, "t1"])
    async def test_create_expense_transaction_without_id(self, transaction):
        def handler(request):
            return graphql({"moneyTransactionCreate": {"didSucceed": True, "inputErrors": [], "transaction": transaction}})

        client = make_client(handler)

        with pytest.raises(UpstreamError, match="missing transaction"):
            await client.create_expense_transaction(
                {"businessId": "b1", "date": "2024-05-01", "amount": 1, "description": "x",
                 "anchorAccountId": "a", "expenseAccountId": "e", "externalId": "ext"}
            )

    async def test_create_product_without_record(self):
        client = make_client(
            lambda request: graphql({"productCreate": {"didSucceed": True, "inputErrors": [], "product": None}})
        )

        with pytest.raises(UpstreamError, match="missing product"):
            await client.create_product("b1", {"name": "Widget"})
