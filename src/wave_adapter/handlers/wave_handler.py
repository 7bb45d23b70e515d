"""HTTP handlers for Wave operations.

Handlers convert between DTOs (API contracts) and service calls. Adapter
errors are left to propagate to the app's exception handler; a
SelectionRequired result becomes a 300 "multiple choices" response.
"""

from fastapi import status
from fastapi.responses import JSONResponse

from wave_adapter.dto import (
    AccountItem,
    AccountsResponse,
    BusinessesResponse,
    BusinessItem,
    CreateExpenseRequest,
    CreateExpenseResponse,
    CustomerItem,
    CustomerResponse,
    ErrorResponse,
    FindOrCreateCustomerRequest,
    FindOrCreateProductRequest,
    ProductItem,
    ProductResponse,
    SchemaResponse,
    SuggestExpenseAccountsRequest,
    SuggestionItem,
    SuggestionsResponse,
    UsedIds,
)
from wave_adapter.entities import (
    AccountSummary,
    BusinessSummary,
    ExpenseRequest,
    SelectionRequired,
    Suggestion,
)
from wave_adapter.protocols import AccountingService
from wave_adapter.services import BusinessResolver, ExpenseService, LedgerDirectory

SELECTION_REQUIRED_CODE = "SELECTION_REQUIRED"


def business_item(business: BusinessSummary) -> BusinessItem:
    return BusinessItem(id=business.id, name=business.name, is_active=business.is_active)


def account_item(account: AccountSummary) -> AccountItem:
    return AccountItem(id=account.id, name=account.name, type=account.type, subtype=account.subtype)


def suggestion_item(suggestion: Suggestion) -> SuggestionItem:
    return SuggestionItem(
        account_id=suggestion.account_id,
        name=suggestion.name,
        type=suggestion.type,
        score=suggestion.score,
        reason=suggestion.reason,
    )


def selection_response(selection: SelectionRequired) -> JSONResponse:
    """Render a SelectionRequired result as HTTP 300 with its ordered options."""
    options = []
    for option in selection.options:
        if isinstance(option, BusinessSummary):
            options.append(business_item(option).model_dump(by_alias=True))
        elif isinstance(option, Suggestion):
            options.append(suggestion_item(option).model_dump(by_alias=True, exclude_none=True))

    body = ErrorResponse(
        message=selection.message,
        details={"options": options},
        code=SELECTION_REQUIRED_CODE,
    )
    return JSONResponse(status_code=status.HTTP_300_MULTIPLE_CHOICES, content=body.model_dump(by_alias=True))


class WaveHandler:
    """HTTP handlers for the Wave adapter.

    Example:
        ```python
        handler = WaveHandler(accounting=client, resolver=resolver,
                              directory=directory, expenses=expenses)

        @app.post("/wave/expenses/create")
        async def create_expense(request: CreateExpenseRequest):
            return await handler.create_expense(request)
        ```
    """

    def __init__(
        self,
        accounting: AccountingService,
        resolver: BusinessResolver,
        directory: LedgerDirectory,
        expenses: ExpenseService,
    ) -> None:
        self._accounting = accounting
        self._resolver = resolver
        self._directory = directory
        self._expenses = expenses

    async def list_businesses(self, request_id: str | None = None) -> BusinessesResponse:
        """Handle GET /wave/businesses requests."""
        businesses = await self._resolver.list_businesses(request_id=request_id)
        return BusinessesResponse(businesses=[business_item(b) for b in businesses])

    async def list_accounts(
        self,
        business_id: str | None = None,
        business_name: str | None = None,
        types: str | None = None,
        request_id: str | None = None,
    ) -> AccountsResponse | JSONResponse:
        """Handle GET /wave/accounts requests.

        Args:
            types: Comma-separated account categories (e.g. "EXPENSE,ASSET")
        """
        business = await self._resolver.resolve(business_id, business_name, request_id=request_id)
        if isinstance(business, SelectionRequired):
            return selection_response(business)

        type_list = [t for t in (types or "").split(",") if t] or None
        accounts = await self._directory.list_accounts(business.id, types=type_list, request_id=request_id)
        return AccountsResponse(
            business=business_item(business),
            accounts=[account_item(a) for a in accounts],
        )

    async def suggest_expense_accounts(
        self,
        request: SuggestExpenseAccountsRequest,
        request_id: str | None = None,
    ) -> SuggestionsResponse | JSONResponse:
        """Handle POST /wave/expenses/suggest requests."""
        result = await self._expenses.suggest_expense_accounts(
            business_id=request.business_id,
            business_name=request.business_name,
            text=request.text,
            vendor=request.vendor,
            category_hint=request.category_hint,
            top_k=request.top_k,
            request_id=request_id,
        )
        if isinstance(result, SelectionRequired):
            return selection_response(result)

        business, suggestions = result
        return SuggestionsResponse(
            business=business_item(business),
            suggestions=[suggestion_item(s) for s in suggestions],
        )

    async def create_expense(
        self,
        request: CreateExpenseRequest,
        request_id: str | None = None,
    ) -> CreateExpenseResponse | JSONResponse:
        """Handle POST /wave/expenses/create requests."""
        result = await self._expenses.create_expense(
            ExpenseRequest(
                date=request.date,
                amount=request.amount,
                description=request.description,
                business_id=request.business_id,
                business_name=request.business_name,
                text=request.text,
                vendor=request.vendor,
                category_hint=request.category_hint,
                notes=request.notes,
                anchor_account_id=request.anchor_account_id,
                expense_account_id=request.expense_account_id,
                external_id=request.external_id,
            ),
            request_id=request_id,
        )
        if isinstance(result, SelectionRequired):
            return selection_response(result)

        return CreateExpenseResponse(
            transaction_id=result.transaction_id,
            external_id=result.external_id,
            used=UsedIds(
                business_id=result.business_id,
                anchor_account_id=result.anchor_account_id,
                expense_account_id=result.expense_account_id,
            ),
        )

    async def find_or_create_customer(
        self,
        request: FindOrCreateCustomerRequest,
        request_id: str | None = None,
    ) -> CustomerResponse | JSONResponse:
        """Handle POST /wave/customers/find-or-create requests."""
        business = await self._resolver.resolve(request.business_id, request.business_name, request_id=request_id)
        if isinstance(business, SelectionRequired):
            return selection_response(business)

        customer, created = await self._directory.find_or_create_customer(
            business.id,
            name=request.name,
            email=request.email,
            phone=request.phone,
            currency=request.currency,
            request_id=request_id,
        )
        return CustomerResponse(
            created=created,
            customer_id=customer.id,
            customer=CustomerItem(id=customer.id, name=customer.name, email=customer.email, phone=customer.phone),
        )

    async def find_or_create_product(
        self,
        request: FindOrCreateProductRequest,
        request_id: str | None = None,
    ) -> ProductResponse | JSONResponse:
        """Handle POST /wave/products/find-or-create requests."""
        business = await self._resolver.resolve(request.business_id, request.business_name, request_id=request_id)
        if isinstance(business, SelectionRequired):
            return selection_response(business)

        product, created = await self._directory.find_or_create_product(
            business.id,
            name=request.name,
            unit_price=request.unit_price,
            description=request.description,
            income_account_id=request.income_account_id,
            request_id=request_id,
        )
        return ProductResponse(
            created=created,
            product_id=product.id,
            product=ProductItem(id=product.id, name=product.name, unit_price=product.unit_price),
        )

    async def fetch_schema(self, request_id: str | None = None) -> SchemaResponse:
        """Handle GET /wave/schema requests."""
        schema = await self._accounting.fetch_schema(request_id=request_id)
        return SchemaResponse(schema=schema)
