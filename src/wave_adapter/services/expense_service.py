"""Expense orchestration service.

This service ties together business resolution, account lookup, account
ranking and the Accounting Service's transaction-create operation, and
decides when an account may be auto-selected.
"""

import uuid

import structlog

from wave_adapter.entities import (
    AccountType,
    BusinessSummary,
    ExpenseRequest,
    ExpenseTransaction,
    SelectionRequired,
    Suggestion,
)
from wave_adapter.protocols import AccountingService

from .account_ranker import rank_expense_accounts, suggest_anchor
from .business_resolver import BusinessResolver
from .ledger_directory import LedgerDirectory

logger = structlog.get_logger()

# Independently tunable; equivalent for integer scores.
ANCHOR_MIN_EXCLUSIVE_SCORE = 0
EXPENSE_MIN_SCORE = 1


class ExpenseService:
    """Create expense transactions from loosely specified requests.

    Example:
        ```python
        service = ExpenseService(accounting=client, resolver=resolver, directory=directory)
        result = await service.create_expense(ExpenseRequest(
            date="2024-05-01", amount=42.5, description="Printer paper", vendor="Office Depot",
        ))
        if isinstance(result, SelectionRequired):
            ...  # resubmit with an explicit id from result.options
        ```
    """

    def __init__(
        self,
        accounting: AccountingService,
        resolver: BusinessResolver,
        directory: LedgerDirectory,
    ) -> None:
        """Initialize the expense service.

        Args:
            accounting: Accounting Service client used to create transactions (required).
            resolver: Business resolver (required).
            directory: Cache-through account lookup (required).
        """
        self._accounting = accounting
        self._resolver = resolver
        self._directory = directory

    async def suggest_expense_accounts(
        self,
        business_id: str | None = None,
        business_name: str | None = None,
        text: str | None = None,
        vendor: str | None = None,
        category_hint: str | None = None,
        top_k: int | None = None,
        request_id: str | None = None,
    ) -> tuple[BusinessSummary, list[Suggestion]] | SelectionRequired[BusinessSummary]:
        """Rank a business's expense accounts for the given signals."""
        business = await self._resolver.resolve(business_id, business_name, request_id=request_id)
        if isinstance(business, SelectionRequired):
            return business

        accounts = await self._directory.list_accounts(
            business.id, types=[AccountType.EXPENSE.value], request_id=request_id
        )
        suggestions = rank_expense_accounts(
            accounts, text=text, vendor=vendor, category_hint=category_hint, top_k=top_k
        )
        return business, suggestions

    async def create_expense(
        self,
        request: ExpenseRequest,
        request_id: str | None = None,
    ) -> ExpenseTransaction | SelectionRequired:
        """Create an expense, auto-selecting accounts when confident.

        Business logic:
        1. Resolve the business (ambiguity is returned as-is)
        2. Fetch the business's accounts through the cache
        3. Pick the anchor account: explicit id, else the top anchor when it is
           the only one or scores above 0
        4. Pick the expense account: explicit id, else the top ranked account
           when it scores at least 1
        5. Create the transaction with a caller-supplied or fresh external id

        Args:
            request: The expense to create
            request_id: Correlation id forwarded to the Accounting Service

        Returns:
            ExpenseTransaction on success, SelectionRequired when the business
            or an account must be chosen explicitly

        Raises:
            NotFoundError: If an explicit business id does not exist
            UpstreamError: If the Accounting Service fails or rejects the payload
        """
        business = await self._resolver.resolve(
            request.business_id, request.business_name, request_id=request_id
        )
        if isinstance(business, SelectionRequired):
            return business

        accounts = await self._directory.list_accounts(business.id, request_id=request_id)

        anchor_account_id = request.anchor_account_id
        if not anchor_account_id:
            anchors = suggest_anchor(accounts)
            if len(anchors) == 1 or (anchors and anchors[0].score > ANCHOR_MIN_EXCLUSIVE_SCORE):
                anchor_account_id = anchors[0].account_id
            else:
                logger.info("account_selection_required", kind="anchor", business_id=business.id)
                return SelectionRequired("Select anchor account", tuple(anchors))

        expense_account_id = request.expense_account_id
        if not expense_account_id:
            suggestions = rank_expense_accounts(
                accounts,
                text=request.text or request.description,
                vendor=request.vendor,
                category_hint=request.category_hint,
            )
            if suggestions and suggestions[0].score >= EXPENSE_MIN_SCORE:
                expense_account_id = suggestions[0].account_id
            else:
                logger.info("account_selection_required", kind="expense", business_id=business.id)
                return SelectionRequired("Select expense account", tuple(suggestions))

        external_id = request.external_id or str(uuid.uuid4())
        created = await self._accounting.create_expense_transaction(
            {
                "businessId": business.id,
                "date": request.date,
                "amount": request.amount,
                "description": request.description,
                "notes": request.notes,
                "anchorAccountId": anchor_account_id,
                "expenseAccountId": expense_account_id,
                "vendor": request.vendor,
                "externalId": external_id,
            },
            request_id=request_id,
        )

        logger.info(
            "expense_created",
            business_id=business.id,
            transaction_id=created["transactionId"],
            external_id=created["externalId"],
        )
        return ExpenseTransaction(
            transaction_id=created["transactionId"],
            external_id=created["externalId"],
            business_id=business.id,
            anchor_account_id=anchor_account_id,
            expense_account_id=expense_account_id,
        )
