"""Expense transaction entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExpenseRequest:
    """Domain input for creating an expense.

    ``text`` is the free-text signal used for ranking expense accounts; when
    absent the description is used instead. Explicit account ids are used
    verbatim and skip ranking entirely.
    """

    date: str
    amount: float
    description: str
    business_id: str | None = None
    business_name: str | None = None
    text: str | None = None
    vendor: str | None = None
    category_hint: str | None = None
    notes: str | None = None
    anchor_account_id: str | None = None
    expense_account_id: str | None = None
    external_id: str | None = None


@dataclass(frozen=True)
class ExpenseTransaction:
    """A transaction the Accounting Service reported as created.

    Attributes:
        transaction_id: Identifier assigned by the Accounting Service
        external_id: Idempotency token sent with the create call
        business_id: Business the transaction was booked in
        anchor_account_id: Asset/liability account the money left
        expense_account_id: Expense category the amount was booked against
    """

    transaction_id: str
    external_id: str
    business_id: str | None = None
    anchor_account_id: str | None = None
    expense_account_id: str | None = None
